"""Filesystem, drive and system helpers shared by the scanners."""

from __future__ import annotations

import enum
import errno
import math
import os
import time
from collections.abc import Iterator
from typing import Union

import psutil

PathLike = Union[str, "os.PathLike[str]"]


class DriveType(enum.IntEnum):
    """Kind of storage behind a drive root."""

    UNKNOWN = 0
    NO_ROOT_DIR = 1
    REMOVABLE = 2
    FIXED = 3
    REMOTE = 4
    CDROM = 5
    RAMDISK = 6


_OPTION_TYPES = {
    "removable": DriveType.REMOVABLE,
    "cdrom": DriveType.CDROM,
    "fixed": DriveType.FIXED,
    "ramdisk": DriveType.RAMDISK,
    "remote": DriveType.REMOTE,
    "unknown": DriveType.UNKNOWN,
}

_REMOTE_FILESYSTEMS = frozenset(
    {"nfs", "nfs4", "cifs", "smbfs", "smb3", "sshfs", "fuse.sshfs", "afs", "9p"}
)
_CDROM_FILESYSTEMS = frozenset({"iso9660", "udf", "cdfs"})
_RAM_FILESYSTEMS = frozenset({"tmpfs", "ramfs"})


def _normalise(path: PathLike) -> str:
    text = os.fspath(path)
    if len(text) == 2 and text[1] == ":":
        text += os.sep
    return os.path.normcase(os.path.normpath(text))


def _classify(partition) -> DriveType:
    options = {option.strip().lower() for option in partition.opts.split(",")}
    for name, kind in _OPTION_TYPES.items():
        if name in options:
            return kind
    fstype = (partition.fstype or "").lower()
    if fstype in _REMOTE_FILESYSTEMS:
        return DriveType.REMOTE
    if fstype in _CDROM_FILESYSTEMS:
        return DriveType.CDROM
    if fstype in _RAM_FILESYSTEMS:
        return DriveType.RAMDISK
    return DriveType.FIXED


def drive_type(drive: PathLike) -> DriveType:
    """Return the kind of drive mounted at ``drive``.

    A path that is not the root of any mounted drive gives ``NO_ROOT_DIR``.
    """
    target = _normalise(drive)
    for partition in psutil.disk_partitions(all=True):
        if _normalise(partition.mountpoint) == target:
            return _classify(partition)
    return DriveType.NO_ROOT_DIR


def remove_file(path: PathLike) -> bool:
    """Delete a regular file; return False if there was no file to delete."""
    if not os.path.isfile(path):
        return False
    os.remove(path)
    return True


def ram_size_gb() -> int:
    """Return the installed physical memory in GiB, rounded half away from zero."""
    gigabytes = psutil.virtual_memory().total / (1024**3)
    return math.floor(gigabytes + 0.5)


def file_extension(path: PathLike) -> str:
    """Return the extension of the file name in ``path``, dot included, or ''."""
    name = os.path.basename(os.fspath(path))
    if name in (".", ".."):
        return ""
    index = name.rfind(".")
    return name[index:] if index >= 0 else ""


def walk_files(root: PathLike) -> Iterator[str]:
    """Yield the path of every file below ``root``, recursing into folders.

    Raises ``FileNotFoundError`` if ``root`` is not a directory. Folders that
    cannot be listed are skipped.
    """
    directory = os.fspath(root)
    if not os.path.isdir(directory):
        raise FileNotFoundError(errno.ENOENT, "Path not found", directory)
    return _walk(directory)


def _walk(directory: str) -> Iterator[str]:
    try:
        entries = sorted(os.scandir(directory), key=lambda entry: entry.name)
    except OSError:
        return
    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            yield from _walk(entry.path)
        else:
            yield entry.path


def to_utf8(text: str) -> bytes:
    """Encode text as UTF-8."""
    return text.encode("utf-8")


def timestamp() -> str:
    """Return the current local time in ``asctime`` form."""
    return time.asctime(time.localtime())