"""A description of the machine: operating system, user, memory and drives."""

from __future__ import annotations

import getpass
import os
import platform
import socket
from dataclasses import dataclass

import psutil

from cybergod.utilities import DriveType, drive_type, ram_size_gb

_DRIVE_LABELS = {
    DriveType.UNKNOWN: "Drive Unknown",
    DriveType.NO_ROOT_DIR: "Drive No Root Directory",
    DriveType.REMOVABLE: "Removable Media Drive",
    DriveType.FIXED: "Fixed drive",
    DriveType.REMOTE: "Remote drives",
    DriveType.CDROM: "CD Drive",
    DriveType.RAMDISK: "RAM DISK",
}


@dataclass(frozen=True)
class SystemIdentity:
    """What the toolkit reports about the machine it runs on."""

    os_info: str
    os_version: str
    home_dir: str
    user_name: str
    is_64bit: bool
    host: str
    ram_gb: int
    drives: tuple[tuple[str, DriveType], ...] = ()


def _user_name() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError, ImportError):
        return ""


def system_identity() -> SystemIdentity:
    """Gather the identity of the running machine."""
    drives = tuple(
        (partition.mountpoint, drive_type(partition.mountpoint))
        for partition in psutil.disk_partitions()
    )
    return SystemIdentity(
        os_info=f"{platform.system()} {platform.release()}".strip(),
        os_version=platform.version(),
        home_dir=os.path.expanduser("~"),
        user_name=_user_name(),
        is_64bit=platform.machine().endswith("64"),
        host=socket.gethostname(),
        ram_gb=ram_size_gb(),
        drives=drives,
    )


def format_identity(identity: SystemIdentity) -> str:
    """Render an identity as the text shown to the user."""
    parts = [
        f"\nOperating System: {identity.os_info}\n",
        f"\nOS version: {identity.os_version}\n",
        f"\nHome Directory: {identity.home_dir}\n",
        f"\nUser Name: {identity.user_name}\n",
        f"\n64-bit Processor: {int(identity.is_64bit)}\n",
        f"\nHost Name: {identity.host}\n",
        f"\nRam size: {identity.ram_gb}GB\n",
    ]
    parts.extend(f"\n{drive} : {_DRIVE_LABELS[kind]}" for drive, kind in identity.drives)
    return "".join(parts)