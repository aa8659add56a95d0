"""Finding copies of the programs an ``autorun.inf`` launches elsewhere on the machine."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from typing import Optional, Union

import psutil

from cybergod.hashing import md5_file
from cybergod.utilities import file_extension, walk_files

PathLike = Union[str, "os.PathLike[str]"]

_log = logging.getLogger(__name__)

AUTORUN_FILE = "autorun.inf"
_OPEN_PREFIX = "open"
_OPEN_PREFIX_LENGTH = len("open=")


def parse_autorun(text: str) -> list[str]:
    """Return the programs named by the ``open=`` entries of autorun text, in order.

    The text is read as whitespace-separated words; each word starting with
    ``open`` loses its first five characters (``open=``) and what is left is
    the program. Empty names are dropped.
    """
    programs = []
    for word in text.split():
        if not word.startswith(_OPEN_PREFIX):
            continue
        name = word.strip()[_OPEN_PREFIX_LENGTH:]
        if name:
            programs.append(name)
    return programs


class AutorunAnalyzer:
    """Collects the programs an autorun file starts and finds matching files elsewhere."""

    def __init__(self) -> None:
        self.autorun_files: list[str] = []
        self.valid_extensions: set[str] = set()
        self.sizes: set[int] = set()
        self.hashes: set[str] = set()
        self.located: list[str] = []

    def add_autorun_executables(self, drive: PathLike) -> bool:
        """Read ``autorun.inf`` at the root of ``drive`` and note the programs it opens.

        Returns False if the drive has no autorun file.
        """
        root = os.fspath(drive)
        autorun = os.path.join(root, AUTORUN_FILE)
        if not os.path.isfile(autorun):
            _log.info("No autorun file is found on %s", root)
            return False
        with open(autorun, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
        for name in parse_autorun(text):
            location = os.path.join(root, name)
            _log.info("Autorun File: %s", location)
            self.autorun_files.append(location)
            self.valid_extensions.add(file_extension(location))
        return True

    def has_autorun_files(self) -> bool:
        """Return True if any program has been taken from an autorun file."""
        return bool(self.autorun_files)

    def compute_hashes(self) -> int:
        """Record the size and MD5 of every autorun program that exists.

        Returns how many programs were hashed.
        """
        hashed = 0
        for location in self.autorun_files:
            if not os.path.isfile(location):
                continue
            try:
                size = os.path.getsize(location)
                md5 = md5_file(location)
            except OSError as error:
                _log.warning("cannot hash %s: %s", location, error)
                continue
            self.sizes.add(size)
            self.hashes.add(md5)
            hashed += 1
        return hashed

    def check_this_file(self, md5: str) -> bool:
        """Return True if ``md5`` is the hash of one of the autorun programs."""
        return md5 in self.hashes

    def scan(self, directory: PathLike) -> list[str]:
        """Find files below ``directory`` identical to an autorun program.

        Only files with an autorun program's extension and size are hashed.
        Returns the files found by this call, which are also added to
        ``located``. Raises ``FileNotFoundError`` if ``directory`` does not exist.
        """
        found = []
        for path in walk_files(directory):
            if file_extension(path) not in self.valid_extensions:
                continue
            try:
                if os.path.getsize(path) not in self.sizes:
                    continue
                md5 = md5_file(path)
            except OSError as error:
                _log.warning("cannot check %s: %s", path, error)
                continue
            if md5 in self.hashes:
                _log.info("Found the path: %s", path)
                found.append(path)
        self.located.extend(found)
        return found

    def locate(self, drives: Optional[Iterable[PathLike]] = None) -> list[str]:
        """Scan each of ``drives`` (every mounted drive by default); return ``located``."""
        if drives is None:
            drives = [partition.mountpoint for partition in psutil.disk_partitions()]
        for drive in drives:
            try:
                self.scan(drive)
            except FileNotFoundError as error:
                _log.warning("Path not found: %s", error.filename)
        return list(self.located)