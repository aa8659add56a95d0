"""Scanning removable drives for known, packed and autorun-related programs."""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

from cybergod.autorun import AutorunAnalyzer
from cybergod.hashing import md5_file
from cybergod.pe import is_upx
from cybergod.signatures import SignatureDatabase
from cybergod.utilities import DriveType, drive_type, file_extension, walk_files

PathLike = Union[str, "os.PathLike[str]"]

_log = logging.getLogger(__name__)

IDENTIFIED_THREAT = "IDENTIFIED THREAT"
SUSPICIOUS_PACKED = "SUSPICIOUS PACKED"


class UsbScanner:
    """Sorts the files of a removable drive into malicious, packed and to-check-on-PC."""

    def __init__(self, database: SignatureDatabase) -> None:
        self.database = database
        self.drive: Optional[str] = None
        self.autoruns = AutorunAnalyzer()
        self.malicious_files: dict[str, str] = {}
        self.semi_malicious_files: dict[str, str] = {}
        self.files_scanned_in_pc: dict[str, str] = {}

    def initialize(self, drive: PathLike) -> bool:
        """Scan ``drive`` if it is removable; return False otherwise.

        The drive's autorun file, if any, is read first so that the programs
        it launches are recognised.
        """
        if drive_type(drive) != DriveType.REMOVABLE:
            return False
        self.drive = os.fspath(drive)
        self.autoruns.add_autorun_executables(self.drive)
        if self.autoruns.has_autorun_files():
            self.autoruns.compute_hashes()
        self.scan(self.drive)
        return True

    def scan(self, directory: PathLike) -> int:
        """Classify every file below ``directory``; return how many were classified.

        A known hash marks a file malicious; otherwise a UPX section marks it
        semi-malicious; otherwise an autorun program's hash or an ``.exe``
        extension puts it on the list of files to look for on the PC. Raises
        ``FileNotFoundError`` if ``directory`` does not exist.
        """
        classified = 0
        for path in walk_files(directory):
            try:
                md5 = md5_file(path)
            except OSError as error:
                _log.warning("cannot hash %s: %s", path, error)
                continue
            if self.database.contains(md5):
                self.malicious_files[path] = IDENTIFIED_THREAT
            elif is_upx(path):
                self.semi_malicious_files[path] = SUSPICIOUS_PACKED
            elif self.autoruns.check_this_file(md5) or file_extension(path) == ".exe":
                self.files_scanned_in_pc[path] = md5
            else:
                _log.info("Skipping %s", path)
                continue
            classified += 1
        return classified