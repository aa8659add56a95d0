"""Removing the shortcut virus from a removable drive."""

from __future__ import annotations

import logging
import os
import subprocess
from typing import Optional, Union

from cybergod.extensions import is_common_extension, is_shortcut
from cybergod.maintainer import Journal
from cybergod.utilities import DriveType, drive_type, file_extension, remove_file, walk_files

PathLike = Union[str, "os.PathLike[str]"]

_log = logging.getLogger(__name__)


class ShortcutVirusRemover:
    """Finds and deletes shortcut files and restores the files the virus hid."""

    def __init__(self, journal: Optional[Journal] = None) -> None:
        self.journal = journal
        self.drive: Optional[str] = None
        self.can_start = False
        self.infection_sign = False
        self.is_scan_complete = False
        self.shortcuts: list[str] = []
        self.suspected: list[str] = []
        if journal is not None:
            journal.record_shortcut_removal("Process started @")

    def set_drive_letter(self, drive: PathLike) -> None:
        """Choose the drive to clean.

        Raises ``ValueError`` if it is not a removable drive.
        """
        if drive_type(drive) != DriveType.REMOVABLE:
            self.can_start = False
            raise ValueError(f"{os.fspath(drive)} is not a removable drive")
        self.drive = os.fspath(drive)
        self.can_start = True

    def scan(self, directory: PathLike) -> list[str]:
        """Record the shortcuts and suspect programs below ``directory``.

        Returns the shortcuts found by this call. Raises ``FileNotFoundError``
        if ``directory`` does not exist.
        """
        found = []
        for path in walk_files(directory):
            extension = file_extension(path)
            if is_shortcut(extension):
                found.append(path)
            if is_common_extension(extension):
                self.suspected.append(path)
        if found:
            self.infection_sign = True
        self.shortcuts.extend(found)
        self.is_scan_complete = True
        return found

    def remove_all_shortcuts(self) -> list[str]:
        """Delete every shortcut found by the scan; return those deleted.

        Nothing is deleted before a scan has completed.
        """
        if not self.is_scan_complete:
            return []
        if not self.shortcuts:
            _log.info("No shortcuts found on the drive")
            return []
        removed = []
        for location in self.shortcuts:
            try:
                if remove_file(location):
                    removed.append(location)
            except OSError as error:
                _log.warning("File can't be removed %s: %s", location, error)
        return removed

    def fix_infection(self) -> bool:
        """Clear the hidden, read-only and system attributes of everything on the drive.

        Raises ``RuntimeError`` if no drive has been chosen, and
        ``subprocess.CalledProcessError`` or ``OSError`` if ``attrib`` fails.
        """
        if self.drive is None:
            raise RuntimeError("no drive has been set")
        subprocess.run(
            ["attrib", "-h", "-r", "-s", "/s", "/d", os.path.join(self.drive, "*.*")],
            check=True,
        )
        return True