"""Copying deleted documents and images back out of a drive's recycle bin."""

from __future__ import annotations

import logging
import os
import shutil
from typing import Optional, Union

from cybergod.extensions import is_document, is_image
from cybergod.maintainer import Journal
from cybergod.utilities import file_extension, walk_files

PathLike = Union[str, "os.PathLike[str]"]

_log = logging.getLogger(__name__)

RECYCLE_BIN = "$RECYCLE.BIN"
RECOVERY_FOLDER = "CyberGod Recovery Data"


def is_safe_recoverable_format(extension: str) -> bool:
    """Return True for the document and image types that are recovered."""
    return is_document(extension) or is_image(extension)


class Recovery:
    """Recovers files from ``drive`` into a folder made under ``destination``."""

    def __init__(
        self,
        drive: PathLike,
        destination: PathLike,
        journal: Optional[Journal] = None,
    ) -> None:
        self.drive = os.fspath(drive)
        self.recycle_bin = os.path.join(self.drive, RECYCLE_BIN)
        self.recovery_directory = os.path.join(os.fspath(destination), RECOVERY_FOLDER)
        self.journal = journal
        if journal is not None:
            journal.record_recovery("Recovery process has been started")

    def _inside_recovery_directory(self, path: str) -> bool:
        root = os.path.abspath(self.recovery_directory)
        return os.path.abspath(path).startswith(root + os.sep)

    def _recover(self, source: str) -> Optional[str]:
        target = os.path.join(self.recovery_directory, os.path.basename(source))
        try:
            if os.path.exists(target):
                raise FileExistsError(f"{target} already exists")
            shutil.copy2(source, target)
        except OSError as error:
            _log.warning("could not recover %s: %s", source, error)
            return None
        _log.info("Recovered %s", os.path.basename(source))
        return target

    def run(self) -> list[str]:
        """Create the recovery folder, then recover from the recycle bin and the drive.

        Returns the paths of the recovered copies.
        """
        os.makedirs(self.recovery_directory, exist_ok=True)
        recovered: list[str] = []
        for step, directory in (
            (self.scan, self.recycle_bin),
            (self.non_user_file_scan, self.drive),
        ):
            try:
                recovered.extend(step(directory))
            except FileNotFoundError as error:
                _log.warning("Path not found: %s", error.filename)
        return recovered

    def scan(self, directory: PathLike) -> list[str]:
        """Recover every suited file below ``directory``; return the copies made.

        Raises ``FileNotFoundError`` if ``directory`` does not exist.
        """
        recovered = []
        for path in walk_files(directory):
            if self._inside_recovery_directory(path):
                continue
            if not is_safe_recoverable_format(file_extension(path)):
                continue
            target = self._recover(path)
            if target is not None:
                recovered.append(target)
        return recovered

    def non_user_file_scan(self, directory: PathLike) -> list[str]:
        """Recover the suited ``$``-named files at the top of ``directory``.

        Sub-folders are searched in full as by ``scan``. Raises
        ``FileNotFoundError`` if ``directory`` does not exist.
        """
        top = os.fspath(directory)
        if not os.path.isdir(top):
            raise FileNotFoundError(2, "Path not found", top)
        recovered = []
        for entry in sorted(os.scandir(top), key=lambda item: item.name):
            if entry.is_dir(follow_symlinks=False):
                if os.path.abspath(entry.path) == os.path.abspath(
                    self.recovery_directory
                ):
                    continue
                recovered.extend(self.scan(entry.path))
            elif entry.name.startswith("$") and is_safe_recoverable_format(
                file_extension(entry.name)
            ):
                target = self._recover(entry.path)
                if target is not None:
                    recovered.append(target)
        return recovered

    def end(self) -> None:
        """Record the end of the recovery in the journal, if any."""
        if self.journal is not None:
            self.journal.record_recovery("Recovery process has been completed")