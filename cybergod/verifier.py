"""Checking that the helper scripts shipped with the toolkit have not been modified."""

from __future__ import annotations

import logging
import os
import sqlite3
from collections.abc import Callable
from contextlib import closing
from pathlib import Path
from typing import Optional, Union

from cybergod.hashing import md5_file

PathLike = Union[str, "os.PathLike[str]"]

_log = logging.getLogger(__name__)

DEFAULT_DATABASE = os.path.join("verifyier", "verifyier.db")

SHIPPED_FILES: dict[int, str] = {
    0: "Adder.py",
    1: "Hunter.py",
    2: "process_hunter.py",
}

_MD5_LENGTH = 32


def _ask_user(name: str) -> bool:
    try:
        answer = input(f"{name} has been modified! Have you modified it? [y/n]: ")
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")


class Verifier:
    """Compares one shipped script with the hash and size recorded for its ID."""

    def __init__(self, file_id: int, database: PathLike = DEFAULT_DATABASE) -> None:
        self.file_id = file_id
        self.database = os.fspath(database)
        self.hash_of_file: Optional[str] = None
        self.size_of_file: Optional[int] = None
        try:
            with closing(self._connect()) as connection:
                row = connection.execute(
                    "SELECT ID, Hash, Size FROM hashes WHERE ID = ?", (file_id,)
                ).fetchone()
        except sqlite3.Error as error:
            _log.warning("cannot read %s: %s", self.database, error)
            return
        if row is None:
            _log.warning("Something went wrong with the database")
            return
        self.hash_of_file = row[1]
        self.size_of_file = row[2]

    def _connect(self) -> sqlite3.Connection:
        uri = Path(self.database).resolve().as_uri() + "?mode=rw"
        return sqlite3.connect(uri, uri=True)

    def _report_invalid(self) -> bool:
        _log.warning(
            "The ID %s might be invalid! Kindly download the binaries again.",
            self.file_id,
        )
        return False

    def can_process_further(
        self, confirm: Callable[[str], bool] = _ask_user
    ) -> bool:
        """Return True if the script is unchanged or its change was accepted.

        When the script's hash differs from the record, ``confirm`` is called
        with the script's name; if it agrees, the record is updated. Unknown
        IDs, missing records and missing scripts give False.
        """
        if not isinstance(self.hash_of_file, str) or len(self.hash_of_file) != _MD5_LENGTH:
            return self._report_invalid()
        name = SHIPPED_FILES.get(self.file_id)
        if name is None or not os.path.isfile(name):
            return self._report_invalid()
        md5 = md5_file(name)
        if md5 == self.hash_of_file:
            return True
        if confirm(name):
            return self.update_hashes_and_size(md5, os.path.getsize(name))
        return self._report_invalid()

    def update_hashes_and_size(self, md5: str, size: int) -> bool:
        """Record a new hash and size for this ID; return False if the database fails."""
        try:
            with closing(self._connect()) as connection, connection:
                connection.execute(
                    "UPDATE hashes SET Hash = ? WHERE ID = ?", (md5, self.file_id)
                )
                connection.execute(
                    "UPDATE hashes SET Size = ? WHERE ID = ?", (size, self.file_id)
                )
        except sqlite3.Error as error:
            _log.warning("cannot update %s: %s", self.database, error)
            return False
        self.hash_of_file = md5
        self.size_of_file = size
        _log.info("The details have been updated!")
        return True


def boot_loader(
    database: PathLike = DEFAULT_DATABASE,
    confirm: Callable[[str], bool] = _ask_user,
) -> dict[int, bool]:
    """Verify every shipped script; return each ID with whether it may be used."""
    return {
        file_id: Verifier(file_id, database).can_process_further(confirm)
        for file_id in SHIPPED_FILES
    }