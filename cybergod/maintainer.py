"""SQLite journal recording when the maintenance tools start and finish."""

from __future__ import annotations

import os
import sqlite3
from contextlib import closing
from typing import Union

from cybergod.utilities import timestamp

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_JOURNAL = os.path.join("maintainer", "CyberGod Maintainer.db")

_SCHEMAS = {
    "DUPEREMOVER": "CREATE TABLE IF NOT EXISTS DUPEREMOVER "
    "(Status TEXT, Time BLOB, Process TEXT)",
    "RECOVERY": "CREATE TABLE IF NOT EXISTS RECOVERY (Status TEXT, Time BLOB)",
    "SHORTCUTVIRUSREMOVER": "CREATE TABLE IF NOT EXISTS SHORTCUTVIRUSREMOVER "
    "(Status TEXT, Time BLOB)",
}


class Journal:
    """Timestamped status rows for the duplicate, recovery and shortcut tools."""

    def __init__(self, path: PathLike = DEFAULT_JOURNAL) -> None:
        self.path = os.fspath(path)
        parent = os.path.dirname(self.path)
        if parent:
            os.makedirs(parent, exist_ok=True)

    def _insert(self, table: str, values: tuple[str, ...]) -> None:
        placeholders = ", ".join("?" for _ in values)
        with closing(sqlite3.connect(self.path)) as connection, connection:
            connection.execute(_SCHEMAS[table])
            connection.execute(
                f"INSERT INTO {table} VALUES ({placeholders})", values
            )

    def record_duplicates(self, status: str, process: str) -> None:
        """Add a row to the duplicate-finder log."""
        self._insert("DUPEREMOVER", (status, timestamp(), process))

    def record_recovery(self, status: str) -> None:
        """Add a row to the recovery log."""
        self._insert("RECOVERY", (status, timestamp()))

    def record_shortcut_removal(self, status: str) -> None:
        """Add a row to the shortcut-virus remover log."""
        self._insert("SHORTCUTVIRUSREMOVER", (status, timestamp()))

    def rows(self, table: str) -> list[tuple[str, ...]]:
        """Return the rows of ``table`` in the order they were recorded.

        Raises ``ValueError`` for a table the journal does not keep.
        """
        if table not in _SCHEMAS:
            raise ValueError(f"unknown journal table: {table!r}")
        with closing(sqlite3.connect(self.path)) as connection:
            connection.execute(_SCHEMAS[table])
            return [
                tuple(row)
                for row in connection.execute(f"SELECT * FROM {table} ORDER BY rowid")
            ]