"""SQLite store of known-malicious MD5 signatures, split into one table per leading character."""

from __future__ import annotations

import os
import sqlite3
import string
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_DATABASE = "ksgmprh.db"

_DIGIT_TABLES = {
    "0": "zero",
    "1": "one",
    "2": "two",
    "3": "three",
    "4": "four",
    "5": "five",
    "6": "six",
    "7": "seven",
    "8": "eight",
    "9": "nine",
}

TABLE_NAMES: tuple[str, ...] = tuple(string.ascii_lowercase) + tuple(
    _DIGIT_TABLES.values()
)


def table_for_hash(md5: str) -> str:
    """Return the name of the table that holds ``md5``.

    Hashes starting with a digit live in a table named after the digit in
    words; others live in the table named by their first letter. Raises
    ``ValueError`` if the hash is empty or starts with anything else.
    """
    if not md5:
        raise ValueError("empty hash")
    first = md5[0].lower()
    if first in _DIGIT_TABLES:
        return _DIGIT_TABLES[first]
    if first in string.ascii_lowercase:
        return first
    raise ValueError(f"hash {md5!r} does not start with a letter or digit")


class SignatureDatabase:
    """Known malware hashes with the name of the variant each belongs to."""

    def __init__(self, path: PathLike = DEFAULT_DATABASE) -> None:
        """Open (creating if needed) the database at ``path`` and its tables."""
        self.path = path
        self._connection = sqlite3.connect(os.fspath(path))
        self.create_tables()

    def create_tables(self) -> None:
        """Create every signature table that does not exist yet."""
        with self._connection:
            for name in TABLE_NAMES:
                self._connection.execute(
                    f"CREATE TABLE IF NOT EXISTS {name} "
                    "(hash TEXT PRIMARY KEY NOT NULL, variant TEXT NOT NULL)"
                )

    def contains(self, md5: str) -> bool:
        """Return True if ``md5`` is a known signature.

        A hash that cannot be stored in any table is simply not known.
        """
        try:
            table = table_for_hash(md5)
        except ValueError:
            return False
        row = self._connection.execute(
            f"SELECT hash, variant FROM {table} WHERE hash = ?", (md5,)
        ).fetchone()
        return row is not None

    def add(self, md5: str, variant: str) -> bool:
        """Record ``md5`` as belonging to ``variant``.

        Returns False if the hash was already recorded. Raises ``ValueError``
        for a hash that fits no table.
        """
        table = table_for_hash(md5)
        with self._connection:
            cursor = self._connection.execute(
                f"INSERT OR IGNORE INTO {table} (hash, variant) VALUES (?, ?)",
                (md5, variant),
            )
        return cursor.rowcount == 1

    def close(self) -> None:
        """Close the database connection."""
        self._connection.close()

    def __enter__(self) -> SignatureDatabase:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()