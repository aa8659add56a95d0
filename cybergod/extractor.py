"""Reading file locations back out of scan log files."""

from __future__ import annotations

import os
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def extract_locations(file: PathLike) -> set[str]:
    """Return the distinct non-blank lines of the log file at ``file``.

    Raises ``OSError`` if the file cannot be opened.
    """
    with open(file, encoding="utf-8", errors="replace") as handle:
        return {line.rstrip("\r\n") for line in handle if line.strip()}