"""Listing and running Python plugin scripts."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Sequence
from typing import Optional, Union

PathLike = Union[str, "os.PathLike[str]"]

PLUGIN_LIST = "cybergod.plugins"


def get_available_plugins(path: PathLike = PLUGIN_LIST) -> list[str]:
    """Return the plugin locations listed one per line in ``path``, trimmed.

    Blank lines are skipped. Raises ``FileNotFoundError`` if the list does not
    exist.
    """
    with open(path, encoding="utf-8") as handle:
        return [line.strip() for line in handle if line.strip()]


def execute_plugin(location: PathLike, argv: Optional[Sequence[str]] = None) -> bool:
    """Run the Python script at ``location`` with ``argv`` as its arguments.

    Returns False if there is no such script, True once it has run.
    """
    if not os.path.isfile(location):
        return False
    subprocess.run(
        [sys.executable, os.fspath(location), *(argv or ())],
        check=False,
    )
    return True