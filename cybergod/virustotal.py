"""Submitting file hashes to the external Hunter lookup script."""

from __future__ import annotations

import logging
import os
import re
import subprocess
import sys
from pathlib import Path
from typing import Union

from cybergod.extensions import is_common_extension
from cybergod.extractor import extract_locations
from cybergod.hashing import md5_file
from cybergod.utilities import file_extension

PathLike = Union[str, "os.PathLike[str]"]

_log = logging.getLogger(__name__)

_MD5_PATTERN = re.compile(r"[0-9a-fA-F]{32}")
_HUNTER_CALL = "import sys, Hunter; Hunter.scan(sys.argv[1])"


class HunterError(RuntimeError):
    """The Hunter script could not be run or failed."""


def scan_hash(md5: str, workdir: PathLike = ".") -> Path:
    """Run ``Hunter.scan(md5)`` from the ``Hunter`` module found in ``workdir``.

    Returns the path of the JSON report Hunter writes for the hash. Raises
    ``ValueError`` if ``md5`` is not an MD5 hex digest and ``HunterError`` if
    the script fails.
    """
    if not _MD5_PATTERN.fullmatch(md5):
        raise ValueError(f"not an MD5 digest: {md5!r}")
    try:
        completed = subprocess.run(
            [sys.executable, "-c", _HUNTER_CALL, md5],
            cwd=os.fspath(workdir),
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as error:
        raise HunterError(str(error)) from error
    if completed.returncode != 0:
        raise HunterError(completed.stderr.strip() or "Hunter failed")
    return Path(workdir) / f"{md5}.json"


def scan_from_log(file: PathLike, workdir: PathLike = ".") -> dict[str, str]:
    """Submit the hash of every existing, commonly infected file listed in a log.

    Returns a mapping from each location successfully submitted to its MD5.
    Raises ``OSError`` if the log cannot be read.
    """
    submitted: dict[str, str] = {}
    for location in sorted(extract_locations(file)):
        if not os.path.isfile(location):
            continue
        if not is_common_extension(file_extension(location)):
            _log.info("[UNWANTED - NOT SCANNED]: %s", os.path.basename(location))
            continue
        try:
            md5 = md5_file(location)
            scan_hash(md5, workdir)
        except (OSError, HunterError) as error:
            _log.warning("could not submit %s: %s", location, error)
            continue
        submitted[location] = md5
    return submitted