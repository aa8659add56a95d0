"""Secure deletion: overwrite a file with Gutmann-style patterns, rename it, remove it."""

from __future__ import annotations

import itertools
import logging
import os
import random
from typing import Optional, Protocol, Union

from cybergod.hashing import sha512_hex
from cybergod.utilities import walk_files

PathLike = Union[str, "os.PathLike[str]"]

_log = logging.getLogger(__name__)

MAX_WRITES = 1000
DEFAULT_PASSES = 2


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


def _triple(byte: str) -> str:
    return " ".join([byte] * 3)


# The 35 passes of the Gutmann method; None marks a pass of random bits.
_PASSES: tuple[Optional[str], ...] = (
    (None,) * 4
    + (
        _triple("01010101"),
        _triple("10101010"),
        "10010010 01001001 00100100",
        "01001001 00100100 10010010",
        "00100100 10010010 01001001",
        _triple("00000000"),
        _triple("00010001"),
        _triple("00100010"),
        _triple("00110011"),
        _triple("01000100"),
        _triple("01010101"),
        _triple("01100110"),
        _triple("01110111"),
        _triple("10001000"),
        _triple("10011001"),
        _triple("10101010"),
        _triple("10111011"),
        _triple("11001100"),
        _triple("11011101"),
        _triple("11101110"),
        _triple("11111111"),
        "10010010 01001001 00100100",
        "01001001 00100100 10010010",
        "00100100 10010010 01001001",
        "01101101 10110110 11011011",
        "10110110 11011011 01101101",
        "11011011 01101101 10110110",
    )
    + (None,) * 4
)


def random_binary(rng: Optional[_RandomSource] = None) -> str:
    """Return six random binary digits as text."""
    source = rng if rng is not None else random.Random()
    return "".join(str(source.randrange(2)) for _ in range(6))


def overwrite_file(path: PathLike, rng: Optional[_RandomSource] = None) -> bool:
    """Replace the contents of ``path`` with a random number of Gutmann passes.

    Between 1 and 1000 patterns are written, cycling through the 35 passes.
    Raises ``FileNotFoundError`` if there is no such file.
    """
    if not os.path.isfile(path):
        raise FileNotFoundError(2, "File not present", os.fspath(path))
    source = rng if rng is not None else random.Random()
    writes = source.randrange(MAX_WRITES) + 1
    with open(path, "w", encoding="ascii") as handle:
        for pattern in itertools.islice(itertools.cycle(_PASSES), writes):
            handle.write(pattern if pattern is not None else random_binary(source))
    return True


def secure_delete(path: PathLike, passes: int = DEFAULT_PASSES) -> None:
    """Overwrite ``path`` ``passes`` times, rename it to a hash of its name and delete it.

    Raises ``FileNotFoundError`` if there is no such file.
    """
    location = os.fspath(path)
    if not os.path.isfile(location):
        raise FileNotFoundError(2, "File not present", location)
    rng = random.Random()
    for _ in range(passes):
        overwrite_file(location, rng)
    hidden = os.path.join(os.path.dirname(location), sha512_hex(location))
    os.replace(location, hidden)
    os.remove(hidden)


def shred_directory(directory: PathLike, passes: int = DEFAULT_PASSES) -> int:
    """Securely delete every file below ``directory``; return how many were removed.

    Folders are left in place. Raises ``FileNotFoundError`` if ``directory``
    does not exist.
    """
    removed = 0
    for location in list(walk_files(directory)):
        _log.info("removing: %s", location)
        try:
            secure_delete(location, passes)
        except OSError as error:
            _log.warning("could not remove %s: %s", location, error)
            continue
        removed += 1
    return removed