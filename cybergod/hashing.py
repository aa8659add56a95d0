"""MD5 and SHA-512 digests of files, bytes and strings as lowercase hex."""

from __future__ import annotations

import hashlib
import os
from typing import Union

_CHUNK_SIZE = 1024

PathLike = Union[str, "os.PathLike[str]"]


def md5_file(path: PathLike) -> str:
    """Return the MD5 hex digest of the file at ``path``.

    Raises ``OSError`` (e.g. ``FileNotFoundError``) if the file cannot be read.
    """
    digest = hashlib.md5()
    with open(path, "rb") as handle:
        for chunk in iter(lambda: handle.read(_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def md5_bytes(data: bytes) -> str:
    """Return the MD5 hex digest of a byte string."""
    return hashlib.md5(bytes(data)).hexdigest()


def md5_string(text: str) -> str:
    """Return the MD5 hex digest of a text string encoded as UTF-8."""
    return md5_bytes(text.encode("utf-8"))


def sha512_hex(text: str) -> str:
    """Return the SHA-512 hex digest of a text string encoded as UTF-8."""
    return hashlib.sha512(text.encode("utf-8")).hexdigest()