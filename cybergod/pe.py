"""Portable Executable header inspection, used to spot UPX-packed programs."""

from __future__ import annotations

import os
import struct
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

MZ_MAGIC = 0x5A4D

# e_magic at offset 0, e_lfanew at offset 60 of the 64-byte DOS header.
_DOS_HEADER = struct.Struct("<H58xI")
# PE signature followed by the COFF file header.
_NT_HEADER = struct.Struct("<4sHHIIIHH")
_SECTION_HEADER_SIZE = 40
_SECTION_NAME_SIZE = 8


def section_names(path: PathLike) -> list[str]:
    """Return the section names of the PE file at ``path``, in file order.

    Raises ``ValueError`` if the file has no DOS ("MZ") header or is cut short
    before its file header, and ``OSError`` if it cannot be read.
    """
    with open(path, "rb") as handle:
        dos = handle.read(_DOS_HEADER.size)
        if len(dos) < _DOS_HEADER.size:
            raise ValueError("file too short for a DOS header")
        magic, nt_offset = _DOS_HEADER.unpack(dos)
        if magic != MZ_MAGIC:
            raise ValueError("missing MZ signature")
        handle.seek(nt_offset)
        nt = handle.read(_NT_HEADER.size)
        if len(nt) < _NT_HEADER.size:
            raise ValueError("file too short for a PE file header")
        _, _, section_count, _, _, _, optional_size, _ = _NT_HEADER.unpack(nt)
        handle.seek(optional_size, os.SEEK_CUR)
        names = []
        for _ in range(section_count):
            raw = handle.read(_SECTION_HEADER_SIZE)
            if len(raw) < _SECTION_HEADER_SIZE:
                break
            names.append(raw[:_SECTION_NAME_SIZE].rstrip(b"\0").decode("latin-1"))
    return names


def is_upx(path: PathLike) -> bool:
    """Return True if the file is a PE executable with a UPX section.

    Files that cannot be read or are not PE files give False.
    """
    try:
        names = section_names(path)
    except (OSError, ValueError):
        return False
    return any(name.startswith("UPX") for name in names)