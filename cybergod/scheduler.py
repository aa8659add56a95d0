"""A set of locations put aside to be scanned later."""

from __future__ import annotations

from collections.abc import Iterator


class Scheduler:
    """Distinct locations scheduled for a later scan, iterated in sorted order."""

    def __init__(self) -> None:
        self._locations: set[str] = set()

    def add(self, location: str) -> bool:
        """Schedule ``location``; return False if it was already scheduled."""
        if location in self._locations:
            return False
        self._locations.add(location)
        return True

    def __contains__(self, location: object) -> bool:
        return location in self._locations

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._locations))

    def __len__(self) -> int:
        return len(self._locations)