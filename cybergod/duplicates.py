"""Finding duplicate images, media and documents by size, then by MD5."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

from cybergod.extensions import is_document, is_image, is_media
from cybergod.hashing import md5_file
from cybergod.html import HtmlReport
from cybergod.maintainer import Journal
from cybergod.utilities import file_extension, walk_files

PathLike = Union[str, "os.PathLike[str]"]

_log = logging.getLogger(__name__)

REPORT_TITLE = "CyberGod KSGMPRH"


def is_extension_suited(extension: str) -> bool:
    """Return True for the image, media and document types checked for duplicates."""
    return is_image(extension) or is_media(extension) or is_document(extension)


class DuplicateFinder:
    """Groups files first by size and then confirms duplicates by hash."""

    def __init__(self, journal: Optional[Journal] = None) -> None:
        self.journal = journal
        self.file_count = 0
        self._first_of_size: dict[int, str] = {}
        self.same_size: set[str] = set()
        self._first_of_hash: dict[str, str] = {}
        self.duplicates: set[str] = set()
        if journal is not None:
            journal.record_duplicates(
                "Process Started", "Duplicate files finding process started"
            )

    @property
    def duplicate_count(self) -> int:
        """Number of files confirmed as duplicates."""
        return len(self.duplicates)

    def scan(self, directory: PathLike) -> int:
        """Record the size of every suited file below ``directory``.

        Returns how many files were seen. Raises ``FileNotFoundError`` if the
        directory does not exist.
        """
        seen = 0
        for path in walk_files(directory):
            seen += 1
            self.file_count += 1
            if not is_extension_suited(file_extension(path)):
                continue
            try:
                size = os.path.getsize(path)
            except OSError as error:
                _log.warning("cannot size %s: %s", path, error)
                continue
            self.file_size_checker(size, path)
        return seen

    def file_size_checker(self, size: int, path: str) -> bool:
        """Note ``path`` as having ``size``; return True if that size was seen before."""
        first = self._first_of_size.get(size)
        if first is None:
            self._first_of_size[size] = path
            return False
        self.same_size.add(path)
        self.same_size.add(first)
        return True

    def find_the_duplicates(self) -> set[str]:
        """Hash the files sharing a size and return those whose hashes match."""
        for path in sorted(self.same_size):
            try:
                md5 = md5_file(path)
            except OSError as error:
                _log.warning("cannot hash %s: %s", path, error)
                continue
            self.check_hash_signatures(md5, path)
        return set(self.duplicates)

    def check_hash_signatures(self, md5: str, path: str) -> bool:
        """Note ``path`` as having ``md5``; return True if that hash was seen before."""
        first = self._first_of_hash.get(md5)
        if first is None:
            self._first_of_hash[md5] = path
            return False
        self.duplicates.add(path)
        self.duplicates.add(first)
        return True

    def write_report(self, path: PathLike) -> Path:
        """Write an HTML table of the duplicates, close the journal run, return the path."""
        report = HtmlReport(path, REPORT_TITLE)
        report.initialize_headers()
        report.open_tag("table")
        report.open_tag("tr")
        report.document("th", "FILE")
        report.document("th", "STATUS")
        report.close_tag("tr")
        for location in sorted(self.duplicates):
            report.open_tag("tr")
            report.document("td", location)
            report.document("td", "IDENTIFIED AS A DUPLICATE")
            report.close_tag("tr")
        report.close_tag("table")
        report.finalize()
        self.finish()
        return Path(path)

    def finish(self) -> None:
        """Record the end of the run with its totals in the journal, if any."""
        if self.journal is None:
            return
        self.journal.record_duplicates(
            "Process Ended",
            "Duplicate files finding process has been completed successfully",
        )
        self.journal.record_duplicates("Files scanned: ", str(self.file_count))
        self.journal.record_duplicates("Duplicates Found: ", str(self.duplicate_count))