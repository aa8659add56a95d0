"""Incremental HTML report files."""

from __future__ import annotations

import os
from typing import Optional, Union

PathLike = Union[str, "os.PathLike[str]"]

_STYLE = "<style>table, th, td {border: 2px solid black;}</style>"


class HtmlReport:
    """An HTML5 document written piece by piece to a file."""

    def __init__(self, location: PathLike, title: str) -> None:
        """Create (or truncate) the file and write the document preamble."""
        self.location = location
        with open(location, "w", encoding="utf-8") as handle:
            handle.write("<!DOCTYPE HTML>\n<html>\n<head>\n")
            handle.write(f"<title>{title}</title>\n")

    def _append(self, text: str) -> None:
        with open(self.location, "a", encoding="utf-8") as handle:
            handle.write(text)

    def initialize_headers(self) -> None:
        """Write the table style, close the head and open the body."""
        self._append(f"{_STYLE}\n</head><body>\n")

    def open_tag(self, tag: str, class_: Optional[str] = None) -> None:
        """Write an opening tag, with a class attribute if one is given."""
        if class_ is None:
            self._append(f"<{tag}>")
        else:
            self._append(f"<{tag} class={class_}>")

    def close_tag(self, tag: str) -> None:
        """Write a closing tag."""
        self._append(f"</{tag}>")

    def document(self, tag: str, content: str) -> None:
        """Write ``content`` wrapped in ``tag`` on its own line."""
        self._append(f"<{tag}>{content}</{tag}>\n")

    def finalize(self) -> None:
        """Close the body and the document."""
        self._append("\n</body>\n</html>")