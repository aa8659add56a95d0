"""File-extension classification used to decide which files get scanned."""

from __future__ import annotations

IMAGE_EXTENSIONS: frozenset[str] = frozenset(
    {".jpg", ".jpeg", ".png", ".bmp", ".gif", ".ppm", ".pgm", ".pnm", ".pbm"}
)

# Extensions most often carrying malware; used by the boost scan.
COMMON_MALWARE_EXTENSIONS: frozenset[str] = frozenset(
    {".exe", ".dll", ".pdf", ".doc", ".xls", ".xlxs", ".vbs", ".ppt"}
)

MEDIA_EXTENSIONS: frozenset[str] = frozenset(
    {
        ".3gp",
        ".mp3",
        ".mp4",
        ".wav",
        ".aiff",
        ".m4a",
        ".m4b",
        ".m4p",
        ".wma",
        ".webm",
        ".flv",
        ".avi",
    }
)

DOCUMENT_EXTENSIONS: frozenset[str] = frozenset(
    {
        ".doc",
        ".docx",
        ".txt",
        ".rtf",
        ".xps",
        ".xls",
        ".xlxs",
        ".ppt",
        ".ppts",
        ".pdf",
        ".epub",
    }
)

SHORTCUT_EXTENSION = ".lnk"


def is_image(extension: str) -> bool:
    """Return True if the extension (with its leading dot) names an image format."""
    return extension in IMAGE_EXTENSIONS


def is_common_extension(extension: str) -> bool:
    """Return True if the extension is one commonly used to carry malware."""
    return extension in COMMON_MALWARE_EXTENSIONS


def is_media(extension: str) -> bool:
    """Return True if the extension names an audio or video format."""
    return extension in MEDIA_EXTENSIONS


def is_document(extension: str) -> bool:
    """Return True if the extension names a document format."""
    return extension in DOCUMENT_EXTENSIONS


def is_shortcut(extension: str) -> bool:
    """Return True if the extension is that of a Windows shortcut."""
    return extension == SHORTCUT_EXTENSION