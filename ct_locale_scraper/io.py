"""File I/O helpers for CLDR sources and .i18n outputs."""

from __future__ import annotations

from pathlib import Path

from .ldml import LocaleDocument


class CldrFileNotFoundError(Exception):
    """Raised when a CLDR locale file is missing."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"File {path} does not exist.")
        self.path = path


def load_xml(path: Path) -> LocaleDocument:
    """Read and parse an LDML file from disk.

    Raises:
        CldrFileNotFoundError: If ``path`` is not a file.
        MalformedCldrDataError: If the file is not well-formed XML.
    """
    if not path.is_file():
        raise CldrFileNotFoundError(path)
    return LocaleDocument.parse(path.read_bytes(), source=str(path))


def write_text(path: Path, content: str) -> None:
    """Overwrite ``path`` with UTF-8 text. The parent folder must exist."""
    with path.open("w", encoding="utf-8") as handle:
        handle.write(content)

