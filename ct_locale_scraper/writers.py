"""Writers for CoffeeTranslation ``.i18n`` files."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .io import write_text
from .models import DisplayEntry

FILE_HEADER_LINES = (
    "# Sourced from the Unicode Common Locale Data Repository (CLDR).",
    "# https://cldr.unicode.org/index",
    "",
)

# Order matters: backslashes must be doubled before any escape is added.
_ESCAPES = (
    ("\\", "\\\\"),
    ("\n", "\\n"),
    ("'", "\\'"),
    ('"', '\\"'),
)


def format_string_literal(value: str) -> str:
    """Escape ``value`` and wrap it in double quotes."""
    for raw, escaped in _ESCAPES:
        value = value.replace(raw, escaped)
    return f'"{value}"'


def render_i18n(entries: Iterable[DisplayEntry]) -> str:
    lines = list(FILE_HEADER_LINES)
    lines.extend(
        f"{entry.code}: {format_string_literal(entry.text)}" for entry in entries
    )
    return "\n".join(lines) + "\n"


def write_i18n(path: Path, entries: Iterable[DisplayEntry]) -> None:
    """Write entries to ``path``, replacing any existing file."""
    write_text(path, render_i18n(entries))
