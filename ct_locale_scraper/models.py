"""Pydantic models for scraper configuration and extracted display names."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

CLDR_MAIN_SUBDIR = ("common", "main")
I18N_SUFFIX = ".i18n"


class ScraperConfig(BaseModel, frozen=True):
    """Options for a single scraper run, built once from the CLI."""

    language_path: str
    cldr_path: Path
    cldr_manual_name: str | None = None

    def cldr_xml_path(self, locale_name: str) -> Path:
        """Path of the LDML file for a CLDR locale identifier."""
        return self.cldr_path.joinpath(*CLDR_MAIN_SUBDIR, f"{locale_name}.xml")

    def output_path(self, endpoint: str) -> Path:
        return Path(self.language_path) / f"{endpoint}{I18N_SUFFIX}"


class DisplayEntry(BaseModel, frozen=True):
    """Human-readable name of a language or territory code."""

    code: str
    text: str
