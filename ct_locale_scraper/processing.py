"""Locale resolution and display-name extraction for CLDR data."""

from __future__ import annotations

from .ldml import LANGUAGES_PATH, TERRITORIES_PATH, LocaleDocument
from .loaders import load_base_document, load_locale_document
from .models import DisplayEntry, ScraperConfig

SHORT_ALT = "short"
MIN_SHORT_NAME_LENGTH = 5


def infer_locale_name(config: ScraperConfig) -> str:
    """Derive the CLDR locale identifier for a run.

    The manual override wins. Otherwise the last segment of the language
    folder is used, converted from ``en-US`` to CLDR's ``en_US`` form.
    """
    if config.cldr_manual_name is not None:
        return config.cldr_manual_name
    segments = config.language_path.replace("\\", "/").split("/")
    return segments[-1].replace("-", "_")


def resolve_locale_document(config: ScraperConfig, locale_name: str) -> LocaleDocument:
    """Load a locale and merge in its base locale one level deep."""
    document = load_locale_document(config, locale_name)
    base_document = load_base_document(config, document, locale_name)
    if base_document is not None:
        document.merge(base_document)
    return document


def utf16_length(text: str) -> int:
    return len(text.encode("utf-16-le")) // 2


def collect_language_entries(document: LocaleDocument) -> list[DisplayEntry]:
    """Collect canonical (non-alt) language names in document order."""
    entries: list[DisplayEntry] = []
    for element in document.select(LANGUAGES_PATH):
        if element.get("alt") is not None:
            continue
        entries.append(
            DisplayEntry(
                code=document.require_attribute(element, "type"),
                text=document.require_direct_text(element),
            )
        )
    return entries


def collect_territory_entries(document: LocaleDocument) -> list[DisplayEntry]:
    """Collect territory names, preferring readable short forms.

    A short form replaces the canonical name unless it is a bare
    abbreviation of four characters or fewer, so "United States" is used
    over "United States of America" but "US" never is.
    """
    entries: list[DisplayEntry] = []
    for element in document.select(TERRITORIES_PATH):
        if element.get("alt") is not None:
            continue

        code = document.require_attribute(element, "type")
        text = document.require_direct_text(element)
        short_element = document.find_first(TERRITORIES_PATH, type=code, alt=SHORT_ALT)
        if short_element is not None:
            short_text = document.require_direct_text(short_element)
            if utf16_length(short_text) >= MIN_SHORT_NAME_LENGTH:
                text = short_text

        entries.append(DisplayEntry(code=code, text=text))
    return entries
