"""CLDR to CoffeeTranslation locale scraper package."""

from .ldml import LocaleDocument, MalformedCldrDataError
from .models import DisplayEntry, ScraperConfig
from .processing import (
    collect_language_entries,
    collect_territory_entries,
    infer_locale_name,
    resolve_locale_document,
)
from .writers import format_string_literal, write_i18n

__version__ = "1.0.0"

__all__ = [
    "DisplayEntry",
    "LocaleDocument",
    "MalformedCldrDataError",
    "ScraperConfig",
    "collect_language_entries",
    "collect_territory_entries",
    "format_string_literal",
    "infer_locale_name",
    "resolve_locale_document",
    "write_i18n",
]
