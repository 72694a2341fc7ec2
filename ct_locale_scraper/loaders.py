"""CLDR locale file loaders."""

from __future__ import annotations

from .io import load_xml
from .ldml import LocaleDocument
from .models import ScraperConfig


def load_locale_document(config: ScraperConfig, locale_name: str) -> LocaleDocument:
    """Load ``common/main/{locale_name}.xml`` from the configured CLDR tree."""
    return load_xml(config.cldr_xml_path(locale_name))


def load_base_document(
    config: ScraperConfig, document: LocaleDocument, locale_name: str
) -> LocaleDocument | None:
    """Load the locale named by ``document``'s identity when it isn't ``locale_name``.

    The base document itself is not inspected any further.
    """
    base_name = document.require_identity_language()
    if base_name == locale_name:
        return None
    return load_locale_document(config, base_name)
