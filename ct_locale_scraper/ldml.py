"""Typed accessors over a parsed CLDR LDML document.

Lookups come in two flavours: ``find_*`` returns ``None`` when the node is
absent, ``require_*`` raises :class:`MalformedCldrDataError`. Callers decide
which outcome is fatal.
"""

from __future__ import annotations

import xml.etree.ElementTree as ElementTree
from dataclasses import dataclass

LDML_ROOT_TAG = "ldml"
IDENTITY_LANGUAGE_PATH = "identity/language"
LANGUAGES_PATH = "localeDisplayNames/languages/language"
TERRITORIES_PATH = "localeDisplayNames/territories/territory"


class MalformedCldrDataError(Exception):
    """Raised when an LDML document lacks a node the scraper depends on."""


@dataclass(slots=True)
class LocaleDocument:
    """A CLDR locale file, possibly merged with its base locale."""

    root: ElementTree.Element
    source: str = "<memory>"
    merged_from: str | None = None

    @classmethod
    def parse(cls, data: str | bytes, source: str = "<memory>") -> LocaleDocument:
        try:
            parser = ElementTree.XMLParser(
                target=ElementTree.TreeBuilder(insert_comments=True, insert_pis=True)
            )
            root = ElementTree.fromstring(data, parser=parser)
        except ElementTree.ParseError as e:
            raise MalformedCldrDataError(f"Failed to parse {source}: {e}") from e
        return cls(root=root, source=source)

    def children(self) -> list[ElementTree.Element]:
        """Element children of the root; comments and PIs are left out."""
        return [child for child in self.root if isinstance(child.tag, str)]

    def select(self, path: str) -> list[ElementTree.Element]:
        """All elements at ``/ldml/{path}``, in document order."""
        if self.root.tag != LDML_ROOT_TAG:
            return []
        return self.root.findall(path)

    def find_first(self, path: str, **attributes: str) -> ElementTree.Element | None:
        """First element at ``/ldml/{path}`` whose attributes all match."""
        for element in self.select(path):
            if all(element.get(name) == value for name, value in attributes.items()):
                return element
        return None

    def find_identity_language(self) -> str | None:
        element = self.find_first(IDENTITY_LANGUAGE_PATH)
        if element is None:
            return None
        return element.get("type")

    def require_identity_language(self) -> str:
        language = self.find_identity_language()
        if language is None:
            raise MalformedCldrDataError(
                f"{self.source}: missing /ldml/identity/language/@type."
            )
        return language

    def require_attribute(self, element: ElementTree.Element, name: str) -> str:
        value = element.get(name)
        if value is None:
            raise MalformedCldrDataError(
                f"{self.source}: <{element.tag}> is missing the '{name}' attribute."
            )
        return value

    def require_direct_text(self, element: ElementTree.Element) -> str:
        """Text of the element's first child node, which must be a text node.

        Comments and processing instructions count as child nodes, so text
        placed after one of them is not direct text.

        Raises:
            MalformedCldrDataError: If the element does not start with text.
        """
        if not element.text:
            raise MalformedCldrDataError(
                f"{self.source}: <{element.tag} type={element.get('type')!r}> "
                "has no text content."
            )
        return element.text

    def merge(self, base: LocaleDocument) -> None:
        """Append the root elements of ``base`` after this document's own."""
        self.root.extend(base.children())
        self.merged_from = base.source
