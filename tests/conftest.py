"""Shared fixtures: a throwaway CLDR tree on disk."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from ct_locale_scraper.models import ScraperConfig

LDML_TEMPLATE = """<?xml version="1.0" encoding="UTF-8" ?>
<!DOCTYPE ldml SYSTEM "../../common/dtd/ldml.dtd">
<ldml>
\t<identity>
\t\t<version number="$Revision$"/>
\t\t{identity}
\t</identity>
{body}
</ldml>
"""

EN_BODY = """\t<localeDisplayNames>
\t\t<languages>
\t\t\t<language type="de">German</language>
\t\t\t<language type="en">English</language>
\t\t\t<language type="en_GB" alt="short">UK English</language>
\t\t\t<language type="zh_Hant" alt="long">Traditional Chinese</language>
\t\t\t<language type="fr">French</language>
\t\t</languages>
\t\t<territories>
\t\t\t<territory type="GB">United Kingdom</territory>
\t\t\t<territory type="GB" alt="short">UK</territory>
\t\t\t<territory type="HK">Hong Kong SAR China</territory>
\t\t\t<territory type="HK" alt="short">Hong Kong</territory>
\t\t\t<territory type="PS">Palestinian Territories</territory>
\t\t\t<territory type="PS" alt="short">PS</territory>
\t\t\t<territory type="US">United States of America</territory>
\t\t\t<territory type="US" alt="short">United States</territory>
\t\t\t<territory type="FR">France</territory>
\t\t</territories>
\t</localeDisplayNames>"""

EN_US_BODY = """\t<localeDisplayNames>
\t\t<languages>
\t\t\t<language type="en_US">American English</language>
\t\t</languages>
\t</localeDisplayNames>"""

WriteLocale = Callable[..., Path]


def ldml(identity: str | None, body: str = "") -> str:
    identity_element = "" if identity is None else f'<language type="{identity}"/>'
    return LDML_TEMPLATE.format(identity=identity_element, body=body)


@pytest.fixture
def cldr_root(tmp_path: Path) -> Path:
    root = tmp_path / "cldr"
    (root / "common" / "main").mkdir(parents=True)
    return root


@pytest.fixture
def write_locale(cldr_root: Path) -> WriteLocale:
    """Write ``common/main/{name}.xml`` declaring ``identity``."""

    def _write(name: str, identity: str | None, body: str = "") -> Path:
        path = cldr_root / "common" / "main" / f"{name}.xml"
        path.write_text(ldml(identity, body), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def english_cldr(write_locale: WriteLocale, cldr_root: Path) -> Path:
    write_locale("en", "en", EN_BODY)
    write_locale("en_US", "en", EN_US_BODY)
    return cldr_root


@pytest.fixture
def language_dir(tmp_path: Path) -> Path:
    path = tmp_path / "i18n" / "en-US"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def make_config(cldr_root: Path) -> Callable[..., ScraperConfig]:
    def _make(language_path: str, cldr_manual_name: str | None = None) -> ScraperConfig:
        return ScraperConfig(
            language_path=language_path,
            cldr_path=cldr_root,
            cldr_manual_name=cldr_manual_name,
        )

    return _make
