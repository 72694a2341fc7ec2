"""Fetching and unpacking the cldr-common release archive.

Only the per-locale LDML files under ``common/main`` are unpacked; the rest
of the archive (supplemental data, collation, DTDs, ...) is skipped.
"""

from __future__ import annotations

import re
import zipfile
from pathlib import Path

import requests
from tqdm import tqdm

from .ldml import LDML_ROOT_TAG, LocaleDocument, MalformedCldrDataError
from .models import CLDR_MAIN_SUBDIR

CLDR_RELEASE = "48.0"
CLDR_DOWNLOAD_ROOT = "https://unicode.org/Public/cldr"
DEFAULT_USER_AGENT = "ct-locale-scraper/1.0"
DEFAULT_TIMEOUT_SECONDS = 60

# cldr-common zips put common/ at the top; tolerate one wrapping folder.
LOCALE_MEMBER_PATTERN = re.compile(r"^(?:[^/]+/)?common/main/(?P<name>[^/]+\.xml)$")


class DownloadError(Exception):
    """Raised when the CLDR archive cannot be downloaded."""


class ExtractionError(Exception):
    """Raised when the CLDR archive cannot be unpacked."""


def cldr_archive_name(release: str) -> str:
    return f"cldr-common-{release}.zip"


def cldr_archive_url(release: str) -> str:
    major = release.split(".")[0]
    return f"{CLDR_DOWNLOAD_ROOT}/{major}/{cldr_archive_name(release)}"


def download_cldr_archive(url: str, destination: Path) -> None:
    """Download a cldr-common archive to ``destination``.

    The payload is streamed into a ``.part`` file and only moved into
    place once it is known to be a ZIP, so an interrupted download is never
    picked up as a cached archive.

    Raises:
        DownloadError: If the request fails or the payload is not a ZIP.
    """
    destination.parent.mkdir(parents=True, exist_ok=True)
    partial = destination.with_name(destination.name + ".part")
    try:
        with requests.get(
            url,
            stream=True,
            timeout=DEFAULT_TIMEOUT_SECONDS,
            headers={"User-Agent": DEFAULT_USER_AGENT},
        ) as response:
            response.raise_for_status()
            total_size = int(response.headers.get("content-length", 0))

            with (
                partial.open("wb") as output,
                tqdm(
                    desc=f"Downloading {destination.name}",
                    total=total_size,
                    unit="iB",
                    unit_scale=True,
                    unit_divisor=1024,
                ) as bar,
            ):
                for chunk in response.iter_content(chunk_size=8192):
                    bar.update(output.write(chunk))
    except requests.RequestException as e:
        partial.unlink(missing_ok=True)
        raise DownloadError(f"Error downloading {url}: {e}") from e

    if not zipfile.is_zipfile(partial):
        partial.unlink(missing_ok=True)
        raise DownloadError(f"{url} did not return a ZIP archive.")
    partial.replace(destination)


def locale_members(archive: zipfile.ZipFile) -> list[tuple[zipfile.ZipInfo, str]]:
    """Archive members that are locale files, paired with their file names."""
    members = []
    for member in archive.infolist():
        match = LOCALE_MEMBER_PATTERN.match(member.filename)
        if match and not member.is_dir():
            members.append((member, match.group("name")))
    return members


def extract_locale_files(archive_path: Path, destination: Path) -> list[Path]:
    """Unpack ``common/main/*.xml`` into ``destination/common/main``.

    Every unpacked file must be an LDML document.

    Returns:
        Paths of the written locale files, in archive order.

    Raises:
        ExtractionError: If the archive is unreadable, has no locale files,
            or carries a locale file that is not LDML.
    """
    main_dir = destination.joinpath(*CLDR_MAIN_SUBDIR)
    written: list[Path] = []
    try:
        with zipfile.ZipFile(archive_path) as archive:
            members = locale_members(archive)
            if not members:
                raise ExtractionError(
                    f"'{archive_path}' contains no common/main/*.xml locale files."
                )
            main_dir.mkdir(parents=True, exist_ok=True)
            for member, name in tqdm(
                members, desc=f"Extracting {archive_path.name}", unit="locale"
            ):
                data = archive.read(member)
                try:
                    document = LocaleDocument.parse(data, source=member.filename)
                except MalformedCldrDataError as e:
                    raise ExtractionError(str(e)) from e
                if document.root.tag != LDML_ROOT_TAG:
                    raise ExtractionError(
                        f"{member.filename} is not an LDML document."
                    )
                target = main_dir / name
                target.write_bytes(data)
                written.append(target)
    except zipfile.BadZipFile as e:
        raise ExtractionError(
            f"Failed to open zip file '{archive_path}'. It may be corrupted."
        ) from e
    except OSError as e:
        raise ExtractionError(f"Error extracting archive: {e}") from e
    return written
