#!/usr/bin/env python3
"""Download the CLDR locale files that `main.py` reads via --cldr-path."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ct_locale_scraper.archive import (
    CLDR_RELEASE,
    DownloadError,
    ExtractionError,
    cldr_archive_name,
    cldr_archive_url,
    download_cldr_archive,
    extract_locale_files,
)

DEFAULT_DESTINATION = Path("cldr")

app = typer.Typer(
    help="Fetch CLDR common/main locale files for use with --cldr-path.",
    add_completion=False,
)


@app.command()
def main(
    destination: Annotated[
        Path,
        typer.Option(
            "--destination",
            "-d",
            help="CLDR root; locale files land in its common/main folder.",
            file_okay=False,
            dir_okay=True,
            writable=True,
            resolve_path=True,
        ),
    ] = DEFAULT_DESTINATION,
    release: Annotated[
        str,
        typer.Option("--release", help="CLDR release to download (e.g., 48.0)."),
    ] = CLDR_RELEASE,
    cldr_zip: Annotated[
        Path | None,
        typer.Option(
            "--cldr-zip",
            help="Path to an existing cldr-common archive. Skips the download.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ] = None,
) -> None:
    """Unpack the locale files of a cldr-common release into --destination."""
    if cldr_zip:
        archive_path = cldr_zip
        typer.echo(f"Using existing CLDR archive: {archive_path}")
    else:
        archive_path = destination / cldr_archive_name(release)
        if archive_path.is_file():
            typer.echo(f"Using cached CLDR archive: {archive_path}")
        else:
            url = cldr_archive_url(release)
            typer.echo(f"Downloading {url}...")
            try:
                download_cldr_archive(url, archive_path)
            except DownloadError as e:
                typer.secho(str(e), fg=typer.colors.RED, err=True)
                raise typer.Exit(code=1)

    typer.echo(f"Extracting locale files from {archive_path.name}...")
    try:
        written = extract_locale_files(archive_path, destination)
    except ExtractionError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(
        f"\nCLDR data ready at {destination} ({len(written)} locales)",
        fg=typer.colors.GREEN,
        bold=True,
    )


if __name__ == "__main__":
    app()
