#!/usr/bin/env python3
"""CLI entrypoint for generating CoffeeTranslation name files from CLDR data."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ct_locale_scraper import __version__
from ct_locale_scraper.io import CldrFileNotFoundError
from ct_locale_scraper.ldml import MalformedCldrDataError
from ct_locale_scraper.models import ScraperConfig
from ct_locale_scraper.processing import (
    collect_language_entries,
    collect_territory_entries,
    infer_locale_name,
    resolve_locale_document,
)
from ct_locale_scraper.writers import write_i18n

BANNER = f"CoffeeTranslation Locale Scraper version {__version__}"
LANGUAGE_NAMES_ENDPOINT = "language_names"
COUNTRY_NAMES_ENDPOINT = "country_names"

app = typer.Typer(
    help="Generate CoffeeTranslation language and country name files from CLDR data.",
    add_completion=False,
    rich_markup_mode=None,
)


def show_help(ctx: typer.Context, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    typer.echo(ctx.get_help(), err=True)
    typer.echo(BANNER, err=True)
    raise typer.Exit()


@app.command(context_settings={"help_option_names": []})
def main(
    language_path: Annotated[
        str | None,
        typer.Option(
            "--language-path",
            help="The folder to write output files to.",
        ),
    ] = None,
    cldr_path: Annotated[
        Path | None,
        typer.Option(
            "--cldr-path",
            help="The path storing CLDR definition files.",
        ),
    ] = None,
    cldr_language_name: Annotated[
        str | None,
        typer.Option(
            "--cldr-language-name",
            help="(Optional) Manually specify the name in the CLDR.",
        ),
    ] = None,
    help_: Annotated[
        bool,
        typer.Option(
            "--help",
            "-h",
            "-?",
            help="Shows this help menu.",
            is_eager=True,
            callback=show_help,
        ),
    ] = False,
) -> None:
    """Write language_names.i18n and country_names.i18n for one locale."""
    typer.echo(BANNER, err=True)

    if language_path is None:
        typer.echo("Must specify language-path option. Exiting...", err=True)
        return
    if cldr_path is None:
        typer.echo("Must specify cldr-path option. Exiting...", err=True)
        return

    config = ScraperConfig(
        language_path=language_path,
        cldr_path=cldr_path,
        cldr_manual_name=cldr_language_name,
    )
    typer.echo(f"Using language folder path: {config.language_path}", err=True)
    typer.echo(f"Using CLDR path: {config.cldr_path}", err=True)
    if config.cldr_manual_name is not None:
        typer.echo(
            f"Using manual CLDR language name: {config.cldr_manual_name}", err=True
        )

    locale_name = infer_locale_name(config)
    try:
        typer.echo(f"Loading CLDR locale {locale_name}...", err=True)
        document = resolve_locale_document(config, locale_name)
        if document.merged_from:
            typer.echo(f"Merged base locale data from {document.merged_from}", err=True)

        language_entries = collect_language_entries(document)
        language_output = config.output_path(LANGUAGE_NAMES_ENDPOINT)
        typer.echo(
            f"Writing {len(language_entries)} languages to {language_output}...",
            err=True,
        )
        write_i18n(language_output, language_entries)

        territory_entries = collect_territory_entries(document)
        country_output = config.output_path(COUNTRY_NAMES_ENDPOINT)
        typer.echo(
            f"Writing {len(territory_entries)} countries to {country_output}...",
            err=True,
        )
        write_i18n(country_output, territory_entries)
    except CldrFileNotFoundError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    except (MalformedCldrDataError, OSError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(
        f"\nSuccessfully wrote {locale_name} names to {config.language_path}",
        fg=typer.colors.GREEN,
        bold=True,
        err=True,
    )


if __name__ == "__main__":
    app()
