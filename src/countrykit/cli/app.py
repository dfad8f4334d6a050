"""Main CLI application."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from countrykit import __version__
from countrykit.core.data.dataset import SubdivisionDataset, get_default_dataset
from countrykit.core.exceptions import DatasetFormatError
from countrykit.core.geo.country import Country
from countrykit.core.models.config import Settings

# Create main app
app = typer.Typer(
    name="countrykit",
    help="Country subdivision lookup",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]countrykit[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    data_dir: Annotated[
        Path | None,
        typer.Option(
            "--data-dir",
            "-d",
            help="Directory with <ALPHA2>.yaml/.json subdivision files",
            exists=True,
            file_okay=False,
            dir_okay=True,
        ),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """countrykit - look up states, provinces and regions by country."""
    settings = Settings()
    ctx.obj = (
        SubdivisionDataset(data_dir, suffixes=settings.file_suffixes)
        if data_dir
        else get_default_dataset()
    )


def _load_country(ctx: typer.Context, alpha2: str) -> Country:
    country = Country(alpha2, dataset=ctx.obj)
    try:
        country.subdivisions
    except DatasetFormatError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    return country


@app.command()
def subdivisions(
    ctx: typer.Context,
    alpha2: Annotated[str, typer.Argument(help="ISO 3166-1 alpha-2 country code")],
    locale: Annotated[
        str | None,
        typer.Option("--locale", "-l", help="Locale for translated names"),
    ] = None,
    types: Annotated[
        list[str] | None,
        typer.Option("--type", "-t", help="Only show subdivisions of this type"),
    ] = None,
) -> None:
    """List the subdivisions of a country."""
    country = _load_country(ctx, alpha2)
    locale = locale or Settings().default_locale

    selected = country.subdivisions_of_types(types) if types else country.subdivisions
    if not selected:
        console.print(f"[yellow]No subdivisions for {country.alpha2}[/yellow]")
        return

    table = Table(title=f"Subdivisions of {country.alpha2}")
    table.add_column("Code", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Type")

    for code, subdivision in selected.items():
        table.add_row(code, subdivision.translated_name(locale), subdivision.type)

    console.print(table)


@app.command()
def find(
    ctx: typer.Context,
    alpha2: Annotated[str, typer.Argument(help="ISO 3166-1 alpha-2 country code")],
    query: Annotated[str, typer.Argument(help="Subdivision code or name (exact)")],
) -> None:
    """Find a subdivision by code, name or translated name."""
    country = _load_country(ctx, alpha2)
    subdivision = country.find_subdivision_by_name(query)

    if subdivision is None:
        console.print(f"[red]No subdivision matching {query!r} in {country.alpha2}[/red]")
        raise typer.Exit(1)

    console.print(f"[bold]{subdivision.name}[/bold] ({subdivision.code})")
    console.print(f"  Type: {subdivision.type}")
    for locale, name in subdivision.translations.items():
        console.print(f"  {locale}: {name}")


@app.command()
def types(
    ctx: typer.Context,
    alpha2: Annotated[str, typer.Argument(help="ISO 3166-1 alpha-2 country code")],
    humanize: Annotated[
        bool,
        typer.Option("--humanize", "-H", help="Show types in display form"),
    ] = False,
) -> None:
    """List the subdivision types of a country."""
    country = _load_country(ctx, alpha2)
    names = country.humanized_subdivision_types() if humanize else country.subdivision_types()

    for name in names:
        console.print(f"  - {name}")


def main() -> None:
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
