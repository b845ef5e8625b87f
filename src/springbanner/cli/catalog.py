"""
Catalog commands - List built-in fonts and supported colors
"""

from rich.table import Table
import typer

from springbanner.cli.shared import console
from springbanner.colors import RESET_TOKEN, Color
from springbanner.errors import BannerError
from springbanner.fonts import FontCatalog


def fonts() -> None:
    """List the built-in fonts"""
    try:
        names = FontCatalog().sorted_names()
    except BannerError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1) from e

    table = Table(title="Built-in Fonts", header_style="bold magenta")
    table.add_column("Font", style="cyan")
    for name in names:
        table.add_row(name)

    console.print(table)
    console.print(f"[dim]{len(names)} fonts, use --font file:<path> for your own[/dim]")


def colors() -> None:
    """List the supported colors and their tokens"""
    table = Table(title="Banner Colors", header_style="bold magenta")
    table.add_column("Color", style="cyan")
    table.add_column("Token", style="dim")

    for color in Color:
        table.add_row(color.value, color.token or "-")

    console.print(table)
    console.print(f"Colored banners end with {RESET_TOKEN}", markup=False)
