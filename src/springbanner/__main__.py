"""
Main CLI entry point - Registers all commands
"""

import logging

from rich.panel import Panel
from rich.text import Text
import typer

from springbanner.__version__ import __author__, __version__
from springbanner.cli import catalog, generate
from springbanner.cli.shared import console
from springbanner.config import BannerConfig
from springbanner.generator import generate_banner

# Create main app
app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
)


def render_banner() -> None:
    """Renders the tool's own banner through the banner pipeline"""
    width = console.width
    font = "slant" if width > 60 else "small"

    config = BannerConfig(text="springbanner", font=font, include_info=False)
    ascii_art = generate_banner(config).strip("\n")
    banner_text = Text(ascii_art, style="bold cyan")

    info_line = Text.assemble(
        (f"v{__version__}", "bold white"),
        (" | ", "dim"),
        ("Created by ", "italic white"),
        (f"{__author__}", "bold magenta"),
    )

    console.print(
        Panel(
            Text.assemble(banner_text, "\n\n", info_line),
            border_style="blue",
            padding=(1, 2),
            expand=False,
        ),
        justify="left",
    )


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: bool | None = typer.Option(None, "--version", "-v", help="Show version and exit"),
    verbose: bool | None = typer.Option(None, "--verbose", help="Enable verbose logging"),
) -> None:
    """springbanner: build-time ASCII art banners for application startup."""

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

    if version:
        console.print(f"springbanner Version: [bold cyan]{__version__}[/bold cyan]")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        render_banner()
        console.print("\n[bold yellow]Usage:[/bold yellow] springbanner [COMMAND] [ARGS]...")
        console.print("\n[bold cyan]Banner Commands:[/bold cyan]")
        console.print("  [green]generate[/green]  Write the banner file")
        console.print("  [green]preview[/green]   Print the banner without writing it")
        console.print("\n[bold cyan]Catalog:[/bold cyan]")
        console.print("  [green]fonts[/green]     List the built-in fonts")
        console.print("  [green]colors[/green]    List the supported colors")
        console.print("\nRun [white]springbanner --help[/white] for details.\n")


# Register all commands
app.command()(generate.generate)
app.command()(generate.preview)
app.command()(catalog.fonts)
app.command()(catalog.colors)


def main() -> None:
    """Main entry point"""
    app()


if __name__ == "__main__":
    main()
