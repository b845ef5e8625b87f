"""
Banner commands - Generate and preview
"""

from pathlib import Path
import sys

import typer

from springbanner.cli.shared import DEFAULT_PYPROJECT, console
from springbanner.config import BannerConfig, load_config
from springbanner.errors import BannerError
from springbanner.generator import generate as run_generate, generate_banner

TEXT_OPTION = typer.Option(None, "--text", "-t", help="Text rendered as ASCII art (default: project name)")
INCLUDE_INFO_OPTION = typer.Option(
    None, "--include-info/--no-include-info", help="Append the info line below the art"
)
INFO_OPTION = typer.Option(None, "--info", help="Info line template, ${project.version} is filled in")
FONT_OPTION = typer.Option(None, "--font", "-f", help="Built-in font name or file:<path>")
COLOR_OPTION = typer.Option(None, "--color", "-c", help="Color name, or 'default' for none")
NBSP_OPTION = typer.Option(
    None, "--use-nbsp/--no-use-nbsp", help="Replace spaces with non-breaking spaces"
)
VERSION_OPTION = typer.Option(None, "--project-version", help="Version for ${project.version}")
PYPROJECT_OPTION = typer.Option(
    DEFAULT_PYPROJECT, "--pyproject", help="Project file holding metadata and [tool.springbanner]"
)


def _load(pyproject: Path, **options: object) -> BannerConfig:
    try:
        return load_config(pyproject, **options)
    except BannerError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(1) from e


def generate(
    text: str | None = TEXT_OPTION,
    output_directory: Path | None = typer.Option(
        None, "--output-directory", "-o", help="Directory the banner file is written to"
    ),
    filename: str | None = typer.Option(None, "--filename", help="Banner file name"),
    include_info: bool | None = INCLUDE_INFO_OPTION,
    info: str | None = INFO_OPTION,
    font: str | None = FONT_OPTION,
    color: str | None = COLOR_OPTION,
    use_nbsp: bool | None = NBSP_OPTION,
    project_version: str | None = VERSION_OPTION,
    pyproject: Path = PYPROJECT_OPTION,
) -> None:
    """Generate the banner file"""
    config = _load(
        pyproject,
        text=text,
        output_directory=output_directory,
        filename=filename,
        include_info=include_info,
        info=info,
        font=font,
        color=color,
        use_nbsp=use_nbsp,
        project_version=project_version,
    )

    try:
        path = run_generate(config)
    except BannerError as e:
        console.print(f"[red]Banner generation failed:[/red] {e}")
        raise typer.Exit(1) from e

    console.print(f"[green]✓ Banner written to {path}[/green]")


def preview(
    text: str | None = TEXT_OPTION,
    include_info: bool | None = INCLUDE_INFO_OPTION,
    info: str | None = INFO_OPTION,
    font: str | None = FONT_OPTION,
    color: str | None = COLOR_OPTION,
    use_nbsp: bool | None = NBSP_OPTION,
    project_version: str | None = VERSION_OPTION,
    pyproject: Path = PYPROJECT_OPTION,
) -> None:
    """Print the banner without writing a file"""
    config = _load(
        pyproject,
        text=text,
        include_info=include_info,
        info=info,
        font=font,
        color=color,
        use_nbsp=use_nbsp,
        project_version=project_version,
    )

    try:
        banner = generate_banner(config)
    except BannerError as e:
        console.print(f"[red]Banner generation failed:[/red] {e}")
        raise typer.Exit(1) from e

    # Raw output: rich would treat ${...} and [..] in the art as markup
    sys.stdout.write(banner)
