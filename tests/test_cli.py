from pathlib import Path

import pytest
from typer.testing import CliRunner

from springbanner.__main__ import app
from springbanner.__version__ import __version__

runner = CliRunner()


@pytest.fixture(autouse=True)
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "Shop"\nversion = "2.5.0"\n', encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_version() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_no_command_shows_banner_and_usage() -> None:
    result = runner.invoke(app, [])
    assert result.exit_code == 0
    assert "Usage:" in result.output
    assert "generate" in result.output


def test_generate_uses_project_defaults(project_dir: Path) -> None:
    result = runner.invoke(app, ["generate", "--color", "magenta"])
    assert result.exit_code == 0, result.output

    banner = (project_dir / "build" / "banner.txt").read_text(encoding="utf-8")
    assert banner.startswith("\n${AnsiColor.MAGENTA}")
    assert "${application.version:2.5.0}" in banner
    assert banner.endswith("Active Profiles: ${spring.profiles.active:none}\n")


def test_generate_to_custom_location(project_dir: Path) -> None:
    result = runner.invoke(
        app,
        [
            "generate",
            "--text", "A",
            "--output-directory", "res/static",
            "--filename", "logo.txt",
            "--no-include-info",
        ],
    )
    assert result.exit_code == 0, result.output
    banner = (project_dir / "res" / "static" / "logo.txt").read_text(encoding="utf-8")
    assert banner == "\n    _\n   / \\\n  / _ \\\n / ___ \\\n/_/   \\_\\\n"


def test_generate_unknown_font_fails(project_dir: Path) -> None:
    result = runner.invoke(app, ["generate", "--font", "no-such-font"])
    assert result.exit_code == 1
    assert "does not exist" in result.output
    assert not (project_dir / "build").exists()


def test_generate_bad_project_file(project_dir: Path) -> None:
    (project_dir / "pyproject.toml").write_text("[tool.springbanner]\ncolour = 'red'\n", encoding="utf-8")
    result = runner.invoke(app, ["generate"])
    assert result.exit_code == 1
    assert "Configuration error" in result.output


def test_preview_prints_without_writing(project_dir: Path) -> None:
    result = runner.invoke(app, ["preview", "--text", "A", "--info", "v${project.version}", "--use-nbsp"])
    assert result.exit_code == 0, result.output
    assert result.output.endswith("\nv2.5.0\n")
    assert " " not in result.output
    assert not (project_dir / "build").exists()


def test_fonts_lists_builtin_fonts() -> None:
    result = runner.invoke(app, ["fonts"])
    assert result.exit_code == 0
    assert "standard" in result.output
    assert "slant" in result.output


def test_colors_lists_tokens() -> None:
    result = runner.invoke(app, ["colors"])
    assert result.exit_code == 0
    assert "bright_cyan" in result.output
    assert "${AnsiColor.DEFAULT}" in result.output
