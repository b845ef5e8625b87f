"""
config.py - Banner configuration and project metadata lookup

Settings are merged from the built-in defaults, the project's pyproject.toml
([project] metadata and the [tool.springbanner] table) and explicit
overrides such as command line options.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib import metadata
import logging
from pathlib import Path
import tomllib
from typing import Any

from pydantic import BaseModel, ValidationError

from springbanner.errors import ConfigError

logger = logging.getLogger(__name__)

TOOL_TABLE = "springbanner"

DEFAULT_OUTPUT_DIRECTORY = Path("build")
DEFAULT_FILENAME = "banner.txt"
DEFAULT_FONT = "standard"
DEFAULT_COLOR = "default"
DEFAULT_INFO = (
    "Version: ${application.version:${project.version}}, "
    "Server: ${server.address:localhost}:${server.port:8080}, "
    "Active Profiles: ${spring.profiles.active:none}"
)


class BannerConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    text: str
    output_directory: Path = DEFAULT_OUTPUT_DIRECTORY
    filename: str = DEFAULT_FILENAME
    include_info: bool = True
    info: str | None = DEFAULT_INFO
    font: str = DEFAULT_FONT
    color: str = DEFAULT_COLOR
    use_nbsp: bool = False
    project_version: str | None = None

    @property
    def output_file(self) -> Path:
        return self.output_directory / self.filename


@dataclass(frozen=True)
class ProjectMetadata:
    name: str | None = None
    version: str | None = None
    settings: dict[str, Any] = field(default_factory=dict)


def _installed_version(name: str) -> str | None:
    try:
        return metadata.version(name)
    except metadata.PackageNotFoundError:
        return None


def read_project_metadata(pyproject: Path) -> ProjectMetadata:
    """Read name, version and [tool.springbanner] from a pyproject.toml."""
    if not pyproject.is_file():
        logger.debug("No project file at %s", pyproject)
        return ProjectMetadata()

    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Failed to read {pyproject}: {e}") from e

    project = data.get("project", {})
    name = project.get("name")
    version = project.get("version")
    if version is None and name and "version" in project.get("dynamic", []):
        version = _installed_version(name)

    settings = data.get("tool", {}).get(TOOL_TABLE, {})
    if not isinstance(settings, dict):
        raise ConfigError(f"[tool.{TOOL_TABLE}] in {pyproject} must be a table")

    return ProjectMetadata(name=name, version=version, settings=dict(settings))


def load_config(pyproject: Path | None = None, **overrides: Any) -> BannerConfig:
    """
    Build the configuration for one banner generation.

    Overrides set to None count as not given, so unset command line options
    fall through to the project file and then to the defaults.
    """
    project = read_project_metadata(pyproject) if pyproject else ProjectMetadata()

    values: dict[str, Any] = {
        "text": project.name or Path.cwd().name,
        "project_version": project.version,
    }
    values.update(project.settings)
    values.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return BannerConfig.model_validate(values)
    except ValidationError as e:
        raise ConfigError(f"Invalid banner configuration:\n{e}") from e
