from .__version__ import __author__, __version__
from .colors import Color
from .composer import compose
from .config import BannerConfig, load_config, read_project_metadata
from .errors import (
    BannerError,
    CatalogUnavailableError,
    ConfigError,
    FontNotFoundError,
    WriteError,
)
from .fonts import BuiltInFont, ExternalFontFile, FontCatalog, FontResolver, parse_font_spec
from .generator import generate, generate_banner
from .render import render_text, strip_whitespace
from .writer import write_banner

__all__ = [
    "__version__",
    "__author__",
    "BannerConfig",
    "BannerError",
    "BuiltInFont",
    "CatalogUnavailableError",
    "Color",
    "ConfigError",
    "ExternalFontFile",
    "FontCatalog",
    "FontNotFoundError",
    "FontResolver",
    "WriteError",
    "compose",
    "generate",
    "generate_banner",
    "load_config",
    "parse_font_spec",
    "read_project_metadata",
    "render_text",
    "strip_whitespace",
    "write_banner",
]
