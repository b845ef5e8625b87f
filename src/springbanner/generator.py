"""
generator.py - Runs one banner generation from configuration to file
"""

from __future__ import annotations

import logging
from pathlib import Path

from springbanner.composer import compose
from springbanner.config import BannerConfig
from springbanner.fonts import FontCatalog, FontResolver, parse_font_spec
from springbanner.render import render_text, strip_whitespace
from springbanner.writer import write_banner

logger = logging.getLogger(__name__)


def generate_banner(config: BannerConfig, catalog: FontCatalog | None = None) -> str:
    """Render, strip and compose the banner without writing it."""
    logger.info("Generating banner...")
    font = FontResolver(catalog).resolve(parse_font_spec(config.font))
    lines = strip_whitespace(render_text(font, config.text))
    banner = compose(config, lines)
    logger.debug("\n%s", banner)
    return banner


def generate(config: BannerConfig, catalog: FontCatalog | None = None) -> Path:
    banner = generate_banner(config, catalog)
    return write_banner(config.output_directory, config.filename, banner)
