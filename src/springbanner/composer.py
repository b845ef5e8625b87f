"""
composer.py - Assembles stripped glyph lines into the final banner text
"""

from __future__ import annotations

from collections.abc import Sequence

from springbanner.colors import color_tokens
from springbanner.config import BannerConfig

LINE_SEPARATOR = "\n"
VERSION_VARIABLE = "${project.version}"
NBSP = "\u00a0"


def render_info(config: BannerConfig) -> str | None:
    """Info line with ${project.version} filled in, None when there is none."""
    if not config.include_info or config.info is None:
        return None
    if config.project_version is None:
        return config.info
    return config.info.replace(VERSION_VARIABLE, config.project_version)


def compose(config: BannerConfig, lines: Sequence[str]) -> str:
    """
    Build the banner from glyph lines.

    Every line is preceded by a line separator, so the banner opens with an
    empty line. A color wraps the whole glyph block once: the open token
    before the first line, the reset token after the last.
    """
    tokens = color_tokens(config.color)
    parts: list[str] = []

    for index, line in enumerate(lines or [""]):
        parts.append(LINE_SEPARATOR)
        if tokens and index == 0:
            parts.append(tokens[0])
        parts.append(line)
    if tokens:
        parts.append(tokens[1])

    info = render_info(config)
    if info is not None:
        parts.append(LINE_SEPARATOR)
        parts.append(info)
    parts.append(LINE_SEPARATOR)

    banner = "".join(parts)
    if config.use_nbsp:
        banner = banner.replace(" ", NBSP)
    return banner
