"""
colors.py - Color names and the placeholder tokens written into banners

Tokens are not terminal escape codes: they are ${AnsiColor.*} placeholders
substituted by the application runtime when the banner is printed.
"""

from __future__ import annotations

from enum import Enum
import logging

logger = logging.getLogger(__name__)

RESET_TOKEN = "${AnsiColor.DEFAULT}"


class Color(Enum):
    DEFAULT = "default"
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    BRIGHT_BLACK = "bright_black"
    BRIGHT_RED = "bright_red"
    BRIGHT_GREEN = "bright_green"
    BRIGHT_YELLOW = "bright_yellow"
    BRIGHT_BLUE = "bright_blue"
    BRIGHT_MAGENTA = "bright_magenta"
    BRIGHT_CYAN = "bright_cyan"
    BRIGHT_WHITE = "bright_white"

    @property
    def is_default(self) -> bool:
        return self is Color.DEFAULT

    @property
    def token(self) -> str | None:
        """Open token for this color, None for the default sentinel."""
        if self.is_default:
            return None
        return "${AnsiColor." + self.name + "}"

    @classmethod
    def from_tag(cls, value: str | None) -> Color | None:
        """
        Look up a color by its tag value.

        Matching ignores case and accepts "-" or " " in place of "_", so
        "Bright Red", "bright-red" and "BRIGHT_RED" are the same color.
        Returns None for names that are not colors.
        """
        if value is None:
            return cls.DEFAULT
        key = value.strip().lower().replace("-", "_").replace(" ", "_")
        try:
            return cls(key)
        except ValueError:
            logger.debug("Unknown color %r, banner stays uncolored", value)
            return None


def color_tokens(value: str | None) -> tuple[str, str] | None:
    """Return (open, reset) tokens for a color tag, or None when uncolored."""
    color = Color.from_tag(value)
    if color is None or color.is_default:
        return None
    return color.token, RESET_TOKEN
