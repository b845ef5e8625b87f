"""
render.py - Glyph rendering through pyfiglet and whitespace stripping
"""

from __future__ import annotations

from collections.abc import Iterable

from pyfiglet import Figlet, FigletFont


class _FontFiglet(Figlet):
    """Figlet that renders with a font object instead of loading one by name."""

    def __init__(self, font: FigletFont, width: int):
        self._loaded = font
        super().__init__(font=font.font, justify="left", width=width)

    def setFont(self, **kwargs):
        self.Font = self._loaded


def _line_width(font: FigletFont, text: str) -> int:
    # Wide enough that pyfiglet never wraps onto a second row of glyphs
    widest = max(font.width.values(), default=1)
    return 80 + widest * (len(text) + 1)


def render_text(font: FigletFont, text: str) -> str:
    figlet = _FontFiglet(font, width=_line_width(font, text))
    return str(figlet.renderText(text))


def strip_whitespace(raw: str | Iterable[str]) -> list[str]:
    """
    Remove whitespace that carries no visual meaning from a rendered block.

    Trailing whitespace goes from every line, blank lines go from the top
    and bottom, and the indent shared by all non-blank lines is removed.
    Stripping an already stripped block returns it unchanged.
    """
    lines = raw.splitlines() if isinstance(raw, str) else list(raw)
    lines = [line.rstrip() for line in lines]

    while lines and not lines[0]:
        lines.pop(0)
    while lines and not lines[-1]:
        lines.pop()

    indents = [len(line) - len(line.lstrip(" ")) for line in lines if line]
    indent = min(indents, default=0)
    if indent:
        lines = [line[indent:] for line in lines]
    return lines
