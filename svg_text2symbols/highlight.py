"""Highlighting collaborator interface.

A highlighter turns one line into (style attributes, substring) pairs.
Tokenizing and theme loading live outside this package; this module maps
their output onto styled spans the line layout understands.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol

from svg_text2symbols.fonts.styles import FontStyle
from svg_text2symbols.layout.line import StyledSpan


@dataclass(frozen=True)
class StyleAttributes:
    """Style of one highlighted token.

    color is (r, g, b, a) with 0-255 channels, or None for the default.
    """

    bold: bool = False
    italic: bool = False
    color: tuple[int, int, int, int] | None = None


class Highlighter(Protocol):
    """Splits one line into styled tokens using a named theme (None for the default)."""

    def highlight_line(
        self, line: str, theme: str | None = None
    ) -> list[tuple[StyleAttributes, str]]: ...


class PlainHighlighter:
    """Highlighter that returns the whole line unstyled."""

    def highlight_line(
        self, line: str, theme: str | None = None
    ) -> list[tuple[StyleAttributes, str]]:
        return [(StyleAttributes(), line)]


def style_from_attributes(attrs: StyleAttributes) -> FontStyle:
    """Italic wins over bold; anything else is regular."""
    if attrs.italic:
        return FontStyle.ITALIC
    if attrs.bold:
        return FontStyle.BOLD
    return FontStyle.REGULAR


def format_rgba(r: int, g: int, b: int, a: int = 255) -> str:
    """CSS rgba() with alpha normalised to 0-1 at three decimals."""
    return f"rgba({r},{g},{b},{a / 255:.3f})"


def spans_from_tokens(tokens: Iterable[tuple[StyleAttributes, str]]) -> list[StyledSpan]:
    """Convert highlighter output into StyledSpans, dropping empty tokens."""
    spans = []
    for attrs, text in tokens:
        if not text:
            continue
        color = format_rgba(*attrs.color) if attrs.color else None
        spans.append(StyledSpan(text, style_from_attributes(attrs), color))
    return spans
