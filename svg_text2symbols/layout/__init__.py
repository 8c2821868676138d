"""Layout for svg-text2symbols.

This subpackage provides:
- Line layout of shaped glyphs into positioned symbol references
- Width-limited, whitespace-preferring line splitting
"""

from svg_text2symbols.layout.line import (
    GlyphPlacement,
    LineBoundingBox,
    LineLayout,
    LineLayoutEngine,
    StyledSpan,
)
from svg_text2symbols.layout.wrap import (
    WidthLineSplitter,
    read_lines,
    split_line,
    split_text,
)

__all__ = [
    "GlyphPlacement",
    "LineBoundingBox",
    "LineLayout",
    "LineLayoutEngine",
    "StyledSpan",
    "WidthLineSplitter",
    "read_lines",
    "split_line",
    "split_text",
]
