"""Text shaping for svg-text2symbols.

This subpackage provides:
- HarfBuzz text shaping wrapper
- Shaped glyph records in design units
"""

from svg_text2symbols.shaping.harfbuzz import (
    HarfBuzzShaper,
    ShapedGlyph,
    create_hb_font,
    shape_text,
)

__all__ = [
    "HarfBuzzShaper",
    "ShapedGlyph",
    "create_hb_font",
    "shape_text",
]
