"""SVG document assembly and output for svg-text2symbols.

This subpackage provides:
- Folding laid-out lines into a deduplicated symbol document
- SVG tree building (defs + use references) and serialization
"""

from svg_text2symbols.svg.document import DocumentAssembler, LineGroup, RenderedDocument
from svg_text2symbols.svg.writer import PaintStyle, build_svg, svg_to_string, write_svg

__all__ = [
    "DocumentAssembler",
    "LineGroup",
    "RenderedDocument",
    "PaintStyle",
    "build_svg",
    "svg_to_string",
    "write_svg",
]
