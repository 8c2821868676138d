"""Glyph geometry for svg-text2symbols.

This subpackage provides:
- Scale derivation from face metrics
- Outline recording and transcoding to SVG path data
- The per-document glyph symbol table
"""

from svg_text2symbols.glyphs.outline import (
    AffineTransform,
    OutlineRecorder,
    OutlineTranscoder,
    TranscodedOutline,
    format_number,
)
from svg_text2symbols.glyphs.scale import FaceMetrics, ScaleContext, derive_scale_context
from svg_text2symbols.glyphs.symbols import GlyphSymbolCache, SymbolDefinition

__all__ = [
    "AffineTransform",
    "OutlineRecorder",
    "OutlineTranscoder",
    "TranscodedOutline",
    "format_number",
    "FaceMetrics",
    "ScaleContext",
    "derive_scale_context",
    "GlyphSymbolCache",
    "SymbolDefinition",
]
