"""svg-text2symbols: Render text into symbol-deduplicated SVG.

This library provides:
- HarfBuzz text shaping with per-style face fallback
- Glyph outlines defined once per document and placed by reference
- Metrics-based line layout with letter spacing
- Streaming, width-limited line wrapping

Example:
    >>> from svg_text2symbols import Config, Text2SymbolsRenderer
    >>> renderer = Text2SymbolsRenderer(Config(font="DejaVu Sans", size=48))
    >>> renderer.render_text("Hello").save("hello.svg")
"""

from svg_text2symbols.api import RenderResult, Text2SymbolsRenderer
from svg_text2symbols.config import Config
from svg_text2symbols.exceptions import (
    ConfigError,
    FaceUnavailableError,
    FontNotFoundError,
    InvalidWidthError,
    OutlineDecodeError,
    RenderError,
    Text2SymbolsError,
)
from svg_text2symbols.fonts import FontFace, FontFamily, FontStyle
from svg_text2symbols.layout import WidthLineSplitter, split_text

__version__ = "0.1.0"

__all__ = [
    # Main API
    "Text2SymbolsRenderer",
    "RenderResult",
    "Config",
    # Fonts
    "FontFace",
    "FontFamily",
    "FontStyle",
    # Wrapping
    "WidthLineSplitter",
    "split_text",
    # Exceptions
    "Text2SymbolsError",
    "FontNotFoundError",
    "FaceUnavailableError",
    "OutlineDecodeError",
    "InvalidWidthError",
    "RenderError",
    "ConfigError",
    # Metadata
    "__version__",
]
