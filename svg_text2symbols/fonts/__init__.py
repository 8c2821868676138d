"""Font handling for svg-text2symbols.

This subpackage provides:
- Loaded faces with metrics and outline decoding (fontTools)
- Style tags, face classification and shaping feature selection
- Family resolution with a style fallback chain (fontconfig discovery)
"""

from svg_text2symbols.fonts.face import FontFace
from svg_text2symbols.fonts.resolver import FontFamily, list_families
from svg_text2symbols.fonts.styles import (
    DEFAULT_FEATURES,
    FontStyle,
    approximate_weight,
    classify_face,
    features_for,
    style_from_full_name,
)

__all__ = [
    "FontFace",
    "FontFamily",
    "list_families",
    "DEFAULT_FEATURES",
    "FontStyle",
    "approximate_weight",
    "classify_face",
    "features_for",
    "style_from_full_name",
]
