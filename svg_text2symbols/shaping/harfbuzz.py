"""HarfBuzz text shaping wrapper.

Glyphs are shaped at the face's native units-per-em, so advances and
offsets come back in design units and are scaled later by the layout.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

import uharfbuzz as hb

from svg_text2symbols.fonts.face import FontFace

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShapedGlyph:
    """One shaped glyph, all values in design units."""

    glyph_id: int
    x_advance: float
    y_advance: float = 0.0
    x_offset: float = 0.0
    y_offset: float = 0.0
    cluster: int = 0


def create_hb_font(face: FontFace) -> hb.Font:
    """HarfBuzz font for a face, scaled to its units-per-em."""
    hb_face = hb.Face(hb.Blob(face.data), face.font_index)
    hb_font = hb.Font(hb_face)
    upem = face.metrics.units_per_em
    hb_font.scale = (upem, upem)
    return hb_font


class HarfBuzzShaper:
    """Shapes text runs, keeping one HarfBuzz font per face."""

    def __init__(self) -> None:
        self._fonts: dict[str, hb.Font] = {}

    def _font_for(self, face: FontFace) -> hb.Font:
        font = self._fonts.get(face.key)
        if font is None:
            font = create_hb_font(face)
            self._fonts[face.key] = font
        return font

    def shape(
        self, text: str, face: FontFace, features: Mapping[str, bool] | None = None
    ) -> list[ShapedGlyph]:
        if not text:
            return []
        buf = hb.Buffer()
        buf.add_str(text)
        buf.guess_segment_properties()
        hb.shape(self._font_for(face), buf, dict(features or {}))

        glyphs = [
            ShapedGlyph(
                glyph_id=info.codepoint,
                x_advance=pos.x_advance,
                y_advance=pos.y_advance,
                x_offset=pos.x_offset,
                y_offset=pos.y_offset,
                cluster=info.cluster,
            )
            for info, pos in zip(buf.glyph_infos, buf.glyph_positions)
        ]
        logger.debug("Shaped %r into %d glyphs with %s", text, len(glyphs), face.full_name)
        return glyphs


def shape_text(
    text: str, face: FontFace, features: Mapping[str, bool] | None = None
) -> list[ShapedGlyph]:
    """One-off shaping call; use HarfBuzzShaper to reuse fonts across calls."""
    return HarfBuzzShaper().shape(text, face, features)
