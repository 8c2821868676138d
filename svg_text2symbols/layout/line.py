"""Line layout: shaped glyphs to positioned symbol references.

A line is made of one or more styled spans. Each span is resolved to a
face through the family's fallback chain, shaped, and placed left to
right from a shared cursor. Glyph geometry lives in the symbol cache;
placements only carry a symbol id and a position.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from svg_text2symbols.fonts.face import FontFace
from svg_text2symbols.fonts.resolver import FontFamily
from svg_text2symbols.fonts.styles import FontStyle, features_for
from svg_text2symbols.glyphs.scale import ScaleContext, derive_scale_context
from svg_text2symbols.glyphs.symbols import GlyphSymbolCache, SymbolDefinition
from svg_text2symbols.shaping.harfbuzz import HarfBuzzShaper, ShapedGlyph

logger = logging.getLogger(__name__)

Point = tuple[float, float]


@dataclass(frozen=True)
class StyledSpan:
    """A substring of a line with the style and colour to render it in."""

    text: str
    style: FontStyle = FontStyle.REGULAR
    color: str | None = None


@dataclass(frozen=True)
class GlyphPlacement:
    """One glyph occurrence: which symbol to draw and where."""

    symbol_id: str
    x: float
    y: float
    color: str | None = None


@dataclass
class LineBoundingBox:
    """Mutable box accumulated while a line is laid out."""

    x_min: float
    y_min: float
    x_max: float
    y_max: float

    @classmethod
    def at(cls, x: float, y: float) -> LineBoundingBox:
        return cls(x, y, x, y)

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    def include_x(self, x: float) -> None:
        self.x_min = min(self.x_min, x)
        self.x_max = max(self.x_max, x)

    def include_y(self, y: float) -> None:
        self.y_min = min(self.y_min, y)
        self.y_max = max(self.y_max, y)

    def copy(self) -> LineBoundingBox:
        return LineBoundingBox(self.x_min, self.y_min, self.x_max, self.y_max)


@dataclass
class LineLayout:
    """Result of laying out one line."""

    placements: list[GlyphPlacement]
    cursor_x: float
    bbox: LineBoundingBox
    symbols: list[SymbolDefinition] = field(default_factory=list)


class _LineCursor:
    """Cursor state shared by every run of one line."""

    def __init__(self, origin: Point) -> None:
        self.origin = origin
        self.x = origin[0]
        self.bbox = LineBoundingBox.at(*origin)
        self.placements: list[GlyphPlacement] = []
        self.symbols: dict[str, SymbolDefinition] = {}
        self.prev_visible = False
        self.placed_any = False
        self.trailing_spacing = 0.0

    def include_vertical(self, scale: ScaleContext) -> None:
        # Nominal metrics, not ink extents.
        top = self.origin[1]
        baseline = top + scale.scaled_ascent
        self.bbox.include_y(top)
        self.bbox.include_y(baseline - scale.scaled_descent)
        self.bbox.include_y(top + scale.target_size)

    def place_run(
        self,
        glyphs: Sequence[ShapedGlyph],
        face: FontFace,
        scale: ScaleContext,
        symbols: GlyphSymbolCache,
        letter_spacing: float,
        color: str | None = None,
    ) -> None:
        self.include_vertical(scale)
        spacing = scale.letter_spacing(letter_spacing)
        baseline = self.origin[1] + scale.scaled_ascent
        pen_y = 0.0

        for i, glyph in enumerate(glyphs):
            # No spacing at the start of the line or after an empty glyph.
            if self.placed_any and self.prev_visible:
                self.x += spacing
            self.bbox.include_x(self.x)

            symbol = symbols.get_or_create(glyph.glyph_id, face, scale)
            self.symbols.setdefault(symbol.id, symbol)

            x = self.x + glyph.x_offset * scale.scale_factor
            y = baseline - (pen_y + glyph.y_offset) * scale.scale_factor
            self.placements.append(GlyphPlacement(symbol.id, x, y, color))

            logger.debug(
                "%d/%d x=%.3f glyph=%d advance=%s offset=(%s, %s)",
                i + 1,
                len(glyphs),
                self.x,
                glyph.glyph_id,
                glyph.x_advance,
                glyph.x_offset,
                glyph.y_offset,
            )

            self.x += glyph.x_advance * scale.scale_factor
            pen_y += glyph.y_advance
            self.bbox.include_x(self.x)

            self.prev_visible = symbol.has_outline
            self.placed_any = True
            self.trailing_spacing = spacing

    def finish(self) -> LineLayout:
        if self.placed_any and self.prev_visible:
            self.bbox.include_x(self.x + self.trailing_spacing)
        logger.debug(
            "Line bbox x_min=%.3f y_min=%.3f x_max=%.3f y_max=%.3f",
            self.bbox.x_min,
            self.bbox.y_min,
            self.bbox.x_max,
            self.bbox.y_max,
        )
        return LineLayout(
            placements=self.placements,
            cursor_x=self.x,
            bbox=self.bbox.copy(),
            symbols=list(self.symbols.values()),
        )


class LineLayoutEngine:
    """Lays out lines for one document against a shared symbol cache.

    Args:
        family: Faces to render with.
        symbols: Session symbol cache; must belong to the same document.
        size: Target font size in output units.
        letter_spacing: Extra space between visible glyphs, in em.
        shaper: Shaping collaborator, defaults to HarfBuzz.
        feature_overrides: Per-tag feature switches applied on top of the
            defaults for every style.
    """

    def __init__(
        self,
        family: FontFamily,
        symbols: GlyphSymbolCache,
        size: float,
        letter_spacing: float = 0.0,
        shaper: HarfBuzzShaper | None = None,
        feature_overrides: dict[str, bool] | None = None,
    ) -> None:
        self.family = family
        self.symbols = symbols
        self.size = size
        self.letter_spacing = letter_spacing
        self.shaper = shaper or HarfBuzzShaper()
        self.feature_overrides = dict(feature_overrides or {})
        self._scales: dict[str, ScaleContext] = {}

    def scale_for(self, face: FontFace) -> ScaleContext:
        scale = self._scales.get(face.key)
        if scale is None:
            scale = derive_scale_context(face.metrics, self.size)
            self._scales[face.key] = scale
            logger.debug(
                "Scale for %s: factor=%s units_per_em=%s ascent=%s descent=%s",
                face.full_name,
                scale.scale_factor,
                scale.units_per_em,
                scale.ascent,
                scale.descent,
            )
        return scale

    def layout_glyphs(
        self,
        glyphs: Sequence[ShapedGlyph],
        face: FontFace,
        origin: Point = (0.0, 0.0),
        color: str | None = None,
    ) -> LineLayout:
        """Place an already shaped run of glyphs."""
        cursor = _LineCursor(origin)
        cursor.place_run(glyphs, face, self.scale_for(face), self.symbols, self.letter_spacing, color)
        return cursor.finish()

    def layout_line(self, line: str | Sequence[StyledSpan], origin: Point = (0.0, 0.0)) -> LineLayout:
        """Resolve, shape and place every span of a line.

        Raises:
            FaceUnavailableError: If a span's style and the regular face
                are both missing. The line should be skipped.
        """
        spans = [StyledSpan(line)] if isinstance(line, str) else list(line)
        cursor = _LineCursor(origin)

        if not any(span.text for span in spans):
            # Empty line still takes up one line of nominal height.
            _, face = self.family.resolve_face(FontStyle.REGULAR)
            cursor.include_vertical(self.scale_for(face))
            return cursor.finish()

        for span in spans:
            if not span.text:
                continue
            style, face = self.family.resolve_face(span.style)
            glyphs = self.shaper.shape(span.text, face, features_for(style, self.feature_overrides))
            cursor.place_run(
                glyphs,
                face,
                self.scale_for(face),
                self.symbols,
                self.letter_spacing,
                span.color,
            )
        return cursor.finish()
