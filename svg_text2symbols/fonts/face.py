"""A single loaded font face."""

from __future__ import annotations

import logging
from functools import cached_property
from io import BytesIO
from pathlib import Path

from fontTools.ttLib import TTFont

from svg_text2symbols.exceptions import OutlineDecodeError
from svg_text2symbols.glyphs.outline import OutlineCommand, OutlineRecorder
from svg_text2symbols.glyphs.scale import FaceMetrics

logger = logging.getLogger(__name__)

# OS/2 fsSelection bit 0, head.macStyle bit 1
_FS_ITALIC = 0x01
_MAC_ITALIC = 0x02
# OS/2 usWidthClass of a normal (not condensed or expanded) face
NORMAL_WIDTH = 5


class FontFace:
    """fontTools TTFont plus the raw bytes HarfBuzz needs.

    The face index matters for TTC collections: fontTools and HarfBuzz
    must both be pointed at the same face.
    """

    def __init__(self, path: Path, data: bytes, ttfont: TTFont, font_index: int = 0) -> None:
        self.path = Path(path)
        self.data = data
        self.ttfont = ttfont
        self.font_index = font_index

    @classmethod
    def load(cls, path: Path | str, font_index: int = 0) -> FontFace:
        path = Path(path)
        data = path.read_bytes()
        ttfont = TTFont(BytesIO(data), fontNumber=font_index, lazy=True)
        logger.debug("Loaded face %s:%d", path.name, font_index)
        return cls(path, data, ttfont, font_index)

    @property
    def key(self) -> str:
        return f"{self.path}:{self.font_index}"

    def __repr__(self) -> str:
        return f"FontFace({self.full_name!r}, {self.path.name}:{self.font_index})"

    @cached_property
    def metrics(self) -> FaceMetrics:
        hhea = self.ttfont["hhea"]
        return FaceMetrics(
            units_per_em=self.ttfont["head"].unitsPerEm,
            ascent=hhea.ascent,
            descent=hhea.descent,
        )

    @cached_property
    def glyph_set(self):
        return self.ttfont.getGlyphSet()

    @cached_property
    def glyph_order(self) -> list[str]:
        return self.ttfont.getGlyphOrder()

    def _name(self, name_id: int) -> str | None:
        if "name" not in self.ttfont:
            return None
        record = self.ttfont["name"].getDebugName(name_id)
        return record or None

    @property
    def family_name(self) -> str:
        return self._name(16) or self._name(1) or self.path.stem

    @property
    def full_name(self) -> str:
        return self._name(4) or self.path.stem

    @property
    def weight(self) -> int:
        if "OS/2" in self.ttfont:
            return self.ttfont["OS/2"].usWeightClass
        return 400

    @property
    def width_class(self) -> int:
        if "OS/2" in self.ttfont:
            return self.ttfont["OS/2"].usWidthClass
        return NORMAL_WIDTH

    @property
    def is_italic(self) -> bool:
        if "OS/2" in self.ttfont and self.ttfont["OS/2"].fsSelection & _FS_ITALIC:
            return True
        return bool(self.ttfont["head"].macStyle & _MAC_ITALIC)

    def has_glyph(self, glyph_id: int) -> bool:
        return 0 <= glyph_id < len(self.glyph_order)

    def decode_outline(self, glyph_id: int) -> list[OutlineCommand]:
        """Record a glyph's outline in font units.

        Any decoding failure degrades to an empty outline with a warning;
        the glyph still keeps its advance.
        """
        try:
            return self._record_outline(glyph_id)
        except OutlineDecodeError as e:
            logger.warning("%s (%s); treating as empty", e, self.full_name)
            return []

    def _record_outline(self, glyph_id: int) -> list[OutlineCommand]:
        if not self.has_glyph(glyph_id):
            raise OutlineDecodeError(glyph_id, "glyph id out of range")
        name = self.glyph_order[glyph_id]
        recorder = OutlineRecorder(self.glyph_set)
        try:
            self.glyph_set[name].draw(recorder)
        except Exception as e:
            raise OutlineDecodeError(glyph_id, str(e)) from e
        return recorder.commands
