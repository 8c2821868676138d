"""Per-document glyph symbol table.

Each unique glyph is transcoded once, at the local origin, and then
referenced by id from every placement. Glyph ids are only unique inside
one font face, so entries are keyed by the outline source as well and a
cache must never outlive the document it was created for.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from svg_text2symbols.glyphs.outline import (
    AffineTransform,
    OutlineSource,
    OutlineTranscoder,
)
from svg_text2symbols.glyphs.scale import ScaleContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SymbolDefinition:
    """Position-independent path for one glyph of one face."""

    id: str
    path_data: str
    has_outline: bool


class GlyphSymbolCache:
    """Arena of SymbolDefinitions for a single render session.

    Definitions are stored in creation order; the index maps
    (source key, glyph id, scale) to a position in the arena.
    """

    def __init__(self, transcoder: OutlineTranscoder | None = None, id_prefix: str = "g") -> None:
        self.transcoder = transcoder or OutlineTranscoder()
        self.id_prefix = id_prefix
        self._definitions: list[SymbolDefinition] = []
        self._index: dict[tuple[str, int, ScaleContext], int] = {}
        self.decode_count = 0

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[SymbolDefinition]:
        return iter(self._definitions)

    def __contains__(self, symbol_id: object) -> bool:
        return any(d.id == symbol_id for d in self._definitions)

    def get_or_create(
        self, glyph_id: int, source: OutlineSource, scale: ScaleContext
    ) -> SymbolDefinition:
        """Return the definition for a glyph, transcoding it on first use."""
        key = (source.key, glyph_id, scale)
        slot = self._index.get(key)
        if slot is not None:
            return self._definitions[slot]

        transform = AffineTransform.flip_y(scale.scale_factor)
        outline = self.transcoder.transcode_glyph(source, glyph_id, transform)
        self.decode_count += 1

        definition = SymbolDefinition(
            id=f"{self.id_prefix}{len(self._definitions)}",
            path_data=outline.path_data,
            has_outline=outline.has_outline,
        )
        self._index[key] = len(self._definitions)
        self._definitions.append(definition)
        logger.debug(
            "New symbol %s for glyph %d of %s (outline=%s)",
            definition.id,
            glyph_id,
            source.key,
            outline.has_outline,
        )
        return definition

    def get(self, symbol_id: str) -> SymbolDefinition | None:
        for definition in self._definitions:
            if definition.id == symbol_id:
                return definition
        return None

    def definitions(self) -> list[SymbolDefinition]:
        return list(self._definitions)

    def clear(self) -> None:
        """Drop every definition; ids restart from zero."""
        self._definitions.clear()
        self._index.clear()
        self.decode_count = 0
