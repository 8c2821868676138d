"""Document assembly: many laid-out lines into one symbol-table document."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from svg_text2symbols.glyphs.symbols import SymbolDefinition
from svg_text2symbols.layout.line import GlyphPlacement, LineLayout

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineGroup:
    """Placements of one line, shifted down by offset_y."""

    offset_y: float
    placements: tuple[GlyphPlacement, ...]


@dataclass
class RenderedDocument:
    """Unique symbol definitions, per-line groups and the canvas size."""

    symbols: list[SymbolDefinition] = field(default_factory=list)
    lines: list[LineGroup] = field(default_factory=list)
    width: float = 0.0
    height: float = 0.0

    @property
    def placement_count(self) -> int:
        return sum(len(line.placements) for line in self.lines)


class DocumentAssembler:
    """Folds line layouts into a RenderedDocument.

    Every line advances the vertical offset by the configured line height
    (the font size), not by its measured height. Lines that failed to lay
    out are simply never added and so take no space.
    """

    def __init__(self, line_height: float) -> None:
        self.line_height = line_height
        self._offset = 0.0
        self._width = 0.0
        self._lines: list[LineGroup] = []
        self._symbols: dict[str, SymbolDefinition] = {}

    def __len__(self) -> int:
        return len(self._lines)

    def add_line(self, layout: LineLayout) -> LineGroup:
        group = LineGroup(self._offset, tuple(layout.placements))
        self._lines.append(group)

        for symbol in layout.symbols:
            self._symbols.setdefault(symbol.id, symbol)

        self._width = max(self._width, layout.bbox.x_max)
        self._offset += self.line_height
        return group

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._offset

    def build(self) -> RenderedDocument:
        logger.debug(
            "Assembled %d lines, %d symbols, canvas %.3fx%.3f",
            len(self._lines),
            len(self._symbols),
            self._width,
            self._offset,
        )
        return RenderedDocument(
            symbols=list(self._symbols.values()),
            lines=list(self._lines),
            width=self._width,
            height=self._offset,
        )
