"""High-level rendering API.

Text2SymbolsRenderer wires the pieces together for one document per call:
a fresh symbol cache and assembler, the line layout engine, and the SVG
writer. Glyph ids are only meaningful inside one face and one session,
so nothing is cached between documents.
"""

from __future__ import annotations

import io
import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from svg_text2symbols.config import Config
from svg_text2symbols.exceptions import FaceUnavailableError, FontNotFoundError, RenderError
from svg_text2symbols.fonts.resolver import FontFamily
from svg_text2symbols.glyphs.outline import OutlineTranscoder
from svg_text2symbols.glyphs.symbols import GlyphSymbolCache
from svg_text2symbols.highlight import Highlighter, PlainHighlighter, spans_from_tokens
from svg_text2symbols.layout.line import LineLayoutEngine
from svg_text2symbols.layout.wrap import WidthLineSplitter, read_lines
from svg_text2symbols.shaping.harfbuzz import HarfBuzzShaper
from svg_text2symbols.svg.document import DocumentAssembler, RenderedDocument
from svg_text2symbols.svg.writer import PaintStyle, build_svg, svg_to_string, write_svg

logger = logging.getLogger(__name__)


@dataclass
class RenderResult:
    """Outcome of rendering one document."""

    document: RenderedDocument
    success: bool = True
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    lines_rendered: int = 0
    lines_skipped: int = 0
    output_path: Path | None = None
    paint: PaintStyle = field(default_factory=PaintStyle)
    precision: int = 6
    animate: bool = False

    def to_element(self) -> ET.Element:
        return build_svg(self.document, self.paint, self.precision, self.animate)

    def to_svg_string(self) -> str:
        return svg_to_string(self.to_element())

    def save(self, path: Path | str) -> Path:
        self.output_path = write_svg(self.to_element(), path)
        return self.output_path


class Text2SymbolsRenderer:
    """Render text into symbol-deduplicated SVG documents.

    Args:
        config: Render settings; defaults to Config().
        family: Faces to render with. When omitted the family is built
            from config.font_files, or looked up by config.font.
        highlighter: Per-line style source, defaults to unstyled text.

    Raises:
        FontNotFoundError: If no family is given and config names none.
    """

    def __init__(
        self,
        config: Config | None = None,
        family: FontFamily | None = None,
        highlighter: Highlighter | None = None,
    ) -> None:
        self.config = config or Config()
        self.family = family or self._load_family(self.config)
        self.highlighter = highlighter or PlainHighlighter()
        self.shaper = HarfBuzzShaper()

    @staticmethod
    def _load_family(config: Config) -> FontFamily:
        if config.font_files:
            return FontFamily.from_files(config.font_files, config.font)
        if config.font:
            return FontFamily.from_system(config.font)
        raise FontNotFoundError("", "No font given: set a font family name or font files")

    @property
    def paint(self) -> PaintStyle:
        return PaintStyle(
            fill=self.config.fill,
            color=self.config.color,
            stroke_width=self.config.stroke_width,
            stroke_linejoin=self.config.stroke_linejoin,
            stroke_linecap=self.config.stroke_linecap,
        )

    def split(self, text: str) -> list[str]:
        """Break text into lines, width-wrapped when max_width is set.

        Only "\\n" ends a line (a trailing "\\r" is dropped), the same rule
        WidthLineSplitter and read_lines follow.
        """
        if self.config.max_width is not None:
            return list(WidthLineSplitter(text, self.config.max_width))
        return [line.rstrip("\r\n") for line in io.StringIO(text)]

    def render_lines(self, lines: Iterable[str], raise_on_error: bool = False) -> RenderResult:
        """Render lines into one document.

        A line whose faces cannot be resolved is skipped with a warning and
        takes no vertical space. The document only fails when every line
        failed.
        """
        symbols = GlyphSymbolCache(OutlineTranscoder(self.config.precision))
        engine = LineLayoutEngine(
            self.family,
            symbols,
            size=self.config.size,
            letter_spacing=self.config.letter_spacing,
            shaper=self.shaper,
            feature_overrides=self.config.features,
        )
        assembler = DocumentAssembler(line_height=self.config.size)

        warnings: list[str] = []
        total = 0
        for number, line in enumerate(lines, start=1):
            total += 1
            spans = spans_from_tokens(self.highlighter.highlight_line(line, self.config.theme))
            try:
                layout = engine.layout_line(spans)
            except FaceUnavailableError as e:
                message = f"Line {number} skipped: {e}"
                logger.warning(message)
                warnings.append(message)
                continue
            assembler.add_line(layout)

        result = RenderResult(
            document=assembler.build(),
            warnings=warnings,
            lines_rendered=len(assembler),
            lines_skipped=total - len(assembler),
            paint=self.paint,
            precision=self.config.precision,
            animate=self.config.animate,
        )
        if total and not len(assembler):
            result.success = False
            result.errors.append(f"All {total} lines failed to render")
            if raise_on_error:
                raise RenderError(result.errors[0])
        return result

    def render_text(self, text: str, raise_on_error: bool = False) -> RenderResult:
        return self.render_lines(self.split(text), raise_on_error)

    def render_file(
        self,
        input_path: Path | str,
        output_path: Path | str | None = None,
        raise_on_error: bool = False,
    ) -> RenderResult:
        """Render a UTF-8 text file, saving the SVG when output_path is given.

        Raises:
            FileNotFoundError: If the input file does not exist.
        """
        lines = read_lines(input_path, self.config.max_width)
        result = self.render_lines(lines, raise_on_error)
        if output_path is not None and result.success:
            result.save(output_path)
        return result
