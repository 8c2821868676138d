"""Glyph outline recording and transcoding to SVG path data.

Outlines are drawn through a fontTools pen into a flat command stream,
then transcoded with an affine transform. Font space is y-up while SVG
is y-down, so callers pass a negative scale_y.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, Sequence

from fontTools.pens.basePen import BasePen

logger = logging.getLogger(__name__)

Point = tuple[float, float]
# (command, points) where command is one of M, L, Q, C, Z
OutlineCommand = tuple[str, tuple[Point, ...]]

MOVE = "M"
LINE = "L"
QUAD = "Q"
CUBIC = "C"
CLOSE = "Z"

_ARITY = {MOVE: 1, LINE: 1, QUAD: 2, CUBIC: 3, CLOSE: 0}


class OutlineSource(Protocol):
    """Anything that can decode a glyph's outline into commands."""

    @property
    def key(self) -> str: ...

    def decode_outline(self, glyph_id: int) -> list[OutlineCommand]: ...


class OutlineRecorder(BasePen):
    """Pen that records an outline as M/L/Q/C/Z commands.

    BasePen splits multi-point qCurveTo/curveTo calls into single segments
    and decomposes components through the glyph set.
    """

    def __init__(self, glyph_set=None) -> None:
        super().__init__(glyph_set)
        self.commands: list[OutlineCommand] = []

    def _moveTo(self, pt):
        self.commands.append((MOVE, (tuple(pt),)))

    def _lineTo(self, pt):
        self.commands.append((LINE, (tuple(pt),)))

    def _qCurveToOne(self, pt1, pt2):
        self.commands.append((QUAD, (tuple(pt1), tuple(pt2))))

    def _curveToOne(self, pt1, pt2, pt3):
        self.commands.append((CUBIC, (tuple(pt1), tuple(pt2), tuple(pt3))))

    def _closePath(self):
        self.commands.append((CLOSE, ()))

    def _endPath(self):
        # open contour: nothing to emit
        pass


@dataclass(frozen=True)
class AffineTransform:
    """Axis-aligned scale followed by a translation."""

    scale_x: float
    scale_y: float
    translate_x: float = 0.0
    translate_y: float = 0.0

    @classmethod
    def flip_y(cls, scale: float, translate_x: float = 0.0, translate_y: float = 0.0) -> AffineTransform:
        """Uniform scale that turns font y-up space into SVG y-down space."""
        return cls(scale, -scale, translate_x, translate_y)

    def apply(self, x: float, y: float) -> Point:
        return (self.translate_x + x * self.scale_x, self.translate_y + y * self.scale_y)


@dataclass(frozen=True)
class TranscodedOutline:
    """Path data together with whether the glyph has any visible outline."""

    path_data: str
    has_outline: bool

    @classmethod
    def empty(cls) -> TranscodedOutline:
        return cls("", False)


def format_number(value: float, precision: int = 6) -> str:
    """Format a coordinate with fixed precision and no trailing zeros."""
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


class OutlineTranscoder:
    """Convert outline command streams into SVG path data.

    Commands are emitted in the order decoded; subpaths are never merged
    or reordered.
    """

    def __init__(self, precision: int = 6) -> None:
        self.precision = precision

    def transcode(
        self, commands: Sequence[OutlineCommand], transform: AffineTransform
    ) -> TranscodedOutline:
        if not commands:
            return TranscodedOutline.empty()

        parts: list[str] = []
        for op, points in commands:
            if op not in _ARITY:
                raise ValueError(f"Unknown outline command: {op!r}")
            if len(points) != _ARITY[op]:
                raise ValueError(
                    f"Outline command {op} expects {_ARITY[op]} points, got {len(points)}"
                )
            if op == CLOSE:
                parts.append(CLOSE)
                continue
            coords = []
            for x, y in points:
                tx, ty = transform.apply(x, y)
                coords.append(format_number(tx, self.precision))
                coords.append(format_number(ty, self.precision))
            parts.append(f"{op} {' '.join(coords)}")

        has_outline = any(op != MOVE and op != CLOSE for op, _ in commands)
        return TranscodedOutline(" ".join(parts), has_outline)

    def transcode_glyph(
        self, source: OutlineSource, glyph_id: int, transform: AffineTransform
    ) -> TranscodedOutline:
        """Decode and transcode one glyph from an outline source."""
        return self.transcode(source.decode_outline(glyph_id), transform)
