"""Font-size to design-unit scaling."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FaceMetrics:
    """Vertical metrics of a face, in design units.

    descent is negative below the baseline, as stored in the hhea table.
    """

    units_per_em: int
    ascent: float
    descent: float


@dataclass(frozen=True)
class ScaleContext:
    """Immutable scale derived once per (face, size) and shared read-only."""

    scale_factor: float
    units_per_em: int
    ascent: float
    descent: float
    target_size: float

    @property
    def scaled_ascent(self) -> float:
        return self.ascent * self.scale_factor

    @property
    def scaled_descent(self) -> float:
        return self.descent * self.scale_factor

    def letter_spacing(self, em: float) -> float:
        """Convert letter spacing given in em to output units."""
        return em * self.units_per_em * self.scale_factor


def derive_scale_context(metrics: FaceMetrics, target_size: float) -> ScaleContext:
    """Map the face's ascent-to-descent height onto target_size.

    A zero or inverted height is clamped to one design unit so degenerate
    metrics still produce a finite scale.
    """
    origin_height = max(metrics.ascent - metrics.descent, 1)
    return ScaleContext(
        scale_factor=target_size / origin_height,
        units_per_em=metrics.units_per_em,
        ascent=metrics.ascent,
        descent=metrics.descent,
        target_size=target_size,
    )
