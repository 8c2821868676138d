"""Face style tags and shaping feature selection."""

from __future__ import annotations

from enum import Enum
from typing import Mapping


class FontStyle(str, Enum):
    """Style tag a face is registered under within a family."""

    THIN = "thin"
    EXTRA_LIGHT = "extra_light"
    LIGHT = "light"
    REGULAR = "regular"
    MEDIUM = "medium"
    SEMI_BOLD = "semi_bold"
    BOLD = "bold"
    EXTRA_BOLD = "extra_bold"
    BLACK = "black"
    ITALIC = "italic"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str | FontStyle) -> FontStyle:
        """Accept enum members, values, or names ("semibold", "Semi-Bold")."""
        if isinstance(value, FontStyle):
            return value
        normalized = value.strip().lower().replace("-", "_").replace(" ", "_")
        for style in cls:
            if normalized in (style.value, style.value.replace("_", "")):
                return style
        raise ValueError(f"Unknown font style: {value!r}")


# Longer keywords first so "extralight" is not read as "light".
_NAME_KEYWORDS: tuple[tuple[str, FontStyle], ...] = (
    ("extralight", FontStyle.EXTRA_LIGHT),
    ("light", FontStyle.LIGHT),
    ("medium", FontStyle.MEDIUM),
    ("regular", FontStyle.REGULAR),
    ("semibold", FontStyle.SEMI_BOLD),
    ("bold", FontStyle.BOLD),
)

_WEIGHT_FLOORS: tuple[tuple[int, FontStyle], ...] = (
    (900, FontStyle.BLACK),
    (800, FontStyle.EXTRA_BOLD),
    (700, FontStyle.BOLD),
    (600, FontStyle.SEMI_BOLD),
    (500, FontStyle.MEDIUM),
    (400, FontStyle.REGULAR),
    (300, FontStyle.LIGHT),
    (200, FontStyle.EXTRA_LIGHT),
)

DEFAULT_FEATURES: tuple[str, ...] = ("kern", "liga", "calt", "clig")


def style_from_full_name(full_name: str) -> FontStyle | None:
    """Read a weight keyword out of a face's full name, if there is one."""
    name = full_name.lower().replace(" ", "").replace("-", "").replace("_", "")
    for keyword, style in _NAME_KEYWORDS:
        if keyword in name:
            return style
    return None


def approximate_weight(weight: int | float) -> FontStyle:
    """Floor a numeric weight class onto the nearest named weight."""
    for floor, style in _WEIGHT_FLOORS:
        if weight >= floor:
            return style
    return FontStyle.THIN


def classify_face(full_name: str, weight: int | float, italic: bool) -> FontStyle | None:
    """Pick the style tag for a face.

    Upright faces use the full-name keyword, falling back to the weight
    class. Italic faces are only registered when they are regular weight;
    other slanted weights return None.
    """
    if italic:
        named = style_from_full_name(full_name)
        if named in (None, FontStyle.REGULAR) and approximate_weight(weight) == FontStyle.REGULAR:
            return FontStyle.ITALIC
        return None
    return style_from_full_name(full_name) or approximate_weight(weight)


def features_for(
    style: FontStyle, overrides: Mapping[str, bool] | None = None
) -> dict[str, bool]:
    """Shaping features for a style.

    All styles share DEFAULT_FEATURES; overrides are applied on top. Returns a new dict on every call so callers can never leak a toggle
    into another shaping call.
    """
    features = {tag: True for tag in DEFAULT_FEATURES}
    if overrides:
        features.update(overrides)
    return features
