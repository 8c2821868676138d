"""Exception hierarchy for svg-text2symbols.

All library errors derive from Text2SymbolsError so callers can catch
the whole family at once. IO failures are left as the builtin OSError
subclasses.
"""

from __future__ import annotations


class Text2SymbolsError(Exception):
    """Base class for all svg-text2symbols errors."""


class FontNotFoundError(Text2SymbolsError):
    """A font family resolved to no usable face files."""

    def __init__(self, family: str, message: str | None = None) -> None:
        self.family = family
        super().__init__(message or f"Font family not found: {family!r}")


class FaceUnavailableError(Text2SymbolsError):
    """Neither the requested style nor the regular face is available."""

    def __init__(self, family: str, style: str) -> None:
        self.family = family
        self.style = style
        super().__init__(
            f"No {style!r} or 'regular' face available for family {family!r}"
        )


class OutlineDecodeError(Text2SymbolsError):
    """A glyph outline could not be decoded from the font data."""

    def __init__(self, glyph_id: int, reason: str = "") -> None:
        self.glyph_id = glyph_id
        detail = f": {reason}" if reason else ""
        super().__init__(f"Failed to decode outline for glyph {glyph_id}{detail}")


class InvalidWidthError(Text2SymbolsError, ValueError):
    """Line wrapping width must be a positive number of code points."""

    def __init__(self, max_width: int) -> None:
        self.max_width = max_width
        super().__init__(f"max_width must be > 0, got {max_width!r}")


class RenderError(Text2SymbolsError):
    """A document could not be rendered because every line failed."""


class ConfigError(Text2SymbolsError):
    """Invalid configuration value or configuration file."""
