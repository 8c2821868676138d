"""Pytest configuration and shared fixtures for svg-text2symbols tests.

Font-dependent tests use tiny TrueType fonts built on the fly with
fontTools' FontBuilder, so they run without any system fonts.

Test font geometry (design units, unitsPerEm=1000, ascent=800,
descent=-200, so size 1000 gives a scale factor of exactly 1):

    glyph id  name      char    advance  outline
    0         .notdef   -       500      none
    1         space     " "     250      none
    2         a         "a"     500      rectangle 100..400 x 0..500
    3         b         "b"     600      rectangle 100..500 x 0..700
    4         o         "o"     550      quadratic bowl
    5         empty     U+E000  0        none
"""

from __future__ import annotations

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from svg_text2symbols.config import Config
from svg_text2symbols.fonts import FontFace, FontFamily, FontStyle
from svg_text2symbols.glyphs import GlyphSymbolCache, OutlineTranscoder

UNITS_PER_EM = 1000
ASCENT = 800
DESCENT = -200

GLYPH_ORDER = [".notdef", "space", "a", "b", "o", "empty"]
GID = {name: i for i, name in enumerate(GLYPH_ORDER)}
ADVANCES = {".notdef": 500, "space": 250, "a": 500, "b": 600, "o": 550, "empty": 0}
CMAP = {0x20: "space", ord("a"): "a", ord("b"): "b", ord("o"): "o", 0xE000: "empty"}


def _rect(x0: int, y0: int, x1: int, y1: int):
    pen = TTGlyphPen(None)
    pen.moveTo((x0, y0))
    pen.lineTo((x0, y1))
    pen.lineTo((x1, y1))
    pen.lineTo((x1, y0))
    pen.closePath()
    return pen.glyph()


def _bowl():
    pen = TTGlyphPen(None)
    pen.moveTo((50, 500))
    pen.qCurveTo((275, -100), (500, 500))
    pen.closePath()
    return pen.glyph()


def _empty():
    return TTGlyphPen(None).glyph()


def build_test_font(
    path: Path,
    family: str = "Test Sans",
    style: str = "Regular",
    weight: int = 400,
    italic: bool = False,
    width_class: int = 5,
) -> Path:
    """Write a minimal TrueType font to path and return the path."""
    fb = FontBuilder(UNITS_PER_EM, isTTF=True)
    fb.setupGlyphOrder(GLYPH_ORDER)
    fb.setupCharacterMap(CMAP)
    glyphs = {
        ".notdef": _empty(),
        "space": _empty(),
        "a": _rect(100, 0, 400, 500),
        "b": _rect(100, 0, 500, 700),
        "o": _bowl(),
        "empty": _empty(),
    }
    fb.setupGlyf(glyphs)
    glyf = fb.font["glyf"]
    fb.setupHorizontalMetrics(
        {name: (ADVANCES[name], getattr(glyf[name], "xMin", 0)) for name in GLYPH_ORDER}
    )
    fb.setupHorizontalHeader(ascent=ASCENT, descent=DESCENT)
    fb.setupNameTable(
        {
            "familyName": family,
            "styleName": style,
            "fullName": f"{family} {style}",
            "psName": f"{family.replace(' ', '')}-{style.replace(' ', '')}",
        }
    )
    fb.setupOS2(
        sTypoAscender=ASCENT,
        sTypoDescender=DESCENT,
        usWinAscent=ASCENT,
        usWinDescent=-DESCENT,
        usWeightClass=weight,
        usWidthClass=width_class,
        fsSelection=0x01 if italic else 0x40,
    )
    fb.setupPost()
    fb.save(str(path))
    return path


@pytest.fixture(scope="session")
def font_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Directory holding the generated test fonts."""
    directory = tmp_path_factory.mktemp("fonts")
    build_test_font(directory / "TestSans-Regular.ttf")
    build_test_font(directory / "TestSans-Bold.ttf", style="Bold", weight=700)
    build_test_font(directory / "TestSans-Italic.ttf", style="Italic", italic=True)
    return directory


@pytest.fixture(scope="session")
def regular_font_path(font_dir: Path) -> Path:
    return font_dir / "TestSans-Regular.ttf"


@pytest.fixture(scope="session")
def bold_font_path(font_dir: Path) -> Path:
    return font_dir / "TestSans-Bold.ttf"


@pytest.fixture(scope="session")
def italic_font_path(font_dir: Path) -> Path:
    return font_dir / "TestSans-Italic.ttf"


@pytest.fixture
def regular_face(regular_font_path: Path) -> FontFace:
    return FontFace.load(regular_font_path)


@pytest.fixture
def bold_face(bold_font_path: Path) -> FontFace:
    return FontFace.load(bold_font_path)


@pytest.fixture
def family(regular_font_path: Path, bold_font_path: Path, italic_font_path: Path) -> FontFamily:
    """Regular, bold and italic faces of the test family."""
    return FontFamily.from_files([regular_font_path, bold_font_path, italic_font_path])


@pytest.fixture
def bold_only_family(bold_face: FontFace) -> FontFamily:
    """A family with no regular face, so fallback is impossible."""
    return FontFamily("Test Sans", {FontStyle.BOLD: bold_face})


@pytest.fixture
def symbol_cache() -> GlyphSymbolCache:
    return GlyphSymbolCache(OutlineTranscoder(precision=3))


@pytest.fixture
def config(regular_font_path: Path, bold_font_path: Path, italic_font_path: Path) -> Config:
    """Config rendering with the test fonts at scale factor 1."""
    return Config(
        font_files=[regular_font_path, bold_font_path, italic_font_path],
        size=1000,
        letter_spacing=0.1,
        precision=3,
    )


class FakeOutlineSource:
    """Outline source that counts decodes and serves fixed commands."""

    def __init__(self, key: str = "fake:0", outlines: dict | None = None) -> None:
        self._key = key
        self.outlines = outlines or {}
        self.calls: list[int] = []

    @property
    def key(self) -> str:
        return self._key

    def decode_outline(self, glyph_id: int):
        self.calls.append(glyph_id)
        return list(self.outlines.get(glyph_id, []))


@pytest.fixture
def fake_source() -> FakeOutlineSource:
    return FakeOutlineSource(
        outlines={
            1: [("M", ((0, 0),)), ("L", ((10, 0),)), ("L", ((10, 20),)), ("Z", ())],
            2: [],
        }
    )


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "requires_fonts: needs installed system fonts and fontconfig"
    )


requires_fonts = pytest.mark.skipif(
    not Path("/System/Library/Fonts").exists()
    and not Path("/usr/share/fonts").exists(),
    reason="System fonts not available",
)
