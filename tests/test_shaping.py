"""Tests for HarfBuzz shaping against the generated test fonts."""

from svg_text2symbols.shaping import HarfBuzzShaper, ShapedGlyph, shape_text

from conftest import ADVANCES, GID


class TestHarfBuzzShaper:
    """Tests for shaping runs in design units."""

    def test_glyph_ids_and_advances(self, regular_face):
        glyphs = shape_text("ab", regular_face)
        assert [g.glyph_id for g in glyphs] == [GID["a"], GID["b"]]
        assert [g.x_advance for g in glyphs] == [ADVANCES["a"], ADVANCES["b"]]
        assert all(g.y_offset == 0 for g in glyphs)

    def test_clusters_follow_text(self, regular_face):
        glyphs = shape_text("a b", regular_face)
        assert [g.cluster for g in glyphs] == [0, 1, 2]
        assert glyphs[1].glyph_id == GID["space"]

    def test_unmapped_character_is_notdef(self, regular_face):
        (glyph,) = shape_text("z", regular_face)
        assert glyph.glyph_id == 0

    def test_empty_text(self, regular_face):
        assert shape_text("", regular_face) == []

    def test_features_accepted(self, regular_face):
        glyphs = shape_text("ab", regular_face, {"kern": False, "liga": True})
        assert len(glyphs) == 2

    def test_fonts_reused_per_face(self, regular_face, bold_face):
        shaper = HarfBuzzShaper()
        shaper.shape("a", regular_face)
        shaper.shape("b", regular_face)
        shaper.shape("a", bold_face)
        assert len(shaper._fonts) == 2

    def test_shaped_glyph_defaults(self):
        glyph = ShapedGlyph(3, 500)
        assert (glyph.y_advance, glyph.x_offset, glyph.y_offset, glyph.cluster) == (0, 0, 0, 0)
