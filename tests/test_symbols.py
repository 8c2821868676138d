"""Unit tests for svg_text2symbols.glyphs.symbols.GlyphSymbolCache."""

from svg_text2symbols.glyphs.scale import FaceMetrics, derive_scale_context
from svg_text2symbols.glyphs.symbols import GlyphSymbolCache

from conftest import FakeOutlineSource

SCALE = derive_scale_context(FaceMetrics(1000, 800, -200), 1000)


class TestGetOrCreate:
    """Tests for lazy creation and reuse of symbol definitions."""

    def test_first_call_decodes_and_defines(self, fake_source):
        """A miss transcodes the glyph once at the local origin."""
        cache = GlyphSymbolCache()
        symbol = cache.get_or_create(1, fake_source, SCALE)
        assert symbol.id == "g0"
        assert symbol.path_data == "M 0 0 L 10 0 L 10 -20 Z"
        assert symbol.has_outline is True
        assert fake_source.calls == [1]
        assert len(cache) == 1

    def test_repeated_calls_are_idempotent(self, fake_source):
        """The same (glyph, scale) returns the same id without re-decoding."""
        cache = GlyphSymbolCache()
        first = cache.get_or_create(1, fake_source, SCALE)
        second = cache.get_or_create(1, fake_source, SCALE)
        third = cache.get_or_create(1, fake_source, SCALE)
        assert first.id == second.id == third.id
        assert fake_source.calls == [1]
        assert cache.decode_count == 1
        assert len(cache) == 1

    def test_glyph_without_outline_gets_empty_definition(self, fake_source):
        """Empty outlines are cached like any other glyph."""
        cache = GlyphSymbolCache()
        symbol = cache.get_or_create(2, fake_source, SCALE)
        assert symbol.path_data == ""
        assert symbol.has_outline is False

    def test_same_glyph_id_in_different_faces_is_distinct(self):
        """Numeric glyph ids collide across fonts, so sources are part of the key."""
        square = [("M", ((0, 0),)), ("L", ((1, 0),)), ("L", ((1, 1),)), ("Z", ())]
        line = [("M", ((0, 0),)), ("L", ((5, 5),))]
        font_a = FakeOutlineSource("a.ttf:0", {7: square})
        font_b = FakeOutlineSource("b.ttf:0", {7: line})
        cache = GlyphSymbolCache()
        sym_a = cache.get_or_create(7, font_a, SCALE)
        sym_b = cache.get_or_create(7, font_b, SCALE)
        assert sym_a.id != sym_b.id
        assert sym_a.path_data != sym_b.path_data
        assert len(cache) == 2

    def test_different_scale_gets_new_definition(self, fake_source):
        """Definitions are scale-specific."""
        cache = GlyphSymbolCache()
        other = derive_scale_context(FaceMetrics(1000, 800, -200), 500)
        small = cache.get_or_create(1, fake_source, other)
        large = cache.get_or_create(1, fake_source, SCALE)
        assert small.id != large.id
        assert small.path_data == "M 0 0 L 5 0 L 5 -10 Z"

    def test_ids_follow_creation_order(self, fake_source):
        """Arena ids count up from the prefix."""
        cache = GlyphSymbolCache(id_prefix="glyph-")
        ids = [cache.get_or_create(g, fake_source, SCALE).id for g in (2, 1, 2)]
        assert ids == ["glyph-0", "glyph-1", "glyph-0"]
        assert [d.id for d in cache] == ["glyph-0", "glyph-1"]


class TestSessionScope:
    """Tests for lookup and reset between documents."""

    def test_get_and_contains(self, fake_source):
        cache = GlyphSymbolCache()
        symbol = cache.get_or_create(1, fake_source, SCALE)
        assert symbol.id in cache
        assert cache.get(symbol.id) == symbol
        assert cache.get("missing") is None
        assert "missing" not in cache

    def test_new_cache_starts_empty(self, fake_source):
        """Each session begins with no definitions."""
        first = GlyphSymbolCache()
        first.get_or_create(1, fake_source, SCALE)
        second = GlyphSymbolCache()
        assert len(second) == 0
        assert second.definitions() == []

    def test_clear_resets_definitions_and_ids(self, fake_source):
        """After clear() the next glyph is decoded again and ids restart."""
        cache = GlyphSymbolCache()
        cache.get_or_create(1, fake_source, SCALE)
        cache.clear()
        assert len(cache) == 0
        symbol = cache.get_or_create(1, fake_source, SCALE)
        assert symbol.id == "g0"
        assert fake_source.calls == [1, 1]

    def test_real_face_glyph(self, regular_face, symbol_cache):
        """Glyphs from a loaded font become flipped path data."""
        scale = derive_scale_context(regular_face.metrics, 1000)
        symbol = symbol_cache.get_or_create(2, regular_face, scale)
        assert symbol.has_outline is True
        assert symbol.path_data.startswith("M ")
        assert "-500" in symbol.path_data
        space = symbol_cache.get_or_create(1, regular_face, scale)
        assert space.path_data == ""
        assert space.has_outline is False
