"""Unit tests for svg_text2symbols.glyphs.outline.

Covers number formatting, transcoding of each command type, the y-flip
transform, empty outlines and recording outlines from a real font.
"""

import pytest

from svg_text2symbols.glyphs.outline import (
    AffineTransform,
    OutlineRecorder,
    OutlineTranscoder,
    TranscodedOutline,
    format_number,
)


class TestFormatNumber:
    """Tests for coordinate formatting."""

    @pytest.mark.parametrize(
        "value,precision,expected",
        [
            (1.0, 6, "1"),
            (1.5, 6, "1.5"),
            (0.1234567, 3, "0.123"),
            (-0.0001, 2, "0"),
            (-2.25, 1, "-2.2"),
            (100.0, 0, "100"),
        ],
    )
    def test_format_number(self, value, precision, expected):
        """Fixed precision with trailing zeros and negative zero removed."""
        assert format_number(value, precision) == expected


class TestAffineTransform:
    """Tests for the scale + translate transform."""

    def test_flip_y_negates_vertical_scale(self):
        """flip_y produces (s, -s) so font y-up becomes SVG y-down."""
        t = AffineTransform.flip_y(2.0, 10, 20)
        assert (t.scale_x, t.scale_y) == (2.0, -2.0)
        assert t.apply(1, 1) == (12.0, 18.0)


class TestOutlineTranscoder:
    """Tests for command stream to path data conversion."""

    def test_all_command_types_in_order(self):
        """Every command keeps its order and arity in the output."""
        commands = [
            ("M", ((0, 0),)),
            ("L", ((10, 0),)),
            ("Q", ((15, 5), (10, 10))),
            ("C", ((8, 12), (2, 12), (0, 10))),
            ("Z", ()),
        ]
        result = OutlineTranscoder().transcode(commands, AffineTransform(1, 1))
        assert result.path_data == "M 0 0 L 10 0 Q 15 5 10 10 C 8 12 2 12 0 10 Z"
        assert result.has_outline is True

    def test_transform_flips_and_translates(self):
        """Points are scaled, y negated and then translated."""
        commands = [("M", ((100, 200),)), ("L", ((300, 0),)), ("Z", ())]
        result = OutlineTranscoder().transcode(commands, AffineTransform.flip_y(0.5, 10, 100))
        assert result.path_data == "M 60 0 L 160 100 Z"

    def test_multiple_subpaths_are_not_merged(self):
        """Two contours stay two M...Z subpaths."""
        commands = [
            ("M", ((0, 0),)), ("L", ((1, 0),)), ("L", ((1, 1),)), ("Z", ()),
            ("M", ((5, 5),)), ("L", ((6, 5),)), ("L", ((6, 6),)), ("Z", ()),
        ]
        result = OutlineTranscoder().transcode(commands, AffineTransform(1, 1))
        assert result.path_data.count("M ") == 2
        assert result.path_data.count("Z") == 2
        assert result.path_data.index("M 5 5") > result.path_data.index("Z")

    def test_empty_outline_is_success_without_outline(self):
        """A glyph with no contours (like a space) gives empty path data."""
        result = OutlineTranscoder().transcode([], AffineTransform(1, -1))
        assert result == TranscodedOutline("", False)
        assert result == TranscodedOutline.empty()

    def test_move_only_outline_is_not_visible(self):
        """Moves and closes alone draw nothing."""
        result = OutlineTranscoder().transcode([("M", ((1, 1),)), ("Z", ())], AffineTransform(1, 1))
        assert result.has_outline is False

    def test_precision_applies_to_coordinates(self):
        """Coordinates are rounded to the configured precision."""
        result = OutlineTranscoder(precision=2).transcode(
            [("M", ((1 / 3, 2 / 3),))], AffineTransform(1, 1)
        )
        assert result.path_data == "M 0.33 0.67"

    def test_unknown_command_raises(self):
        """Unknown opcodes are a programming error."""
        with pytest.raises(ValueError, match="Unknown outline command"):
            OutlineTranscoder().transcode([("X", ())], AffineTransform(1, 1))

    def test_wrong_arity_raises(self):
        """Commands must carry the right number of points."""
        with pytest.raises(ValueError, match="expects 2 points"):
            OutlineTranscoder().transcode([("Q", ((0, 0),))], AffineTransform(1, 1))


class TestOutlineRecorder:
    """Tests for recording outlines from fontTools glyphs."""

    def test_records_rectangle_glyph(self, regular_face):
        """The 'a' rectangle records a move, lines and a close."""
        recorder = OutlineRecorder(regular_face.glyph_set)
        regular_face.glyph_set["a"].draw(recorder)
        ops = [op for op, _ in recorder.commands]
        assert ops[0] == "M"
        assert ops[-1] == "Z"
        assert "L" in ops
        points = {pt for _, pts in recorder.commands for pt in pts}
        assert points <= {(100, 0), (100, 500), (400, 500), (400, 0)}

    def test_records_quadratic_segments(self, regular_face):
        """TrueType quadratic curves come out as Q commands."""
        recorder = OutlineRecorder(regular_face.glyph_set)
        regular_face.glyph_set["o"].draw(recorder)
        assert any(op == "Q" for op, _ in recorder.commands)

    def test_empty_glyph_records_nothing(self, regular_face):
        """The space glyph has no contours."""
        recorder = OutlineRecorder(regular_face.glyph_set)
        regular_face.glyph_set["space"].draw(recorder)
        assert recorder.commands == []
