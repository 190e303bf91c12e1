"""Tests for the Font facade."""

import pytest
from fontTools.pens.recordingPen import RecordingPen

from boxdraw.core import Font, build_recipe_table
from boxdraw.domain import HorBar, HorHalfBar, Metrics, Point, Side, VertHalfBar
from boxdraw.exceptions import GlyphNotFoundError
from boxdraw.io import RecordingCanvas


@pytest.fixture
def font() -> Font:
    """Create a font with default metrics and the bundled recipes."""
    return Font()


class TestLookup:
    """Tests for recipe lookup."""

    def test_contains(self, font: Font) -> None:
        """contains() agrees with what draw_to can draw."""
        assert font.contains(0x2500)
        assert font.contains(0x259F)
        assert not font.contains(0x41)
        assert not font.contains(0x25A0)
        assert 0x2588 in font

    def test_code_points(self, font: Font) -> None:
        code_points = font.code_points()
        assert len(font) == len(code_points) == 160
        assert code_points == sorted(code_points)
        assert code_points[0] == 0x2500
        assert code_points[-1] == 0x259F

    def test_recipe(self, font: Font) -> None:
        recipe = font.recipe(0x2500)
        assert recipe.name == "lighthorzbxd"
        assert len(recipe.commands) == 1

    def test_commands_resolve_against_metrics(self, font: Font) -> None:
        assert font.commands(0x2501) == [HorBar(fatness=2.0)]
        assert font.commands(0x250C) == [
            HorHalfBar(side=Side.TOP_RIGHT, butt_left=160.0),
            VertHalfBar(side=Side.BOTTOM_RIGHT),
        ]

    def test_custom_table(self) -> None:
        table = build_recipe_table((("bar", "41", ("horBar(boxPen)",)),))
        font = Font(table=table)
        assert font.contains(0x41)
        assert not font.contains(0x2500)


class TestDraw:
    """Tests for drawing glyphs."""

    def test_light_horizontal(self, font: Font) -> None:
        """U+2500 is one rectangle across the glyph plus half butts."""
        canvas = RecordingCanvas()
        font.draw_to(0x2500, canvas)
        assert canvas.value == [
            ("move_to", (Point(-80.0, 220.0),)),
            ("line_to", (Point(680.0, 220.0),)),
            ("line_to", (Point(680.0, 380.0),)),
            ("line_to", (Point(-80.0, 380.0),)),
            ("close_path", ()),
        ]

    def test_metrics_change_outline(self) -> None:
        canvas = RecordingCanvas()
        Font(Metrics(stroke=100.0)).draw_to(0x2500, canvas)
        xs = [p.x for _, points in canvas.value for p in points]
        ys = [p.y for _, points in canvas.value for p in points]
        assert (min(xs), max(xs)) == (-50.0, 650.0)
        assert (min(ys), max(ys)) == (250.0, 350.0)

    def test_commands_draw_in_order(self, font: Font) -> None:
        """The horizontal half of U+250C is drawn before the vertical half."""
        canvas = RecordingCanvas()
        font.draw_to(0x250C, canvas)
        assert canvas.contour_count == 2
        assert canvas.value[0] == ("move_to", (Point(220.0, 220.0),))

    def test_missing_glyph(self, font: Font) -> None:
        canvas = RecordingCanvas()
        with pytest.raises(GlyphNotFoundError):
            font.draw_to(0x41, canvas)
        assert canvas.value == []

    def test_draw_is_repeatable(self, font: Font) -> None:
        first, second = RecordingCanvas(), RecordingCanvas()
        font.draw_to(0x256C, first)
        font.draw_to(0x256C, second)
        assert first.value == second.value

    def test_draw_to_pen(self, font: Font) -> None:
        pen = RecordingPen()
        font.draw_to_pen(0x2500, pen)
        assert pen.value[0] == ("moveTo", ((-80.0, 220.0),))
        assert pen.value[-1] == ("closePath", ())

    def test_svg_path(self, font: Font) -> None:
        path = font.svg_path(0x2500)
        assert path.startswith("M-80 220")
        assert "680" in path
        assert path.rstrip().endswith("Z")
