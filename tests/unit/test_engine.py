"""Tests for the drawing engine."""

import math

import pytest

from boxdraw.core.engine import DrawingEngine, range_step, round_half_away
from boxdraw.domain import (
    Arc,
    Box,
    BoxShade,
    Command,
    DashedHorLine,
    DashedVertLine,
    Diagonal,
    Direction,
    HorBar,
    HorHalfBar,
    InnerCorner,
    Metrics,
    OuterCorner,
    Point,
    PolkaShade,
    Shade,
    Side,
    StripedShade,
    VertBar,
    VerticalShade,
    VertSplitBar,
)
from boxdraw.io import PathCall, RecordingCanvas


@pytest.fixture
def metrics() -> Metrics:
    """Create default metrics."""
    return Metrics()


@pytest.fixture
def canvas() -> RecordingCanvas:
    """Create a recording canvas."""
    return RecordingCanvas()


@pytest.fixture
def engine(metrics: Metrics, canvas: RecordingCanvas) -> DrawingEngine:
    """Create an engine drawing onto the recording canvas."""
    return DrawingEngine(metrics, canvas)


def rectangles(calls: list[PathCall]) -> list[list[Point]]:
    """Split recorded rectangles into their four corners."""
    rects = []
    current: list[Point] = []
    for name, points in calls:
        if name == "close_path":
            rects.append(current)
            current = []
        else:
            current.extend(points)
    return rects


def names(calls: list[PathCall]) -> list[str]:
    return [name for name, _ in calls]


class TestHelpers:
    """Tests for module helpers."""

    def test_range_step(self) -> None:
        assert list(range_step(0.0, 1.0, 0.25)) == [0.0, 0.25, 0.5, 0.75]
        assert list(range_step(-2.0, 2.0, 2.0)) == [-2.0, 0.0]
        assert list(range_step(0.0, 1.0, 0.0)) == []
        assert list(range_step(1.0, 0.0, 0.5)) == []

    @pytest.mark.parametrize(
        "value,expected", [(2.5, 3.0), (-2.5, -3.0), (2.4, 2.0), (-0.4, -0.0), (0.5, 1.0)]
    )
    def test_round_half_away(self, value: float, expected: float) -> None:
        assert round_half_away(value) == expected


class TestDrawPoly:
    """Tests for draw_poly."""

    @pytest.mark.parametrize(
        "points",
        [
            [],
            [Point(0.0, 0.0)],
            [Point(0.0, 0.0), Point(1.0, 1.0)],
            [Point(0.0, 0.0), Point(0.0, 0.0), Point(1.0, 1.0), Point(1.0, 1.0)],
            [Point(5.0, 5.0)] * 4,
        ],
    )
    def test_degenerate_polygon_draws_nothing(
        self, engine: DrawingEngine, canvas: RecordingCanvas, points: list[Point]
    ) -> None:
        """Fewer than three distinct points produce no calls."""
        engine.draw_poly(points)
        assert canvas.value == []

    def test_triangle(self, engine: DrawingEngine, canvas: RecordingCanvas) -> None:
        engine.draw_poly([Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 1.0)])
        assert names(canvas.value) == ["move_to", "line_to", "line_to", "close_path"]

    def test_adjacent_repeats_merged(self, engine: DrawingEngine, canvas: RecordingCanvas) -> None:
        """Immediate repeats are skipped: n distinct points give n - 1 lines."""
        a, b, c, d = Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0), Point(0.0, 1.0)
        engine.draw_poly([a, a, b, c, c, c, d])
        assert names(canvas.value) == ["move_to"] + ["line_to"] * 3 + ["close_path"]
        assert canvas.value[0] == ("move_to", (a,))


class TestBars:
    """Tests for bars and lines."""

    def test_hor_bar(self, engine: DrawingEngine, canvas: RecordingCanvas) -> None:
        """The light horizontal bar spans the width plus half butts."""
        engine.execute(HorBar())
        assert canvas.value == [
            ("move_to", (Point(-80.0, 220.0),)),
            ("line_to", (Point(680.0, 220.0),)),
            ("line_to", (Point(680.0, 380.0),)),
            ("line_to", (Point(-80.0, 380.0),)),
            ("close_path", ()),
        ]

    def test_hor_bar_fat(self, engine: DrawingEngine, canvas: RecordingCanvas) -> None:
        engine.execute(HorBar(fatness=2.0))
        corners = rectangles(canvas.value)[0]
        assert corners[0].y == 140.0
        assert corners[2].y == 460.0

    def test_vert_bar(self, engine: DrawingEngine, canvas: RecordingCanvas) -> None:
        """The vertical bar spans the full line height without butts."""
        engine.execute(VertBar())
        assert rectangles(canvas.value)[0] == [
            Point(220.0, -400.0),
            Point(380.0, -400.0),
            Point(380.0, 1000.0),
            Point(220.0, 1000.0),
        ]

    def test_half_bar_keeps_butt_equal_to_stroke(
        self, engine: DrawingEngine, canvas: RecordingCanvas
    ) -> None:
        """With butt == stroke the centre butt is kept."""
        engine.execute(HorHalfBar(side=Side.BOTTOM_LEFT))
        corners = rectangles(canvas.value)[0]
        assert corners[0] == Point(-80.0, 220.0)
        assert corners[1] == Point(380.0, 220.0)

    def test_half_bar_drops_default_butt(self, canvas: RecordingCanvas) -> None:
        """A metric butt different from the stroke is dropped at the centre."""
        engine = DrawingEngine(Metrics(butt=100.0), canvas)
        engine.execute(HorHalfBar(side=Side.BOTTOM_LEFT))
        engine.execute(HorHalfBar(side=Side.TOP_RIGHT))
        left, right = rectangles(canvas.value)
        assert left[1].x == 300.0
        assert left[0].x == -50.0
        assert right[0].x == 300.0
        assert right[1].x == 650.0

    def test_half_bar_explicit_butt(self, canvas: RecordingCanvas) -> None:
        engine = DrawingEngine(Metrics(butt=100.0), canvas)
        engine.execute(HorHalfBar(side=Side.TOP_RIGHT, butt_left=160.0))
        assert rectangles(canvas.value)[0][0].x == 220.0

    def test_vert_split_bar_strokes_match(
        self, engine: DrawingEngine, canvas: RecordingCanvas
    ) -> None:
        """Both strokes of the double vertical bar are equally thick."""
        engine.execute(VertSplitBar())
        left, right = rectangles(canvas.value)
        assert left[1].x - left[0].x == 160.0
        assert right[1].x - right[0].x == 160.0
        assert (left[0].x + left[1].x) / 2 == 140.0
        assert (right[0].x + right[1].x) / 2 == 460.0

    def test_box_defaults_to_block(self, engine: DrawingEngine, canvas: RecordingCanvas) -> None:
        engine.execute(Box())
        assert rectangles(canvas.value)[0] == [
            Point(0.0, -400.0),
            Point(600.0, -400.0),
            Point(600.0, 1000.0),
            Point(0.0, 1000.0),
        ]


class TestDashes:
    """Tests for dashed lines."""

    @pytest.mark.parametrize("step", [1, 2, 3, 4, 5, 7])
    @pytest.mark.parametrize("width", [600.0, 1000.0, 333.0])
    def test_dashed_hor_line(self, metrics: Metrics, step: int, width: float) -> None:
        """step or step - 1 equal dashes, inside the span, not overlapping."""
        canvas = RecordingCanvas()
        DrawingEngine(metrics, canvas).execute(DashedHorLine(step=float(step), width=width))
        dashes = rectangles(canvas.value)

        assert len(dashes) in (step, step - 1)
        length = width / step - (width / step) / step
        previous_end = 0.0
        for corners in dashes:
            start, end = corners[0].x, corners[1].x
            assert end - start == pytest.approx(length)
            assert start >= previous_end - 1e-9
            assert end <= width + 1e-9
            previous_end = end

    def test_dashed_hor_line_thickness(self, engine: DrawingEngine, canvas: RecordingCanvas) -> None:
        engine.execute(DashedHorLine(step=2.0, stroke=320.0))
        corners = rectangles(canvas.value)[0]
        assert corners[2].y - corners[1].y == 320.0

    @pytest.mark.parametrize("step", [2, 3, 4])
    def test_dashed_vert_line(
        self, engine: DrawingEngine, canvas: RecordingCanvas, step: int
    ) -> None:
        """Vertical dashes sit on the centre line within the em height."""
        engine.execute(DashedVertLine(step=float(step)))
        dashes = rectangles(canvas.value)
        assert len(dashes) in (step, step - 1)
        for corners in dashes:
            assert (corners[0].x + corners[1].x) / 2 == 300.0
            assert corners[0].y >= -300.0
            assert corners[2].y <= 900.0

    @pytest.mark.parametrize(
        "command",
        [DashedHorLine(step=0.0), DashedHorLine(step=-3.0), DashedVertLine(step=0.0)],
    )
    def test_no_dashes_without_positive_step(
        self, engine: DrawingEngine, canvas: RecordingCanvas, command: Command
    ) -> None:
        """A step that is not positive draws nothing."""
        engine.execute(command)
        assert canvas.value == []


class TestArc:
    """Tests for rounded corners."""

    def test_call_structure(self, engine: DrawingEngine, canvas: RecordingCanvas) -> None:
        engine.execute(Arc(start=Point(300.0, -400.0), end=Point(600.0, 300.0), side=Side.TOP_LEFT))
        assert names(canvas.value) == [
            "move_to",
            "line_to",
            "line_to",
            "curve_to",
            "line_to",
            "line_to",
            "line_to",
            "curve_to",
            "close_path",
        ]

    @pytest.mark.parametrize(
        "side,mirror",
        [(Side.TOP_LEFT, Side.TOP_RIGHT), (Side.BOTTOM_LEFT, Side.BOTTOM_RIGHT)],
    )
    def test_mirror_symmetry(self, metrics: Metrics, side: Side, mirror: Side) -> None:
        """Mirrored inputs give outlines mirrored about the glyph centre."""
        width = metrics.width
        start, end = Point(300.0, -400.0), Point(width, 300.0)
        mirrored_start, mirrored_end = Point(width - start.x, start.y), Point(width - end.x, end.y)

        direct, mirrored = RecordingCanvas(), RecordingCanvas()
        DrawingEngine(metrics, direct).arc(start, end, side, butt=40.0)
        DrawingEngine(metrics, mirrored).arc(mirrored_start, mirrored_end, mirror, butt=40.0)

        assert names(direct.value) == names(mirrored.value)
        for (_, points), (_, mirrored_points) in zip(direct.value, mirrored.value):
            for point, mirrored_point in zip(points, mirrored_points):
                assert mirrored_point.x == pytest.approx(width - point.x)
                assert mirrored_point.y == pytest.approx(point.y)

    def test_arc_endpoints(self, engine: DrawingEngine, canvas: RecordingCanvas) -> None:
        """The stroke starts centred on start.x and ends at end.x."""
        engine.arc(Point(300.0, -400.0), Point(600.0, 300.0), Side.TOP_LEFT)
        assert canvas.value[0] == ("move_to", (Point(220.0, -400.0),))
        assert canvas.value[1] == ("line_to", (Point(380.0, -400.0),))
        assert canvas.value[4] == ("line_to", (Point(600.0, 220.0),))
        assert canvas.value[5] == ("line_to", (Point(600.0, 380.0),))


class TestCorners:
    """Tests for double-line corners."""

    def test_bottom_inner_corner_is_seamless(
        self, engine: DrawingEngine, canvas: RecordingCanvas
    ) -> None:
        """The vertical stroke stops at the bottom edge of the horizontal one."""
        engine.execute(InnerCorner(side=Side.BOTTOM_RIGHT))
        horizontal, vertical = rectangles(canvas.value)
        assert horizontal[0] == Point(380.0, 60.0)
        assert horizontal[3].y == 220.0
        assert vertical[0] == Point(380.0, -400.0)
        assert vertical[2] == Point(540.0, 220.0)

    def test_top_inner_corner_is_seamless(
        self, engine: DrawingEngine, canvas: RecordingCanvas
    ) -> None:
        engine.execute(InnerCorner(side=Side.TOP_LEFT))
        horizontal, vertical = rectangles(canvas.value)
        assert horizontal[0].y == 380.0
        assert horizontal[1].x == 220.0
        assert vertical[0] == Point(60.0, 380.0)
        assert vertical[2].y == 1000.0

    def test_outer_corner(self, engine: DrawingEngine, canvas: RecordingCanvas) -> None:
        """The outer stroke wraps around the inner one."""
        engine.execute(OuterCorner(side=Side.BOTTOM_RIGHT))
        horizontal, vertical = rectangles(canvas.value)
        assert horizontal[0] == Point(60.0, 380.0)
        assert horizontal[1] == Point(680.0, 380.0)
        assert vertical[0] == Point(60.0, -400.0)
        assert vertical[2] == Point(220.0, 540.0)


class TestDiagonal:
    """Tests for diagonals."""

    @pytest.mark.parametrize("direction", [Direction.TOP_DOWN, Direction.BOTTOM_UP])
    def test_six_point_outline(
        self, engine: DrawingEngine, canvas: RecordingCanvas, direction: Direction
    ) -> None:
        engine.execute(Diagonal(start=Point(0.0, -300.0), end=Point(600.0, 900.0), direction=direction))
        assert names(canvas.value) == ["move_to"] + ["line_to"] * 5 + ["close_path"]

    def test_offsets(self, engine: DrawingEngine, canvas: RecordingCanvas, metrics: Metrics) -> None:
        """Offsets keep the stroke thickness constant along the diagonal."""
        engine.diagonal(Point(0.0, 900.0), Point(600.0, -300.0), Direction.TOP_DOWN)
        hypotenuse = math.hypot(metrics.width, metrics.em_height)
        xdist = 80.0 / math.cos(math.asin(600.0 / hypotenuse))
        first = canvas.value[0][1][0]
        assert first.x == pytest.approx(xdist)
        assert first.y == 900.0


class TestShades:
    """Tests for fill patterns."""

    def test_polka_shade(self, engine: DrawingEngine, canvas: RecordingCanvas) -> None:
        """3 columns x 7 rows, two dots per cell, four curves per dot."""
        engine.execute(PolkaShade(shade=Shade.FIFTY))
        assert canvas.contour_count == 42
        assert names(canvas.value).count("curve_to") == 42 * 4

    def test_polka_dot_radius(self, engine: DrawingEngine, canvas: RecordingCanvas) -> None:
        engine.execute(PolkaShade(shade=Shade.TWENTY_FIVE))
        assert canvas.value[0] == ("move_to", (Point(-24.0, -400.0),))

    def test_box_shade(self, engine: DrawingEngine, canvas: RecordingCanvas) -> None:
        engine.execute(BoxShade(shade=Shade.TWENTY_FIVE))
        assert canvas.contour_count == 6 * 14 * 2

    @pytest.mark.parametrize("shade,count", [(Shade.TWENTY_FIVE, 3), (Shade.FIFTY, 6)])
    def test_vertical_shade(
        self, engine: DrawingEngine, canvas: RecordingCanvas, shade: Shade, count: int
    ) -> None:
        engine.execute(VerticalShade(shade=shade))
        assert canvas.contour_count == count

    @pytest.mark.parametrize("shade", list(Shade))
    def test_striped_shade(
        self, engine: DrawingEngine, canvas: RecordingCanvas, shade: Shade
    ) -> None:
        """Every stripe is a proper polygon within the glyph width."""
        engine.execute(StripedShade(shade=shade))
        assert canvas.contour_count > 0
        for corners in rectangles(canvas.value):
            assert len(set(corners)) >= 3
            assert all(0.0 <= p.x <= 600.0 for p in corners)


class TestExecute:
    """Tests for command dispatch."""

    def test_rejects_non_commands(self, engine: DrawingEngine) -> None:
        with pytest.raises(TypeError):
            engine.execute("horBar")  # type: ignore[arg-type]
