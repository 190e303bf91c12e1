"""Parametric drawing engine.

Executes drawing commands against a Canvas. Every command is reduced to a
handful of outline primitives (rectangles, polygons, arcs and dots) whose
coordinates are computed from the command's fields and the font Metrics.
Unset command fields are defaulted here, at execution time.

The engine holds no state besides its metrics and canvas; geometry never
raises and degenerate polygons are skipped.
"""

import math
from collections.abc import Callable, Iterator
from typing import Any

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
    HorLine,
    HorSplitBar,
    HorSplitHalfBar,
    InnerCorner,
    Metrics,
    OuterCorner,
    Point,
    PolkaShade,
    Shade,
    Side,
    StripedShade,
    VertBar,
    VertHalfBar,
    VerticalShade,
    VertLine,
    VertSplitBar,
    VertSplitHalfBar,
)
from boxdraw.io import Canvas

# (yflip, xflip) per arc quadrant
ARC_FLIPS: dict[Side, tuple[float, float]] = {
    Side.TOP_LEFT: (1.0, 1.0),
    Side.BOTTOM_LEFT: (-1.0, 1.0),
    Side.TOP_RIGHT: (1.0, -1.0),
    Side.BOTTOM_RIGHT: (-1.0, -1.0),
}

POLKA_RADII = {Shade.TWENTY_FIVE: 24.0, Shade.FIFTY: 36.0, Shade.SEVENTY_FIVE: 54.0}
BOX_SHADE_SIZES = {
    Shade.TWENTY_FIVE: (20.0, 30.0),
    Shade.FIFTY: (40.0, 50.0),
    Shade.SEVENTY_FIVE: (45.0, 70.0),
}
# Fraction of the glyph width between two stripes
STRIPE_DIVISORS = {Shade.TWENTY_FIVE: 3.0, Shade.FIFTY: 6.0, Shade.SEVENTY_FIVE: 12.0}
STRIPE_ANGLE = math.radians(45)


def range_step(start: float, stop: float, step: float) -> Iterator[float]:
    """Yield start, start + step, ... while below stop.

    A non-positive step yields nothing.
    """
    if step <= 0:
        return
    value = start
    while value < stop:
        yield value
        value += step


def round_half_away(value: float) -> float:
    """Round to the nearest integer, halves away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


def distinct_count(points: list[Point]) -> int:
    """Count pairwise-distinct points."""
    seen: list[Point] = []
    for point in points:
        if point not in seen:
            seen.append(point)
    return len(seen)


def _or(value: float | None, default: float) -> float:
    return default if value is None else value


class DrawingEngine:
    """Draws commands onto a canvas using fixed metrics.

    Example:
        engine = DrawingEngine(Metrics(), RecordingCanvas())
        engine.execute(HorBar())
    """

    def __init__(self, metrics: Metrics, canvas: Canvas) -> None:
        self.metrics = metrics
        self.canvas = canvas
        self._handlers: dict[type, Callable[[Any], None]] = {
            HorBar: self._exec_hor_bar,
            VertBar: self._exec_vert_bar,
            DashedHorLine: self._exec_dashed_hor_line,
            DashedVertLine: self._exec_dashed_vert_line,
            HorHalfBar: self._exec_hor_half_bar,
            VertHalfBar: self._exec_vert_half_bar,
            Box: self._exec_box,
            Arc: self._exec_arc,
            PolkaShade: lambda c: self.polka_shade(c.shade),
            BoxShade: lambda c: self.box_shade(c.shade),
            StripedShade: lambda c: self.striped_shade(c.shade),
            VerticalShade: lambda c: self.vertical_shade(c.shade),
            Diagonal: lambda c: self.diagonal(c.start, c.end, c.direction),
            InnerCorner: lambda c: self.inner_corner(c.side, c.fatness, c.corner_median),
            OuterCorner: lambda c: self.outer_corner(c.side, c.fatness, c.corner_median),
            HorSplitBar: lambda c: self.hor_split_bar(c.fatness, c.butt_left, c.butt_right),
            VertSplitBar: lambda c: self.vert_split_bar(c.fatness, c.butt_bot, c.butt_top),
            HorSplitHalfBar: self._exec_hor_split_half_bar,
            VertSplitHalfBar: self._exec_vert_split_half_bar,
            HorLine: lambda c: self.hor_line(
                c.start, c.end, c.stroke, c.butt_left, c.butt_right
            ),
            VertLine: lambda c: self.vert_line(c.start, c.end, c.stroke, c.butt_bot, c.butt_top),
        }

    def execute(self, command: Command) -> None:
        """Draw one command.

        Raises:
            TypeError: If the object is not a drawing command
        """
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f"Not a drawing command: {command!r}")
        handler(command)

    # Command adapters

    def _exec_hor_bar(self, c: HorBar) -> None:
        self.hor_bar(c.fatness, c.median, c.butt_left, c.butt_right)

    def _exec_vert_bar(self, c: VertBar) -> None:
        self.vert_bar(c.fatness, c.butt_bot, c.butt_top)

    def _exec_dashed_hor_line(self, c: DashedHorLine) -> None:
        self.dashed_hor_line(c.step, c.width, c.stroke)

    def _exec_dashed_vert_line(self, c: DashedVertLine) -> None:
        self.dashed_vert_line(c.step, c.length, c.stroke)

    def _exec_hor_half_bar(self, c: HorHalfBar) -> None:
        self.hor_half_bar(c.side, c.fatness, c.median, c.butt_left, c.butt_right)

    def _exec_vert_half_bar(self, c: VertHalfBar) -> None:
        self.vert_half_bar(c.side, c.fatness, c.butt_bot, c.butt_top)

    def _exec_box(self, c: Box) -> None:
        self.box(c.start, c.end)

    def _exec_arc(self, c: Arc) -> None:
        self.arc(c.start, c.end, c.side, c.stroke, c.radius, c.butt)

    def _exec_hor_split_half_bar(self, c: HorSplitHalfBar) -> None:
        self.hor_split_half_bar(c.side, c.fatness, c.butt_left, c.butt_right)

    def _exec_vert_split_half_bar(self, c: VertSplitHalfBar) -> None:
        self.vert_split_half_bar(c.side, c.fatness, c.butt_bot, c.butt_top)

    # Outline primitives

    def draw_rect(self, bot_left: Point, bot_right: Point, top_right: Point, top_left: Point) -> None:
        self.canvas.move_to(bot_left)
        self.canvas.line_to(bot_right)
        self.canvas.line_to(top_right)
        self.canvas.line_to(top_left)
        self.canvas.close_path()

    def draw_poly(self, points: list[Point]) -> None:
        """Draw a closed polygon, skipping repeated consecutive points.

        Polygons with fewer than three distinct points are not drawn.
        """
        if distinct_count(points) < 3:
            return
        self.canvas.move_to(points[0])
        for previous, point in zip(points, points[1:]):
            if point != previous:
                self.canvas.line_to(point)
        self.canvas.close_path()

    def hor_line(
        self,
        start: Point,
        end: Point,
        stroke: float,
        butt_left: float | None = None,
        butt_right: float | None = None,
    ) -> None:
        """Horizontal stroke from start to end, extended by half of each butt."""
        bl = _or(butt_left, self.metrics.butt)
        br = _or(butt_right, self.metrics.butt)
        self.draw_rect(
            Point(start.x - bl / 2, end.y - stroke / 2),
            Point(end.x + br / 2, end.y - stroke / 2),
            Point(end.x + br / 2, end.y + stroke / 2),
            Point(start.x - bl / 2, start.y + stroke / 2),
        )

    def vert_line(
        self,
        start: Point,
        end: Point,
        stroke: float,
        butt_bot: float | None = None,
        butt_top: float | None = None,
    ) -> None:
        """Vertical stroke at start.x, extended by half of each butt."""
        bb = _or(butt_bot, 0.0)
        bt = _or(butt_top, 0.0)
        self.draw_rect(
            Point(start.x - stroke / 2, start.y - bb / 2),
            Point(start.x + stroke / 2, start.y - bb / 2),
            Point(start.x + stroke / 2, end.y + bt / 2),
            Point(start.x - stroke / 2, end.y + bt / 2),
        )

    def box(self, start: Point | None = None, end: Point | None = None) -> None:
        """Filled rectangle, defaulting to the whole block area."""
        start = start if start is not None else self.metrics.block_origin
        end = end if end is not None else self.metrics.block_top
        self.draw_rect(
            Point(start.x, start.y),
            Point(end.x, start.y),
            Point(end.x, end.y),
            Point(start.x, end.y),
        )

    def dot(self, center: Point, radius: float) -> None:
        """Circle of four cubic segments."""
        x, y = center.x, center.y
        k = radius * self.metrics.kappa
        self.canvas.move_to(Point(x - radius, y))
        self.canvas.curve_to(Point(x - radius, y - k), Point(x - k, y - radius), Point(x, y - radius))
        self.canvas.curve_to(Point(x + k, y - radius), Point(x + radius, y - k), Point(x + radius, y))
        self.canvas.curve_to(Point(x + radius, y + k), Point(x + k, y + radius), Point(x, y + radius))
        self.canvas.curve_to(Point(x - k, y + radius), Point(x - radius, y + k), Point(x - radius, y))
        self.canvas.close_path()

    # Lines and bars

    def dashed_hor_line(
        self, step: float, width: float | None = None, stroke: float | None = None
    ) -> None:
        """Horizontal line split into `step` dashes; a non-positive step draws nothing."""
        if step <= 0:
            return
        width = _or(width, self.metrics.width)
        stroke = _or(stroke, self.metrics.stroke)
        step_length = width / step
        gap = step_length / step
        median = self.metrics.median

        for w in range_step(0.0, width, step_length):
            if w + step_length - gap < width:
                # centre the dash within its cell
                w += gap / 2
                self.hor_line(
                    Point(w, median), Point(w + step_length - gap, median), stroke, 0.0, 0.0
                )

    def dashed_vert_line(
        self, step: float, length: float | None = None, stroke: float | None = None
    ) -> None:
        if step <= 0:
            return
        m = self.metrics
        length = _or(length, m.em_height)
        stroke = _or(stroke, m.stroke)
        step_length = length / step
        gap = step_length / step
        top = m.median + m.em_height / 2
        x = m.width / 2

        for h in range_step(m.median - length / 2, m.median + length / 2, step_length):
            if h + step_length - gap < top:
                h += gap / 2
                self.vert_line(Point(x, h), Point(x, h + step_length - gap), stroke)

    def hor_bar(
        self,
        fatness: float | None = None,
        median: float | None = None,
        butt_left: float | None = None,
        butt_right: float | None = None,
    ) -> None:
        m = self.metrics
        median = _or(median, m.median)
        self.hor_line(
            Point(0.0, median),
            Point(m.width, median),
            m.stroke * _or(fatness, 1.0),
            _or(butt_left, m.butt),
            _or(butt_right, m.butt),
        )

    def vert_bar(
        self,
        fatness: float | None = None,
        butt_bot: float | None = None,
        butt_top: float | None = None,
    ) -> None:
        m = self.metrics
        self.vert_line(
            Point(m.width / 2, m.median - m.height / 2),
            Point(m.width / 2, m.median + m.height / 2),
            m.stroke * _or(fatness, 1.0),
            butt_bot,
            butt_top,
        )

    def hor_half_bar(
        self,
        side: Side,
        fatness: float | None = None,
        median: float | None = None,
        butt_left: float | None = None,
        butt_right: float | None = None,
    ) -> None:
        """Half-width bar; the butt facing the centre is dropped when it is
        the metric butt and that butt differs from the stroke."""
        m = self.metrics
        stroke = m.stroke * _or(fatness, 1.0)
        median = _or(median, m.median)
        bl = _or(butt_left, m.butt)
        br = _or(butt_right, m.butt)

        if side.is_left:
            if br == m.butt and br != m.stroke:
                br = 0.0
            self.hor_line(Point(0.0, median), Point(m.width / 2, median), stroke, bl, br)
        else:
            if bl == m.butt and bl != m.stroke:
                bl = 0.0
            self.hor_line(Point(m.width / 2, median), Point(m.width, median), stroke, bl, br)

    def vert_half_bar(
        self,
        side: Side,
        fatness: float | None = None,
        butt_bot: float | None = None,
        butt_top: float | None = None,
    ) -> None:
        m = self.metrics
        x = m.width / 2
        stroke = m.stroke * _or(fatness, 1.0)
        if side.is_top:
            self.vert_line(
                Point(x, m.median), Point(x, m.median + m.height / 2), stroke, butt_bot, butt_top
            )
        else:
            self.vert_line(
                Point(x, m.median - m.height / 2), Point(x, m.median), stroke, butt_bot, butt_top
            )

    def hor_split_bar(
        self,
        fatness: float | None = None,
        butt_left: float | None = None,
        butt_right: float | None = None,
    ) -> None:
        m = self.metrics
        fatness = _or(fatness, 1.0)
        offset = m.stroke * fatness
        for median in (m.median + offset, m.median - offset):
            self.hor_bar(fatness, median, butt_left, butt_right)

    def vert_split_bar(
        self,
        fatness: float | None = None,
        butt_bot: float | None = None,
        butt_top: float | None = None,
    ) -> None:
        m = self.metrics
        stroke = m.stroke * _or(fatness, 1.0)
        for x in (m.width / 2 - stroke, m.width / 2 + stroke):
            self.vert_line(
                Point(x, m.median - m.height / 2),
                Point(x, m.median + m.height / 2),
                stroke,
                butt_bot,
                butt_top,
            )

    def hor_split_half_bar(
        self,
        side: Side,
        fatness: float | None = None,
        butt_left: float | None = None,
        butt_right: float | None = None,
    ) -> None:
        m = self.metrics
        fatness = _or(fatness, 1.0)
        offset = m.stroke * fatness
        for median in (m.median + offset, m.median - offset):
            self.hor_half_bar(side, fatness, median, butt_left, butt_right)

    def vert_split_half_bar(
        self,
        side: Side,
        fatness: float | None = None,
        butt_bot: float | None = None,
        butt_top: float | None = None,
    ) -> None:
        m = self.metrics
        stroke = m.stroke * _or(fatness, 1.0)
        if side.is_top:
            bottom, top = m.median, m.median + m.height / 2
        else:
            bottom, top = m.median - m.height / 2, m.median
        for x in (m.width / 2 - stroke, m.width / 2 + stroke):
            self.vert_line(Point(x, bottom), Point(x, top), stroke, butt_bot, butt_top)

    # Corners

    def outer_corner(
        self, side: Side, fatness: float | None = None, corner_median: float | None = None
    ) -> None:
        """Outer stroke of a double-line corner."""
        m = self.metrics
        offset = m.stroke * _or(fatness, 1.0)
        cm = _or(corner_median, m.median)
        cm = cm - offset if side.is_top else cm + offset

        if side.is_left:
            self.hor_half_bar(side, None, cm, m.butt, m.stroke * 3)
            x = m.width / 2 + offset
        else:
            self.hor_half_bar(side, None, cm, m.stroke * 3, m.butt)
            x = m.width / 2 - offset

        if side.is_top:
            cm += offset
            self.vert_line(Point(x, cm), Point(x, cm + m.height / 2), offset, butt_bot=m.stroke * 3)
        else:
            cm -= offset
            self.vert_line(Point(x, cm - m.height / 2), Point(x, cm), offset, butt_top=m.stroke * 3)

    def inner_corner(
        self, side: Side, fatness: float | None = None, corner_median: float | None = None
    ) -> None:
        """Inner stroke of a double-line corner.

        The negative butts pull both strokes back so they meet without
        overlapping; for bottom corners that butt sits on the top end of the
        vertical stroke.
        """
        m = self.metrics
        offset = m.stroke * _or(fatness, 1.0)
        cm = _or(corner_median, m.median)
        cm = cm + offset if side.is_top else cm - offset

        if side.is_left:
            self.hor_half_bar(side, None, cm, m.butt, -m.stroke)
            x = m.width / 2 - offset
        else:
            self.hor_half_bar(side, None, cm, -m.stroke, m.butt)
            x = m.width / 2 + offset

        if side.is_top:
            cm -= offset
            self.vert_line(Point(x, cm), Point(x, cm + m.height / 2), offset, butt_bot=-m.stroke)
        else:
            cm += offset
            self.vert_line(Point(x, cm - m.height / 2), Point(x, cm), offset, butt_top=-m.stroke)

    # Curves and diagonals

    def arc(
        self,
        start: Point,
        end: Point,
        side: Side,
        stroke: float | None = None,
        radius: float | None = None,
        butt: float | None = None,
    ) -> None:
        """Rounded corner from a vertical stroke end to a horizontal one."""
        m = self.metrics
        s = _or(stroke, m.stroke) / 2
        r = _or(radius, m.radius)
        butt = _or(butt, 0.0)
        k = m.kappa
        yf, xf = ARC_FLIPS[side]

        cs = Point(start.x, end.y - r * yf)
        ce = Point(start.x + r * xf, end.y)

        start1 = Point(start.x - s * xf, start.y)
        start2 = Point(start.x + s * xf, start.y)
        end1 = Point(end.x + butt / 2 * xf, end.y - s * yf)
        end2 = Point(end.x + butt / 2 * xf, end.y + s * yf)

        inner_start = Point(cs.x + s * xf, cs.y)
        inner_c1 = Point(cs.x + s * xf, cs.y + (r - s) * k * yf)
        inner_c2 = Point(ce.x - (r - s) * k * xf, ce.y - s * yf)
        inner_end = Point(ce.x, ce.y - s * yf)

        outer_start = Point(ce.x, ce.y + s * yf)
        outer_c1 = Point(ce.x - (r + s) * k * xf, ce.y + s * yf)
        outer_c2 = Point(cs.x - s * xf, cs.y + (r + s) * k * yf)
        outer_end = Point(cs.x - s * xf, cs.y)

        self.canvas.move_to(start1)
        self.canvas.line_to(start2)
        self.canvas.line_to(inner_start)
        self.canvas.curve_to(inner_c1, inner_c2, inner_end)
        self.canvas.line_to(end1)
        self.canvas.line_to(end2)
        self.canvas.line_to(outer_start)
        self.canvas.curve_to(outer_c1, outer_c2, outer_end)
        self.canvas.close_path()

    def diagonal(self, start: Point, end: Point, direction: Direction) -> None:
        """Diagonal of constant stroke thickness across the em box."""
        m = self.metrics
        hypotenuse = math.hypot(m.width, m.em_height)
        angle1 = math.asin(m.width / hypotenuse)
        angle2 = math.pi / 2 - angle1
        xdist = m.stroke / 2 / math.cos(angle1)
        ydist = m.stroke / 2 / math.cos(angle2)

        if direction is Direction.TOP_DOWN:
            points = [
                Point(start.x + xdist, start.y),
                Point(start.x, start.y),
                Point(start.x, start.y - ydist),
                Point(end.x - xdist, end.y),
                Point(end.x, end.y),
                Point(end.x, end.y + ydist),
            ]
        else:
            points = [
                Point(start.x, start.y + ydist),
                Point(start.x, start.y),
                Point(start.x + xdist, start.y),
                Point(end.x, end.y - ydist),
                Point(end.x, end.y),
                Point(end.x - xdist, end.y),
            ]

        self.canvas.move_to(points[0])
        for point in points[1:]:
            self.canvas.line_to(point)
        self.canvas.close_path()

    # Fill patterns

    def polka_shade(self, shade: Shade) -> None:
        """Staggered grid of dots."""
        m = self.metrics
        vstep, hstep = 100.0, 200.0
        radius = POLKA_RADII[shade]
        bottom = round_half_away(m.median - m.block_height / 2)
        top = round_half_away(m.median + m.block_height / 2)

        for w in range_step(0.0, m.width, hstep):
            for h in range_step(bottom, top, vstep * 2):
                self.dot(Point(w, h), radius)
                self.dot(Point(w + hstep / 2, h + vstep), radius * 1.5)

    def box_shade(self, shade: Shade) -> None:
        """Staggered grid of little boxes."""
        m = self.metrics
        vstep, hstep = 50.0, 100.0
        box_width, box_height = BOX_SHADE_SIZES[shade]

        for w in range_step(0.0, m.width, hstep):
            for h in range_step(
                m.median - m.block_height / 2, m.median + m.block_height / 2, vstep * 2
            ):
                self.box(Point(w, h), Point(w + box_width, h + box_height))
                self.box(
                    Point(w + hstep / 2, h + vstep),
                    Point(w + box_width + hstep / 2, h + box_height + vstep),
                )

    def striped_shade(self, shade: Shade) -> None:
        """Diagonal stripes clipped to the block area."""
        m = self.metrics
        step = m.width / STRIPE_DIVISORS[shade]
        stroke = m.width / 30
        tan = math.tan(STRIPE_ANGLE)
        y_shift = m.median - m.block_height / 2
        hypotenuse = m.block_height / math.sin(STRIPE_ANGLE)
        run = hypotenuse * math.cos(STRIPE_ANGLE)
        leftmost = -run - stroke

        for raw_x1 in range_step(leftmost, m.width + stroke, step):
            raw_x2 = raw_x1 + stroke
            bot_x1, bot_x2 = round_half_away(raw_x1), round_half_away(raw_x2)
            top_x1, top_x2 = round_half_away(raw_x1 + run), round_half_away(raw_x2 + run)
            bot_y1 = bot_y2 = 0.0
            top_y1 = top_y2 = m.block_height

            if bot_x1 <= 0:
                bot_x1 = 0.0
                bot_y1 = round_half_away(tan * abs(raw_x1))
            if bot_x2 <= 0:
                bot_x2 = 0.0
                bot_y2 = round_half_away(tan * abs(raw_x2))
            if top_x1 >= m.width:
                top_x1 = m.width
                top_y1 = round_half_away(tan * abs(raw_x1 - m.width))
            if top_x2 >= m.width:
                top_x2 = m.width
                top_y2 = round_half_away(tan * abs(raw_x2 - m.width))
            if top_y1 <= bot_y1:
                top_y1 = bot_y1 = m.block_height
            if top_x1 <= bot_x1:
                top_x1 = bot_x1 = m.width
            if bot_x2 >= m.width:
                bot_x2 = m.width
                top_y2 = 0.0

            self.draw_poly(
                [
                    Point(bot_x1, bot_y1 + y_shift),
                    Point(bot_x2, bot_y2 + y_shift),
                    Point(top_x2, top_y2 + y_shift),
                    Point(top_x1, top_y1 + y_shift),
                ]
            )

    def vertical_shade(self, shade: Shade) -> None:
        """Evenly spaced vertical bars."""
        m = self.metrics
        step = m.width / STRIPE_DIVISORS[shade]
        stroke = m.width / 30
        y_bot = m.median - m.height / 2
        y_top = y_bot + m.height

        for x in range_step(0.0, m.width, step):
            self.draw_rect(
                Point(x, y_bot), Point(x + stroke, y_bot), Point(x + stroke, y_top), Point(x, y_top)
            )
