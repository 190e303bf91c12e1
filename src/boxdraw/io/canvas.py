"""Canvas adapters between the drawing engine and path consumers.

The drawing engine only ever calls the four Canvas methods. This module
provides the adapters that receive those calls:

- RecordingCanvas: keeps the calls as a list, like fontTools' RecordingPen
- PenCanvas: forwards the calls to any fontTools pen
- recording_to_svg_path: renders recorded calls as an SVG path string
"""

from typing import Any, Protocol

from fontTools.pens.basePen import AbstractPen
from fontTools.pens.svgPathPen import SVGPathPen

from boxdraw.domain import Point

PathCall = tuple[str, tuple[Point, ...]]


class Canvas(Protocol):
    """Receiver of outline drawing calls."""

    def move_to(self, point: Point) -> None: ...

    def line_to(self, point: Point) -> None: ...

    def curve_to(self, control1: Point, control2: Point, end: Point) -> None: ...

    def close_path(self) -> None: ...


class RecordingCanvas:
    """Canvas that records every call in order.

    Each entry of `value` is (method name, point arguments), e.g.
    ("move_to", (Point(0, 0),)) or ("close_path", ()).
    """

    def __init__(self) -> None:
        self.value: list[PathCall] = []

    def move_to(self, point: Point) -> None:
        self.value.append(("move_to", (point,)))

    def line_to(self, point: Point) -> None:
        self.value.append(("line_to", (point,)))

    def curve_to(self, control1: Point, control2: Point, end: Point) -> None:
        self.value.append(("curve_to", (control1, control2, end)))

    def close_path(self) -> None:
        self.value.append(("close_path", ()))

    @property
    def contour_count(self) -> int:
        """Number of closed contours recorded."""
        return sum(1 for name, _ in self.value if name == "close_path")

    def clear(self) -> None:
        self.value.clear()

    def replay(self, canvas: Canvas) -> None:
        """Send the recorded calls to another canvas."""
        for name, points in self.value:
            getattr(canvas, name)(*points)


class PenCanvas:
    """Canvas forwarding to a fontTools pen.

    Points are converted to (x, y) tuples; close_path maps to closePath.

    Example:
        pen = RecordingPen()
        font.draw_to(0x2500, PenCanvas(pen))
    """

    def __init__(self, pen: AbstractPen) -> None:
        self.pen = pen

    def move_to(self, point: Point) -> None:
        self.pen.moveTo(point.to_tuple())

    def line_to(self, point: Point) -> None:
        self.pen.lineTo(point.to_tuple())

    def curve_to(self, control1: Point, control2: Point, end: Point) -> None:
        self.pen.curveTo(control1.to_tuple(), control2.to_tuple(), end.to_tuple())

    def close_path(self) -> None:
        self.pen.closePath()


def format_number(value: float) -> str:
    """Format a coordinate with at most three decimals and no trailing zeros."""
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def recording_to_svg_path(recording: RecordingCanvas) -> str:
    """Render recorded calls as SVG path data.

    Args:
        recording: Canvas holding the calls of one or more glyphs

    Returns:
        Path data string such as "M-80 220H680V380H-80Z"
    """
    pen: Any = SVGPathPen(None, ntos=format_number)
    recording.replay(PenCanvas(pen))
    return pen.getCommands()
