"""Font facade: draws code points from the compiled recipe table."""

import structlog
from fontTools.pens.basePen import AbstractPen

from boxdraw.core.engine import DrawingEngine
from boxdraw.core.recipes import Recipe, RecipeTable, default_recipe_table
from boxdraw.domain import Command, Metrics
from boxdraw.io import Canvas, PenCanvas, RecordingCanvas, recording_to_svg_path

logger = structlog.get_logger(__name__)


class Font:
    """Box-drawing font for one set of metrics.

    The recipe table is shared and read-only; the font only adds the metrics
    its commands are resolved against. Drawing is stateless, so one Font can
    serve any number of canvases.

    Example:
        font = Font(Metrics(stroke=120))
        if font.contains(0x256C):
            font.draw_to(0x256C, canvas)
    """

    def __init__(self, metrics: Metrics | None = None, table: RecipeTable | None = None) -> None:
        self.metrics = metrics if metrics is not None else Metrics()
        self.table = table if table is not None else default_recipe_table()

    def contains(self, code_point: int) -> bool:
        """Whether draw_to would draw this code point."""
        return code_point in self.table

    def __contains__(self, code_point: object) -> bool:
        return code_point in self.table

    def __len__(self) -> int:
        return len(self.table)

    def code_points(self) -> list[int]:
        """Drawable code points in ascending order."""
        return sorted(self.table)

    def recipe(self, code_point: int) -> Recipe:
        """Get the compiled recipe for a code point.

        Raises:
            GlyphNotFoundError: If the code point has no recipe
        """
        return self.table[code_point]

    def commands(self, code_point: int) -> list[Command]:
        """Resolve a code point's recipe into concrete commands."""
        return [template.resolve(self.metrics) for template in self.recipe(code_point).commands]

    def draw_to(self, code_point: int, canvas: Canvas) -> None:
        """Draw a glyph onto a canvas, commands in recipe order.

        Args:
            code_point: Unicode scalar value to draw
            canvas: Receiver of the outline calls

        Raises:
            GlyphNotFoundError: If the code point has no recipe
        """
        commands = self.commands(code_point)
        engine = DrawingEngine(self.metrics, canvas)
        for command in commands:
            engine.execute(command)
        logger.debug("Glyph drawn", code_point=f"U+{code_point:04X}", commands=len(commands))

    def draw_to_pen(self, code_point: int, pen: AbstractPen) -> None:
        """Draw a glyph onto a fontTools pen."""
        self.draw_to(code_point, PenCanvas(pen))

    def svg_path(self, code_point: int) -> str:
        """Render a glyph as SVG path data."""
        recording = RecordingCanvas()
        self.draw_to(code_point, recording)
        return recording_to_svg_path(recording)
