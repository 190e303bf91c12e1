"""Command emitter: lowers a primitive call into a deferred command.

The emitter maps a call such as `horHalfBar(boxPen, "right", buttL=STROKE)`
onto the HorHalfBar command type. Positional arguments fill the command's
fields in declaration order; keyword arguments go through a closed keyword
table. The result is a CommandTemplate holding one expression per set
field, resolved into a concrete command only when metrics are supplied.
"""

import ast
import types
import typing
from collections.abc import Mapping
from dataclasses import dataclass, fields
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from boxdraw.core.expressions import Expression
from boxdraw.domain import (
    Arc,
    Box,
    BoxShade,
    Command,
    CommandBuilder,
    DashedHorLine,
    DashedVertLine,
    Diagonal,
    HorBar,
    HorHalfBar,
    HorLine,
    HorSplitBar,
    HorSplitHalfBar,
    InnerCorner,
    Metrics,
    OuterCorner,
    PolkaShade,
    StripedShade,
    VertBar,
    VertHalfBar,
    VerticalShade,
    VertLine,
    VertSplitBar,
    VertSplitHalfBar,
)
from boxdraw.exceptions import (
    ArgumentTypeError,
    ArgumentValueError,
    UnknownKeywordError,
    UnknownPrimitiveError,
    UnsupportedExpressionError,
)

if TYPE_CHECKING:
    from boxdraw.core.translator import ExpressionTranslator

# Pen argument accepted and ignored as the first positional argument
PEN_ARGUMENT = "boxPen"

PRIMITIVES: Mapping[str, type] = MappingProxyType(
    {
        "horBar": HorBar,
        "vertBar": VertBar,
        "dashedHorLine": DashedHorLine,
        "dashedVertLine": DashedVertLine,
        "horHalfBar": HorHalfBar,
        "vertHalfBar": VertHalfBar,
        "box": Box,
        "box_": Box,
        "arc": Arc,
        "polkaShade": PolkaShade,
        "shade": BoxShade,
        "stripedShade": StripedShade,
        "verticalShade": VerticalShade,
        "diagonal": Diagonal,
        "innerCorner": InnerCorner,
        "outerCorner": OuterCorner,
        "horSplitBar": HorSplitBar,
        "vertSplitBar": VertSplitBar,
        "horSplitHalfBar": HorSplitHalfBar,
        "vertSplitHalfBar": VertSplitHalfBar,
        "horLine": HorLine,
        "vertLine": VertLine,
    }
)

KEYWORDS: Mapping[str, str] = MappingProxyType(
    {
        "buttB": "butt_bot",
        "buttT": "butt_top",
        "buttL": "butt_left",
        "buttR": "butt_right",
        "start": "start",
        "end": "end",
        "step": "step",
        "stroke": "stroke",
    }
)

# Fields that divide the drawing into equal parts
POSITIVE_FIELDS = frozenset({"step"})


@dataclass(frozen=True)
class CommandTemplate:
    """A command whose field values are still unevaluated expressions.

    Attributes:
        command_type: The command dataclass to construct
        arguments: (field name, expression) pairs, for every field the recipe set
    """

    command_type: type
    arguments: tuple[tuple[str, Expression], ...]

    @property
    def metrics_dependent(self) -> bool:
        """Whether any argument references a metric."""
        return any(expr.depends_on_metrics for _, expr in self.arguments)

    def resolve(self, metrics: Metrics) -> Command:
        """Evaluate every argument against `metrics` and build the command.

        Unset fields stay None and are defaulted by the drawing engine.
        """
        values = {name: expr.evaluate(metrics) for name, expr in self.arguments}
        return self.command_type(**values)

    def __str__(self) -> str:
        args = ", ".join(f"{name}={expr}" for name, expr in self.arguments)
        return f"{self.command_type.__name__}({args})"


def _field_kind(annotation: Any) -> type:
    """Strip Optional from a field annotation."""
    if isinstance(annotation, types.UnionType) or typing.get_origin(annotation) is typing.Union:
        args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        return args[0]
    return annotation


class CommandEmitter:
    """Emits CommandTemplates from primitive call nodes."""

    def __init__(self, translator: "ExpressionTranslator") -> None:
        self._translator = translator

    def emit(self, call: ast.Call, source: str | None = None) -> CommandTemplate:
        """Lower one call node into a CommandTemplate.

        Args:
            call: Parsed call expression
            source: Recipe source text, for diagnostics

        Returns:
            Template that yields exactly one command per resolve()

        Raises:
            TranslationError: If the call is outside the recipe grammar
        """
        if not isinstance(call.func, ast.Name):
            raise UnknownPrimitiveError(ast.unparse(call.func), source)

        command_type = PRIMITIVES.get(call.func.id)
        if command_type is None:
            raise UnknownPrimitiveError(call.func.id, source)

        builder: CommandBuilder[Any] = CommandBuilder(command_type)
        kinds = {f.name: _field_kind(f.type) for f in fields(command_type)}

        args = list(call.args)
        if args and isinstance(args[0], ast.Name) and args[0].id == PEN_ARGUMENT:
            args = args[1:]

        for index, arg in enumerate(args):
            if isinstance(arg, ast.Starred):
                raise UnsupportedExpressionError("starred argument", source)
            name = builder.descriptor.field_at(index)
            builder.set(name, self._argument(builder, name, kinds[name], arg, source))

        for keyword in call.keywords:
            if keyword.arg is None:
                raise UnsupportedExpressionError("keyword unpacking", source)
            name = KEYWORDS.get(keyword.arg)
            if name is None or not builder.has_field(name):
                raise UnknownKeywordError(keyword.arg, builder.descriptor.name, source)
            builder.set(
                name, self._argument(builder, name, kinds[name], keyword.value, source)
            )

        return CommandTemplate(command_type, tuple(builder.finish().items()))

    def _argument(
        self,
        builder: CommandBuilder[Any],
        name: str,
        expected: type,
        node: ast.expr,
        source: str | None,
    ) -> Expression:
        expr = self._translator.translate_value(node, source)
        if expr.kind is not expected:
            raise ArgumentTypeError(
                builder.descriptor.name, name, expected.__name__, expr.kind.__name__, source
            )
        if name in POSITIVE_FIELDS and not expr.depends_on_metrics:
            self._check_positive(builder.descriptor.name, name, expr, source)
        return expr

    def _check_positive(
        self, primitive: str, name: str, expr: Expression, source: str | None
    ) -> None:
        # metric-free expressions ignore the metrics they are given
        try:
            value = expr.evaluate(Metrics())
        except ZeroDivisionError:
            raise ArgumentValueError(primitive, name, "divides by zero", source) from None
        if value <= 0:  # type: ignore[operator]
            raise ArgumentValueError(primitive, name, f"must be positive, got {value:g}", source)
