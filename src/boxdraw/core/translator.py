"""Translator for the recipe expression grammar.

Recipes are written as Python call expressions, e.g.
`horHalfBar(boxPen, "right", FAT, buttL=STROKE)`. Only a small subset of
the language is accepted: numbers, the named constants below, + - * /,
unary minus, 2-tuples, NAME[0] / NAME[1], the string literals below, and
calls to known primitives. Anything else fails translation immediately.
"""

import ast
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from boxdraw.core.emitter import CommandEmitter, CommandTemplate
from boxdraw.core.expressions import (
    BinaryOp,
    Component,
    Constant,
    Expression,
    MetricRef,
    Negate,
    Number,
    PointExpr,
)
from boxdraw.domain import Direction, Point, Shade, Side
from boxdraw.exceptions import (
    RecipeSyntaxError,
    SubscriptError,
    TupleArityError,
    UnknownConstantError,
    UnknownStringError,
    UnsupportedExpressionError,
)

CONSTANTS: Mapping[str, str] = MappingProxyType(
    {
        "FAT": "fat",
        "BUTT": "butt",
        "WIDTH": "width",
        "HEIGHT": "height",
        "MEDIAN": "median",
        "RADIUS": "radius",
        "STROKE": "stroke",
        "EM_HEIGHT": "em_height",
        "BLOCK_TOP": "block_top",
        "FAT_STROKE": "fat_stroke",
        "BLOCK_HEIGHT": "block_height",
        "BLOCK_ORIGIN": "block_origin",
    }
)

STRINGS: Mapping[str, Enum] = MappingProxyType(
    {
        "right": Side.TOP_RIGHT,
        "left": Side.BOTTOM_LEFT,
        "top": Side.TOP_LEFT,
        "bottom": Side.BOTTOM_RIGHT,
        "TL": Side.TOP_LEFT,
        "TR": Side.TOP_RIGHT,
        "BL": Side.BOTTOM_LEFT,
        "BR": Side.BOTTOM_RIGHT,
        "bottomUp": Direction.BOTTOM_UP,
        "topDown": Direction.TOP_DOWN,
        "25": Shade.TWENTY_FIVE,
        "50": Shade.FIFTY,
        "75": Shade.SEVENTY_FIVE,
    }
)

BINARY_OPS: Mapping[type, str] = MappingProxyType(
    {
        ast.Add: "+",
        ast.Sub: "-",
        ast.Mult: "*",
        ast.Div: "/",
    }
)

AXES = ("x", "y")


class ExpressionTranslator:
    """Lowers recipe expressions into expression trees and command templates.

    Example:
        translator = ExpressionTranslator()
        template = translator.translate_command('horBar(boxPen, FAT)')
        command = template.resolve(Metrics())
    """

    def __init__(self) -> None:
        self._emitter = CommandEmitter(self)

    def parse(self, source: str) -> ast.expr:
        """Parse recipe source text into an expression node.

        Raises:
            RecipeSyntaxError: If the text is not a single valid expression
        """
        try:
            tree = ast.parse(source.strip(), mode="eval")
        except SyntaxError as e:
            raise RecipeSyntaxError(source, e.msg) from e
        return tree.body

    def translate_command(self, source: str) -> CommandTemplate:
        """Translate one recipe command, which must be a primitive call."""
        node = self.parse(source)
        if not isinstance(node, ast.Call):
            raise UnsupportedExpressionError(
                f"expected a primitive call, got {type(node).__name__}", source
            )
        return self._emitter.emit(node, source)

    def translate(
        self, node: ast.expr, source: str | None = None
    ) -> Expression | CommandTemplate:
        """Translate one expression node.

        Calls are delegated to the command emitter; every other supported
        form yields an Expression.

        Raises:
            TranslationError: If the node is outside the recipe grammar
        """
        if isinstance(node, ast.Call):
            return self._emitter.emit(node, source)
        return self.translate_value(node, source)

    def translate_value(self, node: ast.expr, source: str | None = None) -> Expression:
        """Translate a value expression (anything but a call)."""
        if isinstance(node, ast.Constant):
            return self._constant(node, source)

        if isinstance(node, ast.Name):
            return self._identifier(node.id, source)

        if isinstance(node, ast.BinOp):
            op = BINARY_OPS.get(type(node.op))
            if op is None:
                raise UnsupportedExpressionError(
                    f"operator {type(node.op).__name__}", source
                )
            left = self.translate_value(node.left, source)
            right = self.translate_value(node.right, source)
            self._check_operands(op, left, right, source)
            return BinaryOp(op, left, right)

        if isinstance(node, ast.UnaryOp):
            if not isinstance(node.op, ast.USub):
                raise UnsupportedExpressionError(
                    f"unary operator {type(node.op).__name__}", source
                )
            operand = self.translate_value(node.operand, source)
            if operand.kind is not float:
                raise UnsupportedExpressionError("negation of a non-number", source)
            return Negate(operand)

        if isinstance(node, ast.Tuple):
            if len(node.elts) != 2:
                raise TupleArityError(len(node.elts), source)
            x, y = (self.translate_value(element, source) for element in node.elts)
            if x.kind is not float or y.kind is not float:
                raise UnsupportedExpressionError("non-numeric tuple element", source)
            return PointExpr(x, y)

        if isinstance(node, ast.Subscript):
            return self._subscript(node, source)

        if isinstance(node, ast.Call):
            raise UnsupportedExpressionError("call used as a value", source)

        raise UnsupportedExpressionError(type(node).__name__, source)

    def _constant(self, node: ast.Constant, source: str | None) -> Expression:
        value = node.value
        if isinstance(value, bool):
            raise UnsupportedExpressionError(f"boolean literal {value}", source)
        if isinstance(value, int | float):
            return Number(float(value))
        if isinstance(value, str):
            constant = STRINGS.get(value)
            if constant is None:
                raise UnknownStringError(value, source)
            return Constant(constant)
        raise UnsupportedExpressionError(f"literal {value!r}", source)

    def _identifier(self, name: str, source: str | None) -> MetricRef:
        field = CONSTANTS.get(name)
        if field is None:
            raise UnknownConstantError(name, source)
        return MetricRef(field)

    def _subscript(self, node: ast.Subscript, source: str | None) -> Component:
        if not isinstance(node.value, ast.Name):
            raise SubscriptError("only named constants can be subscripted", source)

        base = self._identifier(node.value.id, source)
        if base.kind is not Point:
            raise SubscriptError(f"{node.value.id} is not a point", source)

        index = node.slice
        if (
            not isinstance(index, ast.Constant)
            or isinstance(index.value, bool)
            or not isinstance(index.value, int)
        ):
            raise SubscriptError("index must be an integer literal", source)
        if index.value not in (0, 1):
            raise SubscriptError(f"index {index.value} out of range", source)

        return Component(base, AXES[index.value])

    def _check_operands(
        self, op: str, left: Expression, right: Expression, source: str | None
    ) -> None:
        if left.kind is float and right.kind is float:
            return
        if left.kind is Point and right.kind is Point and op in ("+", "-"):
            return
        raise UnsupportedExpressionError(
            f"'{op}' between {left.kind.__name__} and {right.kind.__name__}", source
        )
