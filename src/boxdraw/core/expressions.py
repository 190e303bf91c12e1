"""Typed expression trees for recipe arguments.

A translated recipe argument is a small tree of frozen nodes. Nothing is
evaluated at translation time: `evaluate(metrics)` computes the value once
the font metrics are known. Every node also reports its static `kind`
(float, Point or an enum class) so mistyped arguments are rejected when the
catalogue is compiled rather than when a glyph is drawn.
"""

import operator
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

from boxdraw.domain import Metrics, Point

Value = float | Point | Enum

# Metrics fields holding points rather than scalars
POINT_METRICS = frozenset({"block_origin", "block_top"})

BINARY_OPERATORS: dict[str, Callable[[Any, Any], Any]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


class Expression(Protocol):
    """Node of a translated recipe expression."""

    @property
    def kind(self) -> type: ...

    @property
    def depends_on_metrics(self) -> bool: ...

    def evaluate(self, metrics: Metrics) -> Value: ...


@dataclass(frozen=True, slots=True)
class Number:
    """Numeric literal."""

    value: float

    @property
    def kind(self) -> type:
        return float

    @property
    def depends_on_metrics(self) -> bool:
        return False

    def evaluate(self, metrics: Metrics) -> float:  # noqa: ARG002
        return self.value

    def __str__(self) -> str:
        return f"{self.value:g}"


@dataclass(frozen=True, slots=True)
class Constant:
    """Enum constant from a string literal."""

    value: Enum

    @property
    def kind(self) -> type:
        return type(self.value)

    @property
    def depends_on_metrics(self) -> bool:
        return False

    def evaluate(self, metrics: Metrics) -> Enum:  # noqa: ARG002
        return self.value

    def __str__(self) -> str:
        return f"{type(self.value).__name__}.{self.value.name}"


@dataclass(frozen=True, slots=True)
class MetricRef:
    """Reference to a Metrics field."""

    field: str

    @property
    def kind(self) -> type:
        return Point if self.field in POINT_METRICS else float

    @property
    def depends_on_metrics(self) -> bool:
        return True

    def evaluate(self, metrics: Metrics) -> float | Point:
        return getattr(metrics, self.field)

    def __str__(self) -> str:
        return f"m.{self.field}"


@dataclass(frozen=True, slots=True)
class Component:
    """`.x` or `.y` of a point-valued metric."""

    base: MetricRef
    axis: str

    @property
    def kind(self) -> type:
        return float

    @property
    def depends_on_metrics(self) -> bool:
        return True

    def evaluate(self, metrics: Metrics) -> float:
        return getattr(self.base.evaluate(metrics), self.axis)

    def __str__(self) -> str:
        return f"{self.base}.{self.axis}"


@dataclass(frozen=True, slots=True)
class Negate:
    """Unary minus on a scalar."""

    operand: Expression

    @property
    def kind(self) -> type:
        return float

    @property
    def depends_on_metrics(self) -> bool:
        return self.operand.depends_on_metrics

    def evaluate(self, metrics: Metrics) -> float:
        return -self.operand.evaluate(metrics)  # type: ignore[operator]

    def __str__(self) -> str:
        return f"-{self.operand}"


@dataclass(frozen=True, slots=True)
class BinaryOp:
    """Arithmetic on two operands, evaluated left to right.

    Scalars support all four operators; points support + and - with
    another point.
    """

    op: str
    left: Expression
    right: Expression

    @property
    def kind(self) -> type:
        return self.left.kind

    @property
    def depends_on_metrics(self) -> bool:
        return self.left.depends_on_metrics or self.right.depends_on_metrics

    def evaluate(self, metrics: Metrics) -> float | Point:
        left = self.left.evaluate(metrics)
        right = self.right.evaluate(metrics)
        return BINARY_OPERATORS[self.op](left, right)

    def __str__(self) -> str:
        return f"({self.left} {self.op} {self.right})"


@dataclass(frozen=True, slots=True)
class PointExpr:
    """Point built from a 2-tuple."""

    x: Expression
    y: Expression

    @property
    def kind(self) -> type:
        return Point

    @property
    def depends_on_metrics(self) -> bool:
        return self.x.depends_on_metrics or self.y.depends_on_metrics

    def evaluate(self, metrics: Metrics) -> Point:
        return Point(float(self.x.evaluate(metrics)), float(self.y.evaluate(metrics)))  # type: ignore[arg-type]

    def __str__(self) -> str:
        return f"Point({self.x}, {self.y})"
