"""Drawing command value types.

Each command is a frozen dataclass naming one drawing primitive. Required
fields have no default. Optional fields default to None, which the drawing
engine resolves against Metrics at execution time, so a command can be built
before the metrics are known.

Field declaration order is significant: it is the positional argument order
used by recipe calls. PrimitiveDescriptor and CommandBuilder expose that
order for data-driven construction.
"""

import dataclasses
from dataclasses import dataclass
from functools import cache
from typing import Any, Generic, TypeVar, Union

from boxdraw.domain.geometry import Direction, Point, Shade, Side
from boxdraw.exceptions import (
    DuplicateArgumentError,
    MissingArgumentError,
    TooManyArgumentsError,
)


@dataclass(frozen=True, slots=True)
class HorBar:
    """Full-width horizontal bar on the median."""

    fatness: float | None = None
    median: float | None = None
    butt_left: float | None = None
    butt_right: float | None = None


@dataclass(frozen=True, slots=True)
class VertBar:
    """Full-height vertical bar on the glyph centre."""

    fatness: float | None = None
    butt_bot: float | None = None
    butt_top: float | None = None


@dataclass(frozen=True, slots=True)
class DashedHorLine:
    """Horizontal line split into `step` dashes."""

    step: float
    width: float | None = None
    stroke: float | None = None


@dataclass(frozen=True, slots=True)
class DashedVertLine:
    """Vertical line split into `step` dashes."""

    step: float
    length: float | None = None
    stroke: float | None = None


@dataclass(frozen=True, slots=True)
class HorHalfBar:
    """Half-width horizontal bar, left or right."""

    side: Side
    fatness: float | None = None
    median: float | None = None
    butt_left: float | None = None
    butt_right: float | None = None


@dataclass(frozen=True, slots=True)
class VertHalfBar:
    """Half-height vertical bar, top or bottom."""

    side: Side
    fatness: float | None = None
    butt_bot: float | None = None
    butt_top: float | None = None


@dataclass(frozen=True, slots=True)
class Box:
    """Axis-aligned filled rectangle."""

    start: Point | None = None
    end: Point | None = None


@dataclass(frozen=True, slots=True)
class Arc:
    """Rounded quarter-circle corner."""

    start: Point
    end: Point
    side: Side
    stroke: float | None = None
    radius: float | None = None
    butt: float | None = None


@dataclass(frozen=True, slots=True)
class PolkaShade:
    """Fill pattern of polka dots."""

    shade: Shade


@dataclass(frozen=True, slots=True)
class BoxShade:
    """Fill pattern of little boxes."""

    shade: Shade


@dataclass(frozen=True, slots=True)
class StripedShade:
    """Fill pattern of diagonal stripes."""

    shade: Shade


@dataclass(frozen=True, slots=True)
class VerticalShade:
    """Fill pattern of vertical bars."""

    shade: Shade


@dataclass(frozen=True, slots=True)
class Diagonal:
    """Constant-thickness diagonal stroke."""

    start: Point
    end: Point
    direction: Direction


@dataclass(frozen=True, slots=True)
class InnerCorner:
    """Inner half of a double-stroked corner."""

    side: Side
    fatness: float | None = None
    corner_median: float | None = None


@dataclass(frozen=True, slots=True)
class OuterCorner:
    """Outer half of a double-stroked corner."""

    side: Side
    fatness: float | None = None
    corner_median: float | None = None


@dataclass(frozen=True, slots=True)
class HorSplitBar:
    """Double-stroked full-width horizontal bar."""

    fatness: float | None = None
    butt_left: float | None = None
    butt_right: float | None = None


@dataclass(frozen=True, slots=True)
class VertSplitBar:
    """Double-stroked full-height vertical bar."""

    fatness: float | None = None
    butt_bot: float | None = None
    butt_top: float | None = None


@dataclass(frozen=True, slots=True)
class HorSplitHalfBar:
    """Double-stroked half-width horizontal bar."""

    side: Side
    fatness: float | None = None
    butt_left: float | None = None
    butt_right: float | None = None


@dataclass(frozen=True, slots=True)
class VertSplitHalfBar:
    """Double-stroked half-height vertical bar."""

    side: Side
    fatness: float | None = None
    butt_bot: float | None = None
    butt_top: float | None = None


@dataclass(frozen=True, slots=True)
class HorLine:
    """Horizontal line between two explicit points."""

    start: Point
    end: Point
    stroke: float
    butt_left: float | None = None
    butt_right: float | None = None


@dataclass(frozen=True, slots=True)
class VertLine:
    """Vertical line between two explicit points."""

    start: Point
    end: Point
    stroke: float
    butt_bot: float | None = None
    butt_top: float | None = None


Command = Union[
    HorBar,
    VertBar,
    DashedHorLine,
    DashedVertLine,
    HorHalfBar,
    VertHalfBar,
    Box,
    Arc,
    PolkaShade,
    BoxShade,
    StripedShade,
    VerticalShade,
    Diagonal,
    InnerCorner,
    OuterCorner,
    HorSplitBar,
    VertSplitBar,
    HorSplitHalfBar,
    VertSplitHalfBar,
    HorLine,
    VertLine,
]

COMMAND_TYPES: tuple[type, ...] = Command.__args__  # type: ignore[attr-defined]

C = TypeVar("C")


@dataclass(frozen=True)
class PrimitiveDescriptor:
    """Field layout of one command type.

    Attributes:
        command_type: The command dataclass
        field_names: Field names in declaration (positional) order
        required: Names of fields without a default
    """

    command_type: type
    field_names: tuple[str, ...]
    required: frozenset[str]

    @property
    def name(self) -> str:
        return self.command_type.__name__

    def field_at(self, index: int) -> str:
        """Name of the field at a positional index.

        Raises:
            TooManyArgumentsError: If index is past the last field
        """
        if index >= len(self.field_names):
            raise TooManyArgumentsError(self.name, index + 1, len(self.field_names))
        return self.field_names[index]


@cache
def descriptor_for(command_type: type) -> PrimitiveDescriptor:
    """Get the descriptor for a command type, built once per type."""
    fields = dataclasses.fields(command_type)
    return PrimitiveDescriptor(
        command_type=command_type,
        field_names=tuple(f.name for f in fields),
        required=frozenset(
            f.name
            for f in fields
            if f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING
        ),
    )


class CommandBuilder(Generic[C]):
    """Fluent, validating builder for a command type.

    Values are collected by field name or positional index and checked on
    finish. The same builder drives compile-time templates (values are
    expressions) and direct construction (values are numbers and points).

    Example:
        command = CommandBuilder(HorHalfBar).set_positional(0, Side.TOP_RIGHT).set(
            "butt_left", 160.0
        ).build()
    """

    def __init__(self, command_type: type[C]) -> None:
        self._descriptor = descriptor_for(command_type)
        self._values: dict[str, Any] = {}

    @property
    def descriptor(self) -> PrimitiveDescriptor:
        return self._descriptor

    def has_field(self, name: str) -> bool:
        return name in self._descriptor.field_names

    def set(self, name: str, value: Any) -> "CommandBuilder[C]":
        """Set a field by name.

        Raises:
            KeyError: If the command has no such field
            DuplicateArgumentError: If the field is already set
        """
        if not self.has_field(name):
            raise KeyError(name)
        if name in self._values:
            raise DuplicateArgumentError(self._descriptor.name, name)
        self._values[name] = value
        return self

    def set_positional(self, index: int, value: Any) -> "CommandBuilder[C]":
        """Set the field declared at `index`."""
        return self.set(self._descriptor.field_at(index), value)

    def finish(self) -> dict[str, Any]:
        """Validate and return the collected field values.

        Raises:
            MissingArgumentError: If a required field was never set
        """
        for name in self._descriptor.field_names:
            if name in self._descriptor.required and name not in self._values:
                raise MissingArgumentError(self._descriptor.name, name)
        return dict(self._values)

    def build(self) -> C:
        """Construct the command from the collected values."""
        return self._descriptor.command_type(**self.finish())
