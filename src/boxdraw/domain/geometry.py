"""Core geometric types for glyph drawing.

This module defines the value types shared by the command model and the
drawing engine:
- Point: A 2D point in font units
- Side: Quadrant a half bar, corner or arc applies to
- Direction: Orientation of a diagonal stroke
- Shade: Density tier for fill patterns
"""

from dataclasses import dataclass
from enum import Enum, auto

# Decimal digits kept when hashing coordinates
HASH_PRECISION = 1000


class Side(Enum):
    """Quadrant of the glyph box.

    Half bars only look at the horizontal or vertical half, so "left" maps
    to BOTTOM_LEFT and "top" to TOP_LEFT without ambiguity.
    """

    TOP_LEFT = auto()
    TOP_RIGHT = auto()
    BOTTOM_LEFT = auto()
    BOTTOM_RIGHT = auto()

    @property
    def is_top(self) -> bool:
        return self in (Side.TOP_LEFT, Side.TOP_RIGHT)

    @property
    def is_left(self) -> bool:
        return self in (Side.TOP_LEFT, Side.BOTTOM_LEFT)


class Direction(Enum):
    """Orientation of a diagonal stroke."""

    TOP_DOWN = auto()
    BOTTOM_UP = auto()


class Shade(Enum):
    """Density tier for fill patterns (percent coverage)."""

    TWENTY_FIVE = 25
    FIFTY = 50
    SEVENTY_FIVE = 75


@dataclass(frozen=True, slots=True, eq=False)
class Point:
    """A point in 2D space.

    Equality is exact. The hash is quantized to three decimal digits so
    points that compare equal always hash alike and near-identical points
    fall in the same bucket.

    Attributes:
        x: X coordinate in font units
        y: Y coordinate in font units
    """

    x: float
    y: float

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash(
            (round(self.x * HASH_PRECISION), round(self.y * HASH_PRECISION))
        )

    def __add__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, coords: tuple[float, float]) -> "Point":
        """Create a point from an (x, y) pair."""
        x, y = coords
        return cls(float(x), float(y))
