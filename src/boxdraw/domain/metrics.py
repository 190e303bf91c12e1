"""Font metrics driving the parametric drawing engine.

Metrics are the parametrization of a font's design: glyph box, stroke
weights and overlaps. Every drawing command resolves its unset fields against
a Metrics instance at execution time.
"""

import math
import struct
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from boxdraw.domain.geometry import Point

DEFAULT_WIDTH = 600.0
DEFAULT_HEIGHT = 1400.0
DEFAULT_MEDIAN = 300.0
DEFAULT_STROKE = 160.0
DEFAULT_FAT = 2.0
DEFAULT_BLOCK_HEIGHT = 1400.0
DEFAULT_EM_HEIGHT = 1200.0

# Bezier control point distance for a quarter circle
KAPPA = 4 * (math.sqrt(2) - 1) / 3

SCALAR_FIELDS = (
    "width",
    "height",
    "median",
    "stroke",
    "fat",
    "radius",
    "block_height",
    "em_height",
    "fat_stroke",
    "butt",
    "kappa",
)


class Precision(str, Enum):
    """Floating-point precision of metric values."""

    SINGLE = "single"
    DOUBLE = "double"


def to_single(value: float) -> float:
    """Round a float to the nearest IEEE-754 binary32 value."""
    return struct.unpack("f", struct.pack("f", value))[0]


class Metrics(BaseModel):
    """Design parameters of a box-drawing font.

    radius, fat_stroke and butt default to width / 2, stroke * fat and
    stroke. block_origin and block_top are always computed from width,
    median and block_height.
    """

    model_config = ConfigDict(frozen=True)

    width: float = Field(default=DEFAULT_WIDTH, gt=0, description="Glyph width")
    height: float = Field(
        default=DEFAULT_HEIGHT,
        gt=0,
        description="Height for line elements, including overlap",
    )
    median: float = Field(default=DEFAULT_MEDIAN, description="Median line")
    stroke: float = Field(default=DEFAULT_STROKE, gt=0, description="General stroke weight")
    fat: float = Field(
        default=DEFAULT_FAT,
        gt=0,
        description="Multiplication factor for drawing 'fat' strokes",
    )
    radius: float = Field(default=DEFAULT_WIDTH / 2, ge=0, description="Radius for arc elements")
    block_height: float = Field(
        default=DEFAULT_BLOCK_HEIGHT, gt=0, description="Height for block elements"
    )
    em_height: float = Field(
        default=DEFAULT_EM_HEIGHT,
        gt=0,
        description="Height for elements that don't connect vertically",
    )
    fat_stroke: float = Field(
        default=DEFAULT_STROKE * DEFAULT_FAT, gt=0, description="Stroke thickness for 'fat' lines"
    )
    butt: float = Field(default=DEFAULT_STROKE, description="Horizontal overlap")
    kappa: float = Field(default=KAPPA, gt=0, description="Bezier distance for circles")
    precision: Precision = Field(default=Precision.DOUBLE)

    @model_validator(mode="before")
    @classmethod
    def _derive_defaults(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        values = dict(data)
        width = float(values.get("width", DEFAULT_WIDTH))
        stroke = float(values.get("stroke", DEFAULT_STROKE))
        fat = float(values.get("fat", DEFAULT_FAT))

        if values.get("radius") is None:
            values["radius"] = width / 2
        if values.get("fat_stroke") is None:
            values["fat_stroke"] = stroke * fat
        if values.get("butt") is None:
            values["butt"] = stroke

        if Precision(values.get("precision", Precision.DOUBLE)) is Precision.SINGLE:
            for name in SCALAR_FIELDS:
                raw = values.get(name)
                if raw is None:
                    raw = cls.model_fields[name].default
                values[name] = to_single(float(raw))

        return values

    @property
    def block_origin(self) -> Point:
        """Bottom-left corner of the block element area."""
        return Point(0.0, self.median - self.block_height / 2)

    @property
    def block_top(self) -> Point:
        """Top-right corner of the block element area."""
        return Point(self.width, self.median + self.block_height / 2)

    @classmethod
    def default(cls, precision: Precision = Precision.DOUBLE) -> "Metrics":
        """Get the canonical metrics at the given precision."""
        return cls(precision=precision)
