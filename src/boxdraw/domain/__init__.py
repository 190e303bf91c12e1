"""Domain models for boxdraw.

This module contains the value types shared by the recipe compiler and the
drawing engine. All models are immutable:

- Point: A 2D point with a quantized hash
- Side, Direction, Shade: Closed enumerations used as command arguments
- Metrics: The font design parameters
- Command types: One frozen dataclass per drawing primitive
- CommandBuilder: Validating builder driven by field declaration order
"""

from boxdraw.domain.commands import (
    COMMAND_TYPES,
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
    OuterCorner,
    PolkaShade,
    PrimitiveDescriptor,
    StripedShade,
    VertBar,
    VertHalfBar,
    VerticalShade,
    VertLine,
    VertSplitBar,
    VertSplitHalfBar,
    descriptor_for,
)
from boxdraw.domain.geometry import Direction, Point, Shade, Side
from boxdraw.domain.metrics import Metrics, Precision

__all__: list[str] = [
    # Enums
    "Direction",
    "Precision",
    "Shade",
    "Side",
    # Core types
    "Metrics",
    "Point",
    # Commands
    "Arc",
    "Box",
    "BoxShade",
    "COMMAND_TYPES",
    "Command",
    "CommandBuilder",
    "DashedHorLine",
    "DashedVertLine",
    "Diagonal",
    "HorBar",
    "HorHalfBar",
    "HorLine",
    "HorSplitBar",
    "HorSplitHalfBar",
    "InnerCorner",
    "OuterCorner",
    "PolkaShade",
    "PrimitiveDescriptor",
    "StripedShade",
    "VertBar",
    "VertHalfBar",
    "VertLine",
    "VertSplitBar",
    "VertSplitHalfBar",
    "VerticalShade",
    "descriptor_for",
]
