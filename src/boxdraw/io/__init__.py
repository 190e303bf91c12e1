"""Output layer for boxdraw.

This module connects the drawing engine to consumers of outlines. The
engine draws through the Canvas protocol; adapters record the calls,
forward them to fontTools pens, or render them as SVG path data.

Key classes:
- Canvas: Protocol of the four path calls
- RecordingCanvas: In-memory recording of calls
- PenCanvas: Adapter onto any fontTools pen
"""

from boxdraw.io.canvas import (
    Canvas,
    PathCall,
    PenCanvas,
    RecordingCanvas,
    format_number,
    recording_to_svg_path,
)

__all__ = [
    "Canvas",
    "PathCall",
    "PenCanvas",
    "RecordingCanvas",
    "format_number",
    "recording_to_svg_path",
]
