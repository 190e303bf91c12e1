"""Utility functions for boxdraw.

This module provides logging setup and drawing statistics.
"""

from boxdraw.utils.logging import DrawingStats, configure_logging, reset_logging

__all__ = [
    "DrawingStats",
    "configure_logging",
    "reset_logging",
]
