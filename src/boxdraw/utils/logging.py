"""Logging utilities for boxdraw."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from boxdraw.io import RecordingCanvas

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(message)s"

# Shared by every boxdraw logger; events are rendered as one JSON object per line
PROCESSORS = (
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
    structlog.processors.JSONRenderer(),
)


@dataclass
class DrawingStats:
    """Statistics from a drawing run."""

    glyphs_drawn: int = 0
    commands_executed: int = 0
    path_calls: dict[str, int] = field(default_factory=dict)

    @property
    def contours(self) -> int:
        """Closed contours drawn."""
        return self.path_calls.get("close_path", 0)

    @property
    def total_calls(self) -> int:
        return sum(self.path_calls.values())

    def record(self, recording: RecordingCanvas, commands: int) -> None:
        """Add one glyph's recorded calls to the totals."""
        self.glyphs_drawn += 1
        self.commands_executed += commands
        for name, _ in recording.value:
            self.path_calls[name] = self.path_calls.get(name, 0) + 1


# Handlers added to the root logger by configure_logging
_attached: list[logging.Handler] = []


def _attach(handler: logging.Handler, level: str, fmt: str) -> None:
    handler.setLevel(logging.getLevelName(level.upper()))
    handler.setFormatter(logging.Formatter(fmt))
    logging.getLogger().addHandler(handler)
    _attached.append(handler)


def reset_logging() -> None:
    """Detach and close the handlers added by configure_logging."""
    root = logging.getLogger()
    while _attached:
        handler = _attached.pop()
        root.removeHandler(handler)
        handler.close()


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging.

    The root logger passes everything; each handler filters at its own
    level. No log file is written unless log_file is given. Handlers from
    an earlier call are replaced, not added to.

    Args:
        log_file: Path to log file (no file handler if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    reset_logging()
    logging.getLogger().setLevel(logging.DEBUG)

    if log_file is not None:
        _attach(logging.FileHandler(log_file, encoding="utf-8"), file_level, FILE_FORMAT)
    if not quiet:
        _attach(logging.StreamHandler(), console_level, CONSOLE_FORMAT)

    structlog.configure(
        processors=list(PROCESSORS),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("boxdraw")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )
    return logger
