"""Tests for logging utilities."""

import logging

import pytest
import structlog

from boxdraw.core import Font
from boxdraw.io import RecordingCanvas
from boxdraw.utils import DrawingStats, configure_logging, reset_logging


@pytest.fixture
def restore_logging():
    """Remove boxdraw handlers and restore structlog defaults after a test."""
    level = logging.getLogger().level
    yield
    reset_logging()
    logging.getLogger().setLevel(level)
    structlog.reset_defaults()


def added_handlers(before: list[logging.Handler]) -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if h not in before]


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_no_file_by_default(self, restore_logging, tmp_path, monkeypatch) -> None:  # noqa: ANN001
        """Without log_file no file handler is added and nothing is written."""
        monkeypatch.chdir(tmp_path)
        before = list(logging.getLogger().handlers)
        configure_logging()
        added = added_handlers(before)
        assert len(added) == 1
        assert not any(isinstance(h, logging.FileHandler) for h in added)
        assert list(tmp_path.iterdir()) == []

    def test_file_handler(self, restore_logging, tmp_path) -> None:  # noqa: ANN001
        log_file = tmp_path / "boxdraw.log"
        logger = configure_logging(log_file=log_file, file_level="INFO")
        logger.info("Test event", glyphs=3)

        reset_logging()
        text = log_file.read_text(encoding="utf-8")
        assert "Logging initialized" in text
        assert "Test event" in text

    def test_quiet_adds_no_console_handler(self, restore_logging) -> None:  # noqa: ANN001
        before = len(logging.getLogger().handlers)
        configure_logging(quiet=True)
        assert len(logging.getLogger().handlers) == before

    def test_reconfigure_replaces_handlers(self, restore_logging, tmp_path) -> None:  # noqa: ANN001
        """Configuring again swaps the handlers instead of stacking them."""
        before = list(logging.getLogger().handlers)
        configure_logging()
        configure_logging(log_file=tmp_path / "boxdraw.log")
        added = added_handlers(before)
        assert len(added) == 2
        assert sum(isinstance(h, logging.FileHandler) for h in added) == 1

    def test_reset_detaches_handlers(self, restore_logging, tmp_path) -> None:  # noqa: ANN001
        before = list(logging.getLogger().handlers)
        configure_logging(log_file=tmp_path / "boxdraw.log")
        reset_logging()
        assert logging.getLogger().handlers == before


class TestDrawingStats:
    """Tests for DrawingStats."""

    def test_empty(self) -> None:
        stats = DrawingStats()
        assert stats.glyphs_drawn == 0
        assert stats.contours == 0
        assert stats.total_calls == 0

    def test_record(self) -> None:
        """Counts accumulate across glyphs."""
        font = Font()
        stats = DrawingStats()
        for code_point in (0x2500, 0x250C):
            recording = RecordingCanvas()
            font.draw_to(code_point, recording)
            stats.record(recording, len(font.recipe(code_point).commands))

        assert stats.glyphs_drawn == 2
        assert stats.commands_executed == 3
        assert stats.contours == 3
        assert stats.path_calls["move_to"] == 3
        assert stats.path_calls["line_to"] == 9
        assert stats.total_calls == 15
