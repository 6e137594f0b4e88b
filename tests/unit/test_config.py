"""Unit tests for configuration and logging utilities."""

import logging
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from scanfill.config import (
    LoggingConfig,
    RasterConfig,
    RenderConfig,
    ScanfillSettings,
    get_default_settings,
)
from scanfill.domain import FillRule
from scanfill.utils import RenderLogger, RenderStats, configure_logging


class TestSettings:
    """Tests for the pydantic settings models."""

    def test_defaults(self):
        """Test default settings values."""
        settings = get_default_settings()
        assert settings.raster.fill_rule is FillRule.NON_ZERO
        assert settings.render.preview_max_width == 80
        assert settings.logging.log_file is None
        assert settings.logging.log_level == "WARNING"

    def test_fill_rule_from_string(self):
        """Test the fill rule accepts its string value."""
        assert RasterConfig(fill_rule="even-odd").fill_rule is FillRule.EVEN_ODD

    def test_unknown_fill_rule(self):
        with pytest.raises(ValidationError):
            RasterConfig(fill_rule="winding")

    def test_log_level_normalized(self):
        """Test log levels are upper-cased."""
        assert LoggingConfig(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            LoggingConfig(log_level="loud")

    @pytest.mark.parametrize("width", [4, 1000])
    def test_preview_width_bounds(self, width):
        """Test preview width outside [8, 400] is rejected."""
        with pytest.raises(ValidationError):
            RenderConfig(preview_max_width=width)

    def test_preview_chars_single(self):
        with pytest.raises(ValidationError):
            RenderConfig(filled_char="##")

    def test_nested(self):
        settings = ScanfillSettings(raster=RasterConfig(fill_rule=FillRule.EVEN_ODD))
        assert settings.raster.fill_rule is FillRule.EVEN_ODD


class TestRenderLogger:
    """Tests for RenderLogger and RenderStats."""

    def test_duration_without_times(self):
        assert RenderStats().duration_seconds == 0.0

    def test_tracks_fills(self):
        """Test filled and skipped polygons are counted."""
        logger = MagicMock()
        render_logger = RenderLogger(logger)
        render_logger.start(10, 10, 2)
        render_logger.log_polygon_filled("a", 4, 25)
        render_logger.log_polygon_skipped("b", "no interior pixels on canvas")
        render_logger.finish()

        stats = render_logger.stats
        assert stats.polygons_filled == 1
        assert stats.polygons_skipped == 1
        assert stats.pixels_covered == 25
        assert stats.coverage == [("a", 25), ("b", 0)]
        assert stats.end_time is not None
        assert logger.debug.call_count == 2


class TestConfigureLogging:
    """Tests for configure_logging."""

    @pytest.fixture(autouse=True)
    def restore_root_handlers(self):
        root = logging.getLogger()
        handlers = list(root.handlers)
        level = root.level
        yield
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers = handlers
        root.setLevel(level)

    def test_file_output(self, tmp_path):
        """Test structured records reach the log file."""
        log_file = tmp_path / "scanfill.log"
        logger = configure_logging(log_file=log_file, quiet=True)
        logger.debug("Polygon rasterized", pixels=3)
        for handler in logging.getLogger().handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "Logging initialized" in content
        assert "Polygon rasterized" in content

    def test_quiet_without_file_adds_no_handlers(self):
        before = len(logging.getLogger().handlers)
        configure_logging(quiet=True)
        assert len(logging.getLogger().handlers) == before
