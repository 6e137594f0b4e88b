"""Unit tests for SceneRenderer."""

from unittest.mock import MagicMock

import pytest

from scanfill.config import RasterConfig, ScanfillSettings
from scanfill.core import LinearColor, SceneRenderer
from scanfill.domain import CanvasSpec, FillRule, Polygon
from scanfill.io import Layer, Scene

# Self-intersecting polygon whose overlap contains pixel (row 7, col 10)
STAR = [0, 0, 20, 0, 3, 15, 13, 3, 8, 3, 18, 15]
BLACK = LinearColor(0.0, 0.0, 0.0)


@pytest.fixture
def renderer() -> SceneRenderer:
    return SceneRenderer(logger=MagicMock())


class TestSceneRenderer:
    """Tests for SceneRenderer class."""

    def test_init_defaults(self):
        """Test renderer falls back to default settings."""
        renderer = SceneRenderer(logger=MagicMock())
        assert renderer.settings == ScanfillSettings()
        assert renderer.rasterizer.config.fill_rule is FillRule.NON_ZERO

    def test_background_only(self, renderer):
        """Test a scene without layers renders its background."""
        scene = Scene(spec=CanvasSpec(3, 2), background=(10, 20, 30, 255))
        buffer = renderer.render(scene)
        assert buffer.shape == (2, 3, 4)
        assert (buffer == (10, 20, 30, 255)).all()

    def test_stats(self, renderer):
        """Test coverage is recorded per layer, including skipped layers."""
        scene = Scene(
            spec=CanvasSpec(10, 10),
            layers=[
                Layer("square", Polygon.from_flat([0, 0, 4, 0, 4, 3, 0, 3]), BLACK),
                Layer("offscreen", Polygon.from_flat([50, 50, 60, 50, 60, 60]), BLACK),
            ],
        )
        renderer.render(scene)

        stats = renderer.stats
        assert stats.polygons_filled == 1
        assert stats.polygons_skipped == 1
        assert stats.pixels_covered == 12
        assert stats.coverage == [("square", 12), ("offscreen", 0)]
        assert stats.duration_seconds >= 0.0

    def test_layer_rule_overrides_settings(self):
        """Test per-layer rules take precedence over the configured default."""
        settings = ScanfillSettings(raster=RasterConfig(fill_rule=FillRule.NON_ZERO))
        renderer = SceneRenderer(settings, logger=MagicMock())
        scene = Scene(
            spec=CanvasSpec(30, 20),
            layers=[Layer("star", Polygon.from_flat(STAR), BLACK, FillRule.EVEN_ODD)],
        )
        buffer = renderer.render(scene)
        assert tuple(buffer[7, 10]) == (255, 255, 255, 255)

    def test_settings_rule_used_without_layer_rule(self):
        """Test layers without a rule use the configured one."""
        settings = ScanfillSettings(raster=RasterConfig(fill_rule=FillRule.EVEN_ODD))
        renderer = SceneRenderer(settings, logger=MagicMock())
        scene = Scene(
            spec=CanvasSpec(30, 20),
            layers=[Layer("star", Polygon.from_flat(STAR), BLACK)],
        )
        buffer = renderer.render(scene)
        assert tuple(buffer[7, 10]) == (255, 255, 255, 255)
        assert tuple(buffer[7, 9]) == (0, 0, 0, 255)

    def test_coverage_before_render(self, renderer):
        """Test accessing coverage before rendering raises RuntimeError."""
        with pytest.raises(RuntimeError, match="No scene rendered"):
            _ = renderer.coverage

    def test_coverage_includes_unchanged_pixels(self, renderer):
        """Test a white layer on white counts as covered although no pixel changes."""
        scene = Scene(
            spec=CanvasSpec(6, 5),
            layers=[
                Layer("white", Polygon.from_flat([0, 0, 4, 0, 4, 3, 0, 3]), LinearColor(1.0, 1.0, 1.0))
            ],
        )
        buffer = renderer.render(scene)
        assert (buffer == 255).all()
        assert int(renderer.coverage.sum()) == 12
        assert renderer.coverage[:3, :4].all()
        assert renderer.stats.pixels_covered == 12

    def test_coverage_is_union_of_layers(self, renderer):
        """Test overlapping layers are counted once in the coverage mask."""
        square = Polygon.from_flat([0, 0, 4, 0, 4, 3, 0, 3])
        scene = Scene(
            spec=CanvasSpec(10, 10),
            layers=[Layer("a", square, BLACK), Layer("b", square, BLACK)],
        )
        renderer.render(scene)
        assert int(renderer.coverage.sum()) == 12
        assert renderer.stats.pixels_covered == 24

    def test_logs_start_and_finish(self):
        """Test rendering is bracketed by info logs."""
        logger = MagicMock()
        SceneRenderer(logger=logger).render(Scene(spec=CanvasSpec(2, 2)))
        messages = [call.args[0] for call in logger.info.call_args_list]
        assert messages == ["Rendering started", "Rendering complete"]
