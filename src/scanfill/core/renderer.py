"""Scene rendering.

Composites the layers of a scene into a fresh RGBA8 buffer, one polygon
after another. Records per-layer coverage and the union of covered pixels.
"""

import numpy as np
import structlog

from scanfill.config import ScanfillSettings
from scanfill.core.rasterizer import Rasterizer
from scanfill.core.writer import MaskWriter
from scanfill.io import Scene
from scanfill.utils import RenderLogger, RenderStats


class SceneRenderer:
    """Renders scenes with a shared rasterizer configuration.

    Example:
        renderer = SceneRenderer(settings)
        buffer = renderer.render(SceneReader(path).scene)
        print(renderer.stats.pixels_covered)
    """

    def __init__(
        self,
        settings: ScanfillSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            settings: Application settings (defaults if None)
            logger: Structured logger (the "scanfill" logger if None)
        """
        self.settings = settings or ScanfillSettings()
        self.logger = logger or structlog.get_logger("scanfill")
        self.rasterizer = Rasterizer(self.settings.raster, self.logger)
        self.render_logger = RenderLogger(self.logger)
        self._coverage: MaskWriter | None = None

    def render(self, scene: Scene) -> np.ndarray:
        """Composite all layers in order.

        Args:
            scene: Scene to render

        Returns:
            sRGB RGBA8 buffer of shape (height, width, 4)
        """
        buffer = scene.spec.blank_buffer(scene.background)
        self._coverage = MaskWriter(scene.spec)
        self.render_logger.start(scene.spec.width, scene.spec.height, len(scene.layers))

        for layer in scene.layers:
            pixels = self.rasterizer.fill(
                buffer, layer.polygon, layer.color, layer.rule, coverage=self._coverage
            )
            if pixels == 0:
                self.render_logger.log_polygon_skipped(layer.name, "no interior pixels on canvas")
            else:
                self.render_logger.log_polygon_filled(layer.name, len(layer.polygon), pixels)

        self.render_logger.finish()
        return buffer

    @property
    def coverage(self) -> np.ndarray:
        """Mask of pixels covered by any layer of the last render.

        Pixels count as covered even when blending left their color unchanged.

        Raises:
            RuntimeError: If nothing has been rendered yet
        """
        if self._coverage is None:
            raise RuntimeError("No scene rendered. Call render() first.")
        return self._coverage.mask

    @property
    def stats(self) -> RenderStats:
        return self.render_logger.stats
