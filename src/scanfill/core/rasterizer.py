"""Scan-line polygon rasterization.

Pipeline for one polygon:

    Polygon -> edge table -> row sweep over the active edges
            -> sorted crossings -> fill rule -> interior spans -> writer

Every call owns its edge table and active edge set; nothing is shared
between calls except the output surface the caller passes in. Filling
several polygons into one buffer composites them in call order.
"""

from collections.abc import Iterator

import numpy as np
import structlog

from scanfill.config import RasterConfig
from scanfill.core.active_edges import sweep
from scanfill.core.color import LinearColor
from scanfill.core.edge_table import build_edge_table
from scanfill.core.fill_rule import interior_spans
from scanfill.core.writer import ColorWriter, MaskWriter
from scanfill.domain import CanvasSpec, FillRule, Polygon, Span


def scan_spans(
    polygon: Polygon,
    spec: CanvasSpec,
    rule: FillRule = FillRule.NON_ZERO,
) -> Iterator[Span]:
    """Yield the interior spans of a polygon, top row first.

    Row ``r`` samples the polygon at ``y = r``; a column ``c`` is interior
    when ``x = c`` lies inside under ``rule``. Geometry outside the canvas
    is clipped.

    Args:
        polygon: Polygon to rasterize
        spec: Canvas dimensions
        rule: Fill rule

    Yields:
        Non-empty spans within ``spec``
    """
    if spec.is_empty:
        return

    edge_table = build_edge_table(polygon)
    for row, active in sweep(edge_table, spec.height):
        crossings = [edge.crossing(rule) for edge in active]
        for low, high in interior_spans(crossings, rule, spec.width):
            yield Span(row, low, high)


def polygon_interior(
    polygon: Polygon,
    spec: CanvasSpec,
    rule: FillRule = FillRule.NON_ZERO,
) -> np.ndarray:
    """Rasterize a polygon into a boolean mask.

    Args:
        polygon: Polygon to rasterize
        spec: Canvas dimensions
        rule: Fill rule

    Returns:
        Array of shape (height, width), True for interior pixels

    Examples:
        >>> triangle = Polygon.from_flat([0, 0, 8, 0, 8, 10])
        >>> mask = polygon_interior(triangle, CanvasSpec(8, 10))
        >>> bool(mask[0, 1]), bool(mask[9, 0])
        (True, False)
    """
    writer = MaskWriter(spec)
    writer.write(scan_spans(polygon, spec, rule))
    return writer.mask


def fill_polygon(
    buffer: np.ndarray,
    polygon: Polygon,
    color: LinearColor,
    rule: FillRule = FillRule.NON_ZERO,
) -> None:
    """Multiply-blend a polygon's interior into an RGBA8 buffer in place.

    Args:
        buffer: sRGB RGBA8 buffer of shape (height, width, 4)
        polygon: Polygon to rasterize
        color: Fill color in linear light
        rule: Fill rule

    Raises:
        BufferShapeError: If the buffer layout is not RGBA8
    """
    writer = ColorWriter(buffer, color)
    writer.write(scan_spans(polygon, writer.spec, rule))


class Rasterizer:
    """Rasterizer bound to a configuration and a logger.

    Example:
        rasterizer = Rasterizer(RasterConfig(fill_rule=FillRule.EVEN_ODD))
        mask = rasterizer.interior(polygon, CanvasSpec(64, 64))
    """

    def __init__(
        self,
        config: RasterConfig | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the rasterizer.

        Args:
            config: Raster settings (defaults if None)
            logger: Structured logger (the "scanfill" logger if None)
        """
        self.config = config or RasterConfig()
        self.logger = logger or structlog.get_logger("scanfill")

    def _rule(self, rule: FillRule | None) -> FillRule:
        return self.config.fill_rule if rule is None else rule

    def interior(
        self,
        polygon: Polygon,
        spec: CanvasSpec,
        rule: FillRule | None = None,
    ) -> np.ndarray:
        """Rasterize into a new boolean mask using the configured rule by default."""
        rule = self._rule(rule)
        writer = MaskWriter(spec)
        writer.write(scan_spans(polygon, spec, rule))
        self.logger.debug(
            "Polygon rasterized",
            vertices=len(polygon),
            rule=rule.value,
            width=spec.width,
            height=spec.height,
            pixels=writer.pixels_written,
        )
        return writer.mask

    def fill(
        self,
        buffer: np.ndarray,
        polygon: Polygon,
        color: LinearColor,
        rule: FillRule | None = None,
        coverage: MaskWriter | None = None,
    ) -> int:
        """Blend a polygon into ``buffer`` in place.

        Args:
            buffer: sRGB RGBA8 buffer of shape (height, width, 4)
            polygon: Polygon to rasterize
            color: Fill color in linear light
            rule: Fill rule (the configured one if None)
            coverage: Mask that also receives the covered spans

        Returns:
            Number of pixels covered
        """
        rule = self._rule(rule)
        writer = ColorWriter(buffer, color)
        spans = list(scan_spans(polygon, writer.spec, rule))
        writer.write(spans)
        if coverage is not None:
            coverage.write(spans)
        self.logger.debug(
            "Polygon filled",
            vertices=len(polygon),
            rule=rule.value,
            color=color.to_srgb8(),
            pixels=writer.pixels_written,
        )
        return writer.pixels_written
