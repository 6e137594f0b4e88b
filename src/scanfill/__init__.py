"""Scanfill - Scan-line polygon rasterization.

Scanfill rasterizes simple, concave and self-intersecting polygons into
per-pixel interior masks or directly into RGBA color buffers using an
active-edge-table sweep. Both the non-zero winding and the even-odd fill
rules are supported.

Example:
    >>> from scanfill import CanvasSpec, FillRule, Polygon, polygon_interior
    >>> square = Polygon.from_flat([0, 0, 8, 0, 8, 10, 0, 10])
    >>> mask = polygon_interior(square, CanvasSpec(8, 10), FillRule.NON_ZERO)
    >>> int(mask.sum())
    80
"""

__version__ = "0.1.0"
__author__ = "Scanfill contributors"

from scanfill.core import FillRule, Rasterizer, fill_polygon, polygon_interior, scan_spans
from scanfill.domain import CanvasSpec, Line, Point, Polygon, Span

__all__ = [
    "CanvasSpec",
    "FillRule",
    "Line",
    "Point",
    "Polygon",
    "Rasterizer",
    "Span",
    "__author__",
    "__version__",
    "fill_polygon",
    "polygon_interior",
    "scan_spans",
]
