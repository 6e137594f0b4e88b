"""Domain models for scanfill.

This module contains the value types shared by the rasterizer, the scene
reader and the CLI:

- Point, Line, Polygon: polygon geometry in the caller's numeric type
- CanvasSpec: pixel dimensions of the output surface
- FillRule: non-zero winding or even-odd
- Span: half-open run of interior pixels on one row
"""

from scanfill.domain.canvas import CanvasSpec, FillRule, Span
from scanfill.domain.geometry import Line, Point, Polygon

__all__: list[str] = [
    # Enums
    "FillRule",
    # Geometry
    "Point",
    "Line",
    "Polygon",
    # Raster
    "CanvasSpec",
    "Span",
]
