"""Core rasterization algorithms for scanfill.

This module contains the scan-line machinery:

- Numeric rounding of coordinates onto the pixel grid
- Edge table (NET) construction
- Active edge table (AET) sweep
- Fill-rule evaluation of a row's crossings
- Mask and color-buffer writers

All of it is single-threaded and owns no state between calls.

Key functions:
- scan_spans: Interior spans of a polygon, row by row
- polygon_interior: Rasterize a polygon into a boolean mask
- fill_polygon: Blend a polygon into an RGBA8 buffer
- interior_spans: Apply a fill rule to one row's crossings
- build_edge_table: Group polygon edges by activation row

Key classes:
- Rasterizer: Configured, logging front end for the functions above
- SceneRenderer: Composites a scene of polygons into a color buffer
- ActiveEdgeTable: Per-row active edge maintenance
- MaskWriter, ColorWriter: Output surfaces
"""

from scanfill.core.active_edges import ActiveEdgeTable, sweep
from scanfill.core.color import LinearColor, multiply
from scanfill.core.edge_table import EdgeTable, ScanlineEdge, build_edge_table
from scanfill.core.fill_rule import interior_spans
from scanfill.core.numeric import ceil_to_int, floor_to_int, round_to_int
from scanfill.core.rasterizer import Rasterizer, fill_polygon, polygon_interior, scan_spans
from scanfill.core.renderer import SceneRenderer
from scanfill.core.writer import ColorWriter, MaskWriter
from scanfill.domain import FillRule

__all__ = [
    # Sweep
    "ActiveEdgeTable",
    "ColorWriter",
    "EdgeTable",
    "FillRule",
    "LinearColor",
    "MaskWriter",
    "Rasterizer",
    "ScanlineEdge",
    "SceneRenderer",
    "build_edge_table",
    # Rounding
    "ceil_to_int",
    "fill_polygon",
    "floor_to_int",
    "interior_spans",
    "multiply",
    "polygon_interior",
    "round_to_int",
    "scan_spans",
    "sweep",
]
