"""Edge table (NET) construction for the scan-line sweep.

The edge table maps a scan row to the edges that become active on that
row. Rows sample the polygon at integer y, so an edge spanning
``y_min..y_max`` covers rows ``ceil(y_min) <= row < ceil(y_max)``.

The stored last row is therefore ``ceil(y_max) - 1`` rather than
``floor(y_max)``. The two agree when ``y_max`` is fractional. When it is an
integer, the vertex row belongs to the edge that starts there, so a vertex
shared by two edges is crossed once.

Horizontal edges, and edges that cover no integer row at all, never enter
the table: they contribute no crossing to any row.
"""

import logging
from dataclasses import dataclass

from scanfill.core.numeric import ceil_to_int, to_float
from scanfill.domain import FillRule, Line, Polygon

logger = logging.getLogger(__name__)

EdgeTable = dict[int, list["ScanlineEdge"]]


@dataclass(slots=True)
class ScanlineEdge:
    """Per-sweep state of one polygon edge.

    Attributes:
        y_start: First row on which the edge is active
        y_max: Last row on which the edge is active (inclusive),
            ``ceil(y_max) - 1`` of the lower endpoint
        x: Intercept with the current row
        delta_x: Change of the intercept per row (the inverse slope)
        direction: +1 if the edge runs towards larger y, else -1
    """

    y_start: int
    y_max: int
    x: float
    delta_x: float
    direction: int

    @classmethod
    def from_line(cls, line: Line, first_row: int = 0) -> "ScanlineEdge | None":
        """Build the sweep state for a polygon edge.

        Edges reaching above ``first_row`` are clipped: they enter the sweep
        at ``first_row`` with the intercept moved down to that row.

        Args:
            line: Polygon edge in original orientation
            first_row: Topmost row the sweep visits

        Returns:
            ScanlineEdge, or None when the edge crosses no visited row
        """
        inv_slope = line.inv_slope()
        if inv_slope is None:
            # horizontal
            return None
        delta_x = to_float(inv_slope)

        top = line.y_min_point()
        start_row = ceil_to_int(top.y)
        end_row = ceil_to_int(line.y_max_point().y)
        if start_row == end_row:
            # almost horizontal
            return None

        start_row = max(start_row, first_row)
        if end_row <= start_row:
            return None

        x = to_float(top.x) + delta_x * to_float(start_row - top.y)
        return cls(
            y_start=start_row,
            y_max=end_row - 1,
            x=x,
            delta_x=delta_x,
            direction=1 if line.is_upwards else -1,
        )

    def step(self) -> None:
        """Move the intercept down one row."""
        self.x += self.delta_x

    def crossing(self, rule: FillRule) -> tuple[float, int]:
        """Intercept and winding contribution of this edge on the current row."""
        return (self.x, rule.contribution(self.direction))


def build_edge_table(polygon: Polygon, first_row: int = 0) -> EdgeTable:
    """Group a polygon's edges by the row on which they become active.

    Edges are inserted in traversal order. Degenerate edges are skipped
    silently.

    Args:
        polygon: Polygon to rasterize
        first_row: Topmost row the sweep visits

    Returns:
        Mapping of activation row to edges starting on that row
    """
    table: EdgeTable = {}
    skipped = 0
    for line in polygon.edges():
        edge = ScanlineEdge.from_line(line, first_row=first_row)
        if edge is None:
            skipped += 1
            continue
        table.setdefault(edge.y_start, []).append(edge)

    logger.debug(
        "Edge table built: %d edges on %d rows, %d edges skipped",
        sum(len(edges) for edges in table.values()),
        len(table),
        skipped,
    )
    return table
