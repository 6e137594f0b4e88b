"""Active edge table (AET) maintenance.

Each row is processed with the same three steps, in this order:

1. advance: every active edge moves its intercept down one row
2. merge: edges whose activation row is the current row join the table
3. retire: edges whose last row lies above the current row leave

Merging after advancing keeps new edges at the intercept they were built
with; retiring after merging keeps an edge active through its last row.
"""

from collections.abc import Iterator
from dataclasses import replace

from scanfill.core.edge_table import EdgeTable, ScanlineEdge


class ActiveEdgeTable:
    """Working set of edges crossing the row being processed.

    Example:
        aet = ActiveEdgeTable(build_edge_table(polygon))
        for row in range(height):
            edges = aet.advance(row)
    """

    def __init__(self, edge_table: EdgeTable) -> None:
        """Initialize an empty active set over an edge table.

        Args:
            edge_table: Edges grouped by activation row, not modified
        """
        self._edge_table = edge_table
        self._active: list[ScanlineEdge] = []
        self._row: int | None = None

    @property
    def edges(self) -> list[ScanlineEdge]:
        return self._active

    @property
    def row(self) -> int | None:
        """Row the active set currently describes."""
        return self._row

    def __len__(self) -> int:
        return len(self._active)

    def advance(self, row: int) -> list[ScanlineEdge]:
        """Move the active set to ``row``.

        Rows must be visited consecutively, starting from the first row of
        the sweep.

        Args:
            row: Row to move to

        Returns:
            Edges active on ``row``

        Raises:
            ValueError: If ``row`` does not follow the previous row
        """
        if self._row is not None and row != self._row + 1:
            raise ValueError(f"Rows must be consecutive: expected {self._row + 1}, got {row}")

        for edge in self._active:
            edge.step()

        self._active.extend(replace(edge) for edge in self._edge_table.get(row, ()))

        self._active = [edge for edge in self._active if edge.y_max >= row]
        self._row = row
        return self._active


def sweep(edge_table: EdgeTable, height: int) -> Iterator[tuple[int, list[ScanlineEdge]]]:
    """Yield ``(row, active_edges)`` for every row in ``0..height-1`` with edges.

    Rows with no active edges are skipped. The yielded list is owned by the
    sweep and changes on the next iteration.
    """
    aet = ActiveEdgeTable(edge_table)
    for row in range(height):
        active = aet.advance(row)
        if not active:
            continue
        yield row, active
