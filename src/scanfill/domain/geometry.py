"""Geometric value types for polygon input.

This module defines the passive geometry consumed by the rasterizer:
- Point: A 2D vertex in any real numeric type
- Line: A directed edge between two points
- Polygon: An implicitly closed, ordered sequence of vertices

Coordinates keep the caller's numeric type (int, float, Fraction, ...).
Conversion to pixel rows happens in the rasterizer, not here.
"""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from numbers import Real
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A vertex in 2D space.

    Immutable and hashable. The y axis grows downwards, matching canvas
    row order.

    Attributes:
        x: Column coordinate
        y: Row coordinate
    """

    x: Real
    y: Real

    def to_tuple(self) -> tuple[Real, Real]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        return cls(x=data["x"], y=data["y"])


@dataclass(frozen=True, slots=True)
class Line:
    """A directed edge from ``start`` to ``end``.

    Lines are not required to be monotonic in y; the original orientation
    is what carries the winding direction.
    """

    start: Point
    end: Point

    def inv_slope(self) -> Real | None:
        """Run per unit rise (dx / dy).

        Returns:
            The inverse slope, or None for horizontal lines
        """
        if self.start.y == self.end.y:
            return None
        return (self.end.x - self.start.x) / (self.end.y - self.start.y)

    def y_min_point(self) -> Point:
        """Endpoint with the smaller y (``start`` on ties)."""
        if self.start.y <= self.end.y:
            return self.start
        return self.end

    def y_max_point(self) -> Point:
        """Endpoint with the larger y (``start`` on ties)."""
        if self.start.y >= self.end.y:
            return self.start
        return self.end

    @property
    def is_upwards(self) -> bool:
        """True when the line runs from lower to higher y."""
        return self.start.y < self.end.y


@dataclass
class Polygon:
    """An ordered sequence of vertices, implicitly closed.

    No simplicity invariant is enforced: concave and self-intersecting
    polygons are valid input and are resolved by the fill rule.

    Attributes:
        vertices: Points in traversal order
    """

    vertices: list[Point] = field(default_factory=list)

    @classmethod
    def from_flat(cls, coords: Sequence[Real]) -> "Polygon | None":
        """Build a polygon from ``x0, y0, x1, y1, ...``.

        Args:
            coords: Flat coordinate sequence

        Returns:
            Polygon instance, or None if the coordinate count is odd
        """
        if len(coords) % 2 != 0:
            return None

        polygon = cls()
        for i in range(0, len(coords), 2):
            polygon.add_point(Point(coords[i], coords[i + 1]))
        return polygon

    @classmethod
    def from_points(cls, points: Iterable[Point | tuple[Real, Real]]) -> "Polygon":
        """Build a polygon from points or ``(x, y)`` pairs."""
        vertices = [p if isinstance(p, Point) else Point(p[0], p[1]) for p in points]
        return cls(vertices=vertices)

    def add_point(self, point: Point) -> "Polygon":
        """Append a vertex and return self for chaining."""
        self.vertices.append(point)
        return self

    def edges(self) -> Iterator[Line]:
        """Iterate edges in traversal order, closing back to the first vertex."""
        n = len(self.vertices)
        for i in range(n):
            yield Line(self.vertices[i], self.vertices[(i + 1) % n])

    def bounding_box(self) -> tuple[Real, Real, Real, Real]:
        """Calculate bounding box of the polygon.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self.vertices:
            return (0, 0, 0, 0)

        xs = [p.x for p in self.vertices]
        ys = [p.y for p in self.vertices]
        return (min(xs), min(ys), max(xs), max(ys))

    def to_flat(self) -> list[Real]:
        """Flatten back to ``x0, y0, x1, y1, ...``."""
        coords: list[Real] = []
        for p in self.vertices:
            coords.extend(p.to_tuple())
        return coords

    def __len__(self) -> int:
        return len(self.vertices)
