"""Raster-side domain types.

- CanvasSpec: Pixel dimensions of the output surface
- FillRule: Interior test applied to the crossing count
- Span: A half-open run of interior pixels on one row
"""

from dataclasses import dataclass
from enum import Enum

import numpy as np

from scanfill.exceptions import BufferShapeError, CanvasSpecError


class FillRule(str, Enum):
    """Polygon fill rule.

    - NON_ZERO: inside when the signed winding number is not zero
    - EVEN_ODD: inside when the number of crossings is odd
    """

    NON_ZERO = "non-zero"
    EVEN_ODD = "even-odd"

    def contribution(self, direction: int) -> int:
        """Amount a crossing with the given edge direction adds to the total."""
        if self is FillRule.NON_ZERO:
            return direction
        return 1

    def is_inside(self, total: int) -> bool:
        """Apply the rule's predicate to a running crossing total."""
        if self is FillRule.NON_ZERO:
            return total != 0
        return total % 2 != 0


@dataclass(frozen=True, slots=True)
class CanvasSpec:
    """Width and height of a pixel grid.

    A zero-sized canvas is legal and rasterizes to an empty result.

    Attributes:
        width: Number of columns
        height: Number of rows
    """

    width: int
    height: int

    def __post_init__(self) -> None:
        for value in (self.width, self.height):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise CanvasSpecError(self.width, self.height, "dimensions must be integers")
            if value < 0:
                raise CanvasSpecError(self.width, self.height, "dimensions must not be negative")

    @property
    def shape(self) -> tuple[int, int]:
        """Row-major array shape (height, width)."""
        return (int(self.height), int(self.width))

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def blank_mask(self) -> np.ndarray:
        """Allocate an all-False interior mask."""
        return np.zeros(self.shape, dtype=bool)

    def blank_buffer(self, color: tuple[int, int, int, int] = (255, 255, 255, 255)) -> np.ndarray:
        """Allocate an sRGB RGBA8 buffer filled with ``color``."""
        buffer = np.empty((*self.shape, 4), dtype=np.uint8)
        buffer[...] = color
        return buffer

    @classmethod
    def of(cls, buffer: np.ndarray) -> "CanvasSpec":
        """Read the canvas size from an RGBA8 buffer.

        Raises:
            BufferShapeError: If the buffer is not (height, width, 4) uint8
        """
        if buffer.ndim != 3 or buffer.shape[2] != 4:
            raise BufferShapeError(buffer.shape, "expected (height, width, 4)")
        if buffer.dtype != np.uint8:
            raise BufferShapeError(buffer.shape, f"expected uint8 data, got {buffer.dtype}")
        height, width = buffer.shape[:2]
        return cls(width=int(width), height=int(height))


@dataclass(frozen=True, slots=True)
class Span:
    """Interior columns ``[low, high)`` on a single row."""

    row: int
    low: int
    high: int

    @property
    def width(self) -> int:
        return self.high - self.low
