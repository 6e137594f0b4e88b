"""Output surfaces for interior spans.

- MaskWriter: marks covered pixels in a boolean (height, width) array
- ColorWriter: multiply-blends a fill color into an RGBA8 buffer in place

Spans are produced inside the canvas bounds, so writers do not clip.
"""

from collections.abc import Iterable

import numpy as np

from scanfill.core.color import LinearColor, decode_pixels, encode_pixels, multiply
from scanfill.domain import CanvasSpec, Span


class MaskWriter:
    """Collects interior spans into a boolean mask.

    Example:
        writer = MaskWriter(CanvasSpec(8, 10))
        writer.write(spans)
        mask = writer.mask
    """

    def __init__(self, spec: CanvasSpec) -> None:
        self._mask = spec.blank_mask()
        self.pixels_written = 0

    @property
    def mask(self) -> np.ndarray:
        return self._mask

    def write(self, spans: Iterable[Span]) -> None:
        for span in spans:
            self._mask[span.row, span.low : span.high] = True
            self.pixels_written += span.width


class ColorWriter:
    """Composites a fill color into an existing sRGB RGBA8 buffer.

    Every covered pixel is decoded to linear light, multiply-blended with
    the fill color and re-encoded. The buffer is modified in place.
    """

    def __init__(self, buffer: np.ndarray, color: LinearColor) -> None:
        """Initialize the writer.

        Args:
            buffer: RGBA8 buffer of shape (height, width, 4)
            color: Fill color in linear light

        Raises:
            BufferShapeError: If the buffer layout is not RGBA8
        """
        self.spec = CanvasSpec.of(buffer)
        self._buffer = buffer
        self._color = color
        self.pixels_written = 0

    def write(self, spans: Iterable[Span]) -> None:
        for span in spans:
            pixels = self._buffer[span.row, span.low : span.high]
            pixels[...] = encode_pixels(multiply(decode_pixels(pixels), self._color))
            self.pixels_written += span.width
