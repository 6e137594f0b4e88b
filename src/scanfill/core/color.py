"""Color conversion and blending for the color-buffer writer.

Buffers hold 8-bit sRGB-encoded RGBA. Blending happens in linear light:
pixels are decoded, composited with the fill color and re-encoded before
they are stored. Alpha is never gamma-encoded.
"""

from dataclasses import dataclass

import numpy as np

# sRGB transfer function constants (IEC 61966-2-1)
SRGB_DECODE_THRESHOLD = 0.04045
SRGB_ENCODE_THRESHOLD = 0.0031308
SRGB_LINEAR_SLOPE = 12.92
SRGB_GAMMA = 2.4
SRGB_OFFSET = 0.055


def srgb_to_linear(values: np.ndarray) -> np.ndarray:
    """Decode sRGB components in [0, 1] to linear light."""
    values = np.asarray(values, dtype=np.float64)
    return np.where(
        values <= SRGB_DECODE_THRESHOLD,
        values / SRGB_LINEAR_SLOPE,
        ((values + SRGB_OFFSET) / (1 + SRGB_OFFSET)) ** SRGB_GAMMA,
    )


def linear_to_srgb(values: np.ndarray) -> np.ndarray:
    """Encode linear components in [0, 1] to sRGB."""
    values = np.clip(np.asarray(values, dtype=np.float64), 0.0, 1.0)
    return np.where(
        values <= SRGB_ENCODE_THRESHOLD,
        values * SRGB_LINEAR_SLOPE,
        (1 + SRGB_OFFSET) * values ** (1 / SRGB_GAMMA) - SRGB_OFFSET,
    )


def decode_pixels(pixels: np.ndarray) -> np.ndarray:
    """Convert RGBA8 sRGB pixels to float linear RGBA with straight alpha."""
    normalized = np.asarray(pixels, dtype=np.float64) / 255.0
    linear = np.empty_like(normalized)
    linear[..., :3] = srgb_to_linear(normalized[..., :3])
    linear[..., 3] = normalized[..., 3]
    return linear


def encode_pixels(linear: np.ndarray) -> np.ndarray:
    """Convert float linear RGBA to RGBA8 sRGB, rounding halves up."""
    encoded = np.empty_like(linear, dtype=np.float64)
    encoded[..., :3] = linear_to_srgb(linear[..., :3])
    encoded[..., 3] = np.clip(linear[..., 3], 0.0, 1.0)
    return np.floor(encoded * 255.0 + 0.5).astype(np.uint8)


def parse_hex(value: str) -> tuple[int, int, int, int]:
    """Parse ``#rrggbb`` or ``#rrggbbaa`` into 8-bit RGBA components.

    Raises:
        ValueError: If the string is not a hex color
    """
    digits = value.lstrip("#")
    if len(digits) == 6:
        digits += "ff"
    if len(digits) != 8:
        raise ValueError(f"Expected #rrggbb or #rrggbbaa, got '{value}'")
    red, green, blue, alpha = (int(digits[i : i + 2], 16) for i in range(0, 8, 2))
    return (red, green, blue, alpha)


@dataclass(frozen=True, slots=True)
class LinearColor:
    """An RGBA color in linear light with straight alpha.

    Attributes:
        red: Linear red in [0, 1]
        green: Linear green in [0, 1]
        blue: Linear blue in [0, 1]
        alpha: Opacity in [0, 1]
    """

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}")

    @classmethod
    def from_srgb8(cls, rgba: tuple[int, int, int, int]) -> "LinearColor":
        """Create from 8-bit sRGB components."""
        red, green, blue, alpha = decode_pixels(np.array(rgba, dtype=np.uint8)).tolist()
        return cls(red, green, blue, alpha)

    @classmethod
    def from_hex(cls, value: str) -> "LinearColor":
        """Parse ``#rrggbb`` or ``#rrggbbaa`` (sRGB-encoded)."""
        return cls.from_srgb8(parse_hex(value))

    def to_array(self) -> np.ndarray:
        return np.array([self.red, self.green, self.blue, self.alpha], dtype=np.float64)

    def to_srgb8(self) -> tuple[int, int, int, int]:
        """Encode to 8-bit sRGB components."""
        return tuple(int(c) for c in encode_pixels(self.to_array()))  # type: ignore[return-value]


def multiply(destination: np.ndarray, source: LinearColor) -> np.ndarray:
    """Multiply-blend ``source`` over linear RGBA pixels.

    Works on premultiplied components:
    ``c = s*d + s*(1 - da) + d*(1 - sa)`` and ``a = sa + da - sa*da``.
    For opaque colors this reduces to the componentwise product.

    Args:
        destination: Linear RGBA pixels with straight alpha, shape (..., 4)
        source: Fill color

    Returns:
        Blended linear RGBA pixels with straight alpha
    """
    dst_alpha = destination[..., 3:4]
    dst = destination[..., :3] * dst_alpha
    src_rgba = source.to_array()
    src_alpha = src_rgba[3]
    src = src_rgba[:3] * src_alpha

    out_alpha = src_alpha + dst_alpha - src_alpha * dst_alpha
    out = src * dst + src * (1.0 - dst_alpha) + dst * (1.0 - src_alpha)

    result = np.empty_like(destination, dtype=np.float64)
    result[..., 3:4] = out_alpha
    with np.errstate(divide="ignore", invalid="ignore"):
        result[..., :3] = np.where(out_alpha > 0.0, out / out_alpha, 0.0)
    return result
