"""Rounding of coordinates onto the integer pixel grid.

Each numeric type gets its own ceil/floor/round rule:
- int (and numpy integers): identity
- float (and numpy floats): math.ceil / math.floor / half away from zero
- any other numbers.Real (Fraction, Decimal): the generic math rules

Non-finite floats cannot be placed on the grid and raise
InvalidCoordinateError.
"""

import math
from functools import singledispatch
from numbers import Integral, Real

import numpy as np

from scanfill.exceptions import InvalidCoordinateError


def _check_finite(value: float) -> None:
    if not math.isfinite(value):
        raise InvalidCoordinateError(value, "coordinate must be finite")


def _half_away_from_zero(value: Real) -> int:
    # floor first: the remainder of a float is exact, adding 0.5 is not
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if 2 * (magnitude - whole) >= 1:
        whole += 1
    return whole if value >= 0 else -whole


@singledispatch
def ceil_to_int(value: Real) -> int:
    """Smallest integer not less than ``value``."""
    return math.ceil(value)


@ceil_to_int.register(Integral)
@ceil_to_int.register(np.integer)
def _(value) -> int:
    return int(value)


@ceil_to_int.register(float)
@ceil_to_int.register(np.floating)
def _(value) -> int:
    _check_finite(value)
    return math.ceil(value)


@singledispatch
def floor_to_int(value: Real) -> int:
    """Largest integer not greater than ``value``."""
    return math.floor(value)


@floor_to_int.register(Integral)
@floor_to_int.register(np.integer)
def _(value) -> int:
    return int(value)


@floor_to_int.register(float)
@floor_to_int.register(np.floating)
def _(value) -> int:
    _check_finite(value)
    return math.floor(value)


@singledispatch
def round_to_int(value: Real) -> int:
    """Nearest integer, rounding halves away from zero."""
    return _half_away_from_zero(value)


@round_to_int.register(Integral)
@round_to_int.register(np.integer)
def _(value) -> int:
    return int(value)


@round_to_int.register(float)
@round_to_int.register(np.floating)
def _(value) -> int:
    _check_finite(value)
    return _half_away_from_zero(value)


def to_float(value: Real) -> float:
    """Convert a coordinate to float, rejecting NaN and infinities."""
    result = float(value)
    _check_finite(result)
    return result
