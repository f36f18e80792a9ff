"""Scalar helpers shared by the conversion and color modules."""

import math
from boundednumbers import RealNumber
from boundednumbers.functions import clamp, clamp01, cyclic_wrap_float

DEG2RAD = math.pi / 180.0
RAD2DEG = 180.0 / math.pi
TWO_PI = 2.0 * math.pi


def clip(value: RealNumber, min_value: RealNumber, max_value: RealNumber) -> RealNumber:
    """Clamp ``value`` into ``[min_value, max_value]``. Works for ints and floats."""
    return clamp(value, min_value, max_value)


def clip_normalized(value: RealNumber) -> RealNumber:
    """Clamp ``value`` into the unit interval."""
    return clamp01(value)


def wrap_unit(value: float) -> float:
    """Wrap a circular quantity (e.g. a hue) into ``[0, 1)``."""
    wrapped = cyclic_wrap_float(value, 0.0, 1.0)
    # float modulo of a tiny negative rounds up to exactly 1.0
    return wrapped if wrapped < 1.0 else 0.0


def degrees(radians: float) -> float:
    return radians * RAD2DEG


def radians(degrees: float) -> float:
    return degrees * DEG2RAD


def floor_int(value: float) -> int:
    """Round toward negative infinity (``-0.5 -> -1``), unlike ``int()``."""
    return math.floor(value)


def ceil_power_of_2(value: float) -> int:
    """Smallest power of two greater than or equal to ``value``."""
    if value <= 1:
        return 1
    return 1 << math.ceil(math.log2(value))


def floor_power_of_2(value: float) -> int:
    """Largest power of two less than or equal to ``value``.

    Raises:
        ValueError: if ``value`` is smaller than 1.
    """
    if value < 1:
        raise ValueError(f"floor_power_of_2 expects a value >= 1, got {value}")
    return 1 << math.floor(math.log2(value))
