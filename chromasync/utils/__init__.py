from .num_utils import (
    clip,
    clip_normalized,
    wrap_unit,
    degrees,
    radians,
    floor_int,
    ceil_power_of_2,
    floor_power_of_2,
    TWO_PI,
)

__all__ = [
    "clip",
    "clip_normalized",
    "wrap_unit",
    "degrees",
    "radians",
    "floor_int",
    "ceil_power_of_2",
    "floor_power_of_2",
    "TWO_PI",
]
