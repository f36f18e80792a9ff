"""Chromasync: synchronized color representations, named hues and RYB wheel harmonies."""

from .colors import ColorValue
from .hue import (
    Hue,
    get_closest,
    get_for_name,
    is_primary_hue,
    named_hues,
    primary_hues,
)
from .ryb import RYB_WHEEL, RYBControlPoint, rotate_ryb_hue, hue_to_ryb_angle, ryb_angle_to_hue
from .errors import ChromasyncError, HueNotFoundError, ColorParseError
from .conversions import (
    unit_rgb_to_hsv,
    hsv_to_unit_rgb,
    unit_rgb_to_cmyk,
    cmyk_to_unit_rgb,
    lab_to_unit_rgb,
    hex_to_unit_rgb,
    unit_rgb_to_hex,
    np_unit_rgb_to_hsv,
    np_hsv_to_unit_rgb,
    np_unit_rgb_to_cmyk,
    np_cmyk_to_unit_rgb,
    convert,
    np_convert,
    ColorSpace,
)

__version__ = "0.1.0"

__all__ = [
    # color value
    "ColorValue",
    # hues
    "Hue",
    "get_closest",
    "get_for_name",
    "is_primary_hue",
    "named_hues",
    "primary_hues",
    # ryb wheel
    "RYB_WHEEL",
    "RYBControlPoint",
    "rotate_ryb_hue",
    "hue_to_ryb_angle",
    "ryb_angle_to_hue",
    # errors
    "ChromasyncError",
    "HueNotFoundError",
    "ColorParseError",
    # conversions
    "unit_rgb_to_hsv",
    "hsv_to_unit_rgb",
    "unit_rgb_to_cmyk",
    "cmyk_to_unit_rgb",
    "lab_to_unit_rgb",
    "hex_to_unit_rgb",
    "unit_rgb_to_hex",
    "np_unit_rgb_to_hsv",
    "np_hsv_to_unit_rgb",
    "np_unit_rgb_to_cmyk",
    "np_cmyk_to_unit_rgb",
    "convert",
    "np_convert",
    "ColorSpace",
    "__version__",
]
