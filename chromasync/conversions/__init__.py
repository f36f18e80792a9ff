"""
Chromasync Color Space Conversions
==================================

Scalar and vectorized conversions between the representations a
:class:`~chromasync.colors.ColorValue` keeps in sync. All channels are unit
floats; hue is a fraction of a full turn in ``[0, 1)``.

RGB -> HSV:
    unit_rgb_to_hsv(r, g, b), unit_bgr_to_hsv(b, g, r), np_unit_rgb_to_hsv(r, g, b)

HSV -> RGB:
    hsv_to_unit_rgb(h, s, v), hsv_to_unit_bgr(h, s, v), np_hsv_to_unit_rgb(h, s, v)

RGB <-> CMYK:
    unit_rgb_to_cmyk, unit_bgr_to_cmyk, cmyk_to_unit_rgb, cmyk_to_unit_bgr,
    np_unit_rgb_to_cmyk, np_cmyk_to_unit_rgb

Lab -> RGB:
    lab_to_unit_rgb(l, a, b), lab_to_unit_bgr(l, a, b)

Hex strings:
    hex_to_unit_rgb, hex_to_unit_bgr, unit_rgb_to_hex, unit_bgr_to_hex

Packed integers:
    unpack_argb, unpack_bgra, pack_argb, pack_bgra

High-Level API:
    convert(color, from_space, to_space)
    np_convert(color, from_space, to_space)

Examples
--------
>>> from chromasync.conversions import unit_rgb_to_hsv, hsv_to_unit_rgb
>>> h, s, v = unit_rgb_to_hsv(1.0, 0.5, 0.0)
>>> r, g, b = hsv_to_unit_rgb(h, s, v)
"""

from .to_hsv import unit_rgb_to_hsv, unit_bgr_to_hsv, np_unit_rgb_to_hsv
from .to_rgb import hsv_to_unit_rgb, hsv_to_unit_bgr, np_hsv_to_unit_rgb
from .to_cmyk import (
    unit_rgb_to_cmyk,
    unit_bgr_to_cmyk,
    cmyk_to_unit_rgb,
    cmyk_to_unit_bgr,
    np_unit_rgb_to_cmyk,
    np_cmyk_to_unit_rgb,
)
from .lab import lab_to_unit_rgb, lab_to_unit_bgr, linear_to_srgb
from .hex import hex_to_unit_rgb, hex_to_unit_bgr, unit_rgb_to_hex, unit_bgr_to_hex, parse_hex
from .packed import unpack_argb, unpack_bgra, pack_argb, pack_bgra
from .wrapper import convert, np_convert

from ..types.color_types import ColorSpace

__all__ = [
    'unit_rgb_to_hsv',
    'unit_bgr_to_hsv',
    'np_unit_rgb_to_hsv',

    'hsv_to_unit_rgb',
    'hsv_to_unit_bgr',
    'np_hsv_to_unit_rgb',

    'unit_rgb_to_cmyk',
    'unit_bgr_to_cmyk',
    'cmyk_to_unit_rgb',
    'cmyk_to_unit_bgr',
    'np_unit_rgb_to_cmyk',
    'np_cmyk_to_unit_rgb',

    'lab_to_unit_rgb',
    'lab_to_unit_bgr',
    'linear_to_srgb',

    'hex_to_unit_rgb',
    'hex_to_unit_bgr',
    'unit_rgb_to_hex',
    'unit_bgr_to_hex',
    'parse_hex',

    'unpack_argb',
    'unpack_bgra',
    'pack_argb',
    'pack_bgra',

    'convert',
    'np_convert',
    'ColorSpace',
]
