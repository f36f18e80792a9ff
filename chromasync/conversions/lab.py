"""CIE L*a*b* -> sRGB, through CIE XYZ under the D65 illuminant (2 degree observer)."""

from typing import Tuple
from ..types.color_types import RGBTuple, BGRTuple

D65_WHITE = (0.95047, 1.0, 1.08883)

XYZ_TO_LINEAR_RGB = (
    (3.2406, -1.5372, -0.4986),
    (-0.9689, 1.8758, 0.0415),
    (0.0557, -0.2040, 1.0570),
)

LAB_EPSILON = 0.008856
LAB_KAPPA_SLOPE = 7.787


def linear_to_srgb(c: float) -> float:
    """Convert linear-light RGB (0..1) to nonlinear sRGB."""
    if c <= 0.0031308:
        return 12.92 * c
    return 1.055 * (c ** (1 / 2.4)) - 0.055


def _lab_f_inverse(t: float) -> float:
    cube = t ** 3
    if cube > LAB_EPSILON:
        return cube
    return (t - 16 / 116.0) / LAB_KAPPA_SLOPE


def lab_to_xyz(l: float, a: float, b: float) -> Tuple[float, float, float]:
    fy = (l + 16) / 116.0
    fx = a / 500.0 + fy
    fz = fy - b / 200.0
    return (
        _lab_f_inverse(fx) * D65_WHITE[0],
        _lab_f_inverse(fy) * D65_WHITE[1],
        _lab_f_inverse(fz) * D65_WHITE[2],
    )


def lab_to_unit_rgb(l: float, a: float, b: float) -> RGBTuple:
    """
    Convert CIE Lab to gamma encoded sRGB.

    Values are not clamped: colors outside the sRGB gamut produce channels
    outside [0, 1], and the caller decides what to do with them.
    """
    x, y, z = lab_to_xyz(l, a, b)
    linear = [row[0] * x + row[1] * y + row[2] * z for row in XYZ_TO_LINEAR_RGB]
    r, g, b_ = (linear_to_srgb(c) for c in linear)
    return r, g, b_


def lab_to_unit_bgr(l: float, a: float, b: float) -> BGRTuple:
    r, g, b_ = lab_to_unit_rgb(l, a, b)
    return b_, g, r
