"""
The artistic RYB color wheel.

Painters' red-yellow-blue wheel spaces hues differently from the HSV circle:
yellow sits 120 degrees from red instead of 60, so "opposite" and "adjacent"
hues computed on it match color-theory intuition. The wheel is stored as a
table of control points mapping artistic degrees to HSV (perceptual) degrees;
both directions interpolate linearly between neighbouring points.
"""

from __future__ import annotations
from typing import NamedTuple, Tuple


class RYBControlPoint(NamedTuple):
    artistic: int
    perceptual: int


_PERCEPTUAL_DEGREES = (
    0, 8, 17, 26, 34, 41, 48, 54, 60, 81, 103, 123, 138,
    155, 171, 187, 204, 219, 234, 251, 267, 282, 298, 329, 360,
)

RYB_WHEEL: Tuple[RYBControlPoint, ...] = tuple(
    RYBControlPoint(15 * i, p) for i, p in enumerate(_PERCEPTUAL_DEGREES)
)


def _segments():
    for p, q in zip(RYB_WHEEL, RYB_WHEEL[1:]):
        q_perceptual = q.perceptual
        if q_perceptual < p.perceptual:
            q_perceptual += 360
        yield p.artistic, p.perceptual, q.artistic, q_perceptual


def hue_to_ryb_angle(hue_degrees: float) -> float:
    """Map an HSV hue in degrees to its angle on the artistic wheel."""
    h = hue_degrees % 360.0
    for pa, pp, qa, qp in _segments():
        if pp <= h <= qp:
            return pa + (qa - pa) * (h - pp) / (qp - pp)
    raise ValueError(f"Hue {hue_degrees!r} is not covered by the RYB wheel")


def ryb_angle_to_hue(angle: float) -> float:
    """Map an artistic wheel angle in degrees to an HSV hue in degrees, in [0, 360)."""
    a = angle % 360.0
    for pa, pp, qa, qp in _segments():
        if pa <= a <= qa:
            return (pp + (qp - pp) * (a - pa) / (qa - pa)) % 360.0
    raise ValueError(f"Angle {angle!r} is not covered by the RYB wheel")


def rotate_ryb_hue(hue: float, theta: float) -> float:
    """
    Rotate a hue around the artistic wheel.

    Args:
        hue: HSV hue in [0, 1)
        theta: rotation in degrees on the artistic wheel, any sign

    Returns:
        the rotated HSV hue in [0, 1)
    """
    angle = (hue_to_ryb_angle(hue * 360.0) + theta % 360.0) % 360.0
    return ryb_angle_to_hue(angle) / 360.0 % 1.0
