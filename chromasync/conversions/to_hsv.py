"""RGB/BGR -> HSV conversions. Hue is expressed on the unit circle ``[0, 1)``."""

import numpy as np
from numpy import ndarray as NDArray
from ..types.color_types import HSVTuple, INV60DEGREES, ACHROMATIC_EPS


def unit_rgb_to_hsv(r: float, g: float, b: float) -> HSVTuple:
    """
    Convert unit RGB to HSV.

    Args:
        r, g, b: channels in [0, 1]

    Returns:
        (h, s, v) with h in [0, 1), s and v in [0, 1]. Achromatic colors
        get a hue of 0.
    """
    v = max(r, g, b)
    delta = v - min(r, g, b)
    s = delta / v if v != 0.0 else 0.0

    h = 0.0
    if s != 0.0:
        if abs(r - v) < ACHROMATIC_EPS:
            h = (g - b) / delta
        elif abs(g - v) < ACHROMATIC_EPS:
            h = 2.0 + (b - r) / delta
        else:
            h = 4.0 + (r - g) / delta
        h *= INV60DEGREES
        if h < 0.0:
            h += 1.0
        if h >= 1.0:
            h -= 1.0
    return h, s, v


def unit_bgr_to_hsv(b: float, g: float, r: float) -> HSVTuple:
    """Same as :func:`unit_rgb_to_hsv` with the channels given in BGR order."""
    return unit_rgb_to_hsv(r, g, b)


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized RGB -> HSV.

    Args:
        r, g, b: array-like or scalar, [0, 1]

    Returns:
        array of shape (..., 3) holding (h [0, 1), s [0, 1], v [0, 1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)
    r, g, b = np.broadcast_arrays(r, g, b)

    v = np.maximum.reduce([r, g, b])
    delta = v - np.minimum.reduce([r, g, b])

    s = np.zeros_like(v)
    nonzero_v = v > 0
    s[nonzero_v] = delta[nonzero_v] / v[nonzero_v]

    chromatic = s > 0
    safe_delta = np.where(chromatic, delta, 1.0)
    h = np.where(
        np.abs(r - v) < ACHROMATIC_EPS,
        (g - b) / safe_delta,
        np.where(
            np.abs(g - v) < ACHROMATIC_EPS,
            2.0 + (b - r) / safe_delta,
            4.0 + (r - g) / safe_delta,
        ),
    )
    h = np.where(chromatic, h * INV60DEGREES, 0.0)
    h = np.mod(h, 1.0)
    h = np.where(h >= 1.0, 0.0, h)

    return np.stack([h, s, v], axis=-1)
