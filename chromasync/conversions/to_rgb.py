"""Conversions into unit RGB (and its BGR twin)."""

import numpy as np
from numpy import ndarray as NDArray
from ..types.color_types import RGBTuple, BGRTuple, ACHROMATIC_EPS
from ..utils.num_utils import wrap_unit


def hsv_to_unit_rgb(h: float, s: float, v: float) -> RGBTuple:
    """
    Sector based HSV -> RGB.

    Args:
        h: hue in [0, 1), wrapped if outside
        s, v: saturation and value in [0, 1]

    Returns:
        (r, g, b) in [0, 1]
    """
    if abs(s) < ACHROMATIC_EPS:
        return v, v, v

    h = wrap_unit(h) * 6.0
    i = int(h)
    f = h - i
    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))

    if i == 0:
        return v, t, p
    if i == 1:
        return q, v, p
    if i == 2:
        return p, v, t
    if i == 3:
        return p, q, v
    if i == 4:
        return t, p, v
    return v, p, q


def hsv_to_unit_bgr(h: float, s: float, v: float) -> BGRTuple:
    r, g, b = hsv_to_unit_rgb(h, s, v)
    return b, g, r


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized HSV -> RGB.

    Args:
        h: array-like or scalar, hue in [0, 1)
        s, v: array-like or scalar, [0, 1]

    Returns:
        array of shape (..., 3): (r, g, b)
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)
    h, s, v = np.broadcast_arrays(h, s, v)

    h6 = np.mod(h, 1.0) * 6.0
    i = np.floor(h6)
    f = h6 - i
    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))

    # np.mod can round a tiny negative hue up to 1.0, i.e. sector 6
    sector = i.astype(int) % 6
    r = np.choose(sector, [v, q, p, p, t, v])
    g = np.choose(sector, [t, v, v, q, p, p])
    b = np.choose(sector, [p, p, t, v, v, q])

    achromatic = np.abs(s) < ACHROMATIC_EPS
    r = np.where(achromatic, v, r)
    g = np.where(achromatic, v, g)
    b = np.where(achromatic, v, b)

    return np.stack([r, g, b], axis=-1)
