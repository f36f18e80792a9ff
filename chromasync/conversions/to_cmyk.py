"""
Subtractive RGB <-> CMYK conversions.

This is the simple overprint model (``c = 1 - r`` with the shared part moved
into the key channel), not a calibrated device profile.
"""

import numpy as np
from numpy import ndarray as NDArray
from ..types.color_types import CMYKTuple, RGBTuple, BGRTuple
from ..utils.num_utils import clip_normalized


def unit_rgb_to_cmyk(r: float, g: float, b: float) -> CMYKTuple:
    c = 1.0 - r
    m = 1.0 - g
    y = 1.0 - b
    k = min(c, m, y)
    return (
        clip_normalized(c - k),
        clip_normalized(m - k),
        clip_normalized(y - k),
        clip_normalized(k),
    )


def unit_bgr_to_cmyk(b: float, g: float, r: float) -> CMYKTuple:
    return unit_rgb_to_cmyk(r, g, b)


def cmyk_to_unit_rgb(c: float, m: float, y: float, k: float) -> RGBTuple:
    """Inverse of :func:`unit_rgb_to_cmyk`. ``k == 1`` is always black."""
    return (
        1.0 - min(1.0, c + k),
        1.0 - min(1.0, m + k),
        1.0 - min(1.0, y + k),
    )


def cmyk_to_unit_bgr(c: float, m: float, y: float, k: float) -> BGRTuple:
    r, g, b = cmyk_to_unit_rgb(c, m, y, k)
    return b, g, r


def np_unit_rgb_to_cmyk(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized RGB -> CMYK. Returns an array of shape (..., 4)."""
    cmy = 1.0 - np.stack(np.broadcast_arrays(
        np.asarray(r, dtype=float),
        np.asarray(g, dtype=float),
        np.asarray(b, dtype=float),
    ), axis=-1)
    k = cmy.min(axis=-1, keepdims=True)
    cmy = np.clip(cmy - k, 0.0, 1.0)
    return np.concatenate([cmy, np.clip(k, 0.0, 1.0)], axis=-1)


def np_cmyk_to_unit_rgb(c: NDArray, m: NDArray, y: NDArray, k: NDArray) -> NDArray:
    """Vectorized CMYK -> RGB. Returns an array of shape (..., 3)."""
    c, m, y, k = np.broadcast_arrays(
        np.asarray(c, dtype=float),
        np.asarray(m, dtype=float),
        np.asarray(y, dtype=float),
        np.asarray(k, dtype=float),
    )
    cmy = np.stack([c, m, y], axis=-1)
    return 1.0 - np.minimum(1.0, cmy + k[..., None])
