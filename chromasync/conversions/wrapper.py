import numpy as np
from typing import Callable, Dict, Tuple, cast

from .to_rgb import hsv_to_unit_rgb, np_hsv_to_unit_rgb
from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv
from .to_cmyk import unit_rgb_to_cmyk, cmyk_to_unit_rgb, np_unit_rgb_to_cmyk, np_cmyk_to_unit_rgb

from ..types.color_types import ColorSpace, ColorVector, num_channels

# Every space goes through RGB; BGR is RGB read backwards
TO_RGB: Dict[ColorSpace, Callable[..., Tuple[float, ...]]] = {
    ColorSpace.RGB: lambda r, g, b: (r, g, b),
    ColorSpace.BGR: lambda b, g, r: (r, g, b),
    ColorSpace.HSV: hsv_to_unit_rgb,
    ColorSpace.CMYK: cmyk_to_unit_rgb,
}

FROM_RGB: Dict[ColorSpace, Callable[..., Tuple[float, ...]]] = {
    ColorSpace.RGB: lambda r, g, b: (r, g, b),
    ColorSpace.BGR: lambda r, g, b: (b, g, r),
    ColorSpace.HSV: unit_rgb_to_hsv,
    ColorSpace.CMYK: unit_rgb_to_cmyk,
}

NP_TO_RGB: Dict[ColorSpace, Callable[[np.ndarray], np.ndarray]] = {
    ColorSpace.RGB: lambda arr: arr,
    ColorSpace.BGR: lambda arr: arr[..., ::-1],
    ColorSpace.HSV: lambda arr: np_hsv_to_unit_rgb(arr[..., 0], arr[..., 1], arr[..., 2]),
    ColorSpace.CMYK: lambda arr: np_cmyk_to_unit_rgb(arr[..., 0], arr[..., 1], arr[..., 2], arr[..., 3]),
}

NP_FROM_RGB: Dict[ColorSpace, Callable[[np.ndarray], np.ndarray]] = {
    ColorSpace.RGB: lambda arr: arr,
    ColorSpace.BGR: lambda arr: arr[..., ::-1],
    ColorSpace.HSV: lambda arr: np_unit_rgb_to_hsv(arr[..., 0], arr[..., 1], arr[..., 2]),
    ColorSpace.CMYK: lambda arr: np_unit_rgb_to_cmyk(arr[..., 0], arr[..., 1], arr[..., 2]),
}


def _as_space(space: ColorSpace | str) -> ColorSpace:
    return ColorSpace(space.lower())


def _check_channels(length: int, space: ColorSpace) -> None:
    expected = num_channels[space]
    if length != expected:
        raise ValueError(f"{space.value} expects {expected} channels, got {length}")


def convert(
    color: ColorVector,
    from_space: ColorSpace | str,
    to_space: ColorSpace | str,
) -> ColorVector:
    """
    Convert one unit-float color between rgb, bgr, hsv and cmyk.

    Args:
        color: channel tuple in ``from_space``
        from_space: source space name or ColorSpace
        to_space: target space name or ColorSpace

    Returns:
        channel tuple in ``to_space``
    """
    fs = _as_space(from_space)
    ts = _as_space(to_space)
    _check_channels(len(color), fs)
    if fs == ts:
        return tuple(color)  # type: ignore[return-value]
    rgb = TO_RGB[fs](*color)
    return cast(ColorVector, FROM_RGB[ts](*rgb))


def np_convert(
    color: np.ndarray,
    from_space: ColorSpace | str,
    to_space: ColorSpace | str,
) -> np.ndarray:
    """Vectorized :func:`convert` over the last axis of ``color``."""
    fs = _as_space(from_space)
    ts = _as_space(to_space)
    arr = np.asarray(color, dtype=float)
    _check_channels(arr.shape[-1], fs)
    if fs == ts:
        return arr
    return NP_FROM_RGB[ts](NP_TO_RGB[fs](arr))
