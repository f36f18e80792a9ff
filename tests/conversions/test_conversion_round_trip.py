import numpy as np

from chromasync.conversions import (
    unit_rgb_to_hsv,
    hsv_to_unit_rgb,
    unit_rgb_to_cmyk,
    cmyk_to_unit_rgb,
    np_unit_rgb_to_hsv,
    np_hsv_to_unit_rgb,
)


def _grid(steps=6):
    axis = np.linspace(0.0, 1.0, steps)
    return np.stack(np.meshgrid(axis, axis, axis, indexing="ij"), axis=-1).reshape(-1, 3)


def test_rgb_hsv_rgb():
    for r, g, b in _grid():
        assert np.allclose(hsv_to_unit_rgb(*unit_rgb_to_hsv(r, g, b)), (r, g, b), atol=1e-4)


def test_rgb_cmyk_rgb():
    for r, g, b in _grid():
        assert np.allclose(cmyk_to_unit_rgb(*unit_rgb_to_cmyk(r, g, b)), (r, g, b), atol=1e-4)


def test_numpy_rgb_hsv_rgb():
    rgb = _grid(11)
    hsv = np_unit_rgb_to_hsv(rgb[:, 0], rgb[:, 1], rgb[:, 2])
    back = np_hsv_to_unit_rgb(hsv[:, 0], hsv[:, 1], hsv[:, 2])
    assert np.allclose(back, rgb, atol=1e-4)
