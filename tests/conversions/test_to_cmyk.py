import numpy as np

from chromasync.conversions.to_cmyk import (
    unit_rgb_to_cmyk,
    unit_bgr_to_cmyk,
    cmyk_to_unit_rgb,
    cmyk_to_unit_bgr,
    np_unit_rgb_to_cmyk,
    np_cmyk_to_unit_rgb,
)
from chromasync.samples import samples_rgb_cmyk


def test_unit_rgb_to_cmyk():
    for (r, g, b), expected in samples_rgb_cmyk.items():
        assert np.allclose(unit_rgb_to_cmyk(r, g, b), expected, atol=1e-9)
        assert np.allclose(unit_bgr_to_cmyk(b, g, r), expected, atol=1e-9)


def test_cmyk_to_unit_rgb():
    for (r, g, b), cmyk in samples_rgb_cmyk.items():
        assert np.allclose(cmyk_to_unit_rgb(*cmyk), (r, g, b), atol=1e-9)
        assert np.allclose(cmyk_to_unit_bgr(*cmyk), (b, g, r), atol=1e-9)


def test_full_key_is_black():
    assert cmyk_to_unit_rgb(0.0, 0.0, 0.0, 1.0) == (0.0, 0.0, 0.0)
    # ink beyond full coverage saturates instead of going negative
    assert np.allclose(cmyk_to_unit_rgb(0.8, 0.5, 0.1, 0.6), (0.0, 0.0, 0.3))


def test_no_ink_is_white():
    assert cmyk_to_unit_rgb(0.0, 0.0, 0.0, 0.0) == (1.0, 1.0, 1.0)


def test_round_trip_random():
    rng = np.random.default_rng(7)
    for r, g, b in rng.random((100, 3)):
        assert np.allclose(cmyk_to_unit_rgb(*unit_rgb_to_cmyk(r, g, b)), (r, g, b), atol=1e-4)


def test_numpy_conversions():
    rgb = np.array(list(samples_rgb_cmyk.keys()))
    cmyk = np.array(list(samples_rgb_cmyk.values()))

    out = np_unit_rgb_to_cmyk(rgb[..., 0], rgb[..., 1], rgb[..., 2])
    assert out.shape == (len(samples_rgb_cmyk), 4)
    assert np.allclose(out, cmyk, atol=1e-9)

    back = np_cmyk_to_unit_rgb(cmyk[..., 0], cmyk[..., 1], cmyk[..., 2], cmyk[..., 3])
    assert np.allclose(back, rgb, atol=1e-9)
