import numpy as np
import pytest

from chromasync import ColorValue
from chromasync.conversions import unpack_argb
from chromasync.samples import RED, samples_argb


def test_argb_round_trip():
    for argb in samples_argb:
        assert ColorValue.from_argb(argb).to_argb() == argb


def test_argb_encoding_is_within_one_step():
    color = ColorValue.from_rgba(0.3, 0.6, 0.9, 0.5)
    decoded = unpack_argb(color.to_argb())
    assert np.allclose(decoded, (0.3, 0.6, 0.9, 0.5), atol=1 / 255)


def test_to_argb_known_values():
    assert RED.to_argb() == 0xFFFF0000
    assert ColorValue.from_rgba(0.0, 0.0, 1.0, 0.0).to_argb() == 0x000000FF


def test_to_bgra_layout():
    assert RED.to_bgra() == 0x0000FFFF
    assert ColorValue.from_rgba(0.0, 0.0, 1.0, 0.0).to_bgra() == 0xFF000000


def test_to_hex():
    assert RED.to_hex() == "ff0000"
    assert ColorValue.from_hex("#ff8000").to_hex() == "ff8000"
    assert ColorValue.from_gray(0.5).to_hex() == "7f7f7f"


def test_to_rgba_array_default_buffer():
    out = ColorValue.from_rgba(0.25, 0.5, 0.75, 1.0).to_rgba_array()
    assert isinstance(out, np.ndarray)
    assert out.dtype == np.float32
    assert out.tolist() == [0.25, 0.5, 0.75, 1.0]


def test_to_rgba_array_into_list_at_offset():
    buffer = [0.0] * 8
    out = ColorValue.from_rgba(0.25, 0.5, 0.75, 0.125).to_rgba_array(buffer, 4)
    assert out is buffer
    assert buffer == [0.0, 0.0, 0.0, 0.0, 0.25, 0.5, 0.75, 0.125]


def test_to_bgra_array_into_numpy_buffer():
    buffer = np.zeros(8, dtype=np.float32)
    ColorValue.from_rgba(0.25, 0.5, 0.75, 0.125).to_bgra_array(buffer, 2)
    assert buffer.tolist() == [0.0, 0.0, 0.75, 0.5, 0.25, 0.125, 0.0, 0.0]


def test_to_hsva_array():
    color = ColorValue.from_hsva(0.25, 0.5, 0.75, 1.0)
    assert color.to_hsva_array().tolist() == [0.25, 0.5, 0.75, 1.0]


def test_to_cmyka_array_skips_key():
    color = ColorValue.from_rgba(0.8, 0.4, 0.2, 0.5)
    assert np.allclose(color.to_cmyka_array(), (0.0, 0.4, 0.6, 0.5), atol=1e-6)


def test_export_offsets_are_checked():
    color = ColorValue.from_rgb(0.1, 0.2, 0.3)
    with pytest.raises(IndexError):
        color.to_rgba_array([0.0] * 4, 1)
    with pytest.raises(IndexError):
        color.to_rgba_array([0.0] * 8, -1)
    with pytest.raises(IndexError):
        color.to_rgba_array(offset=2)
    with pytest.raises(IndexError):
        color.to_cmyka_array(offset=1)
