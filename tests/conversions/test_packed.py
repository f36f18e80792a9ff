import pytest

from chromasync.conversions.packed import pack_argb, pack_bgra, unpack_argb, unpack_bgra
from chromasync.samples import samples_argb


def test_unpack_argb():
    for argb, (a, r, g, b) in samples_argb.items():
        out = unpack_argb(argb)
        assert out == pytest.approx((r / 255, g / 255, b / 255, a / 255))


def test_unpack_bgra_reads_the_same_bytes():
    for packed, (a, r, g, b) in samples_argb.items():
        assert unpack_bgra(packed) == pytest.approx((b / 255, g / 255, r / 255, a / 255))


def test_argb_round_trip():
    for argb in samples_argb:
        assert pack_argb(*unpack_argb(argb)) == argb


def test_encode_truncates_and_clamps():
    assert pack_argb(0.5, 0.0, 0.0, 1.0) == 0xFF7F0000
    assert pack_argb(2.0, -1.0, 0.0, 1.5) == 0xFFFF0000


def test_pack_bgra_layout():
    # blue:24 green:16 red:8 alpha:0
    assert pack_bgra(1.0, 0.0, 0.0, 1.0) == 0x0000FFFF
    assert pack_bgra(0.0, 0.0, 1.0, 0.0) == 0xFF000000
    assert pack_bgra(0.0, 1.0, 0.0, 0.0) == 0x00FF0000


def test_negative_ints_use_low_bits():
    assert unpack_argb(-1) == pytest.approx((1.0, 1.0, 1.0, 1.0))
