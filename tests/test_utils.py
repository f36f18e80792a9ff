import math

import pytest

from chromasync.utils import (
    ceil_power_of_2,
    clip,
    clip_normalized,
    degrees,
    floor_int,
    floor_power_of_2,
    radians,
    wrap_unit,
)


def test_clip():
    assert clip(5, 0, 3) == 3
    assert clip(-2, 0, 3) == 0
    assert clip(0.25, 0.0, 1.0) == 0.25
    assert clip(-0.5, 0.0, 1.0) == 0.0


def test_clip_normalized():
    assert clip_normalized(1.5) == 1.0
    assert clip_normalized(-0.1) == 0.0
    assert clip_normalized(0.3) == 0.3


def test_wrap_unit():
    assert wrap_unit(1.25) == pytest.approx(0.25)
    assert wrap_unit(-0.25) == pytest.approx(0.75)
    assert 0.0 <= wrap_unit(3.0) < 1.0


def test_angle_conversion():
    assert degrees(math.pi) == pytest.approx(180.0)
    assert radians(180.0) == pytest.approx(math.pi)
    assert degrees(radians(37.0)) == pytest.approx(37.0)


def test_floor_int():
    assert floor_int(2.7) == 2
    assert floor_int(-0.5) == -1
    assert floor_int(-2.0) == -2


def test_ceil_power_of_2():
    assert ceil_power_of_2(5) == 8
    assert ceil_power_of_2(8) == 8
    assert ceil_power_of_2(0.3) == 1


def test_floor_power_of_2():
    assert floor_power_of_2(5) == 4
    assert floor_power_of_2(8) == 8
    with pytest.raises(ValueError):
        floor_power_of_2(0.5)


def test_wrap_unit_never_returns_one():
    assert wrap_unit(-1e-20) == 0.0
    assert wrap_unit(1.0) == 0.0


def test_nan_propagates():
    assert math.isnan(clip_normalized(float("nan")))
