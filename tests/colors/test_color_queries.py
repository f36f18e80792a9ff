import math

import pytest

from chromasync import ColorValue
from chromasync.samples import BLACK, BLUE, GREEN, RED, WHITE, YELLOW


def test_is_black():
    assert BLACK.is_black()
    assert ColorValue.from_gray(0.08).is_black()
    assert not ColorValue.from_gray(0.09).is_black()
    assert not ColorValue.from_rgb(0.05, 0.05, 0.2).is_black()


def test_is_white():
    assert WHITE.is_white()
    assert not ColorValue.from_gray(0.99).is_white()
    assert not ColorValue.from_rgb(1.0, 1.0, 0.5).is_white()
    assert not WHITE.is_black()


def test_is_grey():
    for hue in (0.0, 0.3, 0.7):
        assert ColorValue.from_hsv(hue, 0.0, 0.6).is_grey()
    assert ColorValue.from_rgb(0.5, 0.5, 0.505).is_grey()
    assert BLACK.is_grey()
    assert not RED.is_grey()


def test_is_primary():
    assert RED.is_primary()
    assert GREEN.is_primary()
    assert BLUE.is_primary()
    assert ColorValue.from_hue("orange").is_primary()
    assert not ColorValue.from_hue("lime").is_primary()
    assert not ColorValue.from_hue("cyan").is_primary()


def test_luminance():
    assert WHITE.luminance == pytest.approx(1.0)
    assert BLACK.luminance == 0.0
    assert RED.luminance == pytest.approx(0.299)
    assert GREEN.luminance > RED.luminance > BLUE.luminance


def test_closest_hue():
    assert ColorValue.from_rgb(1.0, 0.5, 0.0).closest_hue().name == "orange"
    assert YELLOW.closest_hue().name == "yellow"
    assert ColorValue.from_hsv(100 / 360, 1.0, 1.0).closest_hue().name == "lime"
    assert ColorValue.from_hsv(100 / 360, 1.0, 1.0).closest_hue(primary_only=True).name == "green"


def test_distance_to_rgb():
    assert BLACK.distance_to_rgb(WHITE) == pytest.approx(math.sqrt(3))
    assert RED.distance_to_rgb(RED) == 0.0
    assert RED.distance_to_rgb(GREEN) == pytest.approx(GREEN.distance_to_rgb(RED))


def test_distance_to_cmyk():
    assert RED.distance_to_cmyk(GREEN) == pytest.approx(math.sqrt(2))
    assert BLACK.distance_to_cmyk(WHITE) == pytest.approx(1.0)


def test_distance_to_hsv_wraps_around_red():
    a = ColorValue.from_hsv(0.99, 1.0, 1.0)
    b = ColorValue.from_hsv(0.01, 1.0, 1.0)
    c = ColorValue.from_hsv(0.5, 1.0, 1.0)
    assert a.distance_to_hsv(b) < 0.2
    assert a.distance_to_hsv(c) > 1.9
    assert BLACK.distance_to_hsv(WHITE) == pytest.approx(1.0)
