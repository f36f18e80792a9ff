from __future__ import annotations
from enum import Enum
from typing import Tuple, Union
import numpy as np

RGBTuple = Tuple[float, float, float]
BGRTuple = Tuple[float, float, float]
HSVTuple = Tuple[float, float, float]
CMYKTuple = Tuple[float, float, float, float]
ColorVector = Union[RGBTuple, CMYKTuple]
FloatBuffer = Union[list, np.ndarray]


class ColorSpace(str, Enum):
    RGB = "rgb"
    BGR = "bgr"
    HSV = "hsv"
    CMYK = "cmyk"


num_channels = {
    ColorSpace.RGB: 3,
    ColorSpace.BGR: 3,
    ColorSpace.HSV: 3,
    ColorSpace.CMYK: 4,
}

INV8BIT = 1.0 / 255.0
INV60DEGREES = 60.0 / 360.0

# Saturation below this is treated as achromatic by hsv -> rgb
ACHROMATIC_EPS = 1e-7
# Two channels closer than this count as equal for is_black / is_white
CHANNEL_EQUALITY_EPS = 1e-6

BLACK_POINT = 0.08
WHITE_POINT = 1.0
GREY_THRESHOLD = 0.01
PRIMARY_VARIANCE = 0.01
