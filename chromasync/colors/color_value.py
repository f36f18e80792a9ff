from __future__ import annotations
import math
import warnings
from typing import Optional, Self, Tuple, Union, cast

import numpy as np

from ..conversions import (
    cmyk_to_unit_rgb,
    hex_to_unit_rgb,
    hsv_to_unit_rgb,
    lab_to_unit_rgb,
    pack_argb,
    pack_bgra,
    unit_rgb_to_cmyk,
    unit_rgb_to_hex,
    unit_rgb_to_hsv,
    unpack_argb,
    unpack_bgra,
)
from ..hue import Hue, get_closest, get_for_name, is_primary_hue
from ..ryb import rotate_ryb_hue
from ..types.color_types import (
    BLACK_POINT,
    CHANNEL_EQUALITY_EPS,
    GREY_THRESHOLD,
    WHITE_POINT,
    BGRTuple,
    CMYKTuple,
    ColorSpace,
    FloatBuffer,
    HSVTuple,
    RGBTuple,
)
from ..utils.num_utils import TWO_PI, clip_normalized, degrees, wrap_unit


def _clip3(a: float, b: float, c: float) -> Tuple[float, float, float]:
    return clip_normalized(float(a)), clip_normalized(float(b)), clip_normalized(float(c))


class ColorValue:
    """
    One color, held as RGB, HSV and CMYK at once, plus an alpha channel.

    Every representation is derived eagerly from the one that was written, so
    reads are plain attribute access and always agree with each other. BGR is
    a view of RGB. Instances are immutable: each ``with_*``/adjust method
    returns a new ColorValue and leaves the receiver untouched.

    >>> orange = ColorValue.from_hex("#ff8000")
    >>> orange.closest_hue().name
    'orange'
    >>> faded_blue = orange.with_alpha(0.5).complement()

    The no-argument constructor gives opaque black.
    """

    __slots__ = ('_rgb', '_hsv', '_cmyk', '_alpha', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, rgb: RGBTuple = (0.0, 0.0, 0.0), alpha: float = 1.0) -> None:
        self._set_parts(_clip3(*rgb), alpha)

    def _set_parts(
        self,
        rgb: RGBTuple,
        alpha: float,
        hsv: Optional[HSVTuple] = None,
        cmyk: Optional[CMYKTuple] = None,
    ) -> None:
        self._rgb = rgb
        self._hsv = hsv if hsv is not None else unit_rgb_to_hsv(*rgb)
        self._cmyk = cmyk if cmyk is not None else unit_rgb_to_cmyk(*rgb)
        self._alpha = clip_normalized(float(alpha))
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _from_parts(
        cls,
        rgb: RGBTuple,
        alpha: float,
        hsv: Optional[HSVTuple] = None,
        cmyk: Optional[CMYKTuple] = None,
    ) -> Self:
        # hsv / cmyk must already be normalized and derived from the same color as rgb
        color = cls.__new__(cls)
        color._set_parts(_clip3(*rgb), alpha, hsv, cmyk)
        return color

    # ------------------ FACTORIES ------------------
    @classmethod
    def from_rgb(cls, red: float, green: float, blue: float) -> Self:
        return cls.from_rgba(red, green, blue, 1.0)

    @classmethod
    def from_rgba(cls, red: float, green: float, blue: float, alpha: float) -> Self:
        return cls((red, green, blue), alpha)

    @classmethod
    def from_bgr(cls, blue: float, green: float, red: float) -> Self:
        return cls.from_bgra(blue, green, red, 1.0)

    @classmethod
    def from_bgra(cls, blue: float, green: float, red: float, alpha: float) -> Self:
        return cls((red, green, blue), alpha)

    @classmethod
    def from_hsv(cls, hue: float, saturation: float, brightness: float) -> Self:
        return cls.from_hsva(hue, saturation, brightness, 1.0)

    @classmethod
    def from_hsva(cls, hue: float, saturation: float, brightness: float, alpha: float) -> Self:
        hsv = (wrap_unit(float(hue)), clip_normalized(float(saturation)), clip_normalized(float(brightness)))
        rgb = hsv_to_unit_rgb(*hsv)
        return cls._from_parts(rgb, alpha, hsv=hsv)

    @classmethod
    def from_hue(cls, hue: Union[Hue, str], saturation: float = 1.0, brightness: float = 1.0) -> Self:
        """Build a color from a registered hue (or its name)."""
        if isinstance(hue, str):
            hue = get_for_name(hue)
        return cls.from_hsv(hue.position, saturation, brightness)

    @classmethod
    def from_cmyk(cls, cyan: float, magenta: float, yellow: float, black: float) -> Self:
        return cls.from_cmyka(cyan, magenta, yellow, black, 1.0)

    @classmethod
    def from_cmyka(cls, cyan: float, magenta: float, yellow: float, black: float, alpha: float) -> Self:
        cmyk = cast(CMYKTuple, tuple(clip_normalized(float(v)) for v in (cyan, magenta, yellow, black)))
        rgb = cmyk_to_unit_rgb(*cmyk)
        return cls._from_parts(rgb, alpha, cmyk=cmyk)

    @classmethod
    def from_gray(cls, grey: float) -> Self:
        return cls.from_gray_alpha(grey, 1.0)

    @classmethod
    def from_gray_alpha(cls, grey: float, alpha: float) -> Self:
        return cls((grey, grey, grey), alpha)

    @classmethod
    def from_argb(cls, argb: int) -> Self:
        """Decode a packed ``0xAARRGGBB`` integer."""
        r, g, b, a = unpack_argb(argb)
        return cls((r, g, b), a)

    @classmethod
    def from_bgra_int(cls, bgra: int) -> Self:
        """Decode a packed BGRA integer (blue in the lowest byte, alpha in the highest)."""
        b, g, r, a = unpack_bgra(bgra)
        return cls((r, g, b), a)

    @classmethod
    def from_hex(cls, text: str) -> Self:
        """
        Parse ``RRGGBB`` hex, with an optional ``#`` or ``0x`` prefix.

        Raises:
            ColorParseError: if ``text`` is not a valid hex color.
        """
        return cls(hex_to_unit_rgb(text), 1.0)

    @classmethod
    def from_lab(cls, l: float, a: float, b: float, alpha: float = 1.0) -> Self:
        """Build a color from CIE Lab (D65). Out-of-gamut channels are clamped with a warning."""
        rgb = lab_to_unit_rgb(l, a, b)
        if any(not 0.0 <= c <= 1.0 for c in rgb):
            warnings.warn(
                f"Lab color ({l}, {a}, {b}) is outside the sRGB gamut; "
                f"channels {tuple(round(c, 4) for c in rgb)} were clamped to [0, 1]",
                RuntimeWarning,
                stacklevel=2,
            )
        return cls(rgb, alpha)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def rgb(self) -> RGBTuple:
        return self._rgb

    @property
    def bgr(self) -> BGRTuple:
        r, g, b = self._rgb
        return b, g, r

    @property
    def hsv(self) -> HSVTuple:
        return self._hsv

    @property
    def cmyk(self) -> CMYKTuple:
        return self._cmyk

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def red(self) -> float:
        return self._rgb[0]

    @property
    def green(self) -> float:
        return self._rgb[1]

    @property
    def blue(self) -> float:
        return self._rgb[2]

    @property
    def hue(self) -> float:
        return self._hsv[0]

    @property
    def saturation(self) -> float:
        return self._hsv[1]

    @property
    def brightness(self) -> float:
        return self._hsv[2]

    @property
    def cyan(self) -> float:
        return self._cmyk[0]

    @property
    def magenta(self) -> float:
        return self._cmyk[1]

    @property
    def yellow(self) -> float:
        return self._cmyk[2]

    @property
    def black(self) -> float:
        return self._cmyk[3]

    def components(self, space: ColorSpace | str) -> Tuple[float, ...]:
        """Return the channels of ``space`` ("rgb", "bgr", "hsv" or "cmyk")."""
        space = ColorSpace(space.lower())
        if space == ColorSpace.RGB:
            return self.rgb
        if space == ColorSpace.BGR:
            return self.bgr
        if space == ColorSpace.HSV:
            return self.hsv
        return self.cmyk

    # ------------------ FULL VECTOR SETTERS ------------------
    def with_rgb(self, red: float, green: float, blue: float) -> Self:
        return self.__class__((red, green, blue), self._alpha)

    def with_bgr(self, blue: float, green: float, red: float) -> Self:
        return self.__class__((red, green, blue), self._alpha)

    def with_hsv(self, hue: float, saturation: float, brightness: float) -> Self:
        return self.from_hsva(hue, saturation, brightness, self._alpha)

    def with_cmyk(self, cyan: float, magenta: float, yellow: float, black: float) -> Self:
        return self.from_cmyka(cyan, magenta, yellow, black, self._alpha)

    def with_argb(self, argb: int) -> Self:
        """Replace all channels, alpha included, from a packed ARGB integer."""
        return self.from_argb(argb)

    def with_alpha(self, alpha: float) -> Self:
        return self._from_parts(self._rgb, alpha, hsv=self._hsv, cmyk=self._cmyk)

    # ------------------ SINGLE CHANNEL SETTERS ------------------
    def with_red(self, red: float) -> Self:
        _, g, b = self._rgb
        return self.with_rgb(red, g, b)

    def with_green(self, green: float) -> Self:
        r, _, b = self._rgb
        return self.with_rgb(r, green, b)

    def with_blue(self, blue: float) -> Self:
        r, g, _ = self._rgb
        return self.with_rgb(r, g, blue)

    def with_hue(self, hue: float) -> Self:
        _, s, v = self._hsv
        return self.with_hsv(hue, s, v)

    def with_saturation(self, saturation: float) -> Self:
        h, _, v = self._hsv
        return self.with_hsv(h, saturation, v)

    def with_brightness(self, brightness: float) -> Self:
        h, s, _ = self._hsv
        return self.with_hsv(h, s, brightness)

    def with_cyan(self, cyan: float) -> Self:
        _, m, y, k = self._cmyk
        return self.with_cmyk(cyan, m, y, k)

    def with_magenta(self, magenta: float) -> Self:
        c, _, y, k = self._cmyk
        return self.with_cmyk(c, magenta, y, k)

    def with_yellow(self, yellow: float) -> Self:
        c, m, _, k = self._cmyk
        return self.with_cmyk(c, m, yellow, k)

    def with_black(self, black: float) -> Self:
        c, m, y, _ = self._cmyk
        return self.with_cmyk(c, m, y, black)

    # ------------------ ADJUSTMENTS ------------------
    def adjust_rgb(self, red: float, green: float, blue: float) -> Self:
        """Add the given offsets to the RGB channels."""
        r, g, b = self._rgb
        return self.with_rgb(r + red, g + green, b + blue)

    def adjust_bgr(self, blue: float, green: float, red: float) -> Self:
        return self.adjust_rgb(red, green, blue)

    def adjust_hsv(self, hue: float, saturation: float, brightness: float) -> Self:
        """Add the given offsets to the HSV channels. Hue wraps, the rest clamp."""
        h, s, v = self._hsv
        return self.with_hsv(h + hue, s + saturation, v + brightness)

    def lighten(self, step: float) -> Self:
        return self.with_brightness(self.brightness + step)

    def darken(self, step: float) -> Self:
        return self.with_brightness(self.brightness - step)

    def saturate(self, step: float) -> Self:
        return self.with_saturation(self.saturation + step)

    def desaturate(self, step: float) -> Self:
        return self.with_saturation(self.saturation - step)

    def adjust_contrast(self, amount: float) -> Self:
        """Push the brightness away from the middle: darken dark colors, lighten light ones."""
        return self.darken(amount) if self.brightness < 0.5 else self.lighten(amount)

    def invert(self) -> Self:
        r, g, b = self._rgb
        return self.with_rgb(1.0 - r, 1.0 - g, 1.0 - b)

    def blend(self, other: ColorValue, t: float) -> Self:
        """Linear interpolation towards ``other`` in RGB (alpha included); ``t`` in [0, 1]."""
        r, g, b = (c + (o - c) * t for c, o in zip(self._rgb, other.rgb))
        alpha = self._alpha + (other.alpha - self._alpha) * t
        return self.__class__((r, g, b), alpha)

    # ------------------ RYB WHEEL ------------------
    def rotate_ryb(self, theta: float) -> Self:
        """Rotate the hue by ``theta`` degrees on the artistic RYB wheel."""
        h, s, v = self._hsv
        return self.with_hsv(rotate_ryb_hue(h, theta), s, v)

    def rotate_ryb_radians(self, theta: float) -> Self:
        return self.rotate_ryb(degrees(theta))

    def complement(self) -> Self:
        """The opposite color on the RYB wheel (red <-> green, yellow <-> purple)."""
        return self.rotate_ryb(180)

    def analog(self, angle: float, delta: float, rng: Optional[np.random.Generator] = None) -> Self:
        """
        A random neighbour of this color.

        The hue is rotated on the RYB wheel by a random amount in
        ``[-angle, angle)`` degrees; saturation and brightness are each moved
        by a random amount in ``[-delta, delta)``.

        Args:
            angle: maximum hue rotation in degrees
            delta: maximum saturation/brightness change
            rng: random generator, defaults to ``np.random.default_rng()``
        """
        rng = rng if rng is not None else np.random.default_rng()
        jitter = rng.uniform(-1.0, 1.0, size=3)
        rotated = self.rotate_ryb(angle * jitter[0])
        h, s, v = rotated.hsv
        return rotated.with_hsv(h, s + delta * jitter[1], v + delta * jitter[2])

    # ------------------ QUERIES ------------------
    def _channels_equal(self) -> bool:
        r, g, b = self._rgb
        return abs(r - g) <= CHANNEL_EQUALITY_EPS and abs(g - b) <= CHANNEL_EQUALITY_EPS

    def is_black(self) -> bool:
        return self._rgb[0] <= BLACK_POINT and self._channels_equal()

    def is_white(self) -> bool:
        return self._rgb[0] >= WHITE_POINT and self._channels_equal()

    def is_grey(self) -> bool:
        return self._hsv[1] < GREY_THRESHOLD

    def is_primary(self) -> bool:
        return is_primary_hue(self._hsv[0])

    @property
    def luminance(self) -> float:
        r, g, b = self._rgb
        return r * 0.299 + g * 0.587 + b * 0.114

    def closest_hue(self, primary_only: bool = False) -> Hue:
        return get_closest(self._hsv[0], primary_only)

    def distance_to_rgb(self, other: ColorValue) -> float:
        return math.dist(self._rgb, other.rgb)

    def distance_to_cmyk(self, other: ColorValue) -> float:
        """
        4D distance between the canonical CMYK forms (key fully extracted).

        A CMYK write is stored as given, so two equal colors can hold
        different ``cmyk`` tuples; comparing the canonical forms keeps the
        distance between them at zero.
        """
        return math.dist(unit_rgb_to_cmyk(*self._rgb), unit_rgb_to_cmyk(*other.rgb))

    def distance_to_hsv(self, other: ColorValue) -> float:
        """Distance in the HSV cone, so hues either side of red are close."""
        return math.dist(_hsv_cartesian(self._hsv), _hsv_cartesian(other.hsv))

    # ------------------ EXPORT ------------------
    def to_argb(self) -> int:
        return pack_argb(*self._rgb, self._alpha)

    def to_bgra(self) -> int:
        return pack_bgra(*self._rgb, self._alpha)

    def to_hex(self) -> str:
        return unit_rgb_to_hex(*self._rgb)

    def to_rgba_array(self, buffer: Optional[FloatBuffer] = None, offset: int = 0) -> FloatBuffer:
        """Write ``r, g, b, a`` into ``buffer`` starting at ``offset``."""
        return _write4(buffer, offset, (*self._rgb, self._alpha))

    def to_bgra_array(self, buffer: Optional[FloatBuffer] = None, offset: int = 0) -> FloatBuffer:
        """Write ``b, g, r, a`` into ``buffer`` starting at ``offset``."""
        return _write4(buffer, offset, (*self.bgr, self._alpha))

    def to_hsva_array(self, buffer: Optional[FloatBuffer] = None, offset: int = 0) -> FloatBuffer:
        return _write4(buffer, offset, (*self._hsv, self._alpha))

    def to_cmyka_array(self, buffer: Optional[FloatBuffer] = None, offset: int = 0) -> FloatBuffer:
        """Write ``c, m, y, a``; the key channel is not part of this export."""
        c, m, y, _ = self._cmyk
        return _write4(buffer, offset, (c, m, y, self._alpha))

    # ------------------ DUNDER ------------------
    def __eq__(self, other: object) -> bool:
        """Equal when RGB and alpha match, whichever representation was written."""
        if not isinstance(other, ColorValue):
            return NotImplemented
        return self._rgb == other._rgb and self._alpha == other._alpha

    def __hash__(self) -> int:
        return hash((self._rgb, self._alpha))

    def __repr__(self) -> str:
        r, g, b = self._rgb
        return f"{self.__class__.__name__}(rgb=({r:.4f}, {g:.4f}, {b:.4f}), alpha={self._alpha:.4f})"


def _hsv_cartesian(hsv: HSVTuple) -> Tuple[float, float, float]:
    h, s, v = hsv
    angle = h * TWO_PI
    return math.cos(angle) * s, math.sin(angle) * s, v


def _write4(buffer: Optional[FloatBuffer], offset: int, values: Tuple[float, ...]) -> FloatBuffer:
    if buffer is None:
        if offset != 0:
            raise IndexError(f"offset {offset} is out of range for a new buffer of length 4")
        return np.array(values, dtype=np.float32)
    if offset < 0 or offset + len(values) > len(buffer):
        raise IndexError(
            f"Cannot write {len(values)} values at offset {offset} into a buffer of length {len(buffer)}"
        )
    for i, v in enumerate(values):
        buffer[offset + i] = v
    return buffer
