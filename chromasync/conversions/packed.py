"""
Packed 32-bit color integers.

Both layouts place the bytes identically on decode (alpha in bits 31..24, red
in 23..16, green in 15..8, blue in 7..0); they differ in the order the
channels are returned. ``pack_bgra`` keeps the historical encode layout
``blue:24 green:16 red:8 alpha:0`` and is therefore *not* the inverse of
``unpack_bgra``.
"""

from typing import Tuple
from ..types.color_types import INV8BIT
from ..utils.num_utils import clip_normalized


def _byte(value: int, shift: int) -> float:
    return ((value >> shift) & 0xFF) * INV8BIT


def _encode(c: float) -> int:
    # truncates; the epsilon absorbs float noise from decoded k / 255 values
    return int(clip_normalized(c) * 255 + 1e-9) & 0xFF


def unpack_argb(argb: int) -> Tuple[float, float, float, float]:
    """Decode a packed ARGB integer into unit ``(r, g, b, a)``."""
    return _byte(argb, 16), _byte(argb, 8), _byte(argb, 0), _byte(argb, 24)


def unpack_bgra(bgra: int) -> Tuple[float, float, float, float]:
    """Decode a packed BGRA integer into unit ``(b, g, r, a)``."""
    return _byte(bgra, 0), _byte(bgra, 8), _byte(bgra, 16), _byte(bgra, 24)


def pack_argb(r: float, g: float, b: float, a: float) -> int:
    return _encode(a) << 24 | _encode(r) << 16 | _encode(g) << 8 | _encode(b)


def pack_bgra(r: float, g: float, b: float, a: float) -> int:
    return _encode(b) << 24 | _encode(g) << 16 | _encode(r) << 8 | _encode(a)
