"""Hex string <-> unit RGB."""

from ..errors import ColorParseError
from ..types.color_types import RGBTuple, BGRTuple, INV8BIT
from ..utils.num_utils import clip_normalized

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_PREFIXES = ("#", "0x", "0X")


def parse_hex(text: str) -> int:
    """
    Parse up to six hex digits (``RRGGBB``) into an integer.

    A single leading ``#`` or ``0x`` is accepted.

    Raises:
        ColorParseError: on empty input, non hex characters or more than
            six digits.
    """
    if not isinstance(text, str):
        raise ColorParseError(text, "expected a string")
    digits = text.strip()
    for prefix in _PREFIXES:
        if digits.startswith(prefix):
            digits = digits[len(prefix):]
            break
    if not digits:
        raise ColorParseError(text, "no hex digits")
    if len(digits) > 6:
        raise ColorParseError(text, "more than 6 hex digits")
    bad = [ch for ch in digits if ch not in _HEX_DIGITS]
    if bad:
        raise ColorParseError(text, f"invalid hex character {bad[0]!r}")
    return int(digits, 16)


def hex_to_unit_rgb(text: str) -> RGBTuple:
    value = parse_hex(text)
    return (
        ((value >> 16) & 0xFF) * INV8BIT,
        ((value >> 8) & 0xFF) * INV8BIT,
        (value & 0xFF) * INV8BIT,
    )


def hex_to_unit_bgr(text: str) -> BGRTuple:
    r, g, b = hex_to_unit_rgb(text)
    return b, g, r


def _to_byte(c: float) -> int:
    return int(clip_normalized(c) * 0xFF + 1e-9)


def unit_rgb_to_hex(r: float, g: float, b: float) -> str:
    """Format unit RGB as six lowercase hex digits, e.g. ``"ff8000"``."""
    return f"{_to_byte(r):02x}{_to_byte(g):02x}{_to_byte(b):02x}"


def unit_bgr_to_hex(b: float, g: float, r: float) -> str:
    """Format unit BGR as six lowercase hex digits in ``BBGGRR`` order."""
    return f"{_to_byte(b):02x}{_to_byte(g):02x}{_to_byte(r):02x}"
