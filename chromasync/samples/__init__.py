from .colors import (
    RED,
    GREEN,
    BLUE,
    CYAN,
    MAGENTA,
    YELLOW,
    BLACK,
    WHITE,
    samples_rgb_hsv,
    samples_rgb_cmyk,
    samples_argb,
)

__all__ = [
    "RED",
    "GREEN",
    "BLUE",
    "CYAN",
    "MAGENTA",
    "YELLOW",
    "BLACK",
    "WHITE",
    "samples_rgb_hsv",
    "samples_rgb_cmyk",
    "samples_argb",
]
