"""
Chromasync Color Values
=======================

:class:`ColorValue` is an immutable color that keeps RGB, HSV and CMYK in sync
(BGR is a view of RGB) together with an independent alpha channel.

>>> from chromasync.colors import ColorValue
>>> red = ColorValue.from_rgb(1.0, 0.0, 0.0)
>>> red.hsv
(0.0, 1.0, 1.0)
>>> red.closest_hue().name
'red'
>>> red.lighten(0.2) is red
False
"""

from .color_value import ColorValue

__all__ = ['ColorValue']
