"""
Color Classes
=============

Immutable HSV and RGB colors over channel types.

Features
--------
- Immutable color instances (frozen after initialization)
- One channel type per color, checked on construction
- Conversion between spaces and channel depths with ``to_rgb``/``to_hsv``
- Shared ``Color`` capabilities: clamp_s, clamp_c, inverse, mix
- ``FloatColor`` capability for float channels: saturate

Usage
-----
>>> from colorchannels.colors import Hsv, Rgb
>>> from colorchannels.channels import U8, U16
>>> from colorchannels.types import Deg
>>>
>>> red = Hsv(Deg(0), U16(65535), U16(39321))
>>> red.to_rgb(U8)
Rgb(r=U8(153), g=U8(0), b=U8(0))
>>> red.inverse()
Hsv(h=Deg(180), s=U16(0), v=U16(26214))

Notes
-----
- Hue is never wrapped on construction; ``inverse``, ``saturate`` and the
  RGB conversion wrap it.
- ``clamp_s``/``clamp_c`` leave hue untouched.
- ``mix`` blends in RGB and converts back.
"""

from .color_base import ColorBase, Color, FloatColor
from .hsv import Hsv
from .rgb import Rgb


__all__ = ['ColorBase', 'Color', 'FloatColor', 'Hsv', 'Rgb']
