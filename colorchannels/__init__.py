"""
colorchannels - HSV and RGB over integer and floating-point channels
====================================================================

A small color-model library converting between HSV and RGB, generic over the
numeric channel type: the same formulas give correctly rounded results for
8/16/32-bit unsigned integers and 32/64-bit floats.

Key Features
------------
- Channel types U8, U16, U32, F32, F64 with a uniform numeric contract
- Immutable Hsv and Rgb colors, checked to use a single channel type
- HSV → RGB in any output channel (e.g. 8-bit output from float input)
- clamp_s, clamp_c, inverse, mix and saturate on every color
- Vectorized numpy conversions for arrays of colors

Quick Start
-----------
>>> from colorchannels import Hsv, Deg, F32, U8
>>>
>>> hsv = Hsv(Deg(0.0), F32(1.0), F32(0.6))
>>> hsv.to_rgb(U8)
Rgb(r=U8(153), g=U8(0), b=U8(0))
>>> hsv.to_rgb(U8).to_hsv(F32).v == F32(0.6)
True

Modules
-------
- channels: channel types and the dtype registry
- colors: Hsv, Rgb and the Color/FloatColor capabilities
- conversions: scalar and numpy conversion functions
- types: Deg angles, format enum and constants
"""

from .channels import Channel, IntChannel, FloatChannel, U8, U16, U32, F32, F64, channel_for_dtype
from .types import Deg, FormatType, HUE_360, HUE_SECTOR
from .colors import ColorBase, Color, FloatColor, Hsv, Rgb
from .conversions import (
    hsv_to_rgb,
    rgb_to_hsv,
    hsv_to_unit_rgb,
    unit_rgb_to_hsv,
    np_hsv_to_unit_rgb,
    np_unit_rgb_to_hsv,
)

__version__ = "0.1.0"

__all__ = [
    # Channels
    "Channel", "IntChannel", "FloatChannel",
    "U8", "U16", "U32", "F32", "F64",
    "channel_for_dtype",

    # Types
    "Deg", "FormatType", "HUE_360", "HUE_SECTOR",

    # Colors
    "ColorBase", "Color", "FloatColor",
    "Hsv", "Rgb",

    # Conversions
    "hsv_to_rgb", "rgb_to_hsv",
    "hsv_to_unit_rgb", "unit_rgb_to_hsv",
    "np_hsv_to_unit_rgb", "np_unit_rgb_to_hsv",

    # Version
    "__version__",
]
