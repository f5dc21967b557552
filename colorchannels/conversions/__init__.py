"""
Color Space Conversions
=======================

HSV ↔ RGB conversion over channel types, with scalar and vectorized (numpy)
variants.

Conversion Functions
-------------------

HSV → RGB:
    hsv_to_rgb(h, s, v, channel)
        Channel-typed conversion; intermediates computed in the input domain
        and rescaled into ``channel``
    hsv_to_unit_rgb(h, s, v)
        Plain floats in, plain floats out
    np_hsv_to_unit_rgb(h, s, v)
        Vectorized conversion

RGB → HSV:
    rgb_to_hsv(r, g, b, channel)
        Channel-typed conversion
    unit_rgb_to_hsv(r, g, b)
        Plain floats in, plain floats out
    np_unit_rgb_to_hsv(r, g, b)
        Vectorized conversion

HSV → HSV:
    hsv_to_hsv(h, s, v, channel)
        Rescale s and v into another channel domain, recast the hue

Packed integers:
    packed_to_hsv(packed, bits, channel)
        Declared but not implemented; raises NotImplementedError

Examples
--------
>>> from colorchannels.channels import F32, U8
>>> from colorchannels.types import Deg
>>> from colorchannels.conversions import hsv_to_rgb
>>> hsv_to_rgb(Deg(120.0), F32(1.0), F32(0.6), U8)
(U8(0), U8(153), U8(0))
"""

# HSV → RGB
from .to_rgb import (
    hsv_to_rgb,
    hsv_to_unit_rgb,
    np_hsv_to_unit_rgb,
)

# RGB → HSV, HSV → HSV
from .to_hsv import (
    rgb_to_hsv,
    unit_rgb_to_hsv,
    np_unit_rgb_to_hsv,
    hsv_to_hsv,
    recast_hue,
    packed_to_hsv,
)

__all__ = [
    # HSV → RGB
    'hsv_to_rgb',
    'hsv_to_unit_rgb',
    'np_hsv_to_unit_rgb',

    # RGB → HSV
    'rgb_to_hsv',
    'unit_rgb_to_hsv',
    'np_unit_rgb_to_hsv',

    # HSV → HSV
    'hsv_to_hsv',
    'recast_hue',

    # Packed integers
    'packed_to_hsv',
]
