from __future__ import annotations
from typing import Tuple
import numpy as np
from numpy import ndarray as NDArray
from ..channels import Channel, FloatChannel, F64
from ..types.angle import Deg
from ..types.format_type import HUE_360, HUE_SECTOR
from ._validation import np_clip_unit


def recast_hue(h: Deg, channel: type[Channel]) -> Deg:
    """
    Numerically recast a hue angle for an HSV value in ``channel``.

    No wrapping is done. Float channels keep the angle at their own precision;
    integer channels truncate toward zero like a numeric cast.
    """
    if issubclass(channel, FloatChannel):
        return Deg(float(channel.dtype(float(h))))
    return Deg(int(h))


def hsv_to_hsv(h: Deg, s: Channel, v: Channel, channel: type[Channel]) -> Tuple[Deg, Channel, Channel]:
    return recast_hue(h, channel), s.to_channel(channel), v.to_channel(channel)


def rgb_to_hsv(r: Channel, g: Channel, b: Channel, channel: type[Channel]) -> Tuple[Deg, Channel, Channel]:
    """
    Convert one RGB triple to HSV in the ``channel`` domain.

    The hue is computed on double-precision fractions and wrapped into
    [0, 360); integer channels get the nearest whole degree. Achromatic
    input gets hue 0 and saturation 0.

    Args:
        r, g, b: Channel values sharing one channel type
        channel: Output channel type

    Returns:
        (h, s, v) with ``s`` and ``v`` in ``channel``
    """
    brightest = max((r, g, b), key=float)
    rf, gf, bf = (float(c.to_channel(F64)) for c in (r, g, b))
    mx = max(rf, gf, bf)
    mn = min(rf, gf, bf)
    chroma = mx - mn

    v = brightest.to_channel(channel)
    if chroma == 0.0:
        return recast_hue(Deg(0.0), channel), channel.from_ratio(0.0), v

    if mx == rf:
        hue = HUE_SECTOR * (((gf - bf) / chroma) % 6)
    elif mx == gf:
        hue = HUE_SECTOR * ((bf - rf) / chroma + 2)
    else:
        hue = HUE_SECTOR * ((rf - gf) / chroma + 4)

    if issubclass(channel, FloatChannel):
        h = recast_hue(Deg(hue).wrap(), channel)
    else:
        h = Deg(round(hue)).wrap()
    # unsaturated float input can have chroma with no positive component
    s = F64(chroma / mx if mx > 0.0 else 0.0).to_channel(channel)
    return h, s, v


def unit_rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Plain-float RGB to HSV.

    Returns:
        (h, s, v): hue in [0, 360), saturation and value in [0, 1]
    """
    h, s, v = rgb_to_hsv(F64(r), F64(g), F64(b), F64)
    return float(h), float(s), float(v)


def packed_to_hsv(packed: int, bits: int, channel: type[Channel]):
    """Build an HSV value from a packed ``bits``-wide integer. Not implemented."""
    raise NotImplementedError("Not yet implemented")


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized RGB to HSV.

    Args:
        r, g, b: array-like or scalar, [0, 1]

    Returns:
        hsv: array of shape (..., 3): (hue [0, 360), saturation [0, 1], value [0, 1])
    """
    r = np_clip_unit(r, "red")
    g = np_clip_unit(g, "green")
    b = np_clip_unit(b, "blue")

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    c_max = np.maximum.reduce([r, g, b])
    c_min = np.minimum.reduce([r, g, b])
    delta = c_max - c_min
    safe_delta = np.where(delta == 0, 1.0, delta)

    h = np.select(
        [delta == 0, c_max == r, c_max == g],
        [0.0, ((g - b) / safe_delta) % 6, (b - r) / safe_delta + 2],
        default=(r - g) / safe_delta + 4,
    ) * HUE_SECTOR
    h = np.mod(h, HUE_360)

    s = np.where(c_max > 0, delta / np.where(c_max > 0, c_max, 1.0), 0.0)

    return np.stack([h, s, c_max], axis=-1)
