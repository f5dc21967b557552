from __future__ import annotations
from typing import Tuple
import numpy as np
from numpy import ndarray as NDArray
from ..channels import Channel, F64
from ..types.angle import Deg
from ..types.format_type import HUE_360, HUE_SECTOR
from ._validation import np_clip_unit


def hsv_to_rgb(h: Deg, s: Channel, v: Channel, channel: type[Channel]) -> Tuple[Channel, Channel, Channel]:
    """
    Convert one HSV triple to RGB in the ``channel`` domain.

    ``s`` and ``v`` share one channel type T; the intermediate values are
    computed in T and each one is rescaled into ``channel`` on its own.

    Args:
        h: Hue angle, wrapped here before sector lookup
        s: Saturation in T
        v: Value in T
        channel: Output channel type

    Returns:
        (r, g, b) tuple of ``channel`` values
    """
    if v.is_zero():
        black = channel.from_ratio(0.0)
        return black, black, black

    if s.is_zero():
        gray = v.to_channel(channel)
        return gray, gray, gray

    T = type(v)
    hue = float(h.wrap())
    hue_six = hue / HUE_SECTOR
    sector = int(hue_six)
    frac = T.from_ratio(hue_six - sector)

    p = s.invert().normalized_mul(v).to_channel(channel)
    q = s.normalized_mul(frac).invert().normalized_mul(v).to_channel(channel)
    t = s.normalized_mul(frac.invert()).invert().normalized_mul(v).to_channel(channel)
    b = v.to_channel(channel)

    # 6 only shows up when float rounding pushes a hue just below 360 onto the boundary
    if sector in (0, 6):
        return b, t, p
    if sector == 1:
        return q, b, p
    if sector == 2:
        return p, b, t
    if sector == 3:
        return p, q, b
    if sector == 4:
        return t, p, b
    if sector == 5:
        return b, p, q
    raise RuntimeError(f"Unreachable hue sector {sector} for hue {h!r}")


def hsv_to_unit_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """
    Plain-float HSV to RGB.

    Args:
        h: Hue in degrees
        s: Saturation [0, 1]
        v: Value [0, 1]

    Returns:
        (r, g, b) floats in [0, 1]
    """
    r, g, b = hsv_to_rgb(Deg(float(h)), F64(s), F64(v), F64)
    return float(r), float(g), float(b)


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized HSV to RGB using the same hexagon sector table.

    Args:
        h: array-like or scalar, hue in degrees (wrapped here)
        s: array-like or scalar, saturation [0, 1]
        v: array-like or scalar, value [0, 1]

    Returns:
        rgb: array of shape (..., 3) in [0, 1]
    """
    h = np.asarray(h, dtype=float)
    s = np_clip_unit(s, "saturation")
    v = np_clip_unit(v, "value")

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    hue_six = np.mod(h, HUE_360) / HUE_SECTOR
    i = np.floor(hue_six)
    f = hue_six - i
    i = i.astype(int) % 6

    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))

    conditions = [i == 0, i == 1, i == 2, i == 3, i == 4, i == 5]
    r = np.select(conditions, [v, q, p, p, t, v])
    g = np.select(conditions, [t, v, v, q, p, p])
    b = np.select(conditions, [p, p, t, v, v, q])

    return np.stack([r, g, b], axis=-1)
