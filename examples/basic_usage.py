"""Basic colorchannels usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np
from colorchannels import (
    Hsv,
    Rgb,
    Deg,
    U8,
    U16,
    F32,
    np_hsv_to_unit_rgb,
)


def demonstrate_colors() -> None:
    # Same color, two channel depths, one 8-bit result.
    from_float = Hsv(Deg(120.0), F32(1.0), F32(0.6))
    from_u16 = Hsv(Deg(120), U16(65535), U16(39321))
    print("F32 HSV -> U8 RGB:", from_float.to_rgb(U8))
    print("U16 HSV -> U8 RGB:", from_u16.to_rgb(U8))

    # Going back to HSV.
    accent = Rgb(U8(255), U8(128), U8(64))
    print("U8 RGB -> F32 HSV:", accent.to_hsv(F32))


def demonstrate_operations() -> None:
    red = Hsv(Deg(0.0), F32(1.0), F32(1.0))
    blue = Hsv(Deg(240.0), F32(1.0), F32(1.0))
    print("inverse of red:", red.inverse())
    print("red/blue mix:", red.mix(blue, F32(0.5)))
    print("saturated:", Hsv(Deg(-30.0), F32(1.2), F32(0.5)).saturate())
    print("clamped:", red.clamp_s(0.2, 0.8))


def demonstrate_arrays() -> None:
    hues = np.linspace(0, 360, 7)
    print("hue ring:", np.round(np_hsv_to_unit_rgb(hues, 1.0, 1.0) * 255).astype(int))


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_operations()
    demonstrate_arrays()
