"""
Color channel types.

Integer channels (unsigned fixed point):
    - U8:  0-255
    - U16: 0-65535
    - U32: 0-4294967295

Float channels (0.0-1.0):
    - F32: rounded to single precision
    - F64: double precision

>>> from colorchannels.channels import U8, F32
>>> U8(153).to_channel(F32)
F32(0.6000000238418579)
>>> F32(0.6).to_channel(U8)
U8(153)
"""
from typing import Any
import numpy as np
from .base import Channel, IntChannel, FloatChannel
from .integer import U8, U16, U32
from .floating import F32, F64


def build_registry(*classes: type[Channel]) -> dict[np.dtype, type[Channel]]:
    return {
        np.dtype(cls.dtype): cls
        for cls in classes
    }


channel_dtype_to_class = build_registry(U8, U16, U32, F32, F64)


def channel_for_dtype(dtype: Any) -> type[Channel]:
    """Return the channel type matching a numpy dtype (``uint8`` -> ``U8``)."""
    channel = channel_dtype_to_class.get(np.dtype(dtype))
    if channel is None:
        raise TypeError(f"No channel type for dtype {np.dtype(dtype)}")
    return channel


__all__ = [
    'Channel',
    'IntChannel',
    'FloatChannel',
    'U8',
    'U16',
    'U32',
    'F32',
    'F64',
    'channel_for_dtype',
]
