"""
Channel base classes.

A channel is one numeric color component. Every concrete channel type is a
subclass of ``int`` or ``float``, so values read like plain numbers, while the
methods below give one uniform contract across bit depths:

- ``max()``: the domain maximum (``1.0`` for floats, ``2**bits - 1`` for ints)
- ``clamp(lo, hi)`` / ``saturate()``
- ``invert()``: ``max() - self``
- ``normalized_mul(other)``: ``self * other / max()``
- ``to_channel(U)`` / ``U.from_channel(value)``: rescale between domains
- ``mix(other, t)``: linear interpolation by the channel fraction ``t``
- ``is_zero()``

Arithmetic operators inherited from ``int``/``float`` return plain numbers;
only the methods above stay inside the channel type.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Self
from boundednumbers.functions import clamp
import numpy as np
from ..types.format_type import FormatType


class Channel(ABC):
    __slots__ = ()

    format_type: ClassVar[FormatType]
    dtype:       ClassVar[type]

    @classmethod
    @abstractmethod
    def max(cls) -> Self: ...

    @classmethod
    @abstractmethod
    def from_ratio(cls, ratio: float) -> Self:
        """Build a channel value from a fraction of ``max()``."""

    @classmethod
    @abstractmethod
    def from_channel(cls, value: Channel) -> Self:
        """Rescale ``value`` from its own domain into this one."""

    @abstractmethod
    def clamp(self, lo: Any, hi: Any) -> Self: ...

    @abstractmethod
    def invert(self) -> Self: ...

    @abstractmethod
    def normalized_mul(self, other: Any) -> Self: ...

    @abstractmethod
    def saturate(self) -> Self: ...

    @abstractmethod
    def mix(self, other: Any, t: Any) -> Self: ...

    @abstractmethod
    def is_zero(self) -> bool: ...

    def to_channel(self, channel: type[Channel]) -> Channel:
        return channel.from_channel(self)

    def _coerce(self, other: Any) -> Self:
        """Accept a plain number or a value of the same channel type."""
        cls = type(self)
        if isinstance(other, Channel):
            if type(other) is not cls:
                raise TypeError(
                    f"{cls.__name__} cannot be combined with {type(other).__name__}; "
                    f"convert it with to_channel({cls.__name__}) first"
                )
            return other
        return cls(other)

    def _coerce_fraction(self, t: Any) -> Self:
        """Like ``_coerce``, but a plain number is read as a fraction of ``max()``."""
        if isinstance(t, Channel):
            return self._coerce(t)
        return type(self).from_ratio(t)


class IntChannel(int, Channel):
    """Unsigned fixed-point channel; values are saturated into ``[0, max]`` on construction."""
    __slots__ = ()

    format_type: ClassVar[FormatType] = FormatType.INT
    max_value:   ClassVar[int]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if 'dtype' in cls.__dict__:
            cls.max_value = int(np.iinfo(cls.dtype).max)

    def __new__(cls, value: Any = 0) -> Self:
        return super().__new__(cls, int(clamp(int(value), 0, cls.max_value)))

    @classmethod
    def max(cls) -> Self:
        return cls(cls.max_value)

    @classmethod
    def from_ratio(cls, ratio: float) -> Self:
        return cls(round(float(clamp(float(ratio), 0.0, 1.0)) * cls.max_value))

    @classmethod
    def from_channel(cls, value: Channel) -> Self:
        if isinstance(value, IntChannel):
            # exact integer rescale, rounded to nearest
            src_max = value.max_value
            return cls((int(value) * cls.max_value + src_max // 2) // src_max)
        if isinstance(value, FloatChannel):
            return cls.from_ratio(float(value))
        raise TypeError(f"{cls.__name__} expects a channel value, got {type(value).__name__}")

    def clamp(self, lo: Any, hi: Any) -> Self:
        lo, hi = self._coerce(lo), self._coerce(hi)
        return type(self)(clamp(int(self), int(lo), int(hi)))

    def invert(self) -> Self:
        return type(self)(self.max_value - int(self))

    def normalized_mul(self, other: Any) -> Self:
        other = self._coerce(other)
        m = self.max_value
        # Python ints never overflow, so the widened product is exact
        return type(self)((int(self) * int(other) + m // 2) // m)

    def saturate(self) -> Self:
        return self

    def mix(self, other: Any, t: Any) -> Self:
        other = self._coerce(other)
        t = self._coerce_fraction(t)
        m = self.max_value
        numerator = int(self) * m + (int(other) - int(self)) * int(t)
        return type(self)((numerator + m // 2) // m)

    def is_zero(self) -> bool:
        return int(self) == 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"


class FloatChannel(float, Channel):
    """
    Floating-point channel with maximum ``1.0``.

    Values are rounded to the precision of ``dtype`` but not clamped, so
    ``saturate()`` is meaningful.
    """
    __slots__ = ()

    format_type: ClassVar[FormatType] = FormatType.FLOAT

    def __new__(cls, value: Any = 0.0) -> Self:
        return super().__new__(cls, float(cls.dtype(float(value))))

    @classmethod
    def max(cls) -> Self:
        return cls(1.0)

    @classmethod
    def from_ratio(cls, ratio: float) -> Self:
        return cls(ratio)

    @classmethod
    def from_channel(cls, value: Channel) -> Self:
        if isinstance(value, IntChannel):
            return cls(int(value) / value.max_value)
        if isinstance(value, FloatChannel):
            return cls(float(value))
        raise TypeError(f"{cls.__name__} expects a channel value, got {type(value).__name__}")

    def clamp(self, lo: Any, hi: Any) -> Self:
        lo, hi = self._coerce(lo), self._coerce(hi)
        return type(self)(clamp(float(self), float(lo), float(hi)))

    def invert(self) -> Self:
        return type(self)(1.0 - float(self))

    def normalized_mul(self, other: Any) -> Self:
        other = self._coerce(other)
        return type(self)(clamp(float(self) * float(other), 0.0, 1.0))

    def saturate(self) -> Self:
        return type(self)(clamp(float(self), 0.0, 1.0))

    def mix(self, other: Any, t: Any) -> Self:
        other = self._coerce(other)
        t = self._coerce_fraction(t)
        a = float(self)
        return type(self)(a + (float(other) - a) * float(t))

    def is_zero(self) -> bool:
        return float(self) == 0.0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({float(self)!r})"
