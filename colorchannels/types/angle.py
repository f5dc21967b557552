from __future__ import annotations
from numbers import Integral, Real
from typing import Union
from boundednumbers.functions import cyclic_wrap_float
from .color_types import Scalar
from .format_type import HUE_360


class Deg:
    """
    An angle in degrees.

    The stored value is never wrapped on construction or arithmetic, so hue
    deltas can be accumulated freely. Use :meth:`wrap` to bring the angle
    into ``[0, 360)``. Integer angles stay integers, float angles stay floats.
    """
    __slots__ = ('_value',)

    def __init__(self, value: Union[Scalar, Deg]) -> None:
        if isinstance(value, Deg):
            value = value.value
        if isinstance(value, bool) or not isinstance(value, Real):
            raise TypeError(f"Deg expects a real number, got {type(value).__name__}")
        value = int(value) if isinstance(value, Integral) else float(value)
        object.__setattr__(self, '_value', value)

    def __setattr__(self, name, value):
        raise AttributeError(f"Deg is immutable; cannot assign to {name}")

    @property
    def value(self) -> Scalar:
        return self._value

    def wrap(self) -> Deg:
        """Return the equivalent angle in ``[0, 360)``."""
        wrapped = float(cyclic_wrap_float(float(self._value), 0.0, float(HUE_360)))
        # tiny negative angles round up to exactly 360.0
        if wrapped >= HUE_360:
            wrapped = 0.0
        if isinstance(self._value, int):
            return Deg(int(round(wrapped)) % HUE_360)
        return Deg(wrapped)

    def __add__(self, other: Union[Scalar, Deg]) -> Deg:
        other_value = other.value if isinstance(other, Deg) else other
        return Deg(self._value + other_value)

    __radd__ = __add__

    def __sub__(self, other: Union[Scalar, Deg]) -> Deg:
        other_value = other.value if isinstance(other, Deg) else other
        return Deg(self._value - other_value)

    def __neg__(self) -> Deg:
        return Deg(-self._value)

    def __eq__(self, other) -> bool:
        if isinstance(other, Deg):
            return self._value == other._value
        if isinstance(other, (int, float)):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __float__(self) -> float:
        return float(self._value)

    def __int__(self) -> int:
        return int(self._value)

    def __repr__(self) -> str:
        return f"Deg({self._value!r})"
