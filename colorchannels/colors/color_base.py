from __future__ import annotations
from typing import Any, ClassVar, Iterator, Tuple, Self
from abc import ABC, abstractmethod
from ..channels import Channel
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace, HUE_SPACES


class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # no new attributes, immutable

    num_channels: ClassVar[int] = 3
    mode:         ClassVar[ColorSpace]
    components:   ClassVar[Tuple[str, ...]]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Tuple[Any, ...]) -> None:
        if len(value) != self.num_channels:
            raise ValueError(f"{self.mode} expects {self.num_channels} components, got {len(value)}")

        # hue (if any) is the first component; the rest must be channel values
        channel_values = value[1:] if self.has_hue else value
        channel = type(channel_values[0])
        if not isinstance(channel_values[0], Channel):
            raise TypeError(
                f"{self.mode} expects channel values (U8, U16, U32, F32, F64), "
                f"got {channel.__name__}"
            )
        for v in channel_values[1:]:
            if type(v) is not channel:
                raise TypeError(
                    f"{self.mode} expects every channel to be {channel.__name__}, "
                    f"got {type(v).__name__}"
                )

        # safe assignment; __setattr__ still allows it during init
        self._value = tuple(value)

        # freeze instance; no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[Any, ...]:
        return self._value

    @property
    def channel(self) -> type[Channel]:
        """The channel type shared by the non-hue components."""
        return type(self._value[-1])

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue component."""
        return self.mode in HUE_SPACES

    @property
    def is_float(self) -> bool:
        return self.channel.format_type is FormatType.FLOAT

    def _require_float(self, operation: str) -> None:
        if not self.is_float:
            raise TypeError(
                f"{self.__class__.__name__}.{operation} needs a float channel, "
                f"got {self.channel.__name__}"
            )

    # ------------------ VALUE SEMANTICS ------------------
    def __iter__(self) -> Iterator[Any]:
        return iter(self._value)

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.channel is other.channel and self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self), self.channel, self._value))

    def __repr__(self) -> str:
        parts = ", ".join(f"{name}={v!r}" for name, v in zip(self.components, self._value))
        return f"{self.__class__.__name__}({parts})"


class Color(ABC):
    """Capabilities shared by every color type, whatever its channel."""
    __slots__ = ()

    @abstractmethod
    def clamp_s(self, lo: Any, hi: Any) -> Self:
        """Clamp the components of the color to the range ``(lo, hi)``."""

    @abstractmethod
    def clamp_c(self, lo: Self, hi: Self) -> Self:
        """Clamp the components of the color component-wise between ``lo`` and ``hi``."""

    @abstractmethod
    def inverse(self) -> Self:
        """Invert the color."""

    @abstractmethod
    def mix(self, other: Self, value: Any) -> Self:
        """Linear blend towards ``other`` by ``value`` (a channel fraction)."""


class FloatColor(ABC):
    """Capabilities of colors with floating-point channels."""
    __slots__ = ()

    @abstractmethod
    def saturate(self) -> Self:
        """Bring every component back into its canonical range."""
