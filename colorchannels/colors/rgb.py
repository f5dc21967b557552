from __future__ import annotations
from typing import Any, ClassVar, Optional, Tuple
from ..channels import Channel
from ..conversions import rgb_to_hsv
from ..types.color_types import ColorSpace
from .color_base import ColorBase, Color, FloatColor
from .hsv import Hsv


class Rgb(ColorBase, Color, FloatColor):
    __slots__ = ()

    mode:       ClassVar[ColorSpace] = "rgb"
    components: ClassVar[Tuple[str, ...]] = ("r", "g", "b")

    def __init__(self, r: Channel, g: Channel, b: Channel) -> None:
        super().__init__((r, g, b))

    @classmethod
    def new(cls, r: Channel, g: Channel, b: Channel) -> Rgb:
        return cls(r, g, b)

    @property
    def r(self) -> Channel:
        return self._value[0]

    @property
    def g(self) -> Channel:
        return self._value[1]

    @property
    def b(self) -> Channel:
        return self._value[2]

    def clamp_s(self, lo: Any, hi: Any) -> Rgb:
        return Rgb(*(c.clamp(lo, hi) for c in self._value))

    def clamp_c(self, lo: Rgb, hi: Rgb) -> Rgb:
        return Rgb(*(c.clamp(l, h) for c, l, h in zip(self._value, lo.value, hi.value)))

    def inverse(self) -> Rgb:
        return Rgb(*(c.invert() for c in self._value))

    def mix(self, other: Rgb, value: Any) -> Rgb:
        """Channel-wise linear blend; ``other`` is rescaled into this color's channel first."""
        if not isinstance(other, Rgb):
            raise TypeError(f"Rgb can only be mixed with Rgb, got {type(other).__name__}")
        other = other.to_rgb(self.channel)
        return Rgb(*(a.mix(b, value) for a, b in zip(self._value, other.value)))

    def saturate(self) -> Rgb:
        self._require_float("saturate")
        return Rgb(*(c.saturate() for c in self._value))

    def to_rgb(self, channel: Optional[type[Channel]] = None) -> Rgb:
        channel = channel or self.channel
        if channel is self.channel:
            return self
        return Rgb(*(c.to_channel(channel) for c in self._value))

    def to_hsv(self, channel: Optional[type[Channel]] = None) -> Hsv:
        return Hsv(*rgb_to_hsv(self.r, self.g, self.b, channel or self.channel))
