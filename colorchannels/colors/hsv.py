from __future__ import annotations
from typing import Any, ClassVar, Optional, Tuple, TYPE_CHECKING
from ..channels import Channel
from ..conversions import hsv_to_rgb, hsv_to_hsv, packed_to_hsv
from ..types.angle import Deg
from ..types.color_types import ColorSpace, Scalar
from ..types.format_type import HUE_360
from .color_base import ColorBase, Color, FloatColor

if TYPE_CHECKING:
    from .rgb import Rgb


class Hsv(ColorBase, Color, FloatColor):
    """
    Hue / saturation / value color.

    ``h`` is a :class:`Deg` angle, never wrapped on construction. ``s`` and
    ``v`` share one channel type, which decides the numeric domain of the
    color (``Hsv(Deg(0), U16(0), U16(65535))`` is a 16-bit white).

    >>> from colorchannels.channels import F32, U8
    >>> Hsv(Deg(240.0), F32(1.0), F32(0.6)).to_rgb(U8)
    Rgb(r=U8(0), g=U8(0), b=U8(153))
    """
    __slots__ = ()

    mode:       ClassVar[ColorSpace] = "hsv"
    components: ClassVar[Tuple[str, ...]] = ("h", "s", "v")

    def __init__(self, h: Deg | Scalar, s: Channel, v: Channel) -> None:
        if not isinstance(h, Deg):
            h = Deg(h)
        super().__init__((h, s, v))

    @classmethod
    def new(cls, h: Deg | Scalar, s: Channel, v: Channel) -> Hsv:
        return cls(h, s, v)

    @classmethod
    def from_u32(cls, packed: int, channel: type[Channel]) -> Hsv:
        return packed_to_hsv(packed, 32, channel)

    @classmethod
    def from_u64(cls, packed: int, channel: type[Channel]) -> Hsv:
        return packed_to_hsv(packed, 64, channel)

    @property
    def h(self) -> Deg:
        return self._value[0]

    @property
    def s(self) -> Channel:
        return self._value[1]

    @property
    def v(self) -> Channel:
        return self._value[2]

    # ------------------ Color ------------------
    def clamp_s(self, lo: Any, hi: Any) -> Hsv:
        # Should the hue component be clamped? Left untouched for now.
        return Hsv(self.h, self.s.clamp(lo, hi), self.v.clamp(lo, hi))

    def clamp_c(self, lo: Hsv, hi: Hsv) -> Hsv:
        return Hsv(self.h, self.s.clamp(lo.s, hi.s), self.v.clamp(lo.v, hi.v))

    def inverse(self) -> Hsv:
        return Hsv((self.h + HUE_360 // 2).wrap(), self.s.invert(), self.v.invert())

    def mix(self, other: Hsv, value: Any) -> Hsv:
        """
        Blend towards ``other`` by ``value``.

        Both colors go through RGB in this color's channel type; the blend is
        a straight line there and the result is converted back to HSV.
        """
        channel = self.channel
        # TODO: interpolate h/s/v directly once hue direction handling is settled
        return self.to_rgb(channel).mix(other.to_rgb(channel), value).to_hsv(channel)

    # ------------------ FloatColor ------------------
    def saturate(self) -> Hsv:
        """Wrap ``h`` into [0, 360) and clamp ``s`` and ``v`` into [0, 1]."""
        self._require_float("saturate")
        return Hsv(self.h.wrap(), self.s.saturate(), self.v.saturate())

    # ------------------ Conversions ------------------
    def to_hsv(self, channel: Optional[type[Channel]] = None) -> Hsv:
        """Rescale into ``channel`` (defaults to the current channel)."""
        return Hsv(*hsv_to_hsv(self.h, self.s, self.v, channel or self.channel))

    def to_rgb(self, channel: Optional[type[Channel]] = None) -> Rgb:
        """Convert to RGB in ``channel`` (defaults to the current channel)."""
        from .rgb import Rgb
        return Rgb(*hsv_to_rgb(self.h, self.s, self.v, channel or self.channel))
