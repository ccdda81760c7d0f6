from __future__ import annotations
from typing import ClassVar, Self, Tuple

from ..components import Hue, Whiteness, Blackness
from ..types.color_types import ColorSpace
from .color_base import ColorBase
from .hsl import HSL
from .srgb import SRGB


class HWB(ColorBase):
    """
    Hue, whiteness and blackness.

    Whenever whiteness and blackness add up to 1 or more the color is a
    gray. Conversions to and from HSL go through sRGB.
    """
    __slots__ = ()

    mode:          ClassVar[ColorSpace] = "hwb"
    channel_names: ClassVar[Tuple[str, str, str]] = ("h", "w", "b")

    def __init__(self, hue: Hue, whiteness: Whiteness, blackness: Blackness) -> None:
        super().__init__((
            self._require(hue, Hue, "hue"),
            self._require(whiteness, Whiteness, "whiteness"),
            self._require(blackness, Blackness, "blackness"),
        ))

    @classmethod
    def from_values(cls, h: float, w: float, b: float) -> Self:
        return cls(Hue.normalizing(h), Whiteness.clamping(w), Blackness.clamping(b))

    @classmethod
    def from_srgb(cls, srgb: SRGB) -> Self:
        return cls.from_values(*srgb.hwb_values)

    @classmethod
    def from_hsl(cls, hsl: HSL) -> Self:
        return cls.from_srgb(hsl.srgb)

    @property
    def hue(self) -> Hue:
        return self._value[0]

    @property
    def whiteness(self) -> Whiteness:
        return self._value[1]

    @property
    def blackness(self) -> Blackness:
        return self._value[2]

    @property
    def h(self) -> float:
        return self.hue.degrees

    @property
    def w(self) -> float:
        return self.whiteness.value

    @property
    def b(self) -> float:
        return self.blackness.value

    @property
    def srgb(self) -> SRGB:
        return SRGB.from_hwb(self.hue, self.whiteness, self.blackness)

    @property
    def hsl(self) -> HSL:
        return HSL.from_srgb(self.srgb)
