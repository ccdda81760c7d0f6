from __future__ import annotations
from typing import TYPE_CHECKING, ClassVar, Self, Tuple

from ..components import Hue, Saturation, Lightness
from ..types.color_types import ColorSpace
from .color_base import ColorBase
from .srgb import SRGB

if TYPE_CHECKING:
    from .hwb import HWB


class HSL(ColorBase):
    """
    Hue, saturation and lightness: a cylindrical view of sRGB.

    >>> HSL.from_values(120, 1, 0.5).srgb.hex
    '#00FF00'
    """
    __slots__ = ()

    mode:          ClassVar[ColorSpace] = "hsl"
    channel_names: ClassVar[Tuple[str, str, str]] = ("h", "s", "l")

    def __init__(self, hue: Hue, saturation: Saturation, lightness: Lightness) -> None:
        super().__init__((
            self._require(hue, Hue, "hue"),
            self._require(saturation, Saturation, "saturation"),
            self._require(lightness, Lightness, "lightness"),
        ))

    @classmethod
    def from_values(cls, h: float, s: float, l: float) -> Self:
        """Wrap ``h`` into [0, 360) and clamp ``s`` and ``l`` to [0, 1]."""
        return cls(Hue.normalizing(h), Saturation.clamping(s), Lightness.clamping(l))

    @classmethod
    def from_srgb(cls, srgb: SRGB) -> Self:
        return cls.from_values(*srgb.hsl_values)

    @classmethod
    def from_hwb(cls, hwb: HWB) -> Self:
        return cls.from_srgb(hwb.srgb)

    @property
    def hue(self) -> Hue:
        return self._value[0]

    @property
    def saturation(self) -> Saturation:
        return self._value[1]

    @property
    def lightness(self) -> Lightness:
        return self._value[2]

    @property
    def h(self) -> float:
        return self.hue.degrees

    @property
    def s(self) -> float:
        return self.saturation.value

    @property
    def l(self) -> float:
        return self.lightness.value

    @property
    def srgb(self) -> SRGB:
        return SRGB.from_hsl(self.hue, self.saturation, self.lightness)

    @property
    def hwb(self) -> HWB:
        from .hwb import HWB
        return HWB.from_srgb(self.srgb)
