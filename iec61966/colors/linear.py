from __future__ import annotations
from typing import ClassVar, Self, Tuple

from ..components import LinearLight
from ..types.color_types import ColorSpace
from .color_base import ColorBase
from .srgb import SRGB


class LinearSRGB(ColorBase):
    """sRGB primaries in linear light, before the transfer function."""
    __slots__ = ()

    mode:          ClassVar[ColorSpace] = "linear"
    channel_names: ClassVar[Tuple[str, str, str]] = ("r", "g", "b")

    def __init__(self, r: LinearLight, g: LinearLight, b: LinearLight) -> None:
        super().__init__((
            self._require(r, LinearLight, "r"),
            self._require(g, LinearLight, "g"),
            self._require(b, LinearLight, "b"),
        ))

    @classmethod
    def from_values(cls, r: float, g: float, b: float) -> Self:
        return cls(LinearLight.clamping(r), LinearLight.clamping(g), LinearLight.clamping(b))

    @classmethod
    def from_srgb(cls, srgb: SRGB) -> LinearSRGB:
        return srgb.linear

    @property
    def r(self) -> LinearLight:
        return self._value[0]

    @property
    def g(self) -> LinearLight:
        return self._value[1]

    @property
    def b(self) -> LinearLight:
        return self._value[2]

    @property
    def encoded(self) -> SRGB:
        return SRGB.from_linear(self)

    @property
    def srgb(self) -> SRGB:
        return self.encoded
