from __future__ import annotations
from typing import ClassVar, Self

from ..conversions.transfer import encode, decode
from ..types.bound_type import PERCENT_SCALE
from .bounded import BoundedScalar, ComponentRangeError


class UnitScalar(BoundedScalar):
    """A component on the closed unit interval ``[0, 1]``."""
    __slots__ = ()

    @classmethod
    def clamping(cls, value: float) -> Self:
        """Saturate ``value`` to ``[0, 1]``."""
        return cls.bounded(value)

    def __str__(self) -> str:
        return f"{self._value * PERCENT_SCALE}%"


class PercentScalar(UnitScalar):
    __slots__ = ()

    @classmethod
    def from_percent(cls, percent: float) -> Self:
        return cls(percent / PERCENT_SCALE)


# ---- HSL / HWB ----

class SaturationRangeError(ComponentRangeError):
    component: ClassVar[str] = "Saturation"


class LightnessRangeError(ComponentRangeError):
    component: ClassVar[str] = "Lightness"


class WhitenessRangeError(ComponentRangeError):
    component: ClassVar[str] = "Whiteness"


class BlacknessRangeError(ComponentRangeError):
    component: ClassVar[str] = "Blackness"


class Saturation(PercentScalar):
    """0 is gray, 1 is fully saturated."""
    __slots__ = ()
    error = SaturationRangeError


class Lightness(PercentScalar):
    """0 is black, 0.5 the pure color, 1 white."""
    __slots__ = ()
    error = LightnessRangeError


class Whiteness(PercentScalar):
    __slots__ = ()
    error = WhitenessRangeError


class Blackness(PercentScalar):
    __slots__ = ()
    error = BlacknessRangeError


# ---- Linear light ----

class LinearLightRangeError(ComponentRangeError):
    component: ClassVar[str] = "LinearLight"


class LinearLight(UnitScalar):
    """Scene-referred intensity before gamma encoding."""
    __slots__ = ()
    error = LinearLightRangeError

    @property
    def encoded(self) -> float:
        return encode(self._value)


# ---- sRGB channels ----

class RedRangeError(ComponentRangeError):
    component: ClassVar[str] = "Red channel"


class GreenRangeError(ComponentRangeError):
    component: ClassVar[str] = "Green channel"


class BlueRangeError(ComponentRangeError):
    component: ClassVar[str] = "Blue channel"


class ChannelScalar(UnitScalar):
    """A gamma-encoded sRGB channel."""
    __slots__ = ()

    @property
    def linear(self) -> LinearLight:
        return LinearLight.clamping(decode(self._value))


class Red(ChannelScalar):
    __slots__ = ()
    error = RedRangeError


class Green(ChannelScalar):
    __slots__ = ()
    error = GreenRangeError


class Blue(ChannelScalar):
    __slots__ = ()
    error = BlueRangeError
