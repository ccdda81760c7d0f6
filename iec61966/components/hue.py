from __future__ import annotations
import math
from typing import ClassVar, Self

from boundednumbers import BoundType

from ..types.bound_type import HUE_360
from .bounded import BoundedScalar, ComponentRangeError


class HueRangeError(ComponentRangeError):
    component: ClassVar[str] = "Hue"


class Hue(BoundedScalar):
    """
    A hue angle in degrees on ``[0, 360)``.

    0° is red, 120° green and 240° blue. Angles outside the domain are
    rejected by ``Hue(...)``; use ``Hue.normalizing`` to wrap them.

    >>> Hue(240).degrees
    240.0
    >>> Hue.normalizing(-10).degrees
    350.0
    """
    __slots__ = ()

    lower = 0.0
    upper = HUE_360
    upper_inclusive = False
    policy = BoundType.CYCLIC
    error = HueRangeError

    @property
    def degrees(self) -> float:
        return self._value

    @classmethod
    def normalizing(cls, degrees: float) -> Self:
        """Wrap any finite angle into ``[0, 360)``."""
        return cls.bounded(degrees)

    @classmethod
    def from_turns(cls, turns: float) -> Self:
        return cls(turns * HUE_360)

    @classmethod
    def from_radians(cls, radians: float) -> Self:
        return cls(radians * 180.0 / math.pi)

    @classmethod
    def from_gradians(cls, gradians: float) -> Self:
        return cls(gradians * 0.9)

    def __str__(self) -> str:
        return f"{self.degrees}°"
