"""
Range-validated scalar components.

Every component wraps one float and offers two ways in:

- ``T(value)`` validates strictly and raises the type's
  ``ComponentRangeError`` subclass outside the domain.
- ``T.clamping(value)`` (``Hue.normalizing`` for hue) coerces instead and
  only rejects NaN.

>>> from iec61966.components import Hue, Saturation
>>> Saturation.from_percent(50)
Saturation(0.5)
>>> str(Hue.normalizing(370))
'10.0°'
"""

from .bounded import BoundedScalar, ComponentRangeError
from .hue import Hue, HueRangeError
from .unit import (
    UnitScalar,
    Saturation,
    Lightness,
    Whiteness,
    Blackness,
    LinearLight,
    Red,
    Green,
    Blue,
    SaturationRangeError,
    LightnessRangeError,
    WhitenessRangeError,
    BlacknessRangeError,
    LinearLightRangeError,
    RedRangeError,
    GreenRangeError,
    BlueRangeError,
)

__all__ = [
    "BoundedScalar",
    "UnitScalar",
    "ComponentRangeError",
    "Hue",
    "Saturation",
    "Lightness",
    "Whiteness",
    "Blackness",
    "LinearLight",
    "Red",
    "Green",
    "Blue",
    "HueRangeError",
    "SaturationRangeError",
    "LightnessRangeError",
    "WhitenessRangeError",
    "BlacknessRangeError",
    "LinearLightRangeError",
    "RedRangeError",
    "GreenRangeError",
    "BlueRangeError",
]
