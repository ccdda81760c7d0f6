"""IEC 61966-2-1: the default RGB colour space, sRGB."""

from .components import (
    BoundedScalar,
    ComponentRangeError,
    Hue,
    Saturation,
    Lightness,
    Whiteness,
    Blackness,
    LinearLight,
    Red,
    Green,
    Blue,
    HueRangeError,
    SaturationRangeError,
    LightnessRangeError,
    WhitenessRangeError,
    BlacknessRangeError,
    LinearLightRangeError,
    RedRangeError,
    GreenRangeError,
    BlueRangeError,
)
from .colors import (
    ColorBase,
    SRGB,
    LinearSRGB,
    HSL,
    HWB,
    color_convert,
    get_color_class,
)
from .conversions import (
    encode,
    decode,
    unit_rgb_to_hsl,
    unit_rgb_to_hwb,
    hsl_to_unit_rgb,
    hwb_to_unit_rgb,
)
from .types import ColorSpace, HSLValues, HWBValues

# Friendly alias matching the standard's spelling
sRGB = SRGB

__version__ = "1.0.0"

__all__ = [
    # components
    "BoundedScalar",
    "Hue",
    "Saturation",
    "Lightness",
    "Whiteness",
    "Blackness",
    "LinearLight",
    "Red",
    "Green",
    "Blue",
    # errors
    "ComponentRangeError",
    "HueRangeError",
    "SaturationRangeError",
    "LightnessRangeError",
    "WhitenessRangeError",
    "BlacknessRangeError",
    "LinearLightRangeError",
    "RedRangeError",
    "GreenRangeError",
    "BlueRangeError",
    # colors
    "ColorBase",
    "SRGB",
    "sRGB",
    "LinearSRGB",
    "HSL",
    "HWB",
    "color_convert",
    "get_color_class",
    # conversions
    "encode",
    "decode",
    "unit_rgb_to_hsl",
    "unit_rgb_to_hwb",
    "hsl_to_unit_rgb",
    "hwb_to_unit_rgb",
    # types
    "ColorSpace",
    "HSLValues",
    "HWBValues",
]
