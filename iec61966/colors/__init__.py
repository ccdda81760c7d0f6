"""
IEC 61966-2-1 Color Classes
===========================

Immutable color values in four models sharing sRGB as the hub:

- SRGB: gamma-encoded channels in [0, 1]
- LinearSRGB: linear-light channels (LinearLight components)
- HSL: Hue / Saturation / Lightness
- HWB: Hue / Whiteness / Blackness

>>> from iec61966.colors import SRGB, HSL
>>> orange = SRGB.from_hex("#FF8000")
>>> round(orange.hsl.h, 2)
30.12
>>> orange.convert("hwb").b
0.0
"""

from .color_base import ColorBase
from .srgb import SRGB
from .linear import LinearSRGB
from .hsl import HSL
from .hwb import HWB
from .color import color_convert, get_color_class, unified_space_to_class

__all__ = [
    'ColorBase',
    'SRGB',
    'LinearSRGB',
    'HSL',
    'HWB',
    'color_convert',
    'get_color_class',
    'unified_space_to_class',
]
