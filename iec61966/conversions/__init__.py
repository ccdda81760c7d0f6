"""
IEC 61966-2-1 Conversions
=========================

Plain-float conversion functions between the sRGB hub and the other
models. The color classes in ``iec61966.colors`` are thin typed wrappers
around these.

Transfer function:
    encode(linear)        linear light -> gamma-encoded sRGB
    decode(encoded)       gamma-encoded sRGB -> linear light (clamped)

sRGB -> cylindrical:
    unit_rgb_to_hsl(r, g, b)
    unit_rgb_to_hwb(r, g, b)

cylindrical -> sRGB:
    hsl_to_unit_rgb(h, s, l)
    hwb_to_unit_rgb(h, w, b)

Examples
--------
>>> from iec61966.conversions import unit_rgb_to_hsl, hsl_to_unit_rgb
>>> h, s, l = unit_rgb_to_hsl(0.8, 0.4, 0.2)
>>> r, g, b = hsl_to_unit_rgb(h, s, l)
"""

from .transfer import (
    encode,
    decode,
    THRESHOLD,
    LINEAR_THRESHOLD,
    LINEAR_SLOPE,
    GAMMA,
    OFFSET,
)
from .to_hsl import unit_rgb_to_hsl, rgb_hue
from .to_hwb import unit_rgb_to_hwb
from .to_rgb import hsl_to_unit_rgb, hwb_to_unit_rgb, hue_to_rgb

__all__ = [
    # Transfer function
    'encode',
    'decode',
    'THRESHOLD',
    'LINEAR_THRESHOLD',
    'LINEAR_SLOPE',
    'GAMMA',
    'OFFSET',

    # sRGB -> cylindrical
    'unit_rgb_to_hsl',
    'unit_rgb_to_hwb',
    'rgb_hue',

    # cylindrical -> sRGB
    'hsl_to_unit_rgb',
    'hwb_to_unit_rgb',
    'hue_to_rgb',
]
