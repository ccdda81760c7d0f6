import math

from ..types.bound_type import HUE_360
from ..types.color_types import HSLValues


def rgb_hue(r: float, g: float, b: float, max_c: float, delta: float) -> float:
    """
    Hue in degrees for a chromatic color (``delta > 0``).

    The branch is picked by the dominant channel, red first, then green,
    with blue as the fallback.
    """
    if max_c == r:
        h = math.fmod((g - b) / delta, 6.0)
    elif max_c == g:
        h = (b - r) / delta + 2.0
    else:
        h = (r - g) / delta + 4.0

    h *= 60.0
    if h < 0:
        h += HUE_360
    return h


def unit_rgb_to_hsl(r: float, g: float, b: float) -> HSLValues:
    """
    Convert unit sRGB to HSL.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        HSLValues: (hue [0,360], saturation [0,1], lightness [0,1]).
        A red-dominant color whose hue lands a hair below zero wraps to
        exactly 360.0; ``Hue.normalizing`` folds that back to 0.
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    # Achromatic
    if delta == 0:
        return HSLValues(0.0, 0.0, lightness)

    if lightness > 0.5:
        saturation = delta / (2.0 - max_c - min_c)
    else:
        saturation = delta / (max_c + min_c)

    return HSLValues(rgb_hue(r, g, b, max_c, delta), saturation, lightness)
