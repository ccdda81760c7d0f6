from ..types.color_types import HWBValues
from .to_hsl import unit_rgb_to_hsl


def unit_rgb_to_hwb(r: float, g: float, b: float) -> HWBValues:
    """
    Convert unit sRGB to HWB.

    Hue is shared with HSL; whiteness is the smallest channel and blackness
    the complement of the largest.

    Args:
        r, g, b: Channels in [0, 1]

    Returns:
        HWBValues: (hue [0,360], whiteness [0,1], blackness [0,1]).
        The hue follows ``rgb_hue`` and can be exactly 360.0.
    """
    hue = unit_rgb_to_hsl(r, g, b).h
    return HWBValues(hue, min(r, g, b), 1.0 - max(r, g, b))
