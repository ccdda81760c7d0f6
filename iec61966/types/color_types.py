from __future__ import annotations
from typing import Literal, NamedTuple, Tuple

ColorValue = Tuple[float, float, float]
ColorSpace = Literal["srgb", "linear", "hsl", "hwb"]
COLOR_SPACES = ("srgb", "linear", "hsl", "hwb")
HUE_SPACES = {"hsl", "hwb"}


class HSLValues(NamedTuple):
    h: float
    s: float
    l: float


class HWBValues(NamedTuple):
    h: float
    w: float
    b: float


def is_hue_space(color_space: str) -> bool:
    """
    Check if the given color space is a hue-based space (HSL or HWB).

    Args:
        color_space: Color space string
    Returns:
        True if hue-based, False otherwise
    """
    return color_space.lower() in HUE_SPACES
