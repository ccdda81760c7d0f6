from .bound_type import HUE_360
from .color_types import ColorSpace, ColorValue, HSLValues, HWBValues, COLOR_SPACES

__all__ = [
    "HUE_360",
    "ColorSpace",
    "ColorValue",
    "HSLValues",
    "HWBValues",
    "COLOR_SPACES",
]
