from __future__ import annotations
from .color_base import ColorBase
from .srgb import SRGB
from .linear import LinearSRGB
from .hsl import HSL
from .hwb import HWB
from ..types.color_types import ColorSpace, COLOR_SPACES

unified_space_to_class: dict[str, type[ColorBase]] = {
    cls.mode: cls for cls in (SRGB, LinearSRGB, HSL, HWB)
}


def get_color_class(color_space: str) -> type[ColorBase]:
    color_class = unified_space_to_class.get(color_space.lower())
    if color_class is None:
        raise ValueError(f"Unsupported color space: {color_space} (expected one of {', '.join(COLOR_SPACES)})")
    return color_class


def color_convert(self: ColorBase, to_space: ColorSpace | None = None) -> ColorBase:
    """
    Convert this color to another color model.

    Every conversion goes through sRGB, so ``hsl.convert("hwb")`` equals
    ``HWB.from_srgb(hsl.srgb)``.

    Args:
        to_space: Target model ("srgb", "linear", "hsl", "hwb"). Defaults to the current one.

    Returns:
        New ColorBase instance in the target model (``self`` when unchanged)
    """
    cls = get_color_class(to_space or self.mode)
    if isinstance(self, cls):
        return self
    return cls.from_srgb(self.srgb)  # type: ignore[attr-defined]


ColorBase.convert = color_convert
