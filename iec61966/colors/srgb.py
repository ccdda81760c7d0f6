from __future__ import annotations
import re
from typing import TYPE_CHECKING, ClassVar, Optional, Self, Tuple

from ..components import Hue, Saturation, Lightness, Whiteness, Blackness, Red, Green, Blue
from ..conversions import encode, hsl_to_unit_rgb, hwb_to_unit_rgb, unit_rgb_to_hsl, unit_rgb_to_hwb
from ..types.bound_type import MAX_8BIT, MAX_NIBBLE
from ..types.color_types import ColorSpace, HSLValues, HWBValues
from ..utils.num_utils import clamp_to, round_half_up
from .color_base import ColorBase

if TYPE_CHECKING:
    from .hsl import HSL
    from .hwb import HWB
    from .linear import LinearSRGB

_HEX_DIGITS = re.compile(r"[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6}")


def _to_8bit(channel: float) -> int:
    return int(clamp_to(round_half_up(channel * MAX_8BIT), 0, MAX_8BIT))


class SRGB(ColorBase):
    """
    A gamma-encoded sRGB color with float channels.

    The raw constructor clamps every channel to [0, 1]. Colors produced
    from HWB keep the mixed channels as computed.

    >>> SRGB.from_8bit(255, 128, 0).hex
    '#FF8000'
    >>> SRGB.from_hex("#f80").r255
    255
    """
    __slots__ = ()

    mode:          ClassVar[ColorSpace] = "srgb"
    channel_names: ClassVar[Tuple[str, str, str]] = ("r", "g", "b")

    BLACK:   ClassVar[SRGB]
    WHITE:   ClassVar[SRGB]
    RED:     ClassVar[SRGB]
    GREEN:   ClassVar[SRGB]
    BLUE:    ClassVar[SRGB]
    CYAN:    ClassVar[SRGB]
    MAGENTA: ClassVar[SRGB]
    YELLOW:  ClassVar[SRGB]

    def __init__(self, r: float, g: float, b: float) -> None:
        super().__init__((
            Red.clamping(r).value,
            Green.clamping(g).value,
            Blue.clamping(b).value,
        ))

    # ---- Alternate constructors ----
    @classmethod
    def from_channels(cls, red: Red, green: Green, blue: Blue) -> Self:
        cls._require(red, Red, "red")
        cls._require(green, Green, "green")
        cls._require(blue, Blue, "blue")
        return cls._from_value((red.value, green.value, blue.value))

    @classmethod
    def gray(cls, value: float) -> Self:
        return cls(value, value, value)

    @classmethod
    def from_8bit(cls, r255: int, g255: int, b255: int) -> Self:
        """Build from 8-bit channels.

        Each channel is divided by 255 and then clamped to [0, 1], so
        out-of-range integers such as 300 or -20 saturate instead of being
        stored as given.
        """
        return cls(r255 / MAX_8BIT, g255 / MAX_8BIT, b255 / MAX_8BIT)

    @classmethod
    def from_hex(cls, text: str) -> Optional[Self]:
        """
        Parse ``#RGB`` or ``#RRGGBB`` (the ``#`` is optional).

        Returns None for anything that is not exactly 3 or 6 hex digits
        after trimming whitespace.
        """
        digits = text.strip()
        if digits.startswith("#"):
            digits = digits[1:]
        if _HEX_DIGITS.fullmatch(digits) is None:
            return None

        value = int(digits, 16)
        if len(digits) == 3:
            return cls(
                ((value >> 8) & 0xF) / MAX_NIBBLE,
                ((value >> 4) & 0xF) / MAX_NIBBLE,
                (value & 0xF) / MAX_NIBBLE,
            )
        return cls(
            ((value >> 16) & 0xFF) / MAX_8BIT,
            ((value >> 8) & 0xFF) / MAX_8BIT,
            (value & 0xFF) / MAX_8BIT,
        )

    @classmethod
    def from_linear(cls, linear: LinearSRGB) -> Self:
        return cls(encode(linear.r.value), encode(linear.g.value), encode(linear.b.value))

    @classmethod
    def from_hsl(cls, hue: Hue, saturation: Saturation, lightness: Lightness) -> Self:
        cls._require(hue, Hue, "hue")
        cls._require(saturation, Saturation, "saturation")
        cls._require(lightness, Lightness, "lightness")
        return cls(*hsl_to_unit_rgb(hue.degrees, saturation.value, lightness.value))

    @classmethod
    def from_hsl_values(cls, h: float, s: float, l: float) -> Self:
        return cls.from_hsl(Hue.normalizing(h), Saturation.clamping(s), Lightness.clamping(l))

    @classmethod
    def from_hwb(cls, hue: Hue, whiteness: Whiteness, blackness: Blackness) -> Self:
        cls._require(hue, Hue, "hue")
        cls._require(whiteness, Whiteness, "whiteness")
        cls._require(blackness, Blackness, "blackness")
        return cls._from_value(hwb_to_unit_rgb(hue.degrees, whiteness.value, blackness.value))

    @classmethod
    def from_hwb_values(cls, hue: float, whiteness: float, blackness: float) -> Self:
        return cls.from_hwb(
            Hue.normalizing(hue),
            Whiteness.clamping(whiteness),
            Blackness.clamping(blackness),
        )

    @classmethod
    def from_srgb(cls, srgb: SRGB) -> SRGB:
        return srgb

    # ---- Channels ----
    @property
    def r(self) -> float:
        return self._value[0]

    @property
    def g(self) -> float:
        return self._value[1]

    @property
    def b(self) -> float:
        return self._value[2]

    @property
    def r255(self) -> int:
        return _to_8bit(self.r)

    @property
    def g255(self) -> int:
        return _to_8bit(self.g)

    @property
    def b255(self) -> int:
        return _to_8bit(self.b)

    @property
    def hex(self) -> str:
        return f"#{self.r255:02X}{self.g255:02X}{self.b255:02X}"

    # ---- Conversions ----
    @property
    def srgb(self) -> SRGB:
        return self

    @property
    def linear(self) -> LinearSRGB:
        from .linear import LinearSRGB
        return LinearSRGB(
            Red.clamping(self.r).linear,
            Green.clamping(self.g).linear,
            Blue.clamping(self.b).linear,
        )

    @property
    def hsl_values(self) -> HSLValues:
        return unit_rgb_to_hsl(self.r, self.g, self.b)

    @property
    def hsl(self) -> HSL:
        from .hsl import HSL
        return HSL.from_values(*self.hsl_values)

    @property
    def hwb_values(self) -> HWBValues:
        return unit_rgb_to_hwb(self.r, self.g, self.b)

    @property
    def hwb(self) -> HWB:
        from .hwb import HWB
        return HWB.from_values(*self.hwb_values)


SRGB.BLACK = SRGB(0, 0, 0)
SRGB.WHITE = SRGB(1, 1, 1)
SRGB.RED = SRGB(1, 0, 0)
SRGB.GREEN = SRGB(0, 1, 0)
SRGB.BLUE = SRGB(0, 0, 1)
SRGB.CYAN = SRGB(0, 1, 1)
SRGB.MAGENTA = SRGB(1, 0, 1)
SRGB.YELLOW = SRGB(1, 1, 0)
