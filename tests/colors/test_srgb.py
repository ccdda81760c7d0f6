import math

import pytest

from iec61966.colors import SRGB, LinearSRGB
from iec61966.components import Red, Green, Blue, Hue, Saturation, Lightness, RedRangeError, BlueRangeError
from ..samples import samples_hex, invalid_hex


def test_create_from_rgb_components():
    color = SRGB(1, 0.5, 0.25)
    assert color.r == 1
    assert color.g == 0.5
    assert color.b == 0.25
    assert color.value == (1.0, 0.5, 0.25)


def test_raw_constructor_clamps():
    color = SRGB(1.5, -0.2, 0.5)
    assert color.value == (1.0, 0.0, 0.5)
    assert SRGB(math.inf, -math.inf, 0).value == (1.0, 0.0, 0.0)


def test_raw_constructor_rejects_nan():
    with pytest.raises(RedRangeError):
        SRGB(math.nan, 0, 0)
    with pytest.raises(BlueRangeError):
        SRGB(0, 0, math.nan)


def test_from_channels():
    color = SRGB.from_channels(Red(0.1), Green(0.2), Blue(0.3))
    assert color.value == (0.1, 0.2, 0.3)
    with pytest.raises(TypeError):
        SRGB.from_channels(0.1, Green(0.2), Blue(0.3))


def test_gray():
    gray = SRGB.gray(0.5)
    assert gray.r == 0.5
    assert gray.g == 0.5
    assert gray.b == 0.5
    assert gray == SRGB(0.5, 0.5, 0.5)


def test_gray_clamps():
    assert SRGB.gray(1.4) == SRGB.WHITE
    assert SRGB.gray(-0.1) == SRGB.BLACK


def test_8bit_components():
    color = SRGB.from_8bit(255, 128, 0)
    assert color.r255 == 255
    assert color.g255 == 128
    assert color.b255 == 0
    assert color.g == 128 / 255


def test_8bit_rounding_and_clamping():
    assert SRGB(0.5, 0.5, 0.5).r255 == 128
    assert SRGB(0.002, 0.0, 0.0).r255 == 1
    assert SRGB(0.001, 0.0, 0.0).r255 == 0
    assert SRGB.from_8bit(300, -20, 17).value == (1.0, 0.0, 17 / 255)


def test_hex_string_output():
    assert SRGB.from_8bit(255, 128, 0).hex == "#FF8000"
    assert SRGB.BLACK.hex == "#000000"
    assert SRGB.WHITE.hex == "#FFFFFF"
    assert SRGB.from_hex("#abc").hex == "#AABBCC"


def test_hex_string_parsing():
    for text, (r255, g255, b255) in samples_hex.items():
        color = SRGB.from_hex(text)
        assert color is not None, text
        assert (color.r255, color.g255, color.b255) == (r255, g255, b255)


def test_hex_short_form_divides_by_fifteen():
    color = SRGB.from_hex("#F80")
    assert color.r == 1.0
    assert color.g == 8 / 15
    assert color.b == 0.0


@pytest.mark.parametrize("text", invalid_hex)
def test_hex_invalid_returns_none(text):
    assert SRGB.from_hex(text) is None


def test_common_colors():
    assert SRGB.BLACK == SRGB(0, 0, 0)
    assert SRGB.WHITE == SRGB(1, 1, 1)
    assert SRGB.RED == SRGB(1, 0, 0)
    assert SRGB.GREEN == SRGB(0, 1, 0)
    assert SRGB.BLUE == SRGB(0, 0, 1)
    assert SRGB.CYAN == SRGB(0, 1, 1)
    assert SRGB.MAGENTA == SRGB(1, 0, 1)
    assert SRGB.YELLOW == SRGB(1, 1, 0)


def test_hsl_to_rgb_primaries():
    red = SRGB.from_hsl_values(0, 1, 0.5)
    assert (red.r255, red.g255, red.b255) == (255, 0, 0)

    green = SRGB.from_hsl_values(120, 1, 0.5)
    assert (green.r255, green.g255, green.b255) == (0, 255, 0)

    blue = SRGB.from_hsl(Hue(240), Saturation(1), Lightness(0.5))
    assert (blue.r255, blue.g255, blue.b255) == (0, 0, 255)


def test_from_hsl_values_normalizes_and_clamps():
    assert SRGB.from_hsl_values(360 + 120, 2.0, 0.5) == SRGB.from_hsl_values(120, 1.0, 0.5)
    assert SRGB.from_hsl_values(10, 0.5, -1) == SRGB.BLACK


def test_from_hsl_requires_components():
    with pytest.raises(TypeError):
        SRGB.from_hsl(0.0, Saturation(1), Lightness(0.5))


def test_hsl_round_trip():
    original = SRGB(0.8, 0.4, 0.2)
    hsl = original.hsl
    converted = hsl.srgb

    assert abs(original.r - converted.r) < 0.01
    assert abs(original.g - converted.g) < 0.01
    assert abs(original.b - converted.b) < 0.01


def test_hsl_values_of_achromatic():
    for k in (0.0, 0.25, 0.5, 1.0):
        values = SRGB.gray(k).hsl_values
        assert values.s == 0.0
        assert values.l == k
        assert SRGB.gray(k).hsl.saturation == Saturation(0)


def test_hwb_values():
    h, w, b = SRGB(0.8, 0.4, 0.2).hwb_values
    assert h == pytest.approx(20.0)
    assert w == pytest.approx(0.2)
    assert b == pytest.approx(0.2)


def test_from_hwb_values_gray_point():
    color = SRGB.from_hwb_values(75, 0.7, 0.6)
    assert color.r == pytest.approx(color.g, abs=1e-12)
    assert color.g == pytest.approx(color.b, abs=1e-12)


def test_linear_round_trip():
    color = SRGB(0.8, 0.4, 0.02)
    linear = color.linear
    assert isinstance(linear, LinearSRGB)
    assert linear.b.value == pytest.approx(0.02 / 12.92)
    back = SRGB.from_linear(linear)
    assert back.value == pytest.approx(color.value, abs=1e-9)


def test_immutable():
    color = SRGB(0.1, 0.2, 0.3)
    with pytest.raises(AttributeError):
        color._value = (0, 0, 0)
    with pytest.raises(AttributeError):
        color.r = 0.5
    assert color.value == (0.1, 0.2, 0.3)


def test_hash_and_repr():
    assert hash(SRGB(0.1, 0.2, 0.3)) == hash(SRGB.from_channels(Red(0.1), Green(0.2), Blue(0.3)))
    assert repr(SRGB(1, 0.5, 0)) == "SRGB(r=1.0, g=0.5, b=0.0)"
