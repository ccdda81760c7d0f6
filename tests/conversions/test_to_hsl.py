import pytest

from iec61966.conversions import unit_rgb_to_hsl, unit_rgb_to_hwb, rgb_hue
from ..samples import samples_rgb_hsl


def test_unit_rgb_to_hsl():
    for (r, g, b), (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        h_out, s_out, l_out = unit_rgb_to_hsl(r, g, b)

        assert h_out == pytest.approx(h_exp, abs=1e-9)
        assert s_out == pytest.approx(s_exp, abs=1e-9)
        assert l_out == pytest.approx(l_exp, abs=1e-9)


def test_achromatic_has_zero_saturation():
    for k in (0.0, 0.1, 0.5, 0.73, 1.0):
        hsl = unit_rgb_to_hsl(k, k, k)
        assert hsl.h == 0.0
        assert hsl.s == 0.0
        assert hsl.l == k


def test_named_fields():
    hsl = unit_rgb_to_hsl(0.8, 0.4, 0.2)
    assert hsl.h == pytest.approx(20.0)
    assert hsl.s == pytest.approx(0.6)
    assert hsl.l == pytest.approx(0.5)


def test_red_branch_wraps_negative_hue():
    # red dominant, blue above green: hue in (300, 360)
    h, _, _ = unit_rgb_to_hsl(1.0, 0.0, 0.5)
    assert h == pytest.approx(330.0)


def test_tiny_negative_red_hue_lands_on_360():
    assert unit_rgb_to_hsl(1.0, 0.0, 1e-17).h == 360.0
    assert unit_rgb_to_hwb(1.0, 0.0, 1e-17).h == 360.0


def test_light_colors_use_upper_saturation_formula():
    h, s, l = unit_rgb_to_hsl(1.0, 0.8, 0.6)
    assert l == pytest.approx(0.8)
    assert s == pytest.approx(0.4 / (2.0 - 1.0 - 0.6))
    assert h == pytest.approx(30.0)


def test_rgb_hue_dominant_channel_order():
    # red wins ties with green
    assert rgb_hue(1.0, 1.0, 0.0, 1.0, 1.0) == pytest.approx(60.0)
    # green wins ties with blue
    assert rgb_hue(0.0, 1.0, 1.0, 1.0, 1.0) == pytest.approx(180.0)
