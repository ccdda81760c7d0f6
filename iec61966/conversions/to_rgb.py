from ..types.bound_type import HUE_360
from ..types.color_types import ColorValue

ONE_THIRD = 1.0 / 3.0


def hue_to_rgb(p: float, q: float, t: float) -> float:
    """Channel value for phase ``t`` between the HSL bounds ``p`` and ``q``."""
    if t < 0:
        t += 1.0
    if t > 1:
        t -= 1.0

    if t < 1.0 / 6.0:
        return p + (q - p) * 6.0 * t
    if t < 1.0 / 2.0:
        return q
    if t < 2.0 / 3.0:
        return p + (q - p) * (2.0 / 3.0 - t) * 6.0
    return p


def hsl_to_unit_rgb(h: float, s: float, l: float) -> ColorValue:
    """
    Convert HSL to unit sRGB.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    if s == 0:
        return (l, l, l)

    q = l * (1.0 + s) if l < 0.5 else l + s - l * s
    p = 2.0 * l - q

    t = h / HUE_360
    return (
        hue_to_rgb(p, q, t + ONE_THIRD),
        hue_to_rgb(p, q, t),
        hue_to_rgb(p, q, t - ONE_THIRD),
    )


def hwb_to_unit_rgb(h: float, w: float, b: float) -> ColorValue:
    """
    Convert HWB to unit sRGB.

    When ``w + b >= 1`` both are scaled down to sum to 1, which yields a
    gray. Otherwise the fully saturated hue is scaled by ``1 - w - b`` and
    lifted by ``w``.

    Args:
        h: Hue in degrees [0, 360)
        w: Whiteness in [0, 1]
        b: Blackness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b), not clamped
    """
    total = w + b
    if total >= 1:
        w = w / total
        b = b / total

    base_r, base_g, base_b = hsl_to_unit_rgb(h, 1.0, 0.5)

    scale = 1.0 - w - b
    return (
        base_r * scale + w,
        base_g * scale + w,
        base_b * scale + w,
    )
