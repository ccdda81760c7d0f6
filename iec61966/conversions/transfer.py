"""
sRGB transfer function (IEC 61966-2-1).

The encode branch is tested in the linear domain against
``LINEAR_THRESHOLD`` while the decode branch is tested in the encoded
domain against ``THRESHOLD``. The two are not interchangeable.
"""
from ..utils.num_utils import clamp01

THRESHOLD = 0.04045
LINEAR_THRESHOLD = 0.0031308
LINEAR_SLOPE = 12.92
GAMMA = 2.4
OFFSET = 0.055


def encode(linear: float) -> float:
    """
    Convert a linear-light value to its gamma-encoded sRGB value.

    Args:
        linear: Linear light in [0, 1]

    Returns:
        float: Encoded value in [0, 1]
    """
    if linear <= LINEAR_THRESHOLD:
        return LINEAR_SLOPE * linear
    return (1.0 + OFFSET) * linear ** (1.0 / GAMMA) - OFFSET


def decode(encoded: float) -> float:
    """
    Convert a gamma-encoded sRGB value to linear light.

    The result is clamped to [0, 1] so rounding in the power curve never
    leaves the linear-light domain.

    Args:
        encoded: Encoded sRGB value in [0, 1]

    Returns:
        float: Linear light in [0, 1]
    """
    if encoded <= THRESHOLD:
        linear = encoded / LINEAR_SLOPE
    else:
        linear = ((encoded + OFFSET) / (1.0 + OFFSET)) ** GAMMA
    return clamp01(linear)
