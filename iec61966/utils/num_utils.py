import math
from boundednumbers.functions import clamp


def clamp_to(value: float, lower: float, upper: float) -> float:
    """Saturate ``value`` to ``[lower, upper]`` and return a plain float."""
    return float(clamp(value, lower, upper))


def clamp01(value: float) -> float:
    return clamp_to(value, 0.0, 1.0)


def wrap_circular(value: float, period: float) -> float:
    """
    Wrap ``value`` into ``[0, period)``.

    ``math.fmod`` is applied twice instead of ``%``: Python's ``%`` maps tiny
    negatives such as ``-1e-20`` onto ``period`` itself.
    """
    return math.fmod(math.fmod(value, period) + period, period)


def round_half_up(value: float) -> int:
    """Round to nearest, ties away from zero."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)
