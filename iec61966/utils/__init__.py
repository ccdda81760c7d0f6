from .num_utils import clamp_to, clamp01, wrap_circular, round_half_up

__all__ = ["clamp_to", "clamp01", "wrap_circular", "round_half_up"]
