from .blending import (
    clamp01,
    lerp,
    lerp_position,
    normalize_heading,
    shortest_arc,
    slerp_heading,
    interpolate_keyframe,
)

__all__ = [
    "clamp01",
    "lerp",
    "lerp_position",
    "normalize_heading",
    "shortest_arc",
    "slerp_heading",
    "interpolate_keyframe",
]
