# skymotion/interpolation/angles.py
from .config import InterpolationConfig

FULL_CIRCLE = InterpolationConfig.FULL_CIRCLE_DEG

def normalize_heading(heading_deg: float) -> float:
    """Maps any finite angle into [0, 360)."""
    heading = heading_deg % FULL_CIRCLE
    # Tiny negative inputs round up to exactly 360.0
    return 0.0 if heading >= FULL_CIRCLE else heading
