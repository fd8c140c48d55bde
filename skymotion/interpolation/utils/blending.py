# skymotion/interpolation/utils/blending.py
"""
Interpolation primitives: LERP for scalars and positions, shortest-arc
blending for headings. Fractions outside [0, 1] are clamped, so none of
these functions ever extrapolate.
"""
from ..angles import normalize_heading
from ..config import InterpolationConfig
from ..data_models import GeoPosition, Keyframe, Timestamp

FULL_CIRCLE = InterpolationConfig.FULL_CIRCLE_DEG
HALF_CIRCLE = InterpolationConfig.HALF_CIRCLE_DEG

def clamp01(t: float) -> float:
    return max(0.0, min(1.0, t))

def lerp(a: float, b: float, t: float) -> float:
    """Linearly interpolates between two scalar values."""
    return a + (b - a) * clamp01(t)

def lerp_position(a: GeoPosition, b: GeoPosition, t: float) -> GeoPosition:
    """Linearly interpolates a 3D geographic position, component by component."""
    ct = clamp01(t)
    return GeoPosition(
        longitude=a.longitude + (b.longitude - a.longitude) * ct,
        latitude=a.latitude + (b.latitude - a.latitude) * ct,
        altitude=a.altitude + (b.altitude - a.altitude) * ct,
    )

def shortest_arc(a: float, b: float) -> float:
    """Signed angular difference from a to b, in [-180, 180)."""
    return ((b - a + FULL_CIRCLE + HALF_CIRCLE) % FULL_CIRCLE) - HALF_CIRCLE

def slerp_heading(a: float, b: float, t: float) -> float:
    """
    Interpolates a heading along the shortest arc, e.g. 350 -> 10 passes
    through 0, never through 180.
    """
    return normalize_heading(a + shortest_arc(a, b) * clamp01(t))

def interpolate_keyframe(prev: Keyframe, next: Keyframe, render_time: Timestamp) -> Keyframe:
    """
    Synthesizes the pose at render_time from a bracketing pair. The result
    carries render_time as its timestamp, not either sample's.
    """
    duration = next.timestamp - prev.timestamp
    # Duplicate timestamps collapse onto prev
    t = (render_time - prev.timestamp) / duration if duration > 0 else 0.0

    return Keyframe(
        position=lerp_position(prev.position, next.position, t),
        heading=slerp_heading(prev.heading, next.heading, t),
        pitch=lerp(prev.pitch, next.pitch, t),
        roll=lerp(prev.roll, next.roll, t),
        timestamp=render_time,
    )
