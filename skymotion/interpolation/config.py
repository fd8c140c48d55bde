# skymotion/interpolation/config.py
from enum import Enum

class InterpolationMode(str, Enum):
    """How a host intends to play back an entity's buffered samples."""
    REALTIME = "realtime"
    SMOOTH = "smooth"
    PREDICTIVE = "predictive"

class InterpolationConfig:
    """Configuration for keyframe buffering and playback."""

    # Playback lags the live clock so a bracketing pair is usually buffered
    DEFAULT_RENDER_DELAY_MS = 1000
    MAX_BUFFER_SIZE = 60
    DEFAULT_MODE = InterpolationMode.SMOOTH

    # Degrees in a full heading circle
    FULL_CIRCLE_DEG = 360.0
    HALF_CIRCLE_DEG = 180.0
