# skymotion/interpolation/data_models.py
"""
Defines the value types of the interpolation engine. All of them are
frozen: buffer operations return new instances instead of mutating, so a
published buffer can be read by a renderer while a producer builds the
next one.
"""
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from ..validation import require_finite, require_non_negative
from .angles import normalize_heading
from .config import InterpolationConfig
from .exceptions import InvalidKeyframeError, InvalidTimestampError, BufferConfigurationError

Timestamp = Union[int, float]

@dataclass(frozen=True)
class GeoPosition:
    """WGS84 position: degrees of longitude/latitude and meters of altitude."""
    longitude: float
    latitude: float
    altitude: float = 0.0

    def __post_init__(self):
        # Range is deliberately not checked, only finiteness
        for name in ('longitude', 'latitude', 'altitude'):
            require_finite(name, getattr(self, name), InvalidKeyframeError)

@dataclass(frozen=True)
class Keyframe:
    """A timestamped pose sample used as an interpolation anchor."""
    position: GeoPosition
    heading: float      # Degrees, normalized into [0, 360)
    pitch: float        # Degrees, positive = nose up
    roll: float         # Degrees, positive = right bank
    timestamp: Timestamp  # Milliseconds on the producer's clock

    def __post_init__(self):
        if not isinstance(self.position, GeoPosition):
            raise InvalidKeyframeError('position', self.position, "Expected a GeoPosition")
        for name in ('heading', 'pitch', 'roll'):
            require_finite(name, getattr(self, name), InvalidKeyframeError)
        object.__setattr__(self, 'heading', normalize_heading(self.heading))
        require_finite('timestamp', self.timestamp, InvalidTimestampError)

@dataclass(frozen=True)
class InterpolationBuffer:
    """
    Per-entity keyframe history plus the last computed pose.
    Keyframes are kept ascending by timestamp and bounded in length.
    """
    entity_id: str
    keyframes: Tuple[Keyframe, ...] = field(default_factory=tuple)
    current: Optional[Keyframe] = None
    render_delay: Timestamp = InterpolationConfig.DEFAULT_RENDER_DELAY_MS

    def __post_init__(self):
        require_non_negative('render_delay', self.render_delay, BufferConfigurationError)
        if not isinstance(self.keyframes, tuple):
            object.__setattr__(self, 'keyframes', tuple(self.keyframes))

    @property
    def is_empty(self) -> bool:
        return not self.keyframes
