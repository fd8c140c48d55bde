"""
interpolation - Keyframe buffering and smooth pose playback

Buffers irregularly-timed pose samples per entity and synthesizes a smooth
pose at a render time that lags the live clock. Positions are blended
linearly, headings along the shortest arc.
"""

from .config import InterpolationConfig, InterpolationMode
from .core import (
    create_buffer,
    push_keyframe,
    push_keyframes,
    compute_interpolated_state,
    buffered_time_span,
)
from .data_models import GeoPosition, Keyframe, InterpolationBuffer
from .exceptions import (
    InterpolationError,
    InvalidKeyframeError,
    InvalidTimestampError,
    BufferConfigurationError,
)
from .utils.blending import lerp, lerp_position, slerp_heading, normalize_heading, interpolate_keyframe

__all__ = [
    # Configuration
    'InterpolationConfig',
    'InterpolationMode',

    # Data models
    'GeoPosition',
    'Keyframe',
    'InterpolationBuffer',

    # Buffer operations
    'create_buffer',
    'push_keyframe',
    'push_keyframes',
    'compute_interpolated_state',
    'buffered_time_span',

    # Primitives
    'lerp',
    'lerp_position',
    'slerp_heading',
    'normalize_heading',
    'interpolate_keyframe',

    # Errors
    'InterpolationError',
    'InvalidKeyframeError',
    'InvalidTimestampError',
    'BufferConfigurationError',
]
