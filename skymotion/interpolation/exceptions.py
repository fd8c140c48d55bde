"""skymotion/interpolation/exceptions.py"""
from ..exceptions import SkyMotionError, ValidationError

class InterpolationError(SkyMotionError):
    """Base exception for keyframe buffering and interpolation errors."""
    pass

class InvalidKeyframeError(InterpolationError, ValidationError):
    """Raised when a keyframe or one of its fields is malformed."""
    pass

class InvalidTimestampError(InvalidKeyframeError):
    """Raised for non-finite keyframe or clock timestamps."""
    pass

class BufferConfigurationError(InterpolationError, ValidationError):
    """Raised for negative render delays or buffer sizes."""
    pass
