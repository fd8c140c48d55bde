# skymotion/exceptions.py
"""
Base error types shared by every skymotion subpackage.
"""

class SkyMotionError(Exception):
    """Base class for all skymotion errors"""
    pass

class ValidationError(SkyMotionError, ValueError):
    """Malformed input rejected at construction or entry"""
    def __init__(self, field, value, message="Invalid value"):
        self.field = field
        self.value = value
        super().__init__(f"{message}: {field}={value!r}")
