# skymotion/drone/exceptions.py
"""
Drone model exceptions
Errors raised for malformed physics inputs and vehicle configuration.
Risk conditions (wind, weather, battery) are never raised; they are
reported in SafetyAssessment.risks.
"""
from ..exceptions import SkyMotionError, ValidationError

class DroneModelError(SkyMotionError):
    """Base class for all drone model errors"""
    pass

class PhysicsInputError(DroneModelError, ValidationError):
    """Physically meaningless input (e.g. temperature below absolute zero)"""
    pass

class SpecConfigurationError(DroneModelError, ValidationError):
    """Invalid drone specification or catalog file"""
    def __init__(self, field, value=None, message="Invalid drone specification"):
        super().__init__(field, value, message)
