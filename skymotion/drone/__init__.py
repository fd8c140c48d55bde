"""
drone - Physics and safety model for multirotor drones

Computes air density, drag, power draw, endurance and wind-adjusted
ground speed for a DroneSpec, and composes them into a SafetyAssessment.
"""

from .constants import DroneConstants
from .data_models import (
    DroneSpec,
    DEFAULT_DRONE_SPEC,
    EntityType,
    EntityState,
    WeatherCondition,
    EnvironmentParams,
    DEFAULT_ENVIRONMENT,
    SafetyAssessment,
)
from .exceptions import DroneModelError, PhysicsInputError, SpecConfigurationError
from .physics import (
    air_density,
    drag_force,
    power_consumption,
    remaining_flight_time,
    ground_velocity,
    ground_speed,
)
from .safety import SafetyAssessor, SAFETY_ASSESSOR, assess_safety
from .spec_catalog import DroneSpecCatalog, load_drone_specs

__all__ = [
    # Configuration
    'DroneConstants',
    'DroneSpec',
    'DEFAULT_DRONE_SPEC',
    'DroneSpecCatalog',
    'load_drone_specs',

    # State
    'EntityType',
    'EntityState',
    'WeatherCondition',
    'EnvironmentParams',
    'DEFAULT_ENVIRONMENT',

    # Physics
    'air_density',
    'drag_force',
    'power_consumption',
    'remaining_flight_time',
    'ground_velocity',
    'ground_speed',

    # Safety
    'SafetyAssessor',
    'SafetyAssessment',
    'SAFETY_ASSESSOR',
    'assess_safety',

    # Errors
    'DroneModelError',
    'PhysicsInputError',
    'SpecConfigurationError',
]
