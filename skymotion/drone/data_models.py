# skymotion/drone/data_models.py
"""
Defines the vehicle configuration, the instantaneous entity state and the
environment consumed by the physics and safety models, plus the verdict
they produce.
"""
from dataclasses import dataclass, field, asdict, fields
from enum import Enum
from typing import Any, Dict, List, Mapping

from ..interpolation.data_models import GeoPosition
from ..validation import require_finite, require_non_negative, require_positive, require_fraction
from .constants import DroneConstants
from .exceptions import PhysicsInputError, SpecConfigurationError

class EntityType(str, Enum):
    DRONE = "drone"
    VEHICLE = "vehicle"
    VESSEL = "vessel"
    PERSON = "person"

class WeatherCondition(str, Enum):
    CLEAR = "clear"
    RAIN = "rain"
    STORM = "storm"
    TYPHOON = "typhoon"
    SNOW = "snow"

# Keys used by vehicle configuration files written for the map client
_CAMEL_CASE_KEYS = {
    'maxPayload': 'max_payload',
    'dragArea': 'drag_area',
    'dragCoefficient': 'drag_coefficient',
    'batteryCapacity': 'battery_capacity',
    'hoverPower': 'hover_power',
    'maxAirspeed': 'max_airspeed',
    'maxWindSpeed': 'max_wind_speed',
}

@dataclass(frozen=True)
class DroneSpec:
    """Read-only configuration of a vehicle class, shared by all its instances."""
    mass: float              # kg, empty
    max_payload: float       # kg
    drag_area: float         # m^2, frontal
    drag_coefficient: float  # dimensionless
    battery_capacity: float  # Wh
    hover_power: float       # W
    max_airspeed: float      # m/s
    max_wind_speed: float    # m/s, safe operating limit

    def __post_init__(self):
        require_non_negative('max_payload', self.max_payload, SpecConfigurationError)
        for name in ('mass', 'drag_area', 'drag_coefficient', 'battery_capacity',
                     'hover_power', 'max_airspeed', 'max_wind_speed'):
            require_positive(name, getattr(self, name), SpecConfigurationError)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'DroneSpec':
        """
        Builds a spec from snake_case or camelCase keys. Missing fields fall
        back to DroneConstants.DEFAULT_SPEC; unknown keys are rejected.
        """
        known = {f.name for f in fields(cls)}
        values = dict(DroneConstants.DEFAULT_SPEC)
        for key, value in data.items():
            name = _CAMEL_CASE_KEYS.get(key, key)
            if name not in known:
                raise SpecConfigurationError(key, value, "Unknown drone specification field")
            values[name] = value
        return cls(**values)

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

DEFAULT_DRONE_SPEC = DroneSpec(**DroneConstants.DEFAULT_SPEC)

@dataclass(frozen=True)
class EntityState:
    """Instantaneous kinematic state reported by the simulation driver."""
    id: str
    entity_type: EntityType
    position: GeoPosition
    heading: float        # Degrees, 0 = north, clockwise
    pitch: float          # Degrees
    roll: float           # Degrees
    speed: float          # m/s
    energy_level: float   # Battery or fuel, 0.0 - 1.0
    timestamp: float      # ms since epoch
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.entity_type, EntityType):
            try:
                object.__setattr__(self, 'entity_type', EntityType(self.entity_type))
            except ValueError as e:
                raise PhysicsInputError('entity_type', self.entity_type, "Unknown entity type") from e
        if not isinstance(self.position, GeoPosition):
            raise PhysicsInputError('position', self.position, "Expected a GeoPosition")
        for name in ('heading', 'pitch', 'roll', 'timestamp'):
            require_finite(name, getattr(self, name), PhysicsInputError)
        require_non_negative('speed', self.speed, PhysicsInputError)
        require_fraction('energy_level', self.energy_level, PhysicsInputError)

@dataclass(frozen=True)
class EnvironmentParams:
    """Process-wide environment; read fresh on every assessment."""
    wind_speed: float = DroneConstants.DEFAULT_ENVIRONMENT['wind_speed']          # m/s
    wind_direction: float = DroneConstants.DEFAULT_ENVIRONMENT['wind_direction']  # Degrees, blowing FROM
    weather: WeatherCondition = WeatherCondition(DroneConstants.DEFAULT_ENVIRONMENT['weather'])
    temperature: float = DroneConstants.DEFAULT_ENVIRONMENT['temperature']        # Celsius
    time_scale: float = DroneConstants.DEFAULT_ENVIRONMENT['time_scale']          # 1.0 = real-time

    def __post_init__(self):
        if not isinstance(self.weather, WeatherCondition):
            try:
                object.__setattr__(self, 'weather', WeatherCondition(self.weather))
            except ValueError as e:
                raise PhysicsInputError('weather', self.weather, "Unknown weather condition") from e
        require_non_negative('wind_speed', self.wind_speed, PhysicsInputError)
        require_finite('wind_direction', self.wind_direction, PhysicsInputError)
        require_positive('time_scale', self.time_scale, PhysicsInputError)
        temperature = require_finite('temperature', self.temperature, PhysicsInputError)
        if temperature + DroneConstants.PHYSICS['KELVIN_OFFSET'] <= 0:
            raise PhysicsInputError('temperature', temperature, "Temperature below absolute zero")

DEFAULT_ENVIRONMENT = EnvironmentParams()

@dataclass
class SafetyAssessment:
    """Verdict for one entity at one instant. Recomputed on every call."""
    safe: bool
    risks: List[str] = field(default_factory=list)
    battery_minutes: float = float('inf')
    wind_factor: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
