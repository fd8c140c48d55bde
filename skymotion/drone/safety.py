#!/usr/bin/env python3
"""
Drone Safety Assessment
Composes the physics model and the environment into a risk verdict.
The assessor only reports risks; the go/no-go decision belongs to the host.
"""
import logging
from typing import List

from .constants import DroneConstants
from .data_models import (
    DroneSpec,
    EntityState,
    EntityType,
    EnvironmentParams,
    SafetyAssessment,
    WeatherCondition,
)
from .physics import power_consumption, remaining_flight_time

logger = logging.getLogger(__name__)

class SafetyAssessor:
    """Stateless operating-envelope check for one entity at one instant"""

    # Weather that always produces a risk entry, in report wording
    WEATHER_RISKS = {
        WeatherCondition.TYPHOON: "Typhoon conditions - flight not recommended",
        WeatherCondition.STORM: "Storm conditions - elevated risk",
    }

    def __init__(self):
        self.critical_battery_min = DroneConstants.BATTERY['CRITICAL_MINUTES']
        self.low_battery_min = DroneConstants.BATTERY['LOW_MINUTES']
        self.max_wind_factor = DroneConstants.WIND['MAX_FACTOR']

    def assess(self, spec: DroneSpec, entity: EntityState, env: EnvironmentParams) -> SafetyAssessment:
        """
        Runs every check unconditionally; risks are reported in the order
        wind, weather, battery.
        """
        if entity.entity_type != EntityType.DRONE:
            logger.debug(f"Assessing non-drone entity {entity.id} ({entity.entity_type.value}) against a drone spec")

        risks: List[str] = []

        wind_factor = env.wind_speed / spec.max_wind_speed
        risks.extend(self._check_wind(spec, env, wind_factor))
        risks.extend(self._check_weather(env))

        battery_minutes = self._battery_minutes(spec, entity, env)
        risks.extend(self._check_battery(battery_minutes))

        assessment = SafetyAssessment(
            safe=not risks,
            risks=risks,
            battery_minutes=battery_minutes,
            wind_factor=wind_factor,
        )
        if assessment.safe:
            logger.debug(f"{entity.id}: safe, {battery_minutes:.1f} min battery, wind factor {wind_factor:.2f}")
        else:
            logger.warning(f"{entity.id}: unsafe - {'; '.join(risks)}")
        return assessment

    def _check_wind(self, spec: DroneSpec, env: EnvironmentParams, wind_factor: float) -> List[str]:
        if wind_factor > self.max_wind_factor:
            return [f"Wind speed {env.wind_speed}m/s exceeds max {spec.max_wind_speed}m/s"]
        return []

    def _check_weather(self, env: EnvironmentParams) -> List[str]:
        risk = self.WEATHER_RISKS.get(env.weather)
        return [risk] if risk else []

    def _battery_minutes(self, spec: DroneSpec, entity: EntityState, env: EnvironmentParams) -> float:
        # Payload is ignored so the estimate errs on the side of caution
        power = power_consumption(
            spec,
            entity.speed,
            0.0,
            entity.position.altitude,
            env.temperature,
        )
        return remaining_flight_time(spec, entity.energy_level, power) / 60.0

    def _check_battery(self, battery_minutes: float) -> List[str]:
        if battery_minutes < self.critical_battery_min:
            return [f"Critical battery: {battery_minutes:.1f} minutes remaining"]
        if battery_minutes < self.low_battery_min:
            return [f"Low battery: {battery_minutes:.1f} minutes remaining"]
        return []

# --- Public Interface ---
SAFETY_ASSESSOR = SafetyAssessor()

def assess_safety(spec: DroneSpec, entity: EntityState, env: EnvironmentParams) -> SafetyAssessment:
    """Public-facing function for a single safety evaluation."""
    return SAFETY_ASSESSOR.assess(spec, entity, env)
