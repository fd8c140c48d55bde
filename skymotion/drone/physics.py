# skymotion/drone/physics.py
"""
Simplified aerodynamic and energy model for multirotor drones.

Every function is pure and parameterized by a DroneSpec, so models for
other vehicle classes can be swapped in by passing a different spec.
"""
from typing import Tuple

import numpy as np

from .constants import DroneConstants
from .data_models import DroneSpec
from .exceptions import PhysicsInputError
from ..validation import require_finite, require_fraction, require_non_negative

RHO_SEA_LEVEL = DroneConstants.PHYSICS['RHO_SEA_LEVEL']
G = DroneConstants.PHYSICS['G_ACCEL_MPS2']
R_AIR = DroneConstants.PHYSICS['GAS_CONSTANT_AIR']
KELVIN_OFFSET = DroneConstants.PHYSICS['KELVIN_OFFSET']
SECONDS_PER_HOUR = DroneConstants.BATTERY['SECONDS_PER_HOUR']

def air_density(altitude_m: float, temp_c: float) -> float:
    """
    Air density (kg/m^3) from the barometric formula:
    rho = rho0 * exp(-g * h / (R * T)), T in Kelvin.
    """
    altitude_m = require_finite('altitude_m', altitude_m, PhysicsInputError)
    temp_c = require_finite('temp_c', temp_c, PhysicsInputError)
    temp_k = temp_c + KELVIN_OFFSET
    if temp_k <= 0:
        raise PhysicsInputError('temp_c', temp_c, "Temperature below absolute zero")
    return float(RHO_SEA_LEVEL * np.exp(-G * altitude_m / (R_AIR * temp_k)))

def drag_force(spec: DroneSpec, airspeed: float, altitude: float, temp_c: float) -> float:
    """
    Aerodynamic drag (N) on the airframe.

    F_drag = 0.5 * rho * Cd * A * v^2
    """
    airspeed = require_non_negative('airspeed', airspeed, PhysicsInputError)
    rho = air_density(altitude, temp_c)
    return 0.5 * rho * spec.drag_coefficient * spec.drag_area * airspeed * airspeed

def power_consumption(spec: DroneSpec, airspeed: float, payload: float,
                      altitude: float, temp_c: float) -> float:
    """
    Electrical power draw (W) for a flight state.

    P_total = P_hover * (mass + payload) / mass + F_drag * airspeed
    """
    payload = require_non_negative('payload', payload, PhysicsInputError)
    airspeed = require_non_negative('airspeed', airspeed, PhysicsInputError)
    mass_ratio = (spec.mass + payload) / spec.mass
    p_hover = spec.hover_power * mass_ratio
    p_drag = drag_force(spec, airspeed, altitude, temp_c) * airspeed
    return p_hover + p_drag

def remaining_flight_time(spec: DroneSpec, energy_level: float, current_power: float) -> float:
    """Seconds of flight left at the current draw. Infinite when nothing is drawn."""
    energy_level = require_fraction('energy_level', energy_level, PhysicsInputError)
    current_power = require_finite('current_power', current_power, PhysicsInputError)
    if current_power <= 0:
        return float('inf')
    remaining_energy_wh = spec.battery_capacity * energy_level
    return (remaining_energy_wh / current_power) * SECONDS_PER_HOUR

def ground_velocity(airspeed: float, heading: float, wind_speed: float,
                    wind_direction: float) -> Tuple[float, float]:
    """
    (east, north) ground velocity in m/s.

    Args:
        airspeed: Speed relative to the air mass (m/s)
        heading: Degrees, 0 = north, clockwise
        wind_speed: m/s
        wind_direction: Direction the wind blows FROM, degrees
    """
    airspeed = require_non_negative('airspeed', airspeed, PhysicsInputError)
    wind_speed = require_non_negative('wind_speed', wind_speed, PhysicsInputError)
    heading_rad = np.radians(require_finite('heading', heading, PhysicsInputError))
    wind_to_rad = np.radians(require_finite('wind_direction', wind_direction, PhysicsInputError) + 180.0)

    east = airspeed * np.sin(heading_rad) + wind_speed * np.sin(wind_to_rad)
    north = airspeed * np.cos(heading_rad) + wind_speed * np.cos(wind_to_rad)
    return float(east), float(north)

def ground_speed(airspeed: float, heading: float, wind_speed: float, wind_direction: float) -> float:
    """Effective ground speed (m/s) with wind; a tailwind adds, a headwind subtracts."""
    east, north = ground_velocity(airspeed, heading, wind_speed, wind_direction)
    return float(np.hypot(east, north))
