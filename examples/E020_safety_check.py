#!/usr/bin/env python3
# skymotion/examples/E020_safety_check.py
"""
Evaluates one drone against each weather condition and a few battery
levels, using the vehicle catalog in drones.json.
"""
import logging
from pathlib import Path

from skymotion.drone import (
    EntityState,
    EnvironmentParams,
    WeatherCondition,
    assess_safety,
    ground_speed,
    load_drone_specs,
)
from skymotion.interpolation import GeoPosition

CATALOG_PATH = Path(__file__).parent / "drones.json"

def main():
    catalog = load_drone_specs(CATALOG_PATH)
    spec = catalog.get("survey-quad")

    for weather in WeatherCondition:
        for energy in (0.8, 0.3, 0.05):
            env = EnvironmentParams(wind_speed=8.0, wind_direction=270.0, weather=weather, temperature=12.0)
            state = EntityState(
                id='survey-1', entity_type='drone',
                position=GeoPosition(longitude=139.69, latitude=35.68, altitude=150.0),
                heading=90.0, pitch=0.0, roll=0.0,
                speed=12.0, energy_level=energy, timestamp=0,
            )
            result = assess_safety(spec, state, env)
            gs = ground_speed(state.speed, state.heading, env.wind_speed, env.wind_direction)

            print(f"\n=== {weather.value.upper()} / battery {energy:.0%} ===")
            print(f"Safe: {result.safe}")
            print(f"Battery: {result.battery_minutes:.1f} min, wind factor {result.wind_factor:.2f}")
            print(f"Ground speed: {gs:.1f} m/s")
            for risk in result.risks:
                print(f"  - {risk}")

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    main()
