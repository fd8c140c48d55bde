# skymotion/drone/constants.py

class DroneConstants:
    """Physical constants and operating limits for the multirotor model"""

    # ===== ATMOSPHERE =====
    PHYSICS = {
        'RHO_SEA_LEVEL': 1.225,     # kg/m^3, sea level
        'G_ACCEL_MPS2': 9.80665,    # Standard gravity
        'GAS_CONSTANT_AIR': 287.05, # J/(kg*K), dry air
        'KELVIN_OFFSET': 273.15
    }

    # ===== BATTERY ENDURANCE (minutes) =====
    BATTERY = {
        'CRITICAL_MINUTES': 5,
        'LOW_MINUTES': 15,
        'SECONDS_PER_HOUR': 3600
    }

    # ===== WIND =====
    WIND = {
        'MAX_FACTOR': 1.0           # wind_speed / max_wind_speed above this is a risk
    }

    # ===== DEFAULT AIRFRAME (4 kg quadcopter) =====
    DEFAULT_SPEC = {
        'mass': 4.0,                # kg, empty
        'max_payload': 2.0,         # kg
        'drag_area': 0.05,          # m^2, frontal
        'drag_coefficient': 1.1,
        'battery_capacity': 150.0,  # Wh
        'hover_power': 200.0,       # W
        'max_airspeed': 18.0,       # m/s
        'max_wind_speed': 15.0      # m/s
    }

    # ===== DEFAULT ENVIRONMENT =====
    DEFAULT_ENVIRONMENT = {
        'wind_speed': 5.0,
        'wind_direction': 180.0,
        'weather': 'clear',
        'temperature': 20.0,
        'time_scale': 1.0
    }
