# skymotion/simulation/exceptions.py
from ..exceptions import SkyMotionError, ValidationError

class SimulationError(SkyMotionError):
    """Base exception for the simulation layer."""
    pass

class TimelineError(SimulationError, ValidationError):
    """Raised for invalid timeline windows, seeks or speeds."""
    pass

class UnknownEntityError(SimulationError, KeyError):
    """Raised when an entity id has no buffer."""
    def __init__(self, entity_id):
        self.entity_id = entity_id
        super().__init__(f"Unknown entity: {entity_id}")

    def __str__(self):
        return self.args[0]
