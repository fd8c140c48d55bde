# skymotion/simulation/tracker.py
"""
Per-entity registry of interpolation buffers for a frame driver.

Producers call observe()/push() whenever a sample arrives; the render loop
calls update(now) once per frame and reads back one pose per entity.
Buffers are immutable values, so each write builds a new buffer and swaps
it in under the lock; readers always see a complete snapshot.
"""
import logging
import threading
from typing import Dict, List, Optional

from ..drone.data_models import DroneSpec, EntityState, EnvironmentParams, SafetyAssessment
from ..drone.safety import assess_safety
from ..interpolation.config import InterpolationConfig, InterpolationMode
from ..interpolation.core import (
    check_buffer_size,
    create_buffer,
    push_keyframe,
    compute_interpolated_state,
    buffered_time_span,
)
from ..interpolation.data_models import InterpolationBuffer, Keyframe, Timestamp
from ..interpolation.exceptions import BufferConfigurationError
from ..validation import require_non_negative
from .exceptions import SimulationError, UnknownEntityError

logger = logging.getLogger(__name__)

def keyframe_from_state(state: EntityState) -> Keyframe:
    """Extracts the pose sample carried by an entity state."""
    return Keyframe(
        position=state.position,
        heading=state.heading,
        pitch=state.pitch,
        roll=state.roll,
        timestamp=state.timestamp,
    )

class EntityTracker:
    """Owns one InterpolationBuffer per entity present in the simulation"""

    def __init__(self, render_delay: Timestamp = InterpolationConfig.DEFAULT_RENDER_DELAY_MS,
                 max_buffer_size: int = InterpolationConfig.MAX_BUFFER_SIZE,
                 mode: InterpolationMode = InterpolationConfig.DEFAULT_MODE):
        render_delay = require_non_negative('render_delay', render_delay, BufferConfigurationError)
        try:
            self.mode = InterpolationMode(mode)
        except ValueError as e:
            raise BufferConfigurationError('mode', mode, "Unknown interpolation mode") from e
        if self.mode is InterpolationMode.REALTIME:
            # Render at the live clock; poses hold at the newest sample
            render_delay = 0
        elif self.mode is InterpolationMode.PREDICTIVE:
            logger.warning("Predictive interpolation is not supported, falling back to smooth playback")
            self.mode = InterpolationMode.SMOOTH
        self.render_delay = render_delay
        check_buffer_size(max_buffer_size)
        self.max_buffer_size = max_buffer_size

        self._lock = threading.Lock()
        self._buffers: Dict[str, InterpolationBuffer] = {}
        self._states: Dict[str, EntityState] = {}

    # --- Ingestion ---

    def observe(self, state: EntityState) -> InterpolationBuffer:
        """Buffers the pose of an entity state and keeps it if it is the newest seen."""
        with self._lock:
            buffer = self._push_locked(state.id, keyframe_from_state(state))
            previous = self._states.get(state.id)
            if previous is None or state.timestamp >= previous.timestamp:
                self._states[state.id] = state
        return buffer

    def push(self, entity_id: str, keyframe: Keyframe) -> InterpolationBuffer:
        """Buffers a raw keyframe for an entity, creating its buffer if needed."""
        with self._lock:
            return self._push_locked(entity_id, keyframe)

    def _push_locked(self, entity_id: str, keyframe: Keyframe) -> InterpolationBuffer:
        buffer = self._buffers.get(entity_id)
        if buffer is None:
            buffer = create_buffer(entity_id, self.render_delay)
            logger.info(f"Tracking new entity '{entity_id}' (render delay {self.render_delay:.0f} ms)")
        buffer = push_keyframe(buffer, keyframe, self.max_buffer_size)
        self._buffers[entity_id] = buffer
        return buffer

    def remove(self, entity_id: str) -> None:
        """Discards an entity that has left the simulation."""
        with self._lock:
            if entity_id not in self._buffers:
                raise UnknownEntityError(entity_id)
            del self._buffers[entity_id]
            self._states.pop(entity_id, None)
        logger.info(f"Stopped tracking entity '{entity_id}'")

    # --- Render pull ---

    def update(self, now: Timestamp) -> Dict[str, Optional[Keyframe]]:
        """Evaluates every buffer at `now` and returns the pose of each entity."""
        with self._lock:
            snapshot = dict(self._buffers)

        evaluated = {entity_id: compute_interpolated_state(buffer, now)
                     for entity_id, buffer in snapshot.items()}

        poses: Dict[str, Optional[Keyframe]] = {}
        with self._lock:
            for entity_id, buffer in evaluated.items():
                latest = self._buffers.get(entity_id)
                if latest is None:
                    # Removed while evaluating
                    continue
                if latest is not snapshot[entity_id]:
                    # A producer pushed meanwhile; keep its keyframes
                    buffer = compute_interpolated_state(latest, now)
                self._buffers[entity_id] = buffer
                poses[entity_id] = buffer.current

        logger.debug(f"Frame at {now} ms: {len(poses)} entities")
        return poses

    def current(self, entity_id: str) -> Optional[Keyframe]:
        return self.buffer(entity_id).current

    def buffer(self, entity_id: str) -> InterpolationBuffer:
        with self._lock:
            try:
                return self._buffers[entity_id]
            except KeyError:
                raise UnknownEntityError(entity_id) from None

    def latest_state(self, entity_id: str) -> Optional[EntityState]:
        """The newest observed state, or None if the entity was only fed keyframes."""
        with self._lock:
            if entity_id not in self._buffers:
                raise UnknownEntityError(entity_id)
            return self._states.get(entity_id)

    # --- Safety pull ---

    def assess(self, entity_id: str, spec: DroneSpec, env: EnvironmentParams) -> SafetyAssessment:
        """Safety verdict for the latest observed state of an entity."""
        state = self.latest_state(entity_id)
        if state is None:
            raise SimulationError(f"Entity '{entity_id}' has no observed state to assess")
        return assess_safety(spec, state, env)

    # --- Introspection ---

    @property
    def entity_ids(self) -> List[str]:
        with self._lock:
            return sorted(self._buffers)

    def describe(self) -> Dict[str, dict]:
        """Buffer fill and time span per entity, for diagnostics."""
        with self._lock:
            snapshot = dict(self._buffers)
        return {
            entity_id: {
                'keyframes': len(buffer.keyframes),
                'time_span': buffered_time_span(buffer),
                'has_pose': buffer.current is not None,
            }
            for entity_id, buffer in snapshot.items()
        }

    def __len__(self) -> int:
        return len(self._buffers)

    def __contains__(self, entity_id: str) -> bool:
        return entity_id in self._buffers
