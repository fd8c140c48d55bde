"""
simulation - Frame-driver helpers

Keeps one interpolation buffer per entity, converts entity states into
keyframes and provides a playback clock for the render loop.
"""

from .exceptions import SimulationError, TimelineError, UnknownEntityError
from .timeline import SimulationTimeline
from .tracker import EntityTracker, keyframe_from_state

__all__ = [
    'EntityTracker',
    'keyframe_from_state',
    'SimulationTimeline',
    'SimulationError',
    'TimelineError',
    'UnknownEntityError'
]
