# skymotion/simulation/timeline.py
"""
Playback clock for a frame driver. The timeline turns wall-clock frame
intervals into simulation milliseconds, scaled by a playback speed, and
supplies the `now` that interpolation buffers are evaluated against.
"""
import logging
from typing import Optional

from ..drone.data_models import EnvironmentParams
from ..validation import require_finite, require_positive
from .exceptions import TimelineError

logger = logging.getLogger(__name__)

class SimulationTimeline:
    """
    A pausable, seekable simulation clock (milliseconds).

    With `end_time=None` the timeline is live and runs without bound;
    otherwise playback stops and pauses when it reaches `end_time`.
    """

    def __init__(self, start_time: float, end_time: Optional[float] = None, speed: float = 1.0):
        self.start_time = require_finite('start_time', start_time, TimelineError)
        if end_time is not None:
            end_time = require_finite('end_time', end_time, TimelineError)
            if end_time < self.start_time:
                raise TimelineError('end_time', end_time, "Timeline ends before it starts")
        self.end_time = end_time
        self.speed = require_positive('speed', speed, TimelineError)
        self.current_time = self.start_time
        self.playing = False

    @classmethod
    def for_environment(cls, env: EnvironmentParams, start_time: float,
                        end_time: Optional[float] = None) -> 'SimulationTimeline':
        """Timeline whose playback speed is the environment's time scale."""
        return cls(start_time, end_time=end_time, speed=env.time_scale)

    @property
    def is_live(self) -> bool:
        return self.end_time is None

    @property
    def progress(self) -> Optional[float]:
        """Fraction of the window played, or None for a live timeline."""
        if self.is_live:
            return None
        span = self.end_time - self.start_time
        if span == 0:
            return 1.0
        return (self.current_time - self.start_time) / span

    def play(self) -> None:
        if self.end_time is not None and self.current_time >= self.end_time:
            logger.debug("Timeline at end; play() ignored")
            return
        self.playing = True

    def pause(self) -> None:
        self.playing = False

    def set_speed(self, speed: float) -> None:
        self.speed = require_positive('speed', speed, TimelineError)

    def seek(self, time_ms: float) -> float:
        """Jumps to `time_ms`, clamped into the timeline window."""
        time_ms = require_finite('time_ms', time_ms, TimelineError)
        time_ms = max(self.start_time, time_ms)
        if self.end_time is not None:
            time_ms = min(self.end_time, time_ms)
        self.current_time = time_ms
        return self.current_time

    def advance(self, elapsed_ms: float) -> float:
        """
        Moves the clock forward by `elapsed_ms` of wall time times the
        playback speed. Does nothing while paused.
        """
        elapsed_ms = require_finite('elapsed_ms', elapsed_ms, TimelineError)
        if elapsed_ms < 0:
            raise TimelineError('elapsed_ms', elapsed_ms, "Timeline cannot run backwards")
        if not self.playing:
            return self.current_time

        self.current_time += elapsed_ms * self.speed
        if self.end_time is not None and self.current_time >= self.end_time:
            self.current_time = self.end_time
            self.playing = False
            logger.info(f"Timeline reached end at {self.end_time:.0f} ms")
        return self.current_time
