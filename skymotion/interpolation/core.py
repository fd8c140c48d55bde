# skymotion/interpolation/core.py
"""
Buffer management for the interpolation engine.

Every operation takes an InterpolationBuffer and returns a new one; the
input is never mutated. Rendering runs `render_delay` ms behind the live
clock so that a keyframe after the render time is very likely already
buffered, which turns network jitter into a constant, invisible lag.
"""
import logging
from bisect import bisect_right
from operator import attrgetter
from typing import Iterable, Optional, Tuple

from ..validation import require_finite, require_non_negative
from .config import InterpolationConfig
from .data_models import InterpolationBuffer, Keyframe, Timestamp
from .exceptions import BufferConfigurationError, InvalidKeyframeError, InvalidTimestampError
from .utils.blending import interpolate_keyframe

logger = logging.getLogger(__name__)

_by_timestamp = attrgetter('timestamp')

def create_buffer(entity_id: str, render_delay: Timestamp = InterpolationConfig.DEFAULT_RENDER_DELAY_MS) -> InterpolationBuffer:
    """Creates a new empty interpolation buffer for an entity."""
    require_non_negative('render_delay', render_delay, BufferConfigurationError)
    return InterpolationBuffer(entity_id=entity_id, render_delay=render_delay)

def check_buffer_size(max_buffer_size: int) -> None:
    if isinstance(max_buffer_size, bool) or not isinstance(max_buffer_size, int) or max_buffer_size < 1:
        raise BufferConfigurationError('max_buffer_size', max_buffer_size, "Expected a positive integer")

def push_keyframes(buffer: InterpolationBuffer, keyframes: Iterable[Keyframe],
                   max_buffer_size: int = InterpolationConfig.MAX_BUFFER_SIZE) -> InterpolationBuffer:
    """
    Adds keyframes in any order. The result is sorted ascending by timestamp
    (stable, so equal timestamps keep their insertion order) and trimmed to
    the newest `max_buffer_size` entries.
    """
    check_buffer_size(max_buffer_size)
    incoming = list(keyframes)
    for keyframe in incoming:
        if not isinstance(keyframe, Keyframe):
            raise InvalidKeyframeError('keyframe', keyframe, "Expected a Keyframe")

    merged = sorted(buffer.keyframes + tuple(incoming), key=_by_timestamp)
    evicted = len(merged) - max_buffer_size
    if evicted > 0:
        logger.debug(f"Buffer '{buffer.entity_id}' evicted {evicted} oldest keyframe(s)")
        merged = merged[evicted:]

    return InterpolationBuffer(
        entity_id=buffer.entity_id,
        keyframes=tuple(merged),
        current=buffer.current,
        render_delay=buffer.render_delay,
    )

def push_keyframe(buffer: InterpolationBuffer, keyframe: Keyframe,
                  max_buffer_size: int = InterpolationConfig.MAX_BUFFER_SIZE) -> InterpolationBuffer:
    """Adds a single keyframe, maintaining chronological order."""
    return push_keyframes(buffer, (keyframe,), max_buffer_size)

def _bracketing_indices(keyframes: Tuple[Keyframe, ...], render_time: float) -> Tuple[int, int]:
    """
    Index of the newest keyframe at or before render_time, and the one after
    it. Both clamp to the buffered range: before the first sample they point
    at the oldest keyframe, past the last they both point at the newest.
    """
    prev_idx = bisect_right(keyframes, render_time, key=_by_timestamp) - 1
    prev_idx = max(prev_idx, 0)
    next_idx = min(prev_idx + 1, len(keyframes) - 1)
    return prev_idx, next_idx

def compute_interpolated_state(buffer: InterpolationBuffer, now: Timestamp) -> InterpolationBuffer:
    """
    Computes the pose at `now - render_delay` and returns a buffer whose
    `current` holds it (None when nothing has been buffered yet).
    """
    require_finite('now', now, InvalidTimestampError)
    render_time = now - buffer.render_delay
    keyframes = buffer.keyframes

    if not keyframes:
        current = None
    elif len(keyframes) == 1:
        current = keyframes[0]
    else:
        prev_idx, next_idx = _bracketing_indices(keyframes, render_time)
        prev = keyframes[prev_idx]
        if prev_idx == next_idx:
            current = prev
        else:
            current = interpolate_keyframe(prev, keyframes[next_idx], render_time)

    return InterpolationBuffer(
        entity_id=buffer.entity_id,
        keyframes=keyframes,
        current=current,
        render_delay=buffer.render_delay,
    )

def buffered_time_span(buffer: InterpolationBuffer) -> Optional[Tuple[Timestamp, Timestamp]]:
    """(oldest, newest) buffered timestamps, or None for an empty buffer."""
    if not buffer.keyframes:
        return None
    return buffer.keyframes[0].timestamp, buffer.keyframes[-1].timestamp
