#!/usr/bin/env python3
# skymotion/interpolation/tests/test_buffer.py
import unittest
from dataclasses import replace

from skymotion.interpolation import (
    InterpolationConfig,
    GeoPosition,
    Keyframe,
    create_buffer,
    push_keyframe,
    push_keyframes,
    compute_interpolated_state,
    buffered_time_span,
    BufferConfigurationError,
    InvalidKeyframeError,
    InvalidTimestampError,
)

def make_keyframe(timestamp, lon=132.0, lat=34.0, alt=100.0, heading=0.0, pitch=0.0, roll=0.0):
    return Keyframe(
        position=GeoPosition(longitude=lon, latitude=lat, altitude=alt),
        heading=heading, pitch=pitch, roll=roll, timestamp=timestamp,
    )

class TestBufferCreation(unittest.TestCase):
    def test_defaults(self):
        buf = create_buffer('drone-1')
        self.assertEqual(buf.entity_id, 'drone-1')
        self.assertEqual(buf.keyframes, ())
        self.assertIsNone(buf.current)
        self.assertEqual(buf.render_delay, InterpolationConfig.DEFAULT_RENDER_DELAY_MS)
        self.assertTrue(buf.is_empty)

    def test_custom_render_delay(self):
        self.assertEqual(create_buffer('drone-1', 500).render_delay, 500)

    def test_zero_render_delay_allowed(self):
        self.assertEqual(create_buffer('drone-1', 0).render_delay, 0)

    def test_negative_render_delay_rejected(self):
        with self.assertRaises(BufferConfigurationError):
            create_buffer('drone-1', -1)

    def test_non_finite_render_delay_rejected(self):
        with self.assertRaises(BufferConfigurationError):
            create_buffer('drone-1', float('nan'))

class TestPushKeyframe(unittest.TestCase):
    def test_out_of_order_push_is_sorted(self):
        buf = create_buffer('drone-1')
        buf = push_keyframe(buf, make_keyframe(2000))
        buf = push_keyframe(buf, make_keyframe(1000))

        self.assertEqual([kf.timestamp for kf in buf.keyframes], [1000, 2000])

    def test_push_does_not_mutate_input(self):
        empty = create_buffer('drone-1')
        pushed = push_keyframe(empty, make_keyframe(1000))

        self.assertEqual(empty.keyframes, ())
        self.assertEqual(len(pushed.keyframes), 1)

    def test_evicts_oldest_beyond_bound(self):
        buf = create_buffer('drone-1')
        for ts in range(0, 10000, 1000):
            buf = push_keyframe(buf, make_keyframe(ts), max_buffer_size=3)

        self.assertEqual([kf.timestamp for kf in buf.keyframes], [7000, 8000, 9000])

    def test_late_old_sample_is_the_one_evicted(self):
        buf = create_buffer('drone-1')
        buf = push_keyframes(buf, [make_keyframe(2000), make_keyframe(3000)], max_buffer_size=2)
        buf = push_keyframe(buf, make_keyframe(1000), max_buffer_size=2)

        self.assertEqual([kf.timestamp for kf in buf.keyframes], [2000, 3000])

    def test_default_bound(self):
        buf = push_keyframes(create_buffer('drone-1'), [make_keyframe(ts) for ts in range(100)])
        self.assertEqual(len(buf.keyframes), InterpolationConfig.MAX_BUFFER_SIZE)
        self.assertEqual(buf.keyframes[0].timestamp, 40)

    def test_duplicate_timestamps_keep_insertion_order(self):
        first = make_keyframe(1000, lon=1.0)
        second = make_keyframe(1000, lon=2.0)
        buf = create_buffer('drone-1')
        buf = push_keyframe(buf, make_keyframe(2000))
        buf = push_keyframe(buf, first)
        buf = push_keyframe(buf, second)

        self.assertIs(buf.keyframes[0], first)
        self.assertIs(buf.keyframes[1], second)

    def test_push_preserves_current(self):
        buf = push_keyframe(create_buffer('drone-1'), make_keyframe(1000))
        buf = compute_interpolated_state(buf, 5000)
        current = buf.current
        buf = push_keyframe(buf, make_keyframe(2000))
        self.assertIs(buf.current, current)

    def test_invalid_buffer_size(self):
        for size in (0, -5, 2.5):
            with self.assertRaises(BufferConfigurationError):
                push_keyframe(create_buffer('drone-1'), make_keyframe(1000), max_buffer_size=size)

    def test_rejects_non_keyframe(self):
        with self.assertRaises(InvalidKeyframeError):
            push_keyframe(create_buffer('drone-1'), {'timestamp': 1000})

    def test_time_span(self):
        self.assertIsNone(buffered_time_span(create_buffer('drone-1')))
        buf = push_keyframes(create_buffer('drone-1'), [make_keyframe(3000), make_keyframe(1000)])
        self.assertEqual(buffered_time_span(buf), (1000, 3000))

class TestComputeInterpolatedState(unittest.TestCase):
    def setUp(self):
        buf = create_buffer('drone-1', render_delay=500)
        buf = push_keyframe(buf, make_keyframe(1000, lon=132, lat=34, alt=100, heading=0))
        self.buffer = push_keyframe(buf, make_keyframe(2000, lon=133, lat=35, alt=200, heading=90))

    def test_empty_buffer_yields_none(self):
        buf = compute_interpolated_state(create_buffer('test'), 123456789)
        self.assertIsNone(buf.current)

    def test_single_keyframe_returned_verbatim(self):
        kf = make_keyframe(1000)
        buf = compute_interpolated_state(push_keyframe(create_buffer('solo'), kf), 99999)
        self.assertIs(buf.current, kf)

    def test_single_keyframe_heading_is_normalized(self):
        buf = push_keyframe(create_buffer('solo'), make_keyframe(1000, heading=370))
        self.assertAlmostEqual(compute_interpolated_state(buf, 99999).current.heading, 10)

    def test_render_delay_midpoint(self):
        """now=2000 with 500 ms delay renders at 1500, the exact midpoint"""
        buf = compute_interpolated_state(self.buffer, 2000)

        self.assertIsNotNone(buf.current)
        self.assertAlmostEqual(buf.current.position.longitude, 132.5)
        self.assertAlmostEqual(buf.current.position.latitude, 34.5)
        self.assertAlmostEqual(buf.current.position.altitude, 150)
        self.assertAlmostEqual(buf.current.heading, 45)
        self.assertEqual(buf.current.timestamp, 1500)

    def test_before_all_samples_clamps_to_oldest(self):
        buf = compute_interpolated_state(self.buffer, 0)
        self.assertEqual(buf.current.position, self.buffer.keyframes[0].position)
        self.assertAlmostEqual(buf.current.heading, 0)

    def test_after_all_samples_holds_newest(self):
        buf = compute_interpolated_state(self.buffer, 10000)
        self.assertIs(buf.current, self.buffer.keyframes[-1])

    def test_exactly_on_newest_sample(self):
        buf = compute_interpolated_state(self.buffer, 2500)
        self.assertIs(buf.current, self.buffer.keyframes[-1])

    def test_brackets_the_right_pair(self):
        buf = push_keyframe(self.buffer, make_keyframe(3000, lon=135, heading=180))
        buf = compute_interpolated_state(buf, 3000)  # render at 2500
        self.assertAlmostEqual(buf.current.position.longitude, 134.0)
        self.assertAlmostEqual(buf.current.heading, 135)

    def test_duplicate_timestamps_use_latest_pushed(self):
        buf = push_keyframe(self.buffer, make_keyframe(1000, lon=140, heading=0))
        buf = compute_interpolated_state(buf, 1500)  # render at 1000
        self.assertAlmostEqual(buf.current.position.longitude, 140)

    def test_evaluate_does_not_mutate_input(self):
        compute_interpolated_state(self.buffer, 2000)
        self.assertIsNone(self.buffer.current)

    def test_rejects_non_finite_clock(self):
        with self.assertRaises(InvalidTimestampError):
            compute_interpolated_state(self.buffer, float('nan'))

    def test_zero_delay_tracks_live_clock(self):
        buf = replace(self.buffer, render_delay=0)
        buf = compute_interpolated_state(buf, 1250)
        self.assertAlmostEqual(buf.current.position.longitude, 132.25)

if __name__ == '__main__':
    unittest.main()
