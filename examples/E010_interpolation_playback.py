#!/usr/bin/env python3
# skymotion/examples/E010_interpolation_playback.py
"""
Feeds a drone's position to the tracker at an irregular ~1 Hz cadence and
plays it back at 20 frames per second, printing the smoothed pose.
"""
import logging
import random

from skymotion.drone import EntityState, EntityType
from skymotion.interpolation import GeoPosition
from skymotion.simulation import EntityTracker, SimulationTimeline

FRAME_MS = 50

def generate_samples(count: int):
    """Orbit-like track crossing north, with jittered arrival times."""
    timestamp = 0
    heading = 300.0
    for i in range(count):
        yield EntityState(
            id='drone-1',
            entity_type=EntityType.DRONE,
            position=GeoPosition(longitude=132.45 + i * 0.0005, latitude=34.39 + i * 0.0003, altitude=120.0),
            heading=heading, pitch=2.0, roll=-5.0,
            speed=12.0,
            energy_level=max(0.0, 0.9 - i * 0.01),
            timestamp=timestamp,
        )
        heading = (heading + 15.0) % 360
        timestamp += random.randint(700, 1300)

def main():
    tracker = EntityTracker(render_delay=1000)
    samples = list(generate_samples(10))
    for state in samples:
        tracker.observe(state)

    timeline = SimulationTimeline(start_time=0, end_time=samples[-1].timestamp + 1000)
    timeline.play()

    print("=== PLAYBACK ===")
    while timeline.playing:
        now = timeline.advance(FRAME_MS)
        pose = tracker.update(now)['drone-1']
        print(f"t={now:7.0f} ms  lon={pose.position.longitude:.6f}  "
              f"lat={pose.position.latitude:.6f}  hdg={pose.heading:6.1f}°")

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    main()
