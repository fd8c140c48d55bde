"""
skymotion - Entity motion smoothing and drone flight-envelope assessment

Buffers irregular entity-state samples into smooth, frame-rate-independent
poses and evaluates drone physics (drag, power, endurance, wind) against a
safe operating envelope.
"""

__version__ = "0.1.0"
