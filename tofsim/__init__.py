"""Time-of-flight camera simulator: synthetic frames, jet colour mapping, PLY loading and a mock SpaceWire link."""

__version__ = "0.1.0"