"""Synthetic time-of-flight frame generation."""

from __future__ import annotations

import random
import struct

_SEED = 42
_NOISE_LOW = -20
_NOISE_HIGH = 20
_MAX_VALUE = 0xFFFF

_U32_MAX = 0xFFFFFFFF
_NOISE_RANGE = _NOISE_HIGH - _NOISE_LOW + 1
_SCALING = _U32_MAX // _NOISE_RANGE
_PAST = _NOISE_RANGE * _SCALING


def _mt19937(seed: int) -> random.Random:
    """A Mersenne Twister seeded the classic way (``init_genrand``)."""
    state = [seed & _U32_MAX]
    for i in range(1, 624):
        prev = state[-1]
        state.append((1812433253 * (prev ^ (prev >> 30)) + i) & _U32_MAX)
    rng = random.Random()
    rng.setstate((3, tuple(state) + (624,), None))
    return rng


def _noise(rng: random.Random) -> int:
    """Uniform integer in [-20, 20] drawn by rejection and downscaling."""
    while True:
        draw = rng.getrandbits(32)
        if draw < _PAST:
            return draw // _SCALING + _NOISE_LOW


class ToFDataGenerator:
    """Produces deterministic synthetic depth frames of 16-bit values."""

    def __init__(self, width: int = 32, height: int = 32, num_frames: int = 4) -> None:
        self.width = width
        self.height = height
        self.num_frames = num_frames
        self.frames: list[list[int]] = []
        self.generate_frames()

    def generate_frames(self) -> None:
        """Regenerate all frames: a gradient, a per-frame offset and noise."""
        rng = _mt19937(_SEED)
        self.frames = []
        for f in range(self.num_frames):
            frame = [
                min(max(1000 + 10 * x + 5 * y + 100 * f + _noise(rng), 0), _MAX_VALUE)
                for y in range(self.height)
                for x in range(self.width)
            ]
            self.frames.append(frame)

    def frame_packet(self, frame_idx: int, offset: int, length: int) -> bytes:
        """Return ``length`` pixels of a frame from ``offset`` as little-endian bytes.

        An unknown frame index or an offset past the end gives empty bytes;
        a request running past the end is cut short.
        """
        if not 0 <= frame_idx < len(self.frames):
            return b""
        pixels = self.frames[frame_idx][offset:offset + length]
        return struct.pack(f"<{len(pixels)}H", *pixels)