"""Jet colour map for turning scalar values into RGB pixels."""

from __future__ import annotations

import math
import struct
from typing import NamedTuple


class RGB(NamedTuple):
    """An 8-bit RGB pixel."""

    r: int
    g: int
    b: int


def _f32(x: float) -> float:
    """Round a Python float to single precision."""
    try:
        return struct.unpack("<f", struct.pack("<f", x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)


def _clamp(x: float) -> float:
    # Argument order matters for NaN: a NaN input ends up as 1.0.
    return max(0.0, min(1.0, x))


def _to_byte(channel: float) -> int:
    return int(_f32(_clamp(channel) * 255))


def jet_color_map(value: float, vmin: float, vmax: float) -> RGB:
    """Map ``value`` in ``[vmin, vmax]`` to a Jet colour.

    Values outside the range are clamped to its ends. When the range is
    empty, values below ``vmin`` map to the low end and all others to the
    high end.
    """
    span = _f32(_f32(vmax) - _f32(vmin))
    diff = _f32(_f32(value) - _f32(vmin))
    if span == 0:
        v = 0.0 if diff < 0 else 1.0
    else:
        v = _f32(diff / span)
    v = _clamp(v)

    if v < 0.25:
        r, g, b = 0.0, _f32(4 * v), 1.0
    elif v < 0.5:
        r, g, b = 0.0, 1.0, _f32(1 + _f32(4 * _f32(0.25 - v)))
    elif v < 0.75:
        r, g, b = _f32(4 * _f32(v - 0.5)), 1.0, 0.0
    else:
        r, g, b = 1.0, _f32(1 + _f32(4 * _f32(0.75 - v))), 0.0

    return RGB(_to_byte(r), _to_byte(g), _to_byte(b))