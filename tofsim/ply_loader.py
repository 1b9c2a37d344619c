"""Reading point clouds from PLY files."""

from __future__ import annotations

import dataclasses
import struct
from dataclasses import dataclass, field
from typing import BinaryIO

BINARY_POINT_LIMIT = 1000

_FORMATS = ("ascii", "binary_little_endian", "binary_big_endian")
_COLOR_PROPERTIES = {"red", "green", "blue"}


class PLYError(Exception):
    """Raised when a PLY file cannot be opened or parsed."""


@dataclass
class Point3D:
    """A point in space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class PLYInfo:
    """Header facts and bounding box of a PLY file."""

    num_points: int = 0
    num_faces: int = 0
    has_color: bool = False
    min_x: float = 0.0
    max_x: float = 0.0
    min_y: float = 0.0
    max_y: float = 0.0
    min_z: float = 0.0
    max_z: float = 0.0
    format: str = ""


def _f32(x: float) -> float:
    return struct.unpack("<f", struct.pack("<f", x))[0]


def _read_line(fh: BinaryIO) -> str | None:
    raw = fh.readline()
    if not raw:
        return None
    return raw.decode("latin-1").removesuffix("\n")


def _count(tokens: list[str], index: int) -> int:
    try:
        return int(tokens[index])
    except (IndexError, ValueError):
        return 0


def _read_header(fh: BinaryIO) -> PLYInfo:
    if _read_line(fh) != "ply":
        raise PLYError("Not a valid PLY file")

    format_line = _read_line(fh) or ""
    for name in _FORMATS:
        if f"format {name}" in format_line:
            info = PLYInfo(format=name)
            break
    else:
        raise PLYError("Unsupported PLY format")

    while (line := _read_line(fh)) is not None:
        if line == "end_header":
            break
        tokens = line.split()
        if not tokens:
            continue
        if tokens[0] == "element" and len(tokens) > 1:
            if tokens[1] == "vertex":
                info.num_points = _count(tokens, 2)
            elif tokens[1] == "face":
                info.num_faces = _count(tokens, 2)
        elif tokens[0] == "property" and len(tokens) > 2:
            if tokens[2] in _COLOR_PROPERTIES:
                info.has_color = True
    return info


def _read_ascii_points(fh: BinaryIO, count: int) -> list[Point3D]:
    points: list[Point3D] = []
    while len(points) < count:
        line = _read_line(fh)
        if line is None:
            raise PLYError("Unexpected end of PLY vertex data")
        fields = line.split()
        if not fields:
            continue
        if len(fields) < 3:
            raise PLYError(f"Malformed vertex line: {line!r}")
        try:
            x, y, z = (_f32(float(v)) for v in fields[:3])
        except ValueError as exc:
            raise PLYError(f"Malformed vertex line: {line!r}") from exc
        points.append(Point3D(x, y, z))
    return points


def _read_binary_points(fh: BinaryIO, count: int, big_endian: bool) -> list[Point3D]:
    record = struct.Struct((">" if big_endian else "<") + "3f")
    data = fh.read(record.size * count)
    if len(data) < record.size * count:
        raise PLYError("Unexpected end of PLY vertex data")
    return [Point3D(*xyz) for xyz in record.iter_unpack(data)]


def _set_bounds(info: PLYInfo, points: list[Point3D]) -> None:
    if not points:
        return
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    zs = [p.z for p in points]
    info.min_x, info.max_x = min(xs), max(xs)
    info.min_y, info.max_y = min(ys), max(ys)
    info.min_z, info.max_z = min(zs), max(zs)


def _open(filename) -> BinaryIO:
    try:
        return open(filename, "rb")
    except OSError as exc:
        raise PLYError(f"Could not open PLY file: {filename}") from exc


class PLYLoader:
    """Loads vertex positions and header information from PLY files.

    Binary files are read only up to ``BINARY_POINT_LIMIT`` points, each
    taken as three consecutive 32-bit floats.
    """

    def __init__(self) -> None:
        self.points: list[Point3D] = []
        self.info = PLYInfo()

    def load(self, filename) -> list[Point3D]:
        """Read the points of ``filename``, updating ``points`` and ``info``."""
        with _open(filename) as fh:
            info = _read_header(fh)
            if info.format == "ascii":
                points = _read_ascii_points(fh, info.num_points)
            else:
                points = _read_binary_points(
                    fh,
                    min(BINARY_POINT_LIMIT, info.num_points),
                    info.format == "binary_big_endian",
                )
        _set_bounds(info, points)
        self.info = info
        self.points = points
        return points

    def read_info(self, filename) -> PLYInfo:
        """Read only the header of ``filename`` and return what it declares."""
        with _open(filename) as fh:
            info = _read_header(fh)
        self.info = info
        return dataclasses.replace(info)