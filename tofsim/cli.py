"""Command-line demo: render a synthetic ToF frame and inspect a PLY file."""

from __future__ import annotations

import argparse
import struct
import sys
from collections.abc import Iterable
from pathlib import Path

from tofsim.color_map import RGB, jet_color_map
from tofsim.ply_loader import PLYError, PLYLoader
from tofsim.tof_data_generator import ToFDataGenerator

FRAME_WIDTH = 64
FRAME_HEIGHT = 64
FRAME_COUNT = 4


def save_ppm(filename, pixels: Iterable[RGB], width: int, height: int) -> None:
    """Write ``pixels`` as a binary PPM (P6) image."""
    body = b"".join(bytes(pixel) for pixel in pixels)
    with open(filename, "wb") as fh:
        fh.write(f"P6\n{width} {height}\n255\n".encode("ascii"))
        fh.write(body)


def _fmt(value: float) -> str:
    return f"{value:g}"


def _heading(title: str, underline: str) -> None:
    print(f"\n{title}")
    print(underline)


def _render_tof_image(output: Path) -> None:
    generator = ToFDataGenerator(FRAME_WIDTH, FRAME_HEIGHT, FRAME_COUNT)
    raw = generator.frame_packet(0, 0, FRAME_WIDTH * FRAME_HEIGHT)
    frame = [value for (value,) in struct.iter_unpack("<H", raw)]

    low, high = min(frame), max(frame)
    print(f"Generated ToF frame: {FRAME_WIDTH}x{FRAME_HEIGHT} pixels")
    print(f"Frame data range: {low} to {high}")

    pixels = [jet_color_map(float(value), float(low), float(high)) for value in frame]
    try:
        save_ppm(output, pixels, FRAME_WIDTH, FRAME_HEIGHT)
    except OSError:
        print(f"Error: Could not open file {output}", file=sys.stderr)
    else:
        print(f"Saved color-mapped ToF image to {output}")


def _inspect_point_cloud(ply_file: Path) -> None:
    loader = PLYLoader()
    try:
        info = loader.read_info(ply_file)
    except PLYError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print("Failed to read PLY file information")
        return

    print(f"PLY File: {ply_file}")
    print(f"Format: {info.format}")
    print(f"Number of points: {info.num_points}")
    print(f"Number of faces: {info.num_faces}")
    print(f"Has color data: {'Yes' if info.has_color else 'No'}")
    print("Bounding box:")
    print(f"  X: [{_fmt(info.min_x)}, {_fmt(info.max_x)}]")
    print(f"  Y: [{_fmt(info.min_y)}, {_fmt(info.max_y)}]")
    print(f"  Z: [{_fmt(info.min_z)}, {_fmt(info.max_z)}]")

    if info.format != "ascii":
        print("Binary PLY format detected. Reading first 1000 points for demo...")
    try:
        points = loader.load(ply_file)
    except PLYError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print("Failed to load point cloud data")
        return

    print(f"Successfully loaded {len(points)} points")
    print("First 5 points:")
    for index, point in enumerate(points[:5]):
        print(f"  Point {index}: ({_fmt(point.x)}, {_fmt(point.y)}, {_fmt(point.z)})")


def main(argv=None) -> int:
    """Run the demo and return the exit status."""
    parser = argparse.ArgumentParser(
        description="Generate a synthetic ToF image and inspect a PLY point cloud."
    )
    parser.add_argument("--output", type=Path, default=Path("tof_image.ppm"))
    parser.add_argument("--ply", type=Path, default=Path("fragment.ply"))
    args = parser.parse_args(argv)

    print("=== ToF Simulator - Advanced Demo ===")
    print("=====================================")

    _heading("1. GENERATING SYNTHETIC TOF IMAGE", "--------------------------------")
    _render_tof_image(args.output)

    _heading("2. LOADING POINT CLOUD DATA", "---------------------------")
    _inspect_point_cloud(args.ply)

    _heading("3. SUMMARY", "----------")
    print(f"✓ Generated synthetic ToF image ({args.output.name})")
    print("✓ Loaded and analyzed point cloud data")
    print("✓ Ready for GUI integration")

    print("\nNext steps:")
    print("- Install Qt for GUI development")
    print("- Add 3D visualization capabilities")
    print("- Create interactive viewer for both 2D and 3D data")
    return 0


if __name__ == "__main__":
    sys.exit(main())