# tofsim

A small simulator for a time-of-flight (ToF) depth camera. It provides:

- `tofsim.tof_data_generator.ToFDataGenerator`: makes reproducible synthetic
  16-bit depth frames (a gradient, a per-frame offset of 100 and seeded noise
  in [-20, 20]). `frame_packet(frame_idx, offset, length)` returns part of a
  frame as little-endian bytes; an unknown frame gives empty bytes and a
  request past the end is cut short.
- `tofsim.color_map.jet_color_map(value, vmin, vmax)`: maps a value to a Jet
  `RGB` colour (a named tuple of 8-bit `r`, `g`, `b`). Values outside the
  range are clamped to its ends.
- `tofsim.ply_loader.PLYLoader`: `read_info(filename)` reads a PLY header
  into a `PLYInfo` (format, vertex and face counts, whether colour properties
  are declared). `load(filename)` reads the vertices as `Point3D` objects and
  fills in the bounding box of `loader.info`. Problems with a file raise
  `PLYError`.
- `tofsim.mock_star_api.MockStarAPI`: a stand-in for a SpaceWire interface
  with one simulated device ("SpaceWire Brick Mk4", channels 0 to 3).
  `open_channel_to_local_device` returns a channel id or raises
  `ChannelError`. When built with a `tof_generator`, `receive_packet`
  returns pixels of that generator's first frame; otherwise it returns
  incrementing byte values.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
tofsim
```

This generates a 64x64 synthetic frame and writes it as a colour-mapped
binary PPM image to `tof_image.ppm`. It then reads `fragment.ply` from the
current directory and prints its format, counts, bounding box and first five
points; if the file is missing or cannot be parsed it says so and carries on.

Options:

- `--output PATH`: where to write the PPM image (default `tof_image.ppm`).
- `--ply PATH`: the PLY file to inspect (default `fragment.ply`).

## Library use

```python
from tofsim.tof_data_generator import ToFDataGenerator
from tofsim.color_map import jet_color_map
from tofsim.ply_loader import PLYLoader, PLYError
from tofsim.mock_star_api import MockStarAPI
from tofsim.cli import save_ppm

gen = ToFDataGenerator(64, 64, 4)
packet = gen.frame_packet(0, 0, 64 * 64)
values = [int.from_bytes(packet[i:i + 2], "little") for i in range(0, len(packet), 2)]
lo, hi = min(values), max(values)
save_ppm("frame.ppm", [jet_color_map(v, lo, hi) for v in values], 64, 64)

loader = PLYLoader()
try:
    points = loader.load("cloud.ply")
    print(loader.info.format, len(points), loader.info.min_x, loader.info.max_x)
except PLYError as exc:
    print("cannot read:", exc)

api = MockStarAPI(tof_generator=gen)
channel = api.open_channel_to_local_device(0, 1)
data = api.receive_packet(channel, 128)  # 64 pixels of frame 0
api.close_channel(channel)
```

## Limitations

- Binary PLY files are read only up to their first 1000 vertices, and each
  vertex is taken as three consecutive 32-bit floats; other vertex
  properties in binary files are not skipped over. ASCII files use the
  first three values on each vertex line.
- Faces and colours are counted or noted from the header but not loaded.
- There is no graphical viewer and no 3D display: the package writes PPM
  images and prints text only.
- `MockStarAPI` talks to no real device; transmitting only reports the
  packet size.