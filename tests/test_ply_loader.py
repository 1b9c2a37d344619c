import struct

import pytest

from tofsim.ply_loader import BINARY_POINT_LIMIT, PLYError, PLYLoader, Point3D


def _header(fmt, num_points, num_faces=0, color=False):
    lines = ["ply", f"format {fmt} 1.0", f"element vertex {num_points}",
             "property float x", "property float y", "property float z"]
    if color:
        lines += ["property uchar red", "property uchar green", "property uchar blue"]
    if num_faces:
        lines += [f"element face {num_faces}", "property list uchar int vertex_indices"]
    lines.append("end_header")
    return ("\n".join(lines) + "\n").encode("ascii")


@pytest.fixture
def ascii_ply(tmp_path):
    path = tmp_path / "cloud.ply"
    body = "0.5 1.25 -2.0\n-1.5 3.0 4.5\n2.0 -0.25 0.0\n"
    path.write_bytes(_header("ascii", 3, num_faces=2) + body.encode("ascii"))
    return path


def test_ascii_points(ascii_ply):
    points = PLYLoader().load(ascii_ply)
    assert points == [Point3D(0.5, 1.25, -2.0), Point3D(-1.5, 3.0, 4.5), Point3D(2.0, -0.25, 0.0)]


def test_ascii_bounds_and_counts(ascii_ply):
    loader = PLYLoader()
    loader.load(ascii_ply)
    info = loader.info
    assert (info.num_points, info.num_faces, info.format) == (3, 2, "ascii")
    assert (info.min_x, info.max_x) == (-1.5, 2.0)
    assert (info.min_y, info.max_y) == (-0.25, 3.0)
    assert (info.min_z, info.max_z) == (-2.0, 4.5)
    assert info.has_color is False
    assert loader.points == [Point3D(0.5, 1.25, -2.0), Point3D(-1.5, 3.0, 4.5), Point3D(2.0, -0.25, 0.0)]


def test_read_info_header_only(ascii_ply):
    info = PLYLoader().read_info(ascii_ply)
    assert (info.num_points, info.num_faces, info.format) == (3, 2, "ascii")
    assert (info.min_x, info.max_x) == (0.0, 0.0)


def test_color_detection(tmp_path):
    path = tmp_path / "color.ply"
    path.write_bytes(_header("ascii", 1, color=True) + b"1 2 3 255 0 0\n")
    loader = PLYLoader()
    assert loader.read_info(path).has_color is True
    assert loader.load(path) == [Point3D(1.0, 2.0, 3.0)]


def test_binary_little_endian(tmp_path):
    coords = [(1.0, 2.0, 3.0), (-4.0, 0.5, 8.0)]
    path = tmp_path / "le.ply"
    path.write_bytes(_header("binary_little_endian", 2)
                     + b"".join(struct.pack("<3f", *c) for c in coords))
    loader = PLYLoader()
    assert loader.load(path) == [Point3D(*c) for c in coords]
    assert loader.info.format == "binary_little_endian"
    assert (loader.info.min_x, loader.info.max_z) == (-4.0, 8.0)


def test_binary_big_endian(tmp_path):
    coords = [(1.5, -2.5, 3.5)]
    path = tmp_path / "be.ply"
    path.write_bytes(_header("binary_big_endian", 1) + struct.pack(">3f", *coords[0]))
    assert PLYLoader().load(path) == [Point3D(*coords[0])]


def test_binary_point_limit(tmp_path):
    total = BINARY_POINT_LIMIT + 5
    path = tmp_path / "big.ply"
    path.write_bytes(_header("binary_little_endian", total)
                     + b"".join(struct.pack("<3f", i, 0, 0) for i in range(total)))
    loader = PLYLoader()
    points = loader.load(path)
    assert len(points) == BINARY_POINT_LIMIT
    assert loader.info.num_points == total
    assert loader.info.max_x == float(BINARY_POINT_LIMIT - 1)


def test_not_a_ply_file(tmp_path):
    path = tmp_path / "bad.ply"
    path.write_bytes(b"obj\nformat ascii 1.0\nend_header\n")
    with pytest.raises(PLYError):
        PLYLoader().load(path)


def test_unsupported_format(tmp_path):
    path = tmp_path / "bad.ply"
    path.write_bytes(b"ply\nformat weird 1.0\nend_header\n")
    with pytest.raises(PLYError):
        PLYLoader().read_info(path)


def test_missing_file(tmp_path):
    with pytest.raises(PLYError):
        PLYLoader().load(tmp_path / "absent.ply")


def test_truncated_ascii(tmp_path):
    path = tmp_path / "short.ply"
    path.write_bytes(_header("ascii", 3) + b"1 2 3\n")
    with pytest.raises(PLYError):
        PLYLoader().load(path)


def test_truncated_binary(tmp_path):
    path = tmp_path / "short.ply"
    path.write_bytes(_header("binary_little_endian", 2) + struct.pack("<3f", 1, 2, 3))
    with pytest.raises(PLYError):
        PLYLoader().load(path)


def test_read_info_returns_copy(ascii_ply):
    loader = PLYLoader()
    info = loader.read_info(ascii_ply)
    info.num_points = 99
    assert loader.info.num_points == 3