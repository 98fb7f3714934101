"""Tests for XYZ point-cloud reading."""

import pytest

from xyzplane.io import BOHR_TO_ANGSTROM, read_xyz_frames, read_xyz_points
from xyzplane.space import Point

TRIANGLE_XYZ = """3
triangle
C 1.0 0.0 0.0
C 0.5 0.5 0.0
C 0.0 1.0 0.0
"""


def test_read_points(tmp_path):
    path = tmp_path / "tri.xyz"
    path.write_text(TRIANGLE_XYZ)
    points = read_xyz_points(str(path))
    assert points == [Point.from_xyz(1.0, 0.0, 0.0), Point.from_xyz(0.5, 0.5, 0.0), Point.from_xyz(0.0, 1.0, 0.0)]


def test_read_points_bohr(tmp_path):
    path = tmp_path / "tri.xyz"
    path.write_text(TRIANGLE_XYZ)
    points = read_xyz_points(str(path), bohr_units=True)
    assert points[0].into_items() == pytest.approx((BOHR_TO_ANGSTROM, 0.0, 0.0))


def test_bad_header(tmp_path):
    path = tmp_path / "bad.xyz"
    path.write_text("three\n\nC 0 0 0\n")
    with pytest.raises(ValueError, match="point count"):
        read_xyz_points(str(path))


def test_bad_coordinates(tmp_path):
    path = tmp_path / "bad.xyz"
    path.write_text("2\n\nC 0 0 0\nC 0 x 0\n")
    with pytest.raises(ValueError, match="Line 4"):
        read_xyz_points(str(path))


def test_missing_points(tmp_path):
    path = tmp_path / "short.xyz"
    path.write_text("3\n\nC 0 0 0\n")
    with pytest.raises(ValueError, match="Expected 3"):
        read_xyz_points(str(path))


def test_read_frames(tmp_path):
    path = tmp_path / "traj.xyz"
    path.write_text(TRIANGLE_XYZ + TRIANGLE_XYZ.replace("0.5 0.5", "0.5 0.6") + "3\ntruncated\nC 0 0 0\n")
    frames = list(read_xyz_frames(str(path)))
    assert len(frames) == 2
    assert frames[1][1] == Point.from_xyz(0.5, 0.6, 0.0)
