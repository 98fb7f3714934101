"""Reading point clouds from XYZ files."""

from __future__ import annotations

import logging
from typing import Iterator, List

from .space import Point

logger = logging.getLogger(__name__)

BOHR_TO_ANGSTROM = 0.52917721054


def _parse_point(line: str, lineno: int, scale: float) -> Point:
    parts = line.strip().split()
    if len(parts) < 4:
        raise ValueError(f"Line {lineno}: expected at least 4 columns")
    try:
        x, y, z = float(parts[1]), float(parts[2]), float(parts[3])
    except ValueError as e:
        raise ValueError(f"Line {lineno}: invalid coordinates") from e
    return Point((x * scale, y * scale, z * scale))


def read_xyz_points(filepath: str, bohr_units: bool = False) -> List[Point]:
    """
    Read a single-frame XYZ file and return its coordinates as Points.

    The first column (element symbol or any label) is ignored.
    """
    with open(filepath, "r") as f:
        lines = f.readlines()

    try:
        num_points = int(lines[0].strip())
    except (IndexError, ValueError):
        raise ValueError("Invalid XYZ format: first line should be point count")

    scale = BOHR_TO_ANGSTROM if bohr_units else 1.0
    point_lines = lines[2:2 + num_points]
    points = [_parse_point(line, i + 3, scale) for i, line in enumerate(point_lines)]

    if len(points) != num_points:
        raise ValueError(f"Expected {num_points} points, found {len(points)}")

    logger.debug("Read %d points from %s", len(points), filepath)
    return points


def read_xyz_frames(filepath: str, bohr_units: bool = False) -> Iterator[List[Point]]:
    """
    Stream frames from an xyz or multi-xyz file.

    Lines that cannot start a frame are skipped; a truncated final frame is dropped.
    """
    scale = BOHR_TO_ANGSTROM if bohr_units else 1.0
    lineno = 0
    with open(filepath, "r") as fh:
        while True:
            line = fh.readline()
            lineno += 1
            if not line:
                break
            line = line.strip()
            if not line:
                continue
            try:
                count = int(line)
            except ValueError:
                # Not a valid frame start; skip until next plausible header
                continue
            # comment line (energy, title, etc.)
            fh.readline()
            lineno += 1
            frame: List[Point] = []
            for _ in range(count):
                coord = fh.readline()
                lineno += 1
                if not coord:
                    logger.debug("Truncated frame ending at line %d", lineno)
                    return
                frame.append(_parse_point(coord, lineno, scale))
            yield frame
