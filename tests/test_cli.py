"""Tests for the xyzplane command line."""

import logging

import pytest

from xyzplane import __version__
from xyzplane.cli import main

SQUARE_XYZ = """4
unit square
X 0.0 0.0 1.0
X 1.0 0.0 1.0
X 1.0 1.0 1.0
X 0.0 1.0 1.0
"""


def test_version(capsys):
    assert main(["--version"]) == 0
    assert __version__ in capsys.readouterr().out


def test_missing_file_argument():
    with pytest.raises(SystemExit):
        main([])


def test_fit_square(tmp_path, capsys):
    path = tmp_path / "square.xyz"
    path.write_text(SQUARE_XYZ)
    assert main([str(path), "--backend", "scipy"]) == 0
    out = capsys.readouterr().out
    assert "Origin:         (0.500000, 0.500000, 1.000000)" in out
    assert "(planar" in out


def test_all_frames_reports_failure(tmp_path, capsys):
    path = tmp_path / "frames.xyz"
    path.write_text(SQUARE_XYZ + "1\nnan frame\nX nan 0.0 0.0\n")
    assert main([str(path), "--all-frames", "-d"]) == 1
    out = capsys.readouterr().out
    assert "# Frame 2" in out
    assert "Error: no plane could be fitted" in out


def test_relaxed_mode(tmp_path, capsys):
    """--relaxed widens the planarity verdict tolerance."""
    path = tmp_path / "bent.xyz"
    path.write_text("4\nbent\nX 0.0 0.0 0.2\nX 1.0 0.0 -0.2\nX 1.0 1.0 0.2\nX 0.0 1.0 -0.2\n")
    assert main([str(path)]) == 0
    assert "NOT planar" in capsys.readouterr().out
    assert main([str(path), "--relaxed"]) == 0
    assert "(planar, tolerance 0.5)" in capsys.readouterr().out


def test_debug_handler_added_once(tmp_path):
    path = tmp_path / "square.xyz"
    path.write_text(SQUARE_XYZ)
    main([str(path), "-d"])
    main([str(path), "-d"])
    assert len(logging.getLogger("xyzplane").handlers) == 1
