#!/usr/bin/env python3
"""
Unit tests for gridmaze/cli.py

Tests the click command-line interface including:
- generate: text output, maze file, image, config files
- show: loading and rendering maze files
- algorithms: listing tokens
- Exit codes for configuration errors
"""

import json
import struct

import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402
from click.testing import CliRunner  # noqa: E402

from gridmaze.cli import EXIT_CONFIGURATION_ERROR, main  # noqa: E402
from gridmaze.generators import generate_maze  # noqa: E402
from gridmaze.io import load_maze, save_maze  # noqa: E402
from gridmaze.utils.logging import configure_logging  # noqa: E402


@pytest.fixture
def runner():
    yield CliRunner()
    # Rebind log handlers away from the runner's captured streams
    configure_logging()


# ===================================================================
# Test generate
# ===================================================================


@pytest.mark.unit
def test_generate_prints_maze(runner):
    result = runner.invoke(main, ["generate", "--width", "6", "--height", "3", "--seed", "1"])

    assert result.exit_code == 0, result.output
    lines = result.stdout.strip("\n").split("\n")
    assert len(lines) == 3
    assert all(len(line) == 6 for line in lines)


@pytest.mark.unit
def test_generate_is_reproducible(runner):
    args = ["generate", "-w", "8", "-h", "5", "-a", "kruskal", "-s", "7"]
    first = runner.invoke(main, args)
    second = runner.invoke(main, args)

    assert first.exit_code == 0
    assert first.stdout == second.stdout


@pytest.mark.unit
def test_generate_writes_maze_file(runner, tmp_path):
    output = tmp_path / "maze.maze"
    result = runner.invoke(
        main, ["generate", "-w", "5", "-h", "4", "-a", "hunt", "-s", "2", "--output", str(output), "--no-print"]
    )

    assert result.exit_code == 0, result.output
    assert result.stdout == ""
    grid = load_maze(output)
    assert (grid.width, grid.height) == (5, 4)
    assert grid.link_count() == 19


@pytest.mark.unit
def test_generate_writes_image(runner, tmp_path):
    image = tmp_path / "maze.png"
    result = runner.invoke(main, ["generate", "-w", "5", "-h", "5", "--image", str(image), "--no-print"])

    assert result.exit_code == 0, result.output
    assert image.exists()


@pytest.mark.unit
def test_generate_from_config_file(runner, tmp_path):
    config = tmp_path / "maze.json"
    config.write_text(json.dumps({"width": 4, "height": 2, "algorithm": "zigzag"}))

    result = runner.invoke(main, ["generate", "--config", str(config)])

    assert result.exit_code == 0, result.output
    assert result.stdout.strip("\n").split("\n") == ["╞══╗", "╞══╝"]


@pytest.mark.unit
def test_command_line_overrides_config(runner, tmp_path):
    config = tmp_path / "maze.yaml"
    config.write_text("width: 4\nheight: 2\n")

    result = runner.invoke(main, ["generate", "--config", str(config), "--width", "9"])

    assert result.exit_code == 0, result.output
    lines = result.stdout.strip("\n").split("\n")
    assert len(lines) == 2
    assert len(lines[0]) == 9


@pytest.mark.unit
def test_generate_verbose(runner):
    result = runner.invoke(main, ["generate", "-w", "3", "-h", "3", "-a", "bsp", "--verbose"])

    assert result.exit_code == 0, result.output
    assert "Algorithm: bsp" in result.stderr
    assert "BSP carved 8 passages over 9 cells" in result.stderr


# ===================================================================
# Test error handling
# ===================================================================


@pytest.mark.unit
def test_unknown_algorithm_exit_code(runner):
    result = runner.invoke(main, ["generate", "--algorithm", "prim"])

    assert result.exit_code == EXIT_CONFIGURATION_ERROR == 2
    assert "Error" in result.stderr


@pytest.mark.unit
def test_invalid_dimensions_exit_code(runner):
    result = runner.invoke(main, ["generate", "--width", "0"])

    assert result.exit_code == 2
    assert "width" in result.stderr


@pytest.mark.unit
def test_missing_config_exit_code(runner, tmp_path):
    result = runner.invoke(main, ["generate", "--config", str(tmp_path / "missing.yaml")])

    assert result.exit_code == 2
    assert "not found" in result.stderr


@pytest.mark.unit
def test_show_bad_file_exit_code(runner, tmp_path):
    path = tmp_path / "bad.maze"
    path.write_bytes(b"garbage")

    result = runner.invoke(main, ["show", str(path)])

    assert result.exit_code == 2
    assert "Not a valid maze file" in result.stderr


@pytest.mark.unit
def test_config_directory_exit_code(runner, tmp_path):
    path = tmp_path / "dir.yaml"
    path.mkdir()

    result = runner.invoke(main, ["generate", "--config", str(path)])

    assert result.exit_code == 2
    assert "Could not read" in result.stderr


@pytest.mark.unit
def test_null_algorithm_config_exit_code(runner, tmp_path):
    config = tmp_path / "maze.yaml"
    config.write_text("width: 5\nheight: 5\nalgorithm: ~\n")

    result = runner.invoke(main, ["generate", "--config", str(config)])

    assert result.exit_code == 2
    assert "algorithm" in result.stderr


@pytest.mark.unit
def test_show_oversized_header_exit_code(runner, tmp_path):
    path = tmp_path / "huge.maze"
    path.write_bytes(b"MAZE" + struct.pack("<ii", 2147483647, 2147483647))

    result = runner.invoke(main, ["show", str(path)])

    assert result.exit_code == 2
    assert "2147483647x2147483647" in result.stderr


# ===================================================================
# Test show / algorithms
# ===================================================================


@pytest.mark.unit
def test_show_prints_saved_maze(runner, tmp_path):
    path = save_maze(tmp_path / "maze.maze", generate_maze(3, 3, algorithm="bsp", seed=0))

    result = runner.invoke(main, ["show", str(path)])

    assert result.exit_code == 0, result.output
    assert len(result.stdout.strip("\n").split("\n")) == 3


@pytest.mark.unit
def test_show_renders_image(runner, tmp_path):
    path = save_maze(tmp_path / "maze.maze", generate_maze(4, 4, seed=3))
    image = tmp_path / "maze.png"

    result = runner.invoke(main, ["show", str(path), "--image", str(image), "--cell-size", "12"])

    assert result.exit_code == 0, result.output
    assert image.exists()


@pytest.mark.unit
def test_show_missing_file(runner, tmp_path):
    result = runner.invoke(main, ["show", str(tmp_path / "missing.maze")])
    assert result.exit_code != 0


@pytest.mark.unit
def test_algorithms_lists_tokens(runner):
    result = runner.invoke(main, ["algorithms"])

    assert result.exit_code == 0
    names = result.stdout.split()
    assert names[:6] == ["aldous", "huntkill", "binary", "sidewinder", "bsp", "kruskal"]
    assert "hunt" in names
