"""Unit tests for gridmaze/utils/logging.py."""

import logging
import random

import pytest

from gridmaze.generators import MazeAlgorithm, run_generator
from gridmaze.geometry import MazeGrid
from gridmaze.utils.logging import LoggedGeneration, MazeFormatter, MazeLogger, configure_logging, get_logger


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    configure_logging()


@pytest.mark.unit
def test_get_logger_returns_same_instance():
    assert get_logger("gridmaze.test") is get_logger("gridmaze.test")


@pytest.mark.unit
def test_get_logger_defaults_to_caller_module():
    assert get_logger().name == __name__


@pytest.mark.unit
def test_logger_does_not_propagate():
    logger = get_logger("gridmaze.test.propagate")
    assert logger.propagate is False
    assert logger.handlers


@pytest.mark.unit
def test_configure_updates_existing_loggers():
    logger = get_logger("gridmaze.test.level")
    configure_logging(level="DEBUG")

    assert logger.level == logging.DEBUG
    assert all(handler.level == logging.DEBUG for handler in logger.handlers)


@pytest.mark.unit
def test_configure_accepts_int_level():
    logger = get_logger("gridmaze.test.int_level")
    configure_logging(level=logging.ERROR)
    assert logger.level == logging.ERROR


# =============================================================================
# Component levels
# =============================================================================


@pytest.mark.unit
def test_component_level_applies_to_submodules():
    generators = get_logger("gridmaze.generators.kruskal")
    io_logger = get_logger("gridmaze.io.maze_file")
    configure_logging(level="WARNING", component_levels={"generators": "DEBUG"})

    assert generators.level == logging.DEBUG
    assert io_logger.level == logging.WARNING


@pytest.mark.unit
def test_longest_component_wins():
    configure_logging(
        level="WARNING",
        component_levels={"generators": "INFO", "generators.hunt_and_kill": "DEBUG"},
    )

    assert MazeLogger.level_for("gridmaze.generators.hunt_and_kill") == logging.DEBUG
    assert MazeLogger.level_for("gridmaze.generators.sidewinder") == logging.INFO
    assert MazeLogger.level_for("gridmaze.generatorsextra") == logging.WARNING


@pytest.mark.unit
def test_component_accepts_full_logger_name():
    configure_logging(level="ERROR", component_levels={"gridmaze.io": logging.INFO})

    assert MazeLogger.level_for("gridmaze.io.maze_file") == logging.INFO
    assert MazeLogger.level_for("gridmaze.cli") == logging.ERROR


@pytest.mark.unit
def test_reconfigure_clears_component_levels():
    configure_logging(component_levels={"generators": "DEBUG"})
    configure_logging()

    assert MazeLogger.level_for("gridmaze.generators.bsp") == logging.WARNING


# =============================================================================
# Output
# =============================================================================


@pytest.mark.unit
def test_log_to_file(tmp_path):
    log_file = tmp_path / "logs" / "maze.log"
    configure_logging(level="INFO", log_to_file=True, log_file_path=log_file, use_colors=False)

    logger = get_logger("gridmaze.test.file")
    logger.info("written to file")
    for handler in logger.handlers:
        handler.flush()

    assert "written to file" in log_file.read_text()


@pytest.mark.unit
def test_formatter_without_colors():
    formatter = MazeFormatter(use_colors=False, include_location=True)
    record = logging.LogRecord("gridmaze.x", logging.WARNING, "grid.py", 12, "careful", None, None)

    output = formatter.format(record)
    assert "careful" in output
    assert "WARNING" in output
    assert "gridmaze.x" in output
    assert "grid.py:12" in output


# =============================================================================
# LoggedGeneration
# =============================================================================


@pytest.mark.unit
def test_logged_generation_records_passages(tmp_path):
    log_file = tmp_path / "run.log"
    configure_logging(level="INFO", log_to_file=True, log_file_path=log_file, use_colors=False)
    logger = get_logger("gridmaze.test.generation")
    grid = MazeGrid(4, 3)

    with LoggedGeneration(logger, "KRUSKAL", grid) as run:
        run_generator(grid, MazeAlgorithm.KRUSKAL, random.Random(1))

    for handler in logger.handlers:
        handler.flush()

    assert run.links == 11
    assert run.duration is not None and run.duration >= 0
    assert "KRUSKAL carved 11 passages over 12 cells" in log_file.read_text()


@pytest.mark.unit
def test_logged_generation_does_not_swallow_errors():
    logger = get_logger("gridmaze.test.generation_error")

    with pytest.raises(RuntimeError):
        with LoggedGeneration(logger, "BSP", MazeGrid(2, 2)) as run:
            raise RuntimeError("boom")

    assert run.duration is not None
    assert run.links is None
