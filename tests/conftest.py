"""
Pytest configuration and shared fixtures for the gridmaze test suite.

This module provides common fixtures, test configuration, and utilities
used across the entire test suite.
"""

import random
import shutil
import tempfile
from collections import deque
from pathlib import Path

import pytest

from gridmaze.geometry import Direction, MazeGrid

# =============================================================================
# Test Configuration
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (slower, cross-component)")
    config.addinivalue_line("markers", "slow: Slow tests (may take >10 seconds)")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test paths."""
    for item in items:
        test_path = str(item.fspath)

        if "/unit/" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)

        if "large" in item.name or "slow" in item.name:
            item.add_marker(pytest.mark.slow)


# =============================================================================
# Grid Fixtures
# =============================================================================


@pytest.fixture
def rng():
    """Seeded random source for reproducible tests."""
    return random.Random(42)


@pytest.fixture
def small_grid():
    """Unlinked 5x4 grid."""
    return MazeGrid(5, 4)


@pytest.fixture
def linked_grid():
    """3x3 grid with every adjacent pair linked."""
    return MazeGrid(3, 3, all_linked=True)


@pytest.fixture
def irregular_grid():
    """
    6x5 grid with a contiguous hole in the middle.

    Removed cells: (2,1), (3,1), (2,2), (3,2). Every remaining cell still
    reaches every other through the ring around the hole.
    """
    grid = MazeGrid(6, 5)
    for x, y in [(2, 1), (3, 1), (2, 2), (3, 2)]:
        grid.remove_cell(x, y)
    return grid


@pytest.fixture
def split_grid():
    """3x3 grid whose middle column is removed, leaving two separate regions."""
    grid = MazeGrid(3, 3)
    for y in range(3):
        grid.remove_cell(1, y)
    return grid


# =============================================================================
# File System Fixtures
# =============================================================================


@pytest.fixture
def temp_directory():
    """Temporary directory for file operations."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)


# =============================================================================
# Maze Property Fixtures
# =============================================================================


def _links_are_consistent(grid):
    for cell in grid.cells():
        for direction in Direction:
            neighbour = grid.linked_neighbour(cell, direction)
            if cell.links[direction] is None:
                continue
            if neighbour is None:
                return False
            if neighbour is not grid.adjacent(cell, direction):
                return False
            if grid.linked_neighbour(neighbour, direction.opposite()) is not cell:
                return False
    return True


def _reachable_count(grid):
    start = next(grid.cells(), None)
    if start is None:
        return 0
    seen = {start.index}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for neighbour in grid.linked_cells(current):
            if neighbour.index not in seen:
                seen.add(neighbour.index)
                queue.append(neighbour)
    return len(seen)


@pytest.fixture
def verify_maze():
    """
    Checker returning the structural properties of a generated maze.

    A perfect maze has symmetric links, every live cell reachable through
    passages and exactly ``cell_count - 1`` passages.
    """

    def _verify(grid):
        passage_count = grid.link_count()
        expected = max(grid.cell_count - 1, 0)
        is_connected = _reachable_count(grid) == grid.cell_count
        is_consistent = _links_are_consistent(grid)
        return {
            "is_perfect": is_connected and is_consistent and passage_count == expected,
            "is_connected": is_connected,
            "is_consistent": is_consistent,
            "passage_count": passage_count,
            "expected_passages": expected,
        }

    return _verify
