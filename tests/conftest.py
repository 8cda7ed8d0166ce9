"""Shared fixtures for the pathviz test suite."""

import logging
from collections import deque

import pytest

from pathviz.core.cells import get_neighbors
from pathviz.core.types import CellType, Grid

logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


def grid_from_rows(rows):
    """Build a Grid from text rows, top row = highest y. '#' is an obstacle."""
    height = len(rows)
    width = len(rows[0])
    grid = Grid.empty(width, height)
    for i, row in enumerate(rows):
        y = height - 1 - i
        for x, ch in enumerate(row):
            if ch == "#":
                grid.set_type((x, y), CellType.OBSTACLE)
    return grid


def reachable(grid, start):
    """Every non-obstacle cell reachable from start (start included)."""
    seen = {tuple(start)}
    queue = deque([tuple(start)])
    while queue:
        cur = queue.popleft()
        for n in get_neighbors(cur, grid):
            if n not in seen and not grid.is_obstacle(n):
                seen.add(n)
                queue.append(n)
    return seen


def assert_valid_path(path, start, end, grid):
    assert path[0] == start
    assert path[-1] == end
    for a, b in zip(path, path[1:]):
        assert abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1, f"{a} -> {b} is not a single step"
    for p in path:
        assert grid.in_bounds(p)
        assert not grid.is_obstacle(p), f"path crosses obstacle at {p}"


@pytest.fixture
def make_grid():
    return grid_from_rows


@pytest.fixture
def open_3x3():
    return Grid.empty(3, 3)


@pytest.fixture
def check_path():
    return assert_valid_path


@pytest.fixture
def reachable_from():
    return reachable
