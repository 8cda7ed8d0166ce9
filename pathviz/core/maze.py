# pathviz/core/maze.py
#!/usr/bin/env python3
"""
Randomized perfect-maze generator (iterative backtracker).

Passages live on odd coordinates, walls on even ones. Starting from the seed cell
(1, 1) the carver walks to unvisited passage cells two steps away and knocks out
the wall between them. Every passage cell is reached exactly once, so the carved
cells form a spanning tree: connected, no cycles, one route between any two cells.

The input grid is only read for its size; a fresh Grid is returned.
"""

import logging
import random
from typing import List, Optional, Set, Tuple

from pathviz.core.cells import get_neighbors
from pathviz.core.types import CellType, Grid, Position

logger = logging.getLogger(__name__)

MAZE_SEED = Position(1, 1)


def generate_maze(grid: Grid, rng: Optional[random.Random] = None) -> Tuple[Grid, Position, Position]:
    """
    Carve a maze the size of `grid`.

    Returns (maze, start, end). start is always the seed cell; end is the topmost
    EMPTY cell of the right-most column that has one. Neither cell is retyped here.
    """
    if not grid.in_bounds(MAZE_SEED):
        raise ValueError(f"Maze needs at least a 2x2 grid, got {grid.width}x{grid.height}")
    rng = rng or random.Random()

    maze = Grid.empty(grid.width, grid.height)
    for c in maze.iter_cells():
        passage = c.x % 2 == 1 and c.y % 2 == 1
        c.type = CellType.EMPTY if passage else CellType.OBSTACLE

    visited: Set[Position] = {MAZE_SEED}
    stack: List[Position] = [MAZE_SEED]
    while stack:
        current = stack.pop()
        unvisited = [n for n in get_neighbors(current, maze, step=2) if n not in visited]
        if not unvisited:
            continue

        # come back later for the other branches
        stack.append(current)
        chosen = rng.choice(unvisited)
        wall = Position((current.x + chosen.x) // 2, (current.y + chosen.y) // 2)
        maze.set_type(wall, CellType.EMPTY)
        visited.add(chosen)
        stack.append(chosen)

    end = _pick_end(maze)
    logger.debug("maze %dx%d carved, %d passage cells, start=%s end=%s",
                 maze.width, maze.height, len(visited), MAZE_SEED, end)
    return maze, MAZE_SEED, end


def _pick_end(maze: Grid) -> Position:
    end = MAZE_SEED
    for x in range(maze.width):
        for y in range(maze.height - 1, -1, -1):
            if maze.type_at((x, y)) is CellType.EMPTY:
                end = Position(x, y)
                break
    return end
