# pathviz/core/cells.py
"""Neighbor and distance primitives shared by every strategy and the maze generator."""

from typing import Dict, List, Tuple

from pathviz.core.types import Grid, Position

# up, right, down, left; strategies that scan linearly rely on this order
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))


def get_neighbors(pos: Tuple[int, int], grid: Grid, step: int = 1) -> List[Position]:
    """Return the in-bounds 4-connected neighbors of pos, `step` cells away."""
    x, y = pos
    out: List[Position] = []
    for dx, dy in DIRECTIONS:
        n = Position(x + dx * step, y + dy * step)
        if grid.in_bounds(n):
            out.append(n)
    return out


def get_distance(a: Tuple[int, int], b: Tuple[int, int]) -> int:
    """Manhattan distance. Unit edge cost and the A* heuristic."""
    (ax, ay), (bx, by) = a, b
    return abs(ax - bx) + abs(ay - by)


def reconstruct_path(parent: Dict[Position, Position], start: Position, end: Position) -> List[Position]:
    """Walk predecessor links back from end to start, then reverse."""
    path: List[Position] = [end]
    cur = end
    while cur != start:
        cur = parent[cur]
        path.append(cur)
    path.reverse()
    return path
