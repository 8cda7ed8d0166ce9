# pathviz/core/astar.py
#!/usr/bin/env python3
"""
A* over the cell grid with an open list and a closed set.

Heuristic:
- Manhattan distance to the goal; admissible and consistent for 4-connected
  unit-cost moves, so the returned path is optimal.

Open-list selection (linear scan):
- lowest f = g + h, then lowest h, then whichever entered the open list first.

An already-open neighbor is updated in place (g and predecessor) when a strictly
cheaper route to it turns up; otherwise it is left alone.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple

from pathviz.core.cells import get_distance, get_neighbors
from pathviz.core.types import Grid, Position, SearchResult

logger = logging.getLogger(__name__)


@dataclass
class _Node:
    pos: Position
    g: int = 0
    h: int = 0
    parent: Optional["_Node"] = None

    @property
    def f(self) -> int:
        return self.g + self.h


def _better(a: _Node, b: _Node) -> bool:
    return a.f < b.f or (a.f == b.f and a.h < b.h)


def _reconstruct_path(node: _Node) -> List[Position]:
    path: List[Position] = []
    cur: Optional[_Node] = node
    while cur is not None:
        path.append(cur.pos)
        cur = cur.parent
    path.reverse()
    return path


def search(start: Tuple[int, int], end: Tuple[int, int], grid: Grid) -> SearchResult:
    start, end = Position(*start), Position(*end)
    first = _Node(start, g=0, h=get_distance(start, end))
    open_list: List[_Node] = [first]
    open_by_pos: Dict[Position, _Node] = {start: first}
    closed: Set[Position] = set()
    explored: List[List[Position]] = []

    while open_list:
        best = 0
        for i in range(1, len(open_list)):
            if _better(open_list[i], open_list[best]):
                best = i
        current = open_list[best]

        if current.pos == end:
            path = _reconstruct_path(current)
            logger.debug("astar: path of %d cells after %d frames", len(path), len(explored))
            return SearchResult(path, explored)

        open_list.pop(best)
        del open_by_pos[current.pos]
        closed.add(current.pos)
        explored.append([current.pos])

        for n in get_neighbors(current.pos, grid):
            if n in closed or grid.is_obstacle(n):
                continue
            g = current.g + get_distance(current.pos, n)

            seen = open_by_pos.get(n)
            if seen is not None:
                if g < seen.g:
                    seen.g = g
                    seen.parent = current
                continue

            node = _Node(n, g=g, h=get_distance(n, end), parent=current)
            open_list.append(node)
            open_by_pos[n] = node

    logger.debug("astar: open list exhausted after %d frames", len(explored))
    return SearchResult([], explored)
