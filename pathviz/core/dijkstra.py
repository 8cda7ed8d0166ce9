# pathviz/core/dijkstra.py
#!/usr/bin/env python3

import logging
from dataclasses import dataclass
from math import inf
from typing import Dict, List, Optional, Tuple

from pathviz.core.cells import get_distance, get_neighbors
from pathviz.core.types import CellType, Grid, Position, SearchResult

logger = logging.getLogger(__name__)


@dataclass
class _Node:
    pos: Position
    distance: float = inf
    parent: Optional["_Node"] = None
    is_wall: bool = False


def _trace(node: _Node) -> List[Position]:
    path: List[Position] = []
    cur: Optional[_Node] = node
    while cur is not None:
        path.append(cur.pos)
        cur = cur.parent
    path.reverse()
    return path


def search(start: Tuple[int, int], end: Tuple[int, int], grid: Grid) -> SearchResult:
    """
    Dijkstra with a linear scan for the closest unsettled node (no heap).

    Every cell gets a node up front, in column-major order; that order decides ties.
    Walls are never relaxed, so they stay at infinity. Once the closest unsettled
    node is at infinity nothing reachable is left and the search gives up.
    """
    start, end = Position(*start), Position(*end)
    unsettled: List[_Node] = []
    by_pos: Dict[Position, _Node] = {}
    for c in grid.iter_cells():
        node = _Node(c.position, is_wall=c.type is CellType.OBSTACLE)
        if node.pos == start:
            node.distance = 0
        unsettled.append(node)
        by_pos[node.pos] = node

    explored: List[List[Position]] = []
    while unsettled:
        best = 0
        for i, node in enumerate(unsettled):
            if node.distance < unsettled[best].distance:
                best = i
        u = unsettled[best]
        if u.distance == inf:
            break

        if u.pos == end:
            path = _trace(u)
            logger.debug("dijkstra: path of %d cells after %d frames", len(path), len(explored))
            return SearchResult(path, explored)

        unsettled.pop(best)
        del by_pos[u.pos]

        relaxed: List[Position] = []
        for n in get_neighbors(u.pos, grid):
            v = by_pos.get(n)
            if v is None or v.is_wall:
                continue
            relaxed.append(v.pos)
            alt = u.distance + get_distance(u.pos, v.pos)
            if alt < v.distance:
                v.distance = alt
                v.parent = u
        explored.append(relaxed)

    logger.debug("dijkstra: no path after %d frames", len(explored))
    return SearchResult([], explored)
