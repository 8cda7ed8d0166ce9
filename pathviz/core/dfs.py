# pathviz/core/dfs.py
#!/usr/bin/env python3
"""
Depth-first search: BFS bookkeeping with a LIFO stack instead of a queue.

Finds some obstacle-free path to the goal, usually not the shortest one.
"""

import logging
from typing import Dict, List, Set, Tuple

from pathviz.core.cells import get_neighbors, reconstruct_path
from pathviz.core.types import Grid, Position, SearchResult

logger = logging.getLogger(__name__)


def search(start: Tuple[int, int], end: Tuple[int, int], grid: Grid) -> SearchResult:
    start, end = Position(*start), Position(*end)
    stack: List[Position] = [start]
    visited: Set[Position] = set()
    parent: Dict[Position, Position] = {}
    explored: List[List[Position]] = []

    while stack:
        current = stack.pop()
        if current == end:
            path = reconstruct_path(parent, start, end)
            logger.debug("dfs: path of %d cells after %d frames", len(path), len(explored))
            return SearchResult(path, explored)

        if current in visited:
            continue
        visited.add(current)
        explored.append([current])

        for n in get_neighbors(current, grid):
            if grid.is_obstacle(n) or n in visited:
                continue
            # the newest push is popped first, so the newest parent is the one used
            parent[n] = current
            stack.append(n)

    logger.debug("dfs: no path, %d cells reachable", len(visited))
    return SearchResult([], explored)
