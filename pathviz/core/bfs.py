# pathviz/core/bfs.py
#!/usr/bin/env python3
"""
Breadth-first search over the cell grid.

- FIFO frontier seeded with the start.
- A cell is marked visited when it is dequeued, not when it is enqueued, so a cell
  can sit in the queue more than once; repeat dequeues are skipped.
- Every enqueue rewrites the neighbor's predecessor. All writers of an unvisited
  cell belong to the same BFS level, so the last writer is as good as the first.
- Stops when the goal is dequeued. Shortest path by hop count.

One exploration frame per visited cell.
"""

import logging
from collections import deque
from typing import Deque, Dict, List, Set, Tuple

from pathviz.core.cells import get_neighbors, reconstruct_path
from pathviz.core.types import Grid, Position, SearchResult

logger = logging.getLogger(__name__)


def search(start: Tuple[int, int], end: Tuple[int, int], grid: Grid) -> SearchResult:
    start, end = Position(*start), Position(*end)
    queue: Deque[Position] = deque([start])
    visited: Set[Position] = set()
    parent: Dict[Position, Position] = {}
    explored: List[List[Position]] = []

    while queue:
        current = queue.popleft()
        if current == end:
            path = reconstruct_path(parent, start, end)
            logger.debug("bfs: path of %d cells after %d frames", len(path), len(explored))
            return SearchResult(path, explored)

        if current in visited:
            continue
        visited.add(current)
        explored.append([current])

        for n in get_neighbors(current, grid):
            if grid.is_obstacle(n) or n in visited:
                continue
            parent[n] = current
            queue.append(n)

    logger.debug("bfs: no path, %d cells reachable", len(visited))
    return SearchResult([], explored)
