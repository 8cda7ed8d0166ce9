# pathviz/core/algorithms.py
from typing import Callable, Dict, Tuple

from pathviz.core import astar, bfs, dfs, dijkstra
from pathviz.core.types import Grid, SearchResult

Strategy = Callable[[Tuple[int, int], Tuple[int, int], Grid], SearchResult]

ALGORITHMS: Dict[str, Strategy] = {
    "BFS": bfs.search,
    "DFS": dfs.search,
    "Dijkstra": dijkstra.search,
    "A*": astar.search,
}

DEFAULT_ALGORITHM = "A*"

_ALIASES = {"astar": "A*", "a-star": "A*"}


def resolve_name(name: str) -> str:
    """Canonical display name for `name` (case-insensitive, 'astar' accepted)."""
    key = name.strip().lower()
    if key in _ALIASES:
        return _ALIASES[key]
    for label in ALGORITHMS:
        if label.lower() == key:
            return label
    raise KeyError(f"Unknown algorithm {name!r}; choose one of {', '.join(ALGORITHMS)}")


def get_algorithm(name: str) -> Strategy:
    return ALGORITHMS[resolve_name(name)]
