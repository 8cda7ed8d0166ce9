"""Properties every search strategy must satisfy."""

import random

import pytest

from pathviz.core import astar, bfs, dfs, dijkstra
from pathviz.core.algorithms import ALGORITHMS, DEFAULT_ALGORITHM, get_algorithm, resolve_name
from pathviz.core.types import CellType, Grid, Position, SearchResult

STRATEGIES = {
    "BFS": bfs.search,
    "DFS": dfs.search,
    "Dijkstra": dijkstra.search,
    "A*": astar.search,
}
OPTIMAL = ["BFS", "Dijkstra", "A*"]


def random_grid(seed, width=9, height=7, density=0.3):
    rng = random.Random(seed)
    grid = Grid.empty(width, height)
    for c in grid.iter_cells():
        if rng.random() < density:
            c.type = CellType.OBSTACLE
    free = [c.position for c in grid.iter_cells() if c.type is CellType.EMPTY]
    start, end = rng.sample(free, 2)
    return grid, start, end


@pytest.mark.parametrize("name", list(STRATEGIES))
class TestCommonContract:

    def test_returns_search_result(self, name, open_3x3):
        result = STRATEGIES[name]((0, 0), (2, 2), open_3x3)
        assert isinstance(result, SearchResult)
        path, explored = result
        assert path is result.path
        assert explored is result.explored

    def test_open_3x3_path_is_valid(self, name, open_3x3, check_path):
        path, explored = STRATEGIES[name]((0, 0), (2, 2), open_3x3)
        check_path(path, (0, 0), (2, 2), open_3x3)
        assert len(path) >= 5
        assert explored

    def test_start_equals_end(self, name, open_3x3):
        path, explored = STRATEGIES[name]((1, 1), (1, 1), open_3x3)
        assert path == [(1, 1)]
        assert explored == []

    def test_blocked_corridor_has_no_path(self, name, make_grid):
        grid = make_grid([".#."])
        path, explored = STRATEGIES[name]((0, 0), (2, 0), grid)
        assert path == []
        assert all(p == (0, 0) for frame in explored for p in frame)

    def test_disconnected_regions(self, name, make_grid):
        grid = make_grid([
            "..#..",
            "..#..",
            "..#..",
            "..#..",
            "..#..",
        ])
        path, explored = STRATEGIES[name]((0, 0), (4, 4), grid)
        assert path == []
        for frame in explored:
            for p in frame:
                assert p.x < 2

    def test_does_not_mutate_grid(self, name, make_grid):
        grid = make_grid([
            "....",
            ".##.",
            "....",
        ])
        before = [c.type for c in grid.iter_cells()]
        STRATEGIES[name]((0, 0), (3, 2), grid)
        assert [c.type for c in grid.iter_cells()] == before

    def test_endpoint_cell_types_are_not_obstacles(self, name, open_3x3, check_path):
        open_3x3.set_type((0, 0), CellType.START)
        open_3x3.set_type((2, 2), CellType.END)
        path, _ = STRATEGIES[name]((0, 0), (2, 2), open_3x3)
        check_path(path, (0, 0), (2, 2), open_3x3)

    def test_goal_behind_obstacle_ring(self, name, make_grid):
        grid = make_grid([
            ".....",
            ".###.",
            ".#.#.",
            ".###.",
            ".....",
        ])
        path, _ = STRATEGIES[name]((0, 0), (2, 2), grid)
        assert path == []

    def test_stateless_between_calls(self, name, make_grid):
        grid = make_grid([
            "...#",
            ".#..",
            "....",
        ])
        first = STRATEGIES[name]((0, 0), (3, 2), grid)
        second = STRATEGIES[name]((0, 0), (3, 2), grid)
        assert first == second


class TestDisconnectedExplorationCoverage:

    @pytest.mark.parametrize("name", ["BFS", "DFS"])
    def test_frames_cover_exactly_the_start_component(self, name, make_grid, reachable_from):
        grid = make_grid([
            "..#..",
            "..#..",
            "..#..",
            "..#..",
            "..#..",
        ])
        _, explored = STRATEGIES[name]((0, 0), (4, 4), grid)
        covered = {p for frame in explored for p in frame}
        assert covered == reachable_from(grid, (0, 0))
        assert len(covered) == 10


class TestOptimality:

    @pytest.mark.parametrize("name", OPTIMAL)
    def test_open_3x3_shortest(self, name, open_3x3):
        path, _ = STRATEGIES[name]((0, 0), (2, 2), open_3x3)
        assert len(path) == 5

    @pytest.mark.parametrize("seed", range(30))
    def test_random_grids_agree_on_length(self, seed, check_path):
        grid, start, end = random_grid(seed)
        results = {name: fn(start, end, grid) for name, fn in STRATEGIES.items()}

        lengths = {name: len(results[name].path) for name in OPTIMAL}
        assert len(set(lengths.values())) == 1, lengths

        found = {name: bool(r.path) for name, r in results.items()}
        assert len(set(found.values())) == 1, found

        if results["BFS"].path:
            for name, r in results.items():
                check_path(r.path, start, end, grid)
            assert len(results["DFS"].path) >= lengths["BFS"]

    @pytest.mark.parametrize("name", OPTIMAL)
    def test_winding_corridor(self, name, make_grid, check_path):
        grid = make_grid([
            ".....",
            "####.",
            ".....",
            ".####",
            ".....",
        ])
        path, _ = STRATEGIES[name]((0, 0), (0, 4), grid)
        check_path(path, (0, 0), (0, 4), grid)
        assert len(path) == 13


class TestRegistry:

    def test_all_four_registered(self):
        assert list(ALGORITHMS) == ["BFS", "DFS", "Dijkstra", "A*"]
        assert DEFAULT_ALGORITHM in ALGORITHMS

    @pytest.mark.parametrize("raw, expected", [
        ("bfs", "BFS"),
        ("DIJKSTRA", "Dijkstra"),
        ("a*", "A*"),
        ("astar", "A*"),
        (" dfs ", "DFS"),
    ])
    def test_resolve_name(self, raw, expected):
        assert resolve_name(raw) == expected

    def test_get_algorithm(self):
        assert get_algorithm("bfs") is bfs.search
        assert get_algorithm("A*") is astar.search

    def test_unknown_name(self):
        with pytest.raises(KeyError, match="greedy"):
            get_algorithm("greedy")

    def test_position_inputs_accept_plain_tuples(self):
        path, _ = get_algorithm("BFS")((0, 0), (1, 0), Grid.empty(2, 1))
        assert path == [Position(0, 0), Position(1, 0)]
