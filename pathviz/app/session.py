# pathviz/app/session.py
"""
Editing session: the one place the grid is mutated.

The viewer forwards clicks and keys here. Searches run on a copy of the grid and
their frames are painted back onto the live grid one tick at a time.
"""

import logging
import random
from typing import Optional, Tuple

from pathviz.core.algorithms import DEFAULT_ALGORITHM, get_algorithm, resolve_name
from pathviz.core.maze import generate_maze
from pathviz.core.playback import Playback
from pathviz.core.types import CellType, Grid, Position, StepResult

logger = logging.getLogger(__name__)

_ENDPOINTS = (CellType.START, CellType.END)


class Session:
    def __init__(self, width: int, height: int, algorithm: str = DEFAULT_ALGORITHM):
        self.grid = Grid.empty(width, height)
        self.algorithm = resolve_name(algorithm)
        self.playback: Optional[Playback] = None
        self.last_step: Optional[StepResult] = None

        self.start = Position(min(1, width - 1), min(1, height - 1))
        self.end = Position(max(0, width - 2), max(0, height - 2))
        if self.end == self.start:
            self.end = Position(width - 1, height - 1)
        self.grid.set_type(self.start, CellType.START)
        self.grid.set_type(self.end, CellType.END)

    @property
    def busy(self) -> bool:
        """True while a playback still has frames to show."""
        return self.playback is not None and not self.playback.finished

    def _refuse(self, what: str) -> bool:
        logger.info("ignored %s while %s is animating", what, self.algorithm)
        return False

    # ---------- editing ----------
    def click(self, pos: Tuple[int, int]) -> bool:
        """Toggle a cell between EMPTY and OBSTACLE. Endpoints are left alone."""
        if self.busy:
            return self._refuse("edit")
        pos = Position(*pos)
        if not self.grid.in_bounds(pos) or pos in (self.start, self.end):
            return False
        cell = self.grid.cell(pos)
        cell.type = CellType.EMPTY if cell.type is CellType.OBSTACLE else CellType.OBSTACLE
        return True

    def place_start(self, pos: Tuple[int, int]) -> bool:
        return self._place(Position(*pos), CellType.START)

    def place_end(self, pos: Tuple[int, int]) -> bool:
        return self._place(Position(*pos), CellType.END)

    def _place(self, pos: Position, kind: CellType) -> bool:
        if self.busy:
            return self._refuse(f"moving {kind.value}")
        other = self.end if kind is CellType.START else self.start
        if not self.grid.in_bounds(pos) or pos == other:
            return False

        old = self.start if kind is CellType.START else self.end
        self.grid.set_type(old, CellType.EMPTY)
        self.grid.set_type(pos, kind)
        if kind is CellType.START:
            self.start = pos
        else:
            self.end = pos
        return True

    def select_algorithm(self, name: str) -> str:
        self.algorithm = resolve_name(name)
        return self.algorithm

    def resize(self, width: int, height: int) -> bool:
        grown = self.grid.resize(width, height)
        if grown:
            logger.info("grid grown to %dx%d", self.grid.width, self.grid.height)
        return grown

    def clear_path(self) -> None:
        self.grid.clear(CellType.PATH, CellType.EXPLORED)
        self.playback = None
        self.last_step = None

    def clear_board(self) -> None:
        self.grid.clear(CellType.OBSTACLE, CellType.PATH, CellType.EXPLORED)
        self.playback = None
        self.last_step = None

    def generate_maze(self, rng: Optional[random.Random] = None) -> bool:
        if self.busy:
            return self._refuse("maze generation")
        maze, start, end = generate_maze(self.grid, rng)
        maze.set_type(start, CellType.START)
        if end != start:
            maze.set_type(end, CellType.END)
        self.grid, self.start, self.end = maze, start, end
        self.playback = None
        self.last_step = None
        logger.info("maze %dx%d generated, start=%s end=%s", maze.width, maze.height, start, end)
        return True

    # ---------- searching ----------
    def run(self) -> Playback:
        """Search from start to end on a snapshot of the grid and queue the frames."""
        self.clear_path()
        strategy = get_algorithm(self.algorithm)
        result = strategy(self.start, self.end, self.grid.copy())
        logger.info("%s: %d frames, path of %d cells", self.algorithm,
                    len(result.explored), len(result.path))
        self.playback = Playback(result, name=self.algorithm)
        return self.playback

    def tick(self) -> Optional[StepResult]:
        """Show the next frame on the grid. None when nothing has been run."""
        if self.playback is None:
            return None
        res = self.playback.step()
        for p in res.closed:
            if self.grid.type_at(p) is CellType.EMPTY:
                self.grid.set_type(p, CellType.EXPLORED)
        if res.path:
            for p in res.path:
                if self.grid.type_at(p) not in _ENDPOINTS:
                    self.grid.set_type(p, CellType.PATH)
        self.last_step = res
        return res
