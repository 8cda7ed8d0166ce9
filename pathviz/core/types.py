# pathviz/core/types.py
#!/usr/bin/env python3
import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple, Optional, Dict, Any, Tuple, Iterable


class Position(NamedTuple):
    x: int
    y: int


class CellType(Enum):
    EMPTY = "empty"
    START = "start"
    END = "end"
    OBSTACLE = "obstacle"
    PATH = "path"
    EXPLORED = "explored"


@dataclass
class Cell:
    x: int
    y: int
    type: CellType = CellType.EMPTY

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)


@dataclass
class Grid:
    cells: List[List[Cell]]             # [x][y]

    @classmethod
    def empty(cls, width: int, height: int) -> "Grid":
        if width < 1 or height < 1:
            raise ValueError(f"Grid must be at least 1x1, got {width}x{height}")
        return cls([[Cell(x, y) for y in range(height)] for x in range(width)])

    @property
    def width(self) -> int:
        return len(self.cells)

    @property
    def height(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def in_bounds(self, c: Tuple[int, int]) -> bool:
        x, y = c
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, c: Tuple[int, int]) -> Cell:
        x, y = c
        if not self.in_bounds(c):
            raise IndexError(f"{(x, y)} is outside a {self.width}x{self.height} grid")
        return self.cells[x][y]

    __getitem__ = cell

    def type_at(self, c: Tuple[int, int]) -> CellType:
        return self.cell(c).type

    def is_obstacle(self, c: Tuple[int, int]) -> bool:
        x, y = c
        return self.cells[x][y].type is CellType.OBSTACLE

    def set_type(self, c: Tuple[int, int], cell_type: CellType) -> None:
        self.cell(c).type = cell_type

    def iter_cells(self) -> Iterable[Cell]:
        for column in self.cells:
            yield from column

    def resize(self, width: int, height: int) -> bool:
        """
        Grow the grid to at least width x height.

        Never shrinks: a smaller request in either dimension keeps the current size
        there. Existing Cell objects stay where they are; only the newly exposed
        coordinates get fresh EMPTY cells. Returns True if anything was added.
        """
        old_w, old_h = self.width, self.height
        new_w, new_h = max(old_w, width), max(old_h, height)
        if (new_w, new_h) == (old_w, old_h):
            return False

        for x, column in enumerate(self.cells):
            column.extend(Cell(x, y) for y in range(old_h, new_h))
        for x in range(old_w, new_w):
            self.cells.append([Cell(x, y) for y in range(new_h)])
        return True

    def clear(self, *types: CellType) -> None:
        """Reset cells of the given types (all non-empty cells if none given) to EMPTY."""
        targets = set(types) if types else set(CellType) - {CellType.EMPTY}
        for c in self.iter_cells():
            if c.type in targets:
                c.type = CellType.EMPTY

    def find(self, cell_type: CellType) -> Optional[Position]:
        for c in self.iter_cells():
            if c.type is cell_type:
                return c.position
        return None

    def copy(self) -> "Grid":
        return copy.deepcopy(self)


class SearchResult(NamedTuple):
    path: List[Position]                # start..end inclusive, [] when unreachable
    explored: List[List[Position]]      # one frame per outer iteration


@dataclass
class StepResult:
    status: str                   # "idle" | "running" | "done" | "no_path"
    opened: List[Position] = field(default_factory=list)
    closed: List[Position] = field(default_factory=list)
    current: Optional[Position] = None
    path: Optional[List[Position]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)
