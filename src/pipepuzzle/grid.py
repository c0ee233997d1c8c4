from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .tiles import DELTAS, Tile

Cell = Tuple[int, int]  # (row, col)


@dataclass
class Grid:
    rows: List[List[Tile]]

    def __post_init__(self) -> None:
        n = len(self.rows)
        if n == 0 or any(len(r) != n for r in self.rows):
            raise ValueError("grid must be a non-empty square matrix")

    @property
    def size(self) -> int:
        return len(self.rows)

    @property
    def start(self) -> Cell:
        return (0, 0)

    @property
    def goal(self) -> Cell:
        return (self.size - 1, self.size - 1)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def is_endpoint(self, row: int, col: int) -> bool:
        return (row, col) in (self.start, self.goal)

    def get(self, row: int, col: int) -> Tile:
        return self.rows[row][col]

    def cells(self) -> Iterator[Cell]:
        for r in range(self.size):
            for c in range(self.size):
                yield (r, c)

    def neighbor(self, cell: Cell, direction: int) -> Cell:
        dr, dc = DELTAS[direction]
        return (cell[0] + dr, cell[1] + dc)

    def as_label_matrix(self) -> List[List[str]]:
        return [[t.label() for t in row] for row in self.rows]
