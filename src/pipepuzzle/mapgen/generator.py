# src/pipepuzzle/mapgen/generator.py
# Board generator: hidden solvable staircase + scrambled rotations + random filler.

import logging
from typing import List, Optional, Tuple

from ..grid import Grid
from ..rng import RandomSource, make_rng
from ..tiles import SHAPES, Tile, distinct_rotations
from .path import walk_monotone_path
from .shapes import required_dirs, shape_for_dirs

Cell = Tuple[int, int]

log = logging.getLogger(__name__)


def place_path(cells: List[List[Optional[Tile]]], path: List[Cell]) -> None:
    """Write the correctly shaped (and, for now, correctly rotated) tile on every path cell."""
    for i, (r, c) in enumerate(path):
        shape, rot = shape_for_dirs(required_dirs(path, i))
        cells[r][c] = Tile(shape, rot, on_path=True)


def scramble_path(cells: List[List[Optional[Tile]]], path: List[Cell], rng: RandomSource) -> None:
    # Endpoints keep their fixed orientation; only the shape is a hint elsewhere.
    for r, c in path[1:-1]:
        tile = cells[r][c]
        tile.rotation = rng.below(distinct_rotations(tile.shape))


def fill_remainder(cells: List[List[Optional[Tile]]], rng: RandomSource) -> None:
    for row in cells:
        for c, tile in enumerate(row):
            if tile is None:
                shape = SHAPES[rng.below(len(SHAPES))]
                row[c] = Tile(shape, rng.below(4), on_path=False)


def generate_grid(size: int, rng: Optional[RandomSource] = None) -> Grid:
    if size < 2:
        raise ValueError("grid size must be >= 2")
    rng = rng or make_rng()

    cells: List[List[Optional[Tile]]] = [[None] * size for _ in range(size)]
    path = walk_monotone_path(size, rng)
    place_path(cells, path)
    scramble_path(cells, path, rng)
    fill_remainder(cells, rng)

    log.debug("generated %dx%d grid, path=%s", size, size, path)
    return Grid(rows=cells)  # type: ignore[arg-type]
