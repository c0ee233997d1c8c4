# src/pipepuzzle/mapgen/path.py
# Random monotone staircase from the top-left to the bottom-right cell.

from typing import List, Tuple

from ..rng import RandomSource

Cell = Tuple[int, int]


def walk_monotone_path(size: int, rng: RandomSource) -> List[Cell]:
    """
    Step one row down or one column right until (size-1, size-1).
    Picks uniformly between the legal moves; at the far edge the move is forced
    (no draw is consumed then). Always returns 2*size - 1 distinct cells.
    """
    path: List[Cell] = [(0, 0)]
    r = c = 0
    last = size - 1
    while (r, c) != (last, last):
        moves: List[Cell] = []
        if r < last:
            moves.append((r + 1, c))
        if c < last:
            moves.append((r, c + 1))
        r, c = moves[rng.below(len(moves))] if len(moves) > 1 else moves[0]
        path.append((r, c))
    return path
