# src/pipepuzzle/engine/moves.py
# Player move: quarter-turn one tile in place.

from ..grid import Grid


def can_rotate(grid: Grid, row: int, col: int) -> bool:
    return grid.in_bounds(row, col) and not grid.is_endpoint(row, col)


def rotate_tile(grid: Grid, row: int, col: int) -> bool:
    """
    Turn (row, col) 90 degrees clockwise (rotation 0->1->2->3->0).
    Out-of-range cells and the fixed start/goal tiles are left alone; returns
    False in that case so callers can skip counting the move.
    """
    if not can_rotate(grid, row, col):
        return False
    grid.get(row, col).turn()
    return True
