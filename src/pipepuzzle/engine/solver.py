# src/pipepuzzle/engine/solver.py
# Start-to-goal connectivity check over the current tile rotations.
# Both sides of a shared edge must be open; a half-open pipe does not connect.

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, Optional, Tuple

from ..grid import Cell, Grid
from ..tiles import DIRECTIONS, Tile, opposite


@dataclass(frozen=True)
class SolveResult:
    reachable: bool
    path: Tuple[Cell, ...] = ()


def links(a: Tile, b: Tile, direction: int) -> bool:
    """True when `b` sits in `direction` from `a` and the two pipes meet."""
    return a.is_open(direction) and b.is_open(opposite(direction))


def _trace_back(parent: Dict[Cell, Optional[Cell]], goal: Cell) -> Tuple[Cell, ...]:
    out = []
    cur: Optional[Cell] = goal
    while cur is not None:
        out.append(cur)
        cur = parent[cur]
    out.reverse()
    return tuple(out)


def solve(grid: Grid) -> SolveResult:
    start, goal = grid.start, grid.goal
    # parent doubles as the visited set
    parent: Dict[Cell, Optional[Cell]] = {start: None}
    queue: Deque[Cell] = deque([start])

    while queue:
        cell = queue.popleft()
        if cell == goal:
            return SolveResult(True, _trace_back(parent, goal))
        tile = grid.get(*cell)
        for d in DIRECTIONS:
            nxt = grid.neighbor(cell, d)
            if nxt in parent or not grid.in_bounds(*nxt):
                continue
            if links(tile, grid.get(*nxt), d):
                parent[nxt] = cell
                queue.append(nxt)

    return SolveResult(False, ())
