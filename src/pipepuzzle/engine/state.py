# src/pipepuzzle/engine/state.py
# GameSession orchestrator: new game, rotations, win check, clock and best score.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from ..config import DEFAULTS, GameConfig
from ..grid import Grid
from ..mapgen.generator import generate_grid
from ..rng import RandomSource, make_rng
from .moves import can_rotate, rotate_tile
from .solver import SolveResult, solve
from .timing import SecondTimer

GridFactory = Callable[[int, RandomSource], Grid]

log = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class Score:
    time: int
    rotations: int

    def beats(self, other: Optional["Score"]) -> bool:
        # Faster wins; equal times fall back to fewer rotations.
        return other is None or self < other


@dataclass
class RotateOut:
    accepted: bool
    solved: bool = False
    new_best: bool = False


class GameSession:
    def __init__(
        self,
        config: GameConfig = DEFAULTS,
        rng: Optional[RandomSource] = None,
        grid_factory: Optional[GridFactory] = None,
    ) -> None:
        self.config = config
        self.rng = rng or make_rng(config.seed)
        self._grid_factory = grid_factory or generate_grid

        self.grid: Optional[Grid] = None
        self.rotations = 0
        self.timer = SecondTimer()
        self.active = False

        # Results
        self.last_result: Optional[SolveResult] = None
        self.last_score: Optional[Score] = None
        self.best: Optional[Score] = None  # session-only

    @property
    def elapsed(self) -> int:
        return self.timer.elapsed

    # ---- Lifecycle ----
    def start(self) -> Grid:
        self.rotations = 0
        self.grid = self._grid_factory(self.config.grid_size, self.rng)
        self.last_result = None
        self.last_score = None
        self.active = True
        self.timer.restart()
        return self.grid

    new_game = start

    def _finish(self) -> bool:
        """Close out a won game; returns True when it set a new best."""
        self.active = False
        self.timer.stop()
        score = Score(time=self.timer.elapsed, rotations=self.rotations)
        self.last_score = score
        new_best = score.beats(self.best)
        if new_best:
            self.best = score
        log.debug("solved in %ss with %d rotations (best=%s)", score.time, score.rotations, self.best)
        return new_best

    # ---- Events ----
    def rotate(self, row: int, col: int) -> RotateOut:
        if not self.active or self.grid is None or not can_rotate(self.grid, row, col):
            return RotateOut(accepted=False)

        rotate_tile(self.grid, row, col)
        self.rotations += 1

        self.last_result = solve(self.grid)
        if not self.last_result.reachable:
            return RotateOut(accepted=True)
        return RotateOut(accepted=True, solved=True, new_best=self._finish())

    def tick(self) -> int:
        return self.timer.tick()
