# src/pipepuzzle/engine/timing.py
# Owned game clock. The runner calls tick() once per elapsed period; the session
# starts/stops it so no tick can land after a game ends or restarts.

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SecondTimer:
    elapsed: int = 0
    running: bool = False

    def start(self) -> None:
        self.running = True

    def stop(self) -> None:
        self.running = False

    def reset(self) -> None:
        """Stop and zero the clock."""
        self.running = False
        self.elapsed = 0

    def restart(self) -> None:
        self.reset()
        self.start()

    def tick(self) -> int:
        if self.running:
            self.elapsed += 1
        return self.elapsed
