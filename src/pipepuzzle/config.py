from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class GameConfig:
    # The original board is a fixed 3x3.
    grid_size: int = 3
    tick_ms: int = 1000
    seed: Optional[int] = None   # None -> fresh system-seeded layouts
    tile_px: int = 96            # presentation only

    def __post_init__(self) -> None:
        if self.grid_size < 2:
            raise ValueError("grid_size must be >= 2")
        if self.tick_ms <= 0:
            raise ValueError("tick_ms must be positive")

# Global defaults (tools override fields from argparse)
DEFAULTS = GameConfig()
