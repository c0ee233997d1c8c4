import random
from dataclasses import dataclass, field
from typing import Optional, Protocol

A = 16807
M = 0x7FFFFFFF  # 2^31-1

def pm_next(state: int) -> int:
    return (state * A) % M

def normalize_seed(seed: int) -> int:
    # Park–Miller state must lie in 1..M-1; 0 would lock the stream at 0.
    s = seed % M
    return s if s != 0 else 1


class RandomSource(Protocol):
    def below(self, n: int) -> int:
        """Return a uniform integer in [0, n)."""
        ...


@dataclass
class PMRandom:
    state: int

    def __post_init__(self) -> None:
        self.state = normalize_seed(self.state)

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def below(self, n: int) -> int:
        if n <= 0:
            raise ValueError("n must be positive")
        return self.next32() % n


@dataclass
class SystemRandom:
    rnd: random.Random = field(default_factory=random.Random)

    def below(self, n: int) -> int:
        if n <= 0:
            raise ValueError("n must be positive")
        return self.rnd.randrange(n)


def make_rng(seed: Optional[int] = None) -> RandomSource:
    """Seeded runs get the portable Park–Miller stream; unseeded ones use the system RNG."""
    if seed is None:
        return SystemRandom()
    return PMRandom(seed)
