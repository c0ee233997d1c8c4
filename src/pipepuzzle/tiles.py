# Pipe shapes, port directions and the shape x rotation -> open-ports table.

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple

Ports = Tuple[bool, bool, bool, bool]  # up, right, down, left

# Port directions, in solver exploration order.
UP, RIGHT, DOWN, LEFT = 0, 1, 2, 3
DIRECTIONS = (UP, RIGHT, DOWN, LEFT)

# (drow, dcol) per direction
DELTAS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def opposite(direction: int) -> int:
    return (direction + 2) % 4


class Shape(Enum):
    STRAIGHT = "straight"
    ELBOW = "elbow"
    TEE = "t"
    CROSS = "cross"

    @property
    def letter(self) -> str:
        return _LETTERS[self]


# Draw order for random fills.
SHAPES = (Shape.STRAIGHT, Shape.ELBOW, Shape.TEE, Shape.CROSS)

_LETTERS = {Shape.STRAIGHT: "S", Shape.ELBOW: "E", Shape.TEE: "T", Shape.CROSS: "C"}

# Rotation 0 patterns; each further rotation turns the tile 90 degrees clockwise.
_BASE_PORTS = {
    Shape.STRAIGHT: (True, False, True, False),
    Shape.ELBOW:    (True, True, False, False),
    Shape.TEE:      (True, True, True, False),
    Shape.CROSS:    (True, True, True, True),
}


def _rotate_ports(base: Ports, rotation: int) -> Ports:
    return tuple(base[(d - rotation) % 4] for d in DIRECTIONS)  # type: ignore[return-value]


# Built once at import; read-only afterwards.
CONNECTIONS: Mapping[Shape, Tuple[Ports, ...]] = MappingProxyType({
    shape: tuple(_rotate_ports(base, r) for r in range(4))
    for shape, base in _BASE_PORTS.items()
})


def connections(shape: Shape, rotation: int) -> Ports:
    return CONNECTIONS[shape][rotation % 4]


def distinct_rotations(shape: Shape) -> int:
    """How many rotations give different port layouts (2 for straights, 4 otherwise)."""
    return 2 if shape is Shape.STRAIGHT else 4


@dataclass
class Tile:
    shape: Shape
    rotation: int = 0
    on_path: bool = False  # generation-time annotation; the solver never reads it

    def __post_init__(self) -> None:
        if not 0 <= self.rotation <= 3:
            raise ValueError("rotation must be 0..3")

    @property
    def ports(self) -> Ports:
        return connections(self.shape, self.rotation)

    def is_open(self, direction: int) -> bool:
        return self.ports[direction]

    def turn(self) -> None:
        self.rotation = (self.rotation + 1) % 4

    def label(self) -> str:
        # Debug label as painted on the original board: S1, E0, T3, C0 ...
        return f"{self.shape.letter}{self.rotation}"
