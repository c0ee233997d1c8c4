# src/pipepuzzle/mapgen/shapes.py
# Pick the shape + solved rotation for a path cell from the sides it must open.

from typing import List, Set, Tuple

from ..tiles import DOWN, LEFT, RIGHT, UP, Shape, connections, opposite

Cell = Tuple[int, int]


def direction_to(src: Cell, dst: Cell) -> int:
    dr, dc = dst[0] - src[0], dst[1] - src[1]
    if (dr, dc) == (-1, 0):
        return UP
    if (dr, dc) == (0, 1):
        return RIGHT
    if (dr, dc) == (1, 0):
        return DOWN
    if (dr, dc) == (0, -1):
        return LEFT
    raise ValueError(f"{src} and {dst} are not adjacent")


def required_dirs(path: List[Cell], i: int) -> Set[int]:
    """Sides of path[i] facing its predecessor and successor (one side for the endpoints)."""
    cell = path[i]
    dirs: Set[int] = set()
    if i > 0:
        dirs.add(direction_to(cell, path[i - 1]))
    if i < len(path) - 1:
        dirs.add(direction_to(cell, path[i + 1]))
    return dirs


def _rotation_opening_exactly(shape: Shape, dirs: Set[int]) -> int:
    for rot in range(4):
        ports = connections(shape, rot)
        if {d for d in range(4) if ports[d]} == dirs:
            return rot
    raise ValueError(f"{shape.name} cannot open exactly {sorted(dirs)}")


def shape_for_dirs(dirs: Set[int]) -> Tuple[Shape, int]:
    """
    2 opposite -> straight, 2 adjacent -> elbow, 3 -> tee, 4 -> cross.
    A single side (start/goal) gets a straight along that axis:
      right/left -> 1 (horizontal), down/up -> 0 (vertical).
    """
    n = len(dirs)
    if n == 1:
        (d,) = dirs
        return Shape.STRAIGHT, 1 if d in (RIGHT, LEFT) else 0
    if n == 2:
        a, b = sorted(dirs)
        if b == opposite(a):
            return Shape.STRAIGHT, 0 if a == UP else 1
        return Shape.ELBOW, _rotation_opening_exactly(Shape.ELBOW, dirs)
    if n == 3:
        return Shape.TEE, _rotation_opening_exactly(Shape.TEE, dirs)
    if n == 4:
        return Shape.CROSS, 0
    raise ValueError("a path cell needs at least one open side")
