from pipepuzzle.grid import Grid
from pipepuzzle.tiles import Shape, Tile, connections

S, E, T, C = Shape.STRAIGHT, Shape.ELBOW, Shape.TEE, Shape.CROSS

def make_grid(layout):
    """layout: rows of (shape, rotation) pairs."""
    return Grid(rows=[[Tile(shape, rot) for shape, rot in row] for row in layout])

def trace_path(grid):
    """Walk the generated on_path cells from start to goal (monotone, so one successor each)."""
    path = [grid.start]
    r, c = grid.start
    while (r, c) != grid.goal:
        for nr, nc in ((r + 1, c), (r, c + 1)):
            if grid.in_bounds(nr, nc) and grid.get(nr, nc).on_path:
                r, c = nr, nc
                break
        else:
            raise AssertionError(f"path breaks at {(r, c)}")
        path.append((r, c))
    return path

# Hand-written table (up, right, down, left) per rotation, as on the original board.
PIPE_CONNECTIONS = {
    S: [(1, 0, 1, 0), (0, 1, 0, 1), (1, 0, 1, 0), (0, 1, 0, 1)],
    E: [(1, 1, 0, 0), (0, 1, 1, 0), (0, 0, 1, 1), (1, 0, 0, 1)],
    T: [(1, 1, 1, 0), (0, 1, 1, 1), (1, 0, 1, 1), (1, 1, 0, 1)],
    C: [(1, 1, 1, 1)] * 4,
}

def solved_rotation(shape, dirs):
    """First rotation of `shape` whose open ports cover `dirs`, or None."""
    for rot in range(4):
        ports = connections(shape, rot)
        if all(ports[d] for d in dirs):
            return rot
    return None
