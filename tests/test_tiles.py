import pytest

from helpers import PIPE_CONNECTIONS
from pipepuzzle.tiles import (
    CONNECTIONS, DOWN, LEFT, RIGHT, UP, Shape, Tile, connections, distinct_rotations, opposite,
)

def test_connection_table_matches_hand_table():
    for shape, rows in PIPE_CONNECTIONS.items():
        for rot, want in enumerate(rows):
            assert connections(shape, rot) == tuple(bool(x) for x in want), (shape, rot)

def test_table_is_read_only():
    with pytest.raises(TypeError):
        CONNECTIONS[Shape.CROSS] = ()

def test_opposites():
    assert opposite(UP) == DOWN and opposite(DOWN) == UP
    assert opposite(LEFT) == RIGHT and opposite(RIGHT) == LEFT

def test_distinct_rotations():
    assert distinct_rotations(Shape.STRAIGHT) == 2
    assert distinct_rotations(Shape.ELBOW) == 4
    assert distinct_rotations(Shape.TEE) == 4

def test_labels_and_turn():
    t = Tile(Shape.TEE, 3)
    assert t.label() == "T3"
    t.turn()
    assert t.rotation == 0 and t.label() == "T0"
    assert Tile(Shape.STRAIGHT, 1).label() == "S1"
    assert Tile(Shape.ELBOW).label() == "E0"
    assert Tile(Shape.CROSS, 2).label() == "C2"

def test_rotation_out_of_range_rejected():
    with pytest.raises(ValueError):
        Tile(Shape.ELBOW, 4)
    with pytest.raises(ValueError):
        Tile(Shape.ELBOW, -1)
