from helpers import C, E, S, T, make_grid
from pipepuzzle.engine.moves import can_rotate, rotate_tile

def board():
    return make_grid([[(S, 1), (E, 0), (T, 2)],
                      [(C, 0), (E, 3), (S, 0)],
                      [(T, 1), (E, 2), (S, 0)]])

def test_rotation_cycles_and_keeps_shape():
    g = board()
    seen = []
    for _ in range(5):
        assert rotate_tile(g, 1, 1) is True
        seen.append(g.get(1, 1).rotation)
        assert g.get(1, 1).shape is E
    assert seen == [0, 1, 2, 3, 0]

def test_only_target_cell_changes():
    g = board()
    before = g.as_label_matrix()
    rotate_tile(g, 0, 2)
    after = g.as_label_matrix()
    diff = [(r, c) for r in range(3) for c in range(3) if before[r][c] != after[r][c]]
    assert diff == [(0, 2)]
    assert after[0][2] == "T3"

def test_endpoints_are_fixed():
    g = board()
    before = g.as_label_matrix()
    for _ in range(4):
        assert rotate_tile(g, 0, 0) is False
        assert rotate_tile(g, 2, 2) is False
    assert g.as_label_matrix() == before

def test_out_of_range_is_a_no_op():
    g = board()
    before = g.as_label_matrix()
    for r, c in ((-1, 0), (0, 3), (3, 3), (1, -1)):
        assert can_rotate(g, r, c) is False
        assert rotate_tile(g, r, c) is False
    assert g.as_label_matrix() == before
