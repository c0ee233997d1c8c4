from helpers import C, E, S, make_grid
from pipepuzzle.config import GameConfig
from pipepuzzle.engine.state import GameSession, Score
from pipepuzzle.ui.hud import best_score_text, result_message

def test_best_score_text():
    assert best_score_text(None) == "--"
    assert best_score_text(Score(10, 3)) == "Time: 10s, Rot: 3"

def test_result_message_after_win():
    s = GameSession(GameConfig(grid_size=2),
                    grid_factory=lambda n, rng: make_grid([[(S, 1), (E, 1)], [(C, 0), (S, 0)]]))
    s.start()
    assert result_message(s) == ""
    for _ in range(7):
        s.tick()
    s.rotate(0, 1)
    assert result_message(s) == "You win! Time: 7s, Rotations: 1"
    s.new_game()
    assert result_message(s) == ""
