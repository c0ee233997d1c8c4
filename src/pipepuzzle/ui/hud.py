from typing import Optional

from ..engine.state import GameSession, Score

def best_score_text(best: Optional[Score]) -> str:
    """Best-score widget text, '--' until the first win of the session."""
    if best is None:
        return "--"
    return f"Time: {best.time}s, Rot: {best.rotations}"

def result_message(session: GameSession) -> str:
    """Win banner for the game just finished; empty while playing."""
    s = session.last_score
    if s is None:
        return ""
    return f"You win! Time: {s.time}s, Rotations: {s.rotations}"
