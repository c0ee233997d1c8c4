from dataclasses import dataclass
from typing import Optional

from ..engine.state import GameSession
from .hud import best_score_text, result_message

@dataclass
class StatusBarState:
    time_s: int = 0
    rotations: int = 0
    best: str = "--"
    message: str = ""

def status_from_session(session: GameSession) -> StatusBarState:
    return StatusBarState(
        time_s=session.elapsed,
        rotations=session.rotations,
        best=best_score_text(session.best),
        message=result_message(session),
    )

def render_status_bar(screen, origin_xy: tuple[int, int], width: int, height: int,
                      state: StatusBarState, font: Optional["pygame.font.Font"] = None) -> None:
    """
    Draw a one-line status bar: TIME, ROTATIONS, BEST and the win banner.
    Does not touch the session.
    """
    import pygame  # local import to avoid hard dep when not used
    ox, oy = origin_xy
    pygame.draw.rect(screen, (24, 24, 24), pygame.Rect(ox, oy, width, height))
    font = font or pygame.font.SysFont(None, max(14, height // 2))

    def label(x, text, color=(220, 220, 220)):
        img = font.render(text, True, color)
        screen.blit(img, (ox + x, oy + (height - img.get_height()) // 2))
        return x + img.get_width() + height // 2

    x = height // 3
    x = label(x, f"TIME {state.time_s}")
    x = label(x, f"ROT {state.rotations}")
    x = label(x, f"BEST {state.best}")
    if state.message:
        label(x, state.message, (120, 220, 255))
