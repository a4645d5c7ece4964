from typing import Tuple

from ..grid import BoardView
from .hud import status_text


def render_status_bar(
    screen, origin_xy: Tuple[int, int], width_px: int, height_px: int,
    view: BoardView, moves: int
) -> None:
    """
    Draw a one-line status bar below the maze. Does not touch the board.
    """
    import pygame  # local import to avoid hard dep when not used
    ox, oy = origin_xy
    bg = (20, 60, 20) if view.done else (24, 24, 24)
    pygame.draw.rect(screen, bg, pygame.Rect(ox, oy, width_px, height_px))
    font = pygame.font.SysFont(None, max(12, height_px - 4))
    img = font.render(status_text(view, moves), True, (220, 220, 220))
    screen.blit(img, (ox + 6, oy + (height_px - img.get_height()) // 2))
