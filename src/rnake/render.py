# render.py
from typing import Optional, Tuple

import pygame  # type: ignore

from .config import (
    CELL_SIZE, MARGIN,
    BG, BG_PAUSED, GREEN, RED, PAUSED_TEXT, OVER_TEXT, TEXT_RECT,
    CFG,
)
from .game import GameState, Point, Snapshot

BACKGROUND = {
    GameState.PLAYING: BG,
    GameState.PAUSED: BG_PAUSED,
    GameState.OVER: BG,
}

# state -> (message, color); PLAYING has no overlay
OVERLAY = {
    GameState.PAUSED: ("PAUSED", PAUSED_TEXT),
    GameState.OVER: ("GAME OVER", OVER_TEXT),
}


def load_font(path: Optional[str] = None, size: int = CFG.font_size) -> pygame.font.Font:
    """Load the overlay font. Raises pygame.error / OSError if it can't be opened."""
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(path, size)


def cell_rect(p: Point) -> pygame.Rect:
    x, y = p
    return pygame.Rect(
        x * CELL_SIZE + MARGIN,
        y * CELL_SIZE + MARGIN,
        CELL_SIZE - 2 * MARGIN,
        CELL_SIZE - 2 * MARGIN,
    )


class Renderer:
    """Draws snapshots onto a pygame surface (the window or an off-screen one)."""

    def __init__(self, screen: pygame.Surface, font: pygame.font.Font) -> None:
        self.screen = screen
        self.font = font

    def draw(self, snap: Snapshot) -> None:
        self.draw_background(snap)
        self.draw_player(snap)
        self.draw_food(snap)
        self.draw_text(snap)

    def draw_background(self, snap: Snapshot) -> None:
        self.screen.fill(BACKGROUND[snap.state])

    def draw_dot(self, p: Point, color: Tuple[int, int, int]) -> None:
        pygame.draw.rect(self.screen, color, cell_rect(p))

    def draw_player(self, snap: Snapshot) -> None:
        if snap.state is GameState.OVER:
            return
        for p in snap.body:
            self.draw_dot(p, GREEN)

    def draw_food(self, snap: Snapshot) -> None:
        if snap.state is GameState.OVER or snap.food is None:
            return
        self.draw_dot(snap.food, RED)

    def draw_text(self, snap: Snapshot) -> None:
        if snap.state not in OVERLAY:
            return
        msg, color = OVERLAY[snap.state]
        surface = self.font.render(msg, True, color)
        target = pygame.Rect(TEXT_RECT)
        # Stretched to fill the target rect
        self.screen.blit(pygame.transform.scale(surface, target.size), target)
