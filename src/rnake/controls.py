# controls.py
from typing import Dict, Iterable

import pygame  # type: ignore

from .game import GameContext

QUIT = "quit"

# pygame key -> GameContext method name
KEYMAP: Dict[int, str] = {
    pygame.K_w: "move_up",
    pygame.K_UP: "move_up",
    pygame.K_s: "move_down",
    pygame.K_DOWN: "move_down",
    pygame.K_a: "move_left",
    pygame.K_LEFT: "move_left",
    pygame.K_d: "move_right",
    pygame.K_RIGHT: "move_right",
    pygame.K_p: "toggle_pause",
    pygame.K_r: "restart",
    pygame.K_ESCAPE: QUIT,
}


def apply_key(ctx: GameContext, key: int) -> bool:
    """Run the command bound to `key`. Returns False when the key means quit."""
    command = KEYMAP.get(key)
    if command is None:
        return True
    if command == QUIT:
        return False
    getattr(ctx, command)()
    return True


def handle_events(ctx: GameContext, events: Iterable[pygame.event.Event]) -> bool:
    """Apply events in arrival order, one command each. Return False to quit."""
    for event in events:
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN and not apply_key(ctx, event.key):
            return False
    return True
