# game.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple
import random

import numpy as np  # type: ignore

from .config import GRID_W, GRID_H, UP, DOWN, LEFT, RIGHT

Point = Tuple[int, int]

# Occupancy codes used by Snapshot.to_array()
EMPTY, BODY, HEAD, FOOD = 0, 1, 2, 3

INITIAL_BODY: Tuple[Point, ...] = ((3, 1), (2, 1), (1, 1))
INITIAL_FOOD: Point = (3, 3)


class Direction(Enum):
    UP = UP
    DOWN = DOWN
    LEFT = LEFT
    RIGHT = RIGHT

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))


class GameState(Enum):
    PLAYING = "playing"
    PAUSED = "paused"
    OVER = "over"


# ---------- Helpers ----------
def in_bounds(p: Point) -> bool:
    return 0 <= p[0] < GRID_W and 0 <= p[1] < GRID_H

def step_point(p: Point, direction: Direction) -> Point:
    dx, dy = direction.value
    return (p[0] + dx, p[1] + dy)

def spawn_food(occupied, rng=random) -> Optional[Point]:
    """
    Pick a random cell not in `occupied`.

    Rejection sampling over the flat index space [0, W*H), capped at W*H
    draws. After the cap the free cells are enumerated and one is chosen
    uniformly. Returns None when every cell is occupied.
    """
    taken = set(occupied)
    cells = GRID_W * GRID_H
    for _ in range(cells):
        idx = rng.randrange(cells)
        pos = (idx % GRID_W, idx // GRID_W)
        if pos not in taken:
            return pos

    free = [(i % GRID_W, i // GRID_W) for i in range(cells)
            if (i % GRID_W, i // GRID_W) not in taken]
    if not free:
        return None
    return rng.choice(free)


# ---------- Snapshot ----------
@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a GameContext, handed to rendering and the autopilot."""
    body: Tuple[Point, ...]
    direction: Direction
    food: Optional[Point]
    state: GameState
    score: int

    @property
    def head(self) -> Point:
        return self.body[0]

    def to_array(self) -> np.ndarray:
        """
        (GRID_H, GRID_W) int8 grid: EMPTY, BODY, HEAD or FOOD per cell.
        Cells outside the grid are skipped.
        """
        grid = np.zeros((GRID_H, GRID_W), dtype=np.int8)
        if self.food is not None and in_bounds(self.food):
            grid[self.food[1], self.food[0]] = FOOD
        for x, y in self.body[1:]:
            if in_bounds((x, y)):
                grid[y, x] = BODY
        if in_bounds(self.head):
            grid[self.head[1], self.head[0]] = HEAD
        return grid


# ---------- State ----------
class GameContext:
    """
    All game state plus the commands that mutate it.

    The body is head-first. Every command is total: it either applies or
    is silently ignored, nothing raises.
    """

    def __init__(self, rng=None) -> None:
        self.rng = rng if rng is not None else random
        self._reset()

    def _reset(self) -> None:
        self.body: List[Point] = list(INITIAL_BODY)
        self.direction = Direction.RIGHT
        self.food: Optional[Point] = INITIAL_FOOD
        self.state = GameState.PLAYING
        self.score = 0

    @property
    def head(self) -> Point:
        return self.body[0]

    def snapshot(self) -> Snapshot:
        return Snapshot(
            body=tuple(self.body),
            direction=self.direction,
            food=self.food,
            state=self.state,
            score=self.score,
        )

    # ----- Tick -----
    def tick(self) -> None:
        """Advance one cell in the current direction. No-op unless playing."""
        if self.state is not GameState.PLAYING:
            return

        next_head = step_point(self.head, self.direction)

        # Out of bounds ends the game before the body is touched
        if not in_bounds(next_head):
            self.state = GameState.OVER
            return

        candidate = self._candidate_body(next_head)

        # Scan after the tail was dropped: the vacated cell is free
        if next_head in candidate:
            self.state = GameState.OVER
            return

        self.body = [next_head] + candidate

    def _candidate_body(self, next_head: Point) -> List[Point]:
        """Body minus the tail, or the whole body (and new food) when eating."""
        if next_head == self.food:
            self.score += 1
            self.food = spawn_food([next_head] + self.body, self.rng)
            return list(self.body)
        return self.body[:-1]

    # ----- Direction -----
    def steer(self, direction: Direction) -> None:
        """Set the direction unless it would reverse into the neck."""
        if direction is self.direction.opposite:
            return
        self.direction = direction

    def move_up(self) -> None:
        self.steer(Direction.UP)

    def move_down(self) -> None:
        self.steer(Direction.DOWN)

    def move_left(self) -> None:
        self.steer(Direction.LEFT)

    def move_right(self) -> None:
        self.steer(Direction.RIGHT)

    # ----- Lifecycle -----
    def toggle_pause(self) -> None:
        if self.state is GameState.PLAYING:
            self.state = GameState.PAUSED
        elif self.state is GameState.PAUSED:
            self.state = GameState.PLAYING

    def restart(self) -> None:
        """Back to the starting position, only once the game is over."""
        if self.state is GameState.OVER:
            self._reset()
