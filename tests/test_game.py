from __future__ import annotations

import random

import pytest

from rnake.config import GRID_W, GRID_H
from rnake.game import (
    Direction,
    GameContext,
    GameState,
    INITIAL_BODY,
    INITIAL_FOOD,
)


def test_new_context_defaults(ctx: GameContext) -> None:
    assert ctx.body == [(3, 1), (2, 1), (1, 1)]
    assert ctx.direction is Direction.RIGHT
    assert ctx.food == (3, 3)
    assert ctx.state is GameState.PLAYING
    assert ctx.score == 0


def test_first_tick_from_start(ctx: GameContext) -> None:
    ctx.tick()
    assert ctx.body == [(4, 1), (3, 1), (2, 1)]
    assert ctx.score == 0
    assert ctx.state is GameState.PLAYING
    assert ctx.food == (3, 3)


@pytest.mark.parametrize("direction", [Direction.RIGHT, Direction.UP, Direction.DOWN])
def test_move_without_growth_shifts_body(direction: Direction) -> None:
    ctx = GameContext(random.Random(0))
    ctx.body = [(10, 10), (9, 10), (8, 10), (7, 10)]
    ctx.food = (0, 0)
    old = list(ctx.body)
    ctx.steer(direction)

    ctx.tick()

    dx, dy = direction.value
    assert len(ctx.body) == len(old)
    assert ctx.body[0] == (old[0][0] + dx, old[0][1] + dy)
    assert ctx.body[1:] == old[:-1]
    assert old[-1] not in ctx.body


def test_eating_grows_and_respawns_food(ctx: GameContext) -> None:
    ctx.food = (4, 1)
    ctx.tick()

    assert ctx.score == 1
    assert ctx.body == [(4, 1), (3, 1), (2, 1), (1, 1)]
    assert ctx.food is not None
    assert ctx.food not in ctx.body
    assert ctx.state is GameState.PLAYING


def test_growth_over_several_meals() -> None:
    ctx = GameContext(random.Random(7))
    for expected in range(1, 6):
        hx, hy = ctx.head
        ctx.food = (hx + 1, hy)
        ctx.tick()
        assert ctx.score == expected
        assert len(ctx.body) == 3 + expected
        assert ctx.food not in ctx.body


def test_reverse_is_ignored(ctx: GameContext) -> None:
    ctx.move_left()
    assert ctx.direction is Direction.RIGHT

    ctx.move_up()
    assert ctx.direction is Direction.UP
    ctx.move_down()
    assert ctx.direction is Direction.UP

    ctx.move_right()
    assert ctx.direction is Direction.RIGHT
    ctx.move_down()
    assert ctx.direction is Direction.DOWN


def test_opposite_directions() -> None:
    assert Direction.UP.opposite is Direction.DOWN
    assert Direction.DOWN.opposite is Direction.UP
    assert Direction.LEFT.opposite is Direction.RIGHT
    assert Direction.RIGHT.opposite is Direction.LEFT


def test_direction_changes_while_paused_or_over(ctx: GameContext) -> None:
    ctx.toggle_pause()
    ctx.move_down()
    assert ctx.direction is Direction.DOWN

    ctx.state = GameState.OVER
    ctx.move_left()
    assert ctx.direction is Direction.LEFT


@pytest.mark.parametrize(
    "body, direction",
    [
        ([(0, 5), (1, 5), (2, 5)], Direction.LEFT),
        ([(GRID_W - 1, 5), (GRID_W - 2, 5), (GRID_W - 3, 5)], Direction.RIGHT),
        ([(5, 0), (5, 1), (5, 2)], Direction.UP),
        ([(5, GRID_H - 1), (5, GRID_H - 2), (5, GRID_H - 3)], Direction.DOWN),
    ],
)
def test_leaving_the_grid_ends_the_game(body, direction: Direction) -> None:
    ctx = GameContext(random.Random(0))
    ctx.body = list(body)
    ctx.direction = direction
    ctx.food = (20, 20)

    ctx.tick()

    assert ctx.state is GameState.OVER
    # Body is not shifted off the grid
    assert ctx.body == body
    assert ctx.score == 0


def test_moving_into_vacated_tail_is_not_a_collision() -> None:
    ctx = GameContext(random.Random(0))
    # 2x2 loop, head at (5, 5) heading up, tail at (6, 5)
    ctx.body = [(5, 5), (5, 6), (6, 6), (6, 5)]
    ctx.direction = Direction.UP
    ctx.food = (0, 0)
    ctx.move_right()

    ctx.tick()

    assert ctx.state is GameState.PLAYING
    assert ctx.body == [(6, 5), (5, 5), (5, 6), (6, 6)]


def test_self_collision_ends_game_without_moving() -> None:
    ctx = GameContext(random.Random(0))
    body = [(5, 5), (5, 6), (6, 6), (6, 5), (7, 5)]
    ctx.body = list(body)
    ctx.direction = Direction.UP
    ctx.food = (0, 0)
    ctx.move_right()

    ctx.tick()

    assert ctx.state is GameState.OVER
    assert ctx.body == body


def test_tick_is_noop_when_paused_or_over(ctx: GameContext) -> None:
    ctx.toggle_pause()
    ctx.tick()
    assert ctx.body == list(INITIAL_BODY)

    ctx.state = GameState.OVER
    ctx.tick()
    assert ctx.body == list(INITIAL_BODY)
    assert ctx.state is GameState.OVER


def test_pause_toggles_back_and_over_is_absorbing(ctx: GameContext) -> None:
    ctx.toggle_pause()
    assert ctx.state is GameState.PAUSED
    ctx.toggle_pause()
    assert ctx.state is GameState.PLAYING

    ctx.state = GameState.OVER
    ctx.toggle_pause()
    assert ctx.state is GameState.OVER


def test_restart_ignored_unless_over(ctx: GameContext) -> None:
    ctx.food = (4, 1)
    ctx.tick()
    before = ctx.snapshot()

    ctx.restart()
    assert ctx.snapshot() == before

    ctx.toggle_pause()
    paused = ctx.snapshot()
    ctx.restart()
    assert ctx.snapshot() == paused


def test_restart_after_game_over_resets_everything() -> None:
    ctx = GameContext(random.Random(3))
    ctx.food = (4, 1)
    ctx.tick()
    ctx.food = (30, 20)
    ctx.move_up()
    ctx.tick()
    ctx.tick()  # (4, -1) is off the grid
    assert ctx.state is GameState.OVER
    assert ctx.score == 1

    ctx.restart()

    assert ctx.body == list(INITIAL_BODY)
    assert ctx.direction is Direction.RIGHT
    assert ctx.food == INITIAL_FOOD
    assert ctx.state is GameState.PLAYING
    assert ctx.score == 0


def test_snapshot_is_a_copy(ctx: GameContext) -> None:
    snap = ctx.snapshot()
    ctx.tick()
    assert snap.body == INITIAL_BODY
    assert snap.head == (3, 1)
    assert ctx.snapshot().head == (4, 1)
