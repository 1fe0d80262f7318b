# autopilot.py
from typing import List, Optional

import numpy as np  # type: ignore

from .game import EMPTY, FOOD, Direction, Point, Snapshot, in_bounds, step_point


def best_moves_toward_food(head: Point, food: Point) -> List[Direction]:
    """
    Returns a preference ordering of moves, those that reduce Manhattan
    distance to the food first. Does NOT check collisions.
    """
    hx, hy = head
    fx, fy = food
    prefs = []
    if fx < hx:
        prefs.append(Direction.LEFT)
    elif fx > hx:
        prefs.append(Direction.RIGHT)
    if fy < hy:
        prefs.append(Direction.UP)
    elif fy > hy:
        prefs.append(Direction.DOWN)
    # Remaining directions last so the caller still has options when boxed in
    for d in Direction:
        if d not in prefs:
            prefs.append(d)
    return prefs


def is_safe(snap: Snapshot, direction: Direction, grid: Optional[np.ndarray] = None) -> bool:
    """True if one tick in `direction` neither leaves the grid nor hits the body."""
    if direction is snap.direction.opposite:
        return False
    nxt = step_point(snap.head, direction)
    if not in_bounds(nxt):
        return False
    if grid is None:
        grid = snap.to_array()
    cell = grid[nxt[1], nxt[0]]
    if cell in (EMPTY, FOOD):
        return True
    # The tail moves away this tick, so its cell is free
    return nxt == snap.body[-1] and len(snap.body) > 1


def choose_direction(snap: Snapshot) -> Direction:
    """
    Greedy on food distance with simple safety:
    - prefer safe moves that reduce Manhattan distance
    - otherwise any safe move
    - if nothing is safe, keep going
    """
    grid = snap.to_array()
    if snap.food is None:
        prefs = list(Direction)
    else:
        prefs = best_moves_toward_food(snap.head, snap.food)
    for d in prefs:
        if is_safe(snap, d, grid):
            return d
    return snap.direction
