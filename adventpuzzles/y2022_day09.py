"""Rope bridge: following a rope's head with its knots."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

Position = tuple[int, int]

_SIZE_RE = re.compile(r"\+?[0-9]+")


class Direction(Enum):
    """Direction in which the head of the rope moves."""

    R = "R"
    U = "U"
    D = "D"
    L = "L"

    @property
    def delta(self) -> Position:
        return {"R": (1, 0), "U": (0, 1), "L": (-1, 0), "D": (0, -1)}[self.value]


@dataclass(frozen=True)
class Movement:
    """A number of steps in one direction."""

    direction: Direction
    size: int


def parse_movement(line: str) -> Movement:
    """Parse a line such as ``"R 4"``."""
    name, sep, size = line.partition(" ")
    if not sep:
        raise ValueError(f"invalid movement: {line!r}")
    try:
        direction = Direction(name)
    except ValueError:
        raise ValueError(f"invalid direction in movement: {line!r}") from None
    if not _SIZE_RE.fullmatch(size):
        raise ValueError(f"invalid step count in movement: {line!r}")
    return Movement(direction, int(size))


def parse_input(text: str) -> list[Movement]:
    return [parse_movement(line) for line in text.strip().split("\n")]


def manhattan_distance(left: Position, right: Position) -> int:
    return abs(left[0] - right[0]) + abs(left[1] - right[1])


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def tail_movement(head: Position, tail: Position) -> tuple[Position, set[Position]]:
    """Move a knot after the one ahead of it; returns its new place and the places passed."""
    head_x, head_y = head
    tail_x, tail_y = tail
    visits: set[Position] = set()
    if manhattan_distance(head, tail) > 2:
        x_dist = abs(head_x - tail_x)
        y_dist = abs(head_y - tail_y)
        if x_dist < y_dist:
            tail_x = head_x
        if y_dist < x_dist:
            tail_y = head_y

    if abs(head_x - tail_x) > 1:
        low = min(head_x, tail_x)
        high = max(head_x, tail_x) - 1
        tail_x = head_x - _sign(head_x - tail_x)
        visits = {(i + 1, tail_y) for i in range(low, high)}
    if abs(head_y - tail_y) > 1:
        low = min(head_y, tail_y)
        high = max(head_y, tail_y) - 1
        tail_y = head_y - _sign(head_y - tail_y)
        visits = {(tail_x, i + 1) for i in range(low, high)}
    return (tail_x, tail_y), visits


def simulate_movement(rope: Iterable[Position], movements: Iterable[Movement]) -> set[Position]:
    """Return every place the last knot of the rope visits."""
    knots = list(rope)
    tail_locs: set[Position] = {(0, 0)}
    for movement in movements:
        dx, dy = movement.direction.delta
        for _ in range(movement.size):
            knots[0] = (knots[0][0] + dx, knots[0][1] + dy)
            locs: set[Position] = set()
            for i in range(1, len(knots)):
                knots[i], locs = tail_movement(knots[i - 1], knots[i])
            tail_locs |= locs
    return tail_locs


def solve_part_1(movements: list[Movement]) -> int:
    return len(simulate_movement([(0, 0)] * 2, movements))


def solve_part_2(movements: list[Movement]) -> int:
    return len(simulate_movement([(0, 0)] * 10, movements))


def solve(text: str) -> tuple[int, int]:
    """Solve both parts of the puzzle."""
    movements = parse_input(text)
    return solve_part_1(movements), solve_part_2(movements)