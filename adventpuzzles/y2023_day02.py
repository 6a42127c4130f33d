"""Cube conundrum: games of cubes drawn from a bag."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

MAX_RED = 12
MAX_GREEN = 13
MAX_BLUE = 14

_GAME_ID_RE = re.compile(r"Game (\d+):")
_RED_RE = re.compile(r"(\d+) red")
_GREEN_RE = re.compile(r"(\d+) green")
_BLUE_RE = re.compile(r"(\d+) blue")


@dataclass(frozen=True)
class CubeSet:
    """Counts of red, green and blue cubes."""

    r: int = 0
    g: int = 0
    b: int = 0

    def is_possible(self) -> bool:
        """Whether the bag could have produced this set."""
        return self.r <= MAX_RED and self.g <= MAX_GREEN and self.b <= MAX_BLUE

    def merge(self, other: CubeSet) -> CubeSet:
        """The smallest set containing both sets, colour by colour."""
        return CubeSet(max(self.r, other.r), max(self.g, other.g), max(self.b, other.b))

    def power(self) -> int:
        return self.r * self.g * self.b


@dataclass(frozen=True)
class Game:
    """A game and the sets revealed during it."""

    id: int
    revealed: list[CubeSet] = field(default_factory=list)

    def is_possible(self) -> bool:
        return all(cube_set.is_possible() for cube_set in self.revealed)

    def power(self) -> int:
        """Power of the smallest set of cubes that makes the game possible."""
        minimum = CubeSet()
        for cube_set in self.revealed:
            minimum = minimum.merge(cube_set)
        return minimum.power()


def _count(pattern: re.Pattern[str], text: str) -> int:
    match = pattern.search(text)
    return int(match.group(1)) if match else 0


def parse_set(text: str) -> CubeSet:
    """Parse a set such as ``"3 blue, 4 red"``; missing colours count zero."""
    return CubeSet(_count(_RED_RE, text), _count(_GREEN_RE, text), _count(_BLUE_RE, text))


def parse_game(line: str) -> Game:
    """Parse a line such as ``"Game 1: 3 blue, 4 red; 2 green"``."""
    match = _GAME_ID_RE.search(line)
    if match is None:
        raise ValueError(f"input did not contain game id: {line!r}")
    return Game(int(match.group(1)), [parse_set(part) for part in line.split(";")])


def _games(text: str) -> list[Game]:
    return [parse_game(line) for line in text.strip().split("\n")]


def part_a(text: str) -> int:
    """Sum of the ids of the possible games."""
    return sum(game.id for game in _games(text) if game.is_possible())


def part_b(text: str) -> int:
    """Sum of the powers of all games."""
    return sum(game.power() for game in _games(text))


def solve_day(text: str) -> tuple[int, int]:
    """Solve both parts of the puzzle."""
    return part_a(text), part_b(text)