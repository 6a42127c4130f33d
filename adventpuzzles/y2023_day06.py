"""Wait for it: ways to beat boat race records."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

_DIGITS_RE = re.compile(r"\d+")


@dataclass(frozen=True)
class Race:
    """A race's duration and the record distance to beat."""

    time: int
    record: int

    def possible_wins(self) -> int:
        """Number of button hold times that beat the record."""
        t = float(self.time)
        r = float(self.record)
        discriminant = t**2 - 4.0 * r
        if discriminant < 0:
            return 0
        d = math.sqrt(discriminant)
        low = 0.5 * (t - d)
        high = 0.5 * (t + d)
        return max(0, math.ceil(high) - math.floor(low + 1.0))


def _split_lines(text: str) -> tuple[str, str]:
    times, sep, records = text.partition("\n")
    if not sep:
        raise ValueError("input needs a line of times and a line of records")
    return times, records


def parse_input(text: str) -> list[Race]:
    """Read each race from the columns of the two lines."""
    times, records = _split_lines(text)
    return [
        Race(int(time), int(record))
        for time, record in zip(_DIGITS_RE.findall(times), _DIGITS_RE.findall(records))
    ]


def _joined_digits(line: str) -> int:
    digits = "".join(char for char in line if "0" <= char <= "9")
    return int(digits) if digits else 0


def parse_input_2(text: str) -> Race:
    """Read the two lines as one race, ignoring the spaces between digits."""
    times, records = _split_lines(text)
    return Race(_joined_digits(times), _joined_digits(records))


def part_a(text: str) -> int:
    return math.prod(race.possible_wins() for race in parse_input(text))


def part_b(text: str) -> int:
    return parse_input_2(text).possible_wins()


def solve_day(text: str) -> tuple[int, int]:
    """Solve both parts of the puzzle."""
    return part_a(text), part_b(text)