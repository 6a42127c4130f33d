"""Beacon exclusion zone: sensors and the beacons they detect."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

Point = tuple[int, int]

TUNING_MULTIPLIER = 4_000_000

_SENSOR_RE = re.compile(
    r"Sensor at x=(-?\d+), y=(-?\d+): closest beacon is at x=(-?\d+), y=(-?\d+)"
)


def manhattan_distance(left: Point, right: Point) -> int:
    return abs(left[0] - right[0]) + abs(left[1] - right[1])


@dataclass(frozen=True)
class Sensor:
    """A sensor and the closest beacon it detected."""

    loc: Point
    beacon: Point

    def range(self) -> int:
        """Distance from the sensor to its beacon."""
        return manhattan_distance(self.loc, self.beacon)

    def can_contain_unknown_beacon(self, loc: Point) -> bool:
        """Whether ``loc`` lies outside the sensor's coverage."""
        return self.range() < manhattan_distance(self.loc, loc)

    def excluded_region_at_y(self, row: int) -> set[int]:
        """Columns in ``row`` where no beacon can be, besides the known one."""
        diff = self.range() - abs(self.loc[1] - row)
        if diff <= 0:
            return set()
        start = self.loc[0] - diff
        end = self.loc[0] + diff
        # The known beacon always lies on the edge of the region.
        if start == self.beacon[0]:
            start += 1
        if end == self.beacon[0]:
            end -= 1
        return set(range(start, end + 1))

    def iter_border(self) -> Iterator[Point]:
        """Yield the points just outside the sensor's coverage."""
        dist = self.range() + 1
        x, y = self.loc
        for i in range(dist):
            yield (x + i, y + (dist - i))
            yield (x - i, y + (dist - i))
            yield (x + i, y - (dist - i))
            yield (x - i, y - (dist - i))


def parse_sensor(line: str) -> Sensor:
    """Parse one line of the sensor report."""
    match = _SENSOR_RE.search(line)
    if match is None:
        raise ValueError(f"could not parse sensor: {line!r}")
    sx, sy, bx, by = (int(group) for group in match.groups())
    return Sensor((sx, sy), (bx, by))


def parse_input(text: str) -> list[Sensor]:
    return [parse_sensor(line) for line in text.strip().split("\n")]


def loc_is_possible(loc: Point, sensors: Sequence[Sensor], limit: int) -> bool:
    """Whether an undetected beacon could be at ``loc`` within ``0..limit``."""
    x, y = loc
    return (
        0 <= x <= limit
        and 0 <= y <= limit
        and all(sensor.can_contain_unknown_beacon(loc) for sensor in sensors)
    )


def find_possible_loc(sensors: Sequence[Sensor], limit: int) -> Point:
    """Find the one place the distress beacon could be."""
    for sensor in sensors:
        for loc in sensor.iter_border():
            if loc_is_possible(loc, sensors, limit):
                return loc
    raise ValueError("no possible beacon location")


def solve_part_1(sensors: Sequence[Sensor], row: int) -> int:
    """Number of positions in ``row`` where no beacon can be."""
    excluded: set[int] = set()
    for sensor in sensors:
        excluded |= sensor.excluded_region_at_y(row)
    return len(excluded)


def solve_part_2(sensors: Sequence[Sensor], limit: int) -> int:
    """Tuning frequency of the distress beacon."""
    x, y = find_possible_loc(sensors, limit)
    return x * TUNING_MULTIPLIER + y


def solve(text: str) -> tuple[int, int]:
    """Solve both parts of the puzzle."""
    sensors = parse_input(text)
    return solve_part_1(sensors, 2_000_000), solve_part_2(sensors, 4_000_000)