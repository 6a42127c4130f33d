"""Camp cleanup: overlapping section assignments."""

from __future__ import annotations

from collections.abc import Iterator

Bounds = tuple[int, int]
Assignment = tuple[Bounds, Bounds]


def parse_bounds(bound: str) -> Bounds:
    """Parse a section range such as ``"2-4"``."""
    parts = bound.split("-")
    if len(parts) != 2:
        raise ValueError(f"range must hold exactly two numbers: {bound!r}")
    low, high = (int(part) for part in parts)
    return low, high


def parse_assignment(line: str) -> Assignment:
    """Parse a pair of section ranges such as ``"2-4,6-8"``."""
    parts = line.split(",")
    if len(parts) != 2:
        raise ValueError(f"assignment must hold exactly two ranges: {line!r}")
    return parse_bounds(parts[0]), parse_bounds(parts[1])


def parse_input(text: str) -> Iterator[Assignment]:
    """Yield the assignment on each line."""
    return (parse_assignment(line) for line in text.split("\n"))


def fully_contains(assignment: Assignment) -> bool:
    """Whether one range of the pair contains the other."""
    left, right = assignment
    return (left[0] >= right[0] and left[1] <= right[1]) or (
        right[0] >= left[0] and right[1] <= left[1]
    )


def overlaps(assignment: Assignment) -> bool:
    """Whether the two ranges of the pair share any section."""
    left, right = assignment
    return right[0] <= left[0] <= right[1] or left[0] <= right[0] <= left[1]


def solve_part_1(text: str) -> int:
    return sum(1 for assignment in parse_input(text) if fully_contains(assignment))


def solve_part_2(text: str) -> int:
    return sum(1 for assignment in parse_input(text) if overlaps(assignment))


def solve(text: str) -> tuple[int, int]:
    """Solve both parts of the puzzle."""
    return solve_part_1(text), solve_part_2(text)