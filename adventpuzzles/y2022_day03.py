"""Rucksack reorganisation: duplicate items and group badges."""

from __future__ import annotations

from functools import reduce


def find_duplicate(contents: str) -> str:
    """Return the item found in both compartments of a rucksack."""
    half = len(contents) // 2
    common = set(contents[:half]) & set(contents[half:])
    if not common:
        raise ValueError(f"rucksack has no duplicate item: {contents!r}")
    return next(iter(common))


def priority(item: str) -> int:
    """Return the priority of an item: a-z is 1-26, A-Z is 27-52."""
    if "a" <= item <= "z":
        return ord(item) - 96
    return ord(item) - 38


def find_group_badge(group: str) -> str:
    """Return the item shared by every rucksack of a newline separated group."""
    sets = (set(line) for line in group.strip().split("\n"))
    common = reduce(set.intersection, sets)
    if not common:
        raise ValueError(f"group has no common item: {group!r}")
    return next(iter(common))


def solve_part_1(text: str) -> int:
    return sum(priority(find_duplicate(line)) for line in text.split("\n"))


def solve_part_2(text: str) -> int:
    lines = text.split("\n")
    groups = ("\n".join(lines[start:start + 3]) for start in range(0, len(lines), 3))
    return sum(priority(find_group_badge(group)) for group in groups)


def solve(text: str) -> tuple[int, int]:
    """Solve both parts of the puzzle."""
    return solve_part_1(text), solve_part_2(text)