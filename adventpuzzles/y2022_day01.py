"""Calorie counting: totals of food carried by each elf."""

from __future__ import annotations

import heapq
from collections.abc import Iterator


def calories_per_elf(text: str) -> Iterator[int]:
    """Yield the total calories carried by each elf, in input order."""
    for elf in text.split("\n\n"):
        yield sum(int(food) for food in elf.split("\n"))


def solve_part_1(text: str) -> int:
    """Return the largest number of calories carried by a single elf."""
    return max(calories_per_elf(text))


def solve_part_2(text: str) -> int:
    """Return the calories carried by the three best-stocked elves together."""
    top = heapq.nlargest(3, calories_per_elf(text))
    if len(top) < 3:
        raise ValueError("input must describe at least three elves")
    return sum(top)


def solve(text: str) -> tuple[int, int]:
    """Solve both parts of the puzzle."""
    return solve_part_1(text), solve_part_2(text)