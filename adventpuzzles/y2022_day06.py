"""Tuning trouble: locating start-of-packet and start-of-message markers."""

from __future__ import annotations


def solve_part_1(text: str) -> int:
    """Return the number of characters read when four distinct ones end."""
    for index in range(len(text) - 3):
        if len(set(text[index:index + 4])) == 4:
            return index + 4
    raise ValueError("no start-of-packet marker in input")


def solve_part_2(text: str) -> int:
    """Return the number of characters read when fourteen distinct ones end.

    The window first examined ends at the fifteenth character; if no marker
    is found the length of the input is returned (1 for empty input).
    """
    for index in range(14, len(text)):
        if len(set(text[index - 13:index + 1])) == 14:
            return index + 1
    return len(text) if text else 1


def solve(text: str) -> tuple[int, int]:
    """Solve both parts of the puzzle."""
    return solve_part_1(text), solve_part_2(text)