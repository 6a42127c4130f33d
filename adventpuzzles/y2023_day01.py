"""Trebuchet calibration: first and last digits of each line."""

from __future__ import annotations

import re

# Each word keeps its first and last letter so overlapping words survive.
_DIGIT_WORDS = {
    "one": "o1e",
    "two": "t2o",
    "three": "thr3e",
    "four": "fo4r",
    "five": "fi5e",
    "six": "s6x",
    "seven": "sev7n",
    "eight": "eig8t",
    "nine": "ni9e",
}

_WORD_RE = re.compile("|".join(f"({word})" for word in _DIGIT_WORDS))


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def decode_line(line: str) -> int:
    """Combine the first and the last digit of ``line`` into a two-digit number."""
    digits = [char for char in line if _is_digit(char)]
    if not digits:
        raise ValueError(f"invalid input: {line!r}")
    return 10 * int(digits[0]) + int(digits[-1])


def _replace(match: re.Match[str]) -> str:
    return _DIGIT_WORDS[match.group(0)]


def replace_words(text: str) -> str:
    """Replace spelled-out digits with digits, in two passes to catch overlaps."""
    return _WORD_RE.sub(_replace, _WORD_RE.sub(_replace, text))


def part_a(text: str) -> int:
    return sum(decode_line(line) for line in text.strip().split("\n"))


def part_b(text: str) -> int:
    return part_a(replace_words(text))


def solve_day(text: str) -> tuple[int, int]:
    """Solve both parts of the puzzle."""
    return part_a(text), part_b(text)