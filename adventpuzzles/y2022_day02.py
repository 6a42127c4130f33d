"""Rock, paper, scissors strategy guide scoring."""

from __future__ import annotations

# Second column is the move to play.
_SCORES_PART_1 = {
    "A Y": 8,
    "B Z": 9,
    "C X": 7,
    "A X": 4,
    "B Y": 5,
    "C Z": 6,
    "A Z": 3,
    "B X": 1,
    "C Y": 2,
}

# Second column is the desired outcome.
_SCORES_PART_2 = {
    "A Y": 4,
    "B Z": 9,
    "C X": 2,
    "A X": 3,
    "B Y": 5,
    "C Z": 7,
    "A Z": 8,
    "B X": 1,
    "C Y": 6,
}


def _lookup(table: dict[str, int], round_str: str) -> int:
    try:
        return table[round_str]
    except KeyError:
        raise ValueError(f"invalid round: {round_str!r}") from None


def round_score_part_1(round_str: str) -> int:
    """Score a round where the second column is the shape to play."""
    return _lookup(_SCORES_PART_1, round_str)


def round_score_part_2(round_str: str) -> int:
    """Score a round where the second column is the required outcome."""
    return _lookup(_SCORES_PART_2, round_str)


def solve_part_1(text: str) -> int:
    return sum(round_score_part_1(line) for line in text.split("\n"))


def solve_part_2(text: str) -> int:
    return sum(round_score_part_2(line) for line in text.split("\n"))


def solve(text: str) -> tuple[int, int]:
    """Solve both parts of the puzzle."""
    return solve_part_1(text), solve_part_2(text)