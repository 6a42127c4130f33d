import pytest

from adventpuzzles.y2022_day02 import (
    round_score_part_1,
    round_score_part_2,
    solve,
    solve_part_1,
    solve_part_2,
)

EXAMPLE = "A Y\nB X\nC Z"


def test_part_1():
    assert solve_part_1(EXAMPLE) == 15


def test_part_2():
    assert solve_part_2(EXAMPLE) == 12


def test_solve():
    assert solve(EXAMPLE) == (15, 12)


@pytest.mark.parametrize("round_str, expected", [("A Y", 8), ("B X", 1), ("C Z", 6)])
def test_round_scoring(round_str, expected):
    assert round_score_part_1(round_str) == expected


@pytest.mark.parametrize("round_str, expected", [("A Y", 4), ("B X", 1), ("C Z", 7)])
def test_round_scoring_p2(round_str, expected):
    assert round_score_part_2(round_str) == expected


def test_invalid_round():
    with pytest.raises(ValueError):
        round_score_part_1("D Q")
    with pytest.raises(ValueError):
        round_score_part_2("")