import pytest

from adventpuzzles.y2022_day12 import (
    UNREACHABLE,
    distance_map,
    parse_input,
    solve,
    solve_part_1,
    solve_part_2,
)

EXAMPLE = "Sabqponm\nabcryxxl\naccszExk\nacctuvwj\nabdefghi"

EXPECTED_MAP = [
    [0, 0, 1, 16, 15, 14, 13, 12],
    [0, 1, 2, 17, 24, 23, 23, 11],
    [0, 2, 2, 18, 25, 25, 23, 10],
    [0, 2, 2, 19, 20, 21, 22, 9],
    [0, 1, 3, 4, 5, 6, 7, 8],
]

EXPECTED_DISTANCES = [
    [31, 30, 29, 12, 13, 14, 15, 16],
    [30, 29, 28, 11, 2, 3, 4, 17],
    [31, 28, 27, 10, 1, 0, 5, 18],
    [30, 27, 26, 9, 8, 7, 6, 19],
    [29, 28, 25, 24, 23, 22, 21, 20],
]


def test_parse_input():
    assert parse_input(EXAMPLE) == (EXPECTED_MAP, (0, 0), (2, 5))


def test_parse_input_invalid_char():
    with pytest.raises(ValueError):
        parse_input("Sa1\naEb")


def test_distance_map():
    assert distance_map(EXPECTED_MAP, (2, 5)) == EXPECTED_DISTANCES


def test_solve_part_1():
    assert solve_part_1(EXPECTED_DISTANCES, (0, 0)) == 31


def test_solve_part_2():
    assert solve_part_2(EXPECTED_DISTANCES, EXPECTED_MAP) == 29


def test_solve():
    assert solve(EXAMPLE) == (31, 29)