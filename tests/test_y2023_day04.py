import pytest

from adventpuzzles.y2023_day04 import (
    Card,
    parse_card,
    parse_input,
    part_a,
    part_b,
    solve_day,
)

EXAMPLE = """Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53
Card 2: 13 32 20 16 61 | 61 30 68 82 17 32 24 19
Card 3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1
Card 4: 41 92 73 84 69 | 59 84 76 51 58  5 54 83
Card 5: 87 83 26 28 32 | 88 30 70 12 93 22 82 36
Card 6: 31 18 13 56 72 | 74 77 10 23 35 67 36 11"""


@pytest.mark.parametrize(
    "line, expected",
    [
        (
            "Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53",
            Card(1, (41, 48, 83, 86, 17), (83, 86, 6, 31, 17, 9, 48, 53)),
        ),
        (
            "Card 2: 13 32 20 16 61 | 61 30 68 82 17 32 24 19",
            Card(2, (13, 32, 20, 16, 61), (61, 30, 68, 82, 17, 32, 24, 19)),
        ),
    ],
)
def test_parse_card(line, expected):
    assert parse_card(line) == expected


@pytest.mark.parametrize(
    "line, expected",
    [
        ("Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53", 8),
        ("Card 2: 13 32 20 16 61 | 61 30 68 82 17 32 24 19", 2),
        ("Card 3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1", 2),
        ("Card 4: 41 92 73 84 69 | 59 84 76 51 58  5 54 83", 1),
        ("Card 5: 87 83 26 28 32 | 88 30 70 12 93 22 82 36", 0),
        ("Card 6: 31 18 13 56 72 | 74 77 10 23 35 67 36 11", 0),
    ],
)
def test_points(line, expected):
    assert parse_card(line).points() == expected


def test_winning_count():
    assert parse_card("Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53").winning_count() == 4


@pytest.mark.parametrize("line", ["Card 1 41 | 41", "Card 1: 41 48", "Card: 1 | 2"])
def test_parse_card_rejects_malformed(line):
    with pytest.raises(ValueError):
        parse_card(line)


def test_part_a():
    assert part_a(parse_input(EXAMPLE)) == 13


def test_part_b():
    assert part_b(parse_input(EXAMPLE)) == 30


def test_solve_day():
    assert solve_day(EXAMPLE) == (13, 30)