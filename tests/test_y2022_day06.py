import pytest

from adventpuzzles.y2022_day06 import solve, solve_part_1, solve_part_2


@pytest.mark.parametrize(
    "text, expected",
    [
        ("mjqjpqmgbljsphdztnvjfqwrcgsmlb", 7),
        ("bvwbjplbgvbhsrlpgdmjqwftvncz", 5),
        ("nppdvjthqldpwncqszvftbrmjlhg", 6),
        ("nznrnfrfntjfmvfwmzdfjlvtqnbhcprsg", 10),
        ("zcfzfwzzqfrljwzlrfnpqdbhtmscgvjw", 11),
    ],
)
def test_part_1(text, expected):
    assert solve_part_1(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("mjqjpqmgbljsphdztnvjfqwrcgsmlb", 19),
        ("bvwbjplbgvbhsrlpgdmjqwftvncz", 23),
        ("nppdvjthqldpwncqszvftbrmjlhg", 23),
        ("nznrnfrfntjfmvfwmzdfjlvtqnbhcprsg", 29),
        ("zcfzfwzzqfrljwzlrfnpqdbhtmscgvjw", 26),
    ],
)
def test_part_2(text, expected):
    assert solve_part_2(text) == expected


def test_solve():
    assert solve("mjqjpqmgbljsphdztnvjfqwrcgsmlb") == (7, 19)


def test_part_1_without_marker():
    with pytest.raises(ValueError):
        solve_part_1("aaaaaaa")


def test_part_2_without_marker_returns_length():
    assert solve_part_2("aaaaaaaaaaaaaaaaaaaa") == 20