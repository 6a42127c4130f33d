from collections import deque

import pytest

from adventpuzzles.y2022_day11 import (
    Monkey,
    Operation,
    do_round,
    parse_input,
    parse_monkey,
    parse_operation,
    solve_part_1,
    solve_part_2,
)

EXAMPLE = """Monkey 0:
  Starting items: 79, 98
  Operation: new = old * 19
  Test: divisible by 23
    If true: throw to monkey 2
    If false: throw to monkey 3

Monkey 1:
  Starting items: 54, 65, 75, 74
  Operation: new = old + 6
  Test: divisible by 19
    If true: throw to monkey 2
    If false: throw to monkey 0

Monkey 2:
  Starting items: 79, 60, 97
  Operation: new = old * old
  Test: divisible by 13
    If true: throw to monkey 1
    If false: throw to monkey 3

Monkey 3:
  Starting items: 74
  Operation: new = old + 3
  Test: divisible by 17
    If true: throw to monkey 0
    If false: throw to monkey 1
"""


def test_parse_monkey():
    block = (
        "Monkey 0:\n  Starting items: 79, 98\n  Operation: new = old * 19\n"
        "  Test: divisible by 23\n    If true: throw to monkey 2\n"
        "    If false: throw to monkey 3"
    )
    assert parse_monkey(block) == Monkey(
        items=deque([79, 98]),
        operation=Operation("old", "*", "19"),
        div_check=23,
        true_monkey=2,
        false_monkey=3,
        inspected=0,
    )


def test_parse_monkey_missing_field():
    with pytest.raises(ValueError):
        parse_monkey("Monkey 0:\n  Starting items: 79\n")


def test_parse_operation_invalid():
    with pytest.raises(ValueError):
        parse_operation("old * 19")


@pytest.mark.parametrize(
    "operation, old, expected",
    [
        (Operation("old", "*", "19"), 79, 1501),
        (Operation("old", "+", "6"), 54, 60),
        (Operation("old", "*", "old"), 79, 6241),
    ],
)
def test_operation_apply(operation, old, expected):
    assert operation.apply(old) == expected


def test_operation_unknown_operator():
    with pytest.raises(ValueError):
        Operation("old", "-", "1").apply(3)


def test_round():
    monkeys = parse_input(EXAMPLE)
    for _ in range(20):
        monkeys = do_round(monkeys)
    assert monkeys[0].items == deque([10, 12, 14, 26, 34])
    assert [m.inspected for m in monkeys] == [101, 95, 7, 105]


def test_solve_part_1():
    assert solve_part_1(EXAMPLE) == 10605


def test_solve_part_2():
    assert solve_part_2(EXAMPLE) == 2713310158