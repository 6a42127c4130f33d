"""Monkey in the middle: tracking items thrown between monkeys."""

from __future__ import annotations

import math
import re
from collections import deque
from dataclasses import dataclass

_ITEMS_RE = re.compile(r"Starting items:((?: \d+,*)+)")
_OPERATION_RE = re.compile(r"Operation: (.*)\n")
_DIV_RE = re.compile(r"Test: divisible by (\d+)")
_TRUE_RE = re.compile(r"If true: throw to monkey (\d+)")
_FALSE_RE = re.compile(r"If false: throw to monkey (\d+)")


@dataclass(frozen=True)
class Operation:
    """The worry-level update ``new = left operator right``."""

    left: str
    operator: str
    right: str

    @staticmethod
    def _operand(token: str, old: int) -> int:
        return old if token == "old" else int(token)

    def apply(self, old: int) -> int:
        """Compute the new worry level from the old one."""
        left = self._operand(self.left, old)
        right = self._operand(self.right, old)
        if self.operator == "*":
            return left * right
        if self.operator == "+":
            return left + right
        raise ValueError(f"unknown operator: {self.operator!r}")


@dataclass
class Monkey:
    items: deque[int]
    operation: Operation
    div_check: int
    true_monkey: int
    false_monkey: int
    inspected: int = 0


def parse_operation(text: str) -> Operation:
    """Parse ``"new = old * 19"``."""
    _, sep, expression = text.partition("=")
    if not sep:
        raise ValueError(f"operation lacks '=': {text!r}")
    parts = expression.strip().split(" ")
    if len(parts) != 3:
        raise ValueError(f"operation must have three terms: {text!r}")
    left, operator, right = parts
    return Operation(left, operator, right)


def _search(pattern: re.Pattern[str], block: str) -> str:
    match = pattern.search(block)
    if match is None:
        raise ValueError(f"monkey description lacks {pattern.pattern!r}")
    return match.group(1)


def parse_monkey(block: str) -> Monkey:
    """Parse the description of one monkey."""
    items = deque(int(item.strip()) for item in _search(_ITEMS_RE, block).split(","))
    return Monkey(
        items=items,
        operation=parse_operation(_search(_OPERATION_RE, block)),
        div_check=int(_search(_DIV_RE, block)),
        true_monkey=int(_search(_TRUE_RE, block)),
        false_monkey=int(_search(_FALSE_RE, block)),
    )


def parse_input(text: str) -> list[Monkey]:
    return [parse_monkey(block) for block in text.strip().split("\n\n")]


def _play_round(monkeys: list[Monkey], relieve) -> None:
    for monkey in monkeys:
        while monkey.items:
            worry = relieve(monkey.operation.apply(monkey.items.popleft()))
            monkey.inspected += 1
            target = monkey.true_monkey if worry % monkey.div_check == 0 else monkey.false_monkey
            monkeys[target].items.append(worry)


def do_round(monkeys: list[Monkey]) -> list[Monkey]:
    """Play one round in which worry is divided by three after each inspection."""
    _play_round(monkeys, lambda worry: worry // 3)
    return monkeys


def _monkey_business(monkeys: list[Monkey]) -> int:
    return math.prod(sorted((m.inspected for m in monkeys), reverse=True)[:2])


def solve_part_1(text: str) -> int:
    monkeys = parse_input(text)
    for _ in range(20):
        do_round(monkeys)
    return _monkey_business(monkeys)


def solve_part_2(text: str) -> int:
    monkeys = parse_input(text)
    modulo = math.prod(m.div_check for m in monkeys)
    for _ in range(10_000):
        _play_round(monkeys, lambda worry: worry % modulo)
    return _monkey_business(monkeys)


def solve(text: str) -> tuple[int, int]:
    """Solve both parts of the puzzle."""
    return solve_part_1(text), solve_part_2(text)