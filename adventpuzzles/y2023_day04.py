"""Scratchcards: winning numbers and copies of cards."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

_DIGITS_RE = re.compile(r"\d+")


@dataclass(frozen=True)
class Card:
    """A card's id, its winning numbers and the numbers on it."""

    game_id: int
    winning_numbers: tuple[int, ...]
    numbers: tuple[int, ...]

    def winning_count(self) -> int:
        """How many of the card's numbers are winning numbers."""
        return sum(1 for number in self.numbers if number in self.winning_numbers)

    def points(self) -> int:
        """One point for the first match, doubled for every further one."""
        count = self.winning_count()
        return 0 if count == 0 else 2 ** (count - 1)


def parse_card(line: str) -> Card:
    """Parse a line such as ``"Card 1: 41 48 | 83 86"``."""
    header, sep, body = line.partition(":")
    if not sep:
        raise ValueError(f"card lacks ':': {line!r}")
    card_id = _DIGITS_RE.search(header)
    if card_id is None:
        raise ValueError(f"card id should be present: {line!r}")
    winning, sep, numbers = body.partition("|")
    if not sep:
        raise ValueError(f"card lacks '|': {line!r}")
    return Card(
        int(card_id.group()),
        tuple(int(n) for n in _DIGITS_RE.findall(winning)),
        tuple(int(n) for n in _DIGITS_RE.findall(numbers)),
    )


def parse_input(text: str) -> list[Card]:
    return [parse_card(line) for line in text.strip().split("\n")]


def part_a(cards: Sequence[Card]) -> int:
    """Total points of all cards."""
    return sum(card.points() for card in cards)


def part_b(cards: Sequence[Card]) -> int:
    """Number of cards held once every won copy has been counted."""
    count = len(cards)
    weights = [1] * count
    for i, card in enumerate(cards):
        weight = weights[i]
        last = min(i + card.winning_count(), count - 1)
        for k in range(i + 1, last + 1):
            weights[k] += weight
    return sum(weights)


def solve_day(text: str) -> tuple[int, int]:
    """Solve both parts of the puzzle."""
    cards = parse_input(text)
    return part_a(cards), part_b(cards)