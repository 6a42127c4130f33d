"""Gear ratios: part numbers next to symbols in an engine schematic."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

SymbolGrid = list[list[Optional[str]]]

GEAR = "*"

_NUMBER_RE = re.compile(r"\d+")


@dataclass(frozen=True)
class Location:
    """A column ``x`` and a row ``y`` in the schematic."""

    x: int
    y: int


@dataclass(frozen=True)
class PartNumber:
    """A number in the schematic and the cells its first and last digit occupy."""

    value: int
    start_loc: Location
    end_loc: Location

    def neighbours(self) -> list[Location]:
        """Cells around the number, the number's own cells included."""
        y = self.start_loc.y
        above = max(y, 1) - 1
        return [
            loc
            for x in range(max(self.start_loc.x, 1) - 1, self.end_loc.x + 2)
            for loc in (Location(x, above), Location(x, y), Location(x, y + 1))
        ]

    def _neighbouring_symbols(self, symbols: Sequence[Sequence[Optional[str]]]):
        for loc in self.neighbours():
            if loc.y < len(symbols):
                row = symbols[loc.y]
                if loc.x < len(row) and row[loc.x] is not None:
                    yield row[loc.x]

    def neighbours_symbol(self, symbols: Sequence[Sequence[Optional[str]]]) -> bool:
        """Whether any symbol touches the number."""
        return any(True for _ in self._neighbouring_symbols(symbols))

    def is_possible_gear(self, symbols: Sequence[Sequence[Optional[str]]]) -> bool:
        """Whether a gear symbol touches the number."""
        return any(symbol == GEAR for symbol in self._neighbouring_symbols(symbols))

    def is_neighbour_of(self, loc: Location) -> bool:
        """Whether ``loc`` lies in the box around the number."""
        return (
            max(self.start_loc.x, 1) - 1 <= loc.x <= self.end_loc.x + 1
            and max(self.start_loc.y, 1) - 1 <= loc.y <= self.end_loc.y + 1
        )


def parse_line_part_numbers(line: str, y: int) -> list[PartNumber]:
    """Every number on one line of the schematic, which is row ``y``."""
    return [
        PartNumber(int(match.group()), Location(match.start(), y), Location(match.end() - 1, y))
        for match in _NUMBER_RE.finditer(line)
    ]


def parse_symbols(text: str) -> SymbolGrid:
    """Grid of the schematic holding each symbol, or None for dots and digits."""
    return [
        [None if char == "." or "0" <= char <= "9" else char for char in line]
        for line in text.split("\n")
    ]


def parse_input(text: str) -> tuple[list[PartNumber], SymbolGrid]:
    """Return the numbers and the symbol grid of the schematic."""
    part_numbers = [
        part
        for y, line in enumerate(text.split("\n"))
        for part in parse_line_part_numbers(line, y)
    ]
    return part_numbers, parse_symbols(text)


def symbol_locations(symbols: Sequence[Sequence[Optional[str]]], value: str) -> list[Location]:
    """Every location holding the symbol ``value``, row by row."""
    return [
        Location(x, y)
        for y, row in enumerate(symbols)
        for x, symbol in enumerate(row)
        if symbol == value
    ]


def part_a(part_numbers: Sequence[PartNumber], symbols: SymbolGrid) -> int:
    """Sum of the numbers that touch a symbol."""
    return sum(part.value for part in part_numbers if part.neighbours_symbol(symbols))


def part_b(part_numbers: Sequence[PartNumber], symbols: SymbolGrid) -> int:
    """Sum of the gear ratios of gears touching exactly two numbers."""
    candidates = [part for part in part_numbers if part.is_possible_gear(symbols)]
    total = 0
    for gear_loc in symbol_locations(symbols, GEAR):
        touching = [part for part in candidates if part.is_neighbour_of(gear_loc)]
        if len(touching) == 2:
            total += touching[0].value * touching[1].value
    return total


def solve_day(text: str) -> tuple[int, int]:
    """Solve both parts of the puzzle."""
    part_numbers, symbols = parse_input(text)
    return part_a(part_numbers, symbols), part_b(part_numbers, symbols)