"""Valves of the volcano network, with compact two-letter names."""

from __future__ import annotations

import re
from dataclasses import dataclass

_ALPHABET = 26
_VALVE_RE = re.compile(r"-?[A-Z]{2}")
_FLOW_RE = re.compile(r"-?\d+")
_MAX_FLOW = 2**16 - 1


@dataclass(frozen=True)
class Name:
    """A two-letter valve name, each letter stored as 0-25."""

    first: int
    second: int

    def __post_init__(self) -> None:
        if not (0 <= self.first < _ALPHABET and 0 <= self.second < _ALPHABET):
            raise ValueError(f"letters out of range: {self.first}, {self.second}")

    @classmethod
    def from_text(cls, text: str) -> Name:
        """Build a name from two upper-case letters such as ``"AA"``."""
        if len(text) != 2 or not all("A" <= char <= "Z" for char in text):
            raise ValueError(f"valve name must be two letters A-Z: {text!r}")
        return cls(ord(text[0]) - ord("A"), ord(text[1]) - ord("A"))

    @classmethod
    def from_int(cls, value: int) -> Name:
        """Inverse of :meth:`to_int`."""
        if not 0 <= value < _ALPHABET * _ALPHABET:
            raise ValueError(f"no valve name has number {value}")
        return cls(value % _ALPHABET, value // _ALPHABET)

    def to_int(self) -> int:
        """A number below 676 that identifies the name."""
        return self.first + self.second * _ALPHABET

    def __str__(self) -> str:
        return chr(ord("A") + self.first) + chr(ord("A") + self.second)


@dataclass(frozen=True)
class Valve:
    """A valve, its flow rate and the valves its tunnels lead to."""

    name: Name
    flow_rate: int
    connects_to: tuple[Name, ...]


def parse_valve(line: str) -> Valve:
    """Parse a line such as ``"Valve AA has flow rate=0; tunnels lead to valves DD, II"``."""
    names = _VALVE_RE.findall(line)
    if not names:
        raise ValueError(f"no valve name in line: {line!r}")
    flow = _FLOW_RE.search(line)
    if flow is None:
        raise ValueError(f"no flow rate in line: {line!r}")
    flow_rate = int(flow.group())
    if not 0 <= flow_rate <= _MAX_FLOW:
        raise ValueError(f"flow rate out of range: {line!r}")
    name, *others = names
    return Valve(
        Name.from_text(name), flow_rate, tuple(Name.from_text(other) for other in others)
    )


def parse_input(text: str) -> list[Valve]:
    return [parse_valve(line) for line in text.rstrip().split("\n")]