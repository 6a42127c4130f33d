"""Distress signal: ordering nested packets of lists and integers."""

from __future__ import annotations

import json
import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union

PacketValue = Union[int, "tuple[Packet, ...]"]


@dataclass(frozen=True)
class Packet:
    """An integer or a list of packets.

    Equality is structural; ordering follows the puzzle's comparison rules,
    under which ``[2]`` and ``2`` compare as neither smaller nor larger.
    """

    value: PacketValue

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Packet):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Packet):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Packet):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Packet):
            return NotImplemented
        return compare(self, other) >= 0


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def compare(left: Packet, right: Packet) -> int:
    """Return -1, 0 or 1 as ``left`` is ordered before, level with or after ``right``."""
    lv, rv = left.value, right.value
    if isinstance(lv, int) and isinstance(rv, int):
        return _sign(lv - rv)
    if isinstance(lv, int):
        return compare(Packet((left,)), right)
    if isinstance(rv, int):
        return compare(left, Packet((right,)))
    for sub_left, sub_right in zip(lv, rv):
        result = compare(sub_left, sub_right)
        if result:
            return result
    return _sign(len(lv) - len(rv))


def _from_json(data: object) -> Packet:
    if isinstance(data, bool):
        raise ValueError(f"packet may not hold booleans: {data!r}")
    if isinstance(data, int):
        if data < 0:
            raise ValueError(f"packet values must not be negative: {data!r}")
        return Packet(data)
    if isinstance(data, list):
        return Packet(tuple(_from_json(item) for item in data))
    raise ValueError(f"packet may hold only lists and integers: {data!r}")


def parse_packet(text: str) -> Packet:
    """Parse a packet written as a JSON list."""
    return _from_json(json.loads(text))


def _parse_pair(block: str) -> tuple[Packet, Packet]:
    left, sep, right = block.partition("\n")
    if not sep:
        raise ValueError(f"a pair needs two lines: {block!r}")
    return parse_packet(left), parse_packet(right)


def parse_input(text: str) -> list[tuple[Packet, Packet]]:
    """Parse the blank-line separated pairs of packets."""
    return [_parse_pair(block) for block in text.strip().split("\n\n")]


def solve_part_1(pairs: Sequence[tuple[Packet, Packet]]) -> int:
    """Sum of the one-based indices of pairs that are in the right order."""
    return sum(index for index, (left, right) in enumerate(pairs, 1) if left < right)


def solve_part_2(pairs: Sequence[tuple[Packet, Packet]]) -> int:
    """Product of the one-based positions of the divider packets once all are sorted."""
    dividers = (parse_packet("[[2]]"), parse_packet("[[6]]"))
    packets = [packet for pair in pairs for packet in pair]
    packets.extend(dividers)
    return math.prod(
        index for index, packet in enumerate(sorted(packets), 1) if packet in dividers
    )


def solve(text: str) -> tuple[int, int]:
    """Solve both parts of the puzzle."""
    pairs = parse_input(text)
    return solve_part_1(pairs), solve_part_2(pairs)