"""Hill climbing: shortest climbs over a height map."""

from __future__ import annotations

from collections import deque

HeightMap = list[list[int]]
Location = tuple[int, int]

UNREACHABLE = 2**32 - 2
NO_START = 2**32 - 1


def _height(char: str) -> int:
    lower = char.lower()
    if not "a" <= lower <= "z":
        raise ValueError(f"invalid height: {char!r}")
    return ord(lower) - ord("a")


def _find_last(text: str, marker: str) -> Location:
    found = (0, 0)
    for i, line in enumerate(text.split("\n")):
        for j, char in enumerate(line):
            if char == marker:
                found = (i, j)
    return found


def parse_input(text: str) -> tuple[HeightMap, Location, Location]:
    """Return the height map, the start and the end location."""
    height_map = [[_height(c) for c in line] for line in text.strip().split("\n")]
    start = _find_last(text, "S")
    end = _find_last(text, "E")
    height_map[start[0]][start[1]] = 0
    height_map[end[0]][end[1]] = 25
    return height_map, start, end


def distance_map(height_map: HeightMap, end: Location) -> list[list[int]]:
    """Steps needed from each cell to reach ``end``, climbing at most one level a step.

    Cells that cannot reach the end hold ``UNREACHABLE``.
    """
    rows = len(height_map)
    cols = len(height_map[0])
    distances = [[UNREACHABLE] * cols for _ in range(rows)]
    distances[end[0]][end[1]] = 0
    queue = deque([end])
    while queue:
        i, j = queue.popleft()
        here = height_map[i][j]
        for ni, nj in ((i - 1, j), (i + 1, j), (i, j - 1), (i, j + 1)):
            if not (0 <= ni < rows and 0 <= nj < cols):
                continue
            if distances[ni][nj] != UNREACHABLE or height_map[ni][nj] + 1 < here:
                continue
            distances[ni][nj] = distances[i][j] + 1
            queue.append((ni, nj))
    return distances


def solve_part_1(distances: list[list[int]], start: Location) -> int:
    return distances[start[0]][start[1]]


def solve_part_2(distances: list[list[int]], height_map: HeightMap) -> int:
    return min(
        (
            distances[i][j]
            for i, row in enumerate(height_map)
            for j, height in enumerate(row)
            if height == 0
        ),
        default=NO_START,
    )


def solve(text: str) -> tuple[int, int]:
    """Solve both parts of the puzzle."""
    height_map, start, end = parse_input(text)
    distances = distance_map(height_map, end)
    return solve_part_1(distances, start), solve_part_2(distances, height_map)