"""Treetop tree house: visible trees and scenic scores."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

HeightMap = list[list[int]]
VisibilityMap = list[list[bool]]


def parse_input(text: str) -> HeightMap:
    """Parse the grid of single digit tree heights."""
    grid = []
    for line in text.strip().split("\n"):
        row = []
        for char in line:
            if not "0" <= char <= "9":
                raise ValueError(f"invalid tree height: {char!r}")
            row.append(int(char))
        grid.append(row)
    return grid


def _line_visibility(line: Sequence[int]) -> list[bool]:
    visible = []
    max_height = 0
    for tree in line:
        if tree >= max_height:
            visible.append(True)
            max_height = tree + 1
        else:
            visible.append(False)
    return visible


def _combine(left: VisibilityMap, right: VisibilityMap) -> VisibilityMap:
    return [[a or b for a, b in zip(lrow, rrow)] for lrow, rrow in zip(left, right)]


def _transpose(grid):
    return [list(column) for column in zip(*grid)]


def visibility_map_lr(height_map: HeightMap) -> VisibilityMap:
    """Which trees can be seen from the left or right edge."""
    left = [_line_visibility(row) for row in height_map]
    right = [_line_visibility(row[::-1])[::-1] for row in height_map]
    return _combine(left, right)


def visibility_map_v(height_map: HeightMap) -> VisibilityMap:
    """Which trees can be seen from the top or bottom edge."""
    return _transpose(visibility_map_lr(_transpose(height_map)))


def visibility_map(height_map: HeightMap) -> VisibilityMap:
    """Which trees can be seen from any edge."""
    return _combine(visibility_map_lr(height_map), visibility_map_v(height_map))


def _viewing_distance(tree: int, line: Iterable[int]) -> int:
    distance = 0
    for height in line:
        distance += 1
        if height >= tree:
            break
    return distance


def scenic_score(i: int, j: int, height_map: HeightMap) -> int:
    """Product of the viewing distances in all four directions from tree (i, j)."""
    tree = height_map[i][j]
    row = height_map[i]
    up = _viewing_distance(tree, (line[j] for line in reversed(height_map[:i])))
    down = _viewing_distance(tree, (line[j] for line in height_map[i + 1:]))
    left = _viewing_distance(tree, reversed(row[:j]))
    right = _viewing_distance(tree, row[j + 1:])
    return up * left * down * right


def solve_part_1(height_map: HeightMap) -> int:
    return sum(sum(row) for row in visibility_map(height_map))


def solve_part_2(height_map: HeightMap) -> int:
    rows = len(height_map)
    cols = len(height_map[0])
    return max(
        (
            scenic_score(i, j, height_map)
            for i in range(1, rows - 1)
            for j in range(1, cols - 1)
        ),
        default=0,
    )


def solve(text: str) -> tuple[int, int]:
    """Solve both parts of the puzzle."""
    height_map = parse_input(text)
    return solve_part_1(height_map), solve_part_2(height_map)