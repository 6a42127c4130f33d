"""Supply stacks: moving crates with two kinds of crane."""

from __future__ import annotations

import re
from collections.abc import Iterable

Stack = list[str]
Operation = tuple[int, int, int]

_OPERATION_RE = re.compile(r"move (\d+) from (\d+) to (\d+)")


def extract_stacks(text: str) -> list[Stack]:
    """Read the crate drawing at the top of the input, bottom crate first."""
    stacks: list[Stack] = []
    column = 0
    for start in range(0, len(text), 4):
        chunk = text[start:start + 4]
        if len(chunk) == 4 and chunk[0] == "[" and chunk[2] == "]":
            if column >= len(stacks):
                stacks.extend([] for _ in range(column + 1 - len(stacks)))
            stacks[column].insert(0, chunk[1])
            column = 0 if chunk[3] == "\n" else column + 1
        elif chunk == "    ":
            column += 1
        elif chunk == "   \n":
            column = 0
        else:
            break
    return stacks


def parse_input(text: str) -> tuple[list[Stack], list[Operation]]:
    """Return the crate stacks and the list of move operations."""
    operations = [
        (int(count), int(source), int(target))
        for count, source, target in _OPERATION_RE.findall(text)
    ]
    return extract_stacks(text), operations


def _stack_index(stacks: list[Stack], number: int) -> int:
    if not 1 <= number <= len(stacks):
        raise ValueError(f"no stack numbered {number}")
    return number - 1


def apply_operation_p1(stacks: list[Stack], operation: Operation) -> list[Stack]:
    """Move crates one at a time; returns new stacks."""
    count, source, target = operation
    result = [list(stack) for stack in stacks]
    src = result[_stack_index(result, source)]
    dst = result[_stack_index(result, target)]
    for _ in range(count):
        dst.append(src.pop())
    return result


def apply_operation_p2(stacks: list[Stack], operation: Operation) -> list[Stack]:
    """Move crates several at once, keeping their order; returns new stacks."""
    count, source, target = operation
    result = [list(stack) for stack in stacks]
    src = result[_stack_index(result, source)]
    dst = result[_stack_index(result, target)]
    if count > len(src):
        raise IndexError(f"stack {source} holds fewer than {count} crates")
    if count:
        moved = src[-count:]
        del src[-count:]
        dst.extend(moved)
    return result


def apply_operations_p1(stacks: list[Stack], operations: Iterable[Operation]) -> list[Stack]:
    for operation in operations:
        stacks = apply_operation_p1(stacks, operation)
    return stacks


def apply_operations_p2(stacks: list[Stack], operations: Iterable[Operation]) -> list[Stack]:
    for operation in operations:
        stacks = apply_operation_p2(stacks, operation)
    return stacks


def _top_crates(stacks: list[Stack]) -> str:
    return "".join(stack[-1] for stack in stacks if stack)


def solve_part_1(stacks: list[Stack], operations: Iterable[Operation]) -> str:
    return _top_crates(apply_operations_p1(stacks, operations))


def solve_part_2(stacks: list[Stack], operations: Iterable[Operation]) -> str:
    return _top_crates(apply_operations_p2(stacks, operations))


def solve(text: str) -> tuple[str, str]:
    """Solve both parts of the puzzle."""
    stacks, operations = parse_input(text)
    return solve_part_1(stacks, operations), solve_part_2(stacks, operations)