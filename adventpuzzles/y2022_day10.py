"""Cathode-ray tube: a tiny CPU driving a sprite on a 40x6 screen."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

SCREEN_WIDTH = 40
SCREEN_HEIGHT = 6
SIGNAL_CYCLES = (20, 60, 100, 140, 180, 220)

_COSTS = {"noop": 1, "addx": 2}


@dataclass(frozen=True)
class Op:
    """A CPU instruction: ``noop`` or ``addx`` with its operand."""

    name: str
    value: int = 0

    def __post_init__(self) -> None:
        if self.name not in _COSTS:
            raise ValueError(f"unknown instruction: {self.name!r}")

    @property
    def cost(self) -> int:
        """Number of cycles the instruction takes."""
        return _COSTS[self.name]


@dataclass
class Cpu:
    """The register, the cycle count and every register change with its cycle."""

    register: int = 1
    cycle: int = 0
    states: list[tuple[int, int]] = field(default_factory=lambda: [(0, 1)])

    def apply(self, op: Op) -> None:
        """Run one instruction."""
        self.cycle += op.cost
        if op.name == "addx":
            self.register += op.value
            self.states.append((self.cycle, self.register))

    def apply_many(self, ops: Iterable[Op]) -> Cpu:
        """Run every instruction in turn and return this CPU."""
        for op in ops:
            self.apply(op)
        return self

    def register_at(self, cycle: int) -> int:
        """Value of the register during the given cycle."""
        earlier = [register for state, register in self.states if state < cycle]
        if not earlier:
            raise ValueError(f"no register value known during cycle {cycle}")
        return earlier[-1]

    def signal_strength_at(self, cycle: int) -> int:
        return self.register_at(cycle) * cycle

    def pixel(self, x: int) -> bool:
        """Whether the pixel drawn during cycle ``x`` is lit."""
        register = self.register_at(x)
        pixel_loc = ((x - 1) % SCREEN_WIDTH) + 1
        return register <= pixel_loc < register + 3


def parse_op(line: str) -> Op:
    """Parse ``"noop"`` or ``"addx <n>"``."""
    name, _, value = line.partition(" ")
    if name == "noop":
        return Op("noop")
    if name == "addx":
        try:
            return Op("addx", int(value))
        except ValueError:
            raise ValueError(f"invalid addx operand: {line!r}") from None
    raise ValueError(f"unknown instruction: {line!r}")


def parse_input(text: str) -> list[Op]:
    return [parse_op(line) for line in text.split("\n")]


def get_line(cpu: Cpu, line: int) -> str:
    """Render one row of the screen."""
    start = line * SCREEN_WIDTH + 1
    return "".join(
        "#" if cpu.pixel(x) else "." for x in range(start, start + SCREEN_WIDTH)
    )


def solve_part_1(cpu: Cpu) -> int:
    return sum(cpu.signal_strength_at(cycle) for cycle in SIGNAL_CYCLES)


def solve_part_2(cpu: Cpu) -> str:
    return "\n".join(get_line(cpu, line) for line in range(SCREEN_HEIGHT))


def solve(text: str) -> tuple[int, str]:
    """Solve both parts of the puzzle."""
    cpu = Cpu().apply_many(parse_input(text))
    return solve_part_1(cpu), solve_part_2(cpu)