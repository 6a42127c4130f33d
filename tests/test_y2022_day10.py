import pytest

from adventpuzzles.y2022_day10 import (
    Cpu,
    Op,
    get_line,
    parse_input,
    parse_op,
    solve,
    solve_part_1,
    solve_part_2,
)

EXAMPLE = """addx 15
addx -11
addx 6
addx -3
addx 5
addx -1
addx -8
addx 13
addx 4
noop
addx -1
addx 5
addx -1
addx 5
addx -1
addx 5
addx -1
addx 5
addx -1
addx -35
addx 1
addx 24
addx -19
addx 1
addx 16
addx -11
noop
noop
addx 21
addx -15
noop
noop
addx -3
addx 9
addx 1
addx -3
addx 8
addx 1
addx 5
noop
noop
noop
noop
noop
addx -36
noop
addx 1
addx 7
noop
noop
noop
addx 2
addx 6
noop
noop
noop
noop
noop
addx 1
noop
noop
addx 7
addx 1
noop
addx -13
addx 13
addx 7
noop
addx 1
addx -33
noop
noop
noop
addx 2
noop
noop
noop
addx 8
noop
addx -1
addx 2
addx 1
noop
addx 17
addx -9
addx 1
addx 1
addx -3
addx 11
noop
noop
addx 1
noop
addx 1
noop
noop
addx -13
addx -19
addx 1
addx 3
addx 26
addx -30
addx 12
addx -1
addx 3
addx 1
noop
noop
noop
addx -9
addx 18
addx 1
addx 2
noop
noop
addx 9
noop
noop
noop
addx -1
addx 2
addx -37
addx 1
addx 3
noop
addx 15
addx -21
addx 22
addx -6
addx 1
noop
addx 2
addx 1
noop
addx -10
noop
noop
addx 20
addx 1
addx 2
addx 2
addx -6
addx -11
noop
noop
noop"""

PICTURE = (
    "##..##..##..##..##..##..##..##..##..##..\n"
    "###...###...###...###...###...###...###.\n"
    "####....####....####....####....####....\n"
    "#####.....#####.....#####.....#####.....\n"
    "######......######......######......####\n"
    "#######.......#######.......#######....."
)


@pytest.fixture
def cpu():
    return Cpu().apply_many(parse_input(EXAMPLE))


@pytest.mark.parametrize(
    "line, expected",
    [("noop", Op("noop")), ("addx 15", Op("addx", 15)), ("addx -15", Op("addx", -15))],
)
def test_parse_op(line, expected):
    assert parse_op(line) == expected


@pytest.mark.parametrize("line", ["jump 3", "addx x", ""])
def test_parse_op_invalid(line):
    with pytest.raises(ValueError):
        parse_op(line)


def test_default_cpu():
    assert Cpu() == Cpu(register=1, cycle=0, states=[(0, 1)])


def test_apply_addx_records_state():
    cpu = Cpu()
    cpu.apply(Op("noop"))
    cpu.apply(Op("addx", 3))
    assert cpu.cycle == 3
    assert cpu.register == 4
    assert cpu.states == [(0, 1), (3, 4)]


@pytest.mark.parametrize(
    "cycle, strength",
    [(20, 420), (60, 1140), (100, 1800), (140, 2940), (180, 2880), (220, 3960)],
)
def test_signal_strength(cpu, cycle, strength):
    assert cpu.signal_strength_at(cycle) == strength


def test_register_at_before_start_raises():
    with pytest.raises(ValueError):
        Cpu().register_at(0)


def test_solve_part_1(cpu):
    assert solve_part_1(cpu) == 13140


@pytest.mark.parametrize(
    "x, lit", [(1, True), (2, True), (3, False), (4, False), (5, True), (6, True)]
)
def test_pixel(cpu, x, lit):
    assert cpu.pixel(x) is lit


@pytest.mark.parametrize("index, expected", list(enumerate(PICTURE.split("\n"))))
def test_get_line(cpu, index, expected):
    assert get_line(cpu, index) == expected


def test_solve_part_2(cpu):
    assert solve_part_2(cpu) == PICTURE


def test_solve():
    assert solve(EXAMPLE) == (13140, PICTURE)