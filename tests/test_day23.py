import pytest

from advent2021.day23 import (
    Amphipod,
    Burrow,
    Direction,
    Move,
    part1,
    part2,
    solve,
)

EXAMPLE = """#############
#...........#
###B#C#B#D###
  #A#D#C#A#
  #########"""

APPLY_INPUT = """#############
#...........#
###A#C#B#D###
  #D#B#C#A#
  #########"""

SORTED = """#############
#...........#
###A#B#C#D###
  #A#B#C#D#
  #########"""


def test_apply():
    burrow = Burrow.parse(APPLY_INPUT, 2)
    assert burrow.cost == 0

    burrow = burrow.apply(Move(Direction.OUT, 2, 1))
    assert burrow.cost == 2

    burrow = burrow.apply(Move(Direction.OUT, 2, 3))
    assert burrow.cost == 3002

    burrow = burrow.apply(Move(Direction.IN, 2, 1))
    assert burrow.cost == 3005
    assert burrow.holes[0] == (Amphipod.A,)
    assert burrow.hallway[3] is Amphipod.D


def test_parse_holes_bottom_first():
    burrow = Burrow.parse(EXAMPLE, 2)
    assert burrow.holes[0] == (Amphipod.A, Amphipod.B)
    assert burrow.holes[3] == (Amphipod.A, Amphipod.D)
    assert all(cell is None for cell in burrow.hallway)


def test_initial_moves():
    moves = Burrow.parse(EXAMPLE, 2).moves()
    assert len(moves) == 28
    assert all(m.direction is Direction.OUT for m in moves)
    assert {m.pos_hallway for m in moves} == {0, 1, 3, 5, 7, 9, 10}


def test_sorted_burrow():
    burrow = Burrow.parse(SORTED, 2)
    assert burrow.is_final()
    assert burrow.moves() == []
    assert solve(burrow) == 0


def test_example_not_final():
    assert not Burrow.parse(EXAMPLE, 2).is_final()


def test_example_part1():
    assert part1(EXAMPLE) == 12521


def test_example_part2():
    assert part2(EXAMPLE) == 44169


@pytest.mark.parametrize(
    "char, cost, home",
    [("A", 1, 0), ("B", 10, 1), ("C", 100, 2), ("D", 1000, 3)],
)
def test_amphipod_properties(char, cost, home):
    amphipod = Amphipod.from_char(char)
    assert amphipod.move_cost() == cost
    assert amphipod.desired_home_idx() == home


def test_invalid_amphipod():
    with pytest.raises(ValueError):
        Amphipod.from_char("E")


def test_apply_invalid_moves():
    burrow = Burrow.parse(EXAMPLE, 2)
    with pytest.raises(ValueError):
        burrow.apply(Move(Direction.IN, 2, 1))
    emptied = burrow.apply(Move(Direction.OUT, 2, 0)).apply(Move(Direction.OUT, 2, 1))
    with pytest.raises(ValueError):
        emptied.apply(Move(Direction.OUT, 2, 3))


def test_equality_ignores_cost():
    burrow = Burrow.parse(EXAMPLE, 2)
    moved = burrow.apply(Move(Direction.OUT, 2, 1))
    back = moved.apply(Move(Direction.OUT, 4, 3))
    assert moved != burrow
    assert back != moved
    assert Burrow(burrow.hallway, burrow.holes, 2, cost=99) == burrow