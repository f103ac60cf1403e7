import pytest

from aocsolutions.y2018_day15 import Dir, Game, Pos, Solver, Team

INPUT1 = """\
#######
#E..G.#
#...#.#
#.G.#G#
#######
"""

INPUT2 = """\
#######
#.E...#
#.....#
#...G.#
#######
"""

INPUT3 = """\
#########
#G..G..G#
#.......#
#.......#
#G..E..G#
#.......#
#.......#
#G..G..G#
#########
"""

INPUT4 = """\
#######
#.G...#
#...EG#
#.#.#G#
#..G#E#
#.....#
#######
"""

INPUT5 = """\
#######
#G..#E#
#E#E.E#
#G.##.#
#...#E#
#...E.#
#######
"""

INPUT6 = """\
#######
#E..EG#
#.#G.E#
#E.##E#
#G..#.#
#..E#.#
#######
"""

INPUT7 = """\
#######
#E.G#.#
#.#G..#
#G.#.G#
#G..#.#
#...E.#
#######
"""

INPUT8 = """\
#######
#.E...#
#.#..G#
#.###.#
#E#G#G#
#...#G#
#######
"""

INPUT9 = """\
#########
#G......#
#.E.#...#
#..##..G#
#...##..#
#...#...#
#.G...G.#
#.....G.#
#########
"""


def test_team_other():
    assert Team.ELVES.other() is Team.GOBLINS
    assert Team.GOBLINS.other() is Team.ELVES


def test_pos_ordering_is_reading_order():
    assert Pos(x=5, y=1) < Pos(x=1, y=2)
    assert Pos(x=1, y=2) < Pos(x=2, y=2)


def test_pos_in_range_and_step():
    centre = Pos(x=3, y=3)
    assert centre.step(Dir.NORTH) == Pos(x=3, y=2)
    assert centre.step(Dir.WEST) == Pos(x=2, y=3)
    assert centre.step(Dir.EAST) == Pos(x=4, y=3)
    assert centre.step(Dir.SOUTH) == Pos(x=3, y=4)
    assert all(centre.in_range(centre.step(d)) for d in Dir)
    assert not centre.in_range(Pos(x=4, y=4))
    assert not centre.in_range(centre)


def test_str_shows_units_and_annotations():
    expected = (
        "#######\n"
        "#E..G.# 0 E(200) 1 G(200)\n"
        "#...#.#\n"
        "#.G.#G# 2 G(200) 3 G(200)\n"
        "#######\n"
    )
    assert str(Game(INPUT1)) == expected


def test_move_unit_simple():
    game = Game(INPUT1)
    game.move_unit(0)
    assert game.units[0].pos == Pos(x=2, y=1)

    game = Game(INPUT2)
    game.move_unit(0)
    assert game.units[0].pos == Pos(x=3, y=1)


ROUNDS = [
    [(2, 1), (4, 2), (6, 1), (2, 4), (4, 3), (7, 3), (1, 6), (4, 6), (7, 6)],
    [(3, 1), (5, 1), (4, 2), (4, 3), (6, 3), (2, 3), (1, 5), (4, 5), (7, 5)],
    [(3, 2), (5, 2), (4, 2), (3, 3), (4, 3), (5, 3), (1, 4), (4, 4), (7, 5)],
    [(3, 2), (4, 2), (5, 2), (3, 3), (4, 3), (5, 3), (1, 4), (4, 4), (7, 5)],
]


def test_move_unit_rounds():
    game = Game(INPUT3)
    for expected in ROUNDS:
        for index, (x, y) in enumerate(expected):
            game.move_unit(index)
            assert game.units[index].pos == Pos(x=x, y=y)
        game.sort_units()


def test_attack_picks_weakest_adjacent_enemy():
    game = Game("#####\n#GEG#\n#####\n")
    game.units[2].hp = 10
    game.attack(1)
    assert game.units[2].hp == 7
    assert game.units[0].hp == 200


def test_attack_kills_at_zero():
    game = Game("####\n#EG#\n####\n")
    game.units[1].hp = 2
    game.attack(0)
    assert game.units[1].hp == 0
    assert not game.units[1].is_alive()
    assert game.is_victory(Team.ELVES)


@pytest.mark.parametrize(
    "text, rounds, total_hp",
    [
        (INPUT4, 47, 590),
        (INPUT5, 37, 982),
        (INPUT6, 46, 859),
        (INPUT7, 35, 793),
        (INPUT8, 54, 536),
        (INPUT9, 20, 937),
    ],
)
def test_combat(text, rounds, total_hp):
    game = Game(text)
    game.simulate(None)
    assert game.rounds == rounds
    assert game.total_hp() == total_hp
    assert game.outcome() == rounds * total_hp


@pytest.mark.parametrize(
    "text, elf_power, rounds, total_hp",
    [
        (INPUT4, 15, 29, 172),
        (INPUT6, 4, 33, 948),
        (INPUT7, 15, 37, 94),
        (INPUT8, 12, 39, 166),
        (INPUT9, 34, 30, 38),
    ],
)
def test_help_elves(text, elf_power, rounds, total_hp):
    game = Game.help_elves(text)
    assert game.elf_power == elf_power
    assert game.rounds == rounds
    assert game.total_hp() == total_hp
    assert game.winner is Team.ELVES


def test_solver():
    solver = Solver(INPUT4)
    assert solver.part1() == str(47 * 590)
    assert solver.part2() == str(29 * 172)


def test_set_elf_power_only_affects_elves():
    game = Game(INPUT1)
    game.set_elf_power(20)
    powers = {unit.team: unit.power for unit in game.units}
    assert powers == {Team.ELVES: 20, Team.GOBLINS: 3}
    assert game.elf_power == 20