from aocsolutions.y2018_day03 import Claim, Fabric, Solver, parse_input

EXAMPLE = "#1 @ 1,3: 4x4\n#2 @ 3,1: 4x4\n#3 @ 5,5: 2x2\n"


def test_parse_input():
    claims = parse_input(EXAMPLE)
    assert claims == [
        Claim(1, 1, 3, 4, 4),
        Claim(2, 3, 1, 4, 4),
        Claim(3, 5, 5, 2, 2),
    ]


def test_parse_input_skips_bad_lines():
    assert parse_input("garbage\n#7 @ 2,2: 1x1\n") == [Claim(7, 2, 2, 1, 1)]


def test_squares_cover_area():
    claim = Claim(9, 2, 4, 3, 2)
    squares = list(claim.squares())
    assert len(squares) == claim.width * claim.height
    assert len(set(squares)) == len(squares)
    assert (claim.left, claim.top) in squares
    assert (claim.left + claim.width - 1, claim.top + claim.height - 1) in squares


def test_example():
    solver = Solver(EXAMPLE)
    assert solver.part1() == "4"
    assert solver.part2() == "3"


def test_identical_claims_overlap_fully():
    claim = Claim(5, 0, 0, 3, 2)
    other = Claim(6, 0, 0, 3, 2)
    fabric = Fabric()
    assert fabric.add_claims([claim, other]) == claim.width * claim.height
    assert fabric.intact_claim([claim, other]) == 0


def test_overlap_counted_once():
    claim = Claim(5, 1, 1, 2, 2)
    fabric = Fabric()
    fabric.add_claims([claim, claim])
    again = fabric.add_claims([claim])
    assert again == fabric.add_claims([])