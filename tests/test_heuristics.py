import random

import pytest

from npuzzle.domains.board import Board
from npuzzle.heuristics.euclidean import euclidean
from npuzzle.heuristics.manhattan import manhattan
from npuzzle.heuristics.roundtrip_manhattan import roundtrip_manhattan
from npuzzle.heuristics.select import NAMES, Heuristic, choose_heuristic
from npuzzle.heuristics.wrong_positions import wrong_positions

TWO_AWAY = Board(3, [1, 2, 3, 4, 0, 6, 7, 5, 8])
DIAGONAL = Board(3, [5, 2, 3, 4, 1, 6, 7, 8, 0])


@pytest.mark.parametrize("h", list(Heuristic))
@pytest.mark.parametrize("n", [2, 3, 4, 5])
@pytest.mark.parametrize("layout", ["classic", "snail"])
def test_zero_on_goal(h, n, layout):
    assert h(Board.solved(n, layout)) == 0


def test_known_values():
    assert manhattan(TWO_AWAY) == 2
    assert euclidean(TWO_AWAY) == 2
    assert wrong_positions(TWO_AWAY) == 2
    # 5: 1 + 1 to reach the blank, 8: 1 + 2 to reach the blank
    assert roundtrip_manhattan(TWO_AWAY) == 5


def test_euclidean_truncates():
    assert manhattan(DIAGONAL) == 4
    assert euclidean(DIAGONAL) == 2  # 2 * sqrt(2)
    assert wrong_positions(DIAGONAL) == 2


def test_blank_is_ignored():
    # only the blank and tile 8 are off; the blank contributes nothing
    b = Board(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert manhattan(b) == 1
    assert wrong_positions(b) == 1


def test_snail_layout_values():
    b = Board(3, [1, 2, 3, 0, 8, 4, 7, 6, 5], layout="snail")
    assert manhattan(b) == 1
    assert wrong_positions(b) == 1


def test_enum_dispatch_matches_functions():
    for b in (TWO_AWAY, DIAGONAL):
        assert Heuristic.MANHATTAN(b) == manhattan(b)
        assert Heuristic.EUCLIDEAN(b) == euclidean(b)
        assert Heuristic.WRONG_POSITIONS(b) == wrong_positions(b)
        assert Heuristic.ROUNDTRIP_MANHATTAN(b) == roundtrip_manhattan(b)


def test_choose_heuristic():
    assert choose_heuristic() is Heuristic.MANHATTAN
    assert choose_heuristic(None) is Heuristic.MANHATTAN
    assert choose_heuristic("euclidean") is Heuristic.EUCLIDEAN
    assert choose_heuristic("wrong_positions") is Heuristic.WRONG_POSITIONS
    assert choose_heuristic("Roundtrip-Manhattan") is Heuristic.ROUNDTRIP_MANHATTAN
    assert choose_heuristic("m") is Heuristic.MANHATTAN
    assert choose_heuristic(Heuristic.EUCLIDEAN) is Heuristic.EUCLIDEAN
    assert NAMES == ("manhattan", "euclidean", "wrong-positions", "roundtrip-manhattan")
    with pytest.raises(ValueError):
        choose_heuristic("linear-conflict")


def test_admissible_flag():
    assert Heuristic.MANHATTAN.admissible
    assert not Heuristic.ROUNDTRIP_MANHATTAN.admissible


ADMISSIBLE = [manhattan, euclidean, wrong_positions]


@pytest.mark.parametrize("h", ADMISSIBLE)
def test_admissible_on_every_2x2_state(h, dist2):
    for tiles, d in dist2.items():
        assert h(Board(2, tiles)) <= d


@pytest.mark.parametrize("h", ADMISSIBLE)
def test_admissible_on_3x3_sample(h, dist3):
    rng = random.Random(3)
    for tiles in rng.sample(sorted(dist3), 3000):
        assert h(Board(3, tiles)) <= dist3[tiles]


@pytest.mark.parametrize("h", ADMISSIBLE)
def test_admissible_on_3x3_snail_sample(h, dist3_snail):
    rng = random.Random(5)
    for tiles in rng.sample(sorted(dist3_snail), 1000):
        assert h(Board(3, tiles, layout="snail")) <= dist3_snail[tiles]


def test_roundtrip_can_overestimate(dist3):
    assert dist3[TWO_AWAY.tiles] == 2
    assert roundtrip_manhattan(TWO_AWAY) > 2
