from random import Random

from board import Board
from config import FISH, OBSTACLE
from fish import wander_fish


def test_wander_moves_one_step_into_water():
    board = Board()

    pos = wander_fish(board, Random(1))

    assert pos in {(0, 4), (2, 4), (1, 3), (1, 5)}
    assert board.find_overlay(FISH) == pos
    assert board.value(1, 4) == 200


def test_wander_stays_inside_water_band():
    board = Board()
    rng = Random(5)

    for _ in range(300):
        x, y = wander_fish(board, rng)
        assert 0 <= x < 10
        assert 3 <= y <= 5


def test_wander_is_reproducible_with_same_seed():
    a, b = Board(), Board()
    rng_a, rng_b = Random(42), Random(42)

    path_a = [wander_fish(a, rng_a) for _ in range(20)]
    path_b = [wander_fish(b, rng_b) for _ in range(20)]

    assert path_a == path_b


def test_boxed_in_fish_stays_put():
    board = Board()
    board.clear_overlay(1, 4)
    board.set_overlay(0, 3, FISH)
    board.set_overlay(1, 3, OBSTACLE)
    board.set_overlay(0, 4, OBSTACLE)

    assert wander_fish(board, Random(0)) == (0, 3)
    assert board.value(0, 3) == 205


def test_wander_without_fish_returns_none():
    board = Board()
    board.clear_overlay(1, 4)

    assert wander_fish(board, Random(0)) is None
