from random import Random

import pytest

from board import Board
from config import OBSTACLE, FISH
from robot import Character, is_move_valid, target_position


def _character_at(board, pos):
    character = Character("Player", pos)
    character.place(board)
    return character


def test_target_position_steps_one_cell():
    assert target_position((5, 5), "up", 10) == (5, 4)
    assert target_position((5, 5), "down", 10) == (5, 6)
    assert target_position((5, 5), "left", 10) == (4, 5)
    assert target_position((5, 5), "right", 10) == (6, 5)


def test_target_position_clamps_to_edge():
    assert target_position((0, 0), "up", 10) == (0, 0)
    assert target_position((0, 0), "left", 10) == (0, 0)
    assert target_position((9, 9), "right", 10) == (9, 9)
    assert target_position((9, 9), "down", 10) == (9, 9)


def test_target_position_rejects_unknown_direction():
    with pytest.raises(ValueError):
        target_position((5, 5), "north", 10)


def test_is_move_valid_rules():
    board = Board()

    assert not is_move_valid(board, (1, 2))   # sky
    assert not is_move_valid(board, (4, 8))   # obstacle
    assert is_move_valid(board, (4, 7))       # coin
    assert is_move_valid(board, (1, 4))       # fish
    assert is_move_valid(board, (5, 5))       # water
    assert is_move_valid(board, (0, 9))       # ground


def test_move_onto_coin_collects_and_relocates():
    board = Board()
    character = _character_at(board, (3, 7))

    assert character.move("right", board) is True

    assert character.pos == (4, 7)
    assert character.score == 1
    assert character.value == 41
    assert board.value(4, 7) == 141
    assert board.value(3, 7) == 100


def test_move_into_edge_is_noop():
    board = Board()
    character = _character_at(board, (0, 9))

    assert character.move("left", board) is False
    assert character.move("down", board) is False
    assert character.pos == (0, 9)
    assert board.value(0, 9) == 140


def test_move_onto_fish_dislodges_it():
    board = Board()
    character = _character_at(board, (1, 5))

    assert character.move("up", board, Random(0)) is True

    fish = board.find_overlay(FISH)
    assert character.pos == (1, 4)
    assert fish in {(0, 4), (2, 4), (1, 3)}
    assert character.fish_moved is True


def test_move_onto_boxed_in_fish_is_rejected():
    board = Board()
    board.clear_overlay(1, 4)
    board.set_overlay(0, 3, FISH)
    board.set_overlay(1, 3, OBSTACLE)
    character = _character_at(board, (0, 4))

    assert character.move("up", board, Random(0)) is False

    assert character.pos == (0, 4)
    assert board.find_overlay(FISH) == (0, 3)
