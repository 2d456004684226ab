import random

from config import FISH, WATER, WATER_ROWS
from board import encode_cell

DIRS = [(-1,0),(1,0),(0,-1),(0,1)]   # left, right, up, down
PLAIN_WATER = encode_cell(WATER)


def can_swim_to(board, pos):
    x, y = pos
    return (board.in_bounds(x, y)
            and WATER_ROWS[0] <= y < WATER_ROWS[1]
            and board.grid[x][y] == PLAIN_WATER)


def wander_fish(board, rng=None, start=None):
    """Move the fish one step in a random direction if any neighbour is free water.

    Returns the fish's position afterwards, or None when there is no fish.
    """
    rng = rng or random
    pos = start if start is not None else board.find_overlay(FISH)
    if pos is None:
        return None

    moves = DIRS[:]
    rng.shuffle(moves)
    for dx, dy in moves:
        npos = (pos[0]+dx, pos[1]+dy)
        if can_swim_to(board, npos):
            board.clear_overlay(*pos)
            board.set_overlay(*npos, FISH)
            return npos
    return pos
