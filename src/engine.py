import random
import threading

from config import CHARACTER_START, FISH
from board import Board
from robot import Character
from fish import wander_fish


class GameEngine:
    """Owns the grid, the character and the fish's random source.

    Every change goes through move_character() and every read through
    snapshot(), both under the same lock.
    """

    def __init__(self, rng=None):
        self.rng = rng or random.Random()
        self._lock = threading.Lock()
        self.board = Board()
        self.character = Character("Player", CHARACTER_START)
        self.character.place(self.board)

    def move_character(self, direction):
        with self._lock:
            moved = self.character.move(direction, self.board, self.rng)
            if not self.character.fish_moved:
                wander_fish(self.board, self.rng)
            return moved

    def snapshot(self):
        with self._lock:
            return self.board.snapshot()

    @property
    def character_position(self):
        with self._lock:
            return self.character.pos

    @property
    def score(self):
        with self._lock:
            return self.character.score

    @property
    def character_value(self):
        with self._lock:
            return self.character.value

    @property
    def fish_position(self):
        with self._lock:
            return self.board.find_overlay(FISH)
