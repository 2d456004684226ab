from config import (GRID_SIZE, GROUND, WATER, SKY, EMPTY, OBSTACLE, COIN, FISH,
                    CHARACTER, CHARACTER_MAX, SKY_ROWS, WATER_ROWS,
                    OBSTACLE_POS, COIN_POS, FISH_START)

TERRAINS = (GROUND, WATER, SKY)
OBJECTS = (EMPTY, OBSTACLE, COIN, FISH)


def is_character(overlay):
    return CHARACTER <= overlay <= CHARACTER_MAX


def encode_cell(terrain, overlay=EMPTY):
    """Pack terrain (1..3) and overlay (0, 3, 4, 5 or 40..99) into one cell value."""
    if terrain not in TERRAINS:
        raise ValueError(f"terrain out of range: {terrain}")
    if overlay not in OBJECTS and not is_character(overlay):
        raise ValueError(f"overlay out of range: {overlay}")
    return terrain * 100 + overlay


def decode_cell(value):
    """Split a cell value into (terrain, overlay). Raises ValueError on bad codes."""
    terrain, overlay = divmod(value, 100)
    encode_cell(terrain, overlay)
    return terrain, overlay


def terrain_for_row(y):
    if SKY_ROWS[0] <= y < SKY_ROWS[1]:
        return SKY
    if WATER_ROWS[0] <= y < WATER_ROWS[1]:
        return WATER
    return GROUND


class Board:
    def __init__(self, size=GRID_SIZE):
        self.size = size
        # grid[x][y]: x = column, y = row (0 at the top)
        self.grid = [[encode_cell(terrain_for_row(y)) for y in range(size)] for _ in range(size)]
        self.place_items()
        for column in self.grid:
            for value in column:
                decode_cell(value)

    def place_items(self):
        self.set_overlay(*OBSTACLE_POS, OBSTACLE)
        self.set_overlay(*COIN_POS, COIN)
        self.set_overlay(*FISH_START, FISH)

    def in_bounds(self, x, y):
        return 0 <= x < self.size and 0 <= y < self.size

    def _check(self, x, y):
        if not self.in_bounds(x, y):
            raise IndexError(f"cell {(x, y)} is outside the {self.size}x{self.size} grid")

    def value(self, x, y):
        self._check(x, y)
        return self.grid[x][y]

    def cell(self, x, y):
        return decode_cell(self.value(x, y))

    def terrain_at(self, x, y):
        return self.value(x, y) // 100

    def overlay_at(self, x, y):
        return self.value(x, y) % 100

    def set_overlay(self, x, y, overlay):
        # terrain digit is kept, only the overlay changes
        self.grid[x][y] = encode_cell(self.terrain_at(x, y), overlay)

    def clear_overlay(self, x, y):
        self.set_overlay(x, y, EMPTY)

    def find_overlay(self, code):
        return self.find_overlay_range(code, code)

    def find_overlay_range(self, lo, hi):
        for x in range(self.size):
            for y in range(self.size):
                if lo <= self.grid[x][y] % 100 <= hi:
                    return (x, y)
        return None

    def snapshot(self):
        return [column[:] for column in self.grid]
