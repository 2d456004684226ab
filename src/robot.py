# robot.py
from config import SKY, EMPTY, COIN, FISH, CHARACTER, CHARACTER_MAX
from fish import wander_fish

DIRECTIONS = {
    'up':    (0, -1),
    'down':  (0, 1),
    'left':  (-1, 0),
    'right': (1, 0),
}
WALKABLE = (EMPTY, COIN, FISH)


def target_position(pos, direction, size):
    """Step one cell in `direction`, clamped to the grid edge."""
    if direction not in DIRECTIONS:
        raise ValueError(f"unknown direction: {direction!r}")
    dx, dy = DIRECTIONS[direction]
    x = min(size-1, max(0, pos[0]+dx))
    y = min(size-1, max(0, pos[1]+dy))
    return (x, y)


def is_move_valid(board, target):
    terrain, overlay = board.cell(*target)
    return terrain != SKY and overlay in WALKABLE


class Character:
    def __init__(self, name, pos):
        self.name = name
        self.pos = pos
        self.score = 0
        self.fish_moved = False   # set when a move already dislodged the fish

    @property
    def value(self):
        return CHARACTER + self.score

    def place(self, board):
        board.set_overlay(*self.pos, self.value)

    def move(self, direction, board, rng=None):
        self.fish_moved = False
        new_pos = target_position(self.pos, direction, board.size)
        if new_pos == self.pos or not is_move_valid(board, new_pos):
            return False   # blocked

        overlay = board.overlay_at(*new_pos)
        if overlay == FISH:
            self.fish_moved = True
            if wander_fish(board, rng, start=new_pos) == new_pos:
                return False   # fish is boxed in
        elif overlay == COIN:
            self.collect_coin(new_pos)

        board.clear_overlay(*self.pos)
        self.pos = new_pos
        board.set_overlay(*self.pos, self.value)
        return True

    def collect_coin(self, pos):
        if self.value >= CHARACTER_MAX:
            return
        self.score += 1
        print(f"{self.name} collected coin at {pos}! Score: {self.score}")
