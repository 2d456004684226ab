GRID_SIZE = 10

# Terrain (hundreds digit)
GROUND = 1
WATER = 2
SKY = 3
TERRAIN_TYPES = {
    GROUND: {'name': 'ground', 'color': (222, 184, 135)},   # burlywood
    WATER:  {'name': 'water',  'color': (0, 0, 255)},       # blue
    SKY:    {'name': 'sky',    'color': (128, 128, 128)},   # gray
}

# Overlay (tens + ones digits)
EMPTY = 0
OBSTACLE = 3
COIN = 4
FISH = 5
CHARACTER = 40          # 40 + collected coins
CHARACTER_MAX = 99
OVERLAY_TYPES = {
    OBSTACLE:  {'name': 'obstacle',  'color': (169, 169, 169)},   # dark gray
    COIN:      {'name': 'coin',      'color': (255, 255, 0)},     # yellow
    FISH:      {'name': 'fish',      'color': (0, 128, 0)},       # green
    CHARACTER: {'name': 'character', 'color': (255, 0, 0)},       # red
}
UNMAPPED_COLOR = (255, 0, 255)

# Bands (rows, end exclusive)
SKY_ROWS = (0, 3)
WATER_ROWS = (3, 6)
GROUND_ROWS = (6, 10)

# Initial placement (x, y)
CHARACTER_START = (1, 7)
OBSTACLE_POS = (4, 8)
COIN_POS = (4, 7)
FISH_START = (1, 4)

# Window
CELL_SIZE = 50
DEBUG_PANEL = True
HUD_HEIGHT = 60
FPS = 60
