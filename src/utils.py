# utils.py
import pygame

from config import CELL_SIZE, TERRAIN_TYPES, OVERLAY_TYPES, UNMAPPED_COLOR, OBSTACLE, COIN, FISH, CHARACTER
from board import is_character

# ---------- Globals ----------
IMAGES = {}
CELL_IMG_SIZE = CELL_SIZE   # overwritten by init_assets(cell_size)
_warned = set()

# ---------- Sprites ----------
def _mk_character():
    s = pygame.Surface((CELL_IMG_SIZE, CELL_IMG_SIZE), pygame.SRCALPHA)
    s.fill(OVERLAY_TYPES[CHARACTER]['color'])
    return s

def _mk_coin():
    s = pygame.Surface((CELL_IMG_SIZE, CELL_IMG_SIZE), pygame.SRCALPHA)
    cx, cy = CELL_IMG_SIZE//2, CELL_IMG_SIZE//2
    pygame.draw.circle(s, OVERLAY_TYPES[COIN]['color'], (cx,cy), CELL_IMG_SIZE//2)
    return s

def _mk_fish():
    s = pygame.Surface((CELL_IMG_SIZE, CELL_IMG_SIZE), pygame.SRCALPHA)
    cx, cy = CELL_IMG_SIZE//2, CELL_IMG_SIZE//2
    pygame.draw.circle(s, OVERLAY_TYPES[FISH]['color'], (cx,cy), CELL_IMG_SIZE//2)
    return s

def _mk_obstacle():
    s = pygame.Surface((CELL_IMG_SIZE, CELL_IMG_SIZE), pygame.SRCALPHA)
    pygame.draw.rect(s, OVERLAY_TYPES[OBSTACLE]['color'], (0,0,CELL_IMG_SIZE,CELL_IMG_SIZE), border_radius=6)
    return s

def _mk_placeholder():
    s = pygame.Surface((CELL_IMG_SIZE, CELL_IMG_SIZE), pygame.SRCALPHA)
    s.fill(UNMAPPED_COLOR)
    return s

# ---------- Loading & API ----------
def init_assets(cell_size):
    global CELL_IMG_SIZE, IMAGES
    CELL_IMG_SIZE = cell_size
    IMAGES = {
        "character":   _mk_character(),
        "coin":        _mk_coin(),
        "fish":        _mk_fish(),
        "obstacle":    _mk_obstacle(),
        "placeholder": _mk_placeholder(),
    }

def get_image(key):
    return IMAGES.get(key)

def terrain_color(terrain):
    if terrain in TERRAIN_TYPES:
        return TERRAIN_TYPES[terrain]['color']
    warn_unmapped(terrain * 100)
    return UNMAPPED_COLOR

def overlay_image_key(overlay):
    """Sprite key for an overlay code; None for empty, 'placeholder' if unknown."""
    if overlay == 0:
        return None
    if is_character(overlay):
        return "character"
    if overlay in OVERLAY_TYPES:
        return OVERLAY_TYPES[overlay]['name']
    warn_unmapped(overlay)
    return "placeholder"

def warn_unmapped(value):
    if value not in _warned:
        _warned.add(value)
        print(f"Warning: Unmapped value {value}")
