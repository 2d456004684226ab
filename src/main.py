import pygame

from engine import GameEngine
from config import GRID_SIZE, CELL_SIZE, HUD_HEIGHT, FPS, DEBUG_PANEL
from utils import init_assets, get_image, terrain_color, overlay_image_key

KEY_DIRECTIONS = {
    pygame.K_UP: 'up',
    pygame.K_DOWN: 'down',
    pygame.K_LEFT: 'left',
    pygame.K_RIGHT: 'right',
}

BOARD_W = GRID_SIZE*CELL_SIZE
BOARD_H = GRID_SIZE*CELL_SIZE


def screen_size(show_debug):
    w = BOARD_W*2 if show_debug else BOARD_W
    return w, BOARD_H + HUD_HEIGHT

# ----------- Drawing -----------
def draw_board(screen, grid):
    for x in range(GRID_SIZE):
        for y in range(GRID_SIZE):
            terrain, overlay = divmod(grid[x][y], 100)
            rect = pygame.Rect(x*CELL_SIZE, y*CELL_SIZE, CELL_SIZE, CELL_SIZE)
            pygame.draw.rect(screen, terrain_color(terrain), rect)
            key = overlay_image_key(overlay)
            if key:
                screen.blit(get_image(key), rect.topleft)
            pygame.draw.rect(screen, (0,0,0), rect, width=1)

def draw_debug(screen, grid, font):
    """Raw cell values, one per cell, to the right of the board."""
    left = BOARD_W
    pygame.draw.rect(screen, (255,255,255), (left, 0, BOARD_W, BOARD_H))
    for x in range(GRID_SIZE):
        for y in range(GRID_SIZE):
            text = font.render(str(grid[x][y]), True, (0,0,0))
            cx = left + x*CELL_SIZE + CELL_SIZE//2
            cy = y*CELL_SIZE + CELL_SIZE//2
            screen.blit(text, (cx - text.get_width()//2, cy - text.get_height()//2))

def draw_stats(screen, engine, font, small_font):
    w = screen.get_width()
    pygame.draw.rect(screen, (16,18,24), (0, BOARD_H, w, HUD_HEIGHT))
    pygame.draw.line(screen, (40,48,60), (0, BOARD_H), (w, BOARD_H), 2)
    score_text = font.render(f"Score: {engine.score}   Pos: {engine.character_position}", True, (255,120,120))
    screen.blit(score_text, (12, BOARD_H+12))
    hint = small_font.render("Arrows: Move   TAB: Debug   ESC: Quit", True, (160,170,190))
    screen.blit(hint, (12, BOARD_H+38))

# ---------- Main Loop ----------
def main(engine=None):
    engine = engine or GameEngine()
    show_debug = DEBUG_PANEL

    pygame.init()
    screen = pygame.display.set_mode(screen_size(show_debug))
    pygame.display.set_caption("Grid Pond")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont(None, 24)
    small_font = pygame.font.SysFont("consolas", 16)
    init_assets(CELL_SIZE)

    running = True
    while running:
        clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_TAB:
                    show_debug = not show_debug
                    screen = pygame.display.set_mode(screen_size(show_debug))
                elif event.key in KEY_DIRECTIONS:
                    engine.move_character(KEY_DIRECTIONS[event.key])

        grid = engine.snapshot()
        screen.fill((0,0,0))
        draw_board(screen, grid)
        if show_debug:
            draw_debug(screen, grid, small_font)
        draw_stats(screen, engine, font, small_font)
        pygame.display.flip()

    pygame.quit()
    print(f"=== Game Over === Score: {engine.score}")


if __name__ == "__main__":
    main()
