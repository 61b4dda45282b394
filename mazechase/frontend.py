"""
pygame front end: keyboard in, pictures out.

Nothing here feeds back into the simulation except ``InputEvent``s; the
renderer only ever looks at a finished ``Snapshot``.
"""

from __future__ import annotations

import math
import time
from typing import Optional

import pygame

from .enums import CellType, Direction, FruitType, GameState, GhostMode, GhostType, InputEvent
from .game import Game
from .maze import MAZE_COLS, MAZE_ROWS
from .snapshot import GhostView, Snapshot

# ---------------------------------------------------------------------------
# CONFIGURATION
# ---------------------------------------------------------------------------

TILE_SIZE = 8
BASE_WIDTH = MAZE_COLS * TILE_SIZE    # 224
BASE_HEIGHT = MAZE_ROWS * TILE_SIZE   # 248
HUD_TILES = 3
MIN_SCALE = 1
MAX_SCALE = 5

# Ghosts start flashing when this little power time is left
BLINK_THRESHOLD = 16

# Colors (Arcade Palette)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)
RED = (255, 0, 0)
PINK = (255, 184, 255)
CYAN = (0, 255, 255)
ORANGE = (255, 184, 82)
PELLET_COLOR = (255, 183, 174)
BLUE_FRIGHTENED = (33, 33, 255)
PUPIL_BLUE = (33, 33, 255)

# Wall colour cycles with the level
WALL_COLORS = [
    (33, 33, 255),
    (0, 255, 0),
    (255, 0, 255),
    (255, 165, 0),
    (255, 0, 0),
    (0, 255, 255),
    (255, 255, 0),
    (128, 0, 128),
]

GHOST_COLORS = {
    GhostType.BLINKY: RED,
    GhostType.PINKY: PINK,
    GhostType.INKY: CYAN,
    GhostType.CLYDE: ORANGE,
}

FRUIT_COLORS = {
    FruitType.CHERRY: RED,
    FruitType.STRAWBERRY: (255, 100, 100),
    FruitType.ORANGE: (255, 165, 0),
    FruitType.APPLE: RED,
    FruitType.MELON: (0, 255, 0),
    FruitType.GALAXIAN: CYAN,
    FruitType.BELL: (255, 215, 0),
    FruitType.KEY: YELLOW,
}

KEY_EVENTS = {
    pygame.K_UP: InputEvent.UP, pygame.K_w: InputEvent.UP,
    pygame.K_DOWN: InputEvent.DOWN, pygame.K_s: InputEvent.DOWN,
    pygame.K_LEFT: InputEvent.LEFT, pygame.K_a: InputEvent.LEFT,
    pygame.K_RIGHT: InputEvent.RIGHT, pygame.K_d: InputEvent.RIGHT,
    pygame.K_SPACE: InputEvent.CONFIRM, pygame.K_RETURN: InputEvent.CONFIRM,
    pygame.K_r: InputEvent.RETRY,
    pygame.K_q: InputEvent.QUIT, pygame.K_ESCAPE: InputEvent.QUIT,
}

# Facing to mouth angle in degrees
DIR_ANGLES = {
    Direction.RIGHT: 0,
    Direction.UP: 90,
    Direction.LEFT: 180,
    Direction.DOWN: 270,
    Direction.NONE: 0,
}


def calculate_scale(width: int, height: int) -> int:
    """Largest whole scale at which the board fits the given pixel size"""
    scale = min(width // BASE_WIDTH, height // BASE_HEIGHT)
    return max(MIN_SCALE, min(MAX_SCALE, scale))


def translate_event(event: pygame.event.Event) -> Optional[InputEvent]:
    if event.type == pygame.QUIT:
        return InputEvent.QUIT
    if event.type == pygame.KEYDOWN:
        return KEY_EVENTS.get(event.key)
    return None


# ---------------------------------------------------------------------------
# RENDERING
# ---------------------------------------------------------------------------

class Renderer:
    def __init__(self, screen: pygame.Surface, scale: int):
        self.screen = screen
        self.scale = scale
        self.tile = TILE_SIZE * scale
        pygame.font.init()
        self.font = pygame.font.Font(None, 8 * scale)
        self.big_font = pygame.font.Font(None, 16 * scale)

    @property
    def board_height(self) -> int:
        return MAZE_ROWS * self.tile

    def tile_center(self, c: int, r: int):
        return c * self.tile + self.tile // 2, r * self.tile + self.tile // 2

    def draw(self, snap: Snapshot, fps: float = 0.0):
        self.screen.fill(BLACK)
        if snap.state is GameState.START:
            self.draw_start_screen()
            return

        self.draw_maze(snap)
        self.draw_fruit(snap)
        self.draw_pacman(snap)
        for ghost in snap.ghosts:
            self.draw_ghost(ghost, snap)
        self.draw_ui(snap, fps)

        if snap.state is GameState.GAME_OVER:
            self.draw_overlay("GAME OVER", "R: RETRY   Q: QUIT", RED)
        elif snap.state is GameState.WIN:
            self.draw_overlay(f"LEVEL {snap.level} COMPLETE!", "SPACE: PLAY AGAIN", (0, 255, 0))

    def draw_maze(self, snap: Snapshot):
        s = self.tile
        wall_color = WALL_COLORS[(snap.level - 1) % len(WALL_COLORS)]
        # Power pellets blink in step with the mouth
        show_power = (snap.frame // 2) % 2 == 0

        for r, row in enumerate(snap.cells):
            for c, cell in enumerate(row):
                x, y = c * s, r * s
                if cell is CellType.WALL:
                    pygame.draw.rect(self.screen, wall_color, (x + 1, y + 1, s - 2, s - 2), 1)
                elif cell is CellType.GHOST_DOOR:
                    pygame.draw.rect(self.screen, PINK, (x, y + s // 2 - 1, s, max(2, s // 8)))
                elif cell is CellType.PELLET:
                    pygame.draw.circle(self.screen, PELLET_COLOR, self.tile_center(c, r), max(1, s // 10))
                elif cell is CellType.POWER_PELLET and show_power:
                    pygame.draw.circle(self.screen, PELLET_COLOR, self.tile_center(c, r), max(2, s // 3))

    def draw_fruit(self, snap: Snapshot):
        fruit = snap.fruit
        if fruit is None or not fruit.active:
            return
        color = FRUIT_COLORS.get(fruit.kind, WHITE)
        x, y = self.tile_center(fruit.x, fruit.y)
        pygame.draw.circle(self.screen, color, (x, y), self.tile // 2 - 1)
        # Stem
        pygame.draw.line(self.screen, (0, 200, 0), (x, y - self.tile // 2), (x + 2, y - self.tile // 2 - 3), 1)

    def draw_pacman(self, snap: Snapshot):
        """Draw Pac-Man with mouth animation"""
        pac = snap.pacman
        x, y = self.tile_center(pac.x, pac.y)
        r = self.tile // 2

        pygame.draw.circle(self.screen, YELLOW, (x, y), r)

        # Mouth opens and closes every other animation frame
        if (pac.anim_frame // 2) % 2 == 0:
            angle = 40
            base_angle = DIR_ANGLES.get(pac.direction, 0)
            pts = [(x, y)]
            for a in (base_angle + angle, base_angle - angle):
                rad = math.radians(a)
                pts.append((x + math.cos(rad) * (r + 2), y - math.sin(rad) * (r + 2)))
            pygame.draw.polygon(self.screen, BLACK, pts)

    def draw_ghost(self, ghost: GhostView, snap: Snapshot):
        x, y = self.tile_center(ghost.x, ghost.y)
        r = self.tile // 2

        if ghost.mode is GhostMode.EATEN:
            # Only draw eyes when eaten
            self._draw_ghost_eyes(x, y, r, ghost)
            return

        if ghost.mode is GhostMode.FRIGHTENED:
            # Flash white when almost done
            ending = snap.pacman.power_mode and snap.pacman.power_ticks < BLINK_THRESHOLD
            if ending and (snap.frame // 3) % 2 == 0:
                color = WHITE
            else:
                color = BLUE_FRIGHTENED
        else:
            color = GHOST_COLORS.get(ghost.kind, WHITE)

        # Dome + skirt
        pygame.draw.circle(self.screen, color, (x, y - 1), r)
        pygame.draw.rect(self.screen, color, (x - r, y - 1, r * 2, r))

        # Wavy bottom
        wave = (ghost.anim_frame // 4) % 2
        feet = 3
        foot_w = (r * 2) // feet
        for i in range(feet):
            if (i + wave) % 2:
                continue
            fx = x - r + i * foot_w
            pygame.draw.rect(self.screen, BLACK, (fx, y + r - 2, foot_w, 2))

        self._draw_ghost_eyes(x, y, r, ghost)

    def _draw_ghost_eyes(self, x: int, y: int, r: int, ghost: GhostView):
        """Draw ghost eyes looking in movement direction"""
        eye_r = max(1, r // 3)
        off_x = r // 2

        pygame.draw.circle(self.screen, WHITE, (x - off_x, y - 2), eye_r)
        pygame.draw.circle(self.screen, WHITE, (x + off_x, y - 2), eye_r)

        pupil_r = max(1, eye_r // 2)
        dx = ghost.direction.dx * (eye_r // 2)
        dy = ghost.direction.dy * (eye_r // 2)
        pygame.draw.circle(self.screen, PUPIL_BLUE, (x - off_x + dx, y - 2 + dy), pupil_r)
        pygame.draw.circle(self.screen, PUPIL_BLUE, (x + off_x + dx, y - 2 + dy), pupil_r)

    def draw_ui(self, snap: Snapshot, fps: float):
        """Draw score, lives, level"""
        y = self.board_height + self.tile // 2
        power = f"  POWER: {snap.pacman.power_ticks}" if snap.pacman.power_mode else ""
        text = f"SCORE: {snap.score:<8d} LIVES: {snap.lives}  LEVEL: {snap.level}{power}  FPS: {fps:.1f}"
        self.screen.blit(self.font.render(text, True, YELLOW), (self.tile // 2, y))

    def draw_text_centered(self, text: str, y: int, color=WHITE, font=None):
        if font is None:
            font = self.font
        surf = font.render(text, True, color)
        rect = surf.get_rect(center=(self.screen.get_width() // 2, y))
        self.screen.blit(surf, rect)

    def draw_overlay(self, title: str, hint: str, color):
        overlay = pygame.Surface(self.screen.get_size())
        overlay.set_alpha(100)
        overlay.fill(BLACK)
        self.screen.blit(overlay, (0, 0))
        mid = self.board_height // 2
        self.draw_text_centered(title, mid - self.tile * 2, color, self.big_font)
        self.draw_text_centered(hint, mid + self.tile * 2, WHITE)

    def draw_start_screen(self):
        mid = self.board_height // 2
        self.draw_text_centered("PAC-MAN", mid - self.tile * 8, CYAN, self.big_font)
        self.draw_text_centered("ARROWS / WASD : MOVE", mid - self.tile * 3)
        self.draw_text_centered("Q / ESC : QUIT    R : RETRY", mid - self.tile)
        self.draw_text_centered("PELLET 10   POWER 50   GHOST 200   FRUIT 100-5000", mid + self.tile * 2, (0, 255, 0))
        self.draw_text_centered("PRESS SPACE TO START", mid + self.tile * 6, PINK)


# ---------------------------------------------------------------------------
# MAIN LOOP
# ---------------------------------------------------------------------------

def run(game: Game, scale: Optional[int] = None):
    """Drive ``game`` at its fixed tick rate until a quit is requested"""
    pygame.init()
    if scale is None:
        info = pygame.display.Info()
        scale = calculate_scale(info.current_w, info.current_h)

    size = (BASE_WIDTH * scale, (MAZE_ROWS + HUD_TILES) * TILE_SIZE * scale)
    screen = pygame.display.set_mode(size)
    pygame.display.set_caption("PAC-MAN")
    clock = pygame.time.Clock()
    renderer = Renderer(screen, scale)

    last_frame = None
    fps = 0.0
    try:
        while True:
            for event in pygame.event.get():
                translated = translate_event(event)
                if translated is not None:
                    game.queue_input(translated)

            snap = game.tick()
            if game.quit_requested:
                break

            now = time.perf_counter()
            if last_frame is not None and now > last_frame:
                fps = 1.0 / (now - last_frame)
            last_frame = now

            renderer.draw(snap, fps)
            pygame.display.flip()
            clock.tick(game.config.ticks_per_second)
    finally:
        pygame.quit()
