# pathviz/app/viewer.py
#!/usr/bin/env python3
"""
Pathfinding Viewer — grid editor + frame-by-frame search playback

- Mouse:
    [LEFT CLICK]        -> toggle obstacle
    [S] + LEFT CLICK    -> move start
    [E] + LEFT CLICK    -> move end
- Keyboard:
    [1]/[2]/[3]/[4]     -> select algorithm (BFS / DFS / Dijkstra / A*)
    [SPACE]             -> run/pause
    [N]                 -> single frame
    [R]                 -> rerun search
    [C]/[X]             -> clear path / clear board
    [M]                 -> generate maze
    [+]/[-]             -> frames/sec
    [Q]/[ESC]           -> quit

Settings: see pathviz.app.config (PATHVIZ_* env vars or --key=value flags).
"""

import logging
import random
import sys
from typing import Callable, Dict, List, Optional, Tuple

import pygame

from pathviz.app.config import ViewerConfig, resolve_config
from pathviz.app.session import Session
from pathviz.core.algorithms import ALGORITHMS
from pathviz.core.types import CellType

logger = logging.getLogger(__name__)

# ---------- Config ----------
PANEL_W = 320            # right band: metrics + buttons
GRID_MARGIN = 16
FONT_NAME = None  # default pygame font
MAX_FPS = 120

# Colors
WHITE       = (255,255,255)
BLACK       = (  0,  0,  0)
TEXT_LIGHT  = (230,235,240)
ACCENT_GOLD = (255,210,0)
CARD_BG     = (24,28,36,220)
CARD_HI     = (255,255,255,18)

CELL_COLORS: Dict[CellType, Tuple[int, int, int]] = {
    CellType.EMPTY:    (200, 200, 200),
    CellType.OBSTACLE: ( 36,  40,  48),
    CellType.START:    ( 70, 130, 180),
    CellType.END:      (220,  50,  47),
    CellType.EXPLORED: (255, 120, 170),
    CellType.PATH:     (  0, 255, 200),
}

ALGO_KEYS = {
    pygame.K_1: "BFS",
    pygame.K_2: "DFS",
    pygame.K_3: "Dijkstra",
    pygame.K_4: "A*",
}


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback: Callable[[], None], *, togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False
        self.togglable = togglable
        self.active = False  # highlight state

    def set_active(self, value: bool):
        self.active = bool(value)

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        bg_idle   = (36, 40, 48, 220)
        bg_hover  = (46, 50, 60, 230)
        bg_active = (58, 86, 160, 235)
        border_active = (120, 170, 255, 255)

        if self.active and self.togglable:
            bg = bg_active
        elif self.hover:
            bg = bg_hover
        else:
            bg = bg_idle
        pygame.draw.rect(base, bg, base.get_rect(), border_radius=10)
        screen.blit(base, self.rect.topleft)

        if self.active and self.togglable:
            pygame.draw.rect(screen, border_active, self.rect, width=2, border_radius=10)

        text = font.render(self.label, True, (235,238,242))
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()
                return True
        return False


# ---------- Viewer ----------
class Viewer:
    def __init__(self, config: ViewerConfig):
        pygame.init()

        self.config = config
        self.cell_size = config.cell_size
        self.font_small = pygame.font.Font(FONT_NAME, 14)
        self.font = pygame.font.Font(FONT_NAME, 18)
        self.font_big = pygame.font.Font(FONT_NAME, 22)

        self.session = Session(config.width, config.height, config.algorithm)
        self.rng = random.Random(config.seed) if config.seed is not None else random.Random()

        win_w = GRID_MARGIN*2 + config.width * self.cell_size + PANEL_W
        win_h = max(GRID_MARGIN*2 + config.height * self.cell_size, 560)
        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption("Pathfinding — Grid Playground")

        self.running = False
        self.clock = pygame.time.Clock()
        self.frames_per_sec = config.fps
        self.state = "Idle"
        self._last_step_t = 0

        # buttons BEFORE layout (so layout can place them)
        self._buttons: List[UIButton] = []
        self._layout(win_w, win_h)
        logger.info("viewer started: %s", config)

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        """Grow the grid to cover the visible area and place the right-hand panel."""
        cs = self.cell_size
        self.visible_cols = max(1, (win_w - PANEL_W - 2 * GRID_MARGIN) // cs)
        self.visible_rows = max(1, (win_h - 2 * GRID_MARGIN) // cs)
        self.session.resize(self.visible_cols, self.visible_rows)

        self._grid_origin = (GRID_MARGIN, GRID_MARGIN)
        grid_right = GRID_MARGIN * 2 + self.visible_cols * cs
        self._right_band = pygame.Rect(grid_right, 0, max(PANEL_W, win_w - grid_right), win_h)
        self._build_buttons()

    def cell_at(self, px: int, py: int) -> Optional[Tuple[int, int]]:
        ox, oy = self._grid_origin
        grid = self.session.grid
        cols = min(grid.width, self.visible_cols)
        rows = min(grid.height, self.visible_rows)
        col = (px - ox) // self.cell_size
        screen_row = (py - oy) // self.cell_size
        if px < ox or py < oy or col >= cols or screen_row >= rows:
            return None
        return (col, rows - 1 - screen_row)

    def run(self):
        while True:
            self._handle_events()
            if self.running:
                self._tick_playback()
            self._draw()
            self.clock.tick(MAX_FPS)

    def _tick_playback(self):
        now = pygame.time.get_ticks()
        interval_ms = 1000 // max(1, self.frames_per_sec)
        if now - self._last_step_t >= interval_ms:
            self._last_step_t = now
            self._do_step()

    def _do_step(self):
        if self.session.playback is None:
            self.session.run()
        res = self.session.tick()
        if res is None:
            return
        if res.status == "done":
            self.state = "Done"; self.running = False
        elif res.status == "no_path":
            self.state = "No path"; self.running = False
        else:
            self.state = "Running" if self.running else "Paused"
        self._refresh_active_states()

    # ---------- actions ----------
    def _toggle_run(self):
        if self.session.playback is None or self.session.playback.finished:
            self.session.run()
            self.running = True
        else:
            self.running = not self.running
        self.state = "Running" if self.running else "Paused"
        self._refresh_active_states()

    def _rerun(self):
        self.session.run()
        self.running = True
        self.state = "Running"
        self._refresh_active_states()

    def _stop(self, state: str = "Idle"):
        self.running = False
        self.state = state
        self._refresh_active_states()

    def _clear_path(self):
        self.session.clear_path()
        self._stop()

    def _clear_board(self):
        self.session.clear_board()
        self._stop()

    def _maze(self):
        self.session.clear_path()
        self.session.generate_maze(self.rng)
        self._stop()

    def _switch_algo(self, label: str):
        self.session.select_algorithm(label)
        self.session.clear_path()
        self._stop()

    def _bump_speed(self, dv: int):
        self.frames_per_sec = int(max(1, min(MAX_FPS, self.frames_per_sec + dv)))

    # ---------- events ----------
    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    pygame.quit(); sys.exit(0)
                elif e.key == pygame.K_SPACE:
                    self._toggle_run()
                elif e.key == pygame.K_n:
                    self.running = False
                    self._do_step()
                elif e.key == pygame.K_r:
                    self._rerun()
                elif e.key == pygame.K_c:
                    self._clear_path()
                elif e.key == pygame.K_x:
                    self._clear_board()
                elif e.key == pygame.K_m:
                    self._maze()
                elif e.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    self._bump_speed(+5)
                elif e.key in (pygame.K_MINUS, pygame.K_UNDERSCORE, pygame.K_KP_MINUS):
                    self._bump_speed(-5)
                elif e.key in ALGO_KEYS:
                    self._switch_algo(ALGO_KEYS[e.key])
            elif e.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((e.w, e.h), pygame.RESIZABLE)
                self._layout(e.w, e.h)
            elif e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
                handled = False
                for b in self._buttons:
                    handled = b.handle_mouse(e) or handled
                if not handled and e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                    self._click_grid(e.pos)

    def _click_grid(self, pixel: Tuple[int, int]):
        cell = self.cell_at(*pixel)
        if cell is None:
            return
        held = pygame.key.get_pressed()
        if self.session.playback is not None and self.session.playback.finished:
            self.session.clear_path()
        if held[pygame.K_s]:
            self.session.place_start(cell)
        elif held[pygame.K_e]:
            self.session.place_end(cell)
        else:
            self.session.click(cell)

    # ---------- drawing ----------
    def _draw(self):
        self.screen.fill((24, 26, 32))
        self._draw_grid()
        self._draw_metrics_and_buttons()
        pygame.display.flip()

    def _draw_grid(self):
        cs = self.cell_size
        ox, oy = self._grid_origin
        grid = self.session.grid
        cols = min(grid.width, self.visible_cols)
        rows = min(grid.height, self.visible_rows)

        # row 0 at the bottom so that "up" (+y) points up on screen
        for x in range(cols):
            for y in range(rows):
                rect = pygame.Rect(ox + x*cs, oy + (rows - 1 - y)*cs, cs, cs)
                pygame.draw.rect(self.screen, CELL_COLORS[grid.cells[x][y].type], rect)
                pygame.draw.rect(self.screen, BLACK, rect, 1)

        for pos, label in ((self.session.start, "S"), (self.session.end, "E")):
            if pos.x < cols and pos.y < rows:
                center = (ox + pos.x*cs + cs//2, oy + (rows - 1 - pos.y)*cs + cs//2)
                txt = self.font_small.render(label, True, WHITE)
                self.screen.blit(txt, txt.get_rect(center=center))

    # ---------- buttons + metrics ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 230  # leaves space for metrics card above
        w = max(160, rb.width - 32)
        h = 34
        gap = 8

        def add(label, cb, *, togglable=False, store_as: Optional[str] = None):
            nonlocal y
            btn = UIButton(label, pygame.Rect(x, y, w, h), cb, togglable=togglable)
            self._buttons.append(btn)
            if store_as:
                setattr(self, store_as, btn)
            y += h + gap

        add("Run / Pause", self._toggle_run, togglable=True, store_as="btn_run")
        add("Step Once", self._do_step)
        add("Clear Path", self._clear_path)
        add("Clear Board", self._clear_board)
        add("Generate Maze", self._maze)

        self._algo_buttons: Dict[str, UIButton] = {}
        for label in ALGORITHMS:
            add(f"Algo: {label}", lambda label=label: self._switch_algo(label), togglable=True)
            self._algo_buttons[label] = self._buttons[-1]

        self._refresh_active_states()

    def _refresh_active_states(self):
        if hasattr(self, "btn_run"):
            self.btn_run.set_active(self.running)
        for label, btn in getattr(self, "_algo_buttons", {}).items():
            btn.set_active(self.session.algorithm == label)

    def _draw_metrics_and_buttons(self):
        rb = self._right_band

        card_h = 210
        card = pygame.Surface((rb.width - 20, card_h), pygame.SRCALPHA)
        pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=14)
        hi = pygame.Surface((card.get_width(), 24), pygame.SRCALPHA)
        pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=14)
        card.blit(hi, (0,0))
        self.screen.blit(card, (rb.x + 10, rb.y + 10))

        x0 = rb.x + 24
        y0 = rb.y + 18

        def line(text, big=False, color=TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        line("Metrics", big=True, color=ACCENT_GOLD)
        last = self.session.last_step
        m = last.metrics if last else {}
        line(f"Frames: {m.get('shown', 0)} / {m.get('frames', 0)}")
        line(f"Explored: {m.get('explored_count', 0)}")
        line(f"Path Len: {m.get('path_len', 0)}")
        line("-" * 26)
        line(f"State: {self.state}")
        line(f"Algo: {self.session.algorithm}")
        line(f"Grid: {self.session.grid.width} x {self.session.grid.height}")
        line(f"Speed: {self.frames_per_sec} frames/s")

        for b in self._buttons:
            b.draw(self.screen, self.font)


# ---------- main ----------
def main():
    try:
        config = resolve_config()
    except ValueError as ex:
        print(f"Invalid settings: {ex}")
        sys.exit(1)
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    Viewer(config).run()

if __name__ == "__main__":
    main()
