from __future__ import annotations
import pygame
from typing import Optional, Tuple
from engine import Engine
from models import Cell, Winner
import storage
from theme_manager import get_theme, next_theme_name

GRID = 3
MARGIN = 24
PANEL_W = 260
ENTRY_H = 32
ENTRY_GAP = 6
STATUS_H = 48


def pixel_to_cell(x: int, y: int, origin: Tuple[int, int], cell: int) -> Optional[int]:
    """Board index (0..8) under pixel (x, y), or None when off the board."""
    ox, oy = origin
    if not (ox <= x < ox + GRID * cell and oy <= y < oy + GRID * cell):
        return None
    col = (x - ox) // cell
    row = (y - oy) // cell
    return int(row * GRID + col)


def history_entry_at(x: int, y: int, origin: Tuple[int, int], width: int, count: int) -> Optional[int]:
    """Move number of the history button under (x, y), or None."""
    ox, oy = origin
    if not (ox <= x < ox + width) or y < oy:
        return None
    idx, offset = divmod(y - oy, ENTRY_H + ENTRY_GAP)
    # the gap between two buttons is not clickable
    if offset >= ENTRY_H or idx >= count:
        return None
    return int(idx)


class UI:
    def __init__(self, engine: Engine, preferences: Optional[dict] = None):
        pygame.init()

        self.engine = engine
        self.preferences = preferences if preferences is not None else storage.load_preferences()
        self.cell = int(self.preferences.get("cell_size", 96))
        self.fps = int(self.preferences.get("fps", 60))

        self.theme_name = self.preferences.get("theme", "default")
        self.theme = get_theme(self.theme_name)

        self.W = MARGIN * 3 + GRID * self.cell + PANEL_W
        self.H = MARGIN * 2 + max(GRID * self.cell, STATUS_H + 10 * (ENTRY_H + ENTRY_GAP))
        self.screen = pygame.display.set_mode((self.W, self.H))
        pygame.display.set_caption("Tic-Tac-Toe")
        self.clock = pygame.time.Clock()
        self.font_small = pygame.font.SysFont("consolas", 18)
        self.font = pygame.font.SysFont("consolas", 20, bold=True)
        self.font_piece = pygame.font.SysFont("consolas", int(self.cell * 0.6), bold=True)
        self.message: Optional[str] = None
        self.message_t = 0.0

    # ---- layout ----
    def board_origin(self) -> Tuple[int, int]:
        return (MARGIN, MARGIN)

    def panel_origin(self) -> Tuple[int, int]:
        return (MARGIN * 2 + GRID * self.cell, MARGIN)

    def history_origin(self) -> Tuple[int, int]:
        px, py = self.panel_origin()
        return (px, py + STATUS_H)

    # ---- drawing ----
    def draw_board(self) -> None:
        ox, oy = self.board_origin()
        board = self.engine.current_snapshot()
        line = self.engine.winning_line() or ()
        for i, v in enumerate(board):
            row, col = divmod(i, GRID)
            rect = pygame.Rect(ox + col * self.cell, oy + row * self.cell, self.cell, self.cell)
            fill = self.theme.highlight_color if i in line else self.theme.board_color
            pygame.draw.rect(self.screen, fill, rect)
            pygame.draw.rect(self.screen, self.theme.grid_color, rect, 2)
            if v is Cell.EMPTY:
                continue
            color = self.theme.piece_x_color if v is Cell.X else self.theme.piece_o_color
            txt = self.font_piece.render(str(v), True, color)
            self.screen.blit(txt, txt.get_rect(center=rect.center))

    def draw_panel(self) -> None:
        px, py = self.panel_origin()
        st = self.engine.status()
        color = self.theme.accent_color if isinstance(st, Winner) else self.theme.text_color
        status = self.font.render(self.engine.status_text(), True, color)
        self.screen.blit(status, (px, py + 8))

        hx, hy = self.history_origin()
        mouse = pygame.mouse.get_pos()
        for move, _snapshot in self.engine.history_view():
            rect = pygame.Rect(hx, hy + move * (ENTRY_H + ENTRY_GAP), PANEL_W, ENTRY_H)
            if move == self.engine.cursor:
                fill = self.theme.highlight_color
            elif rect.collidepoint(mouse):
                fill = tuple(max(0, c - 20) for c in self.theme.button_color)
            else:
                fill = self.theme.button_color
            pygame.draw.rect(self.screen, fill, rect, border_radius=6)
            pygame.draw.rect(self.screen, self.theme.grid_color, rect, 1, border_radius=6)
            label = self.font_small.render(
                f"{move + 1}. {self.engine.move_description(move)}", True, self.theme.text_color)
            self.screen.blit(label, label.get_rect(midleft=(rect.x + 10, rect.centery)))

    def draw_footer(self, dt: float) -> None:
        if self.message:
            self.message_t -= dt
            if self.message_t <= 0:
                self.message = None
        text = self.message or "LMB: play / jump | Left/Right: step | T: theme | Esc: exit"
        surf = self.font_small.render(text, True, self.theme.accent_color)
        self.screen.blit(surf, (MARGIN, self.H - MARGIN + 2))

    def note(self, msg: str, t: float = 2.0):
        self.message = msg
        self.message_t = t

    # ---- input ----
    def handle_click(self, x: int, y: int) -> None:
        idx = pixel_to_cell(x, y, self.board_origin(), self.cell)
        if idx is not None:
            if not self.engine.apply_move(idx):
                self.note("Invalid move.")
            return
        move = history_entry_at(x, y, self.history_origin(), PANEL_W, len(self.engine.history_view()))
        if move is not None:
            self.engine.jump_to(move)

    def step(self, delta: int) -> None:
        target = self.engine.cursor + delta
        if 0 <= target <= self.engine.move_count:
            self.engine.jump_to(target)

    def _toggle_theme(self):
        self.theme_name = next_theme_name(self.theme_name)
        self.theme = get_theme(self.theme_name)
        self.preferences["theme"] = self.theme_name
        storage.save_preferences(self.preferences)
        self.note(f"Theme: {self.theme.name}")

    def run(self):
        running = True
        while running:
            dt = self.clock.tick(self.fps) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_t:
                        self._toggle_theme()
                    elif event.key == pygame.K_LEFT:
                        self.step(-1)
                    elif event.key == pygame.K_RIGHT:
                        self.step(1)

                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self.handle_click(*event.pos)

            self.screen.fill(self.theme.background_color)
            self.draw_board()
            self.draw_panel()
            self.draw_footer(dt)
            pygame.display.flip()

        pygame.quit()
