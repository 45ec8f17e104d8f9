# render.py
from typing import Optional, Tuple

import pygame  # type: ignore

from .config import APPLE, BG, GRID, HEADER, HEADER_H, SNAKE, TEXT, Config
from .game import GameState


# ---------- Drawing ----------
def draw_cell(canvas: pygame.Surface, x: int, y: int, size: int, color: Tuple[int, int, int]) -> None:
    pygame.draw.rect(canvas, color, pygame.Rect(x, y, size, size))


def draw_grid(canvas: pygame.Surface, cfg: Config) -> None:
    w, h = canvas.get_size()
    layer = pygame.Surface((w, h), pygame.SRCALPHA)
    color = (*GRID, 128)
    for i in range(cfg.cell_size, max(w, h), cfg.cell_size):
        pygame.draw.line(layer, color, (i, 0), (i, h), 2)
        pygame.draw.line(layer, color, (0, i), (w, i), 2)
    canvas.blit(layer, (0, 0))


def draw_board(canvas: pygame.Surface, state: GameState, cfg: Config) -> None:
    """Clear, optional grid, food, then every snake cell."""
    canvas.fill(BG)
    if cfg.draw_grid:
        draw_grid(canvas, cfg)
    draw_cell(canvas, state.food.x, state.food.y, cfg.cell_size, APPLE)
    for p in state.snake:
        draw_cell(canvas, p.x, p.y, cfg.cell_size, SNAKE)


def draw_header(surface: pygame.Surface, font: pygame.font.Font, state: GameState) -> None:
    surface.fill(HEADER, pygame.Rect(0, 0, surface.get_width(), HEADER_H))
    score = font.render(f"Score: {state.score}", True, TEXT)
    high = font.render(f"High Score: {state.high_score}", True, TEXT)
    cx = surface.get_width() // 2
    surface.blit(score, score.get_rect(center=(cx, HEADER_H // 3)))
    surface.blit(high, high.get_rect(center=(cx, 2 * HEADER_H // 3)))


def draw_game_over(canvas: pygame.Surface, font: pygame.font.Font, state: GameState, can_restart: bool) -> None:
    w, h = canvas.get_size()
    # Dim with translucent overlay
    overlay = pygame.Surface((w, h), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    canvas.blit(overlay, (0, 0))

    lines = ["GAME OVER", f"Score: {state.score}"]
    if can_restart:
        lines.append("Press R or Space to restart")
    for i, text in enumerate(lines):
        img = font.render(text, True, (240, 240, 250))
        canvas.blit(img, img.get_rect(center=(w // 2, h // 2 - 16 + 28 * i)))


# ---------- Window ----------
class Renderer:
    """Owns the window: a score header above a cfg.width x cfg.height canvas."""

    def __init__(self, cfg: Config, caption: str = "Snake"):
        self.cfg = cfg
        self.caption = caption
        self.screen: Optional[pygame.Surface] = None
        self.canvas: Optional[pygame.Surface] = None
        self.font: Optional[pygame.font.Font] = None

    def open(self) -> "Renderer":
        self.screen = pygame.display.set_mode((self.cfg.width, self.cfg.height + HEADER_H))
        pygame.display.set_caption(self.caption)
        self.canvas = self.screen.subsurface(pygame.Rect(0, HEADER_H, self.cfg.width, self.cfg.height))
        self.font = pygame.font.SysFont(None, 28)
        return self

    def close(self) -> None:
        self.canvas = None
        self.screen = None
        pygame.display.quit()

    def __enter__(self) -> "Renderer":
        return self.open()

    def __exit__(self, *exc) -> None:
        self.close()

    def frame(self, state: GameState) -> None:
        if self.screen is None:
            return
        draw_header(self.screen, self.font, state)
        draw_board(self.canvas, state, self.cfg)
        pygame.display.flip()

    def game_over(self, state: GameState) -> None:
        if self.screen is None:
            return
        draw_header(self.screen, self.font, state)
        draw_board(self.canvas, state, self.cfg)
        draw_game_over(self.canvas, self.font, state, self.cfg.allow_restart)
        pygame.display.flip()
