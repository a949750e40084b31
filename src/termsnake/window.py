# window.py
from typing import Optional, Tuple
import logging

import numpy as np  # type: ignore
import pygame # type: ignore

from .config import (
    Config, Key,
    BG, WALL, GREEN, HEAD, RED, TEXT,
    UP, DOWN, LEFT, RIGHT, QUIT,
)
from .frame import Frame, EMPTY, WALL as WALL_CELL, BODY, HEAD as HEAD_CELL, FOOD
from .frontend import Frontend, InputError, SetupError

logger = logging.getLogger(__name__)

SCORE_BAR = 28  # px above the board

KEYMAP = {
    pygame.K_UP: UP, pygame.K_w: UP,
    pygame.K_DOWN: DOWN, pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT, pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
    pygame.K_q: QUIT, pygame.K_ESCAPE: QUIT,
}

COLORS = {WALL_CELL: WALL, BODY: GREEN, HEAD_CELL: HEAD, FOOD: RED}


def draw_cell(screen: pygame.Surface, gx: int, gy: int, size: int, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(gx * size, SCORE_BAR + gy * size, size, size)
    pygame.draw.rect(screen, color, rect)


class PygameFrontend(Frontend):
    """Window frontend: one filled square per cell, score bar on top."""

    def __init__(self, cfg: Config):
        self.cfg = cfg
        self.screen = None
        self.font = None

    @property
    def size(self) -> Tuple[int, int]:
        return (
            self.cfg.width * self.cfg.cell_size,
            SCORE_BAR + self.cfg.height * self.cfg.cell_size,
        )

    def setup(self) -> None:
        try:
            pygame.init()
            self.screen = pygame.display.set_mode(self.size)
            pygame.display.set_caption("termsnake")
            self.font = pygame.font.SysFont(None, 24)
        except pygame.error as exc:
            pygame.quit()
            self.screen = None
            raise SetupError(f"Could not open the game window: {exc}") from exc
        logger.debug("Window ready at %dx%d px", *self.size)

    def teardown(self) -> None:
        if self.screen is None:
            return
        self.screen = None
        pygame.quit()

    # ---------- input ----------
    def poll_input(self, timeout: float) -> Optional[Key]:
        """Wait up to timeout for the first relevant event."""
        deadline = pygame.time.get_ticks() + int(timeout * 1000)
        while True:
            wait_ms = deadline - pygame.time.get_ticks()
            try:
                if wait_ms <= 0:
                    event = pygame.event.poll()
                else:
                    event = pygame.event.wait(wait_ms)
            except pygame.error as exc:
                raise InputError(str(exc)) from exc
            if event.type == pygame.NOEVENT:
                return None
            if event.type == pygame.QUIT:
                return QUIT
            if event.type == pygame.KEYDOWN and event.key in KEYMAP:
                return KEYMAP[event.key]

    # ---------- drawing ----------
    def draw_game(self, frame: Frame) -> None:
        size = self.cfg.cell_size
        self.screen.fill(BG)
        board = frame.grid()
        for gy, gx in np.argwhere(board != EMPTY):
            draw_cell(self.screen, int(gx), int(gy), size, COLORS[int(board[gy, gx])])
        txt = self.font.render(f"Score: {frame.score}", True, TEXT)
        self.screen.blit(txt, (8, 6))

    def render(self, frame: Frame) -> None:
        self.draw_game(frame)
        pygame.display.flip()

    def announce_game_over(self, frame: Frame, reason: Optional[str]) -> None:
        self.draw_game(frame)
        width, height = self.size

        # Dim with translucent overlay
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 140))  # RGBA
        self.screen.blit(overlay, (0, 0))

        title = self.font.render("GAME OVER", True, (240, 240, 250))
        why = "Hit the wall" if reason == "wall" else "Bit yourself"
        sub = self.font.render(why, True, (220, 220, 230))
        sco = self.font.render(f"Score: {frame.score}", True, (220, 220, 230))

        self.screen.blit(title, title.get_rect(center=(width // 2, height // 2 - 16)))
        self.screen.blit(sub, sub.get_rect(center=(width // 2, height // 2 + 16)))
        self.screen.blit(sco, sco.get_rect(center=(width // 2, height // 2 + 44)))
        pygame.display.flip()
        pygame.time.wait(self.cfg.game_over_ms)
