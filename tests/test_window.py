"""
Tests for the pygame frontend under SDL's dummy video driver.
"""

import os
from unittest.mock import patch

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

pygame = pytest.importorskip("pygame")

from termsnake.config import Config, BG, GREEN, HEAD, RED, UP, QUIT
from termsnake.frame import Frame
from termsnake.frontend import InputError
from termsnake.loop import poll_key
from termsnake.window import PygameFrontend, SCORE_BAR


@pytest.fixture
def window():
    ui = PygameFrontend(Config(width=10, height=8, cell_size=10, game_over_ms=0))
    ui.setup()
    yield ui
    ui.teardown()


def frame(**overrides):
    values = dict(snake=((3, 2), (2, 2)), food=(7, 6), score=0, tick=0, width=10, height=8)
    values.update(overrides)
    return Frame(**values)


def pixel(ui, gx, gy):
    size = ui.cfg.cell_size
    return tuple(ui.screen.get_at((gx * size + size // 2, SCORE_BAR + gy * size + size // 2)))[:3]


class TestPygameFrontend:
    """Tests for PygameFrontend."""

    def test_window_fits_board_and_score_bar(self, window):
        assert pygame.display.get_surface().get_size() == (100, SCORE_BAR + 80)

    def test_render_colours_cells(self, window):
        window.render(frame())
        assert pixel(window, 3, 2) == HEAD
        assert pixel(window, 2, 2) == GREEN
        assert pixel(window, 7, 6) == RED
        assert pixel(window, 0, 0) == BG

    def test_arrow_key_is_a_direction(self, window):
        pygame.event.clear()
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP))
        assert window.poll_input(0.2) == UP

    def test_window_close_is_quit(self, window):
        pygame.event.clear()
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        assert window.poll_input(0.2) == QUIT

    def test_read_failure_is_an_input_error(self, window):
        with patch("termsnake.window.pygame.event.wait", side_effect=pygame.error("read")):
            with pytest.raises(InputError):
                window.poll_input(0.1)

    def test_read_failure_counts_as_no_key_in_the_loop(self, window):
        with patch("termsnake.window.pygame.event.wait", side_effect=pygame.error("read")):
            assert poll_key(window, 0.1) is None

    def test_no_key_times_out(self, window):
        pygame.event.clear()
        assert window.poll_input(0.02) is None

    def test_game_over_draws_without_error(self, window):
        window.announce_game_over(frame(score=500), "self")

    def test_teardown_is_idempotent(self, window):
        window.teardown()
        window.teardown()
        assert window.screen is None
