# terminal.py
from typing import Dict, Optional
import curses
import logging
import time

import numpy as np  # type: ignore

from .config import Config, Key, UP, DOWN, LEFT, RIGHT, QUIT
from .frame import Frame, EMPTY, WALL, BODY, HEAD, FOOD
from .frontend import Frontend, InputError, SetupError

logger = logging.getLogger(__name__)

ESCAPE = 27
ESCAPE_DELAY_MS = 25  # ncurses waits this long after Esc for a key sequence

KEYMAP: Dict[int, Key] = {
    curses.KEY_UP: UP, ord("w"): UP, ord("W"): UP,
    curses.KEY_DOWN: DOWN, ord("s"): DOWN, ord("S"): DOWN,
    curses.KEY_LEFT: LEFT, ord("a"): LEFT, ord("A"): LEFT,
    curses.KEY_RIGHT: RIGHT, ord("d"): RIGHT, ord("D"): RIGHT,
    ord("q"): QUIT, ord("Q"): QUIT, ESCAPE: QUIT,
}

GLYPHS = {EMPTY: " ", WALL: "#", BODY: "o", HEAD: "@", FOOD: "*"}

# color pair ids
PAIR_SNAKE, PAIR_FOOD, PAIR_WALL, PAIR_TEXT = 1, 2, 3, 4


class CursesFrontend(Frontend):
    """
    Draws the board with curses and reads keys in cbreak mode.
    Row 0 holds the score, the board starts on row 1, one column per cell.
    """

    def __init__(self, cfg: Config, stdscr=None):
        self.cfg = cfg
        self.stdscr = stdscr
        self._owns_screen = stdscr is None
        self._active = False
        self._attrs = {code: curses.A_NORMAL for code in GLYPHS}
        self._text_attr = curses.A_NORMAL

    # ---------- lifecycle ----------
    def setup(self) -> None:
        try:
            if self.stdscr is None:
                self.stdscr = curses.initscr()
            self._active = True
            curses.noecho()
            curses.cbreak()
            self.stdscr.keypad(True)
            curses.set_escdelay(ESCAPE_DELAY_MS)
            try:
                curses.curs_set(0)
            except curses.error:
                pass  # terminal cannot hide the cursor
            self._init_colors()
        except curses.error as exc:
            self.teardown()
            raise SetupError(f"Could not put the terminal into raw mode: {exc}") from exc

        rows, cols = self.stdscr.getmaxyx()
        need_rows, need_cols = self.cfg.height + 2, self.cfg.width + 1
        if rows < need_rows or cols < need_cols:
            self.teardown()
            raise SetupError(
                f"Terminal is {cols}x{rows}, need at least {need_cols}x{need_rows}"
            )
        logger.debug("Curses ready on a %dx%d terminal", cols, rows)

    def _init_colors(self) -> None:
        if not curses.has_colors():
            return
        curses.start_color()
        curses.use_default_colors()
        curses.init_pair(PAIR_SNAKE, curses.COLOR_GREEN, -1)
        curses.init_pair(PAIR_FOOD, curses.COLOR_RED, -1)
        curses.init_pair(PAIR_WALL, curses.COLOR_WHITE, -1)
        curses.init_pair(PAIR_TEXT, curses.COLOR_YELLOW, -1)
        self._attrs = {
            EMPTY: curses.A_NORMAL,
            WALL: curses.color_pair(PAIR_WALL),
            BODY: curses.color_pair(PAIR_SNAKE),
            HEAD: curses.color_pair(PAIR_SNAKE) | curses.A_BOLD,
            FOOD: curses.color_pair(PAIR_FOOD) | curses.A_BOLD,
        }
        self._text_attr = curses.color_pair(PAIR_TEXT) | curses.A_BOLD

    def teardown(self) -> None:
        if not self._active:
            return
        self._active = False
        try:
            if self.stdscr is not None:
                self.stdscr.keypad(False)
            curses.nocbreak()
            curses.echo()
            if self._owns_screen:
                curses.endwin()
        except curses.error as exc:
            logger.warning("Terminal restore failed: %s", exc)

    # ---------- input ----------
    def poll_input(self, timeout: float) -> Optional[Key]:
        self.stdscr.timeout(max(0, int(timeout * 1000)))
        try:
            ch = self.stdscr.getch()
        except curses.error as exc:
            raise InputError(str(exc)) from exc
        if ch == -1:
            return None
        return KEYMAP.get(ch)

    # ---------- drawing ----------
    def _draw_board(self, frame: Frame) -> None:
        self.stdscr.erase()
        self.stdscr.addstr(0, 0, f"Score: {frame.score}", self._text_attr)
        board = frame.grid()
        for y, x in np.argwhere(board != EMPTY):
            code = int(board[y, x])
            self.stdscr.addstr(int(y) + 1, int(x), GLYPHS[code], self._attrs[code])

    def render(self, frame: Frame) -> None:
        try:
            self._draw_board(frame)
            self.stdscr.refresh()
        except curses.error as exc:
            logger.warning("Render failed: %s", exc)

    def announce_game_over(self, frame: Frame, reason: Optional[str]) -> None:
        lines = ["GAME OVER", f"Score: {frame.score}"]
        if reason is not None:
            lines.insert(1, "Hit the wall" if reason == "wall" else "Bit yourself")
        try:
            self._draw_board(frame)
            mid_y = 1 + frame.height // 2 - len(lines) // 2
            for i, text in enumerate(lines):
                x = max(0, (frame.width - len(text)) // 2)
                self.stdscr.addstr(mid_y + i, x, text, self._text_attr)
            self.stdscr.refresh()
        except curses.error as exc:
            logger.warning("Game over screen failed: %s", exc)
        time.sleep(self.cfg.game_over_ms / 1000.0)
