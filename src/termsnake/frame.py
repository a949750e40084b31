# frame.py
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np  # type: ignore

from .config import Location
from .game import GameState

# ----- Cell codes used by Frame.grid() -----
EMPTY, WALL, BODY, HEAD, FOOD = 0, 1, 2, 3, 4


@dataclass(frozen=True)
class Frame:
    """
    Immutable copy of everything a frontend draws. Frontends never touch the
    live GameState, so a render always sees a whole tick.
    """
    snake: Tuple[Location, ...]     # head first
    food: Optional[Location]
    score: int
    tick: int
    width: int
    height: int
    bordered: bool = False

    @property
    def head(self) -> Location:
        return self.snake[0]

    def grid(self) -> np.ndarray:
        """
        Board as a (height, width) int8 array of cell codes, indexed [y, x].
        """
        board = np.full((self.height, self.width), EMPTY, dtype=np.int8)
        if self.bordered:
            board[0, :] = WALL
            board[-1, :] = WALL
            board[:, 0] = WALL
            board[:, -1] = WALL

        if self.food is not None:
            fx, fy = self.food
            board[fy, fx] = FOOD

        # body may sit outside the board only in hand-built frames; skip those cells
        for x, y in self.snake[1:]:
            if 0 <= x < self.width and 0 <= y < self.height:
                board[y, x] = BODY
        hx, hy = self.head
        if 0 <= hx < self.width and 0 <= hy < self.height:
            board[hy, hx] = HEAD
        return board


def snapshot(state: GameState) -> Frame:
    return Frame(
        snake=tuple(state.snake),
        food=state.food,
        score=state.score,
        tick=state.tick,
        width=state.cfg.width,
        height=state.cfg.height,
        bordered=state.cfg.bordered,
    )
