# game.py
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from itertools import islice
from typing import Deque, List, Optional, Tuple
import logging
import random

from .config import (
    Config, Direction, Location,
    RIGHT, INITIAL_LENGTH, DIRECTIONS, DIRECTION_NAMES,
    is_opposite,
)

logger = logging.getLogger(__name__)


class GameTerminated(RuntimeError):
    """Raised when a finished game is asked to move or turn."""


class Outcome(Enum):
    CONTINUE = "continue"
    ATE = "ate"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class AdvanceResult:
    outcome: Outcome
    score: int
    reason: Optional[str] = None   # "wall" or "self" on GAME_OVER


# ---------- Bounds ----------
def playable_bounds(cfg: Config) -> Tuple[int, int, int, int]:
    """
    Return (x_min, y_min, x_end, y_end) of the playable area, ends exclusive.
    With a drawn border the outer ring of cells is wall.
    """
    inset = 1 if cfg.bordered else 0
    return inset, inset, cfg.width - inset, cfg.height - inset


def in_bounds(cfg: Config, x: int, y: int) -> bool:
    x_min, y_min, x_end, y_end = playable_bounds(cfg)
    return x_min <= x < x_end and y_min <= y < y_end


# ---------- Helpers ----------
def spawn_food(snake, cfg: Config, rng: random.Random) -> Optional[Location]:
    """
    Pick a uniformly random free cell. After cfg.spawn_retries misses, fall
    back to choosing among every free cell so a crowded board cannot spin
    forever. Returns None when no cell is free.
    """
    occupied = set(snake)
    x_min, y_min, x_end, y_end = playable_bounds(cfg)

    for _ in range(cfg.spawn_retries):
        cell = (rng.randrange(x_min, x_end), rng.randrange(y_min, y_end))
        if cell not in occupied:
            return cell

    free: List[Location] = [
        (x, y)
        for y in range(y_min, y_end)
        for x in range(x_min, x_end)
        if (x, y) not in occupied
    ]
    if not free:
        logger.info("No free cell left for food")
        return None
    return rng.choice(free)


def initial_snake(cfg: Config) -> Deque[Location]:
    """Contiguous snake of INITIAL_LENGTH, centred, heading right."""
    x_min, y_min, x_end, y_end = playable_bounds(cfg)
    cx = (x_min + x_end) // 2
    cy = (y_min + y_end) // 2
    return deque((cx - i, cy) for i in range(INITIAL_LENGTH))


# ---------- State ----------
@dataclass
class GameState:
    snake: Deque[Location]          # head at index 0
    direction: Direction            # heading used by the last move
    pending: Direction              # heading for the next move
    food: Optional[Location]
    cfg: Config
    rng: random.Random = field(repr=False)
    score: int = 0
    tick: int = 0                   # last tick advanced
    terminated: bool = False
    death_reason: Optional[str] = None

    @property
    def head(self) -> Location:
        return self.snake[0]


def new_game_state(cfg: Config, rng: Optional[random.Random] = None) -> GameState:
    if rng is None:
        rng = random.Random(cfg.seed)
    snake = initial_snake(cfg)
    food = spawn_food(snake, cfg, rng)
    return GameState(
        snake=snake,
        direction=RIGHT,
        pending=RIGHT,
        food=food,
        cfg=cfg,
        rng=rng,
    )


def _ensure_running(state: GameState) -> None:
    if state.terminated:
        raise GameTerminated(f"Game is over ({state.death_reason})")


# ---------- Operations ----------
def set_direction(state: GameState, direction: Direction) -> bool:
    """
    Record the heading for the next advance. Under the strict policy a
    direct reversal of the current heading is rejected while the snake has
    more than one segment. Returns True if the turn was accepted.
    """
    _ensure_running(state)
    if direction not in DIRECTIONS:
        raise ValueError(f"Unknown direction: {direction}")
    if (
        state.cfg.turns == "strict"
        and len(state.snake) > 1
        and is_opposite(direction, state.direction)
    ):
        logger.debug("Rejected reversal to %s", DIRECTION_NAMES.get(direction, direction))
        return False
    state.pending = direction
    return True


def check_collision(state: GameState, pos: Location, include_tail: bool = True) -> bool:
    """True if pos is on a segment. include_tail=False ignores the tail cell."""
    if include_tail:
        return pos in state.snake
    return pos in islice(state.snake, len(state.snake) - 1)


def check_food(state: GameState) -> bool:
    return state.food is not None and state.head == state.food


def grows_on(state: GameState, tick: int, new_head: Location) -> bool:
    """Whether the tail is kept on this move."""
    if state.cfg.growth == "food":
        return new_head == state.food
    return tick % state.cfg.grow_every == 0


def advance(state: GameState, tick: int) -> AdvanceResult:
    """
    Advance the game by one tick.
    A fatal move leaves the snake, heading, food and score untouched and
    marks the state terminated.
    """
    _ensure_running(state)

    hx, hy = state.snake[0]
    dx, dy = state.pending
    new_head = (hx + dx, hy + dy)
    grows = grows_on(state, tick, new_head)

    # The tail cell frees up this tick unless the snake grows
    reason = None
    if not in_bounds(state.cfg, *new_head):
        reason = "wall"
    elif check_collision(state, new_head, include_tail=grows):
        reason = "self"

    if reason is not None:
        state.terminated = True
        state.death_reason = reason
        logger.info("Game over at tick %d: %s collision at %s, score %d",
                    tick, reason, new_head, state.score)
        return AdvanceResult(Outcome.GAME_OVER, state.score, reason)

    # Commit direction and move
    state.direction = state.pending
    state.tick = tick
    state.snake.appendleft(new_head)
    if not grows:
        state.snake.pop()

    if check_food(state):
        state.score += state.cfg.food_reward
        state.food = spawn_food(state.snake, state.cfg, state.rng)
        logger.debug("Ate at %s, score %d, next food %s", new_head, state.score, state.food)
        return AdvanceResult(Outcome.ATE, state.score)

    return AdvanceResult(Outcome.CONTINUE, state.score)
