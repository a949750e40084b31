# loop.py
from typing import Callable, Optional
import logging
import time

from .config import Config, Key, QUIT, DIRECTION_NAMES
from .frame import snapshot
from .frontend import Frontend, InputError
from .game import GameState, Outcome, advance, new_game_state, set_direction

logger = logging.getLogger(__name__)

TICK_MODULUS = 2 ** 64


def next_tick(tick: int) -> int:
    """Tick counter wraps like an unsigned 64-bit integer."""
    return (tick + 1) % TICK_MODULUS


def poll_key(frontend: Frontend, timeout: float) -> Optional[Key]:
    """Read one key; a failed read counts as no input."""
    try:
        return frontend.poll_input(timeout)
    except InputError as exc:
        logger.warning("Input read failed, ignoring this frame: %s", exc)
        return None


def run_game(
    frontend: Frontend,
    cfg: Config,
    state: Optional[GameState] = None,
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], float] = time.monotonic,
) -> int:
    """
    Run one game at a fixed tick rate until game over or quit.

    Each frame: poll input, turn, advance, render, then sleep out the rest
    of the frame. The frontend is torn down exactly once on the way out.

    Returns:
        The final score.
    """
    if state is None:
        state = new_game_state(cfg)

    frontend.setup()
    try:
        logger.info("Game started: %dx%d grid, %s growth, %s turns",
                    cfg.width, cfg.height, cfg.growth, cfg.turns)
        frontend.render(snapshot(state))

        tick = 0
        while True:
            started = clock()

            # 1) input
            key = poll_key(frontend, cfg.poll_timeout)
            if key == QUIT:
                logger.info("Quit at tick %d, score %d", tick, state.score)
                break
            if key is not None:
                accepted = set_direction(state, key)
                logger.debug("Turn %s %s", DIRECTION_NAMES.get(key, key),
                             "accepted" if accepted else "rejected")

            # 2) update
            result = advance(state, tick)
            if result.outcome is Outcome.GAME_OVER:
                frontend.announce_game_over(snapshot(state), result.reason)
                break

            # 3) render
            frontend.render(snapshot(state))

            # 4) hold the frame rate
            remaining = cfg.frame_interval - (clock() - started)
            if remaining > 0:
                sleep(remaining)
            tick = next_tick(tick)
    finally:
        frontend.teardown()

    return state.score
