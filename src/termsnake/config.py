from dataclasses import dataclass
from typing import Optional, Tuple, Union

# ----- Grid -----
COLS, ROWS = 20, 20
MIN_SIDE = 5  # smallest playable side that fits the starting snake plus a move

# ----- Timing -----
DELAY_MS = 250     # one tick per frame
POLL_MS = 100      # input wait per frame, must stay below DELAY_MS
GAME_OVER_MS = 1500

# ----- Rules -----
GROW_EVERY = 10
FOOD_REWARD = 100
SPAWN_RETRIES = 64
INITIAL_LENGTH = 3

GROWTH_POLICIES = ("tick", "food")
TURN_POLICIES = ("strict", "permissive")

# ----- Window frontend -----
CELL_SIZE = 20
BG    = (20, 20, 24)
WALL  = (90, 90, 100)
GREEN = (80, 200, 80)
HEAD  = (150, 240, 150)
RED   = (200, 70, 70)
TEXT  = (220, 220, 230)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)
DIRECTION_NAMES = {UP: "up", DOWN: "down", LEFT: "left", RIGHT: "right"}

# Input value for the quit key
QUIT = "quit"

Location = Tuple[int, int]
Direction = Tuple[int, int]
Key = Union[Direction, str]


def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


# ----- Tunables -----
@dataclass(frozen=True)
class Config:
    width: int = COLS
    height: int = ROWS
    bordered: bool = False          # border cells on row/col 0 and the max are walls
    frame_ms: int = DELAY_MS
    poll_ms: int = POLL_MS
    growth: str = "tick"            # "tick": every grow_every ticks, "food": on eating
    grow_every: int = GROW_EVERY
    turns: str = "strict"           # "strict" rejects direct reversal
    food_reward: int = FOOD_REWARD
    spawn_retries: int = SPAWN_RETRIES
    seed: Optional[int] = None
    game_over_ms: int = GAME_OVER_MS
    cell_size: int = CELL_SIZE

    def __post_init__(self):
        inset = 2 if self.bordered else 0
        if self.width - inset < MIN_SIDE or self.height - inset < MIN_SIDE:
            raise ValueError(
                f"Grid {self.width}x{self.height} is too small: the playable "
                f"area must be at least {MIN_SIDE}x{MIN_SIDE}"
            )
        if self.frame_ms <= 0 or self.poll_ms <= 0:
            raise ValueError("frame_ms and poll_ms must be positive")
        if self.poll_ms >= self.frame_ms:
            raise ValueError(
                f"poll_ms ({self.poll_ms}) must be shorter than frame_ms ({self.frame_ms})"
            )
        if self.growth not in GROWTH_POLICIES:
            raise ValueError(f"Unknown growth policy: {self.growth}")
        if self.grow_every < 1:
            raise ValueError("grow_every must be at least 1")
        if self.turns not in TURN_POLICIES:
            raise ValueError(f"Unknown turn policy: {self.turns}")
        if self.food_reward < 0:
            raise ValueError("food_reward must not be negative")
        if self.spawn_retries < 0:
            raise ValueError("spawn_retries must not be negative")
        if self.cell_size < 1:
            raise ValueError("cell_size must be positive")
        if self.game_over_ms < 0:
            raise ValueError("game_over_ms must not be negative")

    @property
    def frame_interval(self) -> float:
        """Frame interval in seconds."""
        return self.frame_ms / 1000.0

    @property
    def poll_timeout(self) -> float:
        return self.poll_ms / 1000.0
