# main.py
from typing import List, Optional
import argparse
import logging
import sys

from .config import Config, COLS, ROWS, DELAY_MS, POLL_MS, GROW_EVERY, GROWTH_POLICIES, TURN_POLICIES
from .frontend import Frontend, SetupError
from .loop import run_game

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="termsnake", description="Snake on a fixed tick.")
    parser.add_argument(
        "--frontend",
        type=str,
        default="terminal",
        choices=["terminal", "window"],
        help="terminal → curses in this terminal, window → pygame window",
    )
    parser.add_argument("--width", type=int, default=COLS)
    parser.add_argument("--height", type=int, default=ROWS)
    parser.add_argument(
        "--bordered",
        action="store_true",
        help="Draw a wall around the board; the outer ring of cells is fatal.",
    )
    parser.add_argument("--delay-ms", type=int, default=DELAY_MS, help="frame interval")
    parser.add_argument("--poll-ms", type=int, default=POLL_MS, help="input wait per frame")
    parser.add_argument(
        "--growth",
        type=str,
        default="tick",
        choices=GROWTH_POLICIES,
        help="tick → grow every --grow-every ticks, food → grow on eating",
    )
    parser.add_argument("--grow-every", type=int, default=GROW_EVERY)
    parser.add_argument(
        "--turns",
        type=str,
        default="strict",
        choices=TURN_POLICIES,
        help="strict rejects turning straight back, permissive allows it",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Write debug logs here (the screen belongs to the game).",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> Config:
    return Config(
        width=args.width,
        height=args.height,
        bordered=args.bordered,
        frame_ms=args.delay_ms,
        poll_ms=args.poll_ms,
        growth=args.growth,
        grow_every=args.grow_every,
        turns=args.turns,
        seed=args.seed,
    )


def setup_logging(log_file: Optional[str]) -> None:
    if log_file is None:
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_frontend(name: str, cfg: Config) -> Frontend:
    if name == "window":
        # pygame is only imported when a window is asked for
        from .window import PygameFrontend
        return PygameFrontend(cfg)
    from .terminal import CursesFrontend
    return CursesFrontend(cfg)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        cfg = config_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    setup_logging(args.log_file)
    frontend = build_frontend(args.frontend, cfg)

    try:
        score = run_game(frontend, cfg)
    except SetupError as exc:
        logger.error("Setup failed: %s", exc)
        print(f"termsnake: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130

    print(f"Final score: {score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
