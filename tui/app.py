# tui/app.py

import argparse
import curses
import logging
import random
import sys

from backend.board import generate_board
from backend.game import GameSession
from tui.config import clamp_dimensions, load_config
from tui.input import read_events
from tui.renderer import CursesRenderer
from tui.terminal import screen_size, terminal_session

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(prog="minesweeper", description="Minesweeper in the terminal")
    parser.add_argument("--width", type=int, default=None, help="Board width (default: fit the terminal)")
    parser.add_argument("--height", type=int, default=None, help="Board height (default: fit the terminal)")
    parser.add_argument("--bombs", type=int, default=None, help="Number of mines (default: from the configured density)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible board")
    parser.add_argument("--config", type=str, default=None, help="Path to a YAML config overriding the defaults")
    parser.add_argument("--log-file", type=str, default=None, help="Write log records to this file")
    parser.add_argument("--log-level", type=str, default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Log level")
    return parser


def resolve_settings(args, config):
    """Combine command-line flags with the config; flags win."""
    board_cfg = config["board"]
    log_cfg = config["logging"]

    def pick(flag, value, cast):
        if flag is not None:
            return flag
        return None if value is None else cast(value)

    return {
        "width": pick(args.width, board_cfg["width"], int),
        "height": pick(args.height, board_cfg["height"], int),
        "bombs": pick(args.bombs, board_cfg["bombs"], int),
        "density": float(board_cfg["density"]),
        "seed": pick(args.seed, config["seed"], int),
        "log_file": pick(args.log_file, log_cfg["file"], str),
        "log_level": (pick(args.log_level, log_cfg["level"], str) or "INFO").upper(),
    }


def setup_logging(log_file, level):
    root = logging.getLogger()
    if log_file:
        handler = logging.FileHandler(log_file)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    else:
        # Nothing may be written to the terminal while curses owns it.
        handler = logging.NullHandler()
    root.addHandler(handler)
    root.setLevel(level)


def run(stdscr, settings):
    """Size, generate and play one game on an acquired screen."""
    width, height, bombs = clamp_dimensions(
        settings["width"], settings["height"], settings["bombs"],
        screen_size(stdscr), density=settings["density"],
    )
    rng = random.Random(settings["seed"])
    board = generate_board(width, height, bombs, rng)

    cols, rows = screen_size(stdscr)
    origin = ((cols - width) // 2, (rows - height) // 2)
    session = GameSession(board, origin)
    outcome = session.play(CursesRenderer(stdscr), read_events(stdscr))
    logger.info("Game finished: %s", session.get_state())
    return outcome


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        settings = resolve_settings(args, config)
    except (OSError, ValueError, TypeError) as exc:
        parser.error(f"invalid configuration: {exc}")

    setup_logging(settings["log_file"], settings["log_level"])
    logger.info("Starting with %s", settings)

    try:
        with terminal_session() as stdscr:
            run(stdscr, settings)
    except ValueError as exc:
        logger.error("Cannot start game: %s", exc)
        print(f"minesweeper: {exc}", file=sys.stderr)
        return 1
    except curses.error as exc:
        logger.exception("Display failed")
        print(f"minesweeper: display error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
