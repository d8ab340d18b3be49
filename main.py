"""Main entry point for the Shooter Game."""

import argparse
import logging
import sys

from config.config import FPS, LOG_LEVEL
from shooter.logger import get_logger, setup_logger

# Get logger for this module
logger = get_logger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Shooter Game")
    parser.add_argument("--fps", type=int, default=FPS, help="Frame rate cap")
    parser.add_argument(
        "--log-level",
        default=logging.getLevelName(LOG_LEVEL),
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity",
    )
    parser.add_argument("--mute", action="store_true", help="Do not play sound effects")
    parser.add_argument("--seed", type=int, default=None, help="Seed for enemy placement")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    """Initializes and runs the game."""
    args = parse_args(argv)
    setup_logger(logging.getLevelName(args.log_level))

    try:
        # Imported here so pygame starts only after logging is configured
        from shooter.game_loop import Game

        logger.info("Starting Shooter Game")
        game = Game(fps=args.fps, muted=args.mute, seed=args.seed)
        game.run()

    except (Exception, SystemExit) as e:
        logger.error("An error occurred: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
