"""
numguess CLI - Play the number guessing game in a terminal.

Usage:
    numguess            Start playing
    numguess --version  Show version

The game reads guesses from stdin and exits when the player declines
another round or input ends.
"""

from __future__ import annotations
import argparse
import logging
from typing import TextIO

from . import __version__
from .console import Console, InputReader, Messages, ReplayPrompt
from .engine_core import RandomSource
from .session import GameLoop, SessionManager

logger = logging.getLogger(__name__)

BANNER_WIDTH = 50
NEW_GAME_WIDTH = 30


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Guess the secret number between 1 and 100",
        prog="numguess",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return run()


def run(
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    rng: RandomSource | None = None,
) -> int:
    """
    Play rounds until the player stops.

    Args:
        stdin: Input stream (defaults to sys.stdin)
        stdout: Output stream (defaults to sys.stdout)
        rng: Random source for targets (fresh random.Random if None)

    Returns:
        Process exit code
    """
    console = Console(stdout)
    reader = InputReader(stdin)
    manager = SessionManager(rng=rng)

    console.rule(BANNER_WIDTH)
    console.say(Messages.TITLE)
    console.rule(BANNER_WIDTH)

    while True:
        session = manager.create_session()
        GameLoop(session, reader, console).play()
        manager.end_session(session.session_id)

        if not ReplayPrompt(reader, console).ask():
            console.say(Messages.FAREWELL)
            logger.info("Exiting after %d round(s)", manager.rounds_played)
            return 0

        console.blank()
        console.rule(NEW_GAME_WIDTH)
        console.say(Messages.NEW_GAME)
        console.rule(NEW_GAME_WIDTH)


if __name__ == "__main__":
    raise SystemExit(main())
