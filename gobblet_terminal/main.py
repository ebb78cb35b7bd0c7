#!/usr/bin/env python3
"""
Play Gobblet Gobblers in the terminal.

Usage:
    gobblet                           # Two players at one keyboard
    gobblet --starting-inventory 3    # Three pieces of each size per player
    gobblet --no-clear --log-level debug

Moves are typed without the player prefix, e.g. ``S _ > 1,1`` to place a
small piece from inventory, or ``L 0,0 > 2,2`` to move a large piece.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from pydantic import ValidationError
from rich.console import Console

from gobblet_rules import Game, GameConfig, ParseMoveError, SubmitMoveError, Victory, notation_to_move

logger = logging.getLogger(__name__)


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _read_line(console: Console, prompt: str, stream: TextIO | None) -> str | None:
    """Prompt for one line of input; None once input is exhausted."""
    try:
        line = console.input(prompt, markup=False, stream=stream)
    except EOFError:
        return None
    # readline() signals end of stream with an empty string
    if stream is not None and not line:
        return None
    return line


def play(
    game: Game,
    console: Console,
    stream: TextIO | None = None,
    clear_screen: bool = True,
) -> Victory | None:
    """
    Run the read-submit loop until the game ends or input runs out.

    Invalid or illegal input never changes the game; the same player is
    asked again. Reads from ``stream`` if given, otherwise standard input.
    """
    last_error: ParseMoveError | SubmitMoveError | None = None

    while not game.is_over():
        if clear_screen:
            console.clear()
        console.print(game.board.render(), end="", markup=False, highlight=False)

        if last_error is not None:
            console.print(f"Last move invalid: {last_error}. Please try again.", markup=False, highlight=False)
            last_error = None

        player = game.next_player()
        line = _read_line(console, f"{player.abbrev}: ", stream)
        if line is None:
            logger.info("Input closed before the game ended")
            break

        try:
            game.submit(notation_to_move(f"{player.abbrev} {line}"))
        except (ParseMoveError, SubmitMoveError) as e:
            last_error = e

    if game.is_over():
        console.print(game.board.render(), end="", markup=False, highlight=False)
        console.print(str(game.outcome), markup=False, highlight=False)
    else:
        console.print("No winner")
    return game.outcome


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Play Gobblet Gobblers in the terminal")
    parser.add_argument("--starting-inventory", type=int, default=2,
                        help="Pieces of each size per player (default: 2)")
    parser.add_argument("--no-clear", action="store_true", help="Don't clear the screen between turns")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    args = parser.parse_args(argv)

    try:
        config = GameConfig(
            starting_inventory=args.starting_inventory,
            clear_screen=not args.no_clear,
            log_level=args.log_level,
        )
    except ValidationError as e:
        parser.error(str(e))

    setup_logging(config.log_level)
    play(Game.from_config(config), Console(), clear_screen=config.clear_screen)


if __name__ == "__main__":
    main()
