"""CLI entry point: python -m skrabbkle [config.yaml]"""

import argparse
import logging
import os
import random
import sys
from datetime import datetime, timezone
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from skrabbkle.config import GameConfig, default_config, load_config
from skrabbkle.console import BANNER, ConsolePlayer, choose_board, choose_open_game, play
from skrabbkle.core.errors import ConfigurationError
from skrabbkle.core.telemetry import GameLogger
from skrabbkle.dictionary import Dictionary
from skrabbkle.game import Game
from skrabbkle.layout import load_board
from skrabbkle.players import ComputerPlayer, Player
from skrabbkle.search import MoveSearch
from skrabbkle.tiles import TileBag

CONFIG_ENV_VAR = "SKRABBKLE_CONFIG"


def _report_error(exc: Exception) -> None:
    err = Console(stderr=True, highlight=False, soft_wrap=True)
    err.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")


def build_game(config: GameConfig, board, read=input, write=print) -> Game:
    """Wire players, bag, dictionary and telemetry for one game."""
    settings = config.game
    if settings.word_list is not None:
        dictionary = Dictionary.from_file(settings.word_list)
    else:
        dictionary = Dictionary.default()

    search = MoveSearch(
        dictionary,
        max_candidates=config.search.max_candidates,
        time_limit_s=config.search.time_limit_s,
    )
    human = Player(settings.human_name, ConsolePlayer(read=read, write=write))
    computer = Player(settings.computer_name, ComputerPlayer(search))
    bag = TileBag(rng=random.Random(settings.seed))

    telemetry = None
    if config.logging.telemetry_dir is not None:
        stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S")
        game_id = f"skrabbkle-{stamp}-{settings.seed if settings.seed is not None else 'random'}"
        telemetry = GameLogger(config.logging.telemetry_dir, game_id)

    return Game(board, human, computer, bag, telemetry=telemetry)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(
        prog="skrabbkle",
        description="SkraBBKle: a console word game against the computer",
    )
    parser.add_argument(
        "config",
        type=Path,
        nargs="?",
        default=None,
        help=f"Path to YAML config file (default: ${CONFIG_ENV_VAR})",
    )
    parser.add_argument("--board", type=Path, default=None, help="Board file to play on")
    parser.add_argument("--word-list", type=Path, default=None, help="Word list for the computer")
    parser.add_argument("--seed", type=int, default=None, help="Tile bag shuffle seed")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--open", dest="open_game", action="store_true", default=None,
                      help="Show the computer's tiles")
    mode.add_argument("--closed", dest="open_game", action="store_false",
                      help="Hide the computer's tiles")
    parser.add_argument("--log-level", type=str.upper, default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Logging level (default from config)")
    parser.add_argument("--telemetry-dir", type=Path, default=None,
                        help="Write JSONL game logs to this directory")
    args = parser.parse_args(argv)

    config_path = args.config or (
        Path(os.environ[CONFIG_ENV_VAR]) if os.environ.get(CONFIG_ENV_VAR) else None
    )
    try:
        config = load_config(config_path) if config_path else default_config()
    except ConfigurationError as exc:
        _report_error(exc)
        return 1

    if args.board is not None:
        config.game.board = args.board
    if args.word_list is not None:
        config.game.word_list = args.word_list
    if args.seed is not None:
        config.game.seed = args.seed
    if args.open_game is not None:
        config.game.open = args.open_game
    if args.telemetry_dir is not None:
        config.logging.telemetry_dir = args.telemetry_dir

    logging.basicConfig(
        level=args.log_level or config.logging.level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    out = Console(markup=False, highlight=False, soft_wrap=True)
    write = out.print

    write(BANNER)
    try:
        if config.game.board is not None:
            board = load_board(config.game.board)
        else:
            board = choose_board(write=write)
        if config.game.open is not None:
            open_game = config.game.open
        else:
            open_game = choose_open_game(write=write)

        game = build_game(config, board, write=write)
        play(game, open_game, write=write)
    except ConfigurationError as exc:
        _report_error(exc)
        return 1
    except (EOFError, KeyboardInterrupt):
        write()
        write("Game abandoned.")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
