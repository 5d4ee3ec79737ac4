"""Console front end: prompts, the interactive player and game reports.

Input and output go through ``read``/``write`` callables (``input`` and
``print`` by default) so scripted sessions can drive the same code.
"""

from __future__ import annotations

from collections.abc import Callable

from skrabbkle.board import Board
from skrabbkle.core.errors import ConfigurationError, InputFormatError
from skrabbkle.core.sanitizer import sanitize_text
from skrabbkle.game import Game, GameResult, TurnResult
from skrabbkle.layout import default_board, load_board
from skrabbkle.move import Move, parse_move
from skrabbkle.players import MoveSource
from skrabbkle.rack import Rack

Reader = Callable[[], str]
Writer = Callable[[str], None]

BANNER = "\n".join([
    "============                   ============",
    "============ S k r a B B K l e ============",
    "============                   ============",
    "",
])

MOVE_INSTRUCTIONS = "\n".join([
    'Please enter your move in the format: "word,square" (without the quotes)',
    "For example, for suitable tile rack and board configuration, a downward move",
    'could be "HI,f4" and a rightward move could be "HI,4f".',
    "",
    "In the word, upper-case letters are standard tiles",
    "and lower-case letters are wildcards.",
    'Entering "," passes the turn.',
])

INVALID_FILE = "This is not a valid file. Please enter the file name of the board: "


def _read_line(read: Reader) -> str:
    return sanitize_text(read())


class ConsolePlayer(MoveSource):
    """Interactive player typing moves in notation.

    Malformed input is answered with "Illegal move format" and read again
    until it parses. Moves the game refuses come back through ``reject``.
    """

    interactive = True

    def __init__(self, read: Reader = input, write: Writer = print) -> None:
        self._read = read
        self._write = write

    def take_turn(self, board: Board, rack: Rack) -> Move:
        self._write("It's your turn! Your tiles:")
        self._write(str(rack))
        self._write(MOVE_INSTRUCTIONS)
        while True:
            try:
                return parse_move(_read_line(self._read))
            except InputFormatError:
                self._write("Illegal move format")
                self._write(MOVE_INSTRUCTIONS)

    def reject(self, move: Move, rack: Rack, reason: str) -> None:
        self._write(f"With tiles {rack} you cannot play word {move.notation()}!")
        self._write(f"({reason})")


# ----------------------------------------------------------------------
# Setup prompts
# ----------------------------------------------------------------------


def prompt_choice(read: Reader, write: Writer, question: str, choices: tuple[str, ...],
                  invalid: str) -> str:
    """Ask until one of ``choices`` is entered (case-insensitive)."""
    write(question)
    prompt = f"Please enter your choice ({'/'.join(choices)}): "
    while True:
        write(prompt)
        choice = _read_line(read).lower()
        if choice in choices:
            return choice
        write(invalid)


def choose_board(read: Reader = input, write: Writer = print) -> Board:
    """Ask whether to load a board file or use the default layout."""
    choice = prompt_choice(
        read, write,
        "Would you like to _l_oad a board or use the _d_efault board?",
        ("l", "d"),
        "Invalid choice. Please enter 'l' to load a board or 'd' to use the default board.",
    )
    if choice == "d":
        return default_board()

    write("Please enter the file name of the board: ")
    while True:
        path = _read_line(read)
        try:
            return load_board(path)
        except ConfigurationError as exc:
            write(f"{exc}")
            write(INVALID_FILE)


def choose_open_game(read: Reader = input, write: Writer = print) -> bool:
    choice = prompt_choice(
        read, write,
        "Would you like to play an _o_pen or a _c_losed game?",
        ("o", "c"),
        "Invalid choice. Please enter 'o' for open game or 'c' for closed game.",
    )
    return choice == "o"


# ----------------------------------------------------------------------
# Reports
# ----------------------------------------------------------------------


def render_state(game: Game, open_game: bool) -> str:
    """Board, both scores and, in an open game, the computer's tiles."""
    width = max(len(p.name) for p in game.players) + len(" score:")
    lines = [game.board.render(), ""]
    for player in game.players:
        lines.append(f"{player.name + ' score:':<{width}} {player.score}")
    lines.append("")
    if open_game:
        lines.append("OPEN GAME: The computer's tiles:")
        lines.append(f"OPEN GAME: {game.computer.rack}")
    return "\n".join(lines)


def render_turn(turn: TurnResult) -> str:
    if turn.is_pass:
        return f"{turn.player.name} passed the turn."
    return f"The move is:    {turn.move}  ({turn.points} points)"


def render_game_over(result: GameResult) -> str:
    lines = ["Game Over!"]
    for name, points in result.scores.items():
        lines.append(f"The {name.lower()} scored {points} points.")
    if result.is_draw:
        lines.append("It's a draw!")
    else:
        lines.append(f"The {result.winner.lower()} wins!")
    return "\n".join(lines)


def play(game: Game, open_game: bool, write: Writer = print) -> GameResult:
    """Run ``game`` to the end, echoing the state before every turn."""
    game.start()
    while not game.is_terminal():
        write(render_state(game, open_game))
        if not game.current_player().interactive:
            write("It's the computer's turn!")
        write(render_turn(game.play_turn()))
    result = game.result
    write(render_game_over(result))
    return result
