"""Turn orchestrator for a two-player SkraBBKle game.

The human player acts first. A move is validated against the acting
player's rack and the board before anything changes; only then are the
tiles taken from the rack, placed and scored, and the rack refilled.

The game ends when the bag is empty and either rack is empty, or after
four consecutive passes. Each player then loses the value of the tiles
left on their rack, once, before the winner is decided.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from skrabbkle.board import Board
from skrabbkle.core.errors import ConfigurationError, IllegalMoveError
from skrabbkle.core.telemetry import GameLogger, TurnEntry
from skrabbkle.move import Move
from skrabbkle.players import Player
from skrabbkle.scoring import score
from skrabbkle.tiles import TileBag

logger = logging.getLogger(__name__)

MAX_CONSECUTIVE_PASSES = 4
DRAW = "draw"


@dataclass(frozen=True)
class ValidationResult:
    """Result of validating a move against the rack and the board."""

    legal: bool
    reason: str | None = None


@dataclass
class TurnResult:
    turn_number: int
    player: Player
    move: Move
    points: int
    rejected: list[str] = field(default_factory=list)

    @property
    def is_pass(self) -> bool:
        return self.move.is_pass


@dataclass
class GameResult:
    scores: dict[str, int]
    penalties: dict[str, int]
    winner: str | None

    @property
    def is_draw(self) -> bool:
        return self.winner is None

    @property
    def outcome(self) -> str:
        return self.winner if self.winner is not None else DRAW


class Game:
    """Runs turns between a human and a computer player."""

    def __init__(
        self,
        board: Board,
        human: Player,
        computer: Player,
        bag: TileBag,
        telemetry: GameLogger | None = None,
    ) -> None:
        if human.name == computer.name:
            raise ConfigurationError("players", f"both players are named {human.name!r}")

        self._board = board
        self._players = [human, computer]
        self._bag = bag
        self._telemetry = telemetry

        self._started = False
        self._active = 0
        self._turn_number = 0
        self._consecutive_passes = 0
        self._terminal = False
        self._last_move: Move | None = None
        self._result: GameResult | None = None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self._board

    @property
    def bag(self) -> TileBag:
        return self._bag

    @property
    def human(self) -> Player:
        return self._players[0]

    @property
    def computer(self) -> Player:
        return self._players[1]

    @property
    def players(self) -> list[Player]:
        return list(self._players)

    @property
    def turn_number(self) -> int:
        return self._turn_number

    @property
    def consecutive_passes(self) -> int:
        return self._consecutive_passes

    @property
    def result(self) -> GameResult | None:
        """Final result, available once the game is over."""
        return self._result

    def current_player(self) -> Player:
        return self._players[self._active]

    def opponent(self, player: Player) -> Player:
        return self._players[1] if player is self._players[0] else self._players[0]

    def is_terminal(self) -> bool:
        return self._terminal

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Deal opening racks, human first."""
        if self._started:
            return
        for player in self._players:
            player.rack.fill_from(self._bag)
        self._started = True
        logger.info(
            "Game started on a %dx%d board, %d tiles left in the bag",
            self._board.size, self._board.size, len(self._bag),
        )

    def run(self, on_turn: Callable[[TurnResult], None] | None = None) -> GameResult:
        """Play turns until the game is over."""
        self.start()
        while not self._terminal:
            turn = self.play_turn()
            if on_turn is not None:
                on_turn(turn)
        return self._result

    def play_turn(self) -> TurnResult:
        """Ask the current player for a move and apply it.

        An illegal move from an interactive player is reported back and the
        player is asked again. An illegal move from an automated player is
        turned into a pass.
        """
        if self._terminal:
            raise IllegalMoveError(",", "the game is over")
        self.start()

        player = self.current_player()
        rack_before = [str(t) for t in player.rack.tiles]
        rejected: list[str] = []
        started = time.perf_counter()

        while True:
            move = player.source.take_turn(self._board, player.rack)
            check = self.validate_move(player, move)
            if check.legal:
                break
            rejected.append(move.notation())
            if player.interactive:
                player.source.reject(move, player.rack, check.reason)
                continue
            logger.warning(
                "%s proposed illegal move %s (%s); treating it as a pass",
                player.name, move.notation(), check.reason,
            )
            move = Move.pass_turn()
            break

        latency_ms = (time.perf_counter() - started) * 1000
        points = self.apply_move(player, move)
        turn = TurnResult(self._turn_number, player, self._last_move, points, rejected)
        logger.debug("Turn %d: %s played %s for %d", turn.turn_number, player.name,
                     turn.move.notation(), points)

        if self._telemetry is not None:
            self._log_turn(turn, rack_before, latency_ms)
            if self._terminal:
                self._log_summary()
        return turn

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def validate_move(self, player: Player, move: Move) -> ValidationResult:
        if move.is_pass:
            return ValidationResult(legal=True)

        if not self._board.contains(move.anchor):
            return ValidationResult(
                legal=False, reason=f"square {move.anchor} is not on the board"
            )
        if not player.rack.can_form(move.word):
            return ValidationResult(
                legal=False, reason=f"rack {player.rack} cannot supply {move.word}"
            )
        if self._board.landing_cells(move.anchor, move.axis, len(move.word)) is None:
            return ValidationResult(
                legal=False, reason=f"{move.word} does not fit on the board from {move.anchor}"
            )
        if not self._board.is_legal(move.anchor, move.axis, move.word):
            if self._board.is_empty():
                reason = f"the first word must cover the center square {self._board.center}"
            else:
                reason = "the word must connect to tiles already on the board"
            return ValidationResult(legal=False, reason=reason)

        return ValidationResult(legal=True)

    def apply_move(self, player: Player, move: Move) -> int:
        """Commit a move for the current player and return its points.

        Raises IllegalMoveError, changing nothing, if the move is not legal,
        it is not ``player``'s turn, or the game is over.
        """
        if self._terminal:
            raise IllegalMoveError(move.notation(), "the game is over")
        if player is not self.current_player():
            raise IllegalMoveError(move.notation(), f"it is not {player.name}'s turn")
        check = self.validate_move(player, move)
        if not check.legal:
            raise IllegalMoveError(move.notation(), check.reason)

        self._turn_number += 1
        if move.is_pass:
            points = 0
            player.passed_last_turn = True
            self._consecutive_passes += 1
        else:
            played = player.rack.remove_word_tiles(move.word)
            move = move.with_tiles(played)
            points = score(self._board, move)
            player.score += points
            player.passed_last_turn = False
            player.rack.fill_from(self._bag)
            self._consecutive_passes = 0

        self._last_move = move
        self._check_terminal()
        if not self._terminal:
            self._active = 1 - self._active
        return points

    # ------------------------------------------------------------------
    # Termination
    # ------------------------------------------------------------------

    def _check_terminal(self) -> None:
        if self._consecutive_passes >= MAX_CONSECUTIVE_PASSES:
            self._finish()
            return
        if self._bag.is_empty() and any(p.rack.is_empty() for p in self._players):
            self._finish()

    def _finish(self) -> None:
        """End the game: apply rack penalties once and decide the winner."""
        if self._terminal:
            return
        self._terminal = True

        penalties = {p.name: p.apply_unused_tiles_penalty() for p in self._players}
        scores = {p.name: p.score for p in self._players}
        human, computer = self._players
        if human.score > computer.score:
            winner = human.name
        elif computer.score > human.score:
            winner = computer.name
        else:
            winner = None

        self._result = GameResult(scores=scores, penalties=penalties, winner=winner)
        logger.info("Game over after %d turns: %s (%s)", self._turn_number,
                    self._result.outcome, scores)

    # ------------------------------------------------------------------
    # Telemetry
    # ------------------------------------------------------------------

    def snapshot(self) -> dict:
        return {
            "turn_number": self._turn_number,
            "active_player": self.current_player().name,
            "scores": {p.name: p.score for p in self._players},
            "racks": {p.name: [str(t) for t in p.rack.tiles] for p in self._players},
            "tiles_remaining": len(self._bag),
            "consecutive_passes": self._consecutive_passes,
            "terminal": self._terminal,
            "last_move": self._last_move.notation() if self._last_move else None,
            "board": self._board.render(),
        }

    def _log_turn(self, turn: TurnResult, rack_before: list[str], latency_ms: float) -> None:
        move = turn.move
        self._telemetry.log_turn(TurnEntry(
            turn_number=turn.turn_number,
            player=turn.player.name,
            notation=move.notation(),
            is_pass=move.is_pass,
            points=turn.points,
            score_after=turn.player.score,
            tiles_placed=move.tile_count,
            rack_before=rack_before,
            rack_after=[str(t) for t in turn.player.rack.tiles],
            bag_remaining=len(self._bag),
            consecutive_passes=self._consecutive_passes,
            latency_ms=round(latency_ms, 3),
            word=None if move.is_pass else move.word,
            anchor=None if move.is_pass else str(move.anchor),
            axis=None if move.is_pass else move.axis.value,
            rejected_attempts=list(turn.rejected),
        ))

    def _log_summary(self) -> None:
        self._telemetry.finalize_game(
            scores=self._result.scores,
            penalties=self._result.penalties,
            outcome=self._result.outcome,
            extra={"turns": self._turn_number, "board_size": self._board.size},
        )
