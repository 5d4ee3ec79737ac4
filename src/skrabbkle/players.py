"""Players and the sources of their moves.

A Player is the game's record of one participant. Where its moves come from
is a MoveSource held by composition:

    MoveSource (ABC)
    ├── ConsolePlayer: interactive, reads notation from the console
    └── ComputerPlayer: automated, runs MoveSearch
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from skrabbkle.board import Board
from skrabbkle.move import Move
from skrabbkle.rack import Rack
from skrabbkle.search import MoveSearch


class MoveSource(ABC):
    """Produces moves for one player."""

    #: Interactive sources are asked again after an illegal move; automated
    #: sources have the move turned into a pass.
    interactive: bool = False

    @abstractmethod
    def take_turn(self, board: Board, rack: Rack) -> Move:
        """Return the next move. Must not change ``board`` or ``rack``."""

    def reject(self, move: Move, rack: Rack, reason: str) -> None:
        """Called when ``move`` was refused. Default does nothing."""


class ComputerPlayer(MoveSource):
    """Automated player backed by the exhaustive search."""

    def __init__(self, search: MoveSearch) -> None:
        self._search = search

    def take_turn(self, board: Board, rack: Rack) -> Move:
        return self._search.find_move(board, rack)


@dataclass
class Player:
    name: str
    source: MoveSource
    rack: Rack = field(default_factory=Rack)
    score: int = 0
    passed_last_turn: bool = False

    @property
    def interactive(self) -> bool:
        return self.source.interactive

    def apply_unused_tiles_penalty(self) -> int:
        """Subtract the rack's value from the score. Returns the penalty."""
        penalty = self.rack.total_value()
        self.score -= penalty
        return penalty
