"""Basic type definitions for checkers."""

from enum import Enum
from dataclasses import dataclass
from .constants import Player, Position


class MoveType(Enum):
    MOVE = "move"
    CAPTURE = "capture"


class TurnPhase(Enum):
    IDLE = 0
    SELECTED = 1


class GameResult(Enum):
    IN_PROGRESS = "in_progress"
    RED_WINS = "red_wins"
    BLACK_WINS = "black_wins"
    DRAW = "draw"

    @staticmethod
    def win_for(player: Player) -> 'GameResult':
        return GameResult.RED_WINS if player == Player.RED else GameResult.BLACK_WINS


@dataclass(frozen=True)
class Move:
    """A single step or jump of one piece.

    The type is only used for reporting and highlighting; legality is
    always decided from the source/destination geometry.
    """
    player: Player
    source: Position
    destination: Position
    type: MoveType = MoveType.MOVE

    @property
    def distance(self) -> int:
        return abs(self.destination.row - self.source.row)

    @property
    def is_capture(self) -> bool:
        return self.type == MoveType.CAPTURE

    def __str__(self) -> str:
        arrow = "x" if self.is_capture else "->"
        return f"{self.player.name} {self.source}{arrow}{self.destination}"
