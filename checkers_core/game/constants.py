"""Constants for checkers game logic."""

from enum import Enum
from typing import List, Optional, Tuple
from dataclasses import dataclass
import logging

# Setup logger
logger = logging.getLogger(__name__)

BOARD_SIZE = 8
ROWS_PER_SIDE = 3  # Rows of men each side starts with


class Player(Enum):
    RED = "red"
    BLACK = "black"

    @property
    def opponent(self) -> 'Player':
        """Get the opposing player."""
        return Player.BLACK if self == Player.RED else Player.RED

    @property
    def forward(self) -> int:
        """Row delta of a man advancing (red moves up, black moves down)."""
        return -1 if self == Player.RED else 1

    @property
    def promotion_row(self) -> int:
        """Row on which this player's men are crowned."""
        return 0 if self == Player.RED else BOARD_SIZE - 1

    @staticmethod
    def from_string(name: str) -> 'Player':
        """Parse a color name like 'red' or 'BLACK'."""
        try:
            return Player(str(name).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown player color: {name!r}") from None


class PieceType(Enum):
    # Integer codes match the foreign board matrix format
    EMPTY = 0
    RED = 1
    BLACK = 2
    RED_KING = 3
    BLACK_KING = 4

    def is_empty(self) -> bool:
        return self == PieceType.EMPTY

    def is_king(self) -> bool:
        return self in {PieceType.RED_KING, PieceType.BLACK_KING}

    def is_man(self) -> bool:
        return self in {PieceType.RED, PieceType.BLACK}

    def get_player(self) -> Optional[Player]:
        if self in {PieceType.RED, PieceType.RED_KING}:
            return Player.RED
        elif self in {PieceType.BLACK, PieceType.BLACK_KING}:
            return Player.BLACK
        return None

    def belongs_to(self, player: Player) -> bool:
        return self.get_player() == player

    def is_opponent_of(self, player: Player) -> bool:
        """True for a non-empty piece of the other color."""
        owner = self.get_player()
        return owner is not None and owner != player

    def promoted(self) -> 'PieceType':
        """The king this piece becomes; kings and empty cells are unchanged."""
        if self.is_man():
            return PieceType.king_for(self.get_player())
        return self

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @staticmethod
    def man_for(player: Player) -> 'PieceType':
        return PieceType.RED if player == Player.RED else PieceType.BLACK

    @staticmethod
    def king_for(player: Player) -> 'PieceType':
        return PieceType.RED_KING if player == Player.RED else PieceType.BLACK_KING

    @staticmethod
    def from_code(value) -> 'PieceType':
        """Coerce a foreign cell value (int, numeric string, float) to a piece."""
        try:
            number = float(value) if isinstance(value, str) else value
            code = int(number)
            if code != number:
                raise ValueError(value)
            return PieceType(code)
        except (TypeError, ValueError, OverflowError):
            raise ValueError(f"Invalid piece code: {value!r}") from None


_SYMBOLS = {
    PieceType.EMPTY: ".",
    PieceType.RED: "r",
    PieceType.BLACK: "b",
    PieceType.RED_KING: "R",
    PieceType.BLACK_KING: "B",
}


@dataclass(frozen=True)
class Position:
    """A square on the checkers board, zero-based."""
    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row},{self.col})"

    @property
    def is_on_board(self) -> bool:
        return is_valid_position(self.row, self.col)

    @property
    def is_playable(self) -> bool:
        return is_playable_square(self.row, self.col)

    def step(self, d_row: int, d_col: int, distance: int = 1) -> 'Position':
        """Position reached by moving `distance` steps along (d_row, d_col)."""
        return Position(self.row + d_row * distance, self.col + d_col * distance)


# Diagonal unit directions (row delta, col delta)
DIAGONALS: List[Tuple[int, int]] = [
    (-1, -1),
    (-1, 1),
    (1, -1),
    (1, 1),
]


def is_valid_position(row: int, col: int) -> bool:
    """Check if coordinates lie on the board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_playable_square(row: int, col: int) -> bool:
    """Check if coordinates are a dark (playable) square."""
    return is_valid_position(row, col) and (row + col) % 2 == 1


def sign(value: int) -> int:
    return (value > 0) - (value < 0)
