"""Core board representation for checkers."""

from typing import List, Optional, Sequence
import numpy as np
import logging

from .constants import (
    BOARD_SIZE,
    ROWS_PER_SIDE,
    Player,
    PieceType,
    Position,
    is_valid_position,
    is_playable_square,
)

# Setup logger
logger = logging.getLogger(__name__)

# Plane index for each piece type in the numpy encoding
PIECE_PLANES = {
    PieceType.RED: 0,
    PieceType.BLACK: 1,
    PieceType.RED_KING: 2,
    PieceType.BLACK_KING: 3,
}


class Board:
    """Represents the 8x8 checkers grid.

    Every cell holds exactly one PieceType. Light squares stay EMPTY:
    set_piece refuses to put a piece on one.
    """

    def __init__(self):
        self.grid: List[List[PieceType]] = [
            [PieceType.EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        new_board = Board()
        new_board.grid = [row[:] for row in self.grid]
        return new_board

    def clear(self) -> None:
        for row in self.grid:
            row[:] = [PieceType.EMPTY] * BOARD_SIZE

    def setup_initial(self) -> None:
        """Place the canonical starting layout.

        Black occupies the dark squares of rows 0-2, red those of rows 5-7.
        """
        self.clear()
        for row in range(BOARD_SIZE):
            if row < ROWS_PER_SIDE:
                piece = PieceType.man_for(Player.BLACK)
            elif row >= BOARD_SIZE - ROWS_PER_SIDE:
                piece = PieceType.man_for(Player.RED)
            else:
                continue
            for col in range(BOARD_SIZE):
                if is_playable_square(row, col):
                    self.grid[row][col] = piece

    def get_piece(self, row: int, col: int) -> Optional[PieceType]:
        """Get the piece at a square, or None when off the board."""
        if not is_valid_position(row, col):
            return None
        return self.grid[row][col]

    def set_piece(self, row: int, col: int, piece: PieceType) -> bool:
        """Put a piece on a square (EMPTY clears it)."""
        if not is_valid_position(row, col):
            return False
        if piece != PieceType.EMPTY and not is_playable_square(row, col):
            logger.debug(f"Refusing to place {piece.name} on light square ({row},{col})")
            return False
        self.grid[row][col] = piece
        return True

    def remove_piece(self, row: int, col: int) -> Optional[PieceType]:
        """Remove and return the piece at a square."""
        piece = self.get_piece(row, col)
        if piece is None:
            return None
        self.grid[row][col] = PieceType.EMPTY
        return piece

    def move_piece(self, from_row: int, from_col: int, to_row: int, to_col: int) -> PieceType:
        """Move whatever sits on the origin to the destination."""
        piece = self.grid[from_row][from_col]
        # Origin is cleared before the destination is written
        self.grid[from_row][from_col] = PieceType.EMPTY
        self.grid[to_row][to_col] = piece
        return piece

    def is_empty(self, row: int, col: int) -> bool:
        """Check if a square is on the board and empty."""
        return self.get_piece(row, col) == PieceType.EMPTY

    def pieces_of(self, player: Player) -> List[Position]:
        """Get all positions holding a piece of the given player."""
        return [
            Position(row, col)
            for row in range(BOARD_SIZE)
            for col in range(BOARD_SIZE)
            if self.grid[row][col].belongs_to(player)
        ]

    def count(self, player: Player) -> int:
        return len(self.pieces_of(player))

    @classmethod
    def from_matrix(cls, matrix: Sequence[Sequence]) -> 'Board':
        """Build a board from a row-major 8x8 matrix of integer codes."""
        if matrix is None or len(matrix) != BOARD_SIZE:
            raise ValueError(f"Board must have {BOARD_SIZE} rows")

        board = cls()
        for row, cells in enumerate(matrix):
            if cells is None or len(cells) != BOARD_SIZE:
                raise ValueError(f"Row {row} must have {BOARD_SIZE} cells")
            for col, value in enumerate(cells):
                piece = PieceType.from_code(value)
                if not board.set_piece(row, col, piece):
                    raise ValueError(f"Piece {piece.name} on light square ({row},{col})")
        return board

    def to_matrix(self) -> List[List[int]]:
        """Row-major matrix of integer piece codes."""
        return [[piece.value for piece in row] for row in self.grid]

    def to_numpy_array(self) -> np.ndarray:
        """Convert board state to numpy array, one plane per piece type."""
        state = np.zeros((len(PIECE_PLANES), BOARD_SIZE, BOARD_SIZE), dtype=np.float32)

        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                piece = self.grid[row][col]
                if piece != PieceType.EMPTY:
                    state[PIECE_PLANES[piece], row, col] = 1

        return state

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid == other.grid

    def __str__(self) -> str:
        """Return string representation of the board."""
        result = ["   " + " ".join(str(col) for col in range(BOARD_SIZE))]
        for row in range(BOARD_SIZE):
            cells = " ".join(piece.symbol for piece in self.grid[row])
            result.append(f"{row:2d} {cells}")
        return "\n".join(result)
