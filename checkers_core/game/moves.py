"""Move generation and validation for checkers."""

from typing import List, Optional

from .constants import (
    BOARD_SIZE,
    DIAGONALS,
    Player,
    PieceType,
    Position,
    is_valid_position,
    sign,
)
from .types import Move, MoveType
import logging

# Setup logger
logger = logging.getLogger(__name__)


class MoveValidator:
    """Decides legality and enumerates moves for a GameState.

    The validator never mutates the board. Every legality answer, whether
    for a single candidate move or for the move list of a piece, goes
    through _check_move.
    """

    def __init__(self, game_state: 'GameState'):
        self.game_state = game_state

    @property
    def board(self) -> 'Board':
        return self.game_state.board

    def has_available_capture(self, player: Player) -> bool:
        """Forced-capture rule: does any piece of `player` have a jump?"""
        grid = self.board.grid
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                piece = grid[row][col]
                if not piece.belongs_to(player):
                    continue
                if self.piece_has_capture(row, col, piece):
                    return True
        return False

    def piece_has_capture(self, row: int, col: int, piece: Optional[PieceType] = None) -> bool:
        """Check whether the piece at (row, col) can capture right now."""
        if piece is None:
            piece = self.board.get_piece(row, col)
        if piece is None or piece.is_empty():
            return False

        player = piece.get_player()

        if piece.is_man():
            # Men jump forward only, over an adjacent opponent
            for d_col in (-1, 1):
                mid_row, mid_col = row + player.forward, col + d_col
                land_row, land_col = row + 2 * player.forward, col + 2 * d_col
                if (self.board.is_empty(land_row, land_col)
                        and self.board.grid[mid_row][mid_col].is_opponent_of(player)):
                    return True
            return False

        return any(
            self._king_can_capture_along(row, col, d_row, d_col, player)
            for d_row, d_col in DIAGONALS
        )

    def _king_can_capture_along(self, row: int, col: int, d_row: int, d_col: int,
                                player: Player) -> bool:
        """A king flies over exactly one opponent and needs an empty square beyond."""
        found_opponent = False
        for dist in range(1, BOARD_SIZE):
            check_row = row + d_row * dist
            check_col = col + d_col * dist
            if not is_valid_position(check_row, check_col):
                return False

            piece_at = self.board.grid[check_row][check_col]
            if piece_at.is_empty():
                if found_opponent:
                    return True
                continue

            if piece_at.is_opponent_of(player) and not found_opponent:
                found_opponent = True
                continue

            # Own piece, or a second opponent, ends the scan
            return False
        return False

    def is_valid_move(self, from_row: int, from_col: int, to_row: int, to_col: int) -> bool:
        """Validate that a proposed move is legal."""
        move_type = self._check_move(from_row, from_col, to_row, to_col)
        logger.debug(f"Move ({from_row},{from_col})->({to_row},{to_col}): "
                     f"{move_type.value if move_type else 'illegal'}")
        return move_type is not None

    def is_capture_move(self, from_row: int, from_col: int, to_row: int, to_col: int) -> bool:
        """Check if a move is legal and jumps an opposing piece."""
        return self._check_move(from_row, from_col, to_row, to_col) == MoveType.CAPTURE

    def _check_move(self, from_row: int, from_col: int, to_row: int, to_col: int,
                    forced: Optional[bool] = None) -> Optional[MoveType]:
        """Classify a candidate move, or return None when it is illegal.

        `forced` is the forced-capture flag for the mover's color; it is
        computed on demand when not supplied.
        """
        # 1. Endpoints on the board, destination empty, origin occupied
        if not (is_valid_position(from_row, from_col) and is_valid_position(to_row, to_col)):
            return None
        if not self.board.is_empty(to_row, to_col):
            return None
        piece = self.board.grid[from_row][from_col]
        if piece.is_empty():
            return None
        player = piece.get_player()

        # 2. Diagonal only
        row_diff = to_row - from_row
        col_diff = to_col - from_col
        distance = abs(row_diff)
        if distance == 0 or distance != abs(col_diff):
            return None

        # 3. Men
        if piece.is_man():
            if distance not in (1, 2):
                return None
            if sign(row_diff) != player.forward:
                return None

            if distance == 1:
                if forced is None:
                    forced = self.has_available_capture(player)
                return None if forced else MoveType.MOVE

            mid_piece = self.board.grid[from_row + row_diff // 2][from_col + col_diff // 2]
            return MoveType.CAPTURE if mid_piece.is_opponent_of(player) else None

        # 4. Kings
        row_dir = sign(row_diff)
        col_dir = sign(col_diff)
        opponent_count = 0
        for step in range(1, distance):
            piece_at = self.board.grid[from_row + row_dir * step][from_col + col_dir * step]
            if piece_at.is_empty():
                continue
            if not piece_at.is_opponent_of(player):
                return None  # own piece blocks
            opponent_count += 1
            if opponent_count > 1:
                return None  # cannot jump more than one in a single move

        if opponent_count == 0:
            if forced is None:
                forced = self.has_available_capture(player)
            return None if forced else MoveType.MOVE
        return MoveType.CAPTURE

    def get_possible_moves(self, row: int, col: int) -> List[Move]:
        """List the legal moves of one piece, honouring forced capture.

        When any piece of the same color can capture, only capture moves
        are listed, so a piece without a jump of its own gets none.
        """
        piece = self.board.get_piece(row, col)
        if piece is None or piece.is_empty():
            return []
        forced = self.has_available_capture(piece.get_player())
        return self._moves_for_piece(row, col, piece, forced)

    def _moves_for_piece(self, row: int, col: int, piece: PieceType, forced: bool) -> List[Move]:
        player = piece.get_player()
        source = Position(row, col)
        reach = BOARD_SIZE - 1 if piece.is_king() else 2
        moves = []

        for d_row, d_col in DIAGONALS:
            for dist in range(1, reach + 1):
                destination = source.step(d_row, d_col, dist)
                if not destination.is_on_board:
                    break
                move_type = self._check_move(row, col, destination.row, destination.col, forced)
                if move_type is not None:
                    moves.append(Move(
                        player=player,
                        source=source,
                        destination=destination,
                        type=move_type,
                    ))

        return moves

    def get_valid_moves(self, player: Player) -> List[Move]:
        """Get all legal moves for a color."""
        forced = self.has_available_capture(player)
        moves = []
        for position in self.board.pieces_of(player):
            piece = self.board.grid[position.row][position.col]
            moves.extend(self._moves_for_piece(position.row, position.col, piece, forced))

        logger.debug(f"Found {len(moves)} valid moves for {player.name} (forced capture: {forced})")
        return moves

    def has_any_valid_move(self, player: Player) -> bool:
        forced = self.has_available_capture(player)
        for position in self.board.pieces_of(player):
            piece = self.board.grid[position.row][position.col]
            if self._moves_for_piece(position.row, position.col, piece, forced):
                return True
        return False
