"""Turn state machine for checkers.

The selected piece is owned by the caller: every call receives the current
Selection (or None) and returns the next one inside a TurnResult.
"""

from dataclasses import dataclass, field
from typing import List, Optional
import logging

from .constants import PieceType, Position
from .game_state import GameState
from .moves import MoveValidator
from .types import Move, TurnPhase

logger = logging.getLogger(__name__)

MUST_CAPTURE_MESSAGE = "You must capture! Select a piece that can jump."
CONTINUE_CHAIN_MESSAGE = "Keep jumping with the same piece."


@dataclass(frozen=True)
class Selection:
    """A chosen piece. `chain` marks a piece in the middle of a multi-jump."""
    row: int
    col: int
    chain: bool = False

    @property
    def position(self) -> Position:
        return Position(self.row, self.col)


@dataclass
class TurnResult:
    phase: TurnPhase
    selection: Optional[Selection] = None
    move: Optional[Move] = None
    captured: bool = False
    chain_continues: bool = False
    player_switched: bool = False
    message: Optional[str] = None
    possible_moves: List[Move] = field(default_factory=list)


def _idle(message: Optional[str] = None) -> TurnResult:
    return TurnResult(phase=TurnPhase.IDLE, message=message)


class TurnManager:
    """Drives Idle -> Selected -> (move) -> Selected | Idle for one game."""

    def __init__(self, game_state: GameState, validator: Optional[MoveValidator] = None):
        self.game_state = game_state
        self.validator = validator or MoveValidator(game_state)

    def select(self, row: int, col: int) -> TurnResult:
        """Select a piece of the active player that has something to do."""
        if not self.game_state.is_my_turn:
            return _idle()

        piece = self.game_state.board.get_piece(row, col)
        player = self.game_state.current_player
        if piece is None or not piece.belongs_to(player):
            return _idle()

        possible_moves = self.validator.get_possible_moves(row, col)
        if not possible_moves:
            if self.validator.has_available_capture(player):
                return _idle(MUST_CAPTURE_MESSAGE)
            return _idle("That piece has no legal moves.")

        return TurnResult(
            phase=TurnPhase.SELECTED,
            selection=Selection(row, col),
            possible_moves=possible_moves,
        )

    def attempt_move(self, selection: Optional[Selection], to_row: int, to_col: int) -> TurnResult:
        """Try to move the selected piece to (to_row, to_col)."""
        if selection is None or not self.game_state.is_my_turn:
            return _idle()

        state = self.game_state
        player = state.current_player
        from_row, from_col = selection.row, selection.col

        piece = state.board.get_piece(from_row, from_col)
        if piece is None or not piece.belongs_to(player):
            return _idle()

        if not self.validator.is_valid_move(from_row, from_col, to_row, to_col):
            if selection.chain:
                # A multi-jump stays with the same piece until it is finished
                return TurnResult(
                    phase=TurnPhase.SELECTED,
                    selection=selection,
                    chain_continues=True,
                    message=CONTINUE_CHAIN_MESSAGE,
                    possible_moves=self.validator.get_possible_moves(from_row, from_col),
                )
            message = MUST_CAPTURE_MESSAGE if self.validator.has_available_capture(player) else None
            return _idle(message)

        captured = state.apply_move(from_row, from_col, to_row, to_col)
        move = state.move_history[-1] if state.move_history else None
        landed = state.board.get_piece(to_row, to_col)

        if captured and self.validator.piece_has_capture(to_row, to_col, landed):
            logger.debug(f"{player.name} continues jumping from ({to_row},{to_col})")
            return TurnResult(
                phase=TurnPhase.SELECTED,
                selection=Selection(to_row, to_col, chain=True),
                move=move,
                captured=True,
                chain_continues=True,
                possible_moves=self.validator.get_possible_moves(to_row, to_col),
            )

        state.switch_player()
        logger.debug(f"Turn passes to {state.current_player.name}")
        return TurnResult(
            phase=TurnPhase.IDLE,
            move=move,
            captured=captured,
            player_switched=True,
        )

    def handle_square(self, selection: Optional[Selection], row: int, col: int) -> TurnResult:
        """Route a square choice: own piece selects, empty square moves, else deselect."""
        if not self.game_state.is_my_turn:
            return _idle()

        piece = self.game_state.board.get_piece(row, col)

        if selection is not None and selection.chain:
            if piece == PieceType.EMPTY:
                return self.attempt_move(selection, row, col)
            return TurnResult(
                phase=TurnPhase.SELECTED,
                selection=selection,
                chain_continues=True,
                message=CONTINUE_CHAIN_MESSAGE,
                possible_moves=self.validator.get_possible_moves(selection.row, selection.col),
            )

        if piece is not None and piece.belongs_to(self.game_state.current_player):
            return self.select(row, col)
        if selection is not None and piece == PieceType.EMPTY:
            return self.attempt_move(selection, row, col)
        return _idle()
