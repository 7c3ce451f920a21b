import numpy as np
from dataclasses import replace
from typing import Tuple
import logging

from ..game.constants import BOARD_SIZE, Player, Position, is_valid_position
from ..game.game_state import GameState
from ..game.moves import MoveValidator
from ..game.types import Move, MoveType

logger = logging.getLogger(__name__)

NUM_SQUARES = BOARD_SIZE * BOARD_SIZE


def to_square_number(row: int, col: int) -> int:
    """Convert (row, col) to the host's square number (1-64)."""
    if not is_valid_position(row, col):
        raise ValueError(f"Square ({row},{col}) is off the board")
    return row * BOARD_SIZE + col + 1


def from_square_number(square: int) -> Position:
    """Convert a square number (1-64) back to a Position."""
    if not 1 <= square <= NUM_SQUARES:
        raise ValueError(f"Square number must be 1-{NUM_SQUARES}, got {square}")
    row, col = divmod(square - 1, BOARD_SIZE)
    return Position(row, col)


class StateEncoder:
    """
    Encodes checkers game states and moves as numpy arrays and flat indices.
    """

    # Channel indices
    CHANNELS = {
        'RED_MEN': 0,
        'BLACK_MEN': 1,
        'RED_KINGS': 2,
        'BLACK_KINGS': 3,
        'VALID_SOURCES': 4,
        'PLAYER_TO_MOVE': 5,
    }

    def __init__(self):
        # Every (from, to) pair of squares gets an index
        self.total_moves = NUM_SQUARES * NUM_SQUARES

    def encode_state(self, game_state: GameState) -> np.ndarray:
        """Encode game state into a (6, 8, 8) tensor."""
        state = np.zeros((len(self.CHANNELS), BOARD_SIZE, BOARD_SIZE), dtype=np.float32)
        state[0:4] = game_state.board.to_numpy_array()

        # Mark squares whose piece has a legal move
        validator = MoveValidator(game_state)
        for move in validator.get_valid_moves(game_state.current_player):
            state[self.CHANNELS['VALID_SOURCES'], move.source.row, move.source.col] = 1

        to_move = 1.0 if game_state.current_player == Player.RED else 0.0
        state[self.CHANNELS['PLAYER_TO_MOVE']] = np.full((BOARD_SIZE, BOARD_SIZE), to_move)

        return state

    def move_to_index(self, move: Move) -> int:
        """Flat index of a move in the 64x64 source/destination space."""
        source = to_square_number(move.source.row, move.source.col) - 1
        destination = to_square_number(move.destination.row, move.destination.col) - 1
        return source * NUM_SQUARES + destination

    def index_to_move(self, index: int, player: Player) -> Move:
        """Decode a flat index; the move type is inferred from the distance."""
        if not 0 <= index < self.total_moves:
            raise ValueError(f"Move index out of range: {index}")

        source_idx, dest_idx = divmod(index, NUM_SQUARES)
        source = from_square_number(source_idx + 1)
        destination = from_square_number(dest_idx + 1)
        move = Move(player=player, source=source, destination=destination)
        if move.distance == 2:
            move = replace(move, type=MoveType.CAPTURE)
        return move

    def decode_move(self, move_probabilities: np.ndarray, game_state: GameState) -> Move:
        """Pick the most probable legal move from a flat probability vector."""
        legal = MoveValidator(game_state).get_valid_moves(game_state.current_player)
        if not legal:
            raise ValueError("No valid moves available")

        probabilities = np.asarray(move_probabilities).reshape(-1)
        if probabilities.shape[0] != self.total_moves:
            raise ValueError(f"Expected {self.total_moves} probabilities, got {probabilities.shape[0]}")

        return max(legal, key=lambda move: probabilities[self.move_to_index(move)])

    @staticmethod
    def square_pair(move: Move) -> Tuple[int, int]:
        return (to_square_number(move.source.row, move.source.col),
                to_square_number(move.destination.row, move.destination.col))
