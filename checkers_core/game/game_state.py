"""Game state for checkers."""

import numpy as np
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
from .constants import BOARD_SIZE, Player, PieceType, Position, is_valid_position, sign
from .board import Board
from .types import Move, MoveType, GameResult
from .moves import MoveValidator

import logging

# Setup logger
logger = logging.getLogger(__name__)


def parse_player_ids(player_ids: Optional[str]) -> Tuple[str, str]:
    """Split a "red_id,black_id" pairing into two distinct identities."""
    if not isinstance(player_ids, str) or "," not in player_ids:
        raise ValueError(f"Malformed player pairing: {player_ids!r}")

    parts = [part.strip() for part in player_ids.split(",")]
    if len(parts) != 2 or not all(parts):
        raise ValueError(f"Player pairing must name exactly two players: {player_ids!r}")

    red_id, black_id = parts
    if red_id == black_id:
        raise ValueError(f"Player pairing names the same player twice: {player_ids!r}")
    return red_id, black_id


@dataclass
class GameState:
    """Board truth plus the identity fields supplied by the host.

    GameState performs no legality checks; callers validate moves with
    MoveValidator before calling apply_move.
    """

    board: Board
    current_player: Player
    game_id: Optional[str]
    api_endpoint: Optional[str]
    my_user_id: Optional[str]
    red_player_id: Optional[str]
    black_player_id: Optional[str]
    opponent_player_id: Optional[str]
    my_color: Optional[Player]
    opponent_color: Optional[Player]
    is_my_turn: bool
    move_history: List[Move]

    def __init__(self):
        """Initialize a new game state with the starting layout."""
        self.board = Board()
        self.current_player = Player.RED
        self.game_id = None
        self.api_endpoint = None
        self.my_user_id = None
        self.red_player_id = None
        self.black_player_id = None
        self.opponent_player_id = None
        self.my_color = None
        self.opponent_color = None
        self.move_history = []
        self.initialize_board()
        # Standalone play until a host snapshot is loaded
        self.is_my_turn = True
        self.my_color = self.current_player

    def copy(self) -> 'GameState':
        """Create a deep copy of the game state."""
        new_state = GameState()
        new_state.board = self.board.copy()
        for attr in ('current_player', 'game_id', 'api_endpoint', 'my_user_id',
                     'red_player_id', 'black_player_id', 'opponent_player_id',
                     'my_color', 'opponent_color', 'is_my_turn'):
            setattr(new_state, attr, getattr(self, attr))
        new_state.move_history = list(self.move_history)
        return new_state

    def initialize_board(self) -> List[List[int]]:
        """Reset to the canonical layout with red to move."""
        self.board.setup_initial()
        self.current_player = Player.RED
        self.move_history = []
        logger.debug("Board reset to starting layout")
        return self.board.to_matrix()

    def load_board(self, board: Sequence[Sequence], current_player_id: str,
                   my_user_id: str, game_id: Optional[str] = None,
                   api_endpoint: Optional[str] = None,
                   player_ids: Optional[str] = None) -> bool:
        """Replace the board and turn fields with a snapshot from the host.

        Everything is parsed before anything is assigned, so a rejected
        snapshot leaves the previous state untouched.
        """
        try:
            new_board = Board.from_matrix(board)
            red_id, black_id = parse_player_ids(player_ids)
        except ValueError as e:
            logger.warning(f"Rejected board snapshot: {e}")
            return False

        if my_user_id == red_id:
            my_color = Player.RED
        elif my_user_id == black_id:
            my_color = Player.BLACK
        else:
            logger.warning(f"User {my_user_id!r} is not part of pairing {player_ids!r}")
            return False

        if current_player_id == red_id:
            current_player = Player.RED
        elif current_player_id == black_id:
            current_player = Player.BLACK
        else:
            logger.warning(f"Active player {current_player_id!r} is not part of pairing {player_ids!r}")
            return False

        self.board = new_board
        self.game_id = game_id
        self.api_endpoint = api_endpoint
        self.my_user_id = my_user_id
        self.red_player_id = red_id
        self.black_player_id = black_id
        self.my_color = my_color
        self.opponent_color = my_color.opponent
        self.opponent_player_id = black_id if my_color == Player.RED else red_id
        self.current_player = current_player
        self.is_my_turn = current_player_id == my_user_id
        self.move_history = []

        logger.debug(f"Loaded board for game {game_id}: {current_player.name} to move, "
                     f"playing as {my_color.name}")
        return True

    def apply_move(self, from_row: int, from_col: int, to_row: int, to_col: int) -> bool:
        """Execute a move the caller has already validated.

        Returns True when an opposing piece was captured.
        """
        if not (is_valid_position(from_row, from_col) and is_valid_position(to_row, to_col)):
            logger.debug(f"Ignoring off-board move ({from_row},{from_col})->({to_row},{to_col})")
            return False

        piece = self.board.move_piece(from_row, from_col, to_row, to_col)
        mover = piece.get_player()

        row_dir = sign(to_row - from_row)
        col_dir = sign(to_col - from_col)
        distance = abs(to_row - from_row)
        capture_occurred = False

        if piece.is_king() and distance > 1:
            # Kings may have jumped anywhere along the path
            for step in range(1, distance):
                check_row = from_row + row_dir * step
                check_col = from_col + col_dir * step
                if self.is_opponent_piece(self.board.grid[check_row][check_col], mover):
                    self.board.remove_piece(check_row, check_col)
                    capture_occurred = True
                    logger.debug(f"King captured piece at ({check_row},{check_col})")
                    break
        elif piece.is_man() and distance == 2:
            mid_row = from_row + row_dir
            mid_col = from_col + col_dir
            if self.is_opponent_piece(self.board.grid[mid_row][mid_col], mover):
                self.board.remove_piece(mid_row, mid_col)
                capture_occurred = True
                logger.debug(f"Man captured piece at ({mid_row},{mid_col})")

        if self.should_promote(piece, to_row):
            self.board.grid[to_row][to_col] = piece.promoted()
            logger.debug(f"Promoted {piece.name} at ({to_row},{to_col})")

        if mover is not None:
            self.move_history.append(Move(
                player=mover,
                source=Position(from_row, from_col),
                destination=Position(to_row, to_col),
                type=MoveType.CAPTURE if capture_occurred else MoveType.MOVE,
            ))

        return capture_occurred

    def switch_player(self) -> None:
        """Hand the turn to the other color."""
        self.current_player = self.current_player.opponent

        # Standalone play lets whoever is on move play; hosted games
        # only unlock the board for our own color.
        if self.game_id is None:
            self.is_my_turn = True
            self.my_color = self.current_player
        else:
            self.is_my_turn = self.current_player == self.my_color

    @staticmethod
    def is_king(piece: PieceType) -> bool:
        return piece.is_king()

    @staticmethod
    def should_promote(piece: PieceType, row: int) -> bool:
        """A man reaching its opponent's back rank is crowned."""
        player = piece.get_player()
        return piece.is_man() and player is not None and row == player.promotion_row

    @staticmethod
    def is_opponent_piece(piece: PieceType, player: Optional[Player]) -> bool:
        """Whether a cell holds a piece of the other color."""
        if player is None:
            return False
        return piece.is_opponent_of(player)

    def get_result(self) -> GameResult:
        """Decide whether the game is over.

        A color with no pieces left loses; so does the player to move when
        none of their pieces has a legal move.
        """
        for player in Player:
            if self.board.count(player) == 0:
                return GameResult.win_for(player.opponent)

        if not MoveValidator(self).has_any_valid_move(self.current_player):
            logger.debug(f"{self.current_player.name} has no legal move")
            return GameResult.win_for(self.current_player.opponent)

        return GameResult.IN_PROGRESS

    def get_winner(self) -> Optional[Player]:
        """Get the winner of the game, if any."""
        result = self.get_result()
        if result == GameResult.RED_WINS:
            return Player.RED
        if result == GameResult.BLACK_WINS:
            return Player.BLACK
        return None

    def is_terminal(self) -> bool:
        """Check if this is a terminal state."""
        return self.get_result() != GameResult.IN_PROGRESS

    def to_numpy_array(self) -> np.ndarray:
        """Convert game state to numpy array: piece planes plus side to move."""
        state = self.board.to_numpy_array()

        player_channel = np.full(
            (BOARD_SIZE, BOARD_SIZE),
            1.0 if self.current_player == Player.RED else -1.0,
            dtype=np.float32,
        )

        return np.vstack([state, player_channel[np.newaxis, :, :]])

    def __str__(self) -> str:
        return (
            f"Checkers Game State:\n"
            f"Current Player: {self.current_player.name}\n"
            f"Pieces - Red: {self.board.count(Player.RED)}, "
            f"Black: {self.board.count(Player.BLACK)}\n"
            f"Board:\n{self.board}"
        )
