"""Game logic package for checkers."""

from .constants import Player, PieceType, Position, BOARD_SIZE
from .types import Move, MoveType, TurnPhase, GameResult
from .board import Board
from .moves import MoveValidator
from .game_state import GameState, parse_player_ids
from .turns import Selection, TurnManager, TurnResult

__all__ = [
    'Player',
    'PieceType',
    'Position',
    'BOARD_SIZE',
    'Move',
    'MoveType',
    'TurnPhase',
    'GameResult',
    'Board',
    'MoveValidator',
    'GameState',
    'parse_player_ids',
    'Selection',
    'TurnManager',
    'TurnResult',
]
