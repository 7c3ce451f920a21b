"""Random computer player and self-play driver for checkers."""

import random
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .constants import Player
from .game_state import GameState
from .moves import MoveValidator
from .turns import Selection, TurnManager
from .types import GameResult, Move, TurnPhase

logger = logging.getLogger(__name__)

DEFAULT_MAX_MOVES = 200


class ComputerPlayer:
    def __init__(self, player: Player, rng: Optional[random.Random] = None):
        self.player = player
        self.rng = rng or random.Random()

    def choose_move(self, game_state: GameState, selection: Optional[Selection] = None) -> Move:
        """Randomly choose a legal move, staying with the jumping piece mid-chain."""
        if game_state.current_player != self.player:
            raise ValueError(f"It is not {self.player.name}'s turn")

        validator = MoveValidator(game_state)
        if selection is not None and selection.chain:
            moves = validator.get_possible_moves(selection.row, selection.col)
        else:
            moves = validator.get_valid_moves(self.player)

        if not moves:
            raise ValueError(f"No valid moves found for {self.player.name}")

        return self.rng.choice(moves)


@dataclass
class GameRecord:
    result: GameResult
    moves: List[Move] = field(default_factory=list)
    captures: int = 0
    promotions: int = 0

    @property
    def winner(self) -> Optional[Player]:
        if self.result == GameResult.RED_WINS:
            return Player.RED
        if self.result == GameResult.BLACK_WINS:
            return Player.BLACK
        return None


def play_random_game(max_moves: int = DEFAULT_MAX_MOVES, seed: Optional[int] = None) -> GameRecord:
    """Play a game between two random computer players.

    Reaching `max_moves` piece moves without a result counts as a draw.
    """
    rng = random.Random(seed)
    game_state = GameState()
    manager = TurnManager(game_state)
    players = {player: ComputerPlayer(player, rng) for player in Player}

    record = GameRecord(result=GameResult.IN_PROGRESS)
    selection = None

    while len(record.moves) < max_moves:
        if selection is None:
            result = game_state.get_result()
            if result != GameResult.IN_PROGRESS:
                record.result = result
                break

        move = players[game_state.current_player].choose_move(game_state, selection)
        was_king = game_state.board.get_piece(move.source.row, move.source.col).is_king()

        selection = Selection(move.source.row, move.source.col,
                              chain=selection is not None and selection.chain)
        outcome = manager.attempt_move(selection, move.destination.row, move.destination.col)
        if outcome.move is None:
            raise RuntimeError(f"Computer player chose an illegal move: {move}")

        record.moves.append(outcome.move)
        if outcome.captured:
            record.captures += 1
        landed = game_state.board.get_piece(move.destination.row, move.destination.col)
        if landed.is_king() and not was_king:
            record.promotions += 1

        selection = outcome.selection if outcome.phase == TurnPhase.SELECTED else None
    else:
        final = game_state.get_result() if selection is None else GameResult.IN_PROGRESS
        record.result = final if final != GameResult.IN_PROGRESS else GameResult.DRAW

    logger.debug(f"Random game finished: {record.result.value} after {len(record.moves)} moves")
    return record
