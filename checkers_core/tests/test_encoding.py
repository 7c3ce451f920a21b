import unittest
import numpy as np
from checkers_core.utils.encoding import StateEncoder, to_square_number, from_square_number
from checkers_core.game.game_state import GameState
from checkers_core.game.types import Move, MoveType
from checkers_core.game.constants import Player, Position


class TestSquareNumbers(unittest.TestCase):
    def test_corners(self):
        self.assertEqual(to_square_number(0, 0), 1)
        self.assertEqual(to_square_number(7, 7), 64)
        self.assertEqual(to_square_number(5, 2), 43)

    def test_round_trip(self):
        for square in (1, 2, 9, 43, 64):
            position = from_square_number(square)
            self.assertEqual(to_square_number(position.row, position.col), square)

    def test_invalid_squares(self):
        with self.assertRaises(ValueError):
            to_square_number(8, 0)
        with self.assertRaises(ValueError):
            from_square_number(0)
        with self.assertRaises(ValueError):
            from_square_number(65)


class TestStateEncoder(unittest.TestCase):
    def setUp(self):
        self.encoder = StateEncoder()
        self.game_state = GameState()

    def test_encode_starting_position(self):
        state = self.encoder.encode_state(self.game_state)
        self.assertEqual(state.shape, (6, 8, 8))
        self.assertEqual(state[StateEncoder.CHANNELS['RED_MEN']].sum(), 12)
        # Only the front row of red men can move at the start
        self.assertEqual(state[StateEncoder.CHANNELS['VALID_SOURCES']].sum(), 4)
        self.assertTrue((state[StateEncoder.CHANNELS['PLAYER_TO_MOVE']] == 1.0).all())

        self.game_state.switch_player()
        state = self.encoder.encode_state(self.game_state)
        self.assertTrue((state[StateEncoder.CHANNELS['PLAYER_TO_MOVE']] == 0.0).all())

    def test_move_to_index_and_back(self):
        move = Move(
            player=Player.RED,
            source=Position(5, 2),
            destination=Position(4, 3),
            type=MoveType.MOVE,
        )
        index = self.encoder.move_to_index(move)
        decoded_move = self.encoder.index_to_move(index, Player.RED)
        self.assertEqual(move, decoded_move)

        jump = Move(Player.BLACK, Position(2, 3), Position(4, 5), MoveType.CAPTURE)
        self.assertEqual(self.encoder.index_to_move(self.encoder.move_to_index(jump), Player.BLACK), jump)

    def test_invalid_move_encoding(self):
        move = Move(player=Player.RED, source=Position(8, 1), destination=Position(7, 0))
        with self.assertRaises(ValueError):
            self.encoder.move_to_index(move)
        with self.assertRaises(ValueError):
            self.encoder.index_to_move(self.encoder.total_moves, Player.RED)

    def test_decode_move_picks_best_legal_move(self):
        probabilities = np.zeros(self.encoder.total_moves)
        # An illegal move with the highest score must be ignored
        probabilities[self.encoder.move_to_index(
            Move(Player.RED, Position(6, 1), Position(5, 0)))] = 0.9
        target = Move(Player.RED, Position(5, 4), Position(4, 5))
        probabilities[self.encoder.move_to_index(target)] = 0.5

        self.assertEqual(self.encoder.decode_move(probabilities, self.game_state), target)

        with self.assertRaises(ValueError):
            self.encoder.decode_move(np.zeros(10), self.game_state)

    def test_square_pair(self):
        move = Move(Player.RED, Position(5, 2), Position(4, 3))
        self.assertEqual(StateEncoder.square_pair(move), (43, 36))


if __name__ == '__main__':
    unittest.main()
