"""Tests for the checkers board grid."""

import unittest
from checkers_core.game.board import Board
from checkers_core.game.constants import BOARD_SIZE, Player, PieceType, Position


class TestBoard(unittest.TestCase):
    def setUp(self):
        self.board = Board()
        self.board.setup_initial()

    def test_initial_layout(self):
        """Black fills the dark squares of rows 0-2, red those of rows 5-7."""
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                piece = self.board.get_piece(row, col)
                if (row + col) % 2 == 0 or 3 <= row <= 4:
                    self.assertEqual(piece, PieceType.EMPTY, f"({row},{col})")
                elif row < 3:
                    self.assertEqual(piece, PieceType.BLACK, f"({row},{col})")
                else:
                    self.assertEqual(piece, PieceType.RED, f"({row},{col})")

        self.assertEqual(self.board.count(Player.RED), 12)
        self.assertEqual(self.board.count(Player.BLACK), 12)

    def test_setup_initial_is_idempotent(self):
        first = self.board.to_matrix()
        self.board.setup_initial()
        self.assertEqual(self.board.to_matrix(), first)

    def test_get_piece_off_board(self):
        self.assertIsNone(self.board.get_piece(-1, 0))
        self.assertIsNone(self.board.get_piece(0, 8))
        self.assertFalse(self.board.is_empty(8, 8))

    def test_set_piece_refuses_light_square(self):
        """Pieces never land on light squares."""
        self.assertFalse(self.board.set_piece(4, 4, PieceType.RED))
        self.assertEqual(self.board.get_piece(4, 4), PieceType.EMPTY)
        self.assertTrue(self.board.set_piece(4, 3, PieceType.RED_KING))
        self.assertEqual(self.board.get_piece(4, 3), PieceType.RED_KING)

    def test_move_piece_clears_origin(self):
        piece = self.board.move_piece(5, 0, 4, 1)
        self.assertEqual(piece, PieceType.RED)
        self.assertEqual(self.board.get_piece(5, 0), PieceType.EMPTY)
        self.assertEqual(self.board.get_piece(4, 1), PieceType.RED)

    def test_remove_piece(self):
        self.assertEqual(self.board.remove_piece(2, 1), PieceType.BLACK)
        self.assertEqual(self.board.get_piece(2, 1), PieceType.EMPTY)
        self.assertIsNone(self.board.remove_piece(9, 9))

    def test_pieces_of(self):
        red = self.board.pieces_of(Player.RED)
        self.assertEqual(len(red), 12)
        self.assertIn(Position(5, 0), red)
        self.assertTrue(all(pos.is_playable for pos in red))

    def test_matrix_round_trip(self):
        """Loading a matrix and reading it back gives the same layout."""
        matrix = [[0] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        matrix[0][1] = 3
        matrix[2][3] = 2
        matrix[5][4] = 1
        matrix[7][6] = 4
        board = Board.from_matrix(matrix)
        self.assertEqual(board.to_matrix(), matrix)
        self.assertEqual(board.get_piece(0, 1), PieceType.RED_KING)
        self.assertEqual(board.get_piece(7, 6), PieceType.BLACK_KING)

    def test_from_matrix_coerces_values(self):
        matrix = [["0"] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        matrix[5][0] = "1"
        matrix[2][1] = 2.0
        board = Board.from_matrix(matrix)
        self.assertEqual(board.get_piece(5, 0), PieceType.RED)
        self.assertEqual(board.get_piece(2, 1), PieceType.BLACK)

    def test_from_matrix_rejects_bad_input(self):
        good_row = [0] * BOARD_SIZE
        with self.assertRaises(ValueError):
            Board.from_matrix([good_row] * 7)
        with self.assertRaises(ValueError):
            Board.from_matrix([good_row] * 7 + [[0] * 5])

        bad_code = [list(good_row) for _ in range(BOARD_SIZE)]
        bad_code[5][0] = 9
        with self.assertRaises(ValueError):
            Board.from_matrix(bad_code)

        light_square = [list(good_row) for _ in range(BOARD_SIZE)]
        light_square[4][4] = 1
        with self.assertRaises(ValueError):
            Board.from_matrix(light_square)

    def test_copy_is_independent(self):
        clone = self.board.copy()
        clone.move_piece(5, 0, 4, 1)
        self.assertEqual(self.board.get_piece(5, 0), PieceType.RED)
        self.assertNotEqual(clone, self.board)

    def test_to_numpy_array(self):
        planes = self.board.to_numpy_array()
        self.assertEqual(planes.shape, (4, 8, 8))
        self.assertEqual(planes[0].sum(), 12)  # red men
        self.assertEqual(planes[1].sum(), 12)  # black men
        self.assertEqual(planes[2:].sum(), 0)  # no kings yet
        self.assertEqual(planes[0, 5, 0], 1)


class TestPiecesAndPlayers(unittest.TestCase):
    def test_player_directions(self):
        self.assertEqual(Player.RED.forward, -1)
        self.assertEqual(Player.BLACK.forward, 1)
        self.assertEqual(Player.RED.promotion_row, 0)
        self.assertEqual(Player.BLACK.promotion_row, 7)
        self.assertEqual(Player.RED.opponent, Player.BLACK)

    def test_player_from_string(self):
        self.assertEqual(Player.from_string(" Black "), Player.BLACK)
        with self.assertRaises(ValueError):
            Player.from_string("white")

    def test_piece_predicates(self):
        self.assertTrue(PieceType.RED_KING.is_king())
        self.assertTrue(PieceType.BLACK.is_man())
        self.assertIsNone(PieceType.EMPTY.get_player())
        self.assertTrue(PieceType.BLACK_KING.is_opponent_of(Player.RED))
        self.assertFalse(PieceType.EMPTY.is_opponent_of(Player.RED))
        self.assertEqual(PieceType.RED.promoted(), PieceType.RED_KING)
        self.assertEqual(PieceType.BLACK_KING.promoted(), PieceType.BLACK_KING)
        self.assertEqual(PieceType.man_for(Player.BLACK), PieceType.BLACK)
        self.assertEqual(PieceType.king_for(Player.RED), PieceType.RED_KING)

    def test_piece_codes(self):
        self.assertEqual(PieceType.from_code("4"), PieceType.BLACK_KING)
        self.assertEqual(PieceType.from_code("1.0"), PieceType.RED)
        self.assertEqual(PieceType.from_code(" 3 "), PieceType.RED_KING)
        self.assertEqual(PieceType.from_code(2.0), PieceType.BLACK)
        for bad in (5, -1, "x", None, "2.5", 1.5, "inf"):
            with self.assertRaises(ValueError):
                PieceType.from_code(bad)

    def test_position_helpers(self):
        origin = Position(7, 0)
        self.assertEqual(origin.step(-1, 1, 3), Position(4, 3))
        self.assertFalse(origin.step(1, 1).is_on_board)
        self.assertTrue(origin.is_playable)
        self.assertEqual(str(origin), "(7,0)")


if __name__ == '__main__':
    unittest.main()
