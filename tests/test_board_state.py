import unittest

from tictactoe_core import (
    Board,
    Mark,
    GameAlreadyOver,
    InvalidMove,
    MoveValidator,
    apply_move,
    empty_indices,
    evaluate,
)
from tictactoe_core.board_state import to_index, to_row_col


class TestBoard(unittest.TestCase):
    def test_given_empty_board_when_querying_then_all_cells_empty_and_x_to_move(self):
        board = Board.empty()
        self.assertEqual(len(board), 9)
        self.assertEqual(empty_indices(board), list(range(9)))
        self.assertEqual(board.turn, Mark.X)
        self.assertTrue(board.is_well_formed())
        self.assertFalse(board.is_full())

    def test_given_string_when_parsing_then_cells_and_round_trip_match(self):
        board = Board.from_string("XX.OO-_ .")
        self.assertEqual(board[0], Mark.X)
        self.assertEqual(board[3], Mark.O)
        self.assertIsNone(board[2])
        self.assertEqual(board.to_string(), "XX.OO....")
        self.assertEqual(Board.from_string("xo......."), Board.from_string("XO......."))

    def test_given_bad_input_when_constructing_then_value_error(self):
        with self.assertRaises(ValueError):
            Board((None,) * 8)
        with self.assertRaises(ValueError):
            Board(("X",) + (None,) * 8)
        with self.assertRaises(ValueError):
            Board.from_string("XZ.......")
        with self.assertRaises(ValueError):
            Board.from_string("XO")

    def test_given_counts_when_deriving_turn_then_fewer_placed_moves_next(self):
        self.assertEqual(Board.from_string("X........").turn, Mark.O)
        self.assertEqual(Board.from_string("XO.......").turn, Mark.X)
        self.assertTrue(Board.from_string("XO.......").is_well_formed())
        self.assertFalse(Board.from_string("XX.......").is_well_formed())
        self.assertFalse(Board.from_string("O........").is_well_formed())

    def test_given_extra_o_marks_when_deriving_turn_then_x_has_fewer_and_moves(self):
        self.assertEqual(Board.from_string("OO.......").turn, Mark.X)
        self.assertEqual(Board.from_string("O........").turn, Mark.X)
        self.assertEqual(Board.from_string("XXX......").turn, Mark.O)

    def test_given_row_col_when_converting_then_row_major(self):
        self.assertEqual(to_index(1, 2), 5)
        self.assertEqual(to_index(2, 0), 6)
        self.assertEqual(to_row_col(7), (2, 1))

    def test_given_board_when_rendering_then_marks_and_free_indices_shown(self):
        text = Board.from_string("X...O....").pretty()
        self.assertIn("X | 1 | 2", text)
        self.assertIn("3 | O | 5", text)
        self.assertIn("---+---+---", text)

    def test_given_board_when_querying_twice_then_results_identical(self):
        board = Board.from_string("XO..X....")
        self.assertEqual(empty_indices(board), empty_indices(board))
        self.assertEqual(evaluate(board), evaluate(board))


class TestApplyMove(unittest.TestCase):
    def test_given_legal_move_when_applied_then_new_board_and_original_untouched(self):
        board = Board.empty()
        after = apply_move(board, 4, Mark.X)
        self.assertEqual(after[4], Mark.X)
        self.assertEqual(after.turn, Mark.O)
        self.assertEqual(board, Board.empty())
        self.assertEqual(empty_indices(after), [0, 1, 2, 3, 5, 6, 7, 8])

    def test_given_same_board_and_move_when_applied_twice_then_same_result(self):
        board = Board.from_string("XO.......")
        first = apply_move(board, 4, Mark.X)
        second = apply_move(board, 4, Mark.X)
        self.assertEqual(first, second)
        self.assertEqual(evaluate(first), evaluate(second))

    def test_given_occupied_cell_when_applied_then_invalid_move_and_board_unchanged(self):
        board = Board.from_string("XO.......")
        with self.assertRaises(InvalidMove) as ctx:
            apply_move(board, 0, Mark.X)
        self.assertEqual(ctx.exception.index, 0)
        self.assertEqual(board.to_string(), "XO.......")

    def test_given_bad_index_when_applied_then_invalid_move(self):
        board = Board.empty()
        for index in (-1, 9, 100, True, 1.0, "4", None):
            with self.assertRaises(InvalidMove):
                apply_move(board, index, Mark.X)

    def test_given_wrong_side_when_applied_then_invalid_move(self):
        with self.assertRaises(InvalidMove):
            apply_move(Board.empty(), 0, Mark.O)
        with self.assertRaises(InvalidMove):
            apply_move(Board.from_string("X........"), 1, Mark.X)
        with self.assertRaises(InvalidMove):
            apply_move(Board.empty(), 0, "X")

    def test_given_malformed_board_when_applied_then_invalid_move_and_board_kept(self):
        board = Board.from_string("OO.......")
        for mark in (Mark.O, Mark.X):
            with self.assertRaises(InvalidMove):
                apply_move(board, 2, mark)
        with self.assertRaises(InvalidMove):
            apply_move(Board.from_string("XX......."), 2, Mark.O)
        self.assertEqual(board.to_string(), "OO.......")
        self.assertFalse(MoveValidator().is_valid(board, 2, Mark.X))

    def test_given_invalid_move_when_caught_as_value_error_then_works(self):
        with self.assertRaises(ValueError):
            apply_move(Board.from_string("X........"), 0, Mark.O)

    def test_given_full_drawn_board_when_applied_then_game_already_over(self):
        board = Board.from_string("XOXXOOOXX")
        with self.assertRaises(GameAlreadyOver) as ctx:
            apply_move(board, 0, Mark.O)
        self.assertTrue(ctx.exception.outcome.is_terminal)

    def test_given_won_board_when_applied_then_game_already_over(self):
        board = Board.from_string("XXXOO....")
        with self.assertRaises(GameAlreadyOver):
            apply_move(board, 5, Mark.O)

    def test_given_validator_when_checking_then_bool_matches_rules(self):
        validator = MoveValidator()
        board = Board.from_string("X........")
        self.assertTrue(validator.is_valid(board, 1, Mark.O))
        self.assertFalse(validator.is_valid(board, 0, Mark.O))
        self.assertFalse(validator.is_valid(board, 1, Mark.X))
        self.assertFalse(validator.is_valid(Board.from_string("XXXOO...."), 5, Mark.O))


if __name__ == '__main__':
    unittest.main(verbosity=2)
