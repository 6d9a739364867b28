import unittest

from tetris_board import (board_from_rows, clear_rows, drop_distance, empty_board, full_rows,
                          ghost_piece, is_valid, lock)
from tetris_piece import COLS, ROWS, ROTATIONS, Piece


class BoardTests(unittest.TestCase):
    def test_empty_board_shape(self):
        board = empty_board()
        self.assertEqual(len(board), ROWS)
        self.assertTrue(all(len(row) == COLS for row in board))
        self.assertEqual(full_rows(board), ())

    def test_walls_floor_and_ceiling_are_invalid(self):
        board = empty_board()
        self.assertTrue(is_valid(board, Piece("I", 0, 3, 0)))
        self.assertFalse(is_valid(board, Piece("I", 0, -1, 0)))
        self.assertFalse(is_valid(board, Piece("I", 0, 7, 0)))
        self.assertFalse(is_valid(board, Piece("I", 0, 3, 19)))
        self.assertFalse(is_valid(board, Piece("I", 1, 3, -1)))

    def test_valid_poses_stay_on_empty_cells(self):
        board = board_from_rows(["#..#..#..#", "##.....###"])
        for kind in ROTATIONS:
            for rotation in range(4):
                for x in range(-3, COLS + 1):
                    for y in range(-3, ROWS + 1):
                        piece = Piece(kind, rotation, x, y)
                        if not is_valid(board, piece):
                            continue
                        for cx, cy in piece.cells():
                            self.assertTrue(0 <= cx < COLS and 0 <= cy < ROWS)
                            self.assertIsNone(board[cy][cx])

    def test_lock_copies_board(self):
        board = empty_board()
        locked = lock(board, Piece("O", 0, 0, 18))
        self.assertEqual(board, empty_board())
        self.assertEqual(locked[18][1:3], ("yellow", "yellow"))
        self.assertEqual(locked[19][1:3], ("yellow", "yellow"))

    def test_lock_rejects_invalid_pose(self):
        board = board_from_rows(["##########"])
        with self.assertRaises(ValueError):
            lock(board, Piece("O", 0, 0, 18))

    def test_full_rows_ascending(self):
        board = board_from_rows(["##########", "#########.", "##########"])
        self.assertEqual(full_rows(board), (17, 19))

    def test_clear_rows_shifts_rest_down(self):
        board = board_from_rows(["#.........", "##########", ".#........", "##########"])
        cleared = clear_rows(board, full_rows(board))
        self.assertEqual(cleared, board_from_rows(["#.........", ".#........"]))
        self.assertEqual(full_rows(cleared), ())

    def test_clearing_full_rows_leaves_none_full(self):
        board = board_from_rows(["##########", "####.#####", "##########", "##########"])
        self.assertEqual(full_rows(clear_rows(board, full_rows(board))), ())

    def test_drop_distance_and_ghost(self):
        board = board_from_rows(["...##....."])
        piece = Piece("I", 0, 3, 0)
        self.assertEqual(drop_distance(board, piece), 17)
        self.assertEqual(ghost_piece(board, piece), Piece("I", 0, 3, 17))
        self.assertEqual(drop_distance(empty_board(), piece), 18)


if __name__ == "__main__":
    unittest.main()
