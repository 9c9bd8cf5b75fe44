from __future__ import annotations

import unittest

from lazycd.cursor import clamp_cursor, move_cursor


class ClampCursorTests(unittest.TestCase):
    def test_empty_list_has_no_selection(self) -> None:
        for cursor in (None, 0, 3, -1):
            with self.subTest(cursor=cursor):
                self.assertIsNone(clamp_cursor(cursor, 0))

    def test_result_is_always_in_range_for_non_empty_lists(self) -> None:
        for length in range(1, 6):
            for cursor in (None, -2, 0, 1, 4, 9):
                with self.subTest(length=length, cursor=cursor):
                    result = clamp_cursor(cursor, length)
                    self.assertIsNotNone(result)
                    self.assertTrue(0 <= result < length)

    def test_cursor_past_end_moves_to_last_row(self) -> None:
        self.assertEqual(clamp_cursor(2, 1), 0)
        self.assertEqual(clamp_cursor(7, 3), 2)

    def test_in_range_cursor_is_unchanged(self) -> None:
        self.assertEqual(clamp_cursor(1, 3), 1)

    def test_missing_selection_starts_at_first_row(self) -> None:
        self.assertEqual(clamp_cursor(None, 4), 0)


class MoveCursorTests(unittest.TestCase):
    def test_moves_saturate_at_both_ends(self) -> None:
        self.assertEqual(move_cursor(0, -1, 3), 0)
        self.assertEqual(move_cursor(2, 1, 3), 2)

    def test_down_then_up_returns_to_start(self) -> None:
        for cursor in (1, 2, 3):
            with self.subTest(cursor=cursor):
                self.assertEqual(move_cursor(move_cursor(cursor, 1, 5), -1, 5), cursor)

    def test_moving_in_empty_list_keeps_no_selection(self) -> None:
        self.assertIsNone(move_cursor(None, 1, 0))
        self.assertIsNone(move_cursor(0, -1, 0))


if __name__ == "__main__":
    unittest.main()
