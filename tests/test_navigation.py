"""Navigation state-machine tests against real temporary directories."""

from __future__ import annotations

import os
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazycd.listing import ListingError
from lazycd.navigation import Intent, NavigationState


class NavigationStateTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(os.path.abspath(self._tmp.name))
        (self.root / "apple").mkdir()
        (self.root / "apple" / "inner.txt").write_text("x", encoding="utf-8")
        (self.root / "Banana").mkdir()
        (self.root / "grape").write_text("x", encoding="utf-8")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _names(self, state: NavigationState) -> list[str]:
        return [entry.name for entry in state.get_files()]

    def test_starts_with_full_listing_and_first_row_selected(self) -> None:
        state = NavigationState(self.root)

        self.assertEqual(state.get_current_dir(), self.root)
        self.assertEqual(self._names(state), ["apple", "Banana", "grape"])
        self.assertEqual(state.cursor, 0)
        self.assertEqual(state.search, "")
        self.assertTrue(state.search_mode)
        self.assertIsNone(state.last_error)

    def test_new_starts_in_process_working_directory(self) -> None:
        previous_cwd = os.getcwd()
        try:
            os.chdir(self.root)
            state = NavigationState.new()
        finally:
            os.chdir(previous_cwd)

        self.assertEqual(state.get_current_dir().resolve(), self.root.resolve())

    def test_search_filters_and_highlights(self) -> None:
        state = NavigationState(self.root)

        state.search = "an"
        state.update(Intent.SEARCH)

        files = state.get_files()
        self.assertEqual([entry.name for entry in files], ["Banana"])
        self.assertEqual(files[0].highlights, (1, 2))
        self.assertEqual(state.cursor, 0)

    def test_search_without_matches_clears_selection(self) -> None:
        state = NavigationState(self.root)

        state.push_search("z")

        self.assertEqual(state.get_files(), ())
        self.assertIsNone(state.cursor)
        self.assertIsNone(state.selected)

    def test_shrinking_results_clamps_cursor(self) -> None:
        state = NavigationState(self.root)
        state.update(Intent.DOWN)
        state.update(Intent.DOWN)
        self.assertEqual(state.cursor, 2)

        state.push_search("gr")

        self.assertEqual(self._names(state), ["grape"])
        self.assertEqual(state.cursor, 0)

    def test_pop_search_restores_wider_results(self) -> None:
        state = NavigationState(self.root)
        state.push_search("an")

        self.assertTrue(state.pop_search())
        self.assertEqual(state.search, "a")
        self.assertEqual(self._names(state), ["apple", "Banana", "grape"])
        self.assertTrue(state.pop_search())
        self.assertFalse(state.pop_search())

    def test_up_and_down_saturate(self) -> None:
        state = NavigationState(self.root)

        state.update(Intent.UP)
        self.assertEqual(state.cursor, 0)
        state.update(Intent.DOWN)
        state.update(Intent.DOWN)
        state.update(Intent.DOWN)
        self.assertEqual(state.cursor, 2)
        state.update(Intent.UP)
        state.update(Intent.DOWN)
        self.assertEqual(state.cursor, 2)

    def test_down_then_up_returns_to_original_cursor(self) -> None:
        state = NavigationState(self.root)
        state.update(Intent.DOWN)

        state.update(Intent.DOWN)
        state.update(Intent.UP)

        self.assertEqual(state.cursor, 1)

    def test_right_enters_directory_and_resets_query_and_cursor(self) -> None:
        state = NavigationState(self.root)
        state.push_search("ap")
        self.assertEqual(self._names(state), ["apple", "grape"])

        finished = state.update(Intent.RIGHT)

        self.assertFalse(finished)
        self.assertEqual(state.get_current_dir(), self.root / "apple")
        self.assertEqual(state.search, "")
        self.assertEqual(self._names(state), ["inner.txt"])
        self.assertEqual(state.cursor, 0)

    def test_right_into_empty_directory_has_no_selection(self) -> None:
        state = NavigationState(self.root)
        state.update(Intent.DOWN)

        state.update(Intent.RIGHT)

        self.assertEqual(state.get_current_dir(), self.root / "Banana")
        self.assertEqual(state.get_files(), ())
        self.assertIsNone(state.cursor)

    def test_right_on_file_is_a_no_op(self) -> None:
        state = NavigationState(self.root)
        state.push_search("gr")

        state.update(Intent.RIGHT)

        self.assertEqual(state.get_current_dir(), self.root)
        self.assertEqual(state.search, "gr")
        self.assertEqual(self._names(state), ["grape"])

    def test_right_without_selection_is_a_no_op(self) -> None:
        state = NavigationState(self.root)
        state.push_search("zz")

        state.update(Intent.RIGHT)

        self.assertEqual(state.get_current_dir(), self.root)
        self.assertEqual(state.search, "zz")

    def test_left_goes_to_parent_and_resets_query_and_cursor(self) -> None:
        state = NavigationState(self.root / "apple")
        state.push_search("inn")

        state.update(Intent.LEFT)

        self.assertEqual(state.get_current_dir(), self.root)
        self.assertEqual(state.search, "")
        self.assertEqual(self._names(state), ["apple", "Banana", "grape"])
        self.assertEqual(state.cursor, 0)

    def test_left_at_filesystem_root_is_a_no_op(self) -> None:
        state = NavigationState(Path(self.root.anchor))
        before = state.get_files()

        state.update(Intent.LEFT)

        self.assertEqual(state.get_current_dir(), Path(self.root.anchor))
        self.assertEqual(state.get_files(), before)

    def test_enter_commits_after_entering_selected_directory(self) -> None:
        state = NavigationState(self.root)

        finished = state.update(Intent.ENTER)

        self.assertTrue(finished)
        self.assertEqual(state.get_current_dir(), self.root / "apple")

    def test_enter_on_file_commits_current_directory(self) -> None:
        state = NavigationState(self.root)
        state.push_search("grape")

        finished = state.update(Intent.ENTER)

        self.assertTrue(finished)
        self.assertEqual(state.get_current_dir(), self.root)

    def test_unreadable_directory_degrades_to_empty_listing(self) -> None:
        state = NavigationState(self.root)
        state.update(Intent.DOWN)
        shutil.rmtree(self.root / "Banana")

        state.update(Intent.RIGHT)

        self.assertEqual(state.get_current_dir(), self.root / "Banana")
        self.assertEqual(state.get_files(), ())
        self.assertIsNone(state.cursor)
        self.assertIsInstance(state.last_error, ListingError)

        state.update(Intent.LEFT)

        self.assertEqual(state.get_current_dir(), self.root)
        self.assertIsNone(state.last_error)
        self.assertEqual(self._names(state), ["apple", "grape"])

    def test_permission_denied_directory_degrades_to_empty_listing(self) -> None:
        locked = self.root / "Banana"
        real_scandir = os.scandir

        def scandir(path):
            if Path(path) == locked:
                raise PermissionError(13, "Permission denied", str(path))
            return real_scandir(path)

        state = NavigationState(self.root)
        state.update(Intent.DOWN)
        with mock.patch("lazycd.listing.os.scandir", side_effect=scandir):
            state.update(Intent.RIGHT)

        self.assertEqual(state.get_current_dir(), locked)
        self.assertEqual(state.get_files(), ())
        self.assertIsNone(state.cursor)
        self.assertIsInstance(state.last_error, ListingError)
        self.assertEqual(state.last_error.errno, 13)

    def test_missing_start_directory_reports_error_instead_of_raising(self) -> None:
        state = NavigationState(self.root / "missing")

        self.assertEqual(state.get_files(), ())
        self.assertIsNone(state.cursor)
        self.assertIsNotNone(state.last_error)

    def test_toggle_hidden_reloads_and_keeps_query(self) -> None:
        (self.root / ".config").mkdir()
        state = NavigationState(self.root, show_hidden=False)
        state.push_search("c")
        self.assertEqual(self._names(state), [])

        state.toggle_hidden()

        self.assertTrue(state.show_hidden)
        self.assertEqual(state.search, "c")
        self.assertEqual(self._names(state), [".config"])
        self.assertEqual(state.cursor, 0)

    def test_exposed_views_are_read_only(self) -> None:
        state = NavigationState(self.root)

        self.assertIsInstance(state.get_files(), tuple)
        self.assertIsInstance(state.entries, tuple)


if __name__ == "__main__":
    unittest.main()
