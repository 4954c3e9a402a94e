"""Tests for keystroke handling through a full session."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirpanes.pane import Views
from dirpanes.runtime import Session


class SessionTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        (self.root / "src").mkdir()
        (self.root / "src" / "main.py").write_text("", encoding="utf-8")
        (self.root / "docs").mkdir()
        (self.root / "README.md").write_text("", encoding="utf-8")
        (self.root / ".env").write_text("", encoding="utf-8")
        self.edit_path = mock.Mock(return_value=None)
        self.open_path = mock.Mock(return_value=None)
        self.session = Session(
            Views.open(self.root, count=4, viewport_height=10),
            edit_path=self.edit_path,
            open_target_path=self.open_path,
        )

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _press(self, *keys: str) -> None:
        for key in keys:
            self.session.handle_key(key)

    def _type_command(self, text: str) -> None:
        self._press(":", *text, "ENTER")

    def test_normal_keys_navigate_active_pane(self) -> None:
        self._press("j", "l")

        self.assertEqual(self.session.active.current_dir, self.root / "src")
        self._press("h")
        self.assertEqual(self.session.active.current_dir, self.root)
        self.assertEqual(self.session.active.target().name, "src")

    def test_entering_a_file_is_silently_ignored(self) -> None:
        self._press("j", "j", "l")

        self.assertEqual(self.session.active.current_dir, self.root)
        self.assertEqual(self.session.active.target().name, "README.md")
        self.assertEqual(self.session.status_message, "")

    def test_pane_keys_switch_and_keep_panes_independent(self) -> None:
        self._press("l", "2")

        self.assertEqual(self.session.views.active_index, 1)
        self.assertEqual(self.session.active.current_dir, self.root)
        self._press("1")
        self.assertEqual(self.session.active.current_dir, self.root / "docs")

    def test_out_of_range_pane_key_is_ignored(self) -> None:
        self._press("9")

        self.assertEqual(self.session.views.active_index, 0)

    def test_hidden_toggle_and_mark_keys(self) -> None:
        self._press(".")
        self.assertIn(".env", [entry.name for entry in self.session.active.directory])

        self._press(" ")
        self.assertTrue(self.session.active.is_marked(self.root / "docs"))

    def test_command_mode_keys_do_not_navigate(self) -> None:
        self._press(":", "j", "q")

        self.assertEqual(self.session.mode.command_text, "jq")
        self.assertEqual(self.session.active.position, 0)
        self.assertFalse(self.session.quit_requested)

    def test_cd_command_changes_directory(self) -> None:
        self._type_command("cd src")

        self.assertEqual(self.session.active.current_dir, self.root / "src")
        self.assertIsNone(self.session.mode.command_text)

    def test_cd_to_missing_directory_reports_and_keeps_pane(self) -> None:
        self._type_command("cd missing")

        self.assertEqual(self.session.active.current_dir, self.root)
        self.assertIn("missing", self.session.status_message)

    def test_unknown_command_sets_status_message(self) -> None:
        self._type_command("bogus")

        self.assertEqual(self.session.status_message, "Unknown command: bogus")
        self._press("j")
        self.assertEqual(self.session.status_message, "")

    def test_pane_command_out_of_range_reports(self) -> None:
        self._type_command("pane 12")

        self.assertIn("out of range", self.session.status_message)
        self.assertEqual(self.session.views.active_index, 0)

    def test_edit_and_open_receive_target_path(self) -> None:
        self._press("j", "j", "e", "o")

        self.edit_path.assert_called_once_with(self.root / "README.md")
        self.open_path.assert_called_once_with(self.root / "README.md")

    def test_collaborator_errors_reach_status_line(self) -> None:
        self.edit_path.return_value = "Cannot edit: $EDITOR is not set."

        self._press("e")

        self.assertEqual(self.session.status_message, "Cannot edit: $EDITOR is not set.")

    def test_edit_without_target_is_noop(self) -> None:
        self._type_command("cd docs")
        self._press("e", "o", " ")

        self.edit_path.assert_not_called()
        self.open_path.assert_not_called()
        self.assertEqual(self.session.active.marks, set())

    def test_filesystem_error_during_navigation_keeps_pane(self) -> None:
        with mock.patch(
            "dirpanes.listing.ordering.list_entries",
            side_effect=PermissionError(13, "Permission denied", str(self.root / "docs")),
        ):
            self._press("l")

        self.assertEqual(self.session.active.current_dir, self.root)
        self.assertEqual(self.session.status_message, f"Permission denied: {self.root / 'docs'}")

    def test_quit_key_and_exit_directory(self) -> None:
        self._press("l", "q")

        self.assertTrue(self.session.quit_requested)
        self.assertEqual(self.session.exit_directory(), self.root / "docs")


if __name__ == "__main__":
    unittest.main()
