"""Tests for frame composition."""

from __future__ import annotations

import re
import tempfile
import unittest
from pathlib import Path

from dirpanes.pane import Views
from dirpanes.render import render_frame, render_frame_lines, viewport_height_for_rows
from dirpanes.runtime import Session
from dirpanes.ui_theme import DEFAULT_THEME, PLAIN_THEME

_ANSI = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")


def _strip(text: str) -> str:
    return _ANSI.sub("", text)


class RenderFrameTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        (self.root / "src").mkdir()
        (self.root / "README.md").write_text("", encoding="utf-8")
        (self.root / ".env").write_text("", encoding="utf-8")
        self.session = Session(Views.open(self.root, count=3))

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _lines(self, columns: int = 200, rows: int = 8) -> list[str]:
        self.session.set_viewport_height(viewport_height_for_rows(rows))
        return [_strip(line) for line in render_frame_lines(self.session, columns, rows, PLAIN_THEME)]

    def test_frame_layout(self) -> None:
        lines = self._lines()

        self.assertEqual(len(lines), 8)
        self.assertEqual(lines[0], f" 1  2  3  {self.root}")
        self.assertEqual(lines[1:3], ["src/", "README.md"])
        self.assertEqual(lines[3:7], ["", "", "", ""])
        self.assertEqual(lines[7], "1/2")

    def test_footer_summarizes_marks_and_hidden(self) -> None:
        self.session.handle_key(".")
        self.session.handle_key(" ")

        self.assertEqual(self._lines()[-1], "1/3  1 marked  hidden shown")

    def test_footer_shows_command_prompt_then_status(self) -> None:
        for key in ":cd x":
            self.session.handle_key(key)
        self.assertEqual(self._lines()[-1], ":cd x")

        self.session.handle_key("ENTER")
        self.assertTrue(self._lines()[-1].startswith("No such file or directory"))

    def test_narrow_terminal_clips_header_path_from_the_left(self) -> None:
        header = self._lines(columns=16)[0]

        self.assertTrue(header.startswith(" 1  2  3  …"))
        self.assertTrue(str(self.root).endswith(header[len(" 1  2  3  …") :]))

    def test_highlighted_row_uses_theme_style(self) -> None:
        lines = render_frame_lines(self.session, 80, 8, DEFAULT_THEME)

        self.assertIn(DEFAULT_THEME.directory_highlighted + "src", lines[1])
        self.assertIn(DEFAULT_THEME.file + "README.md", lines[2])

    def test_render_frame_clears_and_joins_lines(self) -> None:
        written: list[str] = []
        render_frame(self.session, 80, 5, PLAIN_THEME, write=written.append)

        self.assertEqual(len(written), 1)
        self.assertTrue(written[0].startswith("\033[H\033[J"))
        self.assertEqual(written[0].count("\r\n"), 4)


if __name__ == "__main__":
    unittest.main()
