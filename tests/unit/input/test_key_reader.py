"""Tests for decoding raw terminal bytes into key tokens."""

from __future__ import annotations

import os
import unittest

from dirpanes.input import read_key


class ReadKeyTests(unittest.TestCase):
    def setUp(self) -> None:
        self.read_fd, self.write_fd = os.pipe()

    def tearDown(self) -> None:
        os.close(self.read_fd)
        if self.write_fd is not None:
            os.close(self.write_fd)

    def _keys(self, data: bytes, count: int) -> list[str]:
        os.write(self.write_fd, data)
        return [read_key(self.read_fd, timeout_ms=100) for _ in range(count)]

    def test_plain_and_control_keys(self) -> None:
        self.assertEqual(
            self._keys(b"jq\r\n\t\x7f\x03\x04\x15 ", 10),
            ["j", "q", "ENTER", "ENTER", "TAB", "BACKSPACE", "CTRL_C", "CTRL_D", "CTRL_U", " "],
        )

    def test_arrow_and_navigation_sequences(self) -> None:
        self.assertEqual(
            self._keys(b"\x1b[A\x1b[B\x1b[C\x1b[D\x1b[Z\x1b[5~\x1b[6~\x1bOA", 8),
            ["UP", "DOWN", "RIGHT", "LEFT", "SHIFT_TAB", "PAGE_UP", "PAGE_DOWN", "UP"],
        )

    def test_modified_arrows_are_consumed_whole(self) -> None:
        self.assertEqual(
            self._keys(b"\x1b[1;5Aj\x1b[1;2C\x1b[1;3D\x1b[5;5~k", 6),
            ["CTRL_UP", "j", "SHIFT_RIGHT", "ALT_LEFT", "PAGE_UP", "k"],
        )

    def test_unknown_csi_sequences_do_not_leak_bytes(self) -> None:
        self.assertEqual(
            self._keys(b"\x1b[1;7A\x1b[<0;12;5M\x1b[99x5", 4),
            ["ESC", "ESC", "ESC", "5"],
        )
        self.assertEqual(read_key(self.read_fd, timeout_ms=10), "")

    def test_lone_escape_times_out_to_esc(self) -> None:
        self.assertEqual(self._keys(b"\x1b", 1), ["ESC"])

    def test_escape_followed_by_text_keeps_the_text(self) -> None:
        self.assertEqual(self._keys(b"\x1bx", 2), ["ESC", "x"])

    def test_multibyte_utf8_characters_decode_whole(self) -> None:
        self.assertEqual(self._keys("é日".encode("utf-8"), 2), ["é", "日"])

    def test_timeout_and_end_of_input_return_empty(self) -> None:
        self.assertEqual(read_key(self.read_fd, timeout_ms=10), "")
        os.close(self.write_fd)
        self.write_fd = None
        self.assertEqual(read_key(self.read_fd), "")


if __name__ == "__main__":
    unittest.main()
