"""Byte-level key decoding tests driven through a pipe."""

from __future__ import annotations

import os
import unittest

from treegrow import input as term_input
from treegrow.input import parse_mouse_event, read_key


class ReadKeyTests(unittest.TestCase):
    def setUp(self) -> None:
        self.read_fd, self.write_fd = os.pipe()
        term_input._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        os.close(self.read_fd)
        os.close(self.write_fd)
        term_input._PENDING_BYTES.clear()

    def _keys(self, data: bytes, count: int) -> list[str]:
        os.write(self.write_fd, data)
        return [read_key(self.read_fd, timeout_ms=50) for _ in range(count)]

    def test_timeout_returns_empty_token(self) -> None:
        self.assertEqual(read_key(self.read_fd, timeout_ms=0), "")

    def test_plain_keys(self) -> None:
        self.assertEqual(self._keys(b"qj\r \x03", 5), ["q", "j", "ENTER", "SPACE", "CTRL_C"])

    def test_arrow_and_paging_sequences(self) -> None:
        keys = self._keys(b"\x1b[A\x1b[B\x1b[C\x1b[D\x1b[5~\x1b[6~", 6)

        self.assertEqual(keys, ["UP", "DOWN", "RIGHT", "LEFT", "PAGE_UP", "PAGE_DOWN"])

    def test_lone_escape(self) -> None:
        self.assertEqual(self._keys(b"\x1b", 1), ["ESC"])

    def test_escape_followed_by_key_keeps_the_key(self) -> None:
        self.assertEqual(self._keys(b"\x1bq", 2), ["ESC", "q"])

    def test_sgr_mouse_reports(self) -> None:
        keys = self._keys(b"\x1b[<0;12;5M\x1b[<0;12;5m\x1b[<64;3;4M\x1b[<65;3;4M", 4)

        self.assertEqual(
            keys,
            [
                "MOUSE_LEFT_DOWN:12:5",
                "MOUSE_LEFT_UP:12:5",
                "MOUSE_WHEEL_UP:3:4",
                "MOUSE_WHEEL_DOWN:3:4",
            ],
        )


class ParseMouseEventTests(unittest.TestCase):
    def test_parses_kind_and_coordinates(self) -> None:
        self.assertEqual(parse_mouse_event("MOUSE_LEFT_DOWN:7:9"), ("MOUSE_LEFT_DOWN", 7, 9))

    def test_rejects_non_mouse_tokens(self) -> None:
        self.assertIsNone(parse_mouse_event("UP"))
        self.assertIsNone(parse_mouse_event("MOUSE"))
        self.assertIsNone(parse_mouse_event("MOUSE_LEFT_DOWN:x:1"))


if __name__ == "__main__":
    unittest.main()
