from __future__ import annotations

import unittest

from annostrip.processing.line_ops import (
    collapse_blank_runs,
    format_line_numbers,
    join_lines,
    line_numbers,
    number_lines,
    split_lines,
)


# --------------------------------------------------------------------------- #
#  1. Splitting & joining                                                     #
# --------------------------------------------------------------------------- #
class SplitJoinTests(unittest.TestCase):
    def test_round_trip(self) -> None:
        for text in ("", "\n", "a", "a\nb", "a\n\n", "\n\nx\n", "a\r\nb\r\n"):
            with self.subTest(text=text):
                self.assertEqual(join_lines(split_lines(text)), text)

    def test_empty_input_is_one_empty_line(self) -> None:
        self.assertEqual(split_lines(""), [""])

    def test_carriage_return_is_kept(self) -> None:
        self.assertEqual(split_lines("a\r\nb"), ["a\r", "b"])

    def test_trailing_newline_yields_empty_last_line(self) -> None:
        self.assertEqual(split_lines("a\n"), ["a", ""])


# --------------------------------------------------------------------------- #
#  2. Blank-line collapsing                                                   #
# --------------------------------------------------------------------------- #
class CollapseBlankRunsTests(unittest.TestCase):
    def test_long_runs_become_single_blank_line(self) -> None:
        self.assertEqual(collapse_blank_runs("a\n\n\n\n\nb"), "a\n\nb")
        self.assertEqual(collapse_blank_runs("a\n\n\nb"), "a\n\nb")

    def test_single_blank_line_is_kept(self) -> None:
        self.assertEqual(collapse_blank_runs("a\n\nb"), "a\n\nb")
        self.assertEqual(collapse_blank_runs("a\nb"), "a\nb")

    def test_text_made_of_newlines(self) -> None:
        self.assertEqual(collapse_blank_runs("\n\n\n\n"), "\n\n")
        self.assertEqual(collapse_blank_runs(""), "")

    def test_idempotent(self) -> None:
        for text in ("a\n\n\n\nb\n\n\nc", "\n\n\n", "x", "a\n\n"):
            with self.subTest(text=text):
                once = collapse_blank_runs(text)
                self.assertEqual(collapse_blank_runs(once), once)

    def test_whitespace_only_lines_are_not_blank(self) -> None:
        self.assertEqual(collapse_blank_runs("a\n \n \n \nb"), "a\n \n \n \nb")


# --------------------------------------------------------------------------- #
#  3. Line numbering                                                          #
# --------------------------------------------------------------------------- #
class LineNumberTests(unittest.TestCase):
    def test_empty_text_has_one_line(self) -> None:
        self.assertEqual(line_numbers(""), [1])

    def test_counts_lines(self) -> None:
        self.assertEqual(line_numbers("a"), [1])
        self.assertEqual(line_numbers("a\nb\nc"), [1, 2, 3])
        self.assertEqual(line_numbers("a\n"), [1, 2])

    def test_gutter(self) -> None:
        self.assertEqual(format_line_numbers("a\nb\nc"), "1\n2\n3")
        self.assertEqual(format_line_numbers(""), "1")

    def test_number_lines_aligns_to_widest_number(self) -> None:
        self.assertEqual(number_lines("a\nb"), "1  a\n2  b")
        numbered = split_lines(number_lines("\n".join("x" * 10)))
        self.assertEqual(numbered[0], " 1  x")
        self.assertEqual(numbered[-1], "10  x")


if __name__ == "__main__":
    unittest.main()
