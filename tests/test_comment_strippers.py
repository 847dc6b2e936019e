from __future__ import annotations

import unittest

from annostrip.core.models import CleanOptions
from annostrip.processing.comment_rules import latex_comment_offset, python_comment_offset
from annostrip.processing.docstrip.latex_docstrip import LatexCleaner, strip_latex_comments, truncate_appendix
from annostrip.processing.docstrip.md_docstrip import strip_markdown_comments
from annostrip.processing.docstrip.py_docstrip import strip_python_comments


# --------------------------------------------------------------------------- #
#  1. LaTeX                                                                   #
# --------------------------------------------------------------------------- #
class LatexCommentTests(unittest.TestCase):
    def test_unescaped_percent_truncates(self) -> None:
        self.assertEqual(strip_latex_comments(["a % b"]), ["a "])

    def test_escaped_percent_is_kept(self) -> None:
        self.assertEqual(strip_latex_comments(["c \\% d"]), ["c \\% d"])

    def test_leading_percent_empties_line(self) -> None:
        self.assertEqual(strip_latex_comments(["% full line", "x"]), ["", "x"])

    def test_double_backslash_still_counts_as_escape(self) -> None:
        self.assertIsNone(latex_comment_offset("a \\\\% b"))

    def test_only_first_percent_is_examined(self) -> None:
        line = "50\\% of it % note"
        self.assertIsNone(latex_comment_offset(line))
        self.assertEqual(strip_latex_comments([line]), [line])

    def test_line_without_marker(self) -> None:
        self.assertIsNone(latex_comment_offset("plain"))
        self.assertEqual(latex_comment_offset("%"), 0)


class AppendixTests(unittest.TestCase):
    DOC = (
        "\\begin{document}\n"
        "Body\n"
        "\\appendix\n"
        "\\section{A}\n"
        "Details\n"
        "\\end{document}\n"
    )

    def test_appendix_body_is_collapsed(self) -> None:
        out = truncate_appendix(self.DOC)
        self.assertEqual(
            out,
            "\\begin{document}\nBody\n\\appendix\n...\n\\end{document}\n",
        )
        self.assertNotIn("Details", out)

    def test_missing_markers_leave_text_unchanged(self) -> None:
        self.assertEqual(truncate_appendix("Body\n\\end{document}"), "Body\n\\end{document}")
        self.assertEqual(truncate_appendix("\\appendix\nA"), "\\appendix\nA")
        self.assertEqual(truncate_appendix(""), "")

    def test_appendix_after_end_is_ignored(self) -> None:
        text = "\\end{document}\n\\appendix\nA"
        self.assertEqual(truncate_appendix(text), text)

    def test_cleaner_only_truncates_when_enabled(self) -> None:
        cleaner = LatexCleaner()
        self.assertEqual(cleaner.strip(self.DOC, CleanOptions()), self.DOC)
        self.assertIn("\\appendix\n...\n", cleaner.strip(self.DOC, CleanOptions(remove_appendix=True)))

    def test_commented_appendix_marker_does_not_count(self) -> None:
        text = "% \\appendix\nx\n\\end{document}"
        out = LatexCleaner().strip(text, CleanOptions(remove_appendix=True))
        self.assertEqual(out, "\nx\n\\end{document}")

    def test_truncation_is_logged(self) -> None:
        with self.assertLogs("annostrip.processing.latex", level="DEBUG") as cm:
            truncate_appendix(self.DOC)
        self.assertTrue(any("collapsing appendix" in msg for msg in cm.output))


# --------------------------------------------------------------------------- #
#  2. Python                                                                  #
# --------------------------------------------------------------------------- #
class PythonCommentTests(unittest.TestCase):
    def test_trailing_comment_is_removed(self) -> None:
        self.assertEqual(strip_python_comments(["x = 1  # note"]), ["x = 1  "])

    def test_full_line_comment_becomes_empty(self) -> None:
        self.assertEqual(strip_python_comments(["    # note"]), ["    "])

    def test_comment_after_balanced_string(self) -> None:
        self.assertEqual(strip_python_comments(["s = 'a' # c"]), ["s = 'a' "])

    def test_hash_inside_string_keeps_whole_line(self) -> None:
        # Only the first '#' is examined and it sits after one '"'.
        line = 'x = "a#b" # real comment'
        self.assertIsNone(python_comment_offset(line))
        self.assertEqual(strip_python_comments([line]), [line])

    def test_odd_single_quotes_keep_line(self) -> None:
        line = "msg = 'it#s'"
        self.assertEqual(strip_python_comments([line]), [line])

    def test_no_marker(self) -> None:
        self.assertEqual(strip_python_comments(["pass", ""]), ["pass", ""])


# --------------------------------------------------------------------------- #
#  3. Markdown                                                                #
# --------------------------------------------------------------------------- #
class MarkdownCommentTests(unittest.TestCase):
    def test_comment_spanning_lines(self) -> None:
        self.assertEqual(strip_markdown_comments("a<!-- x\ny -->b"), "ab")

    def test_lazy_match_keeps_text_between_comments(self) -> None:
        self.assertEqual(strip_markdown_comments("<!--a-->keep<!--b-->"), "keep")

    def test_unterminated_comment_is_left_alone(self) -> None:
        text = "a <!-- never closed\nb"
        self.assertEqual(strip_markdown_comments(text), text)

    def test_empty_comment(self) -> None:
        self.assertEqual(strip_markdown_comments("x<!---->y"), "xy")


if __name__ == "__main__":
    unittest.main()
