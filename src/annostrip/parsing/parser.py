# annostrip/parsing/parser.py
from __future__ import annotations

import argparse

from annostrip.core.models import Mode


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Notes:
        - The mode is validated later by Mode.parse so that environment and
          suffix fallbacks go through the same check.
    """
    p = argparse.ArgumentParser(
        prog="annostrip",
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "annostrip – strip comments, docstrings and appendices from\n"
            "LaTeX, Python and Markdown sources before highlighting."
        ),
    )

    g_in = p.add_argument_group("Input")
    g_cln = p.add_argument_group("Cleaning")
    g_out = p.add_argument_group("Output")
    g_misc = p.add_argument_group("Miscellaneous")

    g_in.add_argument(
        "source",
        nargs="?",
        metavar="FILE",
        default="-",
        help="Source file to clean. Reads standard input when omitted or '-'.",
    )
    g_in.add_argument(
        "-m",
        "--mode",
        metavar="MODE",
        dest="mode",
        default=None,
        help=(
            f"Language mode: {', '.join(m.value for m in Mode)}. "
            "Falls back to $ANNOSTRIP_MODE, then to the FILE suffix "
            "(.tex, .py, .md, …)."
        ),
    )

    g_cln.add_argument(
        "--remove-appendix",
        action="store_true",
        dest="remove_appendix",
        help="LaTeX only: collapse everything between \\appendix and \\end{document}.",
    )
    g_cln.add_argument(
        "--remove-docstrings",
        action="store_true",
        dest="remove_docstrings",
        help="Python only: drop module, class and function docstrings.",
    )

    g_out.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        dest="output",
        default=None,
        help="Write the cleaned text to FILE instead of standard output.",
    )
    g_out.add_argument(
        "-n",
        "--line-numbers",
        action="store_true",
        dest="line_numbers",
        help="Prefix each output line with its 1-based line number.",
    )

    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit logs as JSON (also enabled by ANNOSTRIP_JSON_LOGS=1).",
    )
    return p
