# smartquotify/parsing/parser.py
from __future__ import annotations

import argparse
import os

from smartquotify.constants import DEFAULT_ENCODING


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Notes:
        - Flags map one-to-one onto QuoteOptions plus I/O routing.
        - Environment variables only provide defaults; explicit flags win.
    """
    from smartquotify import __version__

    p = argparse.ArgumentParser(
        prog="smartquotify",
        formatter_class=argparse.RawTextHelpFormatter,
        usage="%(prog)s [FILE …] [OPTIONS]",
        description=(
            "smartquotify – convert straight quotes and apostrophes into smart quotes\n"
            "Reads standard input when no FILE (or “-”) is given."
        ),
    )

    g_io = p.add_argument_group("Input & output")
    g_mk = p.add_argument_group("Markup protection")
    g_ty = p.add_argument_group("Typography")
    g_misc = p.add_argument_group("Miscellaneous")

    # -----------------------
    # Input & output
    # -----------------------
    g_io.add_argument(
        "files",
        metavar="FILE",
        nargs="*",
        help="Files to convert. Use “-” for standard input.",
    )
    g_io.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        dest="output",
        help="Write the converted text of all inputs, concatenated, to FILE instead of stdout.",
    )
    g_io.add_argument(
        "-i",
        "--in-place",
        action="store_true",
        dest="in_place",
        help="Rewrite each input file in place. Unchanged files are not touched.",
    )
    g_io.add_argument(
        "--check",
        action="store_true",
        dest="check",
        help=(
            "Write nothing; exit with status 1 when any input would change. "
            "Each offending input is reported on stderr."
        ),
    )
    g_io.add_argument(
        "--encoding",
        metavar="NAME",
        dest="encoding",
        default=os.getenv("SMARTQUOTIFY_ENCODING") or DEFAULT_ENCODING,
        help="Text encoding for reading and writing files (default: utf-8 or $SMARTQUOTIFY_ENCODING).",
    )

    # -----------------------
    # Markup protection
    # -----------------------
    g_mk.add_argument(
        "--html",
        action="store_true",
        dest="html",
        help="Leave HTML tags, attribute values and comments untouched.",
    )
    g_mk.add_argument(
        "--markdown",
        action="store_true",
        dest="markdown",
        help="Leave Markdown code blocks, inline code, link URLs and autolinks untouched.",
    )
    g_mk.add_argument(
        "--auto",
        action="store_true",
        dest="auto",
        help=(
            "Pick --html/--markdown per file from its suffix "
            "(.html/.htm/.xml → HTML, .md/.markdown → Markdown, .mdx → both). "
            "Explicit flags still apply to every file."
        ),
    )

    # -----------------------
    # Typography
    # -----------------------
    g_ty.add_argument(
        "--no-primes",
        action="store_false",
        dest="primes",
        help="Do not turn measurements such as 6'2\" into prime marks.",
    )

    # -----------------------
    # Miscellaneous
    # -----------------------
    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit logs as JSON lines (also enabled by SMARTQUOTIFY_JSON_LOGS=1).",
    )
    g_misc.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        dest="verbose",
        help="Log debug details, including per-rule traces when SMARTQUOTIFY_TRACE_RULES=1.",
    )
    g_misc.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return p
