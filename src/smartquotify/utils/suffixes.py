from __future__ import annotations
"""Suffix utilities for ``--auto`` markup detection.

A file's suffix decides which markup families get protected when the CLI
runs with ``--auto``:

    * .html .htm .xhtml .xml .svg   -> html
    * .md .markdown .mdown .mkd     -> markdown
    * .mdx                          -> html + markdown

Matching is case-insensitive and uses the final suffix only, so
``notes.backup.md`` is Markdown and ``README`` is plain text.
"""

from pathlib import PurePath
from typing import Sequence, Set, Tuple

HTML_SUFFIXES: Set[str] = {'.html', '.htm', '.xhtml', '.xml', '.svg'}
MARKDOWN_SUFFIXES: Set[str] = {'.md', '.markdown', '.mdown', '.mkd'}
MIXED_SUFFIXES: Set[str] = {'.mdx'}


def normalize_suffixes(suffixes: Sequence[str] | None) -> list[str]:
    """Normalize suffix tokens: lowercase, leading dot added when missing.

    Examples:
        normalize_suffixes(["md"])     -> [".md"]
        normalize_suffixes([".HTML"])  -> [".html"]
    """
    if not suffixes:
        return []
    out: list[str] = []
    for raw in suffixes:
        s = (raw or '').strip().lower()
        if not s:
            continue
        out.append(s if s.startswith('.') else f'.{s}')
    return out


def markup_for_suffix(suffix: str) -> Tuple[bool, bool]:
    """Return ``(html, markdown)`` protection flags for a single suffix."""
    norm = normalize_suffixes([suffix])
    if not norm:
        return (False, False)
    key = norm[0]
    if key in MIXED_SUFFIXES:
        return (True, True)
    return (key in HTML_SUFFIXES, key in MARKDOWN_SUFFIXES)


def markup_for_path(path: str | PurePath) -> Tuple[bool, bool]:
    """Return ``(html, markdown)`` protection flags for a file path."""
    return markup_for_suffix(PurePath(path).suffix)
