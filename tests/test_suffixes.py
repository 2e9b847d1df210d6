from pathlib import Path

import pytest

from smartquotify.utils.suffixes import markup_for_path, markup_for_suffix, normalize_suffixes


def test_normalize_suffixes():
    assert normalize_suffixes(None) == []
    assert normalize_suffixes(["md", ".HTML", " ", ""]) == [".md", ".html"]


@pytest.mark.parametrize(
    "path, expected",
    [
        ("index.html", (True, False)),
        ("page.HTM", (True, False)),
        ("README.md", (False, True)),
        ("notes.backup.markdown", (False, True)),
        ("post.mdx", (True, True)),
        ("README", (False, False)),
        (Path("dir.md") / "plain.txt", (False, False)),
    ],
)
def test_markup_for_path(path, expected):
    assert markup_for_path(path) == expected


def test_markup_for_empty_suffix():
    assert markup_for_suffix("") == (False, False)
