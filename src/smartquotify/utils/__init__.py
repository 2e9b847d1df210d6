"""
smartquotify.utils – Small shared utilities (suffix-based markup detection).
"""
from .suffixes import markup_for_path, markup_for_suffix, normalize_suffixes

__all__ = ["markup_for_path", "markup_for_suffix", "normalize_suffixes"]
