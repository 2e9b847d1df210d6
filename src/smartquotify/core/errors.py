from __future__ import annotations
"""Exception types raised at the public seams of smartquotify."""


class SmartQuotifyError(Exception):
    """Base class for smartquotify errors."""


class InvalidSurfaceError(SmartQuotifyError, ValueError):
    """Raised when live conversion is attached to something that is not editable."""
