from __future__ import annotations

"""Public surface for smartquotify.core.

Stable import location for the data model, protocols and errors:

    from smartquotify.core import QuoteOptions, Zone, TextTransformerProtocol
"""

from smartquotify.core.errors import InvalidSurfaceError, SmartQuotifyError
from smartquotify.core.interfaces import (
    EditableSurfaceProtocol,
    LoggerFactoryProtocol,
    LoggerLikeProtocol,
    TextTransformerProtocol,
    ZonePartitionerProtocol,
)
from smartquotify.core.models import ProtectedRange, QuoteOptions, Rule, Zone, ZoneKind

__all__ = [
    # Model
    "ProtectedRange",
    "QuoteOptions",
    "Rule",
    "Zone",
    "ZoneKind",
    # Protocols
    "EditableSurfaceProtocol",
    "LoggerFactoryProtocol",
    "LoggerLikeProtocol",
    "TextTransformerProtocol",
    "ZonePartitionerProtocol",
    # Errors
    "InvalidSurfaceError",
    "SmartQuotifyError",
]
