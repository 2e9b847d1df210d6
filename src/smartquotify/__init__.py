from __future__ import annotations

from smartquotify.api import partition, resolve_options, smartquotify, transform
from smartquotify.constants import DPRIME, LDQ, LSQ, PRIME, RDQ, RSQ
from smartquotify.core.errors import InvalidSurfaceError, SmartQuotifyError
from smartquotify.core.models import QuoteOptions, Zone
from smartquotify.logging.helpers import get_logger
from smartquotify.processing.quote_rules import QUOTE_RULES
from smartquotify.processing.text_ops import QuoteTransformer
from smartquotify.processing.zones import ZonePartitioner

__version__ = '1.0.0'


def engine_factory(*, logger=None) -> QuoteTransformer:
    """Factory helper that returns a QuoteTransformer over the default rule table."""
    return QuoteTransformer(logger=logger or get_logger('engine'))


__all__ = [
    'transform',
    'smartquotify',
    'partition',
    'resolve_options',
    'engine_factory',
    'QuoteOptions',
    'QuoteTransformer',
    'ZonePartitioner',
    'Zone',
    'QUOTE_RULES',
    'InvalidSurfaceError',
    'SmartQuotifyError',
    'LDQ',
    'RDQ',
    'LSQ',
    'RSQ',
    'PRIME',
    'DPRIME',
]
