from __future__ import annotations
"""Text transformer protocol definitions."""

from typing import Optional, Protocol

from smartquotify.core.models import QuoteOptions


class TextTransformerProtocol(Protocol):
    """Protocol for quote rewriting engines.

    Implementations are expected to:
      * Run an ordered rule table over the whole input string.
      * Honor ``options.primes`` by skipping the measurement rules.
      * Never raise on arbitrary input.
    """

    def apply(self, text: str, options: Optional[QuoteOptions] = None) -> str:
        ...
