from __future__ import annotations
"""Zone partitioner protocol definitions."""

from typing import Protocol, Sequence

from smartquotify.core.models import ProtectedRange, QuoteOptions, Zone


class ZonePartitionerProtocol(Protocol):
    """Split text into protected and transformable zones.

    Methods:
        collect: Raw protected ranges from every active pattern family.
        merge: Collapse overlapping or adjacent ranges.
        partition: Lossless, ordered list of zones covering the text.
    """

    def collect(self, text: str, options: QuoteOptions) -> list[ProtectedRange]:
        ...

    def merge(self, ranges: Sequence[ProtectedRange]) -> list[ProtectedRange]:
        ...

    def partition(self, text: str, options: QuoteOptions) -> list[Zone]:
        ...
