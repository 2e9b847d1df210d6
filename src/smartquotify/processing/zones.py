from __future__ import annotations
"""
ZonePartitioner

Split a text into alternating protected and transformable zones so the
quote engine only ever sees prose. Protected ranges come from the
PROTECT_RULES patterns of the active markup families; overlapping or
adjacent ranges are merged into maximal spans, and link/image labels
inside them are re-opened as transformable sub-spans.

Guarantees:
    * Concatenating the zones in order reproduces the input exactly.
    * No zone is empty.
    * Merging only ever widens protection: a label sub-span never re-opens
      text that another merged range protects.
"""
import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from smartquotify.core.models import ProtectedRange, QuoteOptions, Zone, ZoneKind
from smartquotify.logging.helpers import get_logger
from smartquotify.processing.protect_rules import ProtectRule, rules_for_families

Span = Tuple[int, int]


def _union(spans: Iterable[Span]) -> List[Span]:
    out: List[Span] = []
    for start, end in sorted(s for s in spans if s[0] < s[1]):
        if out and start <= out[-1][1]:
            out[-1] = (out[-1][0], max(out[-1][1], end))
        else:
            out.append((start, end))
    return out


def _subtract(spans: Sequence[Span], blocked: Sequence[Span]) -> List[Span]:
    """Remove every ``blocked`` span from ``spans``; both must be sorted and disjoint."""
    out: List[Span] = []
    for start, end in spans:
        cursor = start
        for b_start, b_end in blocked:
            if b_end <= cursor:
                continue
            if b_start >= end:
                break
            if b_start > cursor:
                out.append((cursor, b_start))
            cursor = max(cursor, b_end)
        if cursor < end:
            out.append((cursor, end))
    return out


class ZonePartitioner:
    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('processing.zones')

    def collect(self, text: str, options: QuoteOptions) -> List[ProtectedRange]:
        rules = rules_for_families(html=options.html, markdown=options.markdown)
        found: List[ProtectedRange] = []
        for rule in rules:
            found.extend(self._matches(rule, text))
        return found

    @staticmethod
    def _matches(rule: ProtectRule, text: str) -> Iterable[ProtectedRange]:
        for m in rule.pattern.finditer(text):
            start, end = m.span()
            if start == end:
                continue
            subranges: Tuple[Span, ...] = ()
            if rule.label_group:
                l_start, l_end = m.span(rule.label_group)
                if l_start < l_end:
                    subranges = ((l_start, l_end),)
            yield ProtectedRange(start=start, end=end, subranges=subranges, source=rule.name)

    def merge(self, ranges: Sequence[ProtectedRange]) -> List[ProtectedRange]:
        groups: List[List[ProtectedRange]] = []
        group_end = -1
        for rng in sorted(ranges, key=lambda r: (r.start, r.end)):
            if groups and rng.start <= group_end:
                groups[-1].append(rng)
                group_end = max(group_end, rng.end)
            else:
                groups.append([rng])
                group_end = rng.end
        return [self._merge_group(g) for g in groups]

    @staticmethod
    def _merge_group(group: Sequence[ProtectedRange]) -> ProtectedRange:
        start = min(r.start for r in group)
        end = max(r.end for r in group)
        if len(group) == 1:
            return group[0]

        labels = _union(s for r in group for s in r.subranges)
        if labels:
            # every member's own protected pieces stay protected
            blocked = _union(
                piece
                for r in group
                for piece in _subtract([(r.start, r.end)], _union(r.subranges))
            )
            labels = _subtract(labels, blocked)
        sources = ','.join(sorted({r.source for r in group if r.source}))
        return ProtectedRange(start=start, end=end, subranges=tuple(labels), source=sources or None)

    def partition(self, text: str, options: QuoteOptions) -> List[Zone]:
        if not text:
            return []
        if not options.protects_markup:
            return [Zone('transformable', 0, len(text), text)]

        merged = self.merge(self.collect(text, options))
        self._log.debug('partition: %d protected range(s) over %d chars', len(merged), len(text))

        zones: List[Zone] = []
        pos = 0
        for rng in merged:
            self._emit(zones, text, 'transformable', pos, rng.start)
            cursor = rng.start
            for sub_start, sub_end in rng.subranges:
                self._emit(zones, text, 'protected', cursor, sub_start)
                self._emit(zones, text, 'transformable', sub_start, sub_end)
                cursor = sub_end
            self._emit(zones, text, 'protected', cursor, rng.end)
            pos = rng.end
        self._emit(zones, text, 'transformable', pos, len(text))
        return zones

    @staticmethod
    def _emit(zones: List[Zone], text: str, kind: ZoneKind, start: int, end: int) -> None:
        if start < end:
            zones.append(Zone(kind, start, end, text[start:end]))
