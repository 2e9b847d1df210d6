from __future__ import annotations

"""Library entry points: ``transform`` and ``partition``.

Both functions are pure. They share one stateless engine and one stateless
partitioner, so concurrent callers need no locking.
"""

from typing import Any, List, Mapping, Optional, Union

from smartquotify.core.interfaces import TextTransformerProtocol, ZonePartitionerProtocol
from smartquotify.core.models import QuoteOptions, Zone
from smartquotify.processing.text_ops import QuoteTransformer
from smartquotify.processing.zones import ZonePartitioner

OptionsLike = Union[QuoteOptions, Mapping[str, Any], None]

_ENGINE: TextTransformerProtocol = QuoteTransformer()
_PARTITIONER: ZonePartitionerProtocol = ZonePartitioner()


def resolve_options(options: OptionsLike = None, **flags: Any) -> QuoteOptions:
    """Normalize ``options`` (dataclass, mapping or None) and apply keyword overrides."""
    if options is None:
        base: dict[str, Any] = {}
    elif isinstance(options, QuoteOptions):
        base = {'primes': options.primes, 'html': options.html, 'markdown': options.markdown}
    elif isinstance(options, Mapping):
        base = dict(options)
    else:
        raise TypeError(f'options must be QuoteOptions, a mapping or None, not {type(options).__name__}')
    base.update({k: v for k, v in flags.items() if v is not None})
    return QuoteOptions.from_mapping(base)


def partition(text: str, options: OptionsLike = None, **flags: Any) -> List[Zone]:
    """Return the protected/transformable zones ``transform`` would use."""
    return _PARTITIONER.partition(text, resolve_options(options, **flags))


def transform(text: str, options: OptionsLike = None, **flags: Any) -> str:
    """Convert straight quotes, apostrophes and measurement marks in ``text``.

    Args:
        text: Any string; empty input comes back unchanged.
        options: ``QuoteOptions``, a mapping with ``primes``/``html``/``markdown``
            keys, or None for the defaults (primes on, no markup protection).
        **flags: Keyword overrides for individual options.

    Returns:
        The rewritten string. Markup recognized under ``html``/``markdown`` is
        passed through untouched, except for link and image labels.

    Each transformable span is rewritten on its own. A quote that touches
    protected markup sees no context across it, so ``"<em>no</em>".``
    under ``html`` comes back with an opening glyph on both sides.
    """
    opts = resolve_options(options, **flags)
    if not text:
        return text
    if not opts.protects_markup:
        return _ENGINE.apply(text, opts)
    return ''.join(
        zone.text if zone.is_protected else _ENGINE.apply(zone.text, opts)
        for zone in _PARTITIONER.partition(text, opts)
    )


smartquotify = transform
