from dataclasses import dataclass, field, fields
from re import Pattern
from typing import Any, Literal, Mapping

ZoneKind = Literal['protected', 'transformable']
RuleCategory = Literal['prime', 'leading', 'double', 'single']


@dataclass(frozen=True)
class QuoteOptions:
    """Switches for a single transform call."""
    primes: bool = True
    html: bool = False
    markdown: bool = False

    @property
    def protects_markup(self) -> bool:
        return self.html or self.markdown

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> 'QuoteOptions':
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ValueError(f'unknown quote option(s): {", ".join(unknown)}')
        return cls(**{k: bool(v) for k, v in values.items()})


@dataclass(frozen=True)
class Rule:
    name: str
    pattern: Pattern[str]
    replacement: str
    category: RuleCategory


@dataclass(frozen=True)
class ProtectedRange:
    """Half-open [start, end) span that the rule engine must not touch.

    ``subranges`` are spans inside the range that are rewritten anyway
    (link and image labels).
    """
    start: int
    end: int
    subranges: tuple[tuple[int, int], ...] = ()
    source: str | None = None


@dataclass(frozen=True)
class Zone:
    kind: ZoneKind
    start: int
    end: int
    text: str = field(repr=False)

    @property
    def is_protected(self) -> bool:
        return self.kind == 'protected'
