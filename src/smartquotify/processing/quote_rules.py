"""
quote_rules – Ordered rewrite rules for straight-to-smart quote conversion.

QUOTE_RULES is the single source of truth for the engine. Evaluation order
is part of the contract:

  1. Prime marks (measurements) – before any quote rule can claim ' or "
  2. Leading apostrophes (abbreviated years, patent numbers, 'twas …)
  3. Double quotes (opening, closing, catch-alls)
  4. Single quotes (mid-word, possessive, closing, opening, catch-alls)

Each pattern matches only the ASCII ' or " characters, never a glyph that
an earlier rule produced.
"""

import re
from typing import Tuple

from smartquotify.constants import DPRIME, EM_DASH, EN_DASH, LDQ, LSQ, PRIME, RDQ, RSQ
from smartquotify.core.models import Rule, RuleCategory

_DASHES = EN_DASH + EM_DASH

# before an opening quote: start of line, whitespace, opening bracket, dash, or "--"
_OPENER = rf'(^|[\s(\[{{{_DASHES}]|--)'
# after a closing quote: whitespace, closing punctuation, dash, "--", or end of line
_CLOSER = rf'(?=[\s)\]}};:,.!?{_DASHES}]|--|$)'
# digit run not itself preceded by a digit or a range dash (10-20' is a quote)
_MEASURE = rf'(?<![\d\-{_DASHES}])(\d+)'


def _rule(name: str, category: RuleCategory, pattern: str, replacement: str, flags: int = 0) -> Rule:
    return Rule(name=name, pattern=re.compile(pattern, flags), replacement=replacement, category=category)


QUOTE_RULES: Tuple[Rule, ...] = (
    # measurements: 6'2", 100', 12"
    _rule('feet-inches', 'prime', r'(\d)\'(\d+)"', rf'\1{PRIME}\2{DPRIME}'),
    _rule('feet', 'prime', _MEASURE + "'", rf'\1{PRIME}'),
    _rule('inches', 'prime', _MEASURE + '"', rf'\1{DPRIME}'),

    # the '604 patent, class of '92, the '90s
    _rule('year-patent', 'leading', r"(^|\s)'(\d)", rf'\1{RSQ}\2', re.M),
    _rule(
        'leading-contraction', 'leading',
        r"(^|\s)'(twas|tis|em|til|cause|bout|n)\b", rf'\1{RSQ}\2',
        re.M | re.I,
    ),

    _rule('double-open', 'double', _OPENER + r'"(?=\S)', rf'\1{LDQ}', re.M),
    _rule('double-close', 'double', r'(\S)"' + _CLOSER, rf'\1{RDQ}', re.M),
    _rule('double-close-fallback', 'double', r'(\S)"', rf'\1{RDQ}'),
    _rule('double-open-fallback', 'double', r'"(\S)', rf'{LDQ}\1'),
    # bare leftovers such as the second half of ""
    _rule('double-bare', 'double', r'"', LDQ),

    # don't, O'Brien, it's
    _rule('mid-word', 'single', r"(\w)'(\w)", rf'\1{RSQ}\2'),
    # the plaintiffs' motion
    _rule('possessive-s', 'single', r"(s)'(?=[\s)\]};:,.!?]|$)", rf'\1{RSQ}', re.I),
    _rule('single-close', 'single', r"(\S)'" + _CLOSER, rf'\1{RSQ}', re.M),
    _rule('single-open', 'single', _OPENER + r"'(?=\S)", rf'\1{LSQ}', re.M),
    _rule('single-close-fallback', 'single', r"(\S)'", rf'\1{RSQ}'),
    _rule('single-open-fallback', 'single', r"'(\S)", rf'{LSQ}\1'),
    _rule('single-bare', 'single', r"'", RSQ),
)

PRIME_RULE_COUNT = sum(1 for r in QUOTE_RULES if r.category == 'prime')

