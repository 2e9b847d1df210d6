import logging
from typing import Optional, Sequence

from smartquotify.core.models import QuoteOptions, Rule
from smartquotify.logging.helpers import get_logger, is_trace_enabled, trace_rules
from smartquotify.processing.quote_rules import PRIME_RULE_COUNT, QUOTE_RULES


class QuoteTransformer:
    def __init__(
        self,
        *,
        logger: Optional[logging.Logger] = None,
        rules: Sequence[Rule] = QUOTE_RULES,
        prime_rule_count: int = PRIME_RULE_COUNT,
    ) -> None:
        """Ordered regex rewriting of straight quotes into smart glyphs.

        ``prime_rule_count`` is the length of the leading measurement prefix
        of ``rules`` that ``options.primes = False`` skips.
        """
        if not 0 <= prime_rule_count <= len(rules):
            raise ValueError('prime_rule_count must fall within the rule table')
        self._log = logger or get_logger('processing.textops')
        self._rules = tuple(rules)
        self._prime_count = prime_rule_count

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    def active_rules(self, options: Optional[QuoteOptions] = None) -> tuple[Rule, ...]:
        opts = options or QuoteOptions()
        return self._rules if opts.primes else self._rules[self._prime_count:]

    def apply(self, text: str, options: Optional[QuoteOptions] = None) -> str:
        if not text:
            return text

        tracing = is_trace_enabled()
        result = text
        # each rule sees the full output of the previous one
        for rule in self.active_rules(options):
            if tracing:
                result, count = rule.pattern.subn(rule.replacement, result)
                if count:
                    trace_rules(self._log, 'rule applied', rule=rule.name, count=count)
            else:
                result = rule.pattern.sub(rule.replacement, result)
        return result
