from __future__ import annotations

import unittest

from smartquotify.constants import DPRIME, LDQ, LSQ, PRIME, RDQ, RSQ
from smartquotify.core.models import QuoteOptions
from smartquotify.processing.quote_rules import PRIME_RULE_COUNT, QUOTE_RULES
from smartquotify.processing.text_ops import QuoteTransformer

RULES = {rule.name: rule for rule in QUOTE_RULES}


def _apply(name: str, text: str) -> str:
    """Run a single rule in isolation."""
    rule = RULES[name]
    return rule.pattern.sub(rule.replacement, text)


# --------------------------------------------------------------------------- #
#  1. Table shape                                                             #
# --------------------------------------------------------------------------- #
class TableOrderTests(unittest.TestCase):
    def test_prime_rules_lead_the_table(self) -> None:
        self.assertEqual(PRIME_RULE_COUNT, 3)
        self.assertEqual(
            [r.name for r in QUOTE_RULES[:3]],
            ['feet-inches', 'feet', 'inches'],
        )
        self.assertTrue(all(r.category != 'prime' for r in QUOTE_RULES[3:]))

    def test_leading_apostrophes_precede_quote_rules(self) -> None:
        names = [r.name for r in QUOTE_RULES]
        self.assertLess(names.index('year-patent'), names.index('double-open'))
        self.assertLess(names.index('leading-contraction'), names.index('single-open'))
        self.assertLess(names.index('mid-word'), names.index('single-close'))
        self.assertLess(names.index('possessive-s'), names.index('single-open'))

    def test_catch_alls_close_each_family(self) -> None:
        names = [r.name for r in QUOTE_RULES]
        self.assertEqual(names.index('double-bare') + 1, names.index('mid-word'))
        self.assertEqual(names[-1], 'single-bare')

    def test_disabling_primes_drops_only_prime_prefix(self) -> None:
        engine = QuoteTransformer()
        self.assertEqual(engine.active_rules(QuoteOptions()), QUOTE_RULES)
        self.assertEqual(engine.active_rules(QuoteOptions(primes=False)), QUOTE_RULES[PRIME_RULE_COUNT:])
        self.assertEqual(engine.active_rules(QuoteOptions(primes=False))[0].name, 'year-patent')

    def test_rule_names_are_unique(self) -> None:
        self.assertEqual(len(RULES), len(QUOTE_RULES))

    def test_no_rule_matches_smart_glyphs(self) -> None:
        glyphs = f'a{LDQ}b{RDQ} c{LSQ}d{RSQ} 6{PRIME}2{DPRIME} s{RSQ} '
        for rule in QUOTE_RULES:
            self.assertIsNone(rule.pattern.search(glyphs), rule.name)


# --------------------------------------------------------------------------- #
#  2. Measurement rules                                                       #
# --------------------------------------------------------------------------- #
class PrimeRuleTests(unittest.TestCase):
    def test_feet_and_inches(self) -> None:
        self.assertEqual(_apply('feet-inches', '6\'2"'), f'6{PRIME}2{DPRIME}')

    def test_feet_only(self) -> None:
        self.assertEqual(_apply('feet', "100' setback"), f'100{PRIME} setback')

    def test_feet_skips_numeric_range(self) -> None:
        for text in ("10-20'", "10–20'", "10—20'"):
            with self.subTest(text=text):
                self.assertEqual(_apply('feet', text), text)

    def test_inches_only(self) -> None:
        self.assertEqual(_apply('inches', 'a 12" ruler'), f'a 12{DPRIME} ruler')

    def test_inches_skips_numeric_range(self) -> None:
        self.assertEqual(_apply('inches', '"pages 10-20"'), '"pages 10-20"')

    def test_unicode_digits_count_as_digits(self) -> None:
        self.assertEqual(_apply('feet', "١٠' wall"), f"١٠{PRIME} wall")


# --------------------------------------------------------------------------- #
#  3. Leading apostrophes                                                     #
# --------------------------------------------------------------------------- #
class LeadingApostropheTests(unittest.TestCase):
    def test_patent_and_year_shorthand(self) -> None:
        self.assertEqual(_apply('year-patent', "the '604 patent"), f'the {RSQ}604 patent')
        self.assertEqual(_apply('year-patent', "'92 was good"), f'{RSQ}92 was good')
        self.assertEqual(_apply('year-patent', "one\n'08"), f'one\n{RSQ}08')

    def test_year_rule_needs_leading_position(self) -> None:
        self.assertEqual(_apply('year-patent', "x'92"), "x'92")

    def test_contractions_case_insensitive(self) -> None:
        self.assertEqual(_apply('leading-contraction', "'Twas night"), f'{RSQ}Twas night')
        self.assertEqual(_apply('leading-contraction', "rock 'n roll"), f'rock {RSQ}n roll')
        self.assertEqual(_apply('leading-contraction', "give 'em hell"), f'give {RSQ}em hell')

    def test_contraction_needs_word_boundary(self) -> None:
        self.assertEqual(_apply('leading-contraction', "'emma'"), "'emma'")


# --------------------------------------------------------------------------- #
#  4. Quote rules in isolation                                                #
# --------------------------------------------------------------------------- #
class QuoteRuleTests(unittest.TestCase):
    def test_double_open_contexts(self) -> None:
        self.assertEqual(_apply('double-open', '(the "Seller")'), f'(the {LDQ}Seller")')
        self.assertEqual(_apply('double-open', 'a--"b'), f'a--{LDQ}b')
        self.assertEqual(_apply('double-open', '["x'), f'[{LDQ}x')

    def test_double_open_requires_following_text(self) -> None:
        self.assertEqual(_apply('double-open', 'a " b'), 'a " b')

    def test_double_close_contexts(self) -> None:
        self.assertEqual(_apply('double-close', 'Seller")'), f'Seller{RDQ})')
        self.assertEqual(_apply('double-close', 'end"--'), f'end{RDQ}--')
        self.assertEqual(_apply('double-close', 'end"'), f'end{RDQ}')

    def test_double_bare_opens(self) -> None:
        self.assertEqual(_apply('double-bare', ' " '), f' {LDQ} ')

    def test_mid_word_apostrophe(self) -> None:
        self.assertEqual(_apply('mid-word', "don't"), f'don{RSQ}t')
        self.assertEqual(_apply('mid-word', "O'Brien"), f'O{RSQ}Brien')

    def test_possessive_after_s(self) -> None:
        self.assertEqual(_apply('possessive-s', "the plaintiffs' motion"), f'the plaintiffs{RSQ} motion')
        self.assertEqual(_apply('possessive-s', "BOSS'"), f'BOSS{RSQ}')

    def test_single_open_and_close(self) -> None:
        self.assertEqual(_apply('single-open', "say 'hi"), f'say {LSQ}hi')
        self.assertEqual(_apply('single-close', "hi' there"), f'hi{RSQ} there')

    def test_single_bare_is_apostrophe(self) -> None:
        self.assertEqual(_apply('single-bare', " ' "), f' {RSQ} ')


if __name__ == '__main__':
    unittest.main()
