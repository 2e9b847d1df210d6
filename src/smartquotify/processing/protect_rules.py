"""
protect_rules – Markup patterns whose matches the rule engine must not rewrite.

PROTECT_RULES maps a markup family ('html', 'markdown') to its patterns.
Each entry carries an optional named group ("label") whose span stays
transformable inside the otherwise protected match, so link and image
labels still get smart quotes while their URLs do not.

These are recognizers, not parsers: they err on the side of protecting
too much rather than too little.
"""

import re
from dataclasses import dataclass
from typing import Dict, Optional, Pattern, Tuple


@dataclass(frozen=True)
class ProtectRule:
    name: str
    pattern: Pattern[str]
    label_group: Optional[str] = None


def _fence(char: str) -> Pattern[str]:
    # closing fence: same character, at least as long as the opener;
    # an unclosed fence runs to the end of the text.
    # a backtick fence's info string may not contain backticks
    c = re.escape(char)
    info = r'[^`\n]*' if char == '`' else r'[^\n]*'
    return re.compile(
        rf'^[ \t]{{0,3}}(?P<fence>{c}{{3,}}){info}(?=\n|\Z)'
        rf'(?:\n(?:[\s\S]*?\n)?[ \t]{{0,3}}(?P=fence){c}*[ \t]*(?=\n|\Z)|[\s\S]*\Z)',
        re.M,
    )


_ATTR_BODY = r'''(?:[^<>"']|"[^"]*"|'[^']*')*'''

PROTECT_RULES: Dict[str, Tuple[ProtectRule, ...]] = {
    'html': (
        ProtectRule('html-comment', re.compile(r'<!--[\s\S]*?(?:-->|\Z)')),
        # script and style bodies are code, not prose; an unclosed one runs to the end
        ProtectRule(
            'html-raw-text',
            re.compile(r'<(?P<tag>script|style)\b[^>]*>[\s\S]*?(?:</(?P=tag)\s*>|\Z)', re.I),
        ),
        ProtectRule('html-declaration', re.compile(r'<(?:![A-Za-z\[]|\?)[^>]*>')),
        ProtectRule('html-tag', re.compile(rf'</?[A-Za-z][\w:.-]*(?:\s{_ATTR_BODY})?/?>')),
    ),
    'markdown': (
        ProtectRule('md-fence-backtick', _fence('`')),
        ProtectRule('md-fence-tilde', _fence('~')),
        ProtectRule('md-code-span', re.compile(r'(?<!`)(?P<ticks>`+)(?!`)[\s\S]*?(?<!`)(?P=ticks)(?!`)')),
        ProtectRule(
            'md-link',
            re.compile(r'!?\[(?P<label>[^\[\]]*)\]\([^()]*(?:\([^()]*\)[^()]*)*\)'),
            label_group='label',
        ),
        ProtectRule('md-autolink', re.compile(r'<https?://[^\s<>]*>', re.I)),
    ),
}


def rules_for_families(*, html: bool, markdown: bool) -> Tuple[ProtectRule, ...]:
    """Return the protection patterns for the requested markup families."""
    active: list[ProtectRule] = []
    if html:
        active.extend(PROTECT_RULES['html'])
    if markdown:
        active.extend(PROTECT_RULES['markdown'])
    return tuple(active)
