from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates the typographic glyphs so rule tables, tests and
adapters share one source of truth.
"""

LDQ: str = '“'  # “ left double quotation mark
RDQ: str = '”'  # ” right double quotation mark
LSQ: str = '‘'  # ‘ left single quotation mark
RSQ: str = '’'  # ’ right single quotation mark / apostrophe
PRIME: str = '′'  # ′ feet
DPRIME: str = '″'  # ″ inches

EN_DASH: str = '–'
EM_DASH: str = '—'

DEFAULT_ENCODING: str = 'utf-8'
