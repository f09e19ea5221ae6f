"""Japanese kana script detection.

Decides whether a piece of text is Japanese by looking for hiragana or
katakana. Kanji alone is not enough: it is shared with Chinese, so
kanji-only text is treated as not Japanese.

The character classes below follow the ``Script`` property of the Unicode
Character Database (Scripts.txt, Unicode 15.1), not the block ranges. Code
points that live inside the kana blocks but belong to script ``Common`` or
``Inherited`` (U+3099..U+309C voicing marks, U+30A0 double hyphen, U+30FB
middle dot, U+30FC prolonged sound mark) are therefore not kana.

The tables are pinned to Unicode 15.1. Later releases add kana (e.g. Hiragana
U+1B123, Katakana U+1B124..U+1B128 and U+1B168); refresh both tables from
Scripts.txt whenever the target Unicode version changes.
"""

import re

_HIRAGANA_RANGES = (
    "\u3041-\u3096"
    "\u309d-\u309f"
    "\U0001b001-\U0001b11f"
    "\U0001b132"
    "\U0001b150-\U0001b152"
    "\U0001f200"
)

_KATAKANA_RANGES = (
    "\u30a1-\u30fa"
    "\u30fd-\u30ff"
    "\u31f0-\u31ff"
    "\u32d0-\u32fe"
    "\u3300-\u3357"
    "\uff66-\uff6f"
    "\uff71-\uff9d"
    "\U0001aff0-\U0001aff3"
    "\U0001aff5-\U0001affb"
    "\U0001affd-\U0001affe"
    "\U0001b000"
    "\U0001b120-\U0001b122"
    "\U0001b155"
    "\U0001b164-\U0001b167"
)

HIRAGANA_PATTERN = re.compile(f"[{_HIRAGANA_RANGES}]")
KATAKANA_PATTERN = re.compile(f"[{_KATAKANA_RANGES}]")
KANA_PATTERN = re.compile(f"[{_HIRAGANA_RANGES}{_KATAKANA_RANGES}]")


def is_hiragana(char: str) -> bool:
    """True if the single character ``char`` is in the Hiragana script."""
    return HIRAGANA_PATTERN.fullmatch(char) is not None


def is_katakana(char: str) -> bool:
    """True if the single character ``char`` is in the Katakana script."""
    return KATAKANA_PATTERN.fullmatch(char) is not None


def contains_japanese_kana(text: str) -> bool:
    """Return True if any code point of ``text`` is hiragana or katakana.

    Scans left to right and stops at the first kana. Empty text, and text made
    only of Latin letters, digits, punctuation or kanji, yields False.
    """
    return KANA_PATTERN.search(text) is not None
