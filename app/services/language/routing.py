"""Translation direction routing.

Japanese text is translated into English, everything else into Japanese.
Language codes are the upper-case codes DeepL expects for
``source_lang`` / ``target_lang``.
"""

from __future__ import annotations

from dataclasses import dataclass

from app.services.language.detection import contains_japanese_kana

JAPANESE = "JA"
ENGLISH = "EN"


@dataclass(frozen=True)
class LanguagePair:
    """Ordered (source, target) language codes for one translation."""

    source: str
    target: str

    def __str__(self) -> str:
        return f"{self.source}->{self.target}"


JA_TO_EN = LanguagePair(source=JAPANESE, target=ENGLISH)
EN_TO_JA = LanguagePair(source=ENGLISH, target=JAPANESE)


def choose_direction(is_japanese: bool) -> LanguagePair:
    """Map the kana detector's answer to a language pair."""
    return JA_TO_EN if is_japanese else EN_TO_JA


def route(text: str) -> LanguagePair:
    """Pick the translation direction for ``text``."""
    return choose_direction(contains_japanese_kana(text))
