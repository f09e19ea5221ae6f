"""Unit tests for translation direction routing.

Tests:
  - choose_direction(True) → ("JA", "EN")
  - choose_direction(False) → ("EN", "JA")
  - route() composes detection + direction
"""

from __future__ import annotations

import dataclasses

import pytest

from app.services.language.routing import (
    EN_TO_JA,
    JA_TO_EN,
    LanguagePair,
    choose_direction,
    route,
)


class TestChooseDirection:
    """Tests for choose_direction()."""

    def test_japanese_goes_to_english(self) -> None:
        pair = choose_direction(True)
        assert (pair.source, pair.target) == ("JA", "EN")

    def test_other_goes_to_japanese(self) -> None:
        pair = choose_direction(False)
        assert (pair.source, pair.target) == ("EN", "JA")


class TestRoute:
    """Tests for route()."""

    def test_hiragana_text(self) -> None:
        assert route("こんにちは") == JA_TO_EN

    def test_latin_text(self) -> None:
        assert route("hello") == EN_TO_JA

    def test_kanji_only_text_goes_to_japanese(self) -> None:
        assert route("漢字") == EN_TO_JA

    def test_empty_text(self) -> None:
        assert route("") == EN_TO_JA


class TestLanguagePair:
    """Tests for the LanguagePair value object."""

    def test_is_immutable(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            JA_TO_EN.source = "EN"  # type: ignore[misc]

    def test_equality_by_value(self) -> None:
        assert LanguagePair(source="JA", target="EN") == JA_TO_EN

    def test_str(self) -> None:
        assert str(EN_TO_JA) == "EN->JA"
