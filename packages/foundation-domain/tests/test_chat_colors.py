"""Tests for chat colour code translation."""

from __future__ import annotations

import pytest

from selvis.foundation.domain.chat_colors import COLOR_CHAR, translate_alternate_color_codes


@pytest.mark.unit
class TestTranslateAlternateColorCodes:
    def test_translates_code(self) -> None:
        assert translate_alternate_color_codes("&aEnabled") == "§aEnabled"

    def test_lowercases_code(self) -> None:
        assert translate_alternate_color_codes("&CStop") == "§cStop"

    def test_multiple_codes(self) -> None:
        assert translate_alternate_color_codes("&6Max &lbold&r.") == "§6Max §lbold§r."

    def test_invalid_code_kept(self) -> None:
        assert translate_alternate_color_codes("Tom &Jerry") == "Tom &Jerry"

    def test_trailing_alt_char_kept(self) -> None:
        assert translate_alternate_color_codes("100&") == "100&"

    def test_double_alt_char(self) -> None:
        assert translate_alternate_color_codes("&&a") == "&§a"

    def test_custom_alt_char(self) -> None:
        assert translate_alternate_color_codes("$aHi &a", alt_char="$") == "§aHi &a"

    def test_plain_text_unchanged(self) -> None:
        assert translate_alternate_color_codes("255,0,0") == "255,0,0"

    def test_empty(self) -> None:
        assert translate_alternate_color_codes("") == ""

    def test_idempotent(self) -> None:
        once = translate_alternate_color_codes("&aYour visualizer has been enabled.")
        assert translate_alternate_color_codes(once) == once
        assert once.count(COLOR_CHAR) == 1
