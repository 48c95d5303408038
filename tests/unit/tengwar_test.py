"""Tests for the Tengwar transliteration table."""

from __future__ import annotations

import pytest

from chronicler.core.tengwar import REVERSE_MAP, TENGWAR_MAP, detransliterate, is_tengwar, transliterate


class TestTable:
    @pytest.mark.parametrize(
        ("latin", "glyph"),
        [
            ("t", "\uE010"),
            ("k", "\uE012"),
            ("nw", "\uE01F"),
            ("z", "\uE024"),
            ("zh", "\uE025"),
            ("s", "\uE026"),
            ("h", "\uE027"),
            ("lh", "\uE029"),
            ("a", "\uE030"),
            ("ú", "\uE039"),
            (":", "\uE044"),
            (";", "\uE045"),
            ("-", "\uE046"),
            ("\u2014", "\uE047"),
            ("dh", "\uE050"),
            ("rh", "\uE051"),
            ("ph", "\uE052"),
        ],
    )
    def test_code_points(self, latin: str, glyph: str) -> None:
        assert TENGWAR_MAP[latin] == glyph
        assert transliterate(latin) == glyph

    def test_no_c_or_ngw_spellings(self) -> None:
        assert "c" not in TENGWAR_MAP
        assert "ngw" not in TENGWAR_MAP

    def test_glyphs_are_unique(self) -> None:
        glyphs = [g for g in TENGWAR_MAP.values() if g != " "]
        assert len(glyphs) == len(set(glyphs))

    def test_space_has_no_reverse_entry(self) -> None:
        assert TENGWAR_MAP[" "] == " "
        assert " " not in REVERSE_MAP


class TestTransliterate:
    def test_longest_match_wins(self) -> None:
        assert transliterate("th") == "\uE018"
        assert transliterate("ng") == "\uE01E"
        assert transliterate("ngw") == "\uE01E\uE023"

    def test_case_insensitive(self) -> None:
        assert transliterate("TA") == transliterate("ta")

    def test_unknown_characters_pass_through(self) -> None:
        assert transliterate("x9q") == "x9q"
        assert transliterate("c") == "c"

    def test_space_and_punctuation(self) -> None:
        assert transliterate("a, e.") == "\uE030\uE041 \uE031\uE040"
        assert transliterate(":;-") == "\uE044\uE045\uE046"

    def test_sindarin_word(self) -> None:
        assert transliterate("Edhel") == "\uE031\uE050\uE031\uE028"

    def test_non_string_or_empty(self) -> None:
        assert transliterate("") == ""
        assert transliterate(None) == ""
        assert transliterate(42) == ""


class TestDetransliterate:
    def test_round_trip(self) -> None:
        assert detransliterate(transliterate("mellon")) == "mellon"
        assert detransliterate(transliterate("edhel sui")) == "edhel sui"

    def test_unmapped_characters_pass_through(self) -> None:
        assert detransliterate("x \uE010") == "x t"

    def test_non_string(self) -> None:
        assert detransliterate(None) == ""


def test_is_tengwar() -> None:
    assert is_tengwar(transliterate("elen"))
    assert not is_tengwar("elen")
