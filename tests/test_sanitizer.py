"""Tests for input sanitization."""

from __future__ import annotations

import pytest

from hello_form.sanitizer import (
    escape_html,
    normalize_whitespace,
    sanitize_date,
    sanitize_input,
    sanitize_name,
)

SAMPLES = [
    "  John   Doe  ",
    "<script>alert('x')</script>",
    "José-María O'Neil",
    "a 1 b",
    "Zoë\t\n  Smith 42 !!",
    "  ",
    "e\u0301lodie",
    "\u1100" "1" "\u1161",
    "",
]


class TestNormalizeWhitespace:
    def test_trims_and_collapses(self) -> None:
        assert normalize_whitespace("  John   Doe  ") == "John Doe"

    def test_collapses_tabs_and_newlines(self) -> None:
        assert normalize_whitespace("a\t\tb\n c") == "a b c"

    @pytest.mark.parametrize("value", [None, 42, ["a"], b"bytes"])
    def test_non_string_is_empty(self, value: object) -> None:
        assert normalize_whitespace(value) == ""


class TestSanitizeName:
    def test_keeps_allowed_characters(self) -> None:
        assert sanitize_name("Mary-Jane O'Brien") == "Mary-Jane O'Brien"

    def test_keeps_accented_letters(self) -> None:
        assert sanitize_name("Renée Françoise") == "Renée Françoise"

    def test_deletes_markup_characters(self) -> None:
        assert sanitize_name("<b>Bob</b>") == "bBobb"

    def test_deletes_digits_without_leaving_double_space(self) -> None:
        assert sanitize_name("Agent 007 Bond") == "Agent Bond"

    def test_composes_decomposed_accents(self) -> None:
        assert sanitize_name("e\u0301lodie") == "\u00e9lodie"

    def test_composes_letters_joined_by_a_deletion(self) -> None:
        # conjoining jamo separated by a digit compose into one syllable
        assert sanitize_name("\u1100" "1" "\u1161") == "\uac00"

    def test_non_string_is_empty(self) -> None:
        assert sanitize_name(None) == ""

    @pytest.mark.parametrize("value", SAMPLES)
    def test_output_only_contains_allowed_characters(self, value: str) -> None:
        result = sanitize_name(value)
        assert all(ch.isalpha() or ch in " -'" for ch in result)

    @pytest.mark.parametrize("value", SAMPLES)
    def test_idempotent(self, value: str) -> None:
        once = sanitize_name(value)
        assert sanitize_name(once) == once


class TestEscapeHtml:
    def test_escapes_markup(self) -> None:
        result = escape_html('<a href="/x">')
        assert "<" not in result
        assert ">" not in result
        assert '"' not in result
        assert "/" not in result
        assert "=" not in result

    def test_ampersand_escaped_once(self) -> None:
        assert escape_html("&") == "&amp;"

    def test_extra_characters(self) -> None:
        assert escape_html("/`=") == "&#x2F;&#x60;&#x3D;"

    def test_quotes(self) -> None:
        result = escape_html("'\"")
        assert "'" not in result
        assert '"' not in result

    def test_existing_entity_is_escaped_not_preserved(self) -> None:
        assert escape_html("&lt;") == "&amp;lt;"

    def test_returns_plain_str(self) -> None:
        assert type(escape_html("<")) is str

    def test_non_string_is_empty(self) -> None:
        assert escape_html(None) == ""


class TestSanitizeDate:
    def test_valid_date_unchanged(self) -> None:
        assert sanitize_date("2024-01-15") == "2024-01-15"

    def test_leap_day(self) -> None:
        assert sanitize_date("2024-02-29") == "2024-02-29"
        assert sanitize_date("2023-02-29") == ""

    def test_matches_pattern_but_not_a_date(self) -> None:
        assert sanitize_date("2024-13-40") == ""

    @pytest.mark.parametrize(
        "value", ["2024-1-5", "20240115", " 2024-01-15", "2024-01-15T00:00", "not-a-date", ""]
    )
    def test_strict_pattern(self, value: str) -> None:
        assert sanitize_date(value) == ""

    def test_non_string_is_empty(self) -> None:
        assert sanitize_date(20240115) == ""


class TestSanitizeInput:
    def test_normalizes_then_escapes(self) -> None:
        assert sanitize_input("  <b>  hi </b> ") == "&lt;b&gt; hi &lt;&#x2F;b&gt;"

    def test_non_string_is_empty(self) -> None:
        assert sanitize_input(None) == ""
