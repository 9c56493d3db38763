"""Test combined classification flags and code-point text helpers."""

import pytest

from htmlchars.classes import (
    HEX_DIGIT,
    LETTER,
    CodePointClass,
    class_names,
    classify,
    format_code_point,
    parse_code_point,
)
from htmlchars.codepoints import EOF


class TestClassify:
    def test_upper_hex_letter(self):
        flags = classify(ord("B"))
        assert flags == CodePointClass.UPPER_LETTER | CodePointClass.UPPER_HEX_DIGIT
        assert flags & LETTER
        assert flags & HEX_DIGIT

    def test_lower_letter_outside_hex(self):
        assert classify(ord("x")) == CodePointClass.LOWER_LETTER

    def test_digit(self):
        assert classify(ord("7")) == CodePointClass.DIGIT

    def test_whitespace_control(self):
        assert classify(0x09) == CodePointClass.WHITESPACE | CodePointClass.CONTROL

    def test_space_is_not_control(self):
        assert classify(0x20) == CodePointClass.WHITESPACE

    def test_low_surrogate(self):
        assert classify(0xDC00) == CodePointClass.SURROGATE | CodePointClass.LOW_SURROGATE

    def test_high_surrogate(self):
        assert classify(0xD800) == CodePointClass.SURROGATE

    def test_noncharacter(self):
        assert classify(0xFFFE) == CodePointClass.NONCHARACTER

    def test_eof_is_empty(self):
        assert classify(EOF) == CodePointClass(0)

    def test_plain_punctuation_is_empty(self):
        assert not classify(ord("<"))


class TestClassNames:
    def test_order_and_spelling(self):
        assert class_names(classify(ord("a"))) == ["lower-letter", "lower-hex-digit"]

    def test_empty(self):
        assert class_names(CodePointClass(0)) == []

    def test_low_surrogate_name(self):
        assert class_names(classify(0xDFFF)) == ["surrogate", "low-surrogate"]


class TestFormatCodePoint:
    def test_ascii(self):
        assert format_code_point(0x41) == "U+0041"

    def test_astral(self):
        assert format_code_point(0x1FFFE) == "U+1FFFE"

    def test_eof(self):
        assert format_code_point(EOF) == "EOF"

    def test_other_negative(self):
        assert format_code_point(-5) == "-5"


class TestParseCodePoint:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("U+0041", 0x41),
            ("u+fffd", 0xFFFD),
            ("0x1F", 0x1F),
            ("65", 65),
            ("7", 7),
            ("A", 0x41),
            ("é", 0xE9),
            ("EOF", EOF),
            ("eof", EOF),
        ],
    )
    def test_valid(self, text, expected):
        assert parse_code_point(text) == expected

    @pytest.mark.parametrize("text", ["", "U+", "U+XYZ", "0x", "12a", "ab"])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            parse_code_point(text)
