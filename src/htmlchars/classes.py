"""Combined classification flags and code-point text helpers."""

from __future__ import annotations

from enum import Flag, auto

from htmlchars.codepoints import (
    EOF,
    is_control,
    is_digit,
    is_hex_digit,
    is_lower_hex_digit,
    is_lower_letter,
    is_non_character,
    is_surrogate,
    is_surrogate_pair,
    is_upper_hex_digit,
    is_upper_letter,
    is_whitespace,
)


class CodePointClass(Flag):
    # ASCII
    WHITESPACE = auto()  # TAB LF FF CR SPACE
    UPPER_LETTER = auto()  # A-Z
    LOWER_LETTER = auto()  # a-z
    DIGIT = auto()  # 0-9
    UPPER_HEX_DIGIT = auto()  # A-F
    LOWER_HEX_DIGIT = auto()  # a-f

    # Fixed Unicode ranges
    CONTROL = auto()  # C0 + C1
    SURROGATE = auto()  # D800-DFFF
    LOW_SURROGATE = auto()  # DC00-DFFF
    NONCHARACTER = auto()


LETTER = CodePointClass.UPPER_LETTER | CodePointClass.LOWER_LETTER
HEX_DIGIT = CodePointClass.DIGIT | CodePointClass.UPPER_HEX_DIGIT | CodePointClass.LOWER_HEX_DIGIT


_PREDICATES = (
    (CodePointClass.WHITESPACE, is_whitespace),
    (CodePointClass.UPPER_LETTER, is_upper_letter),
    (CodePointClass.LOWER_LETTER, is_lower_letter),
    (CodePointClass.DIGIT, is_digit),
    (CodePointClass.UPPER_HEX_DIGIT, is_upper_hex_digit),
    (CodePointClass.LOWER_HEX_DIGIT, is_lower_hex_digit),
    (CodePointClass.CONTROL, is_control),
    (CodePointClass.SURROGATE, is_surrogate),
    (CodePointClass.LOW_SURROGATE, is_surrogate_pair),
    (CodePointClass.NONCHARACTER, is_non_character),
)


def classify(cp: int) -> CodePointClass:
    """Return the union of every class whose predicate holds for cp."""
    flags = CodePointClass(0)
    for member, predicate in _PREDICATES:
        if predicate(cp):
            flags |= member
    return flags


def class_names(flags: CodePointClass) -> list[str]:
    """Return hyphenated member names set in flags, in declaration order."""
    return [
        member.name.lower().replace("_", "-")
        for member, _ in _PREDICATES
        if member in flags
    ]


def format_code_point(cp: int) -> str:
    """Render cp as U+XXXX, or EOF for the end-of-input sentinel."""
    if cp == EOF:
        return "EOF"
    if cp < 0:
        return str(cp)
    return f"U+{cp:04X}"


def parse_code_point(text: str) -> int:
    """Parse EOF, U+hex, 0xhex, a decimal number, or a single character.

    Raises ValueError on anything else.
    """
    if not text:
        raise ValueError("empty code point")
    if text.upper() == "EOF":
        return EOF

    if text[:2] in ("U+", "u+", "0x", "0X"):
        digits = text[2:]
        if not digits or not all(is_hex_digit(ord(ch)) for ch in digits):
            raise ValueError(f"invalid hexadecimal code point {text!r}")
        return int(digits, 16)

    if len(text) > 1:
        if not all(is_digit(ord(ch)) for ch in text):
            raise ValueError(f"invalid code point {text!r}")
        return int(text, 10)

    # Single digits parse as numbers, not characters
    if is_digit(ord(text)):
        return int(text, 10)
    return ord(text)
