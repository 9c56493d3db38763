"""Code-point constants and classification predicates used by HTML tokenizers.

Every function takes a single integer code point (or EOF) and is total: inputs
outside the Unicode range simply classify as False.
"""

from __future__ import annotations

EOF = -1
NULL = 0x00
TABULATION = 0x09
LINE_FEED = 0x0A
FORM_FEED = 0x0C
CARRIAGE_RETURN = 0x0D
SPACE = 0x20
EXCLAMATION_MARK = 0x21  # !
QUOTATION_MARK = 0x22  # "
NUMBER_SIGN = 0x23  # #
AMPERSAND = 0x26  # &
APOSTROPHE = 0x27  # '
LEFT_PARENTHESIS = 0x28  # (
RIGHT_PARENTHESIS = 0x29  # )
ASTERISK = 0x2A  # *
HYPHEN_MINUS = 0x2D  # -
SOLIDUS = 0x2F  # /
DIGIT_0 = 0x30
DIGIT_9 = 0x39
COLON = 0x3A  # :
SEMICOLON = 0x3B  # ;
LESS_THAN_SIGN = 0x3C  # <
EQUALS_SIGN = 0x3D  # =
GREATER_THAN_SIGN = 0x3E  # >
QUESTION_MARK = 0x3F  # ?
LATIN_CAPITAL_A = 0x41
LATIN_CAPITAL_D = 0x44
LATIN_CAPITAL_F = 0x46
LATIN_CAPITAL_X = 0x58
LATIN_CAPITAL_Z = 0x5A
LEFT_SQUARE_BRACKET = 0x5B  # [
REVERSE_SOLIDUS = 0x5C  # \
RIGHT_SQUARE_BRACKET = 0x5D  # ]
GRAVE_ACCENT = 0x60  # `
LATIN_SMALL_A = 0x61
LATIN_SMALL_F = 0x66
LATIN_SMALL_X = 0x78
LATIN_SMALL_Z = 0x7A
LEFT_CURLY_BRACKET = 0x7B  # {
RIGHT_CURLY_BRACKET = 0x7D  # }
NULL_REPLACEMENT = 0xFFFD


def is_whitespace(cp: int) -> bool:
    """Return True if cp is ASCII whitespace (TAB, LF, FF, CR or SPACE)."""
    return (
        cp == TABULATION
        or cp == LINE_FEED
        or cp == FORM_FEED
        or cp == CARRIAGE_RETURN
        or cp == SPACE
    )


def is_upper_letter(cp: int) -> bool:
    """Return True if cp is an ASCII uppercase letter."""
    return LATIN_CAPITAL_A <= cp <= LATIN_CAPITAL_Z


def is_lower_letter(cp: int) -> bool:
    """Return True if cp is an ASCII lowercase letter."""
    return LATIN_SMALL_A <= cp <= LATIN_SMALL_Z


def is_letter(cp: int) -> bool:
    """Return True if cp is an ASCII letter."""
    return is_lower_letter(cp) or is_upper_letter(cp)


def is_digit(cp: int) -> bool:
    """Return True if cp is an ASCII digit."""
    return DIGIT_0 <= cp <= DIGIT_9


def is_upper_hex_digit(cp: int) -> bool:
    """Return True if cp is one of A-F."""
    return LATIN_CAPITAL_A <= cp <= LATIN_CAPITAL_F


def is_lower_hex_digit(cp: int) -> bool:
    """Return True if cp is one of a-f."""
    return LATIN_SMALL_A <= cp <= LATIN_SMALL_F


def is_hex_digit(cp: int) -> bool:
    """Return True if cp is an ASCII hexadecimal digit."""
    return is_digit(cp) or is_upper_hex_digit(cp) or is_lower_hex_digit(cp)


def is_control(cp: int) -> bool:
    """Return True if cp is a C0 or C1 control."""
    return 0 <= cp <= 0x1F or 0x7F <= cp <= 0x9F


def is_surrogate(cp: int) -> bool:
    """Return True if cp is a high or low surrogate."""
    return 0xD800 <= cp <= 0xDFFF


def is_surrogate_pair(cp: int) -> bool:
    """Return True if cp is in the low-surrogate range U+DC00..U+DFFF.

    Only the trailing half of a pair is matched; this does not check that two
    code points combine.
    """
    return 0xDC00 <= cp <= 0xDFFF


def is_non_character(cp: int) -> bool:
    """Return True if cp is a Unicode noncharacter.

    That is U+FDD0..U+FDEF, plus the last two code points of each of the 17
    planes (U+xFFFE and U+xFFFF).
    """
    # Negative ints have every high bit set under &, so bound below as well.
    return 0xFDD0 <= cp <= 0xFDEF or ((cp & 0xFFFE) == 0xFFFE and 0 <= cp <= 0x10FFFF)


def to_lower_code_point(cp: int) -> int:
    """Return the lowercase form of an ASCII uppercase letter.

    The caller must have checked ``is_upper_letter(cp)`` first. Any other
    input is shifted by 0x20 all the same and the result is meaningless.
    """
    return cp + 0x20
