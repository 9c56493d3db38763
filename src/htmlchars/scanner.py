"""Input-stream scanner — reports code points an HTML tokenizer flags as parse errors."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from htmlchars.classes import format_code_point
from htmlchars.codepoints import (
    CARRIAGE_RETURN,
    EOF,
    LINE_FEED,
    NULL,
    NULL_REPLACEMENT,
    is_control,
    is_non_character,
    is_surrogate,
    is_whitespace,
)
from htmlchars.errors import ScanError

# WHATWG parse error names
SURROGATE_IN_INPUT_STREAM = "surrogate-in-input-stream"
NONCHARACTER_IN_INPUT_STREAM = "noncharacter-in-input-stream"
CONTROL_CHARACTER_IN_INPUT_STREAM = "control-character-in-input-stream"
UNEXPECTED_NULL_CHARACTER = "unexpected-null-character"

ERROR_CODES = frozenset(
    {
        SURROGATE_IN_INPUT_STREAM,
        NONCHARACTER_IN_INPUT_STREAM,
        CONTROL_CHARACTER_IN_INPUT_STREAM,
        UNEXPECTED_NULL_CHARACTER,
    }
)


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based code point offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Finding:
    """A single code point reported by the scanner."""

    code: str
    code_point: int
    position: Position

    @property
    def message(self) -> str:
        return f"{self.code}: {format_code_point(self.code_point)}"


def error_code(cp: int) -> str | None:
    """Return the parse error name for cp, or None if the tokenizer accepts it."""
    if cp == NULL:
        return UNEXPECTED_NULL_CHARACTER
    if is_surrogate(cp):
        return SURROGATE_IN_INPUT_STREAM
    if is_non_character(cp):
        return NONCHARACTER_IN_INPUT_STREAM
    if is_control(cp) and not is_whitespace(cp):
        return CONTROL_CHARACTER_IN_INPUT_STREAM
    return None


def iter_code_points(source: str) -> Iterator[int]:
    """Yield each code point of source, then EOF once."""
    for ch in source:
        yield ord(ch)
    yield EOF


class Scanner:
    """Walk source text and collect Findings for disallowed code points."""

    def __init__(self, source: str, *, ignore: Iterable[str] = (), strict: bool = False) -> None:
        ignored = frozenset(ignore)
        unknown = ignored - ERROR_CODES
        if unknown:
            raise ValueError(f"unknown error code(s): {', '.join(sorted(unknown))}")
        self._source = source
        self._ignore = ignored
        self._strict = strict
        self._pos = 0
        self._line = 1
        self._col = 1
        self._findings: list[Finding] = []

    def scan(self) -> list[Finding]:
        """Scan the full source and return findings in source order."""
        while self._pos < len(self._source):
            cp = self._peek()
            code = error_code(cp)
            if code is not None and code not in self._ignore:
                self._report(code, cp)
            self._advance()
        return self._findings

    def _current_pos(self) -> Position:
        return Position(self._line, self._col, self._pos)

    def _peek(self, offset: int = 0) -> int:
        idx = self._pos + offset
        if idx < len(self._source):
            return ord(self._source[idx])
        return EOF

    def _advance(self) -> None:
        cp = self._peek()
        self._pos += 1
        # CRLF is one line break: the CR only advances the column
        if cp == LINE_FEED or (cp == CARRIAGE_RETURN and self._peek() != LINE_FEED):
            self._line += 1
            self._col = 1
        else:
            self._col += 1

    def _report(self, code: str, cp: int) -> None:
        finding = Finding(code, cp, self._current_pos())
        if self._strict:
            raise ScanError(finding.message, finding.position, self._source)
        self._findings.append(finding)


def scan(source: str, *, ignore: Iterable[str] = (), strict: bool = False) -> list[Finding]:
    """Convenience function: scan source text and return the findings."""
    return Scanner(source, ignore=ignore, strict=strict).scan()


def sanitize(source: str) -> str:
    """Replace NULL and every surrogate in source with U+FFFD."""
    out = []
    for cp in iter_code_points(source):
        if cp == EOF:
            break
        if cp == NULL or is_surrogate(cp):
            cp = NULL_REPLACEMENT
        out.append(chr(cp))
    return "".join(out)
