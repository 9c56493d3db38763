"""Error types with formatted source context."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from htmlchars.scanner import Position


class ScanError(Exception):
    """Raised in strict mode on the first reported code point, with source context."""

    def __init__(self, message: str, position: Position, source: str) -> None:
        self.message = message
        self.position = position
        self.source = source
        super().__init__(self.format())

    def format(self, filename: str = "<input>") -> str:
        # Same line breaks the scanner counts; splitlines() also splits on FF etc.
        lines = self.source.replace("\r\n", "\n").replace("\r", "\n").split("\n")
        line_idx = self.position.line - 1
        col = self.position.column

        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx]
        else:
            source_line = ""

        # Non-printable code points render as a middle dot
        source_line = "".join(ch if ch.isprintable() else "\N{MIDDLE DOT}" for ch in source_line)

        pad = " " * (col - 1)
        line_num = str(self.position.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.position.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}^"
        )
