"""Classification tables and findings reports, as text or JSON-ready data."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import Any, TextIO

from htmlchars.classes import class_names, classify, format_code_point
from htmlchars.codepoints import EOF, is_upper_letter, to_lower_code_point
from htmlchars.scanner import Finding


def dump_table(code_points: Iterable[int], *, file: TextIO = sys.stderr) -> None:
    """Print one classification row per code point to *file*."""
    for cp in code_points:
        _dump_row(cp, file)


def dump_findings(findings: Iterable[Finding], filename: str, *, file: TextIO = sys.stderr) -> None:
    """Print findings as ``filename:line:col: message`` lines to *file*."""
    for finding in findings:
        pos = finding.position
        file.write(f"{filename}:{pos.line}:{pos.column}: {finding.message}\n")


def table_to_json(code_points: Iterable[int]) -> list[dict[str, Any]]:
    rows = []
    for cp in code_points:
        rows.append(
            {
                "code_point": cp,
                "name": format_code_point(cp),
                "classes": class_names(classify(cp)),
                "lower": _lower(cp),
            }
        )
    return rows


def findings_to_json(findings: Iterable[Finding]) -> list[dict[str, Any]]:
    return [
        {
            "code": f.code,
            "code_point": f.code_point,
            "name": format_code_point(f.code_point),
            "line": f.position.line,
            "column": f.position.column,
            "offset": f.position.offset,
        }
        for f in findings
    ]


def _lower(cp: int) -> int | None:
    if is_upper_letter(cp):
        return to_lower_code_point(cp)
    return None


def _glyph(cp: int) -> str:
    if cp == EOF or cp < 0 or cp > 0x10FFFF:
        return "\N{MIDDLE DOT}"
    ch = chr(cp)
    return ch if ch.isprintable() else "\N{MIDDLE DOT}"


def _dump_row(cp: int, f: TextIO) -> None:
    names = class_names(classify(cp))
    row = f"{format_code_point(cp):<10} {_glyph(cp)}  {' '.join(names) or '-'}"
    lower = _lower(cp)
    if lower is not None:
        row += f"  -> {format_code_point(lower)}"
    f.write(row + "\n")
