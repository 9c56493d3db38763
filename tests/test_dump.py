"""Test classification tables and findings reports."""

from __future__ import annotations

import io

from htmlchars.codepoints import EOF
from htmlchars.dump import dump_findings, dump_table, findings_to_json, table_to_json
from htmlchars.scanner import scan


def _table(code_points: list[int]) -> list[str]:
    buf = io.StringIO()
    dump_table(code_points, file=buf)
    return buf.getvalue().splitlines()


class TestDumpTable:
    def test_uppercase_shows_lower_form(self):
        (row,) = _table([ord("A")])
        assert row.startswith("U+0041")
        assert "upper-letter upper-hex-digit" in row
        assert row.endswith("-> U+0061")

    def test_lowercase_has_no_arrow(self):
        (row,) = _table([ord("q")])
        assert "->" not in row
        assert "lower-letter" in row

    def test_unclassified(self):
        (row,) = _table([ord("<")])
        assert row.split()[-1] == "-"

    def test_eof_row(self):
        (row,) = _table([EOF])
        assert row.startswith("EOF")
        assert "\N{MIDDLE DOT}" in row

    def test_control_glyph_is_placeholder(self):
        (row,) = _table([0x01])
        assert "\x01" not in row
        assert "control" in row


class TestDumpFindings:
    def test_lines(self):
        buf = io.StringIO()
        dump_findings(scan("a\n\0"), "page.html", file=buf)
        assert buf.getvalue() == "page.html:2:1: unexpected-null-character: U+0000\n"

    def test_no_findings(self):
        buf = io.StringIO()
        dump_findings([], "page.html", file=buf)
        assert buf.getvalue() == ""


class TestJson:
    def test_table_to_json(self):
        (row,) = table_to_json([ord("F")])
        assert row == {
            "code_point": 0x46,
            "name": "U+0046",
            "classes": ["upper-letter", "upper-hex-digit"],
            "lower": 0x66,
        }

    def test_table_lower_none(self):
        (row,) = table_to_json([0xFFFF])
        assert row["lower"] is None
        assert row["classes"] == ["noncharacter"]

    def test_findings_to_json(self):
        (item,) = findings_to_json(scan("xy\x7f"))
        assert item == {
            "code": "control-character-in-input-stream",
            "code_point": 0x7F,
            "name": "U+007F",
            "line": 1,
            "column": 3,
            "offset": 2,
        }
