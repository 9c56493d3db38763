"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from htmlchars.scanner import Finding, scan


@pytest.fixture
def scan_source():
    """Return a helper that scans source and returns the findings."""

    def _scan(source: str, **kwargs) -> list[Finding]:
        return scan(source, **kwargs)

    return _scan


def assert_codes(findings: list[Finding], expected: list[str]) -> None:
    """Assert that the finding codes match the expected list."""
    actual = [f.code for f in findings]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_positions(findings: list[Finding], expected: list[tuple[int, int]]) -> None:
    """Assert that the findings sit at the expected (line, column) pairs."""
    actual = [(f.position.line, f.position.column) for f in findings]
    assert actual == expected, f"Expected {expected}, got {actual}"


def matching(predicate, lo: int = 0, hi: int = 0x7F) -> set[int]:
    """Return every code point in lo..hi for which predicate holds."""
    return {cp for cp in range(lo, hi + 1) if predicate(cp)}
