"""HTML tokenizer code-point classification."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from htmlchars.scanner import Finding

__version__ = "0.1.0"


def check(source: str, ignore: tuple[str, ...] = ()) -> list[Finding]:
    """Scan source text and return its input-stream findings."""
    from htmlchars.scanner import scan

    return scan(source, ignore=ignore)
