"""String reversal helpers."""

from __future__ import annotations

from collections.abc import Iterator

__all__ = ["reverse", "reversed_chars"]


def reverse(text):
    """Return the text with its characters in reverse order."""
    return text[::-1]


def reversed_chars(text) -> Iterator[str]:
    """Yield the characters of the text from last to first."""
    yield from reversed(text)