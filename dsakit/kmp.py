"""Knuth-Morris-Pratt failure table and string periods."""

from __future__ import annotations

__all__ = ["prefix_function", "smallest_period"]


def prefix_function(text: str) -> list[int]:
    """Return the KMP failure table of text.

    The table has len(text) + 1 entries: entry 0 is -1 and entry i is the
    length of the longest proper prefix of text[:i] that is also its suffix.
    """
    table = [0] * (len(text) + 1)
    table[0] = -1
    jump = -1
    for i, ch in enumerate(text):
        while jump != -1 and ch != text[jump]:
            jump = table[jump]
        jump += 1
        table[i + 1] = jump
    return table


def smallest_period(text: str) -> int:
    """Return the length of the shortest block whose repetition gives text."""
    if not text:
        raise ValueError("an empty string has no period")
    n = len(text)
    candidate = n - prefix_function(text)[n]
    return candidate if n % candidate == 0 else n