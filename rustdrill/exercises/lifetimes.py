"""Picking the longer of two strings."""

from __future__ import annotations


def longest(x: str, y: str) -> str:
    """Return whichever string has more UTF-8 bytes; the second one on a tie."""
    return x if len(x.encode("utf-8")) > len(y.encode("utf-8")) else y