"""
Caret helpers: locate positions in sample sources by text.
"""

from __future__ import annotations


def caret_on(text: str, needle: str, occurrence: int = 1) -> int:
    """Offset of the first character of the n-th occurrence of ``needle``."""
    pos = -1
    for _ in range(occurrence):
        pos = text.index(needle, pos + 1)
    return pos


def line_col(text: str, offset: int) -> str:
    """1-based LINE:COL for ``offset``."""
    line = text.count("\n", 0, offset) + 1
    col = offset - (text.rfind("\n", 0, offset) + 1) + 1
    return f"{line}:{col}"
