# microsyntax/grammar/source.py
"""원문 위치 표시 헬퍼: 오프셋 -> line:col, 캐럿(^) 스니펫."""

from __future__ import annotations
from typing import Tuple


def line_col(src: str, pos: int) -> Tuple[int, int]:
    """1-based (line, col) of offset `pos`."""
    line_start = src.rfind("\n", 0, pos) + 1
    return src.count("\n", 0, pos) + 1, pos - line_start + 1


def caret_snippet(src: str, pos: int) -> str:
    """The line holding `pos`, with a caret under that column."""
    line_start = src.rfind("\n", 0, pos) + 1
    line_end = src.find("\n", pos)
    if line_end < 0:
        line_end = len(src)
    return src[line_start:line_end] + "\n" + " " * (pos - line_start) + "^"
