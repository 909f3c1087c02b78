"""
Line Tokenizer - Split raw text into numbered lines
"""

from __future__ import annotations

import re

from models.diff import Line

# \r\n must be tried before the single-character terminators
LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[Line]:
    """Split text on \\r\\n, \\r or \\n into 1-indexed lines.

    A trailing terminator yields a trailing empty line ("a\\n" -> ["a", ""]),
    so both sides of a comparison stay consistently numbered. The empty
    string yields no lines at all.
    """
    if not text:
        return []

    return [
        Line(number=index + 1, text=segment)
        for index, segment in enumerate(LINE_BREAK_PATTERN.split(text))
    ]
