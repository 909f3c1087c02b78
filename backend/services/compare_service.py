"""
Compare Service - Side-by-side line comparison of two document versions
"""

from __future__ import annotations

from models.compare import CompareOptions
from models.diff import DiffResult, DiffRow
from services.line_differ import LineDiffer
from services.line_tokenizer import split_lines
from services.side_by_side import align_rows


def build_result(rows: list[DiffRow]) -> DiffResult:
    """Wrap aligned rows into the public result type, order preserved"""
    return DiffResult(rows=list(rows))


class CompareService:
    """Compare two texts line by line.

    Stateless between calls: every intermediate structure is local to one
    compare() invocation, so a single instance may be shared across threads.
    """

    def __init__(self, options: CompareOptions | None = None):
        self.options = options or CompareOptions()

    def compare(self, old_text: str, new_text: str) -> DiffResult:
        """Compare old_text against new_text.

        Both texts are tokenized with the same rule; no encoding or
        line-ending normalization happens here. Any pair of strings is valid
        input. Cost follows the line differ: O((N + M) * D).
        """
        old_lines = split_lines(old_text)
        new_lines = split_lines(new_text)

        old_side, new_side = LineDiffer(self.options).diff(old_lines, new_lines)
        rows = align_rows(old_side, new_side)

        return build_result(rows)


def compare(
    old_text: str,
    new_text: str,
    options: CompareOptions | None = None,
) -> DiffResult:
    """Convenience function for one-off comparisons"""
    return CompareService(options).compare(old_text, new_text)
