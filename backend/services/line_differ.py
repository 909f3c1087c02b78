"""
Line Diff Engine - Classify old/new lines against their longest common subsequence

Uses Myers' O(ND) shortest-edit-script algorithm: time O((N + M) * D) and
memory O(D^2) for the recorded frontiers, where N and M are the line counts
and D is the edit distance. Two completely different texts hit the worst
case D = N + M, i.e. quadratic time and memory; callers embedding this in an
interactive surface should bound input size first.
"""

from __future__ import annotations

from typing import Callable, Sequence

from models.compare import CompareOptions
from models.diff import ClassifiedLine, Line, LineKind


def _shortest_edit(a: Sequence[str], b: Sequence[str]) -> list[list[int]]:
    """Run the forward Myers search, recording the frontier after each round.

    trace[d][k + d] is the furthest x reached on diagonal k (k = x - y)
    using exactly d edits.
    """
    n, m = len(a), len(b)
    max_d = n + m
    offset = max_d + 1
    v = [0] * (2 * max_d + 3)
    trace: list[list[int]] = []

    for d in range(max_d + 1):
        for k in range(-d, d + 1, 2):
            if k == -d or (k != d and v[offset + k - 1] < v[offset + k + 1]):
                x = v[offset + k + 1]  # step down: insertion
            else:
                x = v[offset + k - 1] + 1  # step right: deletion
            y = x - k

            while x < n and y < m and a[x] == b[y]:
                x += 1
                y += 1

            v[offset + k] = x

            if x >= n and y >= m:
                trace.append(v[offset - d : offset + d + 1])
                return trace

        trace.append(v[offset - d : offset + d + 1])

    return trace


def common_subsequence(a: Sequence[str], b: Sequence[str]) -> list[tuple[int, int]]:
    """Return the (a_index, b_index) pairs of a longest common subsequence.

    Indices are 0-based and strictly increasing on both sides. The search
    always runs with the lexicographically smaller sequence first, so
    common_subsequence(b, a) is exactly common_subsequence(a, b) with each
    pair swapped. Among equally long candidates the choice therefore does
    not depend on argument order.
    """
    if not a or not b:
        return []

    a, b = list(a), list(b)
    if a > b:
        return [(i, j) for j, i in _myers_pairs(b, a)]
    return _myers_pairs(a, b)


def _myers_pairs(a: list[str], b: list[str]) -> list[tuple[int, int]]:
    """Backtrack the recorded frontiers into matched index pairs.

    Deletions are preferred over insertions when two edit paths have equal
    length.
    """
    trace = _shortest_edit(a, b)
    x, y = len(a), len(b)
    pairs: list[tuple[int, int]] = []

    for d in range(len(trace) - 1, 0, -1):
        prev = trace[d - 1]
        k = x - y

        if k == -d or (k != d and prev[k - 1 + d - 1] < prev[k + 1 + d - 1]):
            prev_k = k + 1
        else:
            prev_k = k - 1

        prev_x = prev[prev_k + d - 1]
        prev_y = prev_x - prev_k

        # Snake back to the end of the single edit
        while x > prev_x and y > prev_y:
            x -= 1
            y -= 1
            pairs.append((x, y))

        x, y = prev_x, prev_y

    # d == 0: leading run of equal lines
    while x > 0 and y > 0:
        x -= 1
        y -= 1
        pairs.append((x, y))

    pairs.reverse()
    return pairs


class LineDiffer:
    """Produce the two length-aligned classified sequences for the aligner"""

    def __init__(self, options: CompareOptions | None = None):
        self.options = options or CompareOptions()

    def _key_function(self) -> Callable[[str], str]:
        ignore_whitespace = self.options.ignore_whitespace
        ignore_case = self.options.ignore_case

        def key(text: str) -> str:
            if ignore_whitespace:
                text = text.strip()
            if ignore_case:
                text = text.casefold()
            return text

        return key

    def diff(
        self,
        old_lines: list[Line],
        new_lines: list[Line],
    ) -> tuple[list[ClassifiedLine], list[ClassifiedLine]]:
        """Classify every line and pad change runs with placeholders.

        Between consecutive common anchors the run of deleted old lines and
        the run of inserted new lines are placed side by side; the shorter
        run is padded with placeholders so both sequences reach the next
        anchor at the same index.
        """
        key = self._key_function()
        anchors = common_subsequence(
            [key(line.text) for line in old_lines],
            [key(line.text) for line in new_lines],
        )

        old_side: list[ClassifiedLine] = []
        new_side: list[ClassifiedLine] = []
        old_index = new_index = 0

        # Sentinel anchor flushes the trailing change run
        for old_anchor, new_anchor in [*anchors, (len(old_lines), len(new_lines))]:
            deleted = old_lines[old_index:old_anchor]
            inserted = new_lines[new_index:new_anchor]

            for slot in range(max(len(deleted), len(inserted))):
                if slot < len(deleted):
                    old_side.append(ClassifiedLine(kind=LineKind.DELETED, line=deleted[slot]))
                else:
                    old_side.append(ClassifiedLine.placeholder())
                if slot < len(inserted):
                    new_side.append(ClassifiedLine(kind=LineKind.INSERTED, line=inserted[slot]))
                else:
                    new_side.append(ClassifiedLine.placeholder())

            if old_anchor < len(old_lines):
                old_side.append(ClassifiedLine(kind=LineKind.UNCHANGED, line=old_lines[old_anchor]))
                new_side.append(ClassifiedLine(kind=LineKind.UNCHANGED, line=new_lines[new_anchor]))

            old_index, new_index = old_anchor + 1, new_anchor + 1

        return old_side, new_side
