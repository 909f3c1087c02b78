"""
Diff Formatter - Plain-text rendering of a comparison result
"""

from __future__ import annotations

from models.diff import DiffResult

ROW_PREFIXES = {
    "unchanged": "  ",
    "inserted": "+ ",
    "deleted": "- ",
    "modified": "~ ",
}


def render_plain(result: DiffResult, include_summary: bool = True) -> str:
    """Render one prefixed line per row, optionally followed by a summary"""
    output = [f"{ROW_PREFIXES[row.kind]}{row.text}" for row in result.rows]

    if include_summary:
        output.append("")
        output.append(f"{result.change_count} difference(s) found")

    return "\n".join(output)
