"""Compare API data models"""

from __future__ import annotations

from pydantic import BaseModel

from .diff import DiffResult, DiffStats


class CompareOptions(BaseModel):
    """Line equality options, applied to the comparison key only"""

    ignore_whitespace: bool = False  # strip leading/trailing whitespace
    ignore_case: bool = False


class CompareOptionsOverride(BaseModel):
    """Per-request overrides; unset fields fall back to persisted defaults"""

    ignore_whitespace: bool | None = None
    ignore_case: bool | None = None


class CompareRequest(BaseModel):
    """Request to compare two versions of a document"""

    old_text: str
    new_text: str
    options: CompareOptionsOverride | None = None


class CompareResponse(BaseModel):
    """Comparison result with summary counts"""

    result: DiffResult
    stats: DiffStats
