"""Models module - Pydantic data models"""

from .diff import (
    ClassifiedLine,
    DeletedRow,
    DiffResult,
    DiffRow,
    DiffStats,
    InsertedRow,
    Line,
    LineKind,
    ModifiedRow,
    UnchangedRow,
)
from .compare import (
    CompareOptions,
    CompareOptionsOverride,
    CompareRequest,
    CompareResponse,
)

__all__ = [
    # Diff models
    "ClassifiedLine",
    "DeletedRow",
    "DiffResult",
    "DiffRow",
    "DiffStats",
    "InsertedRow",
    "Line",
    "LineKind",
    "ModifiedRow",
    "UnchangedRow",
    # Compare API models
    "CompareOptions",
    "CompareOptionsOverride",
    "CompareRequest",
    "CompareResponse",
]
