"""Diff-related data models"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class LineKind(str, Enum):
    """Classification of a line slot after the LCS pass"""

    UNCHANGED = "unchanged"
    INSERTED = "inserted"
    DELETED = "deleted"
    MODIFIED = "modified"
    PLACEHOLDER = "placeholder"


class Line(BaseModel):
    """A single line of a source text"""

    model_config = ConfigDict(frozen=True)

    number: int  # 1-indexed within its own text
    text: str


class ClassifiedLine(BaseModel):
    """A line slot on one side of the length-aligned sequences"""

    model_config = ConfigDict(frozen=True)

    kind: LineKind
    line: Line | None = None  # None only for placeholders

    @property
    def text(self) -> str:
        return self.line.text if self.line is not None else ""

    @classmethod
    def placeholder(cls) -> "ClassifiedLine":
        return cls(kind=LineKind.PLACEHOLDER)


class UnchangedRow(BaseModel):
    """Line present, identical, on both sides"""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unchanged"] = "unchanged"
    text: str
    old_line_number: int
    new_line_number: int


class InsertedRow(BaseModel):
    """Line present only in the new text"""

    model_config = ConfigDict(frozen=True)

    kind: Literal["inserted"] = "inserted"
    text: str
    old_line_number: None = None
    new_line_number: int


class DeletedRow(BaseModel):
    """Line present only in the old text"""

    model_config = ConfigDict(frozen=True)

    kind: Literal["deleted"] = "deleted"
    text: str
    old_line_number: int
    new_line_number: None = None


class ModifiedRow(BaseModel):
    """Old line replaced by a new line at the same aligned position"""

    model_config = ConfigDict(frozen=True)

    kind: Literal["modified"] = "modified"
    text: str  # old side text
    new_text: str
    old_line_number: int
    new_line_number: int


DiffRow = Annotated[
    Union[UnchangedRow, InsertedRow, DeletedRow, ModifiedRow],
    Field(discriminator="kind"),
]


class DiffStats(BaseModel):
    """Row counts per kind"""

    unchanged: int = 0
    inserted: int = 0
    deleted: int = 0
    modified: int = 0

    @property
    def changes(self) -> int:
        return self.inserted + self.deleted + self.modified


class DiffResult(BaseModel):
    """Complete side-by-side comparison of two texts, in document order"""

    rows: list[DiffRow] = []

    def stats(self) -> DiffStats:
        counts = {"unchanged": 0, "inserted": 0, "deleted": 0, "modified": 0}
        for row in self.rows:
            counts[row.kind] += 1
        return DiffStats(**counts)

    @property
    def change_count(self) -> int:
        return sum(1 for row in self.rows if row.kind != "unchanged")

    @property
    def has_changes(self) -> bool:
        return any(row.kind != "unchanged" for row in self.rows)
