"""
Side-by-Side Aligner - Merge two length-aligned classified sequences into diff rows
"""

from __future__ import annotations

from models.diff import (
    ClassifiedLine,
    DeletedRow,
    DiffRow,
    InsertedRow,
    LineKind,
    ModifiedRow,
    UnchangedRow,
)

# Slots that can take part in a same-position replacement
_OLD_CHANGED = (LineKind.DELETED, LineKind.MODIFIED)
_NEW_CHANGED = (LineKind.INSERTED, LineKind.MODIFIED)


def align_rows(
    old_side: list[ClassifiedLine],
    new_side: list[ClassifiedLine],
) -> list[DiffRow]:
    """Walk both sequences positionally and emit one row per aligned slot.

    Per position, in this order:
      1. old changed and new changed at the same slot -> Modified
      2. old Deleted -> Deleted
      3. new Inserted -> Inserted
      4. old Placeholder -> no row, new counter advances
      5. new Placeholder -> no row, old counter advances
      6. otherwise -> Unchanged (old side text)

    Both counters start at 1. Pure function of its inputs.
    """
    if len(old_side) != len(new_side):
        raise ValueError(
            f"Classified sequences are not length-aligned "
            f"(old={len(old_side)}, new={len(new_side)})"
        )

    rows: list[DiffRow] = []
    old_line = new_line = 1

    for old, new in zip(old_side, new_side):
        if old.kind in _OLD_CHANGED and new.kind in _NEW_CHANGED:
            rows.append(
                ModifiedRow(
                    text=old.text,
                    new_text=new.text,
                    old_line_number=old_line,
                    new_line_number=new_line,
                )
            )
            old_line += 1
            new_line += 1
        elif old.kind == LineKind.DELETED:
            rows.append(DeletedRow(text=old.text, old_line_number=old_line))
            old_line += 1
        elif new.kind == LineKind.INSERTED:
            rows.append(InsertedRow(text=new.text, new_line_number=new_line))
            new_line += 1
        elif old.kind == LineKind.PLACEHOLDER:
            new_line += 1
        elif new.kind == LineKind.PLACEHOLDER:
            old_line += 1
        else:
            rows.append(
                UnchangedRow(
                    text=old.text,
                    old_line_number=old_line,
                    new_line_number=new_line,
                )
            )
            old_line += 1
            new_line += 1

    return rows
