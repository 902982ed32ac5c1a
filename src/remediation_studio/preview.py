from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional, Sequence

import pandas as pd

from .models import FileHandle

PREVIEW_ROW_LIMIT = 5
NULL_MARKER = "NULL"
TRUSTED_EMAIL_DOMAIN = "@example.com"

# Shown when a file is selected but no parsed rows are supplied.
SAMPLE_ROWS: list[dict[str, Any]] = [
    {"id": 1, "name": "John Doe", "email": "john@example.com", "age": 30, "department": "Engineering"},
    {"id": 2, "name": "Jane Smith", "email": "jane@example.com", "age": 28, "department": "Marketing"},
    {"id": 3, "name": "", "email": "bob@example.com", "age": None, "department": "Sales"},
    {"id": 4, "name": "Alice Johnson", "email": "alice@invalid", "age": 35, "department": "HR"},
    {"id": 5, "name": "Charlie Brown", "email": "charlie@example.com", "age": 42, "department": "Finance"},
]


class CellKind(str, Enum):
    PLAIN = "plain"
    NULL = "null"
    SUSPECT_EMAIL = "suspect_email"


def is_null(value: Any) -> bool:
    """None, the empty string and float NaN count as missing. Nothing else does."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, float):
        # NaN is how pandas reads an empty cell, so it renders as NULL too.
        return math.isnan(value)
    return False


def classify_cell(value: Any) -> CellKind:
    if is_null(value):
        return CellKind.NULL
    if isinstance(value, str) and "@" in value and TRUSTED_EMAIL_DOMAIN not in value:
        return CellKind.SUSPECT_EMAIL
    return CellKind.PLAIN


@dataclass(frozen=True)
class PreviewCell:
    value: Any
    kind: CellKind

    @property
    def display(self) -> str:
        return NULL_MARKER if self.kind == CellKind.NULL else str(self.value)


@dataclass(frozen=True)
class PreviewTable:
    file_name: str
    columns: list[str] = field(default_factory=list)
    rows: list[list[PreviewCell]] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.columns

    @property
    def caption(self) -> str:
        return f"Showing first {PREVIEW_ROW_LIMIT} rows of {self.file_name}"


def build_preview(
    file: Optional[FileHandle],
    rows: Optional[Sequence[Mapping[str, Any]]] = None,
) -> Optional[PreviewTable]:
    """Build the preview table for the selected file.

    Returns None when no file is selected. Columns come from the first row;
    keys missing from later rows render as NULL.
    """
    if file is None:
        return None

    data = list(rows) if rows is not None else SAMPLE_ROWS
    if not data:
        return PreviewTable(file_name=file.name)

    columns = list(data[0].keys())
    table_rows = [
        [PreviewCell(row.get(c), classify_cell(row.get(c))) for c in columns]
        for row in data[:PREVIEW_ROW_LIMIT]
    ]
    return PreviewTable(file_name=file.name, columns=columns, rows=table_rows)


def preview_frame(table: PreviewTable) -> pd.DataFrame:
    """DataFrame of display strings, NULL markers included."""
    return pd.DataFrame(
        [[cell.display for cell in row] for row in table.rows],
        columns=table.columns,
    )


CELL_STYLES = {
    CellKind.PLAIN: "",
    CellKind.NULL: "background-color: #DC3545; color: white; font-weight: 600;",
    CellKind.SUSPECT_EMAIL: "color: #FFC107;",
}


def preview_styles(table: PreviewTable) -> pd.DataFrame:
    """Per-cell CSS aligned with preview_frame, for use with Styler.apply(axis=None)."""
    return pd.DataFrame(
        [[CELL_STYLES[cell.kind] for cell in row] for row in table.rows],
        columns=table.columns,
    )
