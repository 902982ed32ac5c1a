from __future__ import annotations

import math

import pytest

from remediation_studio.models import FileHandle
from remediation_studio.preview import (
    NULL_MARKER,
    SAMPLE_ROWS,
    CellKind,
    build_preview,
    classify_cell,
    preview_frame,
    preview_styles,
)


@pytest.mark.parametrize("value", [None, "", float("nan")])
def test_missing_values_render_null(value) -> None:
    assert classify_cell(value) == CellKind.NULL


@pytest.mark.parametrize("value", [0, 0.0, False, " ", "NULL", "0", [], "john@example.com", 42])
def test_other_values_are_not_null(value) -> None:
    assert classify_cell(value) != CellKind.NULL


def test_email_heuristic() -> None:
    assert classify_cell("alice@invalid") == CellKind.SUSPECT_EMAIL
    assert classify_cell("bob@example.com") == CellKind.PLAIN
    assert classify_cell("no at sign") == CellKind.PLAIN


def test_no_file_renders_nothing() -> None:
    assert build_preview(None) is None
    assert build_preview(None, rows=[{"a": 1}]) is None


def test_sample_rows_used_when_no_data_supplied(csv_file: FileHandle) -> None:
    table = build_preview(csv_file)
    assert table is not None
    assert table.columns == ["id", "name", "email", "age", "department"]
    assert len(table.rows) == 5
    assert table.caption == "Showing first 5 rows of customers.csv"

    kinds = {(r, c): cell.kind for r, row in enumerate(table.rows) for c, cell in enumerate(row)}
    assert kinds[(2, 1)] == CellKind.NULL  # name ""
    assert kinds[(2, 3)] == CellKind.NULL  # age None
    assert kinds[(3, 2)] == CellKind.SUSPECT_EMAIL  # alice@invalid
    assert sum(1 for k in kinds.values() if k == CellKind.NULL) == 2


def test_supplied_rows_are_truncated_to_five(csv_file: FileHandle) -> None:
    rows = [{"n": i} for i in range(12)]
    table = build_preview(csv_file, rows)
    assert [row[0].value for row in table.rows] == [0, 1, 2, 3, 4]


def test_columns_come_from_first_row(csv_file: FileHandle) -> None:
    rows = [{"a": 1}, {"a": 2, "b": 3}]
    table = build_preview(csv_file, rows)
    assert table.columns == ["a"]


def test_empty_rows_give_empty_table(csv_file: FileHandle) -> None:
    table = build_preview(csv_file, rows=[])
    assert table is not None
    assert table.is_empty
    assert table.rows == []


def test_frame_and_styles_line_up(csv_file: FileHandle) -> None:
    table = build_preview(csv_file, SAMPLE_ROWS)
    frame = preview_frame(table)
    styles = preview_styles(table)

    assert frame.shape == styles.shape == (5, 5)
    assert frame.loc[2, "name"] == NULL_MARKER
    assert frame.loc[2, "age"] == NULL_MARKER
    assert frame.loc[0, "age"] == "30"
    assert "background-color" in styles.loc[2, "name"]
    assert styles.loc[3, "email"] != ""
    assert styles.loc[0, "email"] == ""


def test_nan_from_pandas_counts_as_null(csv_file: FileHandle) -> None:
    table = build_preview(csv_file, [{"x": math.nan, "y": 1.5}])
    assert [c.kind for c in table.rows[0]] == [CellKind.NULL, CellKind.PLAIN]
