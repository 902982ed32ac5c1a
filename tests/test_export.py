from __future__ import annotations

import logging
from datetime import date

import pytest

from remediation_studio.config import Settings
from remediation_studio.errors import PreconditionError
from remediation_studio.export import ExportController, ExportFormat, ExportKind, export_filename
from remediation_studio.models import FileHandle
from remediation_studio.tasks import CancelToken


def test_data_filename_keeps_original_name() -> None:
    assert export_filename(ExportKind.DATA, ExportFormat.CSV, "customers.csv") == "remediated_customers.csv.csv"
    assert export_filename(ExportKind.DATA, ExportFormat.XLSX, "customers.csv") == "remediated_customers.csv.xlsx"
    assert export_filename(ExportKind.DATA, ExportFormat.CSV, None) == "remediated_data.csv"


def test_report_filename_is_dated_pdf() -> None:
    day = date(2024, 3, 9)
    assert export_filename(ExportKind.REPORT, ExportFormat.XLSX, "x.csv", today=day) == "analysis_report_2024-03-09.pdf"


def test_export_disabled_until_remediation_applied(csv_file: FileHandle) -> None:
    controller = ExportController(Settings.instant())
    with pytest.raises(PreconditionError):
        controller.handle_export(ExportKind.DATA, remediation_applied=False, original_file=csv_file)
    assert controller.exported == []


def test_export_logs_filename(csv_file: FileHandle, sleep, caplog) -> None:
    controller = ExportController(Settings(export_delay=2.0), sleep=sleep, today=date(2024, 1, 2))
    controller.set_format("xlsx")

    with caplog.at_level(logging.INFO, logger="remediation_studio.export"):
        name = controller.handle_export("data", remediation_applied=True, original_file=csv_file)
        report = controller.handle_export(ExportKind.REPORT, remediation_applied=True, original_file=csv_file)

    assert name == "remediated_customers.csv.xlsx"
    assert report == "analysis_report_2024-01-02.pdf"
    assert controller.exported == [name, report]
    assert sleep.calls == [2.0, 2.0]
    assert f"Downloading {name}" in caplog.text
    assert f"Downloading {report}" in caplog.text
    assert controller.is_exporting is False


def test_cancelled_export_produces_nothing(csv_file: FileHandle) -> None:
    controller = ExportController(Settings.instant())
    token = CancelToken()
    token.cancel()
    assert controller.handle_export(ExportKind.DATA, remediation_applied=True, cancel=token) is None
    assert controller.exported == []


def test_invalid_format_is_rejected() -> None:
    controller = ExportController(Settings.instant())
    with pytest.raises(ValueError):
        controller.set_format("pdf")
