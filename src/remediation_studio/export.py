from __future__ import annotations

import logging
import time
from datetime import date
from enum import Enum
from typing import Optional

from .config import Settings
from .errors import PreconditionError
from .models import FileHandle
from .tasks import CancelToken, Sleep, delayed

logger = logging.getLogger(__name__)

REMEDIATED_ROWS_BADGE = "1,239 rows"

EXPORT_NOTES = [
    "Exported files maintain original structure with applied changes",
    "Analysis report includes metadata, issues found, and remediation steps",
    "All exports are timestamped for version control",
]


class ExportFormat(str, Enum):
    CSV = "csv"
    XLSX = "xlsx"


class ExportKind(str, Enum):
    DATA = "data"
    REPORT = "report"


FORMAT_LABELS = {
    ExportFormat.CSV: "CSV (.csv)",
    ExportFormat.XLSX: "Excel (.xlsx)",
}


def export_filename(
    kind: ExportKind,
    fmt: ExportFormat = ExportFormat.CSV,
    original_name: Optional[str] = None,
    today: Optional[date] = None,
) -> str:
    """
    Name of the file an export would produce.

    Data exports keep the original filename (extension included) and append
    the chosen format; reports are dated PDFs regardless of format.
    """
    if kind == ExportKind.DATA:
        return f"remediated_{original_name or 'data'}.{ExportFormat(fmt).value}"
    day = today or date.today()
    return f"analysis_report_{day.isoformat()}.pdf"


class ExportController:
    """Export step. Produces filenames only; no bytes are written."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        sleep: Sleep = time.sleep,
        today: Optional[date] = None,
    ) -> None:
        self.settings = settings or Settings()
        self.sleep = sleep
        self.today = today
        self.format = ExportFormat.CSV
        self.is_exporting = False
        self.exported: list[str] = []

    def set_format(self, fmt: ExportFormat | str) -> None:
        self.format = ExportFormat(fmt)

    def handle_export(
        self,
        kind: ExportKind | str,
        *,
        remediation_applied: bool,
        original_file: Optional[FileHandle] = None,
        cancel: Optional[CancelToken] = None,
    ) -> Optional[str]:
        if not remediation_applied:
            raise PreconditionError("Apply remediation first to enable export.")
        if self.is_exporting:
            raise PreconditionError("An export is already in progress.")

        kind = ExportKind(kind)
        original_name = original_file.name if original_file is not None else None

        self.is_exporting = True
        try:
            outcome = delayed(
                self.settings.export_delay,
                lambda: export_filename(kind, self.format, original_name, self.today),
                sleep=self.sleep,
                cancel=cancel,
            )
        finally:
            self.is_exporting = False

        if not outcome.ok or outcome.value is None:
            logger.info("Export stopped: %s", outcome.error)
            return None

        logger.info("Downloading %s", outcome.value)
        self.exported.append(outcome.value)
        return outcome.value
