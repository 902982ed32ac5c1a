from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Optional

from .analysis import AnalysisPanel
from .config import Settings
from .errors import PreconditionError
from .export import ExportController, ExportFormat, ExportKind
from .models import AnalysisResult, FileHandle, RemediationOption
from .remediation import RemediationChecklist
from .state import AppState
from .summary import SummaryController
from .tasks import CancelToken, Sleep, TaskOutcome


@dataclass
class Studio:
    """Composition root: the page state plus one controller per panel.

    Panels report back through the AppState callbacks only. The remediation
    checklist is created when the first analysis result arrives.
    """

    settings: Settings = field(default_factory=Settings)
    sleep: Sleep = time.sleep
    today: Optional[date] = None
    state: AppState = field(default_factory=AppState)
    analysis: AnalysisPanel = field(init=False)
    summary: SummaryController = field(init=False)
    export: ExportController = field(init=False)
    remediation: Optional[RemediationChecklist] = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.analysis = AnalysisPanel(self.settings)
        self.summary = SummaryController(self.settings, sleep=self.sleep)
        self.export = ExportController(self.settings, sleep=self.sleep, today=self.today)

    def select_file(self, handle: Optional[FileHandle]) -> None:
        self.state.select_file(handle)

    def _on_analysis_complete(self, result: AnalysisResult) -> None:
        self.state.on_analysis_complete(result)
        if self.remediation is None:
            self.remediation = RemediationChecklist()

    def run_analysis(
        self,
        *,
        on_progress: Optional[Callable[[int], None]] = None,
        cancel: Optional[CancelToken] = None,
    ) -> TaskOutcome[AnalysisResult]:
        return self.analysis.run_analysis(
            self.state.selected_file,
            self._on_analysis_complete,
            on_progress=on_progress,
            sleep=self.sleep,
            cancel=cancel,
        )

    def refresh_summary(self, *, cancel: Optional[CancelToken] = None) -> bool:
        """Called on every render; generates the summary for a new result."""
        return self.summary.observe(self.state.analysis_result, cancel=cancel)

    def _on_remediation_applied(self, options: list[RemediationOption]) -> None:
        self.state.on_remediation_applied(options)

    def apply_remediation(self) -> list[RemediationOption]:
        if self.remediation is None:
            raise PreconditionError("Run the analysis before applying remediation.")
        return self.remediation.apply_remediation(self._on_remediation_applied)

    def export_file(
        self,
        kind: ExportKind | str,
        fmt: Optional[ExportFormat | str] = None,
        *,
        cancel: Optional[CancelToken] = None,
    ) -> Optional[str]:
        if fmt is not None:
            self.export.set_format(fmt)
        return self.export.handle_export(
            kind,
            remediation_applied=self.state.remediation_applied,
            original_file=self.state.selected_file,
            cancel=cancel,
        )
