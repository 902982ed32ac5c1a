from __future__ import annotations

import pytest

from remediation_studio.analysis import SAMPLE_ANALYSIS, AnalysisPanel, progress_schedule
from remediation_studio.config import Settings
from remediation_studio.errors import PreconditionError
from remediation_studio.models import FileHandle
from remediation_studio.studio import Studio
from remediation_studio.tasks import CancelToken


def test_progress_schedule() -> None:
    assert progress_schedule() == [0, 10, 20, 30, 40, 50, 60, 70, 80, 90, 100]


def test_end_to_end_progress_and_result(csv_file: FileHandle, sleep) -> None:
    studio = Studio(settings=Settings(), sleep=sleep)
    studio.select_file(csv_file)

    seen: list[int] = []
    outcome = studio.run_analysis(on_progress=seen.append)

    assert outcome.ok is True
    assert seen == progress_schedule()
    assert all(b > a for a, b in zip(seen, seen[1:]))
    assert studio.state.analysis_result == SAMPLE_ANALYSIS
    assert outcome.value is studio.state.analysis_result
    assert studio.analysis.progress == 100
    assert studio.analysis.is_analyzing is False


def test_timer_delays_follow_settings(csv_file: FileHandle, sleep) -> None:
    panel = AnalysisPanel(Settings(progress_interval=0.3, analysis_delay=3.0))
    panel.run_analysis(csv_file, lambda r: None, sleep=sleep)

    assert sleep.calls[:9] == [0.3] * 9
    assert len(sleep.calls) == 10
    assert sleep.total == pytest.approx(3.0)


def test_instant_settings_never_sleep(csv_file: FileHandle, sleep) -> None:
    panel = AnalysisPanel(Settings.instant())
    outcome = panel.run_analysis(csv_file, lambda r: None, sleep=sleep)
    assert outcome.ok
    assert sleep.calls == []


def test_missing_file_is_rejected() -> None:
    panel = AnalysisPanel(Settings.instant())
    assert panel.can_run(None) is False
    with pytest.raises(PreconditionError):
        panel.run_analysis(None, lambda r: None)


def test_second_trigger_while_running_is_rejected(csv_file: FileHandle) -> None:
    panel = AnalysisPanel(Settings.instant())
    errors: list[Exception] = []

    def reenter(value: int) -> None:
        if value == 50:
            try:
                panel.run_analysis(csv_file, lambda r: None)
            except PreconditionError as e:
                errors.append(e)

    panel.run_analysis(csv_file, lambda r: None, on_progress=reenter)
    assert len(errors) == 1
    assert panel.can_run(csv_file) is True


def test_cancel_stops_before_publishing(csv_file: FileHandle) -> None:
    panel = AnalysisPanel(Settings.instant())
    token = CancelToken()
    delivered: list[object] = []

    def on_progress(value: int) -> None:
        if value == 40:
            token.cancel()

    outcome = panel.run_analysis(csv_file, delivered.append, on_progress=on_progress, cancel=token)

    assert outcome.cancelled is True
    assert outcome.ok is False
    assert delivered == []
    assert panel.result is None
    assert panel.progress == 40
    assert panel.is_analyzing is False


def test_each_run_publishes_a_fresh_equal_result(csv_file: FileHandle) -> None:
    panel = AnalysisPanel(Settings.instant())
    first = panel.run_analysis(csv_file, lambda r: None).value
    second = panel.run_analysis(csv_file, lambda r: None).value
    assert first == second == SAMPLE_ANALYSIS
    assert first is not second
    assert first is not SAMPLE_ANALYSIS
