from __future__ import annotations

from remediation_studio.analysis import SAMPLE_ANALYSIS
from remediation_studio.config import Settings
from remediation_studio.summary import NARRATIVE_SCORE, SummaryController, render_summary_text
from remediation_studio.tasks import CancelToken


def test_summary_text_interpolates_counts() -> None:
    text = render_summary_text(SAMPLE_ANALYSIS)
    assert text.startswith("Based on the analysis of your dataset with 1,247 rows and 5 columns")
    assert "Your current data quality score is 70%" in text
    assert "**Recommended Actions:**" in text
    assert NARRATIVE_SCORE == 70


def test_auto_generation_fires_once_per_result(sleep) -> None:
    controller = SummaryController(Settings(summary_delay=2.0), sleep=sleep)

    assert controller.observe(None) is False
    assert controller.observe(SAMPLE_ANALYSIS) is True
    assert controller.generation_count == 1
    assert controller.is_open is True
    assert sleep.calls == [2.0]

    # Re-renders with the same result do nothing.
    for _ in range(3):
        assert controller.observe(SAMPLE_ANALYSIS) is False
    assert controller.generation_count == 1


def test_new_result_does_not_regenerate_existing_summary(sleep) -> None:
    controller = SummaryController(Settings.instant(), sleep=sleep)
    controller.observe(SAMPLE_ANALYSIS)
    fresh = SAMPLE_ANALYSIS.model_copy(deep=True)

    assert controller.observe(fresh) is False
    assert controller.generation_count == 1


def test_new_result_fires_when_previous_attempt_was_cancelled() -> None:
    controller = SummaryController(Settings.instant())
    token = CancelToken()
    token.cancel()

    assert controller.observe(SAMPLE_ANALYSIS, cancel=token) is True
    assert controller.summary == ""
    assert controller.observe(SAMPLE_ANALYSIS) is False

    fresh = SAMPLE_ANALYSIS.model_copy(deep=True)
    assert controller.observe(fresh) is True
    assert controller.summary != ""


def test_regenerate_is_unguarded(sleep) -> None:
    controller = SummaryController(Settings.instant(), sleep=sleep)
    assert controller.generate_summary() is None  # nothing observed yet

    controller.observe(SAMPLE_ANALYSIS)
    controller.generate_summary()
    controller.generate_summary()
    assert controller.generation_count == 3
    assert controller.is_generating is False


def test_toggle_open() -> None:
    controller = SummaryController(Settings.instant())
    controller.observe(SAMPLE_ANALYSIS)
    assert controller.toggle_open() is False
    assert controller.toggle_open() is True
