"""Analysis panel: simulated run with progress, KPIs and quality issues."""
import streamlit as st
import matplotlib.pyplot as plt

from remediation_studio.analysis import quality_issues, quality_score, score_band
from remediation_studio.errors import PreconditionError
from remediation_studio.studio import Studio

from style_utils import COLORS, ISSUE_ICONS, SCORE_COLORS, badge, issue_row, styled_metric
from task_scope import task_scope


def render_analysis_panel(studio: Studio):
    """
    Render the Run Analysis control, its progress bar and the result.

    The button is disabled until a file is selected and while a run is active.
    """
    st.subheader("Data Analysis")
    panel = studio.analysis

    run = st.button(
        "▶ Run Analysis",
        type="primary",
        disabled=not panel.can_run(studio.state.selected_file),
        key="run_analysis",
    )

    if run:
        progress_bar = st.progress(0, text="Analysis Progress: 0%")

        def on_progress(value: int):
            progress_bar.progress(value, text=f"Analysis Progress: {value}%")

        try:
            with task_scope("analysis") as token, st.spinner("Analyzing..."):
                outcome = studio.run_analysis(on_progress=on_progress, cancel=token)
        except PreconditionError as e:
            st.warning(str(e))
            return

        if outcome.ok:
            st.rerun()
        elif not outcome.cancelled:
            st.error(f"Analysis failed: {outcome.error}")

    result = panel.result
    if result is None:
        if studio.state.selected_file is None:
            st.caption("Upload a file to enable analysis.")
        return

    score = quality_score(result)

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        styled_metric("Total Rows", f"{result.total_rows:,}")
    with col2:
        styled_metric("Columns", str(result.total_columns))
    with col3:
        styled_metric("Duplicates", str(result.duplicate_rows), color=COLORS["warning"])
    with col4:
        styled_metric("Quality Score", f"{score}%", color=SCORE_COLORS[score_band(score)])

    st.markdown("**Data Quality Issues**")
    for issue in quality_issues(result):
        text = f"Null values in <code>{issue.column}</code>" if issue.kind == "null" else issue.message
        color = COLORS["critical"] if issue.kind == "null" else ""
        issue_row(ISSUE_ICONS.get(issue.kind, "⚪"), text, badge(issue.badge, color))

    with st.expander("Null counts by column"):
        render_null_chart(result.null_counts)

    with st.expander("Inferred data types"):
        st.json(result.data_types)


def render_null_chart(null_counts: dict):
    """Bar chart of null counts per column."""
    if not null_counts or not any(null_counts.values()):
        st.success("No missing values")
        return
    fig, ax = plt.subplots(figsize=(6, 3))
    ax.bar(list(null_counts.keys()), list(null_counts.values()), color=COLORS["critical"])
    ax.set_ylabel("Null values")
    ax.set_title("Nulls per column")
    plt.tight_layout()
    st.pyplot(fig)
    plt.close(fig)
