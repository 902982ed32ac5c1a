"""AI quality summary card."""
import streamlit as st

from remediation_studio.studio import Studio

from task_scope import task_scope


def render_summary_panel(studio: Studio):
    """Render the collapsible AI summary; generation starts on its own for a new result."""
    if studio.state.analysis_result is None:
        return

    controller = studio.summary
    # No-op unless this analysis result has not been summarized yet.
    with task_scope("summary") as token, st.spinner("Generating AI summary..."):
        studio.refresh_summary(cancel=token)

    col1, col2 = st.columns([4, 1])
    with col1:
        st.markdown("**🧠 AI Data Quality Summary**")
    with col2:
        label = "▲ Collapse" if controller.is_open else "▼ Expand"
        if st.button(label, key="summary_card_toggle", width="stretch"):
            controller.toggle_open()
            st.rerun()

    if not controller.is_open:
        return

    if not controller.summary:
        st.info("Summary not generated yet.")
    else:
        with st.container(border=True):
            st.markdown("💡 " + controller.summary)

    if st.button("🧠 Regenerate Summary", key="regenerate_summary"):
        with task_scope("summary") as token, st.spinner("Generating AI summary..."):
            controller.generate_summary(cancel=token)
        st.rerun()
