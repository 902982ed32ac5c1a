"""Data Remediation Studio - five-step data quality walkthrough UI"""
import sys
from pathlib import Path

import streamlit as st

app_dir = Path(__file__).parent
if str(app_dir) not in sys.path:
    sys.path.insert(0, str(app_dir))

from remediation_studio.config import Settings
from remediation_studio.log import setup_logging
from remediation_studio.state import Section
from remediation_studio.studio import Studio

from ui_components import (
    render_analysis_panel,
    render_data_preview,
    render_export_panel,
    render_file_upload,
    render_page_header,
    render_remediation_panel,
    render_section_toggle,
    render_summary_panel,
)
from task_scope import cancel_stale_tasks

st.set_page_config(
    page_title="Data Remediation Studio",
    page_icon="🗄️",
    layout="wide"
)


def get_studio() -> Studio:
    """One Studio per browser session, kept in st.session_state."""
    if "studio" not in st.session_state:
        settings = Settings.from_env()
        setup_logging(settings.log_level)
        st.session_state["studio"] = Studio(settings=settings)
    return st.session_state["studio"]


def render_upload_section(studio: Studio):
    col1, col2 = st.columns(2)
    with col1:
        handle = render_file_upload(studio.state.selected_file)
        if handle is not None and handle != studio.state.selected_file:
            studio.select_file(handle)
    with col2:
        render_data_preview(studio.state.selected_file)


SECTION_RENDERERS = {
    Section.UPLOAD: render_upload_section,
    Section.ANALYSIS: render_analysis_panel,
    Section.SUMMARY: render_summary_panel,
    Section.REMEDIATION: render_remediation_panel,
    Section.EXPORT: render_export_panel,
}


def main():
    render_page_header()
    studio = get_studio()
    cancel_stale_tasks()

    for section in studio.state.visible_sections():
        if render_section_toggle(studio.state, section):
            SECTION_RENDERERS[section](studio)
        st.markdown("")


if __name__ == "__main__":
    main()
