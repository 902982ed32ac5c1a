"""Page header and collapsible section headers."""
import streamlit as st

from remediation_studio.state import AppState, Section, SECTION_TITLES


def render_page_header():
    """Render the studio title block."""
    st.title("🗄️ Data Remediation Studio")
    st.caption("AI-powered data quality analysis and remediation")
    st.markdown("---")


def render_section_toggle(state: AppState, section: Section) -> bool:
    """
    Render a section's title bar with a collapse toggle.

    Args:
        state: Page state holding the collapse flags
        section: Section whose title bar is rendered

    Returns:
        True if the section body should be rendered (i.e. not collapsed).
    """
    collapsed = state.is_collapsed(section)
    arrow = "▸" if collapsed else "▾"
    if st.button(
        f"{arrow}  {SECTION_TITLES[section]}",
        key=f"toggle_{section.value}",
        width="stretch",
    ):
        state.toggle_section(section)
        st.rerun()
    return not collapsed
