"""Export panel."""
import streamlit as st

from remediation_studio.errors import PreconditionError
from remediation_studio.export import (
    EXPORT_NOTES,
    FORMAT_LABELS,
    REMEDIATED_ROWS_BADGE,
    ExportFormat,
    ExportKind,
)
from remediation_studio.studio import Studio

from style_utils import COLORS, badge
from task_scope import task_scope


def _export(studio: Studio, kind: ExportKind):
    try:
        with task_scope("export") as token, st.spinner("Exporting..."):
            filename = studio.export_file(kind, cancel=token)
    except PreconditionError as e:
        st.warning(str(e))
        return
    if filename:
        st.success(f"Prepared `{filename}`")


def render_export_panel(studio: Studio):
    """Render export controls; they stay disabled until remediation has been applied."""
    if studio.state.selected_file is None:
        return

    col1, col2 = st.columns([4, 1])
    with col1:
        st.subheader("⬇️ Export Results")
    with col2:
        if studio.state.export_enabled:
            st.markdown(badge("✓ Ready", COLORS["success"]), unsafe_allow_html=True)

    if not studio.state.export_enabled:
        st.info("Apply remediation first to enable export")
        st.markdown(badge("Waiting for remediation"), unsafe_allow_html=True)
        return

    formats = list(ExportFormat)
    fmt = st.selectbox(
        "Export Format",
        formats,
        index=formats.index(studio.export.format),
        format_func=lambda f: FORMAT_LABELS[f],
        key="export_format",
    )
    studio.export.set_format(fmt)

    disabled = studio.export.is_exporting
    col1, col2 = st.columns(2)
    with col1:
        with st.container(border=True):
            icon = "📄" if fmt == ExportFormat.CSV else "📊"
            st.markdown(f"{icon} **Remediated Dataset** {badge(REMEDIATED_ROWS_BADGE)}", unsafe_allow_html=True)
            st.caption("Clean dataset with all applied remediations")
            if st.button("Download Dataset", key="export_data", disabled=disabled, width="stretch"):
                _export(studio, ExportKind.DATA)
    with col2:
        with st.container(border=True):
            st.markdown(f"📄 **Analysis Report** {badge('PDF')}", unsafe_allow_html=True)
            st.caption("Detailed report of analysis and remediation steps")
            if st.button("Download Report", key="export_report", disabled=disabled, width="stretch"):
                _export(studio, ExportKind.REPORT)

    st.markdown("---")
    for note in EXPORT_NOTES:
        st.caption(f"• {note}")
