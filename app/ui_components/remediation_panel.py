"""Remediation checklist panel."""
import streamlit as st

from remediation_studio.errors import PreconditionError
from remediation_studio.remediation import (
    CATEGORY_ICONS,
    IMPUTATION_METHODS,
    preview_lines,
)
from remediation_studio.studio import Studio

from style_utils import IMPACT_COLORS, badge


def render_remediation_panel(studio: Studio):
    """
    Render the grouped remediation options, the apply button and the preview.

    Checkbox changes go through the checklist's toggle/update operations so
    the checklist stays the single source of truth.
    """
    checklist = studio.remediation
    result = studio.state.analysis_result
    if checklist is None or result is None:
        return

    col1, col2 = st.columns([4, 1])
    with col1:
        st.subheader("⚙️ Data Remediation")
    with col2:
        st.markdown(badge(f"{checklist.selected_count} selected"), unsafe_allow_html=True)

    for category, options in checklist.by_category().items():
        st.markdown(f"**{CATEGORY_ICONS[category]} {category.value.title()} Operations**")
        for option in options:
            checked = st.checkbox(
                option.label,
                value=option.selected,
                key=f"remediation_{option.id}",
                help=option.description,
            )
            if checked != option.selected:
                checklist.toggle_option(option.id)
                st.rerun()
            st.markdown(
                f"{badge(option.impact.value + ' impact', IMPACT_COLORS[option.impact.value])} "
                f"<span style='font-size: 0.85em;'>{option.description}</span>",
                unsafe_allow_html=True,
            )

            if option.id == "impute_nulls" and option.selected:
                methods = list(IMPUTATION_METHODS)
                current = checklist.imputation_method()
                method = st.selectbox(
                    "Imputation method",
                    methods,
                    index=methods.index(current) if current in methods else 0,
                    format_func=lambda m: IMPUTATION_METHODS[m],
                    key="impute_method",
                )
                if method != current:
                    checklist.update_config(option.id, {"method": method})
        st.markdown("---")

    col1, col2 = st.columns([4, 1])
    with col1:
        if st.button(
            f"✔ Apply Remediation ({checklist.selected_count})",
            type="primary",
            disabled=checklist.selected_count == 0,
            key="apply_remediation",
            width="stretch",
        ):
            try:
                studio.apply_remediation()
            except PreconditionError as e:
                st.warning(str(e))
            else:
                st.rerun()
    with col2:
        label = "🙈 Hide" if checklist.preview_visible else "👁 Show"
        if st.button(label, disabled=not checklist.applied, key="toggle_preview"):
            checklist.toggle_preview()
            st.rerun()

    if checklist.preview_visible:
        lines = preview_lines(result)
        with st.container(border=True):
            st.markdown("✅ **Remediation Preview**")
            for line in lines[:-1]:
                st.markdown(f"- {line}")
            st.success(lines[-1])
