"""Page configuration and shared chrome (header with theme badge and reset)."""

from typing import Any, MutableMapping

import streamlit as st

from promptdirector.ui.state import WizardStep, reset_wizard


def configure_page() -> None:
    """
    Set the Streamlit page config.  Must be the **first** Streamlit call.
    """
    st.set_page_config(
        page_title="Visual Script Prompter",
        page_icon="🎬",
        layout="centered",
    )


def render_header(state: MutableMapping[str, Any]) -> None:
    """
    Render the title row; once generation has begun, show the theme and a reset button.

    Args:
        state: The session-state mapping.
    """
    col_title, col_meta = st.columns([0.7, 0.3], vertical_alignment="center")
    with col_title:
        st.title("🎬 Visual Script Prompter")

    if WizardStep(state["step"]) <= WizardStep.THEME_INPUT:
        return

    with col_meta:
        st.caption(f"Theme: **{state['theme']}**")
        if st.button("Reset", key="reset", disabled=state["step"] == WizardStep.PROCESSING):
            reset_wizard(state)
            st.rerun()
