"""Wizard page: collect the script, the template and the theme, then run the first generation."""

from typing import Any, MutableMapping

import streamlit as st

from promptdirector.ui.components import text_source
from promptdirector.ui.state import (
    STEP_COPY,
    WizardStep,
    run_initial_generation,
    submit_step,
)
from promptdirector.utils.env_cfg import load_ui_env


def render_wizard(state: MutableMapping[str, Any]) -> None:
    """
    Render the input step the wizard is on, or run the pending generation.

    Args:
        state: The session-state mapping.
    """
    step = WizardStep(state["step"])

    if step is WizardStep.PROCESSING:
        with st.spinner("Generating Source Context and Prompts…"):
            run_initial_generation(state)
        st.rerun()

    copy = STEP_COPY.get(step)
    if copy is None:
        return

    if state.get("error"):
        st.error(state["error"])

    st.progress((int(step) + 1) / len(STEP_COPY), text=copy.title)

    with st.container(border=True):
        st.subheader(copy.title)
        st.write(copy.instruction)

        if copy.allow_upload:
            value = text_source(
                key=f"step{int(step)}",
                placeholder=copy.placeholder,
                accepted_exts=load_ui_env().accepted_exts,
            )
        else:
            value = st.text_input(
                "Theme",
                placeholder=copy.placeholder,
                key=f"step{int(step)}_text",
                label_visibility="collapsed",
            )

        if st.button(
            copy.button,
            type="primary",
            disabled=not value.strip(),
            use_container_width=True,
        ):
            submit_step(state, value)
            st.rerun()
