"""Result page: running transcript, download, and the form for the next script chunk."""

from typing import Any, MutableMapping

import streamlit as st

from promptdirector.core.session_controller import SessionController
from promptdirector.ui.components import read_uploaded_text, render_turn
from promptdirector.ui.state import run_continuation
from promptdirector.utils.env_cfg import load_ui_env


def render_result(state: MutableMapping[str, Any]) -> None:
    """
    Render the history and the continuation form.

    Args:
        state: The session-state mapping.
    """
    controller: SessionController = state["controller"]

    st.caption(
        f"Last Source Context: {controller.last_source_index} · "
        f"Last Prompt: {controller.last_prompt_index}"
    )

    for turn in controller.history:
        render_turn(turn)

    transcript = controller.transcript()
    if transcript:
        st.download_button(
            label="📥 Download transcript (.txt)",
            data=transcript,
            file_name="visual_prompts.txt",
            mime="text/plain",
        )

    st.divider()
    with st.form("continue_form", clear_on_submit=True):
        st.markdown("##### Continue the story…")
        uploaded = st.file_uploader(
            "Upload the next script file",
            type=list(load_ui_env().accepted_exts),
        )
        chunk = st.text_area(
            "Next script chunk",
            placeholder="Paste the next part of the script here...",
            height=140,
        )
        submitted = st.form_submit_button(
            "Send Next Script", type="primary", use_container_width=True
        )

    if submitted:
        text = chunk if chunk.strip() else read_uploaded_text(uploaded)
        if not text.strip():
            st.warning("Paste or upload the next part of the script first.")
            return
        with st.spinner("Generating Source Context and Prompts…"):
            run_continuation(state, text)
        st.rerun()
