"""
Reusable rendering helpers shared by the wizard and result pages.
"""

from typing import Any

import streamlit as st
from loguru import logger

from promptdirector.core.transcript import Turn


def read_uploaded_text(uploaded: Any) -> str:
    """
    Decode an uploaded text file.

    Args:
        uploaded: A Streamlit ``UploadedFile`` or ``None``.

    Returns:
        The file content as text, or an empty string when nothing was uploaded.
    """
    if uploaded is None:
        return ""
    data = uploaded.getvalue()
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        logger.warning("File '{}' is not valid UTF-8; decoding with replacement.", uploaded.name)
        return data.decode("utf-8", errors="replace")


def text_source(
    key: str,
    placeholder: str,
    accepted_exts: tuple[str, ...],
    allow_upload: bool = True,
    height: int = 240,
) -> str:
    """
    Render an optional file uploader above a text area.

    An uploaded file replaces the text area's content.

    Args:
        key: Widget key prefix, unique per input.
        placeholder: Placeholder shown in the empty text area.
        accepted_exts: File extensions accepted by the uploader.
        allow_upload: Whether to show the uploader.
        height: Text area height in pixels.

    Returns:
        The current text.
    """
    uploaded = None
    if allow_upload:
        uploaded = st.file_uploader(
            "Upload a text file",
            type=list(accepted_exts),
            key=f"{key}_upload",
        )
    prefill = read_uploaded_text(uploaded)
    area_key = f"{key}_text_{uploaded.file_id}" if uploaded is not None else f"{key}_text"
    return st.text_area(
        "Content",
        value=prefill,
        placeholder=placeholder,
        height=height,
        key=area_key,
        label_visibility="collapsed",
    )


def render_turn(turn: Turn) -> None:
    """
    Render one conversation turn as a chat bubble.

    Args:
        turn: The turn to render.
    """
    role = "user" if turn.role == "user" else "assistant"
    with st.chat_message(role):
        if turn.is_error:
            st.error(turn.content)
            return
        st.caption("Your next script" if turn.role == "user" else "Visualizer")
        st.code(turn.content, language=None, wrap_lines=True)
