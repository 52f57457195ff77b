import sys
from pathlib import Path

import streamlit as st
from loguru import logger
from streamlit.runtime import exists
from streamlit.web import cli as st_cli

from promptdirector.ui.result import render_result
from promptdirector.ui.state import WizardStep, init_session_state
from promptdirector.ui.theme import configure_page, render_header
from promptdirector.ui.wizard import render_wizard
from promptdirector.utils.logging_cfg import setup_logging


def setup_app() -> None:
    """
    Initialize page configuration, logging and session state.
    """
    configure_page()
    if "_logging_ready" not in st.session_state:
        setup_logging()
        st.session_state["_logging_ready"] = True
    init_session_state()


def main() -> None:
    setup_app()
    state = st.session_state
    render_header(state)

    if WizardStep(state["step"]) is WizardStep.RESULT_AND_CONTINUE:
        render_result(state)
    else:
        render_wizard(state)


# ---- Streamlit CLI wrapper ----------------------------------------------- #
def run() -> None:
    """
    CLI entry point for the Streamlit app. It sets up the command line arguments as if the user
    typed `streamlit run app.py <any extra args>`.
    """
    app_path = Path(__file__).resolve()
    sys.argv = ["streamlit", "run", str(app_path)] + sys.argv[1:]
    sys.exit(st_cli.main())


if __name__ == "__main__":
    try:
        if exists():
            main()
        else:
            run()
    except ImportError as e:
        logger.exception(f"Failed to run the Streamlit app: {e}")
        run()
