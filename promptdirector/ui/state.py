"""Centralized session-state initialization and wizard transitions."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, MutableMapping

import streamlit as st
from loguru import logger

from promptdirector.core.errors import PromptDirectorError
from promptdirector.core.session_controller import SessionController
from promptdirector.utils.env_cfg import load_gemini_env


class WizardStep(IntEnum):
    SCRIPT_INPUT = 0
    TEMPLATE_INPUT = 1
    THEME_INPUT = 2
    PROCESSING = 3
    RESULT_AND_CONTINUE = 4


@dataclass(frozen=True)
class StepCopy:
    """
    Text shown for one input step of the wizard.
    """

    title: str
    instruction: str
    placeholder: str
    button: str
    allow_upload: bool = True


STEP_COPY: dict[WizardStep, StepCopy] = {
    WizardStep.SCRIPT_INPUT: StepCopy(
        title="Step 1: Script Content",
        instruction='Upload or paste your "Script Content" file (without a title).',
        placeholder="Paste the script here...",
        button="Send Script",
    ),
    WizardStep.TEMPLATE_INPUT: StepCopy(
        title="Step 2: Prompt Visual Image",
        instruction=(
            'Got the "Script Content". Next, upload or paste the '
            '"Prompt Visual Image" template.'
        ),
        placeholder="Paste the Visual Image template here...",
        button="Send Template",
    ),
    WizardStep.THEME_INPUT: StepCopy(
        title="Step 3: Theme",
        instruction=(
            'Got the "Script Content" and the "Prompt Visual Image". Now enter the '
            'title "YYYYYYYYYY" that fills the [Theme: YYYYYYYYYY] section.'
        ),
        placeholder="Enter the theme...",
        button="Start Generating Prompts",
        allow_upload=False,
    ),
}
"""Wizard copy for every step that collects user input."""

START_ERROR_MESSAGE = (
    "Could not reach Gemini. Check the API key or try again."
)

_DEFAULTS: dict[str, Any] = {
    "step": WizardStep.SCRIPT_INPUT,
    "script": "",
    "template": "",
    "theme": "",
    "error": None,
    "controller": None,
}


def init_session_state(state: MutableMapping[str, Any] | None = None) -> None:
    """
    Initialise all session-state keys with sane defaults.

    Must be called once, before any widget is rendered.

    Args:
        state: Mapping to initialise. Defaults to ``st.session_state``.
    """
    state = st.session_state if state is None else state
    for key, value in _DEFAULTS.items():
        if key not in state:
            state[key] = value
    if state["controller"] is None:
        state["controller"] = SessionController(config=load_gemini_env())


def submit_step(state: MutableMapping[str, Any], value: str) -> WizardStep:
    """
    Store the value entered for the current input step and advance.

    Blank values are ignored and leave the wizard where it is.

    Args:
        state: The session-state mapping.
        value: Text entered or uploaded by the user.

    Returns:
        WizardStep: The step the wizard is now on.
    """
    step = WizardStep(state["step"])
    if not value.strip():
        return step

    state["error"] = None
    if step is WizardStep.SCRIPT_INPUT:
        state["script"] = value
        state["step"] = WizardStep.TEMPLATE_INPUT
    elif step is WizardStep.TEMPLATE_INPUT:
        state["template"] = value
        state["step"] = WizardStep.THEME_INPUT
    elif step is WizardStep.THEME_INPUT:
        state["theme"] = value.strip()
        state["step"] = WizardStep.PROCESSING
    return WizardStep(state["step"])


def run_initial_generation(state: MutableMapping[str, Any]) -> WizardStep:
    """
    Run the first generation for the collected inputs.

    On failure the wizard goes back to the theme step so the user can retry.

    Args:
        state: The session-state mapping.

    Returns:
        WizardStep: The step the wizard is now on.
    """
    controller: SessionController = state["controller"]
    try:
        controller.start(state["theme"], state["script"], state["template"])
    except PromptDirectorError as e:
        logger.error("Initial generation failed: {}", e)
        state["error"] = START_ERROR_MESSAGE
        state["step"] = WizardStep.THEME_INPUT
    else:
        state["step"] = WizardStep.RESULT_AND_CONTINUE
    return WizardStep(state["step"])


def run_continuation(state: MutableMapping[str, Any], chunk: str) -> bool:
    """
    Send the next script chunk; failures are recorded in the history.

    Args:
        state: The session-state mapping.
        chunk: The next section of the script.

    Returns:
        bool: True if a reply was received.
    """
    if not chunk.strip():
        return False
    controller: SessionController = state["controller"]
    try:
        controller.continue_generation(chunk)
    except PromptDirectorError as e:
        logger.error("Continuation failed: {}", e)
        return False
    return True


def reset_wizard(state: MutableMapping[str, Any]) -> None:
    """
    Return to the first step and discard the session.

    Args:
        state: The session-state mapping.
    """
    controller: SessionController | None = state.get("controller")
    if controller is not None:
        controller.reset()
    for key, value in _DEFAULTS.items():
        if key != "controller":
            state[key] = value
