from __future__ import annotations

from dataclasses import dataclass, field

from loguru import logger

from promptdirector.core.counters import CounterTracker
from promptdirector.core.errors import ConfigurationError, SessionError, StateError
from promptdirector.core.prompts import (
    SYSTEM_INSTRUCTION,
    build_continuation_prompt,
    build_initial_prompt,
)
from promptdirector.core.transcript import Turn, render_transcript
from promptdirector.utils.env_cfg import GeminiConfig
from promptdirector.utils.gemini_cfg import (
    ChatFactory,
    ChatSession,
    GeminiChatFactory,
    response_text,
)


@dataclass(slots=True)
class SessionController:
    """
    Owns the chat session, the marker counters and the displayed history.

    Turns must be issued one at a time; each reply depends on every earlier
    turn held by the remote session.
    """

    config: GeminiConfig
    chat_factory: ChatFactory = field(default_factory=GeminiChatFactory)
    counters: CounterTracker = field(default_factory=CounterTracker, init=False)
    theme: str | None = field(default=None, init=False)
    _chat: ChatSession | None = field(default=None, init=False, repr=False)
    _history: list[Turn] = field(default_factory=list, init=False, repr=False)

    @property
    def has_session(self) -> bool:
        return self._chat is not None

    @property
    def last_source_index(self) -> int:
        return self.counters.last_source_index

    @property
    def last_prompt_index(self) -> int:
        return self.counters.last_prompt_index

    @property
    def history(self) -> list[Turn]:
        return list(self._history)

    def reset(self) -> None:
        """
        Drop the session together with its counters and history.
        """
        self._chat = None
        self.theme = None
        self.counters.reset()
        self._history.clear()
        logger.info("Session reset.")

    def start(self, theme: str, script: str, template: str) -> str:
        """
        Open a new session and generate the first batch of prompts.

        The current session, counters and history are only replaced once the
        first reply has been received.

        Args:
            theme (str): Title substituted for ``[Theme: YYYYYYYYYY]``.
            script (str): Script substituted for ``[Paste Script]``.
            template (str): The "Prompt Visual Image" template.

        Returns:
            str: The reply text, unmodified.

        Raises:
            ConfigurationError: If no Gemini credential is configured.
            SessionError: If the session cannot be opened or the request fails.
        """
        if not self.config.api_key.strip():
            logger.error("ConfigurationError: Gemini API key is missing.")
            raise ConfigurationError("Gemini API key is missing.")

        message = build_initial_prompt(theme, script, template)
        logger.info(
            "Starting session: script {} chars, template {} chars",
            len(script),
            len(template),
        )
        try:
            chat = self.chat_factory(self.config, SYSTEM_INSTRUCTION)
            text = response_text(chat.send_message(message))
        except Exception as e:
            logger.error("Error starting chat session: {}", e)
            raise SessionError(f"Failed to start chat session: {e}") from e

        self._chat = chat
        self.theme = theme.strip()
        self.counters.reset()
        self.counters.scan(text)
        self._history = [Turn(role="model", content=text)]
        logger.info(
            "Session started; counters at source={} prompt={}",
            self.last_source_index,
            self.last_prompt_index,
        )
        return text

    def continue_generation(self, new_script: str) -> str:
        """
        Send the next script chunk on the active session.

        Args:
            new_script (str): The next section of the script.

        Returns:
            str: The reply text, unmodified.

        Raises:
            StateError: If no session has been started.
            SessionError: If the request fails.
        """
        if self._chat is None:
            logger.error("StateError: no active session.")
            raise StateError("no active session")

        message = build_continuation_prompt(
            new_script, self.last_source_index, self.last_prompt_index
        )
        logger.info(
            "Continuing session from source={} prompt={} ({} chars)",
            self.last_source_index,
            self.last_prompt_index,
            len(new_script),
        )
        self._history.append(Turn(role="user", content=new_script))
        try:
            text = response_text(self._chat.send_message(message))
        except Exception as e:
            logger.error("Error continuing chat session: {}", e)
            self._history.append(
                Turn(role="model", content=f"Generation failed: {e}", is_error=True)
            )
            raise SessionError(f"Failed to continue chat session: {e}") from e

        self.counters.scan(text)
        self._history.append(Turn(role="model", content=text))
        return text

    def transcript(self) -> str:
        """
        Render the conversation so far as plain text.

        Returns:
            str: The transcript, or an empty string if nothing has been generated.
        """
        return render_transcript(self._history)
