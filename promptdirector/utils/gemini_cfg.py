from dataclasses import dataclass, field
from typing import Any, Protocol

from google import genai
from google.genai import types
from loguru import logger

from promptdirector.utils.env_cfg import GeminiConfig


class ChatSession(Protocol):
    """
    Minimal surface of a multi-turn chat used by the session controller.
    """

    def send_message(self, message: str) -> Any: ...


class ChatFactory(Protocol):
    """
    Callable that opens a new chat session.
    """

    def __call__(
        self, config: GeminiConfig, system_instruction: str
    ) -> ChatSession: ...


@dataclass
class GeminiChatFactory:
    """
    Opens chat sessions against the Gemini API with the google-genai SDK.

    The SDK client is built lazily on first use and reused for every session
    opened by this factory.
    """

    _client: genai.Client | None = field(default=None, init=False, repr=False)
    _client_key: str = field(default="", init=False, repr=False)

    def _get_client(self, config: GeminiConfig) -> genai.Client:
        """
        Return a client for ``config.api_key``, building one if needed.

        Args:
            config (GeminiConfig): The Gemini configuration.

        Returns:
            genai.Client: The SDK client.
        """
        if self._client is None or self._client_key != config.api_key:
            logger.info("Creating Gemini client (timeout {}s)", config.request_timeout)
            self._client = genai.Client(
                api_key=config.api_key,
                http_options=types.HttpOptions(timeout=config.request_timeout * 1000),
            )
            self._client_key = config.api_key
        return self._client

    def __call__(self, config: GeminiConfig, system_instruction: str) -> ChatSession:
        """
        Open a new chat session.

        Args:
            config (GeminiConfig): The Gemini configuration.
            system_instruction (str): System instruction for the whole session.

        Returns:
            ChatSession: The SDK chat object.
        """
        client = self._get_client(config)
        logger.info(
            "Opening chat session on {} (temperature {})",
            config.model,
            config.temperature,
        )
        return client.chats.create(
            model=config.model,
            config=types.GenerateContentConfig(
                system_instruction=system_instruction,
                temperature=config.temperature,
            ),
        )


def response_text(response: Any) -> str:
    """
    Extract the reply text from an SDK response.

    Args:
        response (Any): Object returned by ``send_message``.

    Returns:
        str: The reply text, or an empty string when the model returned none.
    """
    text = getattr(response, "text", None)
    return text if isinstance(text, str) else ""
