from dataclasses import dataclass, field
from pathlib import Path
from types import SimpleNamespace
from typing import Any

import pytest

from promptdirector.core.session_controller import SessionController
from promptdirector.utils.env_cfg import GeminiConfig


@dataclass
class FakeChat:
    """
    Chat double that replays queued replies and records sent messages.
    """

    replies: list[Any] = field(default_factory=list)
    sent: list[str] = field(default_factory=list)

    def send_message(self, message: str) -> SimpleNamespace:
        """
        Record the message and return the next queued reply.

        Args:
            message (str): The outbound request text.

        Returns:
            SimpleNamespace: An object with a ``text`` attribute.

        Raises:
            Exception: If the queued reply is an exception instance.
        """
        self.sent.append(message)
        reply = self.replies.pop(0) if self.replies else ""
        if isinstance(reply, BaseException):
            raise reply
        return SimpleNamespace(text=reply)


@dataclass
class FakeChatFactory:
    """
    Chat factory double that counts how many sessions were opened.
    """

    chats: list[FakeChat] = field(default_factory=list)
    created: int = 0
    system_instructions: list[str] = field(default_factory=list)
    error: BaseException | None = None

    def queue(self, *replies: Any) -> FakeChat:
        chat = FakeChat(replies=list(replies))
        self.chats.append(chat)
        return chat

    def __call__(self, config: GeminiConfig, system_instruction: str) -> FakeChat:
        if self.error is not None:
            raise self.error
        self.created += 1
        self.system_instructions.append(system_instruction)
        return self.chats[self.created - 1]


@pytest.fixture
def gemini_config() -> GeminiConfig:
    """
    Fixture for a Gemini configuration with a dummy credential.

    Returns:
        GeminiConfig: The configuration.
    """
    return GeminiConfig(
        api_key="test-key", model="gemini-test", temperature=0.7, request_timeout=30
    )


@pytest.fixture
def chat_factory() -> FakeChatFactory:
    """
    Fixture for the counting chat factory.

    Returns:
        FakeChatFactory: The factory double.
    """
    return FakeChatFactory()


@pytest.fixture
def controller(
    gemini_config: GeminiConfig, chat_factory: FakeChatFactory
) -> SessionController:
    """
    Fixture for a session controller wired to the fake chat factory.

    Args:
        gemini_config (GeminiConfig): The Gemini configuration fixture.
        chat_factory (FakeChatFactory): The chat factory fixture.

    Returns:
        SessionController: The controller.
    """
    return SessionController(config=gemini_config, chat_factory=chat_factory)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Keep tests away from real credentials and the user's log directory.

    Args:
        tmp_path (Path): The temporary path fixture.
        monkeypatch (pytest.MonkeyPatch): The monkeypatch fixture.
    """
    for name in ("GEMINI_API_KEY", "GOOGLE_API_KEY", "API_KEY"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("LOG_PATH", str(tmp_path / "logs" / "test.log"))
    monkeypatch.setenv("RESULTS_PATH", str(tmp_path / "results"))
