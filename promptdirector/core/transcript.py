from dataclasses import dataclass
from typing import Iterable, Literal

Role = Literal["user", "model"]

_HEADERS: dict[str, str] = {"user": "SCRIPT", "model": "PROMPTS"}


@dataclass(frozen=True)
class Turn:
    """
    One displayed message of the conversation.
    """

    role: Role
    content: str
    is_error: bool = False

    @property
    def header(self) -> str:
        return "ERROR" if self.is_error else _HEADERS[self.role]


def render_transcript(turns: Iterable[Turn]) -> str:
    """
    Render turns as plain text for download or export.

    Args:
        turns (Iterable[Turn]): The conversation history, oldest first.

    Returns:
        str: One ``HEADER:`` block per turn, separated by blank lines.
    """
    blocks = [f"{turn.header}:\n{turn.content.strip()}" for turn in turns]
    return "\n\n".join(blocks) + ("\n" if blocks else "")
