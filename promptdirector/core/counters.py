"""
Marker scanning for model replies.

Replies are free-form text; anything that does not look like
``Source Context <n>:`` or ``Prompt <n>:`` is skipped.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from loguru import logger


class MarkerKind(str, Enum):
    SOURCE_CONTEXT = "source_context"
    PROMPT = "prompt"


_MARKER_PATTERNS: tuple[tuple[MarkerKind, re.Pattern[str]], ...] = (
    (MarkerKind.SOURCE_CONTEXT, re.compile(r"Source Context (\d+):", re.IGNORECASE)),
    (MarkerKind.PROMPT, re.compile(r"Prompt (\d+):", re.IGNORECASE)),
)


def iter_markers(text: str) -> Iterator[tuple[MarkerKind, int]]:
    """
    Yield every marker found in ``text`` as a ``(kind, index)`` pair.

    All source-context markers are yielded first, then all prompt markers,
    each in order of appearance.

    Args:
        text (str): Reply text returned by the model.

    Yields:
        tuple[MarkerKind, int]: The marker kind and its parsed index.
    """
    if not isinstance(text, str) or not text:
        return
    for kind, pattern in _MARKER_PATTERNS:
        for match in pattern.finditer(text):
            try:
                yield kind, int(match.group(1))
            except ValueError:
                continue


@dataclass
class CounterTracker:
    """
    Running maximum of the marker indices seen in the current session.
    """

    last_source_index: int = 0
    last_prompt_index: int = 0

    def reset(self) -> None:
        self.last_source_index = 0
        self.last_prompt_index = 0

    def snapshot(self) -> tuple[int, int]:
        return self.last_source_index, self.last_prompt_index

    def scan(self, text: str) -> None:
        """
        Raise the counters to the highest marker indices found in ``text``.

        Counters never decrease. Malformed or missing markers are ignored.

        Args:
            text (str): Reply text returned by the model.
        """
        before = self.snapshot()
        for kind, value in iter_markers(text):
            if kind is MarkerKind.SOURCE_CONTEXT:
                self.last_source_index = max(self.last_source_index, value)
            else:
                self.last_prompt_index = max(self.last_prompt_index, value)
        if self.snapshot() != before:
            logger.debug(
                "Counters advanced from {} to {}", before, self.snapshot()
            )
