"""Offline provider used when no API key is configured.

Returns a fixed drawing without touching the network, so the client can be
tried out without credentials.
"""

from typing import Any

from ..base import LLMProvider
from ..models import ChatMessage, LLMResponse

PLACEHOLDER_ART = "```\n    _____\\    _______\n   /      \\  |      /\\\n  /_______/  |_____/  \\\n |   \\   /        /   /\n  \\   \\ MISSING \\/   /\n   \\  /   API    \\__/_\n    \\/ ___KEY_ /\\\n      /  \\    /  \\\n     /\\   \\  /   /\n       \\   \\/   /\n        \\___\\__/\n```"


class OfflineProvider(LLMProvider):
    """Provider that always answers with PLACEHOLDER_ART."""

    def __init__(self, model: str = "offline", **_: Any):
        self._model = model

    @property
    def model(self) -> str:
        return self._model

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        """Return the placeholder drawing regardless of the messages."""
        return LLMResponse(content=PLACEHOLDER_ART, model=self._model, finish_reason="stop")

    async def close(self) -> None:
        """Nothing to close."""
        pass
