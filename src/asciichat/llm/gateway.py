"""Completion gateway.

Hides how a prompt becomes a completion: provider choice, the single
user-message request shape, and translation of provider errors into
CompletionError.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING

from openai import OpenAIError

from ..errors import CompletionError
from .base import LLMProvider
from .factory import create_llm_provider
from .models import CompletionRequest
from .providers import OfflineProvider

if TYPE_CHECKING:
    from ..config import Settings

DebugCallback = Callable[[str, str, str], None]


class CompletionGateway:
    """Issues one context-free completion request per call.

    No retries and no timeout beyond the transport default. Only the first
    choice of the response is used.
    """

    def __init__(
        self,
        provider: LLMProvider,
        debug_callback: DebugCallback | None = None,
    ) -> None:
        self._provider = provider
        self._debug_callback = debug_callback

    @property
    def provider(self) -> LLMProvider:
        return self._provider

    @property
    def offline(self) -> bool:
        """True when answering with the placeholder drawing."""
        return isinstance(self._provider, OfflineProvider)

    def set_debug_callback(self, callback: DebugCallback | None) -> None:
        """Set callback for debug logging.

        Args:
            callback: Function(level, component, message) or None
        """
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, "LLM", message)

    async def complete(self, prompt: str, max_tokens: int) -> str:
        """Send prompt as a single user message and return the reply text.

        Args:
            prompt: Text typed by the user
            max_tokens: Token ceiling for the completion

        Returns:
            Content of the first completion choice

        Raises:
            CompletionError: If the request fails
        """
        request = CompletionRequest(prompt=prompt, max_tokens=max_tokens)

        if self.offline:
            self._debug("info", "No openai api key found. Using example art.")
        else:
            self._debug("info", f"Requesting completion ({len(prompt)} chars, max_tokens={max_tokens})")

        try:
            response = await self._provider.chat_completion(
                request.to_messages(),
                max_tokens=request.max_tokens,
            )
        except OpenAIError as e:
            self._debug("error", f"Completion error: {e}")
            raise CompletionError(f"Completion error: {e}", prompt=prompt) from e

        self._debug("debug", f"Response received ({len(response.content)} chars, finish_reason={response.finish_reason})")
        if response.usage:
            self._debug("debug", f"Token usage: {response.usage.get('total_tokens', 0)} total")
        return response.content

    async def close(self) -> None:
        """Release the provider's resources."""
        await self._provider.close()


def create_gateway(
    settings: "Settings",
    debug_callback: DebugCallback | None = None,
) -> CompletionGateway:
    """Create a gateway from settings.

    Uses the offline provider when no API key is configured.
    """
    if settings.offline:
        provider = create_llm_provider("offline")
    else:
        provider = create_llm_provider(
            "openai",
            api_key=settings.api_key,
            model=settings.model,
            base_url=settings.base_url,
        )
    return CompletionGateway(provider, debug_callback=debug_callback)
