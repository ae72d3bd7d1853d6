"""Pytest configuration and shared fixtures."""
import os

import pytest
from openai import OpenAIError

from asciichat.llm import ChatMessage, CompletionGateway, LLMProvider, LLMResponse
from asciichat.session import EditKey, SessionController

ENV_VARS = (
    "OPENAI_API_KEY",
    "API_KEY",
    "OPENAI_MAX_TOKENS",
    "MAX_TOKENS",
    "OPENAI_CHAT_MODEL",
    "OPENAI_BASE_URL",
)


class FakeProvider(LLMProvider):
    """Provider that records requests and answers with a canned reply."""

    def __init__(self, reply: str = "hi there", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.requests: list[dict] = []
        self.closed = False

    @property
    def model(self) -> str:
        return "fake-model"

    async def chat_completion(self, messages: list[ChatMessage], model=None, max_tokens=None, **kwargs):
        self.requests.append({"messages": messages, "max_tokens": max_tokens})
        if self.error is not None:
            raise self.error
        return LLMResponse(content=self.reply, model=self.model, finish_reason="stop")

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every environment variable the settings read."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def fake_provider():
    """Provider replying 'hi there'."""
    return FakeProvider()


@pytest.fixture
def failing_provider():
    """Provider whose every request fails."""
    return FakeProvider(error=OpenAIError("connection refused"))


@pytest.fixture
def gateway(fake_provider):
    return CompletionGateway(fake_provider)


@pytest.fixture
def controller(gateway):
    return SessionController(gateway)


@pytest.fixture
def api_keys():
    """Return API keys from environment."""
    return {"openai": os.getenv("OPENAI_API_KEY")}


async def type_text(controller: SessionController, text: str) -> None:
    """Send text to the controller one key at a time."""
    for ch in text:
        await controller.handle(EditKey(key=ch, character=ch))


@pytest.fixture
def typist():
    return type_text
