"""Unit tests for the llm module and the completion gateway."""
from types import SimpleNamespace

import pytest
from hypothesis import given
from hypothesis import strategies as st
from openai import OpenAIError

from asciichat.config import Settings
from asciichat.errors import CompletionError
from asciichat.llm import (
    PLACEHOLDER_ART,
    CompletionGateway,
    CompletionRequest,
    LLMProvider,
    OfflineProvider,
    OpenAIProvider,
    create_gateway,
    create_llm_provider,
)
from asciichat.session import extract_fenced_block


class StubCompletions:
    """Stands in for client.chat.completions and records create() kwargs."""

    def __init__(self, completion):
        self.completion = completion
        self.calls: list[dict] = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        return self.completion


def make_completion(*contents: str):
    choices = [
        SimpleNamespace(message=SimpleNamespace(role="assistant", content=c), finish_reason="stop")
        for c in contents
    ]
    usage = SimpleNamespace(prompt_tokens=3, completion_tokens=5, total_tokens=8)
    return SimpleNamespace(choices=choices, model="gpt-4o-mini", usage=usage)


class TestProviderInterface:
    """Tests for the abstract LLMProvider interface."""

    def test_provider_is_abstract(self):
        """Test that LLMProvider cannot be instantiated."""
        with pytest.raises(TypeError):
            LLMProvider()  # type: ignore


class TestFactory:
    """Tests for the provider factory."""

    def test_create_openai_provider(self):
        """Test creating the OpenAI provider."""
        provider = create_llm_provider("openai", api_key="fake-key", model="gpt-4o")
        assert isinstance(provider, OpenAIProvider)
        assert provider.model == "gpt-4o"

    def test_create_offline_provider(self):
        """Test creating the offline provider."""
        assert isinstance(create_llm_provider("OFFLINE"), OfflineProvider)

    def test_unknown_provider_raises_error(self):
        """Test that an unknown provider raises ValueError."""
        with pytest.raises(ValueError, match="Unsupported provider"):
            create_llm_provider("unknown")

    def test_openai_requires_api_key(self):
        """Test that the OpenAI provider needs an api key."""
        with pytest.raises(TypeError, match="requires 'api_key'"):
            create_llm_provider("openai")

    @given(st.text(min_size=1))
    def test_factory_with_random_provider_names(self, provider_name: str):
        """Property test: Factory should only accept known providers."""
        if provider_name.lower() == "offline":
            assert isinstance(create_llm_provider(provider_name), OfflineProvider)
        elif provider_name.lower() == "openai":
            assert isinstance(create_llm_provider(provider_name, api_key="fake"), OpenAIProvider)
        else:
            with pytest.raises(ValueError):
                create_llm_provider(provider_name, api_key="fake")


class TestOpenAIProvider:
    """Tests for OpenAIProvider with a stubbed client."""

    @pytest.mark.asyncio
    async def test_request_shape_and_first_choice(self):
        """Test the request body and first-choice selection."""
        provider = OpenAIProvider(api_key="fake-key")
        stub = StubCompletions(make_completion("first", "second"))
        provider._client = SimpleNamespace(chat=SimpleNamespace(completions=stub))

        request = CompletionRequest(prompt="draw a cat", max_tokens=100)
        response = await provider.chat_completion(request.to_messages(), max_tokens=request.max_tokens)

        assert response.content == "first"
        assert response.finish_reason == "stop"
        assert response.usage == {"prompt_tokens": 3, "completion_tokens": 5, "total_tokens": 8}
        assert stub.calls == [{
            "model": "gpt-4o-mini",
            "messages": [{"role": "user", "content": "draw a cat"}],
            "max_tokens": 100,
        }]

    def test_retries_are_disabled(self):
        """Test that the client does not retry."""
        provider = OpenAIProvider(api_key="fake-key")
        assert provider._client.max_retries == 0

    @pytest.mark.asyncio
    @pytest.mark.integration
    async def test_chat_completion_real_api(self, api_keys):
        """Integration test: one request against the real API."""
        if not api_keys["openai"]:
            pytest.skip("OPENAI_API_KEY not set")

        async with OpenAIProvider(api_key=api_keys["openai"]) as provider:
            request = CompletionRequest(prompt="Say hi", max_tokens=10)
            response = await provider.chat_completion(request.to_messages(), max_tokens=10)
            assert isinstance(response.content, str)


class TestOfflineProvider:
    """Tests for the placeholder provider."""

    def test_placeholder_is_fenced_art(self):
        """Test that the placeholder is one fenced block."""
        assert PLACEHOLDER_ART.startswith("```\n")
        assert PLACEHOLDER_ART.endswith("\n```")
        assert "MISSING" in PLACEHOLDER_ART
        assert extract_fenced_block(PLACEHOLDER_ART) == PLACEHOLDER_ART

    @pytest.mark.asyncio
    @pytest.mark.parametrize("prompt", ["hello", "", "draw a dragon"])
    async def test_same_reply_for_any_prompt(self, prompt: str):
        """Test that the offline reply ignores the prompt."""
        gateway = CompletionGateway(OfflineProvider())
        assert await gateway.complete(prompt, 100) == PLACEHOLDER_ART


class TestGateway:
    """Tests for CompletionGateway."""

    @pytest.mark.asyncio
    async def test_sends_single_user_message(self, fake_provider):
        """Test that one user message is sent."""
        gateway = CompletionGateway(fake_provider)

        reply = await gateway.complete("hello", 42)

        assert reply == "hi there"
        assert len(fake_provider.requests) == 1
        request = fake_provider.requests[0]
        assert [(m.role, m.content) for m in request["messages"]] == [("user", "hello")]
        assert request["max_tokens"] == 42

    @pytest.mark.asyncio
    async def test_calls_are_context_free(self, fake_provider):
        """Test that earlier turns are not resent."""
        gateway = CompletionGateway(fake_provider)
        await gateway.complete("first", 100)
        await gateway.complete("second", 100)
        assert len(fake_provider.requests[1]["messages"]) == 1

    @pytest.mark.asyncio
    async def test_provider_errors_become_completion_errors(self, failing_provider):
        """Test error translation in the gateway."""
        logged = []
        gateway = CompletionGateway(failing_provider, debug_callback=lambda *args: logged.append(args))

        with pytest.raises(CompletionError, match="connection refused") as exc_info:
            await gateway.complete("hello", 100)

        assert exc_info.value.prompt == "hello"
        assert isinstance(exc_info.value.__cause__, OpenAIError)
        assert any(level == "error" and component == "LLM" for level, component, _ in logged)

    @pytest.mark.asyncio
    async def test_reply_without_choices_becomes_completion_error(self):
        """Test that an empty choices list raises CompletionError."""
        provider = OpenAIProvider(api_key="fake-key")
        provider._client = SimpleNamespace(chat=SimpleNamespace(completions=StubCompletions(make_completion())))
        gateway = CompletionGateway(provider)

        with pytest.raises(CompletionError, match="no choices") as exc_info:
            await gateway.complete("hello", 100)

        assert exc_info.value.prompt == "hello"
        assert isinstance(exc_info.value.__cause__, OpenAIError)

    @pytest.mark.asyncio
    async def test_usage_is_logged(self):
        """Test that token usage goes to the debug log."""
        logged = []
        provider = OpenAIProvider(api_key="fake-key")
        provider._client = SimpleNamespace(chat=SimpleNamespace(completions=StubCompletions(make_completion("art"))))
        gateway = CompletionGateway(provider, debug_callback=lambda *args: logged.append(args))

        assert await gateway.complete("hello", 100) == "art"
        assert ("debug", "LLM", "Token usage: 8 total") in logged

    @pytest.mark.asyncio
    async def test_close_closes_provider(self, fake_provider):
        """Test that closing the gateway closes the provider."""
        gateway = CompletionGateway(fake_provider)
        await gateway.close()
        assert fake_provider.closed

    def test_create_gateway_without_key_is_offline(self, monkeypatch):
        """Test that no key gives an offline gateway."""
        def _no_client(*args, **kwargs):
            raise AssertionError("network client must not be created offline")

        monkeypatch.setattr("asciichat.llm.providers.openai.AsyncOpenAI", _no_client)
        gateway = create_gateway(Settings(api_key=None))
        assert gateway.offline

    def test_create_gateway_with_key_uses_openai(self):
        """Test that a key gives an OpenAI gateway."""
        gateway = create_gateway(Settings(api_key="sk-test", model="gpt-4o"))
        assert not gateway.offline
        assert isinstance(gateway.provider, OpenAIProvider)
        assert gateway.provider.model == "gpt-4o"
