from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    """Represents a chat message sent to the completion API."""

    model_config = ConfigDict(frozen=True)

    role: str = Field(description="Role of the message sender: 'user', 'assistant', or 'system'")
    content: str = Field(description="Content of the message")


class LLMResponse(BaseModel):
    """First completion choice returned by an LLM provider."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(description="Generated text content")
    model: str = Field(description="Model that generated the response")
    finish_reason: str | None = Field(default=None, description="Why generation stopped")
    usage: dict[str, int] | None = Field(
        default=None,
        description="Token usage information"
    )


class CompletionRequest(BaseModel):
    """A single context-free completion request."""

    model_config = ConfigDict(frozen=True)

    prompt: str = Field(description="User text sent as the only message")
    max_tokens: int = Field(ge=1, description="Token ceiling for the completion")

    def to_messages(self) -> list[ChatMessage]:
        """Build the message list for this request (no prior turns)."""
        return [ChatMessage(role="user", content=self.prompt)]
