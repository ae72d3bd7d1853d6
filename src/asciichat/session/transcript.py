"""Conversation transcript.

Hides how messages are stored and how they are flattened into the text
shown in the scrollback.
"""

from collections.abc import Iterator
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

USER_LABEL = "You: "
ASSISTANT_LABEL = "ChatGPT: "
LINE_DELIMITER = "\n"


class Speaker(str, Enum):
    """Who said a message."""

    USER = "user"
    ASSISTANT = "assistant"

    @property
    def label(self) -> str:
        return USER_LABEL if self is Speaker.USER else ASSISTANT_LABEL


class Message(BaseModel):
    """A single turn in the conversation."""

    model_config = ConfigDict(frozen=True)

    role: Speaker = Field(description="Speaker of the message")
    text: str = Field(description="Message text as typed or received")

    def render(self) -> str:
        """Render as a display line prefixed by the role label."""
        return f"{self.role.label}{self.text}"


class Transcript:
    """Append-only ordered list of messages.

    Insertion order is display order. Messages are never edited or removed.
    """

    def __init__(self) -> None:
        self._messages: list[Message] = []

    def append(self, role: Speaker, text: str) -> Message:
        """Append a message and return it."""
        message = Message(role=role, text=text)
        self._messages.append(message)
        return message

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    def rendered_lines(self) -> list[str]:
        return [message.render() for message in self._messages]

    def flatten(self) -> str:
        """Join rendered messages into the scrollback text."""
        return LINE_DELIMITER.join(self.rendered_lines())

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(self._messages)
