"""
asciichat: A terminal chat client that asks a chat-completion model for ascii art.

This package follows Parnas's information hiding principles,
where each module hides a specific design decision.
"""

__version__ = "0.1.0"

from .config import CompletionMode, Settings
from .errors import AsciiChatError, CompletionError
from .llm import CompletionGateway, create_gateway
from .session import SessionController

__all__ = [
    "AsciiChatError",
    "CompletionError",
    "CompletionGateway",
    "CompletionMode",
    "SessionController",
    "Settings",
    "create_gateway",
]
