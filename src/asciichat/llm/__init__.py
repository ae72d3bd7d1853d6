from .base import LLMProvider
from .factory import create_llm_provider
from .gateway import CompletionGateway, create_gateway
from .models import ChatMessage, CompletionRequest, LLMResponse
from .providers import PLACEHOLDER_ART, OfflineProvider, OpenAIProvider

__all__ = [
    "LLMProvider",
    "create_llm_provider",
    "CompletionGateway",
    "create_gateway",
    "ChatMessage",
    "CompletionRequest",
    "LLMResponse",
    "OfflineProvider",
    "OpenAIProvider",
    "PLACEHOLDER_ART",
]
