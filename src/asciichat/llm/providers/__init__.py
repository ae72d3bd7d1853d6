from .offline import PLACEHOLDER_ART, OfflineProvider
from .openai import OpenAIProvider

__all__ = ["OfflineProvider", "OpenAIProvider", "PLACEHOLDER_ART"]
