from .openai_client_factory import OpenAiClientFactory
from .openai_suggestion_generator import OpenAiSuggestionGenerator

__all__ = ["OpenAiClientFactory", "OpenAiSuggestionGenerator"]
