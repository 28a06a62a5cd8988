from .anthropic_suggestion_generator import AnthropicSuggestionGenerator

__all__ = ["AnthropicSuggestionGenerator"]
