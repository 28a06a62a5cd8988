from .base_suggestion_generator import BaseSuggestionGenerator

__all__ = ["BaseSuggestionGenerator"]
