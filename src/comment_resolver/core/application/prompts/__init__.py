from comment_resolver.core.application.prompts.suggestion_prompt_builder import (
    SuggestionPromptBuilder,
)

__all__ = ["SuggestionPromptBuilder"]
