from abc import ABC, abstractmethod

from comment_resolver.core.domain.review import PromptPayload, SuggestionResult
from comment_resolver.core.domain.shared import LlmProviderType


class SuggestionGeneratorPort(ABC):
    """Turns one prompt payload into a committable suggestion.

    Implementations never raise for provider or format problems: both are
    reported through ``SuggestionResult.error``.
    """

    @property
    @abstractmethod
    def provider(self) -> LlmProviderType:
        """The model provider behind this generator."""

    @abstractmethod
    async def generate(self, payload: PromptPayload) -> SuggestionResult:
        """Build the prompt, call the model and parse its answer."""
