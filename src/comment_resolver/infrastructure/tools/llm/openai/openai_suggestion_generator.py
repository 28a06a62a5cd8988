from typing import Any

import openai

from comment_resolver.core.domain.shared import LlmProviderType
from comment_resolver.infrastructure.tools.llm.common import BaseSuggestionGenerator


class OpenAiSuggestionGenerator(BaseSuggestionGenerator):
    """Chat Completions generator, shared by OpenAI and Azure OpenAI.

    For Azure ``model`` is the deployment name.
    """

    def __init__(
        self,
        client: Any,
        model: str,
        temperature: float = 0.2,
        max_output_tokens: int = 1024,
        provider_type: LlmProviderType = LlmProviderType.OPENAI,
    ):
        self.client = client
        self.model = model
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens
        self._provider_type = provider_type

    @property
    def provider(self) -> LlmProviderType:
        return self._provider_type

    async def _complete(self, system_prompt: str, user_prompt: str) -> str:
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            temperature=self.temperature,
            max_tokens=self.max_output_tokens,
        )
        if not response.choices:
            return ""
        return response.choices[0].message.content or ""

    def _sdk_errors(self) -> tuple[type[Exception], ...]:
        return (openai.OpenAIError,)

    def _describe_error(self, exc: Exception) -> str:
        if isinstance(exc, openai.RateLimitError):
            return f"{self.provider.value} rate limit exceeded (HTTP 429): {exc}"
        if isinstance(exc, openai.AuthenticationError):
            return f"{self.provider.value} rejected the credentials (HTTP 401): {exc}"
        if isinstance(exc, openai.APIConnectionError):
            return f"Could not reach {self.provider.value}: {exc}"
        return super()._describe_error(exc)
