from typing import Any

import anthropic
from anthropic import AsyncAnthropic

from comment_resolver.core.domain.shared import LlmProviderType
from comment_resolver.infrastructure.tools.llm.common import BaseSuggestionGenerator
from comment_resolver.infrastructure.tools.llm.config import LlmSettings


class AnthropicSuggestionGenerator(BaseSuggestionGenerator):
    def __init__(
        self,
        client: Any,
        model: str,
        temperature: float = 0.2,
        max_output_tokens: int = 1024,
    ):
        self.client = client
        self.model = model
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens

    @classmethod
    def from_settings(cls, settings: LlmSettings) -> "AnthropicSuggestionGenerator":
        api_key = settings.anthropic_api_key
        client = AsyncAnthropic(
            api_key=api_key.get_secret_value() if api_key else None,
            timeout=settings.timeout_s,
            max_retries=settings.max_retries,
        )
        return cls(
            client,
            settings.anthropic_model,
            temperature=settings.temperature,
            max_output_tokens=settings.max_output_tokens,
        )

    @property
    def provider(self) -> LlmProviderType:
        return LlmProviderType.ANTHROPIC

    async def _complete(self, system_prompt: str, user_prompt: str) -> str:
        # Anthropic takes the system prompt outside the message list
        response = await self.client.messages.create(
            model=self.model,
            system=system_prompt,
            messages=[{"role": "user", "content": user_prompt}],
            temperature=self.temperature,
            max_tokens=self.max_output_tokens,
        )
        return "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        )

    def _sdk_errors(self) -> tuple[type[Exception], ...]:
        return (anthropic.AnthropicError,)

    def _describe_error(self, exc: Exception) -> str:
        if isinstance(exc, anthropic.RateLimitError):
            return f"anthropic rate limit exceeded (HTTP 429): {exc}"
        if isinstance(exc, anthropic.APIConnectionError):
            return f"Could not reach anthropic: {exc}"
        return super()._describe_error(exc)
