from abc import abstractmethod

import structlog

from comment_resolver.core.application.parsing import (
    generation_failure,
    parse_suggestion_response,
)
from comment_resolver.core.application.ports import SuggestionGeneratorPort
from comment_resolver.core.application.prompts import SuggestionPromptBuilder
from comment_resolver.core.domain.review import PromptPayload, SuggestionResult
from comment_resolver.infrastructure.observability.redaction_service import redact_text

logger = structlog.get_logger()


class BaseSuggestionGenerator(SuggestionGeneratorPort):
    """Shared prompt/parse pipeline; providers only implement ``_complete``.

    SDK errors listed in ``_sdk_errors`` become a ``GenerationError`` result.
    Anything else propagates to the caller.
    """

    prompt_builder = SuggestionPromptBuilder()

    async def generate(self, payload: PromptPayload) -> SuggestionResult:
        system_prompt, user_prompt = self.prompt_builder.build(payload)
        logger.debug(
            "Requesting suggestion",
            llm_provider=self.provider.value,
            prompt_chars=len(system_prompt) + len(user_prompt),
        )
        try:
            response_text = await self._complete(system_prompt, user_prompt)
        except self._sdk_errors() as exc:
            message = redact_text(self._describe_error(exc))
            logger.error(
                "Model call failed",
                llm_provider=self.provider.value,
                error_type=type(exc).__name__,
                error_details=message,
            )
            return generation_failure(message)
        return parse_suggestion_response(response_text)

    @abstractmethod
    async def _complete(self, system_prompt: str, user_prompt: str) -> str:
        """Send both prompt parts to the model and return its raw text answer."""

    @abstractmethod
    def _sdk_errors(self) -> tuple[type[Exception], ...]:
        """Exception types raised by the provider SDK."""

    def _describe_error(self, exc: Exception) -> str:
        code = getattr(exc, "status_code", None)
        prefix = f"{self.provider.value} error"
        if code is not None:
            prefix = f"{prefix} (HTTP {code})"
        return f"{prefix}: {exc}"
