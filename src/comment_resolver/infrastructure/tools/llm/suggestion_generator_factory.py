import structlog

from comment_resolver.core.application.ports import SuggestionGeneratorPort
from comment_resolver.core.domain.shared import LlmProviderType
from comment_resolver.infrastructure.tools.llm.anthropic import AnthropicSuggestionGenerator
from comment_resolver.infrastructure.tools.llm.config import LlmSettings
from comment_resolver.infrastructure.tools.llm.openai import (
    OpenAiClientFactory,
    OpenAiSuggestionGenerator,
)

logger = structlog.get_logger()


def build_suggestion_generator(settings: LlmSettings) -> SuggestionGeneratorPort:
    """Validate the selected provider's settings and build its generator."""
    settings.validate_credentials()
    logger.info("Building suggestion generator", llm_provider=settings.provider.value)

    if settings.provider is LlmProviderType.ANTHROPIC:
        return AnthropicSuggestionGenerator.from_settings(settings)

    factory = OpenAiClientFactory(settings)
    if settings.provider is LlmProviderType.AZURE_OPENAI:
        return OpenAiSuggestionGenerator(
            factory.create_azure(),
            settings.azure_openai_deployment_name or "",
            temperature=settings.temperature,
            max_output_tokens=settings.max_output_tokens,
            provider_type=LlmProviderType.AZURE_OPENAI,
        )
    return OpenAiSuggestionGenerator(
        factory.create(),
        settings.openai_model,
        temperature=settings.temperature,
        max_output_tokens=settings.max_output_tokens,
    )
