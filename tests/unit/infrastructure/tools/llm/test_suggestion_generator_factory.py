from typing import Any

import pytest
from pydantic import SecretStr

from comment_resolver.core.domain.shared import LlmProviderType
from comment_resolver.core.exceptions import ConfigurationError
from comment_resolver.infrastructure.tools.llm.anthropic import AnthropicSuggestionGenerator
from comment_resolver.infrastructure.tools.llm.config import LlmSettings
from comment_resolver.infrastructure.tools.llm.openai import OpenAiSuggestionGenerator
from comment_resolver.infrastructure.tools.llm.suggestion_generator_factory import (
    build_suggestion_generator,
)


def _make_settings(**overrides: Any) -> LlmSettings:
    return LlmSettings(**overrides)


class TestBuildSuggestionGenerator:
    def test_openai_default(self) -> None:
        generator = build_suggestion_generator(
            _make_settings(OPENAI_API_KEY=SecretStr("sk-test"), OPENAI_MODEL="gpt-4o-mini")
        )

        assert isinstance(generator, OpenAiSuggestionGenerator)
        assert generator.provider is LlmProviderType.OPENAI
        assert generator.model == "gpt-4o-mini"

    def test_azure_uses_deployment_name(self) -> None:
        generator = build_suggestion_generator(
            _make_settings(
                LLM_PROVIDER="azure_openai",
                AZURE_OPENAI_API_KEY=SecretStr("az-key"),
                AZURE_OPENAI_ENDPOINT="https://acme.openai.azure.com",
                AZURE_OPENAI_API_VERSION="2024-06-01",
                AZURE_OPENAI_DEPLOYMENT_NAME="gpt4o-prod",
            )
        )

        assert isinstance(generator, OpenAiSuggestionGenerator)
        assert generator.provider is LlmProviderType.AZURE_OPENAI
        assert generator.model == "gpt4o-prod"

    def test_anthropic(self) -> None:
        generator = build_suggestion_generator(
            _make_settings(LLM_PROVIDER="anthropic", ANTHROPIC_API_KEY=SecretStr("sk-ant"))
        )

        assert isinstance(generator, AnthropicSuggestionGenerator)

    @pytest.mark.parametrize(
        ("overrides", "missing"),
        [
            ({}, "OPENAI_API_KEY"),
            ({"LLM_PROVIDER": "anthropic"}, "ANTHROPIC_API_KEY"),
            (
                {"LLM_PROVIDER": "azure_openai", "AZURE_OPENAI_API_KEY": SecretStr("k")},
                "AZURE_OPENAI_ENDPOINT",
            ),
        ],
    )
    def test_missing_credentials(self, overrides: dict[str, Any], missing: str) -> None:
        with pytest.raises(ConfigurationError, match=missing):
            build_suggestion_generator(_make_settings(**overrides))
