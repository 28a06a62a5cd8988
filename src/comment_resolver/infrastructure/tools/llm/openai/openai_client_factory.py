from dataclasses import dataclass

from openai import AsyncAzureOpenAI, AsyncOpenAI

from comment_resolver.infrastructure.tools.llm.config import LlmSettings


@dataclass(frozen=True)
class OpenAiClientFactory:
    settings: LlmSettings

    def create(self) -> AsyncOpenAI:
        api_key = self.settings.openai_api_key
        return AsyncOpenAI(
            api_key=api_key.get_secret_value() if api_key else None,
            base_url=self.settings.openai_base_url,
            timeout=self.settings.timeout_s,
            max_retries=self.settings.max_retries,
        )

    def create_azure(self) -> AsyncAzureOpenAI:
        api_key = self.settings.azure_openai_api_key
        return AsyncAzureOpenAI(
            api_key=api_key.get_secret_value() if api_key else None,
            azure_endpoint=self.settings.azure_openai_endpoint,
            api_version=self.settings.azure_openai_api_version,
            azure_deployment=self.settings.azure_openai_deployment_name,
            timeout=self.settings.timeout_s,
            max_retries=self.settings.max_retries,
        )
