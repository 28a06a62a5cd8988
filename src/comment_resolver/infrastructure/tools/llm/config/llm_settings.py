from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from comment_resolver.core.domain.shared import LlmProviderType
from comment_resolver.core.exceptions import ConfigurationError


class LlmSettings(BaseSettings):
    """
    Settings for the model providers that generate suggestions.
    """

    provider: LlmProviderType = Field(default=LlmProviderType.OPENAI, alias="LLM_PROVIDER")

    openai_api_key: SecretStr | None = Field(default=None, alias="OPENAI_API_KEY")
    openai_model: str = Field(default="gpt-4o", alias="OPENAI_MODEL")
    openai_base_url: str | None = Field(default=None, alias="OPENAI_BASE_URL")

    azure_openai_api_key: SecretStr | None = Field(default=None, alias="AZURE_OPENAI_API_KEY")
    azure_openai_endpoint: str | None = Field(default=None, alias="AZURE_OPENAI_ENDPOINT")
    azure_openai_api_version: str | None = Field(default=None, alias="AZURE_OPENAI_API_VERSION")
    azure_openai_deployment_name: str | None = Field(
        default=None, alias="AZURE_OPENAI_DEPLOYMENT_NAME"
    )

    anthropic_api_key: SecretStr | None = Field(default=None, alias="ANTHROPIC_API_KEY")
    anthropic_model: str = Field(default="claude-3-5-sonnet-latest", alias="ANTHROPIC_MODEL")

    temperature: float = Field(default=0.2, alias="LLM_TEMPERATURE")
    max_output_tokens: int = Field(default=1024, alias="LLM_MAX_OUTPUT_TOKENS")
    timeout_s: float = Field(default=60.0, alias="LLM_TIMEOUT_S")
    max_retries: int = Field(default=2, alias="LLM_MAX_RETRIES")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    def validate_credentials(self) -> None:
        """Fail fast when the selected provider is missing required settings."""
        missing = [name for name, value in self._required_for_provider() if not value]
        if missing:
            raise ConfigurationError(
                f"Missing settings for LLM provider '{self.provider.value}': {', '.join(missing)}",
                context={"provider": self.provider.value},
            )

    def _required_for_provider(self) -> list[tuple[str, object]]:
        if self.provider is LlmProviderType.AZURE_OPENAI:
            return [
                ("AZURE_OPENAI_API_KEY", _secret(self.azure_openai_api_key)),
                ("AZURE_OPENAI_ENDPOINT", self.azure_openai_endpoint),
                ("AZURE_OPENAI_API_VERSION", self.azure_openai_api_version),
                ("AZURE_OPENAI_DEPLOYMENT_NAME", self.azure_openai_deployment_name),
            ]
        if self.provider is LlmProviderType.ANTHROPIC:
            return [("ANTHROPIC_API_KEY", _secret(self.anthropic_api_key))]
        return [("OPENAI_API_KEY", _secret(self.openai_api_key))]


def _secret(value: SecretStr | None) -> str:
    return value.get_secret_value() if value else ""
