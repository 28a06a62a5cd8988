from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from comment_resolver.core.exceptions import ConfigurationError


class GitHubSettings(BaseSettings):
    """Settings for the GitHub REST API."""

    api_url: str = Field(default="https://api.github.com", alias="GITHUB_API_URL")
    token: SecretStr | None = Field(default=None, alias="GITHUB_TOKEN")
    owner: str = Field(default="", alias="GITHUB_OWNER")
    repo: str = Field(default="", alias="GITHUB_REPO")
    timeout_s: float = Field(default=20.0, alias="GITHUB_TIMEOUT_S")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    def validate_credentials(self) -> None:
        if not self.token or not self.token.get_secret_value():
            raise ConfigurationError("GITHUB_TOKEN is required for the GitHub platform.")
