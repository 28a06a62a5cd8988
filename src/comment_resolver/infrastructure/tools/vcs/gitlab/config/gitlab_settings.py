from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from comment_resolver.core.exceptions import ConfigurationError


class GitLabSettings(BaseSettings):
    """Settings for the GitLab REST API (v4)."""

    base_url: str = Field(default="https://gitlab.com", alias="GITLAB_BASE_URL")
    token: SecretStr | None = Field(default=None, alias="GITLAB_TOKEN")
    project_path: str = Field(default="", alias="GITLAB_PROJECT_PATH")
    timeout_s: float = Field(default=20.0, alias="GITLAB_TIMEOUT_S")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    def validate_credentials(self) -> None:
        if not self.token or not self.token.get_secret_value():
            raise ConfigurationError("GITLAB_TOKEN is required for the GitLab platform.")
