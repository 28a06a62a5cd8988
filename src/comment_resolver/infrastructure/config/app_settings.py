from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from comment_resolver.core.application.workflows.resolution import DEFAULT_CONTEXT_WINDOW_LINES
from comment_resolver.core.domain.shared import PlatformType


class AppSettings(BaseSettings):
    # App Config
    app_name: str = Field(default="PR Comment Resolver", alias="APP_NAME")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Run selection
    platform: PlatformType | None = Field(default=None, alias="VCS_PLATFORM")
    pull_request_url: str | None = Field(default=None, alias="PULL_REQUEST_URL")
    pull_request_number: str | None = Field(default=None, alias="PULL_REQUEST_NUMBER")

    # Prompt shaping
    context_window_lines: int = Field(
        default=DEFAULT_CONTEXT_WINDOW_LINES, ge=0, alias="CONTEXT_WINDOW_LINES"
    )
    language_hint: str | None = Field(default=None, alias="LANGUAGE_HINT")
    project_rules: str | None = Field(default=None, alias="PROJECT_RULES")
    project_rules_file: Path | None = Field(default=None, alias="PROJECT_RULES_FILE")

    # HTTP trigger
    api_key: SecretStr | None = Field(default=None, alias="RESOLVER_API_KEY")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    @property
    def pull_request_identifier(self) -> str | None:
        """``PULL_REQUEST_URL`` wins over ``PULL_REQUEST_NUMBER``."""
        return self.pull_request_url or self.pull_request_number

    def load_project_rules(self) -> str | None:
        if self.project_rules:
            return self.project_rules
        if self.project_rules_file:
            return self.project_rules_file.read_text(encoding="utf-8").strip() or None
        return None
