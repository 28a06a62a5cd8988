from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from comment_resolver.infrastructure.config.app_settings import AppSettings
from comment_resolver.infrastructure.tools.llm.config import LlmSettings
from comment_resolver.infrastructure.tools.vcs.github.config import GitHubSettings
from comment_resolver.infrastructure.tools.vcs.gitlab.config import GitLabSettings


class AppConfig(BaseSettings):
    """
    Master config class combining all sub-settings.
    """

    app: AppSettings = Field(default_factory=AppSettings)
    github: GitHubSettings = Field(default_factory=GitHubSettings)
    gitlab: GitLabSettings = Field(default_factory=GitLabSettings)
    llm: LlmSettings = Field(default_factory=LlmSettings)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
