"""Functional DI container: builds a fully-wired run driver from ``AppConfig``.

Free-function API shared by the CLI and the FastAPI background task.
"""

import structlog

from comment_resolver.core.application.ports import PlatformPort, RawIdentifier
from comment_resolver.core.application.workflows.resolution import (
    CommentResolutionWorkflow,
    ResolutionRunDriver,
)
from comment_resolver.core.domain.review import ResolutionRunReport
from comment_resolver.core.domain.review.pull_request_identifier import UrlIdentifier
from comment_resolver.core.domain.shared import PlatformType
from comment_resolver.core.exceptions import ConfigurationError
from comment_resolver.infrastructure.config.app_config import AppConfig
from comment_resolver.infrastructure.observability.redaction_service import redact_text
from comment_resolver.infrastructure.tools.llm.suggestion_generator_factory import (
    build_suggestion_generator,
)
from comment_resolver.infrastructure.tools.vcs.github import GitHubPlatformAdapter
from comment_resolver.infrastructure.tools.vcs.github.github_url_parser import (
    is_github_pull_request_url,
)
from comment_resolver.infrastructure.tools.vcs.gitlab import GitLabPlatformAdapter
from comment_resolver.infrastructure.tools.vcs.gitlab.gitlab_url_parser import (
    is_gitlab_merge_request_url,
)

logger = structlog.get_logger()


def resolve_identifier(config: AppConfig, identifier: RawIdentifier | None = None) -> RawIdentifier:
    """The explicit identifier wins; otherwise PULL_REQUEST_URL, then PULL_REQUEST_NUMBER."""
    if identifier is not None and identifier != "":
        return identifier
    configured = config.app.pull_request_identifier
    if not configured:
        raise ConfigurationError(
            "No pull/merge request given. Pass an identifier or set "
            "PULL_REQUEST_URL / PULL_REQUEST_NUMBER."
        )
    return configured


def resolve_platform_type(
    config: AppConfig,
    identifier: RawIdentifier,
    platform: PlatformType | str | None = None,
) -> PlatformType:
    """Explicit platform, then VCS_PLATFORM, then whatever the identifier or settings imply."""
    explicit = platform or config.app.platform
    if explicit:
        try:
            return PlatformType(explicit)
        except ValueError as exc:
            raise ConfigurationError(f"Unknown platform '{explicit}'.") from exc

    url = identifier.url if isinstance(identifier, UrlIdentifier) else identifier
    if isinstance(url, str) and url.strip().startswith(("http://", "https://")):
        if is_gitlab_merge_request_url(url):
            return PlatformType.GITLAB
        if is_github_pull_request_url(url):
            return PlatformType.GITHUB

    github_ready = bool(config.github.owner and config.github.repo)
    gitlab_ready = bool(config.gitlab.project_path)
    if github_ready != gitlab_ready:
        return PlatformType.GITHUB if github_ready else PlatformType.GITLAB
    raise ConfigurationError(
        "Cannot infer the hosting platform from the identifier; set VCS_PLATFORM.",
        context={"identifier": str(identifier)},
    )


def build_platform_adapter(config: AppConfig, platform_type: PlatformType) -> PlatformPort:
    if platform_type is PlatformType.GITLAB:
        return GitLabPlatformAdapter(config.gitlab)
    return GitHubPlatformAdapter(config.github)


def build_run_driver(
    config: AppConfig,
    platform_type: PlatformType,
    window_size: int | None = None,
) -> ResolutionRunDriver:
    """Wire platform adapter, generator and workflow; missing credentials fail here."""
    platform = build_platform_adapter(config, platform_type)
    generator = build_suggestion_generator(config.llm)
    try:
        project_rules = config.app.load_project_rules()
    except OSError as exc:
        raise ConfigurationError(
            f"Cannot read PROJECT_RULES_FILE: {exc}",
            context={"path": str(config.app.project_rules_file)},
        ) from exc

    workflow = CommentResolutionWorkflow(
        platform=platform,
        generator=generator,
        window_size=config.app.context_window_lines if window_size is None else window_size,
        language_hint=config.app.language_hint,
        project_rules=project_rules,
        redact_error=redact_text,
    )
    logger.info(
        "Run driver assembled",
        platform=platform_type.value,
        llm_provider=generator.provider.value,
    )
    return ResolutionRunDriver(platform=platform, workflow=workflow)


async def run_resolution(
    identifier: RawIdentifier | None = None,
    platform: PlatformType | str | None = None,
    window_size: int | None = None,
    config: AppConfig | None = None,
) -> ResolutionRunReport:
    """Resolve every comment of one pull/merge request end to end."""
    config = config or AppConfig()
    raw_identifier = resolve_identifier(config, identifier)
    platform_type = resolve_platform_type(config, raw_identifier, platform)
    driver = build_run_driver(config, platform_type, window_size)
    return await driver.run(raw_identifier)
