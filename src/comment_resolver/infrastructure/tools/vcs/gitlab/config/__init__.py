from comment_resolver.infrastructure.tools.vcs.gitlab.config.gitlab_settings import GitLabSettings

__all__ = ["GitLabSettings"]
