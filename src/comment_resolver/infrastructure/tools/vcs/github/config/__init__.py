from comment_resolver.infrastructure.tools.vcs.github.config.github_settings import GitHubSettings

__all__ = ["GitHubSettings"]
