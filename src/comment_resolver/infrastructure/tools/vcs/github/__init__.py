from .github_platform_adapter import GitHubPlatformAdapter

__all__ = ["GitHubPlatformAdapter"]
