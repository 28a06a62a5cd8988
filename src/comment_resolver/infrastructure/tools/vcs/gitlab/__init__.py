from .gitlab_platform_adapter import GitLabPlatformAdapter

__all__ = ["GitLabPlatformAdapter"]
