from enum import StrEnum


class PlatformType(StrEnum):
    """Hosting platforms a pull/merge request can live on."""

    GITHUB = "github"
    GITLAB = "gitlab"
