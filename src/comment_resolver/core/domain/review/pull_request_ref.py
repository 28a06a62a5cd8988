from dataclasses import dataclass

from comment_resolver.core.domain.shared.platform_type import PlatformType


@dataclass(frozen=True, kw_only=True)
class PullRequestRef:
    """A change-request on a hosting platform, resolved once at run start.

    For GitLab ``namespace`` is the (possibly nested) group path and
    ``repository`` the project name, so ``full_name`` is the project path.
    """

    platform: PlatformType
    namespace: str
    repository: str
    number: int
    head_ref: str
    base_ref: str
    title: str | None = None
    web_url: str | None = None

    def __post_init__(self) -> None:
        if not self.repository.strip():
            raise ValueError("Repository cannot be empty.")
        if self.number <= 0:
            raise ValueError(f"Request number must be positive, got {self.number}.")

    @property
    def full_name(self) -> str:
        return f"{self.namespace}/{self.repository}" if self.namespace else self.repository

    def __str__(self) -> str:
        marker = "!" if self.platform is PlatformType.GITLAB else "#"
        return f"{self.full_name}{marker}{self.number}"
