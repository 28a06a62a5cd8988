from typing import Any

from pydantic import BaseModel, Field

from comment_resolver.core.domain.shared import PlatformType


class ResolutionRequestDTO(BaseModel):
    """Body of ``POST /api/v1/resolutions``; every field falls back to configuration."""

    identifier: int | str | dict[str, Any] | None = Field(
        default=None,
        description="Request number, pull/merge request URL, or {namespace, repository, number}.",
    )
    platform: PlatformType | None = None
    window: int | None = Field(default=None, ge=0, description="Context lines around the comment.")
