from typing import Any

from comment_resolver.infrastructure.tools.vcs.common import VcsHttpClient
from comment_resolver.infrastructure.tools.vcs.gitlab.config import GitLabSettings

PAGE_SIZE = 100


class GitLabHttpClient(VcsHttpClient):
    def __init__(self, settings: GitLabSettings):
        settings.validate_credentials()
        token = settings.token.get_secret_value() if settings.token else ""
        super().__init__(
            base_url=f"{settings.base_url.rstrip('/')}/api/v4",
            headers={"PRIVATE-TOKEN": token},
            timeout_s=settings.timeout_s,
        )

    async def get_all_pages(self, path: str) -> list[dict[str, Any]]:
        """GET a list endpoint page by page, following the ``X-Next-Page`` header."""
        items: list[dict[str, Any]] = []
        page: str | None = "1"
        while page:
            response = await self.get(path, params={"per_page": PAGE_SIZE, "page": page})
            response.raise_for_status()
            items.extend(response.json())
            page = response.headers.get("X-Next-Page") or None
        return items
