from typing import Any

from comment_resolver.infrastructure.tools.vcs.common import VcsHttpClient
from comment_resolver.infrastructure.tools.vcs.github.config import GitHubSettings

GITHUB_API_VERSION = "2022-11-28"
PAGE_SIZE = 100


class GitHubHttpClient(VcsHttpClient):
    def __init__(self, settings: GitHubSettings):
        settings.validate_credentials()
        token = settings.token.get_secret_value() if settings.token else ""
        super().__init__(
            base_url=settings.api_url,
            headers={
                "Accept": "application/vnd.github+json",
                "Authorization": f"Bearer {token}",
                "X-GitHub-Api-Version": GITHUB_API_VERSION,
            },
            timeout_s=settings.timeout_s,
        )

    async def get_all_pages(self, path: str) -> list[dict[str, Any]]:
        """GET a list endpoint and follow ``Link: rel="next"`` until exhausted."""
        items: list[dict[str, Any]] = []
        next_url: str | None = path
        params: dict[str, Any] | None = {"per_page": PAGE_SIZE}
        while next_url:
            response = await self.get(next_url, params=params)
            response.raise_for_status()
            items.extend(response.json())
            next_url = response.links.get("next", {}).get("url")
            # the next link already carries the query string
            params = None
        return items
