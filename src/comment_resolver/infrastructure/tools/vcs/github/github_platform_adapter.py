from collections.abc import Sequence
from urllib.parse import quote

import httpx
import structlog

from comment_resolver.core.application.ports import PlatformPort, RawIdentifier
from comment_resolver.core.domain.review import (
    CommentId,
    FileSnapshot,
    PullRequestRef,
    ReviewComment,
    compose_reply_body,
)
from comment_resolver.core.domain.review.pull_request_identifier import (
    ExplicitIdentifier,
    NumericIdentifier,
    PullRequestIdentifier,
    UrlIdentifier,
    parse_identifier,
)
from comment_resolver.core.domain.shared import PlatformType
from comment_resolver.core.exceptions import (
    CommentFetchError,
    IdentifierResolutionError,
    PostError,
    RequestFetchError,
    SourceFileNotFoundError,
)
from comment_resolver.infrastructure.tools.vcs.common import decode_file_content
from comment_resolver.infrastructure.tools.vcs.github.config import GitHubSettings
from comment_resolver.infrastructure.tools.vcs.github.github_comment_mapper import (
    GitHubCommentMapper,
)
from comment_resolver.infrastructure.tools.vcs.github.github_http_client import GitHubHttpClient
from comment_resolver.infrastructure.tools.vcs.github.github_url_parser import (
    parse_pull_request_url,
)

logger = structlog.get_logger()

# status codes GitHub returns when a comment id cannot take a threaded reply
_REPLY_FALLBACK_STATUSES = (404, 422)


class GitHubPlatformAdapter(PlatformPort):
    def __init__(self, settings: GitHubSettings, client: GitHubHttpClient | None = None):
        self.settings = settings
        self.client = client or GitHubHttpClient(settings)

    @property
    def platform(self) -> PlatformType:
        return PlatformType.GITHUB

    async def resolve_request(self, identifier: RawIdentifier) -> PullRequestRef:
        owner, repo, number = self._to_coordinates(parse_identifier(identifier))
        path = f"/repos/{owner}/{repo}/pulls/{number}"
        try:
            response = await self.client.get(path)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise RequestFetchError(
                f"Failed to fetch pull request {owner}/{repo}#{number}: {exc}",
                context={"path": path},
            ) from exc

        data = response.json()
        return PullRequestRef(
            platform=PlatformType.GITHUB,
            namespace=owner,
            repository=repo,
            number=int(data.get("number") or number),
            head_ref=data["head"]["ref"],
            base_ref=data["base"]["ref"],
            title=data.get("title"),
            web_url=data.get("html_url"),
        )

    async def list_comments(self, ref: PullRequestRef) -> Sequence[ReviewComment]:
        path = f"/repos/{ref.full_name}/pulls/{ref.number}/comments"
        try:
            raw_comments = await self.client.get_all_pages(path)
        except httpx.HTTPError as exc:
            raise CommentFetchError(
                f"Failed to list review comments of {ref}: {exc}", context={"path": path}
            ) from exc
        # replies (ours included) are not review feedback
        comments = [
            GitHubCommentMapper.to_domain(raw)
            for raw in raw_comments
            if not GitHubCommentMapper.is_reply(raw)
        ]
        logger.info(
            "Fetched review comments",
            comment_count=len(comments),
            replies_skipped=len(raw_comments) - len(comments),
        )
        return comments

    async def read_file(
        self, ref: PullRequestRef, path: str, at_ref: str | None = None
    ) -> FileSnapshot:
        file_ref = at_ref or ref.head_ref
        url = f"/repos/{ref.full_name}/contents/{quote(path.lstrip('/'))}"
        response = await self.client.get(url, params={"ref": file_ref})
        if response.status_code == 404:
            raise SourceFileNotFoundError(
                f"'{path}' not found at '{file_ref}'.", context={"path": path, "ref": file_ref}
            )
        response.raise_for_status()

        data = response.json()
        if isinstance(data, list) or data.get("type") != "file":
            raise SourceFileNotFoundError(
                f"'{path}' is a directory or not a regular file.",
                context={"path": path, "ref": file_ref},
            )
        return FileSnapshot(
            path=data.get("path") or path,
            content=decode_file_content(path, data.get("content"), data.get("encoding")),
            ref=file_ref,
        )

    async def post_reply(
        self,
        ref: PullRequestRef,
        original_comment_id: CommentId,
        suggestion_markdown: str,
        rationale: str | None = None,
    ) -> None:
        body = compose_reply_body(suggestion_markdown, rationale)
        reply_path = f"/repos/{ref.full_name}/pulls/{ref.number}/comments/{original_comment_id}/replies"
        try:
            response = await self.client.post(reply_path, {"body": body})
            if response.status_code in _REPLY_FALLBACK_STATUSES:
                logger.warning(
                    "Threaded reply rejected, posting general comment",
                    http_status=response.status_code,
                )
                response = await self.client.post(
                    f"/repos/{ref.full_name}/issues/{ref.number}/comments",
                    {"body": f"Replying to comment ID {original_comment_id}:\n{body}"},
                )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise PostError(
                f"Failed to post suggestion for comment {original_comment_id}: {exc}",
                context={"comment_id": original_comment_id},
            ) from exc
        logger.info("Posted suggestion reply", processing_status="SUCCESS")

    def _to_coordinates(self, identifier: PullRequestIdentifier) -> tuple[str, str, int]:
        if isinstance(identifier, UrlIdentifier):
            identifier = parse_pull_request_url(identifier.url)
        if isinstance(identifier, NumericIdentifier):
            if not (self.settings.owner and self.settings.repo):
                raise IdentifierResolutionError(
                    "A bare pull request number needs GITHUB_OWNER and GITHUB_REPO.",
                    context={"number": identifier.number},
                )
            return self.settings.owner, self.settings.repo, identifier.number
        if isinstance(identifier, ExplicitIdentifier):
            owner = identifier.namespace or self.settings.owner
            if not owner:
                raise IdentifierResolutionError(
                    "Explicit identifier has no owner and GITHUB_OWNER is not set.",
                    context={"repository": identifier.repository},
                )
            return owner, identifier.repository, identifier.number
        raise IdentifierResolutionError(f"Unsupported identifier: {identifier!r}")
