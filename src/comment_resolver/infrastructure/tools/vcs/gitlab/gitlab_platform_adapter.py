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
from comment_resolver.infrastructure.tools.vcs.gitlab.config import GitLabSettings
from comment_resolver.infrastructure.tools.vcs.gitlab.gitlab_discussion_mapper import (
    GitLabDiscussionMapper,
)
from comment_resolver.infrastructure.tools.vcs.gitlab.gitlab_http_client import GitLabHttpClient
from comment_resolver.infrastructure.tools.vcs.gitlab.gitlab_url_parser import (
    parse_merge_request_url,
)

logger = structlog.get_logger()


class GitLabPlatformAdapter(PlatformPort):
    """GitLab v4 back end. Project paths are URL-encoded into the ``:id`` slot."""

    def __init__(self, settings: GitLabSettings, client: GitLabHttpClient | None = None):
        self.settings = settings
        self.client = client or GitLabHttpClient(settings)
        # note id -> discussion id, filled while listing comments
        self._discussion_by_note: dict[str, str] = {}

    @property
    def platform(self) -> PlatformType:
        return PlatformType.GITLAB

    async def resolve_request(self, identifier: RawIdentifier) -> PullRequestRef:
        project_path, iid = self._to_coordinates(parse_identifier(identifier))
        path = f"/projects/{_encode(project_path)}/merge_requests/{iid}"
        try:
            response = await self.client.get(path)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise RequestFetchError(
                f"Failed to fetch merge request {project_path}!{iid}: {exc}",
                context={"path": path},
            ) from exc

        data = response.json()
        namespace, _, repository = project_path.rpartition("/")
        return PullRequestRef(
            platform=PlatformType.GITLAB,
            namespace=namespace,
            repository=repository,
            number=int(data.get("iid") or iid),
            head_ref=data["source_branch"],
            base_ref=data["target_branch"],
            title=data.get("title"),
            web_url=data.get("web_url"),
        )

    async def list_comments(self, ref: PullRequestRef) -> Sequence[ReviewComment]:
        try:
            discussions = await self._fetch_discussions(ref)
        except httpx.HTTPError as exc:
            raise CommentFetchError(
                f"Failed to list discussions of {ref}: {exc}", context={"merge_request": str(ref)}
            ) from exc

        comments = []
        for discussion_id, note in GitLabDiscussionMapper.iter_diff_notes(discussions):
            self._discussion_by_note[str(note["id"])] = discussion_id
            comments.append(GitLabDiscussionMapper.to_domain(note))
        logger.info("Fetched review comments", comment_count=len(comments))
        return comments

    async def read_file(
        self, ref: PullRequestRef, path: str, at_ref: str | None = None
    ) -> FileSnapshot:
        file_ref = at_ref or ref.head_ref
        url = f"/projects/{_encode(ref.full_name)}/repository/files/{_encode(path.lstrip('/'))}"
        response = await self.client.get(url, params={"ref": file_ref})
        if response.status_code == 404:
            raise SourceFileNotFoundError(
                f"'{path}' not found at '{file_ref}'.", context={"path": path, "ref": file_ref}
            )
        response.raise_for_status()

        data = response.json()
        return FileSnapshot(
            path=data.get("file_path") or path,
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
        mr_path = f"/projects/{_encode(ref.full_name)}/merge_requests/{ref.number}"
        try:
            discussion_id = await self._discussion_for(ref, original_comment_id)
            if discussion_id:
                response = await self.client.post(
                    f"{mr_path}/discussions/{discussion_id}/notes", {"body": body}
                )
            else:
                logger.warning("No positional discussion found, posting general note")
                response = await self.client.post(
                    f"{mr_path}/notes",
                    {"body": f"Replying to comment ID {original_comment_id}:\n{body}"},
                )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise PostError(
                f"Failed to post suggestion for note {original_comment_id}: {exc}",
                context={"comment_id": original_comment_id},
            ) from exc
        logger.info("Posted suggestion reply", processing_status="SUCCESS")

    async def _fetch_discussions(self, ref: PullRequestRef) -> list[dict]:
        return await self.client.get_all_pages(
            f"/projects/{_encode(ref.full_name)}/merge_requests/{ref.number}/discussions"
        )

    async def _discussion_for(self, ref: PullRequestRef, note_id: CommentId) -> str | None:
        key = str(note_id)
        if key not in self._discussion_by_note:
            discussions = await self._fetch_discussions(ref)
            for discussion_id, note in GitLabDiscussionMapper.iter_diff_notes(discussions):
                self._discussion_by_note[str(note["id"])] = discussion_id
        return self._discussion_by_note.get(key)

    def _to_coordinates(self, identifier: PullRequestIdentifier) -> tuple[str, int]:
        if isinstance(identifier, UrlIdentifier):
            identifier = parse_merge_request_url(identifier.url, self.settings.base_url)
        if isinstance(identifier, NumericIdentifier):
            if not self.settings.project_path:
                raise IdentifierResolutionError(
                    "A bare merge request iid needs GITLAB_PROJECT_PATH.",
                    context={"number": identifier.number},
                )
            return self.settings.project_path.strip("/"), identifier.number
        if isinstance(identifier, ExplicitIdentifier):
            if identifier.namespace:
                return f"{identifier.namespace}/{identifier.repository}", identifier.number
            return identifier.repository, identifier.number
        raise IdentifierResolutionError(f"Unsupported identifier: {identifier!r}")


def _encode(value: str) -> str:
    return quote(value, safe="")
