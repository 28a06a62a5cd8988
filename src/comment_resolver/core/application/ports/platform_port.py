from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any

from comment_resolver.core.domain.review import (
    CommentId,
    FileSnapshot,
    PullRequestRef,
    ReviewComment,
)
from comment_resolver.core.domain.review.pull_request_identifier import PullRequestIdentifier
from comment_resolver.core.domain.shared import PlatformType

RawIdentifier = PullRequestIdentifier | int | str | Mapping[str, Any]


class PlatformPort(ABC):
    """Capability set every hosting platform back end must provide.

    Transport and auth failures propagate unchanged; callers decide whether a
    failure is fatal to the run or only to one comment.
    """

    @property
    @abstractmethod
    def platform(self) -> PlatformType:
        """The hosting platform this adapter talks to."""

    @abstractmethod
    async def resolve_request(self, identifier: RawIdentifier) -> PullRequestRef:
        """Parse the identifier and fetch the request's head/base refs.

        Raises:
            IdentifierResolutionError: The identifier matches no accepted shape
                or a bare number has no configured default namespace.
        """

    @abstractmethod
    async def list_comments(self, ref: PullRequestRef) -> Sequence[ReviewComment]:
        """Fetch every positional, resolvable inline comment of the request."""

    @abstractmethod
    async def read_file(
        self, ref: PullRequestRef, path: str, at_ref: str | None = None
    ) -> FileSnapshot:
        """Read ``path`` at ``at_ref`` (default: the request's head ref) as plain text.

        Raises:
            SourceFileNotFoundError: The path is missing or not a regular file.
        """

    @abstractmethod
    async def post_reply(
        self,
        ref: PullRequestRef,
        original_comment_id: CommentId,
        suggestion_markdown: str,
        rationale: str | None = None,
    ) -> None:
        """Post the suggestion tied to the original comment's location.

        Falls back to a general comment referencing ``original_comment_id``
        when no position can be resolved.

        Raises:
            PostError: Neither the positional reply nor the fallback was possible.
        """
