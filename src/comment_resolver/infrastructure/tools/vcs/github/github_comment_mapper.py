from typing import Any

from comment_resolver.core.domain.review import ReviewComment


class GitHubCommentMapper:
    """Maps pull request review comments from the REST API into ``ReviewComment``."""

    @staticmethod
    def to_domain(raw: dict[str, Any]) -> ReviewComment:
        user = raw.get("user") or {}
        end_line, start_line = _line_pair(raw)
        return ReviewComment(
            id=raw["id"],
            body=raw.get("body") or "",
            file_path=raw.get("path"),
            end_line=end_line,
            start_line=start_line,
            author=user.get("login"),
        )

    @staticmethod
    def is_reply(raw: dict[str, Any]) -> bool:
        return raw.get("in_reply_to_id") is not None


def _line_pair(raw: dict[str, Any]) -> tuple[int | None, int | None]:
    """Return ``(end, start)`` from one numbering; outdated comments only carry original_* positions."""
    if raw.get("line"):
        return raw["line"], raw.get("start_line")
    return raw.get("original_line"), raw.get("original_start_line")
