from collections.abc import Iterator
from typing import Any

from comment_resolver.core.domain.review import ReviewComment


class GitLabDiscussionMapper:
    """Flattens merge request discussions into positional ``ReviewComment`` records."""

    @staticmethod
    def iter_diff_notes(discussions: list[dict[str, Any]]) -> Iterator[tuple[str, dict[str, Any]]]:
        """Yield ``(discussion_id, note)`` for every resolvable DiffNote."""
        for discussion in discussions:
            for note in discussion.get("notes") or []:
                if note.get("type") == "DiffNote" and note.get("resolvable"):
                    yield discussion["id"], note

    @staticmethod
    def to_domain(note: dict[str, Any]) -> ReviewComment:
        position = note.get("position") or {}
        author = note.get("author") or {}
        end_line, start_line = _line_pair(position)
        return ReviewComment(
            id=note["id"],
            body=note.get("body") or "",
            file_path=position.get("new_path") or position.get("old_path"),
            end_line=end_line,
            start_line=start_line,
            author=author.get("username"),
        )


def _line_pair(position: dict[str, Any]) -> tuple[int | None, int | None]:
    """Return ``(end, start)`` both on the new side or both on the old side."""
    start = (position.get("line_range") or {}).get("start") or {}
    if position.get("new_line"):
        return position["new_line"], start.get("new_line")
    return position.get("old_line"), start.get("old_line")
