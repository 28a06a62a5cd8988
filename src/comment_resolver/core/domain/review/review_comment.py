from dataclasses import dataclass

CommentId = int | str


@dataclass(frozen=True, kw_only=True)
class ReviewComment:
    """One inline reviewer comment, normalized from a platform-native record.

    Line numbers are 1-indexed and inclusive. ``start_line`` defaults to
    ``end_line`` when the platform only anchors a single line.
    """

    id: CommentId
    body: str
    file_path: str | None = None
    end_line: int | None = None
    start_line: int | None = None
    author: str | None = None

    @property
    def is_eligible(self) -> bool:
        """Only comments anchored to both a file and a line can be resolved."""
        return bool(self.file_path) and bool(self.end_line)

    @property
    def effective_start_line(self) -> int | None:
        """Start line of the commented range, never past the end line."""
        if self.end_line is None:
            return None
        if self.start_line is None or self.start_line > self.end_line:
            return self.end_line
        return self.start_line

    def preview(self, limit: int = 100) -> str:
        text = " ".join(self.body.split())
        return text if len(text) <= limit else f"{text[:limit]}..."
