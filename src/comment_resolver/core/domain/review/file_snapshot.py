from dataclasses import dataclass


@dataclass(frozen=True)
class FileSnapshot:
    """Text of one file at one ref, already decoded to plain text by the adapter."""

    path: str
    content: str
    ref: str
    encoding: str = "utf-8"
