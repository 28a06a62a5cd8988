"""Pure functions that cut line-accurate slices out of a file's text.

Lines are 1-indexed for callers. An empty string means "no context available"
and is never an error.
"""


def extract_context(file_text: str, target_line: int, window_size: int) -> str:
    """Return ``window_size`` lines on each side of ``target_line``, clamped to the file."""
    if window_size < 0:
        raise ValueError(f"window_size must be non-negative, got {window_size}")
    if not file_text or target_line <= 0:
        return ""
    lines = file_text.split("\n")
    target = target_line - 1
    if target >= len(lines):
        return ""
    start = max(0, target - window_size)
    end = min(len(lines) - 1, target + window_size)
    return "\n".join(lines[start : end + 1])


def extract_exact_slice(start_line: int, end_line: int, file_text: str) -> str:
    """Return the verbatim lines ``start_line..end_line`` (inclusive)."""
    if not file_text or start_line <= 0 or end_line < start_line:
        return ""
    lines = file_text.split("\n")
    if end_line > len(lines):
        return ""
    return "\n".join(lines[start_line - 1 : end_line])
