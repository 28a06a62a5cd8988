import base64
import binascii

from comment_resolver.core.exceptions import SourceFileNotFoundError


def decode_file_content(path: str, content: str | None, encoding: str | None) -> str:
    """Turn a REST file payload into UTF-8 text; undecodable bytes are replaced."""
    if content is None:
        raise SourceFileNotFoundError(f"No content returned for '{path}'.", context={"path": path})
    if not encoding:
        return content
    if encoding != "base64":
        raise SourceFileNotFoundError(
            f"Unsupported content encoding '{encoding}' for '{path}'.",
            context={"path": path, "encoding": encoding},
        )
    try:
        raw = base64.b64decode(content)
    except (binascii.Error, ValueError) as exc:
        raise SourceFileNotFoundError(
            f"Content of '{path}' is not valid base64.", context={"path": path}
        ) from exc
    return raw.decode("utf-8", errors="replace")
