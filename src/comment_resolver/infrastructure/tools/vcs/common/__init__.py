from .content_decoding import decode_file_content
from .vcs_http_client import VcsHttpClient

__all__ = [
    "VcsHttpClient",
    "decode_file_content",
]
