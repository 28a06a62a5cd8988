import re
from urllib.parse import urlparse

from comment_resolver.core.domain.review.pull_request_identifier import ExplicitIdentifier
from comment_resolver.core.exceptions import IdentifierResolutionError

_PULL_PATH_RE = re.compile(r"^/(?P<owner>[^/]+)/(?P<repo>[^/]+)/pulls?/(?P<number>\d+)(?:/.*)?$")
_API_PULL_PATH_RE = re.compile(
    r"^(?:/api/v3)?/repos/(?P<owner>[^/]+)/(?P<repo>[^/]+)/pulls/(?P<number>\d+)/?$"
)


def parse_pull_request_url(url: str) -> ExplicitIdentifier:
    """``https://github.com/<owner>/<repo>/pull/<n>`` (web or REST form) to an explicit identifier."""
    path = urlparse(url).path.rstrip("/")
    match = _API_PULL_PATH_RE.match(path) or _PULL_PATH_RE.match(path)
    if match is None or int(match["number"]) <= 0:
        raise IdentifierResolutionError(
            "Not a GitHub pull request URL.", context={"identifier": url}
        )
    return ExplicitIdentifier(match["owner"], match["repo"], int(match["number"]))


def is_github_pull_request_url(url: str) -> bool:
    path = urlparse(url).path.rstrip("/")
    return bool(_PULL_PATH_RE.match(path) or _API_PULL_PATH_RE.match(path))
