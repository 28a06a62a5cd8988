import re
from urllib.parse import urlparse

from comment_resolver.core.domain.review.pull_request_identifier import ExplicitIdentifier
from comment_resolver.core.exceptions import IdentifierResolutionError

_MERGE_REQUEST_PATH_RE = re.compile(
    r"^/(?P<project>.+?)/-/merge_requests/(?P<iid>\d+)(?:/.*)?$"
)


def parse_merge_request_url(url: str, base_url: str | None = None) -> ExplicitIdentifier:
    """Split ``https://<host>/<group>[/<sub>...]/<project>/-/merge_requests/<iid>``.

    When GitLab is served under a relative root (``https://host/gitlab``) pass
    ``base_url`` so that prefix is not mistaken for a group.
    """
    path = urlparse(url).path.rstrip("/")
    prefix = urlparse(base_url).path.rstrip("/") if base_url else ""
    if prefix and path.startswith(f"{prefix}/"):
        path = path[len(prefix):]

    match = _MERGE_REQUEST_PATH_RE.match(path)
    if match is None or int(match["iid"]) <= 0:
        raise IdentifierResolutionError(
            "Not a GitLab merge request URL.", context={"identifier": url}
        )
    namespace, _, project = match["project"].rpartition("/")
    return ExplicitIdentifier(namespace, project, int(match["iid"]))


def is_gitlab_merge_request_url(url: str) -> bool:
    return "/-/merge_requests/" in urlparse(url).path
