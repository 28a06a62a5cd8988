"""Tagged union for the shapes a pull/merge request identifier can take.

Raw input arrives as an ``int``, a string (digits or a URL) or a mapping; it is
classified exactly once and the platform adapter turns the resulting variant
into a ``PullRequestRef``.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from comment_resolver.core.exceptions import IdentifierResolutionError


@dataclass(frozen=True)
class NumericIdentifier:
    number: int


@dataclass(frozen=True)
class UrlIdentifier:
    url: str


@dataclass(frozen=True)
class ExplicitIdentifier:
    namespace: str
    repository: str
    number: int


PullRequestIdentifier = NumericIdentifier | UrlIdentifier | ExplicitIdentifier

_NAMESPACE_KEYS = ("namespace", "owner")
_REPOSITORY_KEYS = ("repository", "repo", "project")
_NUMBER_KEYS = ("number", "pull_number", "pullNumber", "iid")


def parse_identifier(raw: Any) -> PullRequestIdentifier:
    """Classify a raw identifier into one of the union variants."""
    if isinstance(raw, NumericIdentifier | UrlIdentifier | ExplicitIdentifier):
        return raw
    if isinstance(raw, bool):
        raise IdentifierResolutionError(f"Unsupported identifier: {raw!r}")
    if isinstance(raw, int):
        return NumericIdentifier(_positive(raw))
    if isinstance(raw, str):
        return _from_string(raw)
    if isinstance(raw, Mapping):
        return _from_mapping(raw)
    raise IdentifierResolutionError(
        f"Unsupported identifier type: {type(raw).__name__}",
        context={"identifier": repr(raw)},
    )


def _from_string(raw: str) -> PullRequestIdentifier:
    value = raw.strip()
    if not value:
        raise IdentifierResolutionError("Identifier is empty.")
    if value.lstrip("#!").isdigit():
        return NumericIdentifier(_positive(int(value.lstrip("#!"))))
    if value.startswith(("http://", "https://")):
        return UrlIdentifier(value)
    raise IdentifierResolutionError(
        "Identifier must be a number, a pull/merge request URL, or an explicit record.",
        context={"identifier": value},
    )


def _from_mapping(raw: Mapping[str, Any]) -> ExplicitIdentifier:
    namespace = _first(raw, _NAMESPACE_KEYS) or ""
    repository = _first(raw, _REPOSITORY_KEYS)
    number = _first(raw, _NUMBER_KEYS)
    if not repository or number is None:
        raise IdentifierResolutionError(
            "Explicit identifier requires a repository and a number.",
            context={"identifier": dict(raw)},
        )
    try:
        parsed_number = int(number)
    except (TypeError, ValueError) as exc:
        raise IdentifierResolutionError(f"Invalid request number: {number!r}") from exc
    return ExplicitIdentifier(str(namespace), str(repository), _positive(parsed_number))


def _first(raw: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if raw.get(key) not in (None, ""):
            return raw[key]
    return None


def _positive(number: int) -> int:
    if number <= 0:
        raise IdentifierResolutionError(f"Request number must be positive, got {number}.")
    return number
