import pytest

from comment_resolver.core.domain.review import PullRequestRef, ReviewComment
from comment_resolver.core.domain.shared import PlatformType

# Settings read the process environment; tests must not see a developer's tokens.
_SETTINGS_ENV_VARS = (
    "VCS_PLATFORM",
    "PULL_REQUEST_URL",
    "PULL_REQUEST_NUMBER",
    "CONTEXT_WINDOW_LINES",
    "LANGUAGE_HINT",
    "PROJECT_RULES",
    "PROJECT_RULES_FILE",
    "RESOLVER_API_KEY",
    "GITHUB_TOKEN",
    "GITHUB_API_URL",
    "GITHUB_OWNER",
    "GITHUB_REPO",
    "GITLAB_TOKEN",
    "GITLAB_BASE_URL",
    "GITLAB_PROJECT_PATH",
    "LLM_PROVIDER",
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "OPENAI_BASE_URL",
    "AZURE_OPENAI_API_KEY",
    "AZURE_OPENAI_ENDPOINT",
    "AZURE_OPENAI_API_VERSION",
    "AZURE_OPENAI_DEPLOYMENT_NAME",
    "ANTHROPIC_API_KEY",
    "ANTHROPIC_MODEL",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # keep a stray .env in the repo root out of the settings
    monkeypatch.chdir(tmp_path)


@pytest.fixture()
def github_ref() -> PullRequestRef:
    return PullRequestRef(
        platform=PlatformType.GITHUB,
        namespace="acme",
        repository="widgets",
        number=42,
        head_ref="feature/retry",
        base_ref="main",
    )


@pytest.fixture()
def gitlab_ref() -> PullRequestRef:
    return PullRequestRef(
        platform=PlatformType.GITLAB,
        namespace="acme/platform",
        repository="billing",
        number=7,
        head_ref="feature/invoice",
        base_ref="main",
    )


@pytest.fixture()
def inline_comment() -> ReviewComment:
    return ReviewComment(
        id=1001,
        body="Use a constant instead of the magic number.",
        file_path="src/app.py",
        end_line=3,
        author="reviewer",
    )
