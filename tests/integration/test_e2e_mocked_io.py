"""End-to-end: real adapters and generator, HTTP mocked at the wire with respx."""

import base64
import json

import httpx
import pytest
import respx
from pydantic import SecretStr

from comment_resolver.core.domain.review import ResolutionOutcome, ResolutionReason
from comment_resolver.infrastructure.config import AppConfig, AppSettings
from comment_resolver.infrastructure.config.resolution import run_resolution
from comment_resolver.infrastructure.tools.llm.config import LlmSettings
from comment_resolver.infrastructure.tools.vcs.github.config import GitHubSettings
from comment_resolver.infrastructure.tools.vcs.gitlab.config import GitLabSettings

GITHUB = "https://api.github.com/repos/acme/widgets"
OPENAI = "https://api.openai.com/v1/chat/completions"
SOURCE = "import time\n\n\ndef wait():\n    time.sleep(30)\n    return True\n"


def _config() -> AppConfig:
    return AppConfig(
        app=AppSettings(CONTEXT_WINDOW_LINES=2),
        github=GitHubSettings(GITHUB_TOKEN=SecretStr("ghp_e2e")),
        gitlab=GitLabSettings(),
        llm=LlmSettings(OPENAI_API_KEY=SecretStr("sk-e2e"), LLM_MAX_RETRIES=0),
    )


def _completion(content: str) -> httpx.Response:
    return httpx.Response(
        200,
        json={
            "id": "chatcmpl-e2e",
            "object": "chat.completion",
            "created": 1700000000,
            "model": "gpt-4o",
            "choices": [
                {"index": 0, "finish_reason": "stop",
                 "message": {"role": "assistant", "content": content}},
            ],
        },
    )


@pytest.mark.integration
@pytest.mark.asyncio
@respx.mock
async def test_github_pull_request_end_to_end() -> None:
    respx.get(f"{GITHUB}/pulls/42").mock(
        return_value=httpx.Response(
            200, json={"number": 42, "head": {"ref": "feature/wait"}, "base": {"ref": "main"}}
        )
    )
    respx.get(f"{GITHUB}/pulls/42/comments").mock(
        return_value=httpx.Response(
            200,
            json=[
                {"id": 1, "body": "Magic number", "path": "src/wait.py", "line": 5},
                {"id": 2, "body": "Typo in docs", "path": "docs/missing.md", "line": 1},
                {"id": 3, "body": "Odd", "path": "src/wait.py", "line": 6},
            ],
        )
    )
    respx.get(f"{GITHUB}/contents/src/wait.py").mock(
        return_value=httpx.Response(
            200,
            json={"type": "file", "path": "src/wait.py", "encoding": "base64",
                  "content": base64.b64encode(SOURCE.encode()).decode()},
        )
    )
    respx.get(f"{GITHUB}/contents/docs/missing.md").mock(return_value=httpx.Response(404))
    openai_route = respx.post(OPENAI).mock(
        side_effect=[
            _completion(
                "```suggestion\n    time.sleep(WAIT_SECONDS)\n```\nRationale: Name the delay."
            ),
            _completion("I would rather not."),
        ]
    )
    reply_route = respx.post(f"{GITHUB}/pulls/42/comments/1/replies").mock(
        return_value=httpx.Response(201, json={"id": 100})
    )

    report = await run_resolution("https://github.com/acme/widgets/pull/42", config=_config())

    assert [r.outcome for r in report.resolutions] == [
        ResolutionOutcome.POSTED,
        ResolutionOutcome.SKIPPED,
        ResolutionOutcome.FAILED,
    ]
    assert report.resolutions[1].reason is ResolutionReason.NO_CONTEXT
    assert report.resolutions[2].reason is ResolutionReason.RESPONSE_FORMAT_ERROR
    assert openai_route.call_count == 2

    prompt = json.loads(openai_route.calls[0].request.read())["messages"][1]["content"]
    assert "    time.sleep(30)" in prompt
    assert "`src/wait.py` (language: python)" in prompt

    posted = json.loads(reply_route.calls.last.request.read())["body"]
    assert posted == "Rationale: Name the delay.\n```suggestion\n    time.sleep(WAIT_SECONDS)\n```"
