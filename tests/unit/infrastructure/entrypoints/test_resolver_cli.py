"""Unit tests: typer CLI (run_resolution mocked)."""

from unittest.mock import AsyncMock, patch

import pytest
from typer.testing import CliRunner

from comment_resolver.core.domain.review import (
    CommentResolution,
    PullRequestRef,
    ResolutionReason,
    ResolutionRunReport,
)
from comment_resolver.core.domain.shared import PlatformType
from comment_resolver.core.exceptions import ConfigurationError, RequestFetchError
from comment_resolver.infrastructure.entrypoints.cli import app

MODULE = "comment_resolver.infrastructure.entrypoints.cli.resolver_cli"

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_logging_setup():
    with patch(f"{MODULE}.configure_logging"):
        yield


@pytest.fixture()
def report(github_ref: PullRequestRef) -> ResolutionRunReport:
    return ResolutionRunReport(
        ref=github_ref,
        resolutions=[
            CommentResolution.posted(1),
            CommentResolution.skipped(2, ResolutionReason.INELIGIBLE),
            CommentResolution.failed(3, ResolutionReason.POST_ERROR, "403 Forbidden"),
        ],
    )


class TestResolveCommand:
    def test_prints_summary_and_exits_zero_with_failures(self, report: ResolutionRunReport) -> None:
        with patch(f"{MODULE}.run_resolution", AsyncMock(return_value=report)) as run:
            result = runner.invoke(app, ["resolve", "42", "--platform", "github", "--window", "3"])

        assert result.exit_code == 0, result.output
        assert run.await_args.args[:3] == ("42", PlatformType.GITHUB, 3)
        assert "1 posted" in result.output
        assert "1 skipped" in result.output
        assert "1 failed" in result.output
        assert "post_error" in result.output

    def test_identifier_is_optional(self, github_ref: PullRequestRef) -> None:
        empty = ResolutionRunReport(ref=github_ref)
        with patch(f"{MODULE}.run_resolution", AsyncMock(return_value=empty)) as run:
            result = runner.invoke(app, ["resolve"])

        assert result.exit_code == 0, result.output
        assert run.await_args.args[:3] == (None, None, None)
        assert "No review comments found" in result.output

    @pytest.mark.parametrize(
        "error",
        [ConfigurationError("GITHUB_TOKEN is required"), RequestFetchError("404 Not Found")],
    )
    def test_fatal_errors_exit_one(self, error: Exception) -> None:
        with patch(f"{MODULE}.run_resolution", AsyncMock(side_effect=error)):
            result = runner.invoke(app, ["resolve", "42"])

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_negative_window_is_rejected(self) -> None:
        result = runner.invoke(app, ["resolve", "42", "--window", "-1"])

        assert result.exit_code != 0


@pytest.mark.parametrize("args", [["--help"], ["resolve", "--help"], ["serve", "--help"]])
def test_help(args: list[str]) -> None:
    result = runner.invoke(app, args)

    assert result.exit_code == 0
