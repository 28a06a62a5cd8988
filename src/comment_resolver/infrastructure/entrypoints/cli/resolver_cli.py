import asyncio
from typing import Annotated

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from comment_resolver.core.domain.review import ResolutionOutcome, ResolutionRunReport
from comment_resolver.core.domain.shared import PlatformType
from comment_resolver.core.exceptions import ResolverError
from comment_resolver.infrastructure.config.app_config import AppConfig
from comment_resolver.infrastructure.config.resolution.container import run_resolution
from comment_resolver.infrastructure.observability.logger_factory_service import (
    configure_logging,
)
from comment_resolver.infrastructure.observability.redaction_service import redact_text

console = Console()

app = typer.Typer(
    name="comment-resolver",
    help="Turn inline review comments into committable code suggestions.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

_OUTCOME_STYLES = {
    ResolutionOutcome.POSTED: "green",
    ResolutionOutcome.SKIPPED: "yellow",
    ResolutionOutcome.FAILED: "red",
}


@app.command("resolve")
def resolve(
    identifier: Annotated[
        str | None,
        typer.Argument(help="Request number or pull/merge request URL. Defaults to PULL_REQUEST_URL / PULL_REQUEST_NUMBER."),
    ] = None,
    platform: Annotated[
        PlatformType | None, typer.Option(help="Hosting platform. Defaults to VCS_PLATFORM or auto-detection.")
    ] = None,
    window: Annotated[
        int | None, typer.Option(min=0, help="Context lines on each side of the commented line.")
    ] = None,
) -> None:
    """Resolve every review comment of one pull/merge request."""
    config = AppConfig()
    configure_logging(config.app.log_level)
    try:
        report = asyncio.run(run_resolution(identifier, platform, window, config))
    except ResolverError as exc:
        console.print(f"[red]Error:[/red] {redact_text(exc.message)}")
        raise typer.Exit(code=1) from exc
    _print_report(report)


@app.command("serve")
def serve(
    host: Annotated[str, typer.Option(help="Bind address.")] = "0.0.0.0",
    port: Annotated[int, typer.Option(help="Bind port.")] = 8000,
    reload: Annotated[bool, typer.Option(help="Reload on code changes.")] = False,
) -> None:
    """Start the HTTP trigger."""
    uvicorn.run("comment_resolver.main:app", host=host, port=port, reload=reload)


def _print_report(report: ResolutionRunReport) -> None:
    if not report.resolutions:
        console.print(f"No review comments found on {report.ref}.")
        return

    table = Table(title=f"Comment resolution for {report.ref}")
    table.add_column("Comment", style="cyan")
    table.add_column("Outcome")
    table.add_column("Reason")
    table.add_column("Detail", overflow="fold")
    for resolution in report.resolutions:
        style = _OUTCOME_STYLES[resolution.outcome]
        table.add_row(
            str(resolution.comment_id),
            f"[{style}]{resolution.outcome.value}[/{style}]",
            resolution.reason.value if resolution.reason else "",
            resolution.detail or "",
        )
    console.print(table)
    console.print(
        f"[green]{report.posted} posted[/green], "
        f"[yellow]{report.skipped} skipped[/yellow], "
        f"[red]{report.failed} failed[/red]"
    )


def main() -> None:
    app()
