from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import click
import httpx
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn

from .client import GraphQLClient, env_token_source
from .errors import GhPulseError
from .formatters import get_prs_formatter, get_summary_formatter
from .models import PullRequest
from .pullrequests import PullRequestFetcher, days_ago, format_date
from .summary import summarize

_stderr = Console(stderr=True)


load_dotenv()


def _split_repo(repo: str) -> tuple[str, str]:
    if "/" not in repo or repo.count("/") != 1:
        raise click.BadParameter(
            f"{repo!r} is not a valid OWNER/REPO format.",
            param_hint="REPO",
        )
    owner, repo_name = repo.split("/", 1)
    if not owner or not repo_name:
        raise click.BadParameter(
            f"{repo!r} is not a valid OWNER/REPO format.",
            param_hint="REPO",
        )
    return owner, repo_name


def _parse_since(ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
    if value is None:
        return None
    try:
        # fromisoformat only accepts a trailing Z from Python 3.11 on.
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        raise click.BadParameter(f"{value!r} is not an ISO 8601 timestamp.") from None
    return format_date(parsed)


def _fetch_all(repo: str, since: str, base_url: str | None) -> list[PullRequest]:
    owner, repo_name = _split_repo(repo)
    prs: list[PullRequest] = []
    try:
        with GraphQLClient(base_url=base_url, token_source=env_token_source()) as client:
            fetcher = PullRequestFetcher(client)
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=_stderr,
                transient=True,
            ) as progress:
                task_id = progress.add_task(f"Fetching PRs from {repo}…", total=None)
                for pr in fetcher.iter_pull_requests_with_comments_since(owner, repo_name, since):
                    prs.append(pr)
                    progress.update(task_id, description=f"Fetched {len(prs)} PRs from {repo}…")
    except (GhPulseError, httpx.RequestError) as exc:
        _stderr.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)
    return prs


def _write(output: str, output_path: Path | None, count: int) -> None:
    if output_path is not None:
        output_path.write_text(output, encoding="utf-8")
        _stderr.print(f"[green]Wrote {count} PRs to {output_path}[/green]")
    else:
        click.echo(output)


def _common_options(func: Callable[..., None]) -> Callable[..., None]:
    func = click.option(
        "--output",
        "output_path",
        type=click.Path(path_type=Path),
        default=None,
        help="Write output to a file instead of stdout.",
    )(func)
    func = click.option(
        "--format",
        "output_format",
        type=click.Choice(["json", "markdown"]),
        default="json",
        show_default=True,
        help="Output format.",
    )(func)
    func = click.option(
        "--since",
        default=None,
        callback=_parse_since,
        help="ISO timestamp; overrides --days.",
    )(func)
    func = click.option(
        "--days",
        type=click.IntRange(min=0),
        default=7,
        show_default=True,
        help="Look back this many days.",
    )(func)
    func = click.argument("repo", metavar="OWNER/REPO")(func)
    return func


@click.group()
@click.option(
    "--base-url",
    envvar="GITHUB_GRAPHQL_URL",
    default=None,
    help="GraphQL endpoint (defaults to api.github.com).",
)
@click.option("-v", "--verbose", is_flag=True, help="Log requests and pagination to stderr.")
@click.pass_context
def cli(ctx: click.Context, base_url: str | None, verbose: bool) -> None:
    """ghpulse: summarize recent pull request activity on GitHub."""
    ctx.obj = {"base_url": base_url}
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=_stderr, show_path=False)],
        )


@cli.command()
@_common_options
@click.pass_obj
def summary(
    obj: dict,
    repo: str,
    days: int,
    since: str | None,
    output_format: str,
    output_path: Path | None,
) -> None:
    """Summarize pull requests updated in OWNER/REPO."""
    since = since or days_ago(days)
    prs = _fetch_all(repo, since, obj["base_url"])
    formatter = get_summary_formatter(output_format, owner_repo=repo, since=since)
    _write(formatter(summarize(prs)), output_path, len(prs))


@cli.command()
@_common_options
@click.pass_obj
def prs(
    obj: dict,
    repo: str,
    days: int,
    since: str | None,
    output_format: str,
    output_path: Path | None,
) -> None:
    """List pull requests updated in OWNER/REPO with their comment counts."""
    since = since or days_ago(days)
    pulls = _fetch_all(repo, since, obj["base_url"])
    formatter = get_prs_formatter(output_format, owner_repo=repo)
    _write(formatter(pulls), output_path, len(pulls))
