from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .json_fmt import format_prs_json, format_summary_json
from .markdown_fmt import format_prs_markdown, format_summary_markdown
from ..models import PRSummary, PullRequest


def get_summary_formatter(fmt: str, **kwargs: Any) -> Callable[[PRSummary], str]:
    if fmt == "json":
        return format_summary_json
    if fmt == "markdown":
        owner_repo = kwargs.get("owner_repo", "")
        since = kwargs.get("since", "")
        return lambda summary: format_summary_markdown(summary, owner_repo=owner_repo, since=since)
    raise ValueError(f"Unknown format: {fmt!r}")


def get_prs_formatter(fmt: str, **kwargs: Any) -> Callable[[list[PullRequest]], str]:
    if fmt == "json":
        return format_prs_json
    if fmt == "markdown":
        owner_repo = kwargs.get("owner_repo", "")
        return lambda prs: format_prs_markdown(prs, owner_repo=owner_repo)
    raise ValueError(f"Unknown format: {fmt!r}")
