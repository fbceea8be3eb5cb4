from __future__ import annotations

from datetime import datetime, timezone

from ..models import PRSummary, PullRequest


def _now() -> str:
    return datetime.now(tz=timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def format_summary_markdown(summary: PRSummary, owner_repo: str = "", since: str = "") -> str:
    lines: list[str] = []

    title = f"Pull Request Summary: {owner_repo}" if owner_repo else "Pull Request Summary"
    lines.append(f"# {title}")
    header = f"> Since: {since} · Generated: {_now()}" if since else f"> Generated: {_now()}"
    lines.append(header)
    lines.append("")
    lines.append("| Metric | Count |")
    lines.append("| --- | --- |")
    lines.append(f"| Total PRs | {summary.total_prs} |")
    lines.append(f"| Open | {summary.open_prs} |")
    lines.append(f"| Merged | {summary.merged_prs} |")
    lines.append(f"| Closed | {summary.closed_prs} |")
    lines.append(f"| Comments | {summary.total_comments} |")
    lines.append(f"| Review Comments | {summary.total_review_comments} |")
    lines.append("")

    if summary.prs_by_author:
        lines.append(f"## Authors ({len(summary.prs_by_author)})")
        lines.append("")
        lines.append("| Author | PRs |")
        lines.append("| --- | --- |")
        for login, count in summary.top_authors(len(summary.prs_by_author)):
            lines.append(f"| @{login} | {count} |")
        lines.append("")

    return "\n".join(lines)


def format_prs_markdown(prs: list[PullRequest], owner_repo: str = "") -> str:
    lines: list[str] = []

    title = f"Pull Requests: {owner_repo}" if owner_repo else "Pull Requests"
    lines.append(f"# {title}")
    lines.append(f"> Fetched {len(prs)} PRs · Generated: {_now()}")
    lines.append("")

    for pr in prs:
        lines.append(f"## PR #{pr.number} — {pr.title}")
        lines.append("")
        lines.append("| Field | Value |")
        lines.append("| --- | --- |")
        lines.append(f"| Author | {pr.author_login or 'ghost'} |")
        lines.append(f"| State | {pr.state} |")
        lines.append(f"| Created | {pr.created_at} |")
        lines.append(f"| Updated | {pr.updated_at} |")
        if pr.merged_at:
            lines.append(f"| Merged | {pr.merged_at} |")
        lines.append(f"| Comments | {pr.comments.total_count} |")
        lines.append(f"| Review Comments | {pr.review_comments.total_count} |")
        lines.append(f"| URL | {pr.url} |")
        lines.append("")

    return "\n".join(lines)
