from __future__ import annotations

from collections.abc import Iterable, Sequence

from .models import PRSummary, PullRequest, PullRequestState
from .pullrequests import PullRequestFetcher


def summarize(prs: Sequence[PullRequest]) -> PRSummary:
    """Aggregate counts over a complete set of pull requests.

    Comment totals use each connection's ``total_count``, not the number of
    nodes fetched.
    """
    by_author: dict[str, int] = {}
    for pr in prs:
        login = pr.author_login
        if login:
            by_author[login] = by_author.get(login, 0) + 1

    return PRSummary(
        total_prs=len(prs),
        open_prs=sum(1 for pr in prs if pr.state == PullRequestState.OPEN),
        closed_prs=sum(1 for pr in prs if pr.state == PullRequestState.CLOSED),
        merged_prs=sum(1 for pr in prs if pr.state == PullRequestState.MERGED),
        total_comments=sum(pr.comments.total_count for pr in prs),
        total_review_comments=sum(pr.review_comments.total_count for pr in prs),
        prs_by_author=by_author,
    )


def most_commented(prs: Iterable[PullRequest], n: int = 5) -> list[PullRequest]:
    return sorted(
        prs,
        key=lambda pr: pr.comments.total_count + pr.review_comments.total_count,
        reverse=True,
    )[:n]


class PRAnalyzer:
    def __init__(self, fetcher: PullRequestFetcher) -> None:
        self._fetcher = fetcher

    def get_pr_summary(self, owner: str, repo: str, since: str) -> PRSummary:
        prs = self._fetcher.get_all_pull_requests_with_comments_since(owner, repo, since)
        return summarize(prs)
