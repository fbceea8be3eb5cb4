from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import datetime, timedelta, timezone
from typing import Any

from .client import GraphQLClient
from .models import (
    CommentConnection,
    GitHubUser,
    PageInfo,
    PullRequest,
    PullRequestComment,
    PullRequestPage,
    ReviewComment,
    ReviewCommentConnection,
)
from .queries import PULL_REQUESTS_WITH_COMMENTS_QUERY

ALL_PAGES_PAGE_SIZE = 100

logger = logging.getLogger(__name__)


def format_date(date: datetime) -> str:
    """Render ``date`` the way the GraphQL API expects, e.g. ``2023-01-01T12:00:00.000Z``.

    Naive datetimes are local time.
    """
    date = date.astimezone(timezone.utc)
    return date.strftime("%Y-%m-%dT%H:%M:%S.") + f"{date.microsecond // 1000:03d}Z"


def days_ago(days: int) -> str:
    return format_date(datetime.now(tz=timezone.utc) - timedelta(days=days))


class PullRequestFetcher:
    """Fetches pull requests updated since a timestamp, with their comments."""

    def __init__(self, client: GraphQLClient) -> None:
        self._client = client

    def get_pull_requests_with_comments_since(
        self,
        owner: str,
        repo: str,
        since: str,
        first: int = 20,
        after: str | None = None,
    ) -> PullRequestPage:
        data = self._client.query(
            PULL_REQUESTS_WITH_COMMENTS_QUERY,
            {"owner": owner, "repo": repo, "since": since, "first": first, "after": after},
        )
        conn = data["repository"]["pullRequests"]
        page_info = conn["pageInfo"]
        return PullRequestPage(
            nodes=tuple(self._parse_pull_request(node) for node in conn["nodes"]),
            page_info=PageInfo(
                has_next_page=page_info["hasNextPage"],
                end_cursor=page_info.get("endCursor"),
            ),
            total_count=conn.get("totalCount", 0),
        )

    def iter_pull_requests_with_comments_since(
        self,
        owner: str,
        repo: str,
        since: str,
        page_size: int = ALL_PAGES_PAGE_SIZE,
    ) -> Iterator[PullRequest]:
        """Yield every pull request, one page per request, in API order.

        Pages already yielded stay with the caller if a later page fails.
        """
        after: str | None = None
        pages = 0
        while True:
            page = self.get_pull_requests_with_comments_since(owner, repo, since, page_size, after)
            pages += 1
            logger.debug("Fetched page %d of %s/%s: %d pull requests", pages, owner, repo, len(page.nodes))
            yield from page.nodes

            # hasNextPage without a cursor cannot advance.
            if not page.page_info.has_next_page or not page.page_info.end_cursor:
                break
            after = page.page_info.end_cursor

    def get_all_pull_requests_with_comments_since(
        self, owner: str, repo: str, since: str
    ) -> list[PullRequest]:
        prs = list(self.iter_pull_requests_with_comments_since(owner, repo, since))
        logger.debug("Fetched %d pull requests from %s/%s since %s", len(prs), owner, repo, since)
        return prs

    @staticmethod
    def _parse_user(node: dict[str, Any] | None) -> GitHubUser | None:
        if not node:
            return None
        return GitHubUser(
            login=node["login"],
            name=node.get("name"),
            email=node.get("email"),
            avatar_url=node.get("avatarUrl"),
        )

    @classmethod
    def _parse_comment(cls, node: dict[str, Any]) -> PullRequestComment:
        return PullRequestComment(
            id=node["id"],
            author=cls._parse_user(node.get("author")),
            body=node["body"],
            url=node["url"],
            created_at=node["createdAt"],
            updated_at=node["updatedAt"],
        )

    @classmethod
    def _parse_review_comment(cls, node: dict[str, Any]) -> ReviewComment:
        return ReviewComment(
            id=node["id"],
            author=cls._parse_user(node.get("author")),
            body=node["body"],
            path=node["path"],
            line=node.get("line"),
            original_line=node.get("originalLine"),
            url=node["url"],
            created_at=node["createdAt"],
            updated_at=node["updatedAt"],
        )

    @classmethod
    def _parse_pull_request(cls, node: dict[str, Any]) -> PullRequest:
        comments = node["comments"]
        review_comments = node["reviewComments"]
        return PullRequest(
            id=node["id"],
            number=node["number"],
            title=node["title"],
            body=node.get("body"),
            state=node["state"],
            url=node["url"],
            created_at=node["createdAt"],
            updated_at=node["updatedAt"],
            merged_at=node.get("mergedAt"),
            author=cls._parse_user(node.get("author")),
            comments=CommentConnection(
                nodes=tuple(cls._parse_comment(c) for c in comments["nodes"]),
                total_count=comments["totalCount"],
            ),
            review_comments=ReviewCommentConnection(
                nodes=tuple(cls._parse_review_comment(c) for c in review_comments["nodes"]),
                total_count=review_comments["totalCount"],
            ),
        )
