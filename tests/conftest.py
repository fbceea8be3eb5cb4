"""Shared factories and fixtures for the test suite."""
from __future__ import annotations

import pytest

from ghpulse.models import (
    CommentConnection,
    GitHubUser,
    PullRequest,
    ReviewCommentConnection,
)

GQL_URL = "https://api.github.com/graphql"

# ---------------------------------------------------------------------------
# GraphQL node factories — return raw dicts that mirror API responses
# ---------------------------------------------------------------------------


def user_node(login: str = "alice", avatar_url: str = "https://avatars.example/alice") -> dict:
    return {"login": login, "avatarUrl": avatar_url}


def comment_node(
    id: str = "C1",
    author: str | None = "reviewer",
    body: str = "Looks good",
) -> dict:
    return {
        "id": id,
        "body": body,
        "createdAt": "2024-01-01T10:00:00Z",
        "updatedAt": "2024-01-01T10:00:00Z",
        "url": "https://github.com/owner/repo/pull/1#issuecomment-1",
        "author": user_node(author) if author else None,
    }


def review_comment_node(
    id: str = "RC1",
    author: str | None = "reviewer",
    body: str = "Fix this",
    path: str = "src/foo.py",
    line: int | None = 42,
    original_line: int | None = 40,
) -> dict:
    return {
        "id": id,
        "body": body,
        "createdAt": "2024-01-01T11:00:00Z",
        "updatedAt": "2024-01-01T11:00:00Z",
        "path": path,
        "line": line,
        "originalLine": original_line,
        "url": "https://github.com/owner/repo/pull/1#discussion_r1",
        "author": user_node(author) if author else None,
    }


def pr_node(
    id: str = "PR_1",
    number: int = 1,
    title: str = "Fix bug",
    state: str = "OPEN",
    author: str | None = "alice",
    merged_at: str | None = None,
    comment_nodes: list[dict] | None = None,
    comments_total: int | None = None,
    review_comment_nodes: list[dict] | None = None,
    review_comments_total: int | None = None,
) -> dict:
    comment_nodes = comment_nodes or []
    review_comment_nodes = review_comment_nodes or []
    return {
        "id": id,
        "number": number,
        "title": title,
        "body": "Body",
        "state": state,
        "createdAt": "2024-01-01T00:00:00Z",
        "updatedAt": "2024-01-02T00:00:00Z",
        "mergedAt": merged_at,
        "url": f"https://github.com/owner/repo/pull/{number}",
        "author": user_node(author) if author else None,
        "comments": {
            "nodes": comment_nodes,
            "totalCount": len(comment_nodes) if comments_total is None else comments_total,
        },
        "reviewComments": {
            "nodes": review_comment_nodes,
            "totalCount": len(review_comment_nodes) if review_comments_total is None else review_comments_total,
        },
    }


def pr_page_data(
    pr_nodes: list[dict],
    has_next_page: bool = False,
    end_cursor: str | None = None,
    total_count: int | None = None,
) -> dict:
    page_info: dict = {"hasNextPage": has_next_page}
    if end_cursor is not None:
        page_info["endCursor"] = end_cursor
    return {
        "repository": {
            "pullRequests": {
                "nodes": pr_nodes,
                "pageInfo": page_info,
                "totalCount": len(pr_nodes) if total_count is None else total_count,
            }
        }
    }


def pr_page_response(*args, **kwargs) -> dict:
    return {"data": pr_page_data(*args, **kwargs)}


# ---------------------------------------------------------------------------
# Model object factories — construct typed model instances
# ---------------------------------------------------------------------------


def make_pull_request(
    number: int = 1,
    title: str = "Fix bug",
    author: str | None = "alice",
    state: str = "OPEN",
    merged_at: str | None = None,
    comments_total: int = 0,
    review_comments_total: int = 0,
) -> PullRequest:
    return PullRequest(
        id=f"PR_{number}",
        number=number,
        title=title,
        body=None,
        state=state,
        url=f"https://github.com/owner/repo/pull/{number}",
        created_at="2024-01-01T00:00:00Z",
        updated_at="2024-01-02T00:00:00Z",
        merged_at=merged_at,
        author=GitHubUser(login=author, avatar_url=f"https://avatars.example/{author}") if author else None,
        comments=CommentConnection(nodes=(), total_count=comments_total),
        review_comments=ReviewCommentConnection(nodes=(), total_count=review_comments_total),
    )


# ---------------------------------------------------------------------------
# Autouse fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def no_env_token(monkeypatch):
    """Keep a real GITHUB_TOKEN out of the tests."""
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.delenv("GITHUB_GRAPHQL_URL", raising=False)
