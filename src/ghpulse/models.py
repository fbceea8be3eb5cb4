from __future__ import annotations

from dataclasses import dataclass, field


class PullRequestState:
    OPEN = "OPEN"
    CLOSED = "CLOSED"
    MERGED = "MERGED"


@dataclass(frozen=True)
class GitHubUser:
    login: str
    name: str | None = None
    email: str | None = None
    avatar_url: str | None = None


@dataclass(frozen=True)
class PullRequestComment:
    id: str
    author: GitHubUser | None
    body: str
    url: str
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class ReviewComment:
    id: str
    author: GitHubUser | None
    body: str
    path: str
    line: int | None
    original_line: int | None
    url: str
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class CommentConnection:
    # total_count may exceed len(nodes): only the first 100 comments are fetched.
    nodes: tuple[PullRequestComment, ...]
    total_count: int


@dataclass(frozen=True)
class ReviewCommentConnection:
    nodes: tuple[ReviewComment, ...]
    total_count: int


@dataclass(frozen=True)
class PullRequest:
    id: str
    number: int
    title: str
    body: str | None
    state: str
    url: str
    created_at: str
    updated_at: str
    merged_at: str | None
    author: GitHubUser | None
    comments: CommentConnection
    review_comments: ReviewCommentConnection

    @property
    def author_login(self) -> str | None:
        return self.author.login if self.author else None


@dataclass(frozen=True)
class PageInfo:
    has_next_page: bool
    end_cursor: str | None = None


@dataclass(frozen=True)
class PullRequestPage:
    nodes: tuple[PullRequest, ...]
    page_info: PageInfo
    total_count: int


@dataclass(frozen=True)
class PRSummary:
    total_prs: int = 0
    open_prs: int = 0
    closed_prs: int = 0
    merged_prs: int = 0
    total_comments: int = 0
    total_review_comments: int = 0
    prs_by_author: dict[str, int] = field(default_factory=dict)

    def top_authors(self, n: int = 5) -> list[tuple[str, int]]:
        """Most active authors, by PR count descending then login."""
        ranked = sorted(self.prs_by_author.items(), key=lambda item: (-item[1], item[0]))
        return ranked[:n]
