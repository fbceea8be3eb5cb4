"""Typed GitHub GraphQL client with pull request pagination and summaries."""
from .client import DEFAULT_GRAPHQL_URL, GraphQLClient, env_token_source
from .errors import (
    ConfigurationError,
    EmptyDataError,
    GhPulseError,
    GraphQLError,
    HttpStatusError,
    TransportError,
)
from .models import PRSummary, PullRequest, PullRequestPage
from .pullrequests import PullRequestFetcher, days_ago, format_date
from .summary import PRAnalyzer, most_commented, summarize

__all__ = [
    "DEFAULT_GRAPHQL_URL",
    "ConfigurationError",
    "EmptyDataError",
    "GhPulseError",
    "GraphQLClient",
    "GraphQLError",
    "HttpStatusError",
    "PRAnalyzer",
    "PRSummary",
    "PullRequest",
    "PullRequestFetcher",
    "PullRequestPage",
    "TransportError",
    "days_ago",
    "env_token_source",
    "format_date",
    "most_commented",
    "summarize",
]
