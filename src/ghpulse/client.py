from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from typing import Any

import httpx

from .errors import ConfigurationError, EmptyDataError, GraphQLError, HttpStatusError

DEFAULT_GRAPHQL_URL = "https://api.github.com/graphql"
USER_AGENT = "GitHub-GraphQL-Client/1.0.0"
_TOKEN_REQUIRED = "GitHub token is required. Set GITHUB_TOKEN environment variable or pass token in config."

logger = logging.getLogger(__name__)

TokenSource = Callable[[], str | None]


def env_token_source(name: str = "GITHUB_TOKEN") -> TokenSource:
    """Return a lookup that reads the token from the environment variable ``name``."""
    return lambda: os.environ.get(name)


class GraphQLClient:
    """Single-attempt GitHub GraphQL client.

    The token is resolved once, at construction: the explicit ``token`` wins,
    otherwise ``token_source`` is consulted. No request is made before a token
    is known.
    """

    def __init__(
        self,
        token: str | None = None,
        base_url: str | None = None,
        *,
        token_source: TokenSource | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if not token and token_source is not None:
            token = token_source()
        if not token:
            raise ConfigurationError(_TOKEN_REQUIRED)

        self._token = token
        self._base_url = base_url or DEFAULT_GRAPHQL_URL
        self._client = httpx.Client(
            headers={
                "Authorization": f"Bearer {token}",
                "Content-Type": "application/json",
                "User-Agent": USER_AGENT,
            },
            timeout=httpx.Timeout(30.0),
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def __enter__(self) -> GraphQLClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def query(self, document: str, variables: Mapping[str, Any] | None = None) -> Any:
        """Run ``document`` and return the ``data`` member of the response.

        The shape of ``data`` is whatever the caller asked for; it is not
        validated here.

        Raises:
            HttpStatusError: the endpoint answered with a non-2xx status.
            GraphQLError: the response carries one or more errors, even if
                ``data`` is present too.
            EmptyDataError: neither errors nor data came back, or the body
                is not JSON.
            httpx.RequestError: the request never got a response.
        """
        payload = {"query": document, "variables": dict(variables or {})}
        logger.debug("POST %s variables=%s", self._base_url, payload["variables"])

        response = self._client.post(self._base_url, json=payload)
        if not response.is_success:
            raise HttpStatusError(response.status_code, response.reason_phrase)

        try:
            result = response.json()
        except ValueError as exc:
            raise EmptyDataError() from exc

        if errors := result.get("errors"):
            raise GraphQLError(errors)

        data = result.get("data")
        if data is None:
            raise EmptyDataError()
        return data
