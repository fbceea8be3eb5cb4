from __future__ import annotations

from typing import Any

import httpx

# Network-level failures are not wrapped; httpx raises them unchanged.
TransportError = httpx.RequestError


class GhPulseError(Exception):
    """Base class for errors raised by ghpulse."""


class ConfigurationError(GhPulseError):
    pass


class HttpStatusError(GhPulseError):
    def __init__(self, status_code: int, reason: str) -> None:
        super().__init__(f"HTTP {status_code}: {reason}")
        self.status_code = status_code
        self.reason = reason


class GraphQLError(GhPulseError):
    def __init__(self, errors: list[dict[str, Any]]) -> None:
        self.errors = errors
        self.messages = [err.get("message", "") for err in errors]
        super().__init__(f"GraphQL errors: {', '.join(self.messages)}")


class EmptyDataError(GhPulseError):
    def __init__(self) -> None:
        super().__init__("No data returned from GraphQL query")
