"""HTTP client port: contract for issuing authenticated requests.

Domain code depends on this port; infrastructure (e.g. httpx) implements it.
Keeps the normalizer free of infrastructure imports.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Protocol, runtime_checkable


class HttpClientError(Exception):
    """Base for HTTP client failures (client-error status, network, etc.)."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class HttpClientTimeoutError(HttpClientError):
    """Raised when the request times out."""


@runtime_checkable
class HttpResponse(Protocol):
    """Minimal read-only view of an HTTP response."""

    @property
    def status_code(self) -> int: ...

    @property
    def reason_phrase(self) -> str: ...

    @property
    def text(self) -> str: ...

    @property
    def url(self) -> str: ...

    def raise_for_client_error(self) -> None:
        """Raise HttpClientError for a 4xx status; any other status passes."""
        ...


@dataclass(frozen=True)
class RequestTimeout:
    """Connect and read timeouts in seconds."""

    connect_seconds: float
    read_seconds: float


@runtime_checkable
class AbstractHttpClient(Protocol):
    """Port: perform one HTTP request. Implementations live in infrastructure."""

    def request(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, Any] | None,
        auth: tuple[str, str],
        timeout: RequestTimeout,
        follow_redirects: bool = True,
    ) -> HttpResponse:
        """Send the request; raise HttpClientTimeoutError or HttpClientError on transport failure."""
        ...

    def close(self) -> None:
        """Release resources (e.g. connection pool). No-op allowed if nothing to close."""
        ...
