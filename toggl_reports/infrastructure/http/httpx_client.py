"""Concrete HTTP client implementation using httpx (injected where AbstractHttpClient is needed)."""
from __future__ import annotations

from typing import Any, Mapping

import httpx

from toggl_reports.ports.http_client import (
    AbstractHttpClient,
    HttpClientError,
    HttpClientTimeoutError,
    HttpResponse,
    RequestTimeout,
)


def _drop_none(params: Mapping[str, Any] | None) -> dict[str, Any] | None:
    """Leave out parameters whose value is None instead of sending them empty."""
    if not params:
        return None
    return {name: value for name, value in params.items() if value is not None} or None


class _HttpxResponseAdapter:
    """Adapts httpx.Response to the HttpResponse protocol."""

    def __init__(self, response: httpx.Response) -> None:
        self._response = response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def reason_phrase(self) -> str:
        return self._response.reason_phrase

    @property
    def text(self) -> str:
        return self._response.text

    @property
    def url(self) -> str:
        return str(self._response.url)

    def raise_for_client_error(self) -> None:
        if self._response.is_client_error:
            request = self._response.request
            raise HttpClientError(
                f"http status {self.status_code} {self.reason_phrase} for {request.method} {request.url}",
                status_code=self.status_code,
            )


class HttpxHttpClient(AbstractHttpClient):
    """AbstractHttpClient implementation using httpx.Client."""

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

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
        httpx_timeout = httpx.Timeout(
            connect=timeout.connect_seconds,
            read=timeout.read_seconds,
            write=timeout.read_seconds,
            pool=timeout.connect_seconds,
        )
        try:
            response = self._client.request(
                method,
                url,
                params=_drop_none(params),
                auth=auth,
                timeout=httpx_timeout,
                follow_redirects=follow_redirects,
            )
            return _HttpxResponseAdapter(response)
        except httpx.TimeoutException as exc:
            raise HttpClientTimeoutError(f"timeout while requesting {method} {url}") from exc
        except httpx.HTTPError as exc:
            raise HttpClientError(f"http request failed for {method} {url}: {exc}") from exc

    def close(self) -> None:
        self._client.close()
