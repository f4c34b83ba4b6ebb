"""Request/response normalizer: one HTTP call in, one Outcome out.

Uses the HTTP port (AbstractHttpClient); the client is built in the composition
root. This is the single place transport failures are caught.
"""
from __future__ import annotations

import json
from typing import Any, Mapping, Union

from loguru import logger

from toggl_reports.constants import HttpMethod, NoResultReason
from toggl_reports.core import SERVICE_NAME
from toggl_reports.domain.client_selector import ClientSelector
from toggl_reports.domain.models import (
    DataOutcome,
    EnvelopeOutcome,
    FailureOutcome,
    NoResultOutcome,
    Outcome,
    RequestOptions,
)
from toggl_reports.ports.http_client import (
    AbstractHttpClient,
    HttpClientError,
    HttpResponse,
    RequestTimeout,
)

Query = Mapping[str, Any]
Options = Union[RequestOptions, Mapping[str, Any]]


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


def has_data(payload: Any) -> bool:
    """True only for a JSON object carrying a ``data`` key; arrays and scalars never qualify."""
    return isinstance(payload, dict) and "data" in payload


class ResponseNormalizer:
    """Dispatches requests through the selected context and normalizes the response."""

    def __init__(
        self,
        selector: ClientSelector,
        client: AbstractHttpClient,
        *,
        timeout: RequestTimeout,
    ) -> None:
        self._selector = selector
        self._client = client
        self._timeout = timeout

    def get(self, endpoint: str, query: Query | None = None, options: Options | None = None) -> Outcome:
        return self.request(HttpMethod.GET, endpoint, query, options)

    def post(self, endpoint: str, query: Query | None = None, options: Options | None = None) -> Outcome:
        return self.request(HttpMethod.POST, endpoint, query, options)

    def put(self, endpoint: str, query: Query | None = None, options: Options | None = None) -> Outcome:
        return self.request(HttpMethod.PUT, endpoint, query, options)

    def delete(self, endpoint: str, query: Query | None = None, options: Options | None = None) -> Outcome:
        return self.request(HttpMethod.DELETE, endpoint, query, options)

    def request(
        self,
        method: str,
        endpoint: str,
        query: Query | None = None,
        options: Options | None = None,
    ) -> Outcome:
        opts = RequestOptions.coerce(options)
        context = self._selector.context_for(opts.api_version)
        if context is None:
            _log(
                "context_unavailable",
                method=method,
                endpoint=endpoint,
                api_version=int(opts.api_version),
            )
            return NoResultOutcome(reason=NoResultReason.MISSING_CONTEXT)

        url = context.url_for(endpoint)
        _log("request_dispatched", method=method, url=url, api_version=int(context.version))
        try:
            response = self._client.request(
                method,
                url,
                params=query,
                auth=context.auth,
                timeout=self._timeout,
            )
            response.raise_for_client_error()
        except HttpClientError as exc:
            message = str(exc) or type(exc).__name__
            logger.warning("request failed for {} {}: {}", method, url, message)
            return FailureOutcome(message=message)

        return self._check_response(response, return_data_only=not opts.full_response)

    def _check_response(self, response: HttpResponse, *, return_data_only: bool) -> Outcome:
        status_code = response.status_code
        if status_code != 200:
            _log("non_success_status", url=response.url, status_code=status_code)
            return NoResultOutcome(
                reason=NoResultReason.NON_SUCCESS_STATUS,
                status_code=status_code,
                body=response.text,
            )

        try:
            payload = json.loads(response.text)
        except ValueError as exc:
            logger.warning("malformed JSON body from {}: {}", response.url, exc)
            return FailureOutcome(message=f"invalid JSON in response body: {exc}")

        _log("request_completed", url=response.url, status_code=status_code)
        if return_data_only and has_data(payload):
            return DataOutcome(payload["data"])
        return EnvelopeOutcome(payload)
