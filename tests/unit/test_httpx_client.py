"""Unit tests for the httpx adapter using httpx.MockTransport (no network)."""
from __future__ import annotations

import base64
import json

import httpx
import pytest

from toggl_reports.application.reports_api import TogglReportsApi
from toggl_reports.domain.models import DataOutcome
from toggl_reports.infrastructure.http.factory import create_http_client
from toggl_reports.infrastructure.http.httpx_client import HttpxHttpClient
from toggl_reports.ports.http_client import (
    AbstractHttpClient,
    HttpClientError,
    HttpClientTimeoutError,
    HttpResponse,
    RequestTimeout,
)

TIMEOUT = RequestTimeout(connect_seconds=1.0, read_seconds=2.0)
URL = "https://api.track.toggl.com/reports/api/v2/summary"


def _client(handler) -> HttpxHttpClient:
    return HttpxHttpClient(httpx.Client(transport=httpx.MockTransport(handler)))


def test_request_sends_basic_auth_and_query():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"data": []})

    client = _client(handler)
    response = client.request(
        "GET",
        URL,
        params={"workspace_id": 1, "project_ids": [1, 2]},
        auth=("T1", "api_token"),
        timeout=TIMEOUT,
    )

    assert isinstance(response, HttpResponse)
    assert response.status_code == 200
    assert json.loads(response.text) == {"data": []}
    request = seen[0]
    assert request.method == "GET"
    assert request.url.path == "/reports/api/v2/summary"
    assert request.url.params["workspace_id"] == "1"
    assert request.url.params.get_list("project_ids") == ["1", "2"]
    expected = base64.b64encode(b"T1:api_token").decode("ascii")
    assert request.headers["Authorization"] == f"Basic {expected}"


def test_request_without_params_sends_bare_url():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={})

    _client(handler).request("POST", URL, params=None, auth=("T1", "api_token"), timeout=TIMEOUT)

    assert seen[0].method == "POST"
    assert str(seen[0].url) == URL


def test_client_error_status_raises_on_check():
    client = _client(lambda request: httpx.Response(401, text="Unauthorized"))
    response = client.request("GET", URL, params={}, auth=("T1", "api_token"), timeout=TIMEOUT)

    with pytest.raises(HttpClientError) as excinfo:
        response.raise_for_client_error()
    assert excinfo.value.status_code == 401
    assert "401" in str(excinfo.value)


@pytest.mark.parametrize("status_code", [200, 204, 302, 500])
def test_non_client_error_status_passes_check(status_code):
    client = _client(lambda request: httpx.Response(status_code))
    response = client.request("GET", URL, params={}, auth=("T1", "api_token"), timeout=TIMEOUT)

    response.raise_for_client_error()
    assert response.status_code == status_code


def test_timeout_mapped_to_port_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("too slow", request=request)

    with pytest.raises(HttpClientTimeoutError):
        _client(handler).request("GET", URL, params={}, auth=("T1", "api_token"), timeout=TIMEOUT)


def test_network_error_mapped_to_port_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(HttpClientError, match="connection refused"):
        _client(handler).request("GET", URL, params={}, auth=("T1", "api_token"), timeout=TIMEOUT)


def test_factory_builds_port_implementation(settings):
    client = create_http_client(settings)
    try:
        assert isinstance(client, AbstractHttpClient)
        assert client._client.headers["User-Agent"] == "toggl-reports-tests"
    finally:
        client.close()


def test_redirect_followed_to_report_payload(settings):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/reports/api/v2/summary":
            return httpx.Response(302, headers={"Location": "/reports/api/v2/summary/moved"})
        return httpx.Response(200, json={"data": [1]})

    api = TogglReportsApi("T1", http_client=_client(handler), settings=settings)

    outcome = api.get_summary_report({})

    assert isinstance(outcome, DataOutcome)
    assert outcome.to_legacy() == [1]


def test_redirect_not_followed_when_disabled():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(302, headers={"Location": "/elsewhere"})

    response = _client(handler).request(
        "GET", URL, params={}, auth=("T1", "api_token"), timeout=TIMEOUT, follow_redirects=False
    )

    assert response.status_code == 302


def test_none_query_values_left_out():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={})

    _client(handler).request(
        "GET",
        URL,
        params={"workspace_id": 1, "project_ids": None, "billable": "true"},
        auth=("T1", "api_token"),
        timeout=TIMEOUT,
    )

    params = seen[0].url.params
    assert "project_ids" not in params
    assert params["workspace_id"] == "1"
    assert params["billable"] == "true"


def test_only_none_query_values_sends_bare_url():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={})

    _client(handler).request("GET", URL, params={"since": None}, auth=("T1", "api_token"), timeout=TIMEOUT)

    assert str(seen[0].url) == URL
