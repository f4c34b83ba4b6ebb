"""HTTP client factory: builds AbstractHttpClient from settings."""
from __future__ import annotations

import httpx

from toggl_reports.config.settings import Settings
from toggl_reports.infrastructure.http.httpx_client import HttpxHttpClient
from toggl_reports.ports.http_client import AbstractHttpClient


def create_http_client(settings: Settings) -> AbstractHttpClient:
    """Build an HTTP client from settings. Timeouts are applied per-request by the adapter."""
    headers = {"Accept": "application/json"}
    if settings.user_agent:
        headers["User-Agent"] = settings.user_agent
    return HttpxHttpClient(httpx.Client(headers=headers))
