"""Composition root: build a TogglReportsApi and its HTTP client from settings."""
from __future__ import annotations

from loguru import logger

from toggl_reports.application.reports_api import TogglReportsApi
from toggl_reports.config.settings import Settings
from toggl_reports.core import SERVICE_NAME


def create_reports_api(settings: Settings | None = None) -> TogglReportsApi:
    """Build a client from settings (environment / .env when not given).

    The returned client owns its HTTP client; close it with ``close()`` or a
    ``with`` block.
    """
    settings = settings or Settings()
    if not settings.api_token:
        raise ValueError("TOGGL_API_TOKEN is not configured")

    api = TogglReportsApi(
        settings.api_token,
        settings.workspace_id,
        settings=settings,
    )
    logger.bind(
        service_name=SERVICE_NAME,
        event="client_created",
        search_api=api.has_search_api,
    ).info("")
    return api


__all__ = ["create_reports_api"]
