"""Typed client for the Toggl reports API (v2 reports, v3 time-entry search)."""
from loguru import logger

from toggl_reports.application.reports_api import TogglReportsApi
from toggl_reports.composition import create_reports_api
from toggl_reports.config.settings import Settings
from toggl_reports.constants import ApiVersion
from toggl_reports.domain.models import (
    ClientContext,
    DataOutcome,
    EnvelopeOutcome,
    FailureOutcome,
    NoResultOutcome,
    Outcome,
    RequestOptions,
)
from toggl_reports.ports.http_client import HttpClientError, HttpClientTimeoutError

# Silent unless the application calls logger.enable("toggl_reports").
logger.disable("toggl_reports")

__all__ = [
    "ApiVersion",
    "ClientContext",
    "DataOutcome",
    "EnvelopeOutcome",
    "FailureOutcome",
    "HttpClientError",
    "HttpClientTimeoutError",
    "NoResultOutcome",
    "Outcome",
    "RequestOptions",
    "Settings",
    "TogglReportsApi",
    "create_reports_api",
]
