"""Client-level constants shared across modules."""
from __future__ import annotations

from enum import IntEnum


class ApiVersion(IntEnum):
    V2 = 2
    V3 = 3


class HttpMethod:
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class Endpoint:
    AVAILABLE_ENDPOINTS = ""
    PROJECT = "project"
    SUMMARY = "summary"
    DETAILS = "details"
    WEEKLY = "weekly"
    SEARCH_TIME_ENTRIES = "search/time_entries"


class NoResultReason:
    MISSING_CONTEXT = "missing_context"
    NON_SUCCESS_STATUS = "non_success_status"


# Basic auth convention of the reporting service: token as username, this literal as password.
API_TOKEN_PASSWORD = "api_token"

REPORTS_V2_BASE_URL = "https://api.track.toggl.com/reports/api/v2/"
REPORTS_V3_BASE_URL = "https://api.track.toggl.com/reports/api/v3/workspace/{workspace_id}/"

DEFAULT_USER_AGENT = "toggl-reports-python/0.1.0"
