from __future__ import annotations

from typing import Any, Mapping, Union

from toggl_reports.config.settings import Settings
from toggl_reports.constants import ApiVersion, Endpoint
from toggl_reports.domain.client_selector import ClientSelector
from toggl_reports.domain.models import Outcome, RequestOptions
from toggl_reports.domain.response_normalizer import ResponseNormalizer
from toggl_reports.infrastructure.http.factory import create_http_client
from toggl_reports.ports.http_client import AbstractHttpClient, RequestTimeout

Options = Union[RequestOptions, Mapping[str, Any]]


class TogglReportsApi:
    """
    Wrapper for the Toggl reports API.

    Report methods talk to the v2 reports API. ``search_time_entries`` always
    talks to the workspace-scoped v3 API and returns a falsy NoResultOutcome
    when no workspace id was given.

    Without ``settings`` the built-in defaults are used and the environment
    is not read; use ``create_reports_api()`` for environment configuration.

    See https://engineering.toggl.com/docs/reports_start/
    """

    def __init__(
        self,
        api_token: str,
        workspace_id: str | int | None = None,
        *,
        http_client: AbstractHttpClient | None = None,
        settings: Settings | None = None,
    ) -> None:
        settings = settings or Settings.defaults()
        self._selector = ClientSelector(
            api_token,
            workspace_id,
            v2_base_url=settings.reports_v2_base_url,
            v3_base_url=settings.reports_v3_base_url,
        )
        self._owns_http_client = http_client is None
        self._http_client = http_client or create_http_client(settings)
        self._normalizer = ResponseNormalizer(
            self._selector,
            self._http_client,
            timeout=RequestTimeout(
                connect_seconds=settings.connect_timeout_seconds,
                read_seconds=settings.read_timeout_seconds,
            ),
        )

    @property
    def workspace_id(self) -> str | None:
        return self._selector.workspace_id

    @property
    def has_search_api(self) -> bool:
        return self._selector.context_for(ApiVersion.V3) is not None

    def get_available_endpoints(self) -> Outcome:
        return self._normalizer.get(Endpoint.AVAILABLE_ENDPOINTS)

    def get_project_report(self, query: Mapping[str, Any], options: Options | None = None) -> Outcome:
        return self._normalizer.get(Endpoint.PROJECT, query, options)

    def get_summary_report(self, query: Mapping[str, Any], options: Options | None = None) -> Outcome:
        return self._normalizer.get(Endpoint.SUMMARY, query, options)

    def get_details_report(self, query: Mapping[str, Any], options: Options | None = None) -> Outcome:
        return self._normalizer.get(Endpoint.DETAILS, query, options)

    def get_weekly_report(self, query: Mapping[str, Any], options: Options | None = None) -> Outcome:
        return self._normalizer.get(Endpoint.WEEKLY, query, options)

    def search_time_entries(self, query: Mapping[str, Any], options: Options | None = None) -> Outcome:
        """Search time entries through the v3 API; the requested version is always overridden to 3."""
        opts = RequestOptions.coerce(options).with_version(ApiVersion.V3)
        return self._normalizer.post(Endpoint.SEARCH_TIME_ENTRIES, query, opts)

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http_client:
            self._http_client.close()

    def __enter__(self) -> "TogglReportsApi":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
