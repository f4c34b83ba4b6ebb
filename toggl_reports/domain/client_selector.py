"""Dual-version client selector: one context per reporting API version."""
from __future__ import annotations

from typing import Any

from loguru import logger

from toggl_reports.constants import (
    API_TOKEN_PASSWORD,
    REPORTS_V2_BASE_URL,
    REPORTS_V3_BASE_URL,
    ApiVersion,
)
from toggl_reports.core import SERVICE_NAME
from toggl_reports.domain.models import ClientContext


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).debug("")


class ClientSelector:
    """
    Holds the authenticated contexts and hands out the one serving a version.

    The v2 (reports) context always exists. The v3 (search) context exists only
    when a workspace id was supplied; asking for it otherwise yields None.
    State is read-only after construction.
    """

    def __init__(
        self,
        api_token: str,
        workspace_id: str | int | None = None,
        *,
        v2_base_url: str = REPORTS_V2_BASE_URL,
        v3_base_url: str = REPORTS_V3_BASE_URL,
    ) -> None:
        if not isinstance(api_token, str) or not api_token.strip():
            raise ValueError("api_token must be a non-empty string")

        auth = (api_token, API_TOKEN_PASSWORD)
        workspace = str(workspace_id).strip() if workspace_id is not None else ""

        self._workspace_id = workspace or None
        self._contexts: dict[ApiVersion, ClientContext] = {
            ApiVersion.V2: ClientContext(ApiVersion.V2, v2_base_url, auth),
        }
        if self._workspace_id is not None:
            self._contexts[ApiVersion.V3] = ClientContext(
                ApiVersion.V3,
                v3_base_url.replace("{workspace_id}", self._workspace_id),
                auth,
            )
        _log("contexts_built", versions=sorted(int(v) for v in self._contexts))

    @property
    def workspace_id(self) -> str | None:
        return self._workspace_id

    def context_for(self, version: ApiVersion | int) -> ClientContext | None:
        return self._contexts.get(ApiVersion(version))
