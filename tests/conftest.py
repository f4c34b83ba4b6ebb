from __future__ import annotations

import pytest

from tests.fakes import V2, FakeHttpClient
from toggl_reports.config.settings import Settings


@pytest.fixture()
def settings() -> Settings:
    # Explicit values so a developer's .env or environment cannot leak into unit tests.
    return Settings(
        api_token="",
        workspace_id=None,
        reports_v2_base_url=V2,
        reports_v3_base_url="https://api.track.toggl.com/reports/api/v3/workspace/{workspace_id}/",
        connect_timeout_seconds=5.0,
        read_timeout_seconds=30.0,
        user_agent="toggl-reports-tests",
    )


@pytest.fixture()
def http_client() -> FakeHttpClient:
    return FakeHttpClient()
