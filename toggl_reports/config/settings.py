from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from toggl_reports.constants import (
    DEFAULT_USER_AGENT,
    REPORTS_V2_BASE_URL,
    REPORTS_V3_BASE_URL,
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    api_token: str = Field("", validation_alias="TOGGL_API_TOKEN")
    workspace_id: str | None = Field(None, validation_alias="TOGGL_WORKSPACE_ID")

    reports_v2_base_url: str = Field(REPORTS_V2_BASE_URL, validation_alias="TOGGL_REPORTS_V2_BASE_URL")
    # Must contain a {workspace_id} placeholder.
    reports_v3_base_url: str = Field(REPORTS_V3_BASE_URL, validation_alias="TOGGL_REPORTS_V3_BASE_URL")

    connect_timeout_seconds: float = Field(5.0, validation_alias="TOGGL_CONNECT_TIMEOUT_SECONDS")
    read_timeout_seconds: float = Field(30.0, validation_alias="TOGGL_READ_TIMEOUT_SECONDS")
    user_agent: str = Field(DEFAULT_USER_AGENT, validation_alias="TOGGL_USER_AGENT")

    @classmethod
    def defaults(cls) -> "Settings":
        """Built-in defaults only; neither the environment nor .env is read."""
        return cls.model_construct()
