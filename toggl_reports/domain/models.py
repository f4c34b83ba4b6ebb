"""Domain models: client contexts, request options and call outcomes."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from toggl_reports.constants import ApiVersion, NoResultReason


@dataclass(frozen=True)
class ClientContext:
    """Base address and basic-auth credential for one API version (value object)."""

    version: ApiVersion
    base_url: str
    auth: tuple[str, str] = field(repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.base_url, str) or not self.base_url:
            raise TypeError("context.base_url must be a non-empty str")
        if not self.base_url.endswith("/"):
            object.__setattr__(self, "base_url", self.base_url + "/")

    def url_for(self, endpoint: str) -> str:
        """Resolve an endpoint path against the base address; "" addresses the base itself."""
        return self.base_url + endpoint.lstrip("/")


class RequestOptions(BaseModel):
    """Per-call options.

    Accepts the legacy keys ``getFullResponse`` and ``version`` as well as the
    field names. Unknown keys are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    full_response: bool = Field(False, alias="getFullResponse")
    api_version: ApiVersion = Field(ApiVersion.V2, alias="version")

    @field_validator("full_response", mode="before")
    @classmethod
    def _none_is_false(cls, value: Any) -> Any:
        return False if value is None else value

    @field_validator("api_version", mode="before")
    @classmethod
    def _none_is_v2(cls, value: Any) -> Any:
        return ApiVersion.V2 if value is None else value

    @classmethod
    def coerce(cls, options: "RequestOptions | Mapping[str, Any] | None") -> "RequestOptions":
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls.model_validate(dict(options))

    def with_version(self, version: ApiVersion) -> "RequestOptions":
        return self.model_copy(update={"api_version": version})


@dataclass(frozen=True)
class DataOutcome:
    """Unwrapped payload: the value of the envelope's ``data`` field."""

    data: Any

    def to_legacy(self) -> Any:
        return self.data


@dataclass(frozen=True)
class EnvelopeOutcome:
    """Full parsed response body."""

    envelope: Any

    def to_legacy(self) -> Any:
        return self.envelope


@dataclass(frozen=True)
class FailureOutcome:
    """Request rejected by the transport or unreadable; message is diagnostic text only."""

    message: str
    success: bool = field(default=False, init=False)

    def __bool__(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        return {"success": False, "message": self.message}

    def to_legacy(self) -> dict[str, Any]:
        return self.to_dict()


@dataclass(frozen=True)
class NoResultOutcome:
    """Falsy outcome: no context for the requested version, or a non-200 status."""

    reason: str
    status_code: int | None = None
    body: str | None = None

    def __bool__(self) -> bool:
        return False

    @property
    def is_missing_context(self) -> bool:
        return self.reason == NoResultReason.MISSING_CONTEXT

    def to_legacy(self) -> bool:
        return False


Outcome = Union[DataOutcome, EnvelopeOutcome, FailureOutcome, NoResultOutcome]
