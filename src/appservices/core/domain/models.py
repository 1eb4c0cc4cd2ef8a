"""Wire models of the admin API (Pydantic v2).

Rules:
- Field names are pythonic; wire names live in `alias`.
- Absent values are `None` and are left out of request bodies (see `to_wire`).
- Unknown keys returned by the server are ignored.

These models describe *what* the API exchanges, not *how* it is fetched.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

import httpx
from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class WireModel(BaseModel):
    """Base for every JSON payload exchanged with the API."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        """Dump with wire names, omitting unset (`None`) fields."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Application(WireModel):
    """A single App Services application within a project (group)."""

    id: str | None = Field(default=None, alias="_id")
    client_app_id: str | None = Field(default=None)
    name: str | None = Field(default=None)
    location: str | None = Field(default=None)
    deployment_model: str | None = Field(default=None)
    domain_id: str | None = Field(default=None)
    group_id: str | None = Field(default=None)


class ApplicationListOptions(WireModel):
    """Query options for listing applications."""

    product: str | None = Field(
        default=None,
        description="Filter by product (e.g. 'atlas', 'standard', 'data-api').",
    )

    def query_params(self) -> list[tuple[str, str]]:
        params: list[tuple[str, str]] = []
        if self.product:
            params.append(("product", self.product))
        return params


class TriggerType(str, Enum):
    """Kinds of event triggers understood by the API."""

    DATABASE = "DATABASE"
    AUTHENTICATION = "AUTHENTICATION"
    SCHEDULED = "SCHEDULED"


class EventTriggerConfig(WireModel):
    """Trigger configuration; which fields apply depends on the trigger type.

    - DATABASE: `operation_types`, `database`, `collection`, `service_id`,
      `match`, `project`, `full_document`, `full_document_before_change`,
      `unordered`.
    - AUTHENTICATION: `operation_type`, `providers`.
    - SCHEDULED: `schedule`, `schedule_type`.

    `match` and `project` are opaque query documents and are passed through
    untouched.
    """

    operation_types: list[str] | None = None
    operation_type: str | None = None
    providers: list[str] | None = None
    database: str | None = None
    collection: str | None = None
    service_id: str | None = None
    match: Any = None
    project: Any = None
    full_document: bool | None = None
    full_document_before_change: bool | None = None
    schedule: str | None = None
    schedule_type: str | None = None
    unordered: bool | None = None
    cluster_name: str | None = Field(default=None, alias="clusterName")


class EventTrigger(WireModel):
    """An event trigger as returned by the API."""

    id: str | None = Field(default=None, alias="_id")
    name: str | None = None
    type: TriggerType | str | None = None
    function_id: str | None = None
    function_name: str | None = None
    disabled: bool | None = None
    config: EventTriggerConfig | None = None
    event_processors: dict[str, Any] | None = None
    last_modified: int | None = None


class EventTriggerRequest(WireModel):
    """Body of a create or update trigger call."""

    name: str | None = None
    type: TriggerType | str | None = None
    function_id: str | None = None
    disabled: bool | None = None
    config: EventTriggerConfig | None = None
    event_processors: dict[str, Any] | None = None


class Token(WireModel):
    """Bearer credential produced by the login exchange."""

    access_token: str | None = None
    refresh_token: str | None = None
    user_id: str | None = None
    device_id: str | None = None
    token_type: str = "Bearer"

    def authorization_header(self) -> str:
        return f"{self.token_type or 'Bearer'} {self.access_token}"

    def valid(self) -> bool:
        return bool(self.access_token)


class Response:
    """Transport metadata returned next to every decoded payload."""

    def __init__(self, http_response: httpx.Response, raw: bytes | None = None) -> None:
        self.http_response = http_response
        self.raw = raw

    @property
    def status_code(self) -> int:
        return self.http_response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.http_response.headers

    def __repr__(self) -> str:
        return f"<Response [{self.status_code}]>"
