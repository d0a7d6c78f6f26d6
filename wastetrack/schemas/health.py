"""Schema for the service status payload."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness, store reachability and the login/time settings clients depend on."""

    status: Literal["ok"] = "ok"
    version: str
    environment: Literal["dev", "test", "prod"]
    database: Literal["connected", "disconnected"]
    fallback_users_enabled: bool = Field(
        description="Whether the built-in admin/operator accounts can log in"
    )
    records_timezone: str = Field(
        description="IANA zone used for submitted and displayed record date/time"
    )
