"""Health check body for load balancers and uptime monitors."""

from typing import Literal

from pydantic import Field

from app.schemas.common import CamelModel


class HealthResponse(CamelModel):
    status: Literal["ok"] = "ok"
    environment: str = Field(description="APP_ENV of the running Innkeep API")
    database: Literal["connected", "disconnected"] = Field(
        description="Result of a SELECT 1 against the booking database"
    )
