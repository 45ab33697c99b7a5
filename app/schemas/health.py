"""Pydantic schemas for health and reachability responses."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response body for the health check endpoint."""

    success: bool = True
    status: Literal["healthy", "unhealthy"] = Field(description="Service status")
    environment: str = Field(description="Current app environment (e.g. dev, prod)")
    database: Literal["connected", "disconnected"] = Field(
        description="Database connectivity status when check is performed",
    )


class PingResponse(BaseModel):
    """Response body for the reachability probe used by the site."""

    success: bool = True
    message: str
    timestamp: datetime

