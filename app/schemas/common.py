"""Schemas shared across endpoints."""

from typing import Literal

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Shape of every error body returned by the API."""

    success: Literal[False] = False
    message: str
    error: str = Field(description="Stable error kind, e.g. InvalidCredentials")
