"""Schemas for the database step of the installer."""
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from envboot.core.config import get_settings


class DatabaseCredentials(BaseModel):
    """Connection parameters submitted for the application database."""

    hostname: str = Field(..., max_length=255)
    database: str = Field(..., max_length=255)
    username: str = Field(..., max_length=255)
    password: str = Field(default="")
    port: int = Field(
        default_factory=lambda: get_settings().db_port, ge=1, le=65535, validate_default=True
    )
    connection: str = Field(
        default_factory=lambda: get_settings().db_connection, validate_default=True
    )

    model_config = ConfigDict(extra="forbid")

    @field_validator("hostname", "database", "username", "connection")
    @classmethod
    def _require_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


class InstallResponse(BaseModel):
    """Outcome of an installer step, shaped like the wizard's JSON payload."""

    status: Optional[int] = None
    success: bool
    error: bool
    message: Optional[str] = None
    data: Optional[Any] = None
    redirect: Optional[str] = None


__all__ = ["DatabaseCredentials", "InstallResponse"]
