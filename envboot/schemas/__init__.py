"""Pydantic schemas for installer input and output."""

from .database import DatabaseCredentials, InstallResponse

__all__ = [
    "DatabaseCredentials",
    "InstallResponse",
]
