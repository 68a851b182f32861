"""Common HTTP Schemas."""

from __future__ import annotations

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """에러 응답 스키마."""

    error: str


class ReadinessResponse(BaseModel):
    """준비 상태 응답 스키마."""

    status: str
    model: str
    centers: int | None = None
