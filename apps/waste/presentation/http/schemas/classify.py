"""Classify HTTP Schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ClassificationResponse(BaseModel):
    """분류 결과 응답 스키마."""

    category: str = Field(..., description="Waste category label")
    confidence: float = Field(..., description="Score of the chosen category")
    disposal: str = Field(..., description="Disposal instruction")
