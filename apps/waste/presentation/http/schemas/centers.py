"""Recycling Center HTTP Schemas."""

from __future__ import annotations

from pydantic import BaseModel


class CenterEntry(BaseModel):
    """재활용 센터 응답 스키마."""

    name: str
    address: str
    latitude: float
    longitude: float
    materials: list[str]
    distance: str

    model_config = {"from_attributes": True}
