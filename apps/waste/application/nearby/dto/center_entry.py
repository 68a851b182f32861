"""Center Entry DTO."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CenterEntryDTO:
    """거리 정보가 포함된 재활용 센터 DTO."""

    name: str
    address: str
    latitude: float
    longitude: float
    materials: list[str]
    distance_km: float
    distance: str
