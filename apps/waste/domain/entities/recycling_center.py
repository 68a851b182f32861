"""RecyclingCenter Entity."""

from __future__ import annotations

from dataclasses import dataclass

from waste.domain.value_objects import Coordinates


@dataclass(frozen=True)
class RecyclingCenter:
    """재활용 센터 엔티티.

    프로세스 시작 시 한 번 생성되는 정적 레지스트리 항목으로, 변경되지 않습니다.
    """

    name: str
    address: str
    latitude: float
    longitude: float
    materials: tuple[str, ...] = ()

    def coordinates(self) -> Coordinates:
        """좌표 Value Object를 반환합니다."""
        return Coordinates(latitude=self.latitude, longitude=self.longitude)
