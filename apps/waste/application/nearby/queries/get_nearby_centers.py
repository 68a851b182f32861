"""Get Nearby Centers Query.

주변 재활용 센터를 조회하는 Query(지휘자)입니다.
Port로 센터 목록을 읽고, 거리 계산은 도메인 서비스에 위임합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from waste.application.nearby.dto import CenterEntryDTO
from waste.domain.services import distance_km

if TYPE_CHECKING:
    from waste.application.nearby.ports import CenterReader
    from waste.domain.entities import RecyclingCenter
    from waste.domain.value_objects import Coordinates

logger = logging.getLogger(__name__)

DEFAULT_RADIUS_KM = 10.0
DISTANCE_UNIT = "km"


class GetNearbyCentersQuery:
    """주변 재활용 센터 조회 Query.

    Workflow:
        1. 센터 목록 조회 (Port)
        2. 센터별 거리 계산 (소수점 2자리)
        3. 반경 필터링
        4. 거리 오름차순 안정 정렬 (동일 거리는 등록 순서 유지)
    """

    def __init__(self, center_reader: "CenterReader", radius_km: float = DEFAULT_RADIUS_KM) -> None:
        """Initialize.

        Args:
            center_reader: 센터 조회 Port
            radius_km: 검색 반경 (km, 경계 포함)
        """
        self._reader = center_reader
        self._radius_km = radius_km

    async def execute(self, coordinates: "Coordinates") -> list[CenterEntryDTO]:
        """주변 재활용 센터를 조회합니다.

        Args:
            coordinates: 기준 좌표

        Returns:
            거리 오름차순 센터 엔트리 목록
        """
        logger.info(
            "Center search started",
            extra={
                "lat": coordinates.latitude,
                "lon": coordinates.longitude,
                "radius_km": self._radius_km,
            },
        )

        centers = await self._reader.list_centers()

        entries: list[CenterEntryDTO] = []
        for center in centers:
            distance = round(
                distance_km(
                    coordinates.latitude,
                    coordinates.longitude,
                    center.latitude,
                    center.longitude,
                ),
                2,
            )
            if distance > self._radius_km:
                continue
            entries.append(self._build_entry(center, distance))

        # sorted()는 안정 정렬
        entries = sorted(entries, key=lambda e: e.distance_km)

        logger.info("Center search completed", extra={"results_count": len(entries)})
        return entries

    @staticmethod
    def _build_entry(center: "RecyclingCenter", distance: float) -> CenterEntryDTO:
        return CenterEntryDTO(
            name=center.name,
            address=center.address,
            latitude=center.latitude,
            longitude=center.longitude,
            materials=list(center.materials),
            distance_km=distance,
            distance=f"{distance:.2f} {DISTANCE_UNIT}",
        )
