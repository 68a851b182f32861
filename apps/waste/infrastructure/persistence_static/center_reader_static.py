"""Static Center Reader.

재활용 센터 레지스트리는 프로세스 시작 시 생성되며 변경되지 않습니다.
"""

from __future__ import annotations

from typing import Sequence

from waste.application.nearby.ports import CenterReader
from waste.domain.entities import RecyclingCenter

RECYCLING_CENTERS: tuple[RecyclingCenter, ...] = (
    RecyclingCenter(
        name="Green Earth Recycling",
        address="123 Elm St, Springfield",
        latitude=40.7128,
        longitude=-74.006,
        materials=("Plastic", "Glass", "Paper"),
    ),
    RecyclingCenter(
        name="Eco Waste Solutions",
        address="456 Oak St, Springfield",
        latitude=40.7135,
        longitude=-74.007,
        materials=("Organic Waste", "Electronic Waste"),
    ),
    RecyclingCenter(
        name="Recycle Hub",
        address="789 Pine St, Springfield",
        latitude=40.7142,
        longitude=-74.008,
        materials=("Aluminum", "Textile", "General Trash"),
    ),
)


class StaticCenterReader(CenterReader):
    """정적 레지스트리 기반 CenterReader 구현체."""

    def __init__(self, centers: Sequence[RecyclingCenter] = RECYCLING_CENTERS) -> None:
        self._centers = tuple(centers)

    async def list_centers(self) -> Sequence[RecyclingCenter]:
        return self._centers

    async def count_centers(self) -> int:
        return len(self._centers)
