"""Center Reader Port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from waste.domain.entities import RecyclingCenter


class CenterReader(ABC):
    """재활용 센터 조회 포트.

    Infrastructure Layer에서 구현합니다.
    """

    @abstractmethod
    async def list_centers(self) -> Sequence[RecyclingCenter]:
        """등록된 전체 센터를 등록 순서대로 반환합니다."""
        ...

    @abstractmethod
    async def count_centers(self) -> int:
        """전체 센터 수를 반환합니다."""
        ...
