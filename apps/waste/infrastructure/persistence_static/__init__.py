"""Static persistence - 프로세스 내 정적 레지스트리."""

from waste.infrastructure.persistence_static.center_reader_static import (
    RECYCLING_CENTERS,
    StaticCenterReader,
)

__all__ = ["RECYCLING_CENTERS", "StaticCenterReader"]
