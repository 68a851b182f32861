"""GetNearbyCentersQuery 단위 테스트."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from waste.application.nearby.queries import DEFAULT_RADIUS_KM, GetNearbyCentersQuery
from waste.domain.entities import RecyclingCenter
from waste.domain.value_objects import Coordinates
from waste.infrastructure.persistence_static import RECYCLING_CENTERS, StaticCenterReader

pytestmark = pytest.mark.asyncio

NYC = Coordinates(latitude=40.7128, longitude=-74.006)


@pytest.fixture
def mock_center_reader() -> AsyncMock:
    """CenterReader mock."""
    reader = AsyncMock()
    reader.list_centers = AsyncMock(return_value=[])
    reader.count_centers = AsyncMock(return_value=0)
    return reader


class TestGetNearbyCentersQuery:
    """GetNearbyCentersQuery 테스트."""

    async def test_nyc_returns_all_centers_sorted(self) -> None:
        query = GetNearbyCentersQuery(StaticCenterReader())

        result = await query.execute(NYC)

        assert [e.name for e in result] == [
            "Green Earth Recycling",
            "Eco Waste Solutions",
            "Recycle Hub",
        ]
        assert result[0].distance == "0.00 km"
        assert result[0].distance_km == 0.0
        assert result[0].materials == ["Plastic", "Glass", "Paper"]

    async def test_sorted_and_within_radius(self) -> None:
        query = GetNearbyCentersQuery(StaticCenterReader())

        result = await query.execute(Coordinates(40.7142, -74.008))

        distances = [e.distance_km for e in result]
        assert distances == sorted(distances)
        assert all(d <= DEFAULT_RADIUS_KM for d in distances)
        assert result[0].name == "Recycle Hub"

    async def test_far_away_returns_empty(self) -> None:
        query = GetNearbyCentersQuery(StaticCenterReader())

        assert await query.execute(Coordinates(0.0, 0.0)) == []

    async def test_empty_registry(self, mock_center_reader: AsyncMock) -> None:
        query = GetNearbyCentersQuery(mock_center_reader)

        result = await query.execute(NYC)

        assert result == []
        mock_center_reader.list_centers.assert_awaited_once()

    async def test_radius_boundary_inclusive(self, mock_center_reader: AsyncMock) -> None:
        """반올림된 거리 == 반경이면 포함."""
        # 위도 1도 ≈ 111.19km
        center = RecyclingCenter(name="Edge", address="", latitude=1.0, longitude=0.0)
        mock_center_reader.list_centers.return_value = [center]

        included = await GetNearbyCentersQuery(mock_center_reader, radius_km=111.19).execute(
            Coordinates(0.0, 0.0)
        )
        excluded = await GetNearbyCentersQuery(mock_center_reader, radius_km=111.18).execute(
            Coordinates(0.0, 0.0)
        )

        assert [e.name for e in included] == ["Edge"]
        assert excluded == []

    async def test_equal_distances_keep_registry_order(self, mock_center_reader: AsyncMock) -> None:
        mock_center_reader.list_centers.return_value = [
            RecyclingCenter(name="B", address="", latitude=0.01, longitude=0.0),
            RecyclingCenter(name="A", address="", latitude=-0.01, longitude=0.0),
            RecyclingCenter(name="C", address="", latitude=0.0, longitude=0.0),
        ]

        result = await GetNearbyCentersQuery(mock_center_reader).execute(Coordinates(0.0, 0.0))

        assert [e.name for e in result] == ["C", "B", "A"]
        assert result[1].distance == "1.11 km"


class TestStaticCenterReader:
    """StaticCenterReader 테스트."""

    async def test_list_and_count(self) -> None:
        reader = StaticCenterReader()

        assert tuple(await reader.list_centers()) == RECYCLING_CENTERS
        assert await reader.count_centers() == 3
