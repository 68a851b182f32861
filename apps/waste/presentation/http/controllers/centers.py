"""Recycling Center Controller."""

from __future__ import annotations

from fastapi import APIRouter, Query

from waste.application.common.exceptions import MissingCoordinatesError
from waste.domain.value_objects import Coordinates
from waste.presentation.http.schemas import CenterEntry, ErrorResponse
from waste.setup.dependencies import NearbyCentersQueryDep

router = APIRouter(tags=["recycling-centers"])


@router.get(
    "/recycling-centers",
    response_model=list[CenterEntry],
    summary="Find recycling centers",
    responses={400: {"model": ErrorResponse}},
)
async def recycling_centers(
    query: NearbyCentersQueryDep,
    lat: str | None = Query(None, description="Latitude (decimal degrees)"),
    lon: str | None = Query(None, description="Longitude (decimal degrees)"),
) -> list[CenterEntry]:
    """기준 좌표 반경 내 재활용 센터를 거리순으로 조회합니다."""
    if not lat or not lon:
        raise MissingCoordinatesError()

    entries = await query.execute(Coordinates.parse(lat, lon))
    return [CenterEntry.model_validate(entry) for entry in entries]
