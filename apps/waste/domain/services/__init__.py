"""Domain Services - 순수 계산 로직."""

from waste.domain.services.geo_distance import EARTH_RADIUS_KM, distance_km
from waste.domain.services.score_selection import select_top

__all__ = ["EARTH_RADIUS_KM", "distance_km", "select_top"]
