"""Application Queries."""

from waste.application.nearby.queries.get_nearby_centers import (
    DEFAULT_RADIUS_KM,
    GetNearbyCentersQuery,
)

__all__ = ["DEFAULT_RADIUS_KM", "GetNearbyCentersQuery"]
