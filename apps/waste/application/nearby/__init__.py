"""Nearby Centers Application Layer."""

from waste.application.nearby.dto import CenterEntryDTO
from waste.application.nearby.ports import CenterReader
from waste.application.nearby.queries import GetNearbyCentersQuery

__all__ = ["CenterEntryDTO", "CenterReader", "GetNearbyCentersQuery"]
