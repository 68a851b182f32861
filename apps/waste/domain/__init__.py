"""Waste Domain Layer."""

from waste.domain.entities import RecyclingCenter
from waste.domain.enums import ModelState, WasteCategory
from waste.domain.value_objects import DISPOSAL_TIPS, ClassificationResult, Coordinates

__all__ = [
    "RecyclingCenter",
    "ModelState",
    "WasteCategory",
    "DISPOSAL_TIPS",
    "ClassificationResult",
    "Coordinates",
]
