"""Waste Application Layer."""

from waste.application.classify import ClassifyImageCommand
from waste.application.nearby import CenterEntryDTO, CenterReader, GetNearbyCentersQuery

__all__ = [
    "ClassifyImageCommand",
    "CenterEntryDTO",
    "CenterReader",
    "GetNearbyCentersQuery",
]
