"""Application DTOs."""

from waste.application.nearby.dto.center_entry import CenterEntryDTO

__all__ = ["CenterEntryDTO"]
