"""Domain Entities."""

from waste.domain.entities.recycling_center import RecyclingCenter

__all__ = ["RecyclingCenter"]
