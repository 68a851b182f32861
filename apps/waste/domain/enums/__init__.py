"""Domain Enums."""

from waste.domain.enums.model_state import ModelState
from waste.domain.enums.waste_category import WasteCategory

__all__ = ["ModelState", "WasteCategory"]
