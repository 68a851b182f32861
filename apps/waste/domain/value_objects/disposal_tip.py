"""Disposal Tips.

카테고리별 배출 안내 문구. 모든 카테고리에 정확히 하나의 안내가 있어야 합니다.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from waste.domain.enums import WasteCategory

DISPOSAL_TIPS: Mapping[WasteCategory, str] = MappingProxyType(
    {
        WasteCategory.PLASTIC_BOTTLE: (
            "Rinse and place in plastic recycling. Check local rules for caps."
        ),
        WasteCategory.GLASS_JAR: "Clean and place in glass recycling. Remove lids.",
        WasteCategory.ORGANIC_WASTE: "Compost or put in organic waste bin.",
        WasteCategory.PAPER: "Place dry paper in paper recycling.",
        WasteCategory.ALUMINUM_CAN: "Rinse and flatten. Put in metal recycling.",
        WasteCategory.TEXTILE: "Donate if reusable. Otherwise, recycle or discard as trash.",
        WasteCategory.ELECTRONIC_WASTE: (
            "Take to an e-waste collection center. Do not throw in trash."
        ),
        WasteCategory.GENERAL_TRASH: "Dispose in landfill bin.",
    }
)

if set(DISPOSAL_TIPS) != set(WasteCategory):
    missing = sorted(c.value for c in set(WasteCategory) - set(DISPOSAL_TIPS))
    raise RuntimeError(f"Disposal tips missing for categories: {missing}")


def disposal_tip_for(category: WasteCategory) -> str:
    """카테고리의 배출 안내를 반환합니다."""
    return DISPOSAL_TIPS[category]
