"""Classification Result Value Object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from waste.domain.enums import WasteCategory


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """이미지 분류 결과 Value Object.

    Attributes:
        category: 선택된 폐기물 카테고리
        confidence: 선택된 카테고리의 점수 (0.0 ~ 1.0, 소수점 4자리)
        disposal: 배출 안내 문구
    """

    category: WasteCategory
    confidence: float
    disposal: str

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환 (API 응답용)."""
        return {
            "category": self.category.value,
            "confidence": self.confidence,
            "disposal": self.disposal,
        }
