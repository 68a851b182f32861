"""Waste Category Enum."""

from __future__ import annotations

from enum import Enum


class WasteCategory(str, Enum):
    """폐기물 분류 카테고리.

    선언 순서가 곧 분류 모델의 출력 인덱스입니다.
    모델을 재학습해 클래스 순서가 바뀌면 이 선언도 함께 바꿔야 합니다.
    """

    PLASTIC_BOTTLE = "Plastic Bottle"
    GLASS_JAR = "Glass Jar"
    ORGANIC_WASTE = "Organic Waste"
    PAPER = "Paper"
    ALUMINUM_CAN = "Aluminum Can"
    TEXTILE = "Textile"
    ELECTRONIC_WASTE = "Electronic Waste"
    GENERAL_TRASH = "General Trash"

    @classmethod
    def from_index(cls, index: int) -> WasteCategory:
        """모델 출력 인덱스를 카테고리로 변환합니다.

        Raises:
            IndexError: 범위를 벗어난 인덱스
        """
        members = list(cls)
        if not 0 <= index < len(members):
            raise IndexError(f"Category index out of range: {index}")
        return members[index]
