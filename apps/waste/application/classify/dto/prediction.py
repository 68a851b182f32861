"""Prediction DTO."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Prediction:
    """모델 추론 결과.

    Attributes:
        index: 선택된 카테고리 인덱스 (동점 시 최저 인덱스)
        confidence: 선택된 점수 (소수점 4자리 반올림)
        scores: 카테고리별 점수 (길이 = 카테고리 수)
    """

    index: int
    confidence: float
    scores: np.ndarray
