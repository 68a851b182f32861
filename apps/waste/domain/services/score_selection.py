"""Score selection - 분류 점수에서 최상위 카테고리 선택."""

from __future__ import annotations

from typing import Sequence

CONFIDENCE_DECIMALS = 4


def select_top(scores: Sequence[float]) -> tuple[int, float]:
    """최고 점수의 인덱스와 반올림된 신뢰도를 반환합니다.

    동점이면 가장 낮은 인덱스를 선택합니다. 점수는 재정규화하지 않습니다.

    Raises:
        ValueError: 빈 점수 목록
    """
    if len(scores) == 0:
        raise ValueError("scores must not be empty")

    best_index = 0
    best_score = float(scores[0])
    for index in range(1, len(scores)):
        score = float(scores[index])
        if score > best_score:
            best_index = index
            best_score = score

    return best_index, round(best_score, CONFIDENCE_DECIMALS)
