"""Coordinates Value Object."""

from __future__ import annotations

import math
from dataclasses import dataclass

from waste.domain.exceptions.location import InvalidCoordinateError


@dataclass(frozen=True, slots=True)
class Coordinates:
    """위경도 좌표 (도 단위).

    범위(-90~90, -180~180)는 검증하지 않습니다. 범위를 벗어난 좌표는
    단순히 반경 내 센터가 없는 결과로 이어집니다.
    """

    latitude: float
    longitude: float

    @classmethod
    def parse(cls, raw_lat: str, raw_lon: str) -> Coordinates:
        """쿼리 문자열 좌표를 파싱합니다.

        Raises:
            InvalidCoordinateError: 유한한 숫자로 해석되지 않는 값
        """
        return cls(latitude=_parse_finite(raw_lat), longitude=_parse_finite(raw_lon))


def _parse_finite(raw: str) -> float:
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise InvalidCoordinateError(raw)
    if not math.isfinite(value):
        raise InvalidCoordinateError(raw)
    return value
