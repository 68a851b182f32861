"""Location 도메인 예외."""

from waste.domain.exceptions.base import DomainError


class InvalidCoordinateError(DomainError):
    """유한한 숫자로 해석되지 않는 좌표."""

    def __init__(self, raw_value: object = None) -> None:
        self.raw_value = raw_value
        super().__init__("Invalid lat/lon")
