"""도메인 예외."""

from waste.domain.exceptions.base import DomainError
from waste.domain.exceptions.location import InvalidCoordinateError

__all__ = [
    "DomainError",
    "InvalidCoordinateError",
]
