"""HTTP Schemas."""

from waste.presentation.http.schemas.centers import CenterEntry
from waste.presentation.http.schemas.classify import ClassificationResponse
from waste.presentation.http.schemas.common import ErrorResponse, ReadinessResponse

__all__ = ["CenterEntry", "ClassificationResponse", "ErrorResponse", "ReadinessResponse"]
