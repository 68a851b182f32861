"""Application Exceptions."""

from waste.application.common.exceptions.base import ApplicationError
from waste.application.common.exceptions.classification import (
    ClassificationError,
    DecodeError,
    ImageProcessingError,
    InferenceError,
    ModelConfigurationError,
    UnsupportedFormatError,
)
from waste.application.common.exceptions.validation import (
    MissingCoordinatesError,
    MissingImageError,
    PayloadTooLargeError,
    ServiceUnavailableError,
)

__all__ = [
    "ApplicationError",
    "ClassificationError",
    "DecodeError",
    "ImageProcessingError",
    "InferenceError",
    "ModelConfigurationError",
    "UnsupportedFormatError",
    "MissingCoordinatesError",
    "MissingImageError",
    "PayloadTooLargeError",
    "ServiceUnavailableError",
]
