"""검증 관련 예외."""

from waste.application.common.exceptions.base import ApplicationError


class MissingImageError(ApplicationError):
    """이미지 파일이 없거나 비어 있음."""

    def __init__(self) -> None:
        super().__init__("Image is required")


class MissingCoordinatesError(ApplicationError):
    """lat/lon 쿼리 파라미터 누락."""

    def __init__(self) -> None:
        super().__init__("Lat/lon required")


class PayloadTooLargeError(ApplicationError):
    """업로드 크기 제한 초과."""

    def __init__(self, limit_bytes: int) -> None:
        self.limit_bytes = limit_bytes
        super().__init__(f"Image exceeds {limit_bytes // (1024 * 1024)} MB limit")


class ServiceUnavailableError(ApplicationError):
    """분류 모델이 로드되지 않음."""

    def __init__(self) -> None:
        super().__init__("Model not loaded")
