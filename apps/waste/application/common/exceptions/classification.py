"""분류 파이프라인 예외.

ImageProcessingError / InferenceError는 내부 원인이며, 클라이언트에는
ClassificationError의 일반 메시지만 노출됩니다.
"""

from waste.application.common.exceptions.base import ApplicationError


class ImageProcessingError(ApplicationError):
    """이미지 전처리 실패."""


class DecodeError(ImageProcessingError):
    """디코딩할 수 없는 이미지 바이트."""

    def __init__(self, reason: str = "Image could not be decoded") -> None:
        super().__init__(reason)


class UnsupportedFormatError(ImageProcessingError):
    """3채널(RGB)로 정규화할 수 없는 이미지 모드."""

    def __init__(self, mode: str) -> None:
        self.mode = mode
        super().__init__(f"Unsupported image mode: {mode}")


class InferenceError(ApplicationError):
    """모델 추론 실패."""


class ClassificationError(ApplicationError):
    """분류 요청 실패 (원인은 __cause__에 보존)."""

    def __init__(self) -> None:
        super().__init__("Error classifying image")


class ModelConfigurationError(ApplicationError):
    """시작 시 모델 로드/검증 실패. 프로세스는 유지되며 분류만 비활성화됩니다."""
