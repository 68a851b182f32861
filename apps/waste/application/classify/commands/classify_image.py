"""Classify Image Command.

업로드된 이미지를 분류하는 Command(지휘자)입니다.
전처리와 추론은 Port에 위임하고, 결과를 카테고리/배출 안내로 변환합니다.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from waste.application.classify.services import TensorScope
from waste.application.common.exceptions import (
    ClassificationError,
    ImageProcessingError,
    InferenceError,
    MissingImageError,
    ServiceUnavailableError,
)
from waste.domain.enums import WasteCategory
from waste.domain.value_objects import ClassificationResult, disposal_tip_for

if TYPE_CHECKING:
    from waste.application.classify.ports import ClassificationEngine, ImagePreprocessor

logger = logging.getLogger(__name__)


class ClassifyImageCommand:
    """이미지 분류 Command.

    Workflow:
        1. 모델 준비 상태 확인 (Port)
        2. 입력 검증
        3. 이미지 전처리 (Port, 워커 스레드)
        4. 추론 (Port, 워커 스레드)
        5. 카테고리 / 배출 안내 매핑
    """

    def __init__(
        self,
        preprocessor: "ImagePreprocessor",
        engine: "ClassificationEngine",
    ) -> None:
        """Initialize.

        Args:
            preprocessor: 이미지 전처리 Port
            engine: 분류 엔진 Port
        """
        self._preprocessor = preprocessor
        self._engine = engine

    async def execute(self, image_bytes: bytes | None) -> ClassificationResult:
        """이미지를 분류합니다.

        Args:
            image_bytes: 업로드된 이미지 원본 바이트

        Returns:
            분류 결과

        Raises:
            ServiceUnavailableError: 모델 미로드 (입력과 무관하게 우선)
            MissingImageError: 이미지 누락 또는 빈 파일
            ClassificationError: 전처리 또는 추론 실패
        """
        if not self._engine.ready:
            raise ServiceUnavailableError()
        if not image_bytes:
            raise MissingImageError()

        try:
            with TensorScope() as scope:
                result = await self._classify(scope, image_bytes)
        except (ImageProcessingError, InferenceError) as exc:
            logger.warning(
                "Classification failed",
                extra={"reason": exc.message, "bytes": len(image_bytes)},
                exc_info=True,
            )
            raise ClassificationError() from exc
        except Exception as exc:
            logger.exception("Unexpected classification error")
            raise ClassificationError() from exc

        logger.info(
            "Classification completed",
            extra={"category": result.category.value, "confidence": result.confidence},
        )
        return result

    async def _classify(self, scope: TensorScope, image_bytes: bytes) -> ClassificationResult:
        """전처리 → 추론 → 매핑. 텐서 참조는 이 프레임과 scope에만 남습니다."""
        tensor = scope.track(await asyncio.to_thread(self._preprocessor.preprocess, image_bytes))
        prediction = scope.track(await asyncio.to_thread(self._engine.predict, tensor))
        category = WasteCategory.from_index(prediction.index)
        return ClassificationResult(
            category=category,
            confidence=prediction.confidence,
            disposal=disposal_tip_for(category),
        )
