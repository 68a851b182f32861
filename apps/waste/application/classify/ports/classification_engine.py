"""Classification Engine Port."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from waste.application.classify.dto import Prediction
from waste.domain.enums import ModelState


class ClassificationEngine(ABC):
    """사전학습 분류 모델을 소유하는 포트.

    load()는 프로세스 시작 시 한 번, unload()는 종료 시 한 번 호출됩니다.
    predict()는 여러 요청에서 동시에 호출될 수 있습니다.
    """

    @property
    @abstractmethod
    def state(self) -> ModelState:
        """모델 수명주기 상태."""
        ...

    @property
    def ready(self) -> bool:
        """분류 요청을 받을 수 있는지 여부."""
        return self.state is ModelState.READY

    @abstractmethod
    async def load(self) -> None:
        """모델을 로드합니다.

        실패해도 예외를 올리지 않습니다. 상태가 FAILED로 남아 분류가 비활성화됩니다.
        """
        ...

    @abstractmethod
    def predict(self, tensor: np.ndarray) -> Prediction:
        """추론을 실행합니다.

        Raises:
            InferenceError: 모델 미로드, 추론 실패 또는 출력 차원 불일치
        """
        ...

    @abstractmethod
    def unload(self) -> None:
        """모델 핸들을 해제합니다."""
        ...
