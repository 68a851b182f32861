"""Keras Classification Engine.

모델 핸들 수명주기:
- load(): 프로세스 시작 시 1회, 워커 스레드에서 로드 (서버 준비와 비동기)
- predict(): 읽기 전용, 동시 호출 허용
- unload(): 프로세스 종료 시 1회, 이후 재로드 없음
"""

from __future__ import annotations

import asyncio
import logging
import threading
from typing import Any, Callable

import numpy as np

from waste.application.classify.dto import Prediction
from waste.application.classify.ports import ClassificationEngine
from waste.application.common.exceptions import InferenceError, ModelConfigurationError
from waste.domain.enums import ModelState, WasteCategory
from waste.domain.services import select_top

logger = logging.getLogger(__name__)

ModelLoader = Callable[[str], Any]


def load_keras_model(model_path: str) -> Any:
    """Keras 모델 파일(.keras / .h5)을 로드합니다."""
    from tensorflow import keras

    return keras.models.load_model(model_path, compile=False)


def clear_keras_session() -> None:
    """Keras 전역 상태를 해제합니다."""
    from tensorflow import keras

    keras.backend.clear_session()


class KerasClassificationEngine(ClassificationEngine):
    """TensorFlow/Keras 기반 분류 엔진."""

    def __init__(
        self,
        model_path: str,
        num_classes: int = len(WasteCategory),
        loader: ModelLoader = load_keras_model,
        releaser: Callable[[], None] = clear_keras_session,
    ) -> None:
        self._model_path = model_path
        self._num_classes = num_classes
        self._loader = loader
        self._releaser = releaser
        self._model: Any = None
        self._state = ModelState.PENDING
        self._lock = threading.Lock()

    @property
    def state(self) -> ModelState:
        return self._state

    async def load(self) -> None:
        if self._state is not ModelState.PENDING:
            logger.debug("Model load skipped", extra={"state": self._state.value})
            return

        self._state = ModelState.LOADING
        logger.info("Loading model...", extra={"model_path": self._model_path})

        try:
            model = await asyncio.to_thread(self._loader, self._model_path)
            self._verify_output_dim(model)
        except asyncio.CancelledError:
            self._state = ModelState.UNLOADED
            raise
        except ModelConfigurationError as exc:
            self._state = ModelState.FAILED
            logger.error(f"Model configuration error: {exc.message}")
            return
        except Exception:
            self._state = ModelState.FAILED
            logger.exception("Model load error", extra={"model_path": self._model_path})
            return

        with self._lock:
            if self._state is not ModelState.LOADING:
                # 로드 중 unload() 호출됨
                return
            self._model = model
            self._state = ModelState.READY
        logger.info("Model loaded!", extra={"num_classes": self._num_classes})

    def predict(self, tensor: np.ndarray) -> Prediction:
        model = self._model
        if model is None:
            raise InferenceError("Model is not loaded")

        output = None
        try:
            output = model(tensor, training=False)
            scores = np.asarray(output, dtype=np.float32).reshape(-1)
        except Exception as exc:
            raise InferenceError(f"Model inference failed: {exc}") from exc
        finally:
            del output

        if scores.shape[0] != self._num_classes:
            raise InferenceError(
                f"Model returned {scores.shape[0]} scores, expected {self._num_classes}"
            )

        index, confidence = select_top(scores.tolist())
        return Prediction(index=index, confidence=confidence, scores=scores)

    def unload(self) -> None:
        with self._lock:
            had_model = self._model is not None
            self._model = None
            self._state = ModelState.UNLOADED
        if had_model:
            self._releaser()
            logger.info("Model unloaded")

    def _verify_output_dim(self, model: Any) -> None:
        output_shape = _output_shape(model)
        if isinstance(output_shape, list):
            raise ModelConfigurationError(
                f"Expected a single-output model, got {len(output_shape)} outputs"
            )
        if not output_shape or output_shape[-1] != self._num_classes:
            raise ModelConfigurationError(
                f"Model output shape {output_shape} does not match "
                f"{self._num_classes} waste categories"
            )


def _output_shape(model: Any) -> Any:
    output_shape = getattr(model, "output_shape", None)
    if output_shape is not None:
        return output_shape
    outputs = getattr(model, "outputs", None)
    if outputs and len(outputs) == 1:
        return tuple(outputs[0].shape)
    return None
