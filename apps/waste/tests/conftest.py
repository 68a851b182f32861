"""Test fixtures for waste tests."""

from __future__ import annotations

import io
from typing import Any, Iterator

import numpy as np
import pytest
from fastapi.testclient import TestClient
from PIL import Image

from waste.application.classify import ClassificationEngine
from waste.application.classify.dto import Prediction
from waste.domain.enums import ModelState, WasteCategory
from waste.domain.services import select_top

NUM_CLASSES = len(WasteCategory)


class StubEngine(ClassificationEngine):
    """고정 점수를 반환하는 ClassificationEngine 구현체."""

    def __init__(
        self,
        scores: list[float] | None = None,
        state: ModelState = ModelState.READY,
        error: Exception | None = None,
    ) -> None:
        self.scores = scores if scores is not None else [0.0] * NUM_CLASSES
        self.error = error
        self._state = state
        self.load_calls = 0
        self.unload_calls = 0
        self.seen_shapes: list[tuple[int, ...]] = []

    @property
    def state(self) -> ModelState:
        return self._state

    async def load(self) -> None:
        self.load_calls += 1
        if self._state is ModelState.PENDING:
            self._state = ModelState.READY

    def predict(self, tensor: np.ndarray) -> Prediction:
        self.seen_shapes.append(tuple(tensor.shape))
        if self.error is not None:
            raise self.error
        index, confidence = select_top(self.scores)
        return Prediction(
            index=index,
            confidence=confidence,
            scores=np.asarray(self.scores, dtype=np.float32),
        )

    def unload(self) -> None:
        self.unload_calls += 1
        self._state = ModelState.UNLOADED


class FakeKerasModel:
    """Keras 모델 호출 규약(model(x, training=False))을 흉내내는 가짜 모델."""

    def __init__(self, scores: list[float], output_shape: Any = (None, NUM_CLASSES)) -> None:
        self.scores = np.asarray(scores, dtype=np.float32)
        self.output_shape = output_shape
        self.calls = 0

    def __call__(self, tensor: np.ndarray, training: bool = False) -> np.ndarray:
        self.calls += 1
        return self.scores.reshape(1, -1)


def one_hot(index: int, value: float = 0.9) -> list[float]:
    """index 위치만 value인 점수 벡터."""
    rest = (1.0 - value) / (NUM_CLASSES - 1)
    return [value if i == index else rest for i in range(NUM_CLASSES)]


def encode_image(image: Image.Image, fmt: str = "PNG") -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def png_bytes() -> bytes:
    """64x48 RGB PNG."""
    return encode_image(Image.new("RGB", (64, 48), (200, 40, 10)))


@pytest.fixture
def rgba_png_bytes() -> bytes:
    """알파 채널이 있는 PNG."""
    return encode_image(Image.new("RGBA", (32, 32), (10, 120, 250, 128)))


@pytest.fixture
def grayscale_png_bytes() -> bytes:
    """단일 채널(L) PNG."""
    return encode_image(Image.new("L", (20, 30), 77))


@pytest.fixture
def jpeg_bytes() -> bytes:
    """RGB JPEG."""
    return encode_image(Image.new("RGB", (400, 120), (0, 255, 0)), fmt="JPEG")


@pytest.fixture
def stub_engine() -> StubEngine:
    """준비 완료 상태의 StubEngine (Plastic Bottle 예측)."""
    return StubEngine(scores=one_hot(0, 0.87654))


@pytest.fixture
def client_factory() -> Iterator[Any]:
    """엔진을 교체한 TestClient 팩토리."""
    from waste.main import app
    from waste.setup.dependencies import get_engine

    def _factory(engine: ClassificationEngine) -> TestClient:
        app.dependency_overrides[get_engine] = lambda: engine
        return TestClient(app)

    yield _factory
    app.dependency_overrides.clear()


@pytest.fixture
def client(client_factory: Any, stub_engine: StubEngine) -> TestClient:
    """준비 완료 엔진을 사용하는 TestClient."""
    return client_factory(stub_engine)

