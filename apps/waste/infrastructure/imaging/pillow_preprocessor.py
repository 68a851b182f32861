"""Pillow Image Preprocessor.

임의 포맷/크기의 이미지를 [1, 300, 300, 3] float32 텐서로 변환합니다.
- 크기: 종횡비를 유지하지 않고 정확히 size x size로 리사이즈
- 리샘플링: BILINEAR 고정 (동일 입력 → 동일 텐서)
- 채널: RGB로 변환, 알파 채널은 버림
- 값: [0, 255] → [0.0, 1.0]
"""

from __future__ import annotations

import io
import logging

import numpy as np
from PIL import Image, UnidentifiedImageError

from waste.application.classify.ports import ImagePreprocessor
from waste.application.common.exceptions import DecodeError, UnsupportedFormatError

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_SIZE = 300
RESAMPLE_FILTER = Image.Resampling.BILINEAR
RGB_BANDS = ("R", "G", "B")


class PillowImagePreprocessor(ImagePreprocessor):
    """Pillow + NumPy 전처리 구현체."""

    def __init__(self, size: int = DEFAULT_IMAGE_SIZE) -> None:
        self._size = size

    @property
    def size(self) -> int:
        return self._size

    def preprocess(self, image_bytes: bytes) -> np.ndarray:
        image = self._decode(image_bytes)
        try:
            rgb = self._to_rgb(image)
            resized = rgb.resize((self._size, self._size), resample=RESAMPLE_FILTER)
            pixels = np.asarray(resized, dtype=np.float32) / 255.0
        finally:
            image.close()

        return np.expand_dims(pixels, axis=0)

    @staticmethod
    def _decode(image_bytes: bytes) -> Image.Image:
        if not image_bytes:
            raise DecodeError("Empty image payload")
        try:
            image = Image.open(io.BytesIO(image_bytes))
            image.load()
        except Image.DecompressionBombError as exc:
            raise DecodeError("Image dimensions exceed decoder limit") from exc
        except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as exc:
            raise DecodeError(f"Image could not be decoded: {exc}") from exc
        logger.debug(
            "Image decoded",
            extra={"format": image.format, "mode": image.mode, "size": image.size},
        )
        return image

    @staticmethod
    def _to_rgb(image: Image.Image) -> Image.Image:
        if image.mode == "RGB":
            return image
        try:
            converted = image.convert("RGB")
        except (ValueError, OSError) as exc:
            raise UnsupportedFormatError(image.mode) from exc
        if converted.getbands() != RGB_BANDS:
            raise UnsupportedFormatError(image.mode)
        return converted
