"""Image Preprocessor Port."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np


class ImagePreprocessor(ABC):
    """이미지 바이트를 모델 입력 텐서로 변환하는 포트.

    Infrastructure Layer에서 구현합니다.
    """

    @abstractmethod
    def preprocess(self, image_bytes: bytes) -> np.ndarray:
        """이미지를 [1, H, W, 3] float32 텐서(0.0 ~ 1.0)로 변환합니다.

        CPU 바운드 동기 함수입니다. 호출자가 워커 스레드에서 실행합니다.

        Raises:
            DecodeError: 디코딩할 수 없는 바이트
            UnsupportedFormatError: RGB로 정규화할 수 없는 이미지
        """
        ...
