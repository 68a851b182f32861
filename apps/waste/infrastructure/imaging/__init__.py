"""Imaging - Pillow 기반 이미지 전처리."""

from waste.infrastructure.imaging.pillow_preprocessor import (
    DEFAULT_IMAGE_SIZE,
    RESAMPLE_FILTER,
    PillowImagePreprocessor,
)

__all__ = ["DEFAULT_IMAGE_SIZE", "RESAMPLE_FILTER", "PillowImagePreprocessor"]
