"""Inference - Keras 분류 모델."""

from waste.infrastructure.inference.keras_engine import KerasClassificationEngine

__all__ = ["KerasClassificationEngine"]
