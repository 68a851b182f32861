"""Classify Application Layer."""

from waste.application.classify.commands import ClassifyImageCommand
from waste.application.classify.dto import Prediction
from waste.application.classify.ports import ClassificationEngine, ImagePreprocessor
from waste.application.classify.services import TensorScope

__all__ = [
    "ClassifyImageCommand",
    "Prediction",
    "ClassificationEngine",
    "ImagePreprocessor",
    "TensorScope",
]
