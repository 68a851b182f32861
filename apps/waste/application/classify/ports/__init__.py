"""Classify Ports."""

from waste.application.classify.ports.classification_engine import ClassificationEngine
from waste.application.classify.ports.image_preprocessor import ImagePreprocessor

__all__ = ["ClassificationEngine", "ImagePreprocessor"]
