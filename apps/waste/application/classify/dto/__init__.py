"""Classify DTOs."""

from waste.application.classify.dto.prediction import Prediction

__all__ = ["Prediction"]
