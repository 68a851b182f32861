"""Classify Services."""

from waste.application.classify.services.tensor_scope import TensorScope

__all__ = ["TensorScope"]
