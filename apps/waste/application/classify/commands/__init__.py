"""Classify Commands."""

from waste.application.classify.commands.classify_image import ClassifyImageCommand

__all__ = ["ClassifyImageCommand"]
