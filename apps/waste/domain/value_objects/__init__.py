"""Domain Value Objects."""

from waste.domain.value_objects.classification_result import ClassificationResult
from waste.domain.value_objects.coordinates import Coordinates
from waste.domain.value_objects.disposal_tip import DISPOSAL_TIPS, disposal_tip_for

__all__ = ["ClassificationResult", "Coordinates", "DISPOSAL_TIPS", "disposal_tip_for"]
