"""Nearby Ports."""

from waste.application.nearby.ports.center_reader import CenterReader

__all__ = ["CenterReader"]
