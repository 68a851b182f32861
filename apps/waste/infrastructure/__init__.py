"""Waste Infrastructure Layer."""
