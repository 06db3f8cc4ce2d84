"""Roster planning and fair team auto-selection."""

__version__ = "0.1.0"
