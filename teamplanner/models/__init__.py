"""Data models for roster planning."""

from .player import Player
from .event import (
    DEFAULT_STRENGTH,
    MAX_STRENGTH,
    MIN_STRENGTH,
    Event,
    Invitation,
    InvitationStatus,
    SelectionIssue,
    ShirtAssignment,
    Team,
)

__all__ = [
    # Player
    "Player",
    # Event
    "DEFAULT_STRENGTH",
    "MAX_STRENGTH",
    "MIN_STRENGTH",
    "Event",
    "Invitation",
    "InvitationStatus",
    "SelectionIssue",
    "ShirtAssignment",
    "Team",
]
