"""Roster store interface and error types."""

from abc import ABC, abstractmethod
from typing import Optional

from ..models import Event, Player, Team


class StoreError(Exception):
    """Base exception for store errors."""

    pass


class NotFoundError(StoreError):
    """Raised when a requested record does not exist."""

    pass


class ApiError(StoreError):
    """Raised when a request to the remote store fails."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DataFormatError(StoreError):
    """Raised when stored data cannot be parsed."""

    pass


class DuplicateError(StoreError):
    """Raised when a record with the same ID already exists."""

    pass


class RosterStore(ABC):
    """
    Access to players and events.

    Implementations back the roster with a local file or a remote service.
    Lookups of a single record return None when it does not exist; updates
    and deletes of a missing record raise NotFoundError.
    """

    @abstractmethod
    def get_players(self) -> list[Player]:
        """Return all players."""

    @abstractmethod
    def get_player(self, player_id: str) -> Optional[Player]:
        """Return a player by ID."""

    @abstractmethod
    def add_player(self, player: Player) -> Player:
        """Store a new player."""

    @abstractmethod
    def update_player(self, player: Player) -> Player:
        """Replace an existing player."""

    @abstractmethod
    def delete_player(self, player_id: str) -> None:
        """Remove a player."""

    @abstractmethod
    def get_events(self) -> list[Event]:
        """Return all events."""

    @abstractmethod
    def get_event(self, event_id: str) -> Optional[Event]:
        """Return an event by ID."""

    @abstractmethod
    def add_event(self, event: Event) -> Event:
        """Store a new event."""

    @abstractmethod
    def update_event_teams(self, event_id: str, teams: list[Team]) -> Event:
        """
        Replace the team list of an event.

        Args:
            event_id: The event to update.
            teams: The complete new team list.

        Returns:
            The updated event.
        """

    @abstractmethod
    def delete_event(self, event_id: str) -> None:
        """Remove an event."""
