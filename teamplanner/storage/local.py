"""Roster store backed by a local JSON file."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Optional

from ..models import Event, Player, Team
from .base import DataFormatError, DuplicateError, NotFoundError, RosterStore, StoreError


logger = logging.getLogger(__name__)

PLAYERS_KEY = "players"
EVENTS_KEY = "events"


class JsonFileStore(RosterStore):
    """
    Keeps players and events in a single JSON document.

    The document has the shape {"players": [...], "events": [...]}. A missing
    file reads as an empty roster and is created on first write.
    """

    def __init__(self, path: Path) -> None:
        """
        Initialize the store.

        Args:
            path: Location of the JSON document.
        """
        self.path = Path(path)

    def _load(self) -> dict[str, list[dict[str, Any]]]:
        """Read the raw document."""
        if not self.path.exists():
            return {PLAYERS_KEY: [], EVENTS_KEY: []}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise StoreError(f"Cannot read {self.path}: {e}") from e
        except ValueError as e:
            # Covers both malformed JSON and bytes that are not UTF-8
            raise DataFormatError(f"Invalid JSON in {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise DataFormatError(f"Expected an object at the top of {self.path}")
        data.setdefault(PLAYERS_KEY, [])
        data.setdefault(EVENTS_KEY, [])
        return data

    def _save(self, data: dict[str, list[dict[str, Any]]]) -> None:
        """Write the raw document, replacing the old file atomically."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        except OSError as e:
            raise StoreError(f"Cannot write {self.path}: {e}") from e
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_name, self.path)
        except OSError as e:
            Path(tmp_name).unlink(missing_ok=True)
            raise StoreError(f"Cannot write {self.path}: {e}") from e

    def _parse_players(self, data: dict[str, Any]) -> list[Player]:
        try:
            return [Player.from_dict(p) for p in data[PLAYERS_KEY]]
        except (KeyError, TypeError, ValueError) as e:
            raise DataFormatError(f"Invalid player record in {self.path}: {e}") from e

    def _parse_events(self, data: dict[str, Any]) -> list[Event]:
        try:
            return [Event.from_dict(e) for e in data[EVENTS_KEY]]
        except (KeyError, TypeError, ValueError) as e:
            raise DataFormatError(f"Invalid event record in {self.path}: {e}") from e

    @staticmethod
    def _index_of(records: list[dict[str, Any]], record_id: str) -> int:
        for index, record in enumerate(records):
            if str(record.get("id")) == record_id:
                return index
        return -1

    def get_players(self) -> list[Player]:
        return self._parse_players(self._load())

    def get_player(self, player_id: str) -> Optional[Player]:
        return next((p for p in self.get_players() if p.id == player_id), None)

    def add_player(self, player: Player) -> Player:
        data = self._load()
        if self._index_of(data[PLAYERS_KEY], player.id) != -1:
            raise DuplicateError(f"Player {player.id} already exists")
        data[PLAYERS_KEY].append(player.to_dict())
        self._save(data)
        return player

    def update_player(self, player: Player) -> Player:
        data = self._load()
        index = self._index_of(data[PLAYERS_KEY], player.id)
        if index == -1:
            raise NotFoundError(f"Player {player.id} not found")
        data[PLAYERS_KEY][index] = player.to_dict()
        self._save(data)
        return player

    def delete_player(self, player_id: str) -> None:
        data = self._load()
        index = self._index_of(data[PLAYERS_KEY], player_id)
        if index == -1:
            raise NotFoundError(f"Player {player_id} not found")
        del data[PLAYERS_KEY][index]
        self._save(data)

    def get_events(self) -> list[Event]:
        return self._parse_events(self._load())

    def get_event(self, event_id: str) -> Optional[Event]:
        return next((e for e in self.get_events() if e.id == event_id), None)

    def add_event(self, event: Event) -> Event:
        data = self._load()
        if self._index_of(data[EVENTS_KEY], event.id) != -1:
            raise DuplicateError(f"Event {event.id} already exists")
        data[EVENTS_KEY].append(event.to_dict())
        self._save(data)
        return event

    def update_event_teams(self, event_id: str, teams: list[Team]) -> Event:
        data = self._load()
        index = self._index_of(data[EVENTS_KEY], event_id)
        if index == -1:
            raise NotFoundError(f"Event {event_id} not found")
        record = dict(data[EVENTS_KEY][index])
        record["teams"] = [team.to_dict() for team in teams]
        try:
            event = Event.from_dict(record)
        except (KeyError, TypeError, ValueError) as e:
            raise DataFormatError(f"Invalid event record in {self.path}: {e}") from e
        data[EVENTS_KEY][index] = record
        self._save(data)
        logger.info("Saved %d teams for event %s", len(teams), event_id)
        return event

    def delete_event(self, event_id: str) -> None:
        data = self._load()
        index = self._index_of(data[EVENTS_KEY], event_id)
        if index == -1:
            raise NotFoundError(f"Event {event_id} not found")
        del data[EVENTS_KEY][index]
        self._save(data)
