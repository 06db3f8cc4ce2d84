"""Roster store backed by the teams REST API."""

import logging
from typing import Any, Optional

import requests

from ..models import Event, Player, Team
from .base import ApiError, DataFormatError, NotFoundError, RosterStore


logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:3000/api"
DEFAULT_GROUP_ID = "1"


class ApiStore(RosterStore):
    """
    Reads and writes the roster of one group through the REST API.

    All endpoints live under /groups/{group_id}. Players are the members
    with the "player" role.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        group_id: str = DEFAULT_GROUP_ID,
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Initialize the store.

        Args:
            base_url: Root URL of the API, e.g. http://localhost:3000/api.
            group_id: Group whose roster is managed.
            timeout: Seconds to wait for a response.
            session: Session to reuse. A new one is created if omitted.
        """
        self.base_url = base_url.rstrip("/")
        self.group_id = group_id
        self.timeout = timeout

        # Session for connection reuse
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "User-Agent": "teamplanner/0.1",
                "Accept": "application/json",
                "Content-Type": "application/json",
            }
        )

    def _url(self, path: str) -> str:
        """Build the full URL for a group endpoint."""
        return f"{self.base_url}/groups/{self.group_id}{path}"

    def _request(
        self,
        method: str,
        path: str,
        payload: Any = None,
        params: Optional[dict[str, str]] = None,
    ) -> Any:
        """
        Send a request and decode the JSON response.

        Args:
            method: HTTP method.
            path: Endpoint path below the group.
            payload: JSON body, if any.
            params: Query string parameters.

        Returns:
            Decoded JSON, or None for an empty response.

        Raises:
            NotFoundError: If the API answers 404.
            ApiError: If the request fails otherwise.
            DataFormatError: If the response is not valid JSON.
        """
        url = self._url(path)
        try:
            response = self._session.request(
                method, url, json=payload, params=params, timeout=self.timeout
            )
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            raise ApiError(f"Request timed out: {method} {url}") from e
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            if status == 404:
                raise NotFoundError(f"Not found: {method} {url}") from e
            raise ApiError(f"HTTP error {status}: {method} {url}", status) from e
        except requests.exceptions.RequestException as e:
            raise ApiError(f"Request failed: {method} {url} - {e}") from e

        if response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise DataFormatError(f"Invalid JSON from {method} {url}") from e

    @staticmethod
    def _parse_player(data: Any) -> Player:
        try:
            return Player.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            raise DataFormatError(f"Invalid player record: {e}") from e

    @staticmethod
    def _parse_event(data: Any) -> Event:
        try:
            return Event.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            raise DataFormatError(f"Invalid event record: {e}") from e

    def get_players(self) -> list[Player]:
        data = self._request("GET", "/members", params={"role": "player"})
        return [self._parse_player(p) for p in data or []]

    def get_player(self, player_id: str) -> Optional[Player]:
        try:
            data = self._request("GET", f"/members/{player_id}")
        except NotFoundError:
            return None
        return self._parse_player(data)

    def add_player(self, player: Player) -> Player:
        payload = {**player.to_dict(), "role": "player"}
        return self._parse_player(self._request("POST", "/members", payload))

    def update_player(self, player: Player) -> Player:
        data = self._request("PUT", f"/members/{player.id}", player.to_dict())
        return self._parse_player(data)

    def delete_player(self, player_id: str) -> None:
        self._request("DELETE", f"/members/{player_id}")

    def get_events(self) -> list[Event]:
        data = self._request("GET", "/events")
        return [self._parse_event(e) for e in data or []]

    def get_event(self, event_id: str) -> Optional[Event]:
        try:
            data = self._request("GET", f"/events/{event_id}")
        except NotFoundError:
            return None
        return self._parse_event(data)

    def add_event(self, event: Event) -> Event:
        return self._parse_event(self._request("POST", "/events", event.to_dict()))

    def update_event_teams(self, event_id: str, teams: list[Team]) -> Event:
        payload = {"teams": [team.to_dict() for team in teams]}
        data = self._request("PUT", f"/events/{event_id}", payload)
        logger.info("Saved %d teams for event %s", len(teams), event_id)
        return self._parse_event(data)

    def delete_event(self, event_id: str) -> None:
        self._request("DELETE", f"/events/{event_id}")
