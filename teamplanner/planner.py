"""Runs team auto-selection against a roster store."""

import logging

from .analysis import SelectionSummary, auto_select_teams, summarize_selection
from .models import Event
from .storage import NotFoundError, RosterStore


logger = logging.getLogger(__name__)


def _load_event(store: RosterStore, event_id: str) -> Event:
    event = store.get_event(event_id)
    if event is None:
        raise NotFoundError(f"Event {event_id} not found")
    return event


def auto_select_event(store: RosterStore, event_id: str, dry_run: bool = False) -> Event:
    """
    Auto-select the teams of an event and commit the result.

    Args:
        store: Source of the event, roster and history.
        event_id: The event to plan.
        dry_run: Compute the selection without saving it.

    Returns:
        The event with its new team list.

    Raises:
        NotFoundError: If the event does not exist.
        StoreError: If loading or saving fails. Failures are not retried.
    """
    event = _load_event(store, event_id)
    teams = auto_select_teams(event, store.get_players(), store.get_events())

    placed = sum(team.player_count for team in teams)
    logger.info(
        "Event %s: placed %d of %d accepted players on %d teams",
        event_id,
        placed,
        len(event.accepted_player_ids),
        len(teams),
    )

    if dry_run:
        return Event(
            id=event.id,
            name=event.name,
            date=event.date,
            max_players_per_team=event.max_players_per_team,
            teams=teams,
            invitations=list(event.invitations),
            location=event.location,
        )
    return store.update_event_teams(event_id, teams)


def selection_report(store: RosterStore, event_id: str) -> SelectionSummary:
    """
    Summarize the current selection of an event.

    Raises:
        NotFoundError: If the event does not exist.
    """
    event = _load_event(store, event_id)
    return summarize_selection(event, store.get_players())
