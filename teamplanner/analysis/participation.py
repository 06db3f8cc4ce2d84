"""Participation history derived from past events."""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Optional

from ..models.event import Event


@dataclass
class PlayerStats:
    """
    Invitation and selection history of a single player.

    Attributes:
        invited_count: Events the player was invited to.
        accepted_count: Events where the player accepted the invitation.
        selected_count: Events where the player was placed on a team.
    """

    invited_count: int = 0
    accepted_count: int = 0
    selected_count: int = 0

    @property
    def acceptance_rate(self) -> float:
        """Accepted invitations as a percentage of all invitations."""
        if self.invited_count <= 0:
            return 0.0
        return self.accepted_count / self.invited_count * 100


def count_participation(
    events: Iterable[Event],
    exclude_event_id: Optional[str] = None,
) -> Counter:
    """
    Count the events each player has been selected for.

    Args:
        events: Event history.
        exclude_event_id: Event to leave out, usually the one being planned.

    Returns:
        Counter mapping player_id to the number of events played.
    """
    counts: Counter = Counter()
    for event in events:
        if exclude_event_id is not None and event.id == exclude_event_id:
            continue
        # A player listed twice in one event still played it once
        counts.update(event.selected_player_ids)
    return counts


def get_player_stats(
    player_id: str,
    events: Iterable[Event],
    exclude_event_id: Optional[str] = None,
) -> PlayerStats:
    """
    Collect invitation, acceptance and selection counts for a player.

    Args:
        player_id: The player to look up.
        events: Event history.
        exclude_event_id: Event to leave out of the tally.

    Returns:
        PlayerStats for the player.
    """
    stats = PlayerStats()
    for event in events:
        if exclude_event_id is not None and event.id == exclude_event_id:
            continue
        invitation = event.get_invitation(player_id)
        if invitation is not None:
            stats.invited_count += 1
            if invitation.is_accepted:
                stats.accepted_count += 1
        if player_id in event.selected_player_ids:
            stats.selected_count += 1
    return stats
