"""
Automatic team selection for an event.

Accepted invitees are ranked by how little they have played, the pool is cut
to the event's capacity, and the remaining players are spread over the teams:
stacked by tier when team strengths differ, snake-drafted and then refined by
pairwise swaps when they do not.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from ..models.event import DEFAULT_STRENGTH, Event, Team
from ..models.player import Player
from .balance import balance_penalty, team_average_level
from .participation import count_participation


logger = logging.getLogger(__name__)

# Upper bound on refinement passes over all team pairs
MAX_BALANCE_PASSES = 50


@dataclass
class Candidate:
    """
    A player eligible for selection.

    Attributes:
        player: The player record.
        events_participated: Past events the player was selected for.
    """

    player: Player
    events_participated: int = 0

    @property
    def id(self) -> str:
        return self.player.id

    @property
    def level(self) -> int:
        return self.player.level


@dataclass
class TeamSelectionStats:
    """Per-team figures of a selection summary."""

    team_id: str
    team_name: str
    player_count: int
    average_level: float


@dataclass
class SelectionSummary:
    """
    Overview of how far an event's selection has progressed.

    Attributes:
        accepted_count: Accepted invitations.
        total_selected_count: Players placed across all teams.
        total_capacity: Slots across all teams.
        unassigned_count: Accepted players not placed on a team.
        team_stats: Figures for each team, in event order.
    """

    accepted_count: int
    total_selected_count: int
    total_capacity: int
    unassigned_count: int
    team_stats: list[TeamSelectionStats] = field(default_factory=list)


def rank_candidates(
    event: Event,
    players: Iterable[Player],
    events: Iterable[Event],
) -> list[Candidate]:
    """
    Build the priority-ordered list of eligible players.

    Only accepted invitations whose player still exists are eligible. Players
    who have played fewer past events come first; among equals the higher
    level wins.

    Args:
        event: The event being planned.
        players: Full roster.
        events: Event history. The planned event itself is not counted.

    Returns:
        Candidates in selection priority order.
    """
    roster = {p.id: p for p in players}
    participation = count_participation(events, exclude_event_id=event.id)

    candidates: list[Candidate] = []
    seen: set[str] = set()
    for invitation in event.invitations:
        if not invitation.is_accepted or invitation.player_id in seen:
            continue
        seen.add(invitation.player_id)
        player = roster.get(invitation.player_id)
        if player is None:
            logger.debug("Skipping invitation for unknown player %s", invitation.player_id)
            continue
        candidates.append(Candidate(player, participation.get(player.id, 0)))

    candidates.sort(key=lambda c: (c.events_participated, -c.level))
    return candidates


def has_varying_strengths(teams: Sequence[Team]) -> bool:
    """Check if at least two teams sit in different strength tiers."""
    strengths = {team.strength or DEFAULT_STRENGTH for team in teams}
    return len(teams) > 1 and len(strengths) > 1


def fill_by_strength(
    assignments: list[list[str]],
    strengths: Sequence[int],
    pool: Sequence[str],
    capacity: int,
) -> None:
    """
    Fill teams one at a time, strongest tier first.

    Args:
        assignments: Player IDs per team, filled in place.
        strengths: Strength of each team, aligned with assignments.
        pool: Player IDs ordered by level, highest first.
        capacity: Maximum players per team.
    """
    remaining = iter(pool)
    order = sorted(range(len(assignments)), key=lambda i: strengths[i] or DEFAULT_STRENGTH)
    for index in order:
        team = assignments[index]
        while len(team) < capacity:
            player_id = next(remaining, None)
            if player_id is None:
                return
            team.append(player_id)


def _next_open_team(
    assignments: Sequence[Sequence[str]],
    start: int,
    capacity: int,
) -> int | None:
    """Find the first team after start (wrapping) with a free slot."""
    count = len(assignments)
    for offset in range(1, count):
        index = (start + offset) % count
        if len(assignments[index]) < capacity:
            return index
    return None


def snake_draft(
    assignments: list[list[str]],
    pool: Sequence[str],
    capacity: int,
) -> None:
    """
    Deal players to teams in a 0..N-1, N-1..0 pattern.

    A full team is skipped for the next one with room; dealing stops once no
    team has room.

    Args:
        assignments: Player IDs per team, filled in place.
        pool: Player IDs ordered by level, highest first.
        capacity: Maximum players per team.
    """
    if not assignments:
        return

    index = 0
    direction = 1
    last = len(assignments) - 1

    for player_id in pool:
        if len(assignments[index]) >= capacity:
            target = _next_open_team(assignments, index, capacity)
            if target is None:
                break
            assignments[target].append(player_id)
            continue

        assignments[index].append(player_id)

        index += direction
        if index > last:
            index = last
            direction = -1
        elif index < 0:
            index = 0
            direction = 1


def refine_balance(
    assignments: list[list[str]],
    levels: dict[str, float],
    max_passes: int = MAX_BALANCE_PASSES,
) -> int:
    """
    Swap players between teams while it lowers the balance penalty.

    Every pair of teams is visited in index order and every pair of slots in
    slot order. A swap is kept only if the penalty strictly drops. The search
    ends after a pass without improvement or after max_passes passes.

    The participation term of the penalty is evaluated with an empty map
    here, so only skill variance drives the swaps.

    Args:
        assignments: Player IDs per team, rearranged in place.
        levels: Dict mapping player_id to level.
        max_passes: Upper bound on passes.

    Returns:
        Number of passes run.
    """
    passes = 0
    improved = True

    while improved and passes < max_passes:
        improved = False
        passes += 1
        current = balance_penalty(assignments, levels, {})

        for i in range(len(assignments)):
            for j in range(i + 1, len(assignments)):
                first = assignments[i]
                second = assignments[j]
                for a in range(len(first)):
                    for b in range(len(second)):
                        first[a], second[b] = second[b], first[a]
                        penalty = balance_penalty(assignments, levels, {})
                        if penalty < current:
                            current = penalty
                            improved = True
                        else:
                            first[a], second[b] = second[b], first[a]

    return passes


def auto_select_teams(
    event: Event,
    players: Iterable[Player],
    events: Iterable[Event],
) -> list[Team]:
    """
    Assign accepted invitees of an event to its teams.

    The inputs are left untouched; the caller commits the returned teams.

    Args:
        event: The event being planned.
        players: Full roster, used to resolve levels.
        events: Event history, used to derive participation counts.

    Returns:
        Copies of the event's teams, in the same order, with freshly
        computed selected_players.
    """
    candidates = rank_candidates(event, players, events)

    if not candidates:
        # Clear any stale selection from an earlier run
        return [team.copy(selected_players=[]) for team in event.teams]

    capacity = max(event.max_players_per_team, 0)
    total_capacity = len(event.teams) * capacity
    if len(candidates) > total_capacity:
        logger.debug(
            "Event %s: %d candidates for %d slots, leaving %d out",
            event.id,
            len(candidates),
            total_capacity,
            len(candidates) - total_capacity,
        )

    pool = sorted(candidates[:total_capacity], key=lambda c: c.level, reverse=True)
    pool_ids = [c.id for c in pool]
    assignments: list[list[str]] = [[] for _ in event.teams]

    if has_varying_strengths(event.teams):
        fill_by_strength(
            assignments, [team.strength for team in event.teams], pool_ids, capacity
        )
    else:
        snake_draft(assignments, pool_ids, capacity)
        levels = {c.id: c.level for c in candidates}
        passes = refine_balance(assignments, levels)
        logger.debug("Event %s: balance refinement ran %d passes", event.id, passes)

    return [
        team.copy(selected_players=members)
        for team, members in zip(event.teams, assignments)
    ]


def summarize_selection(event: Event, players: Iterable[Player]) -> SelectionSummary:
    """
    Summarize the current selection of an event.

    Args:
        event: The event to describe.
        players: Full roster, used to resolve levels.

    Returns:
        SelectionSummary with overall counts and per-team averages.
    """
    levels = {p.id: p.level for p in players}
    accepted_count = len(event.accepted_player_ids)
    total_selected = sum(team.player_count for team in event.teams)

    team_stats = [
        TeamSelectionStats(
            team_id=team.id,
            team_name=team.name,
            player_count=team.player_count,
            average_level=round(team_average_level(team.selected_players, levels), 1),
        )
        for team in event.teams
    ]

    return SelectionSummary(
        accepted_count=accepted_count,
        total_selected_count=total_selected,
        total_capacity=event.total_capacity,
        unassigned_count=accepted_count - total_selected,
        team_stats=team_stats,
    )
