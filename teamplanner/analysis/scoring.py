"""Score-based player selection driven by invitation history."""

import random
from dataclasses import dataclass
from itertools import groupby
from typing import Iterable, Optional

from ..models.event import DEFAULT_STRENGTH, Event
from ..models.player import Player
from .participation import PlayerStats, get_player_stats


# Scoring constants
BASE_WEIGHT = 100
PENALTY_PER_SELECTION = 30
ACCEPTANCE_BONUS = 0.5
ACCEPTANCE_THRESHOLD = 80


@dataclass
class PlayerWithStats:
    """A player together with their invitation history."""

    player: Player
    stats: PlayerStats

    @property
    def id(self) -> str:
        return self.player.id

    @property
    def level(self) -> int:
        return self.player.level


@dataclass
class TeamForSelection:
    """
    A team slot description for score-based selection.

    Attributes:
        id: Team identifier.
        strength: Competitive tier, 1 is strongest.
        max_players: Capacity of the team.
    """

    id: str
    strength: int = DEFAULT_STRENGTH
    max_players: int = 0


@dataclass
class _ScoredPlayer:
    entry: PlayerWithStats
    score: float
    tie_breaker: float


def calculate_selection_score(stats: PlayerStats) -> float:
    """
    Score a player for selection priority (higher is better).

    Each past selection costs PENALTY_PER_SELECTION. Acceptance rates at or
    above ACCEPTANCE_THRESHOLD percent earn the same maximum bonus.

    Args:
        stats: The player's invitation history.

    Returns:
        Selection score.
    """
    capped_rate = min(stats.acceptance_rate, ACCEPTANCE_THRESHOLD)
    return (BASE_WEIGHT - stats.selected_count * PENALTY_PER_SELECTION) + (
        capped_rate * ACCEPTANCE_BONUS
    )


def build_player_pool(
    event: Event,
    players: Iterable[Player],
    events: Iterable[Event],
) -> list[PlayerWithStats]:
    """
    Gather the accepted invitees of an event with their history.

    Args:
        event: The event being planned.
        players: Full roster.
        events: Event history. The planned event itself is not counted.

    Returns:
        PlayerWithStats for every accepted invitee still on the roster.
    """
    roster = {p.id: p for p in players}
    history = list(events)
    pool: list[PlayerWithStats] = []
    for player_id in dict.fromkeys(event.accepted_player_ids):
        player = roster.get(player_id)
        if player is None:
            continue
        stats = get_player_stats(player_id, history, exclude_event_id=event.id)
        pool.append(PlayerWithStats(player, stats))
    return pool


def select_players(
    players: list[PlayerWithStats],
    teams: list[TeamForSelection],
    rng: Optional[random.Random] = None,
) -> dict[str, str]:
    """
    Select and place players by fairness score and team tier.

    Args:
        players: Candidates with their history.
        teams: Teams to fill.
        rng: Random source for tie-breaking. Seed it for repeatable results.

    Returns:
        Dict mapping player_id to the team_id the player was placed on.
    """
    rng = rng or random.Random()
    result: dict[str, str] = {}

    scored = [
        _ScoredPlayer(entry, calculate_selection_score(entry.stats), rng.random())
        for entry in players
    ]
    scored.sort(key=lambda s: (s.score, s.tie_breaker), reverse=True)

    total_capacity = sum(max(team.max_players, 0) for team in teams)
    remaining = scored[:total_capacity]

    assigned: dict[str, list[str]] = {team.id: [] for team in teams}
    by_strength = sorted(teams, key=lambda t: t.strength or DEFAULT_STRENGTH)

    for _, group in groupby(by_strength, key=lambda t: t.strength or DEFAULT_STRENGTH):
        if not remaining:
            break
        group_teams = list(group)
        group_capacity = sum(max(team.max_players, 0) for team in group_teams)

        remaining.sort(
            key=lambda s: (s.entry.level, s.score, s.tie_breaker), reverse=True
        )
        for_group = remaining[:group_capacity]
        remaining = remaining[group_capacity:]

        # Round-robin within the tier, skipping full teams
        team_idx = 0
        for candidate in for_group:
            placed = False
            for _ in range(len(group_teams)):
                team = group_teams[team_idx]
                team_idx = (team_idx + 1) % len(group_teams)
                if len(assigned[team.id]) < team.max_players:
                    assigned[team.id].append(candidate.entry.id)
                    result[candidate.entry.id] = team.id
                    placed = True
                    break
            if not placed:
                break

    return result
