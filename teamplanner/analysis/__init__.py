"""Selection and balancing analysis for event teams."""

from .balance import (
    PARTICIPATION_WEIGHT,
    balance_penalty,
    population_variance,
    team_average_level,
)
from .participation import PlayerStats, count_participation, get_player_stats
from .selection import (
    MAX_BALANCE_PASSES,
    Candidate,
    SelectionSummary,
    TeamSelectionStats,
    auto_select_teams,
    fill_by_strength,
    has_varying_strengths,
    rank_candidates,
    refine_balance,
    snake_draft,
    summarize_selection,
)
from .scoring import (
    PlayerWithStats,
    TeamForSelection,
    build_player_pool,
    calculate_selection_score,
    select_players,
)

__all__ = [
    # Balance
    "PARTICIPATION_WEIGHT",
    "balance_penalty",
    "population_variance",
    "team_average_level",
    # Participation
    "PlayerStats",
    "count_participation",
    "get_player_stats",
    # Selection
    "MAX_BALANCE_PASSES",
    "Candidate",
    "SelectionSummary",
    "TeamSelectionStats",
    "auto_select_teams",
    "fill_by_strength",
    "has_varying_strengths",
    "rank_candidates",
    "refine_balance",
    "snake_draft",
    "summarize_selection",
    # Scoring
    "PlayerWithStats",
    "TeamForSelection",
    "build_player_pool",
    "calculate_selection_score",
    "select_players",
]
