"""Balance penalty used to compare team splits."""

from typing import Mapping, Optional, Sequence


# Weight of the participation term relative to skill variance
PARTICIPATION_WEIGHT = 0.5


def population_variance(values: Sequence[float]) -> float:
    """
    Calculate the population variance of a sequence.

    Args:
        values: Numbers to measure.

    Returns:
        Mean squared deviation from the mean. Returns 0 for an empty sequence.
    """
    if not values:
        return 0.0
    mean = sum(values) / len(values)
    return sum((v - mean) ** 2 for v in values) / len(values)


def team_average_level(
    player_ids: Sequence[str],
    levels: Mapping[str, float],
) -> float:
    """
    Average level of a team's players.

    Unknown player IDs are ignored. A team without known players averages 0.
    """
    known = [levels[pid] for pid in player_ids if pid in levels]
    if not known:
        return 0.0
    return sum(known) / len(known)


def balance_penalty(
    assignments: Sequence[Sequence[str]],
    levels: Mapping[str, float],
    participation: Optional[Mapping[str, int]] = None,
) -> float:
    """
    Score how unbalanced a team split is (lower is better).

    Args:
        assignments: Player IDs per team.
        levels: Dict mapping player_id to level.
        participation: Dict mapping player_id to past events played.

    Returns:
        Variance of team average levels plus the weighted variance of
        participation counts.
    """
    skill_variance = population_variance(
        [team_average_level(ids, levels) for ids in assignments]
    )
    participation_variance = population_variance(list((participation or {}).values()))
    return skill_variance + participation_variance * PARTICIPATION_WEIGHT
