"""Tests for the balance penalty."""

import pytest

from teamplanner.analysis import (
    PARTICIPATION_WEIGHT,
    balance_penalty,
    population_variance,
    team_average_level,
)


class TestPopulationVariance:
    """Tests for population_variance."""

    def test_empty_is_zero(self) -> None:
        """An empty collection has zero variance rather than NaN."""
        assert population_variance([]) == 0.0

    def test_constant_values(self) -> None:
        """Identical values have zero variance."""
        assert population_variance([3, 3, 3]) == 0.0

    def test_divides_by_count(self) -> None:
        """Variance is the mean squared deviation."""
        assert population_variance([1, 3]) == 1.0
        assert population_variance([2, 4, 6]) == pytest.approx(8 / 3)


class TestTeamAverageLevel:
    """Tests for team_average_level."""

    def test_average(self) -> None:
        """Mean of player levels."""
        assert team_average_level(["a", "b"], {"a": 5, "b": 2}) == 3.5

    def test_empty_team(self) -> None:
        """A team without players averages zero."""
        assert team_average_level([], {"a": 5}) == 0.0

    def test_unknown_players_ignored(self) -> None:
        """Players without a level are skipped."""
        assert team_average_level(["a", "ghost"], {"a": 4}) == 4.0
        assert team_average_level(["ghost"], {"a": 4}) == 0.0


class TestBalancePenalty:
    """Tests for balance_penalty."""

    @pytest.fixture
    def levels(self) -> dict[str, int]:
        """Levels for four players."""
        return {"a": 5, "b": 4, "c": 2, "d": 1}

    def test_balanced_teams_score_zero(self, levels: dict[str, int]) -> None:
        """Equal team averages give no penalty."""
        assert balance_penalty([["a", "d"], ["b", "c"]], levels) == 0.0

    def test_skill_variance(self, levels: dict[str, int]) -> None:
        """Penalty is the variance of team averages."""
        # Averages 4.5 and 1.5
        assert balance_penalty([["a", "b"], ["c", "d"]], levels) == 2.25

    def test_empty_team_counts_as_zero(self, levels: dict[str, int]) -> None:
        """An empty team pulls the spread towards zero."""
        # Averages 3.0 and 0.0
        assert balance_penalty([["a", "d"], []], levels) == 2.25

    def test_participation_term(self, levels: dict[str, int]) -> None:
        """Participation variance adds with half weight."""
        penalty = balance_penalty([["a", "d"], ["b", "c"]], levels, {"a": 0, "b": 2})
        assert PARTICIPATION_WEIGHT == 0.5
        assert penalty == 0.5

    def test_empty_participation_is_inert(self, levels: dict[str, int]) -> None:
        """An empty participation map contributes nothing."""
        assignments = [["a", "b"], ["c", "d"]]
        assert balance_penalty(assignments, levels, {}) == balance_penalty(
            assignments, levels
        )

    def test_no_teams(self, levels: dict[str, int]) -> None:
        """No teams, no penalty."""
        assert balance_penalty([], levels) == 0.0
