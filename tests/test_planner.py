"""Tests for running auto-selection against a store."""

import tempfile
from datetime import date
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from teamplanner.models import Event, Invitation, InvitationStatus, Player, Team
from teamplanner.planner import auto_select_event, selection_report
from teamplanner.storage import ApiError, JsonFileStore, NotFoundError


def _seed_store(path: Path) -> JsonFileStore:
    store = JsonFileStore(path)
    for player_id, level in [("p1", 5), ("p2", 4), ("p3", 2), ("p4", 1), ("p5", 3)]:
        store.add_player(
            Player(id=player_id, first_name=player_id, last_name="X", birth_year=2012, level=level)
        )
    store.add_event(
        Event(
            id="e1",
            name="Tournament",
            date=date(2024, 6, 8),
            max_players_per_team=2,
            teams=[Team(id="t1", name="Blue"), Team(id="t2", name="Red")],
            invitations=[
                Invitation(f"i{n}", f"p{n}", InvitationStatus.ACCEPTED) for n in range(1, 5)
            ]
            + [Invitation("i5", "p5", InvitationStatus.DECLINED)],
        )
    )
    return store


class TestAutoSelectEvent:
    """Tests for auto_select_event."""

    def test_commits_selection(self) -> None:
        """The new teams are saved to the store."""
        with tempfile.TemporaryDirectory() as tmpdir:
            store = _seed_store(Path(tmpdir) / "roster.json")

            event = auto_select_event(store, "e1")

            saved = store.get_event("e1")
            assert saved.teams == event.teams
            assert saved.selected_player_ids == {"p1", "p2", "p3", "p4"}
            assert saved.validate() == []

    def test_dry_run_does_not_commit(self) -> None:
        """A dry run leaves the stored event untouched."""
        with tempfile.TemporaryDirectory() as tmpdir:
            store = _seed_store(Path(tmpdir) / "roster.json")

            event = auto_select_event(store, "e1", dry_run=True)

            assert event.selected_player_ids == {"p1", "p2", "p3", "p4"}
            assert store.get_event("e1").selected_player_ids == set()

    def test_unknown_event_raises(self) -> None:
        """Planning a missing event fails."""
        with tempfile.TemporaryDirectory() as tmpdir:
            store = _seed_store(Path(tmpdir) / "roster.json")
            with pytest.raises(NotFoundError):
                auto_select_event(store, "missing")

    def test_commit_failure_propagates(self) -> None:
        """A failed save is surfaced to the caller and not retried."""
        with tempfile.TemporaryDirectory() as tmpdir:
            seeded = _seed_store(Path(tmpdir) / "roster.json")
            store = MagicMock()
            store.get_event.return_value = seeded.get_event("e1")
            store.get_players.return_value = seeded.get_players()
            store.get_events.return_value = seeded.get_events()
            store.update_event_teams.side_effect = ApiError("HTTP error 500", 500)

            with pytest.raises(ApiError):
                auto_select_event(store, "e1")
            assert store.update_event_teams.call_count == 1


class TestSelectionReport:
    """Tests for selection_report."""

    def test_report_after_selection(self) -> None:
        """The report reflects the committed selection."""
        with tempfile.TemporaryDirectory() as tmpdir:
            store = _seed_store(Path(tmpdir) / "roster.json")
            auto_select_event(store, "e1")

            summary = selection_report(store, "e1")

            assert summary.accepted_count == 4
            assert summary.total_selected_count == 4
            assert summary.total_capacity == 4
            assert summary.unassigned_count == 0
            assert [s.average_level for s in summary.team_stats] == [3.0, 3.0]

    def test_unknown_event_raises(self) -> None:
        """Reporting on a missing event fails."""
        with tempfile.TemporaryDirectory() as tmpdir:
            store = _seed_store(Path(tmpdir) / "roster.json")
            with pytest.raises(NotFoundError):
                selection_report(store, "missing")
