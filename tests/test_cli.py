"""Tests for the command line interface."""

import json
from pathlib import Path

import pytest

from teamplanner.analysis import SelectionSummary, TeamSelectionStats
from teamplanner.cli import build_parser, format_summary, main


ROSTER = {
    "players": [
        {"id": "p1", "firstName": "Ana", "lastName": "Ruiz", "birthYear": 2012, "level": 5},
        {"id": "p2", "firstName": "Ben", "lastName": "Ott", "birthYear": 2012, "level": 4},
        {"id": "p3", "firstName": "Cleo", "lastName": "Lund", "birthYear": 2012, "level": 2},
        {"id": "p4", "firstName": "Dan", "lastName": "Moe", "birthYear": 2012, "level": 1},
    ],
    "events": [
        {
            "id": "e1",
            "name": "Cup",
            "date": "2024-06-08",
            "maxPlayersPerTeam": 2,
            "teams": [
                {"id": "t1", "name": "Blue", "strength": 2, "selectedPlayers": []},
                {"id": "t2", "name": "Red", "strength": 2, "selectedPlayers": []},
            ],
            "invitations": [
                {"id": f"i{n}", "playerId": f"p{n}", "status": "accepted"}
                for n in range(1, 5)
            ],
        }
    ],
}


@pytest.fixture
def roster_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Write a roster document and isolate the environment."""
    for name in (
        "TEAMPLANNER_BACKEND",
        "TEAMPLANNER_DATA_FILE",
        "TEAMPLANNER_API_URL",
        "TEAMPLANNER_GROUP_ID",
        "TEAMPLANNER_API_TIMEOUT",
        "TEAMPLANNER_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    path = tmp_path / "roster.json"
    path.write_text(json.dumps(ROSTER))
    return path


class TestParser:
    """Tests for build_parser."""

    def test_requires_command(self) -> None:
        """A subcommand is mandatory."""
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_auto_select_options(self) -> None:
        """Global options precede the subcommand."""
        args = build_parser().parse_args(
            ["--backend", "api", "--group-id", "4", "auto-select", "e1", "--dry-run"]
        )
        assert args.backend == "api"
        assert args.group_id == "4"
        assert args.command == "auto-select"
        assert args.event_id == "e1"
        assert args.dry_run is True


class TestFormatSummary:
    """Tests for format_summary."""

    def test_lines(self) -> None:
        """One header line plus one line per team."""
        summary = SelectionSummary(
            accepted_count=5,
            total_selected_count=4,
            total_capacity=4,
            unassigned_count=1,
            team_stats=[
                TeamSelectionStats("t1", "Blue", 2, 3.5),
                TeamSelectionStats("t2", "Red", 2, 2.0),
            ],
        )
        assert format_summary(summary).splitlines() == [
            "Selected 4/4 (5 accepted, 1 unassigned)",
            "  Blue: 2 players, avg level 3.5",
            "  Red: 2 players, avg level 2.0",
        ]


class TestMain:
    """Tests for main."""

    def test_summary_of_empty_selection(
        self, roster_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """An unplanned event shows no selected players."""
        code = main(["--backend", "local", "--data-file", str(roster_file), "summary", "e1"])

        assert code == 0
        out = capsys.readouterr().out
        assert "Selected 0/4 (4 accepted, 4 unassigned)" in out

    def test_auto_select_saves(
        self, roster_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Auto-selection writes the teams to the roster file."""
        code = main(["--data-file", str(roster_file), "auto-select", "e1"])

        assert code == 0
        assert "Selected 4/4 (4 accepted, 0 unassigned)" in capsys.readouterr().out
        saved = json.loads(roster_file.read_text())
        selected = [p for team in saved["events"][0]["teams"] for p in team["selectedPlayers"]]
        assert sorted(selected) == ["p1", "p2", "p3", "p4"]

    def test_dry_run_leaves_file(
        self, roster_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """A dry run prints the selection without saving it."""
        before = roster_file.read_text()

        code = main(["--data-file", str(roster_file), "auto-select", "e1", "--dry-run"])

        assert code == 0
        out = capsys.readouterr().out
        assert "Blue: 2 players, avg level 3.0" in out
        assert "Red: 2 players, avg level 3.0" in out
        assert roster_file.read_text() == before

    def test_unknown_event_fails(self, roster_file: Path) -> None:
        """A missing event exits with status 1."""
        assert main(["--data-file", str(roster_file), "summary", "nope"]) == 1

    def test_corrupt_file_fails(self, roster_file: Path) -> None:
        """Unreadable roster data exits with status 1."""
        roster_file.write_text("{broken")
        assert main(["--data-file", str(roster_file), "auto-select", "e1"]) == 1

    def test_non_utf8_file_fails(self, roster_file: Path) -> None:
        """A roster file that is not UTF-8 exits with status 1."""
        roster_file.write_bytes(b'{"players": [], "events": ["\xff"]}')
        assert main(["--data-file", str(roster_file), "summary", "e1"]) == 1
