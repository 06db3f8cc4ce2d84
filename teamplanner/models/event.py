"""Event, team and invitation data models."""

from collections import Counter
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Optional


DEFAULT_STRENGTH = 2
MIN_STRENGTH = 1
MAX_STRENGTH = 3


class InvitationStatus(Enum):
    """Response state of an event invitation."""

    OPEN = "open"
    ACCEPTED = "accepted"
    DECLINED = "declined"


@dataclass
class Invitation:
    """An invitation of a player to an event."""

    id: str
    player_id: str
    status: InvitationStatus = InvitationStatus.OPEN

    @property
    def is_accepted(self) -> bool:
        """Check if the player accepted the invitation."""
        return self.status == InvitationStatus.ACCEPTED

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Invitation":
        return cls(
            id=str(data["id"]),
            player_id=str(data["playerId"]),
            status=InvitationStatus(data.get("status", InvitationStatus.OPEN.value)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "playerId": self.player_id, "status": self.status.value}


@dataclass
class ShirtAssignment:
    """Shirt number handed to a player of a team."""

    player_id: str
    shirt_number: int


@dataclass
class Team:
    """
    A team within an event.

    Attributes:
        id: Unique identifier for the team.
        name: Display name.
        strength: Competitive tier, 1 (highest) to 3 (lowest).
        start_time: Kick-off time in HH:MM format.
        selected_players: Ordered IDs of the players placed on this team.
        trainer_id: Optional trainer in charge.
        shirt_set_id: Optional shirt set used by the team.
        shirt_assignments: Individual shirt numbers by player.
    """

    id: str
    name: str
    strength: int = DEFAULT_STRENGTH
    start_time: str = ""
    selected_players: list[str] = field(default_factory=list)
    trainer_id: Optional[str] = None
    shirt_set_id: Optional[str] = None
    shirt_assignments: list[ShirtAssignment] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate team data."""
        if self.strength < MIN_STRENGTH or self.strength > MAX_STRENGTH:
            raise ValueError(
                f"strength must be between {MIN_STRENGTH} and {MAX_STRENGTH}"
            )

    @property
    def player_count(self) -> int:
        """Return number of selected players."""
        return len(self.selected_players)

    def copy(self, selected_players: Optional[list[str]] = None) -> "Team":
        """
        Return an independent copy of the team.

        Args:
            selected_players: Replacement membership. Defaults to a copy of
                the current membership.

        Returns:
            A new Team sharing no mutable state with this one.
        """
        return Team(
            id=self.id,
            name=self.name,
            strength=self.strength,
            start_time=self.start_time,
            selected_players=list(
                self.selected_players if selected_players is None else selected_players
            ),
            trainer_id=self.trainer_id,
            shirt_set_id=self.shirt_set_id,
            shirt_assignments=[
                ShirtAssignment(a.player_id, a.shirt_number)
                for a in self.shirt_assignments
            ],
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Team":
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            # A missing or zero strength means the default tier
            strength=int(data.get("strength") or DEFAULT_STRENGTH),
            start_time=data.get("startTime", ""),
            selected_players=[str(p) for p in data.get("selectedPlayers") or []],
            trainer_id=data.get("trainerId"),
            shirt_set_id=data.get("shirtSetId"),
            shirt_assignments=[
                ShirtAssignment(str(a["playerId"]), int(a["shirtNumber"]))
                for a in data.get("shirtAssignments") or []
            ],
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "strength": self.strength,
            "startTime": self.start_time,
            "selectedPlayers": list(self.selected_players),
        }
        if self.trainer_id is not None:
            data["trainerId"] = self.trainer_id
        if self.shirt_set_id is not None:
            data["shirtSetId"] = self.shirt_set_id
        if self.shirt_assignments:
            data["shirtAssignments"] = [
                {"playerId": a.player_id, "shirtNumber": a.shirt_number}
                for a in self.shirt_assignments
            ]
        return data


@dataclass
class SelectionIssue:
    """Represents a problem with the team membership of an event."""

    code: str
    message: str


@dataclass
class Event:
    """
    A scheduled event with its teams and invitations.

    Attributes:
        id: Unique identifier for the event.
        name: Display name.
        date: Day the event takes place.
        max_players_per_team: Capacity shared by every team of the event.
        teams: Teams taking part.
        invitations: Invitations sent for the event.
        location: Optional venue.
    """

    id: str
    name: str
    date: date
    max_players_per_team: int
    teams: list[Team] = field(default_factory=list)
    invitations: list[Invitation] = field(default_factory=list)
    location: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate event data."""
        if self.max_players_per_team < 0:
            raise ValueError("max_players_per_team cannot be negative")

    @property
    def total_capacity(self) -> int:
        """Number of player slots across all teams."""
        return len(self.teams) * self.max_players_per_team

    @property
    def accepted_player_ids(self) -> list[str]:
        """IDs of players with an accepted invitation, in invitation order."""
        return [inv.player_id for inv in self.invitations if inv.is_accepted]

    @property
    def selected_player_ids(self) -> set[str]:
        """IDs of every player placed on some team."""
        return {pid for team in self.teams for pid in team.selected_players}

    def get_team(self, team_id: str) -> Optional[Team]:
        """Get a team by ID."""
        return next((t for t in self.teams if t.id == team_id), None)

    def get_invitation(self, player_id: str) -> Optional[Invitation]:
        """Get the invitation for a player."""
        return next((i for i in self.invitations if i.player_id == player_id), None)

    def validate(self) -> list[SelectionIssue]:
        """
        Check team membership against the selection rules.

        Returns:
            List of issues. Empty list if the membership is consistent.
        """
        issues: list[SelectionIssue] = []

        placements = Counter(
            pid for team in self.teams for pid in team.selected_players
        )
        for player_id, count in placements.items():
            if count > 1:
                issues.append(
                    SelectionIssue(
                        code="DUPLICATE_PLAYER",
                        message=f"Player {player_id} is placed {count} times",
                    )
                )

        for team in self.teams:
            if team.player_count > self.max_players_per_team:
                issues.append(
                    SelectionIssue(
                        code="OVER_CAPACITY",
                        message=f"Team {team.name} has {team.player_count} players "
                        f"(max {self.max_players_per_team})",
                    )
                )

        accepted = set(self.accepted_player_ids)
        for player_id in placements:
            if player_id not in accepted:
                issues.append(
                    SelectionIssue(
                        code="NOT_ACCEPTED",
                        message=f"Player {player_id} has no accepted invitation",
                    )
                )

        return issues

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Event":
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            date=date.fromisoformat(str(data["date"])[:10]),
            max_players_per_team=int(data.get("maxPlayersPerTeam") or 0),
            teams=[Team.from_dict(t) for t in data.get("teams") or []],
            invitations=[Invitation.from_dict(i) for i in data.get("invitations") or []],
            location=data.get("location"),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "date": self.date.isoformat(),
            "maxPlayersPerTeam": self.max_players_per_team,
            "teams": [t.to_dict() for t in self.teams],
            "invitations": [i.to_dict() for i in self.invitations],
        }
        if self.location is not None:
            data["location"] = self.location
        return data
