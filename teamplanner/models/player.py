"""Player data model."""

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional


@dataclass
class Player:
    """
    Represents a rostered player.

    Attributes:
        id: Unique identifier for the player.
        first_name: Player's first name.
        last_name: Player's last name.
        birth_year: Year of birth.
        level: Skill rating, nominally 1-5, higher is stronger.
        birth_date: Optional full date of birth.
    """

    id: str
    first_name: str
    last_name: str
    birth_year: int
    level: int
    birth_date: Optional[date] = None

    def __post_init__(self) -> None:
        """Validate player data after initialization."""
        if self.level < 0:
            raise ValueError("level cannot be negative")

    @property
    def full_name(self) -> str:
        """Return first and last name joined."""
        return f"{self.first_name} {self.last_name}".strip()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Player":
        """Build a player from its camelCase JSON representation."""
        birth_date = data.get("birthDate")
        return cls(
            id=str(data["id"]),
            first_name=data.get("firstName", ""),
            last_name=data.get("lastName", ""),
            birth_year=int(data.get("birthYear") or 0),
            level=int(data["level"]),
            birth_date=date.fromisoformat(birth_date[:10]) if birth_date else None,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase JSON representation."""
        data: dict[str, Any] = {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "birthYear": self.birth_year,
            "level": self.level,
        }
        if self.birth_date is not None:
            data["birthDate"] = self.birth_date.isoformat()
        return data
